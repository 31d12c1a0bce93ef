"""
Implementation SQLModel du repository Actor.

Implemente l'interface IActorRepository pour la persistance des acteurs
via SQLModel. Chaque operation ouvre sa propre portee de session sur la
Database injectee.
"""

from typing import Optional

from loguru import logger
from sqlmodel import select

from cinecast.config import Settings
from cinecast.core.entities.catalog import DEFAULT_ROLE, Actor, ActorList
from cinecast.core.errors import NotFoundError
from cinecast.core.ports.repositories import IActorRepository
from cinecast.core.value_objects.query import ListQuery
from cinecast.infrastructure.persistence.cast_sync import CastSynchronizer, actor_to_entity
from cinecast.infrastructure.persistence.database import Database
from cinecast.infrastructure.persistence.models import ActorModel, utcnow
from cinecast.infrastructure.persistence.query import QueryTranslator, apply_page, count_rows

ACTOR_COLUMNS = QueryTranslator.for_table(ActorModel.__table__)


class SQLModelActorRepository(IActorRepository):
    """
    Repository SQLModel pour les acteurs.

    Implemente IActorRepository avec conversion entre l'entite Actor
    (domaine) et ActorModel (persistance).
    """

    def __init__(
        self,
        database: Database,
        settings: Optional[Settings] = None,
        cast_synchronizer: Optional[CastSynchronizer] = None,
    ) -> None:
        """
        Initialise le repository.

        Args :
            database : Acces a la base (portees de session et de transaction)
            settings : Configuration (taille de page maximale) ; celle de database par defaut
            cast_synchronizer : Synchroniseur utilise pour delier un acteur supprime
        """
        self._database = database
        self._settings = settings or database.settings
        self._cast = cast_synchronizer or CastSynchronizer()

    def _to_model(self, entity: Actor) -> ActorModel:
        """Convertit une entite domaine en modele DB (sans ID ni horodatage)."""
        return ActorModel(
            first_name=entity.first_name,
            last_name=entity.last_name,
            role=entity.role or DEFAULT_ROLE,
        )

    def create(self, actor: Actor) -> Actor:
        """Cree un acteur. Leve StorageError si la base rejette la ligne."""
        with self._database.transaction("actor.create", multi_statement=False) as session:
            model = self._to_model(actor)
            session.add(model)
            session.flush()
            session.refresh(model)
            created = actor_to_entity(model)
        logger.info(f"Acteur cree: {created.full_name} (ID {created.id})")
        return created

    def get_by_id(self, actor_id: int) -> Actor:
        """Recupere un acteur par son ID."""
        with self._database.session("actor.get_by_id") as session:
            model = session.get(ActorModel, actor_id)
            if model is None:
                raise NotFoundError("actor", actor_id)
            return actor_to_entity(model)

    def update(self, actor: Actor) -> Actor:
        """
        Ecrase toute la ligne de l'acteur.

        L'identite vient de l'appelant (actor.id). Les champs non fournis
        reprennent leur valeur par defaut : rien n'est conserve de l'ancienne ligne.
        """
        if actor.id is None:
            raise NotFoundError("actor", None)
        with self._database.transaction("actor.update", multi_statement=False) as session:
            model = session.get(ActorModel, actor.id)
            if model is None:
                raise NotFoundError("actor", actor.id)
            model.first_name = actor.first_name
            model.last_name = actor.last_name
            model.role = actor.role or DEFAULT_ROLE
            model.updated_at = utcnow()
            session.add(model)
            session.flush()
            session.refresh(model)
            updated = actor_to_entity(model)
        logger.info(f"Acteur mis a jour: ID {updated.id}")
        return updated

    def delete(self, actor_id: int) -> bool:
        """
        Supprime un acteur et ses liens de distribution.

        Idempotent : un ID absent n'est pas une erreur (retourne False).
        """
        with self._database.transaction("actor.delete") as session:
            model = session.get(ActorModel, actor_id)
            if model is None:
                logger.debug(f"Suppression de l'acteur {actor_id}: deja absent")
                return False
            unlinked = self._cast.clear_actor(session, actor_id)
            session.delete(model)
        logger.info(f"Acteur supprime: ID {actor_id} ({unlinked} lien(s) de distribution retire(s))")
        return True

    def get_list(self, query: ListQuery) -> ActorList:
        """Liste filtree, triee et paginee des acteurs."""
        statement = ACTOR_COLUMNS.apply_filters(select(ActorModel), query.filters)
        with self._database.session("actor.get_list") as session:
            total = count_rows(session, statement)
            statement = ACTOR_COLUMNS.apply_ordering(statement, query.order_by)
            statement, limit = apply_page(
                statement,
                query.page,
                query.limit,
                max_limit=self._settings.max_page_size,
                default_limit=self._settings.default_page_size,
            )
            models = session.exec(statement).all()
            items = [actor_to_entity(model) for model in models]
        logger.debug(f"{len(items)}/{total} acteurs (page {query.page}, taille {limit})")
        return ActorList(items=items, total=total)
