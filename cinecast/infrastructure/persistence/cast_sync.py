"""
Synchronisation de la distribution d'un film.

Le CastSynchronizer est le seul composant qui ecrit dans movie_actors. Il
s'execute toujours dans la transaction de l'appelant (creation, mise a jour
ou suppression du film) : un echec annule l'ecriture du film avec celle des
liens, aucune distribution partielle n'est jamais visible.
"""

from collections import defaultdict
from dataclasses import dataclass
from enum import Enum
from typing import Iterable

from loguru import logger
from sqlalchemy import delete
from sqlmodel import Session, select

from cinecast.core.entities.catalog import Actor
from cinecast.core.errors import ActorNotFoundError
from cinecast.infrastructure.persistence.models import ActorModel, MovieActorModel


class SyncMode(Enum):
    """Mode de synchronisation.

    Valeurs:
        CREATE: Ajoute les liens manquants, conserve les liens existants
        REPLACE: Le jeu de liens final est exactement le jeu demande
    """

    CREATE = "create"
    REPLACE = "replace"


@dataclass(frozen=True)
class CastDelta:
    """
    Modifications appliquees par une synchronisation.

    Attributs:
        added: IDs des acteurs lies
        removed: IDs des acteurs delies
    """

    added: tuple[int, ...] = ()
    removed: tuple[int, ...] = ()

    @property
    def changed(self) -> bool:
        """True si au moins un lien a ete ajoute ou supprime."""
        return bool(self.added or self.removed)


def actor_to_entity(model: ActorModel) -> Actor:
    """Convertit un modele acteur en entite domaine."""
    return Actor(
        id=model.id,
        first_name=model.first_name,
        last_name=model.last_name,
        role=model.role,
        created_at=model.created_at,
        updated_at=model.updated_at,
    )


class CastSynchronizer:
    """
    Reconciliation des liens movie_actors d'un film avec un jeu d'IDs.

    Sans etat : une instance peut etre partagee entre les requetes.
    """

    def sync(
        self,
        session: Session,
        movie_id: int,
        actor_ids: Iterable[int],
        mode: SyncMode = SyncMode.REPLACE,
    ) -> CastDelta:
        """
        Synchronise la distribution d'un film dans la transaction fournie.

        Les doublons sont ignores. Chaque acteur doit exister ; sinon
        ActorNotFoundError est levee avec le premier ID manquant (dans l'ordre
        fourni) et l'appelant annule la transaction.

        En mode REPLACE seul le delta est applique : les liens inchanges ne
        sont ni supprimes ni recrees.

        Args :
            session : Session de la transaction en cours
            movie_id : ID du film
            actor_ids : IDs des acteurs souhaites
            mode : CREATE ou REPLACE

        Retourne :
            Le delta applique
        """
        desired = list(dict.fromkeys(int(actor_id) for actor_id in actor_ids))
        self._check_actors_exist(session, desired)

        existing = self.linked_actor_ids(session, movie_id)
        to_add = [actor_id for actor_id in desired if actor_id not in existing]
        to_remove: list[int] = []

        if mode is SyncMode.REPLACE:
            to_remove = sorted(existing - set(desired))
            if to_remove:
                session.exec(
                    delete(MovieActorModel)
                    .where(MovieActorModel.movie_id == movie_id)
                    .where(MovieActorModel.actor_id.in_(to_remove))
                )

        for actor_id in to_add:
            session.add(MovieActorModel(movie_id=movie_id, actor_id=actor_id))
        session.flush()

        delta = CastDelta(added=tuple(sorted(to_add)), removed=tuple(to_remove))
        if delta.changed:
            logger.debug(
                f"Distribution du film {movie_id} synchronisee "
                f"(+{list(delta.added)} -{list(delta.removed)})"
            )
        return delta

    def clear(self, session: Session, movie_id: int) -> int:
        """Supprime tous les liens d'un film. Retourne le nombre de liens supprimes."""
        result = session.exec(
            delete(MovieActorModel).where(MovieActorModel.movie_id == movie_id)
        )
        return result.rowcount

    def clear_actor(self, session: Session, actor_id: int) -> int:
        """Supprime tous les liens d'un acteur. Retourne le nombre de liens supprimes."""
        result = session.exec(
            delete(MovieActorModel).where(MovieActorModel.actor_id == actor_id)
        )
        return result.rowcount

    def linked_actor_ids(self, session: Session, movie_id: int) -> set[int]:
        """IDs des acteurs actuellement lies au film."""
        statement = select(MovieActorModel.actor_id).where(
            MovieActorModel.movie_id == movie_id
        )
        return set(session.exec(statement).all())

    def load_casts(self, session: Session, movie_ids: Iterable[int]) -> dict[int, tuple[Actor, ...]]:
        """
        Materialise la distribution de plusieurs films en une seule requete.

        Retourne :
            Dictionnaire movie_id -> acteurs tries par ID (tuple vide si aucun lien)
        """
        ids = list(dict.fromkeys(movie_ids))
        casts: dict[int, list[Actor]] = defaultdict(list)
        if ids:
            statement = (
                select(MovieActorModel.movie_id, ActorModel)
                .join(ActorModel, ActorModel.id == MovieActorModel.actor_id)
                .where(MovieActorModel.movie_id.in_(ids))
                .order_by(MovieActorModel.movie_id, ActorModel.id)
            )
            for movie_id, actor_model in session.exec(statement).all():
                casts[movie_id].append(actor_to_entity(actor_model))
        return {movie_id: tuple(casts.get(movie_id, ())) for movie_id in ids}

    def _check_actors_exist(self, session: Session, actor_ids: list[int]) -> None:
        """Leve ActorNotFoundError pour le premier acteur inexistant."""
        if not actor_ids:
            return
        statement = select(ActorModel.id).where(ActorModel.id.in_(actor_ids))
        found = set(session.exec(statement).all())
        for actor_id in actor_ids:
            if actor_id not in found:
                logger.warning(f"Acteur {actor_id} introuvable, distribution rejetee")
                raise ActorNotFoundError(actor_id)
