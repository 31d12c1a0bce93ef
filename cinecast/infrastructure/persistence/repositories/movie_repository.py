"""
Implementation SQLModel du repository Movie.

Implemente l'interface IMovieRepository pour la persistance des films et de
leur distribution. Toute ecriture touchant la distribution s'execute dans
une seule transaction avec l'ecriture du film (tout ou rien).
"""

from typing import Any, Mapping, Optional, Sequence

from loguru import logger
from sqlalchemy import delete, update
from sqlmodel import select

from cinecast.config import Settings
from cinecast.core.entities.catalog import Actor, Movie, MovieList
from cinecast.core.errors import NotFoundError, UnknownColumnError, ValidationError
from cinecast.core.ports.repositories import IMovieRepository
from cinecast.core.value_objects.commands import CreateMovieCommand, UpdateMovieCommand
from cinecast.core.value_objects.query import FilterDescriptor, ListQuery
from cinecast.infrastructure.persistence.cast_sync import CastSynchronizer, SyncMode
from cinecast.infrastructure.persistence.database import Database
from cinecast.infrastructure.persistence.models import MovieModel, utcnow
from cinecast.infrastructure.persistence.query import QueryTranslator, apply_page, count_rows

MOVIE_COLUMNS = QueryTranslator.for_table(MovieModel.__table__)

# Colonnes modifiables par update_fields
UPDATABLE_COLUMNS = ("title", "director", "year", "synopsis")


class SQLModelMovieRepository(IMovieRepository):
    """
    Repository SQLModel pour les films.

    Compose le QueryTranslator, la pagination et le CastSynchronizer.
    """

    def __init__(
        self,
        database: Database,
        cast_synchronizer: CastSynchronizer,
        settings: Optional[Settings] = None,
    ) -> None:
        """
        Initialise le repository.

        Args :
            database : Acces a la base (portees de session et de transaction)
            cast_synchronizer : Synchroniseur des liens movie_actors
            settings : Configuration (tailles de page) ; celle de database par defaut
        """
        self._database = database
        self._cast = cast_synchronizer
        self._settings = settings or database.settings

    def _to_entity(self, model: MovieModel, cast: tuple[Actor, ...] = ()) -> Movie:
        """
        Convertit un modele DB en entite domaine.

        Args :
            model : Le modele MovieModel depuis la DB
            cast : Distribution deja materialisee

        Retourne :
            L'entite Movie correspondante
        """
        return Movie(
            id=model.id,
            title=model.title,
            director=model.director,
            year=model.year,
            synopsis=model.synopsis,
            cast=cast,
            created_at=model.created_at,
            updated_at=model.updated_at,
        )

    def create(self, command: CreateMovieCommand) -> Movie:
        """
        Cree un film puis lie sa distribution.

        Si un acteur est introuvable, l'insertion du film est annulee aussi.
        """
        with self._database.transaction("movie.create") as session:
            model = MovieModel(
                title=command.title,
                director=command.director,
                year=command.year,
                synopsis=command.synopsis,
            )
            session.add(model)
            session.flush()

            self._cast.sync(session, model.id, command.cast_ids, SyncMode.CREATE)
            session.refresh(model)
            cast = self._cast.load_casts(session, [model.id])[model.id]
            movie = self._to_entity(model, cast)

        logger.info(f"Film cree: {movie.title} (ID {movie.id}, {len(movie.cast)} acteur(s))")
        return movie

    def get_single(self, movie_id: int) -> Movie:
        """
        Recupere un film et sa distribution.

        Deux requetes hors transaction : une ecriture concurrente entre les
        deux lectures peut etre partiellement visible.
        """
        with self._database.session("movie.get_single") as session:
            model = session.get(MovieModel, movie_id)
            if model is None:
                raise NotFoundError("movie", movie_id)
            cast = self._cast.load_casts(session, [movie_id])[movie_id]
            return self._to_entity(model, cast)

    def update(self, command: UpdateMovieCommand) -> Movie:
        """
        Met a jour les champs du film et remplace sa distribution.

        Le film retourne est relu dans la transaction, avant le commit.
        """
        with self._database.transaction("movie.update") as session:
            model = session.get(MovieModel, command.id)
            if model is None:
                raise NotFoundError("movie", command.id)

            model.title = command.title
            model.director = command.director
            model.year = command.year
            model.synopsis = command.synopsis
            model.updated_at = utcnow()
            session.add(model)
            session.flush()

            delta = self._cast.sync(session, command.id, command.cast_ids, SyncMode.REPLACE)

            session.refresh(model)
            cast = self._cast.load_casts(session, [command.id])[command.id]
            movie = self._to_entity(model, cast)

        logger.info(
            f"Film mis a jour: ID {movie.id} "
            f"(distribution +{len(delta.added)} -{len(delta.removed)})"
        )
        return movie

    def delete(self, movie_id: int) -> bool:
        """
        Supprime les liens du film puis le film.

        Idempotent : un ID absent n'est pas une erreur (retourne False).
        """
        with self._database.transaction("movie.delete") as session:
            unlinked = self._cast.clear(session, movie_id)
            result = session.exec(delete(MovieModel).where(MovieModel.id == movie_id))
            deleted = result.rowcount > 0

        if deleted:
            logger.info(f"Film supprime: ID {movie_id} ({unlinked} lien(s) retire(s))")
        else:
            logger.debug(f"Suppression du film {movie_id}: deja absent")
        return deleted

    def get_list(self, query: ListQuery) -> MovieList:
        """
        Liste filtree, triee et paginee des films.

        Le total est compte avant pagination. La distribution de tous les films
        de la page est chargee en une seule requete.
        """
        statement = MOVIE_COLUMNS.apply_filters(select(MovieModel), query.filters)
        with self._database.session("movie.get_list") as session:
            total = count_rows(session, statement)
            statement = MOVIE_COLUMNS.apply_ordering(statement, query.order_by)
            statement, limit = apply_page(
                statement,
                query.page,
                query.limit,
                max_limit=self._settings.max_page_size,
                default_limit=self._settings.default_page_size,
            )
            models = session.exec(statement).all()
            casts = self._cast.load_casts(session, [model.id for model in models])
            items = [self._to_entity(model, casts[model.id]) for model in models]

        logger.debug(f"{len(items)}/{total} films (page {query.page}, taille {limit})")
        return MovieList(items=items, total=total)

    def update_fields(
        self,
        filters: Sequence[FilterDescriptor],
        values: Mapping[str, Any],
    ) -> int:
        """
        Met a jour en masse les colonnes modifiables des films filtres.

        Au moins une restriction effective est exigee : des filtres absents ou
        tous ignores (operateur inconnu) levent ValidationError au lieu de
        modifier toute la table. updated_at est rafraichi.

        Retourne :
            Le nombre de films modifies
        """
        if not values:
            raise ValidationError("no column to update")

        assignments: dict[str, Any] = {}
        for name, value in values.items():
            if name not in UPDATABLE_COLUMNS:
                raise UnknownColumnError(name, list(UPDATABLE_COLUMNS))
            assignments[name] = MOVIE_COLUMNS.coerce(name, value)
        assignments["updated_at"] = utcnow()

        clauses = [
            clause
            for clause in (MOVIE_COLUMNS.predicate(descriptor) for descriptor in filters)
            if clause is not None
        ]
        if not clauses:
            logger.warning(f"Mise a jour en masse refusee sans filtre: {sorted(values)}")
            raise ValidationError("bulk update requires at least one effective filter")

        statement = (
            update(MovieModel)
            .where(*clauses)
            .values(**assignments)
            .execution_options(synchronize_session=False)
        )

        with self._database.transaction("movie.update_fields", multi_statement=False) as session:
            result = session.exec(statement)
            affected = result.rowcount

        logger.info(f"{affected} film(s) modifie(s): {sorted(values)}")
        return affected
