"""
Container d'injection de dependances via dependency-injector.

Construit explicitement la configuration, l'acces a la base et les
repositories : aucun etat global n'est lu par les repositories eux-memes.
"""

from collections.abc import Iterator

from dependency_injector import containers, providers

from .config import Settings
from .infrastructure.persistence.cast_sync import CastSynchronizer
from .infrastructure.persistence.database import Database
from .infrastructure.persistence.repositories import (
    SQLModelActorRepository,
    SQLModelMovieRepository,
)


def init_database(db: Database) -> Iterator[Database]:
    """Cree les tables au demarrage et ferme le pool a l'arret."""
    db.init_db()
    yield db
    db.dispose()


class Container(containers.DeclarativeContainer):
    """Container DI de l'application.

    Utilisation :
        container = Container()
        container.database.init()  # Cree les tables une fois
        movie_repo = container.movie_repository()
    """

    # Configuration - singleton charge une seule fois
    config = providers.Singleton(Settings)

    # Acces a la base - engine et pool partages entre les repositories
    db = providers.Singleton(Database, settings=config)

    # Database - Resource pour initialisation unique des tables
    database = providers.Resource(init_database, db=db)

    # Synchroniseur de distribution (sans etat - Singleton)
    cast_synchronizer = providers.Singleton(CastSynchronizer)

    # Repositories - Factory, chaque operation ouvre sa propre session
    actor_repository = providers.Factory(
        SQLModelActorRepository,
        database=db,
        settings=config,
        cast_synchronizer=cast_synchronizer,
    )
    movie_repository = providers.Factory(
        SQLModelMovieRepository,
        database=db,
        cast_synchronizer=cast_synchronizer,
        settings=config,
    )
