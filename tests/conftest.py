"""
Fixtures pytest partagees pour les tests CineCast.

Ce module contient les fixtures communes utilisees dans les tests:
- Settings de test avec base SQLite en memoire
- Database initialisee (tables creees)
- Repositories et synchroniseur de distribution
- Jeux d'acteurs et de films de reference
"""

from pathlib import Path
from typing import Iterator

import pytest

from cinecast.config import Settings
from cinecast.core.entities.catalog import Actor
from cinecast.infrastructure.persistence.cast_sync import CastSynchronizer
from cinecast.infrastructure.persistence.database import Database
from cinecast.infrastructure.persistence.repositories import (
    SQLModelActorRepository,
    SQLModelMovieRepository,
)


@pytest.fixture
def test_settings(tmp_path: Path) -> Settings:
    """
    Settings de test avec base en memoire.

    La base en memoire est partagee par toutes les sessions du test
    (StaticPool) et disparait a la fin du test.
    """
    return Settings(
        database_url="sqlite://",
        default_page_size=10,
        max_page_size=100,
        log_file=tmp_path / "test.log",
    )


@pytest.fixture
def database(test_settings: Settings) -> Iterator[Database]:
    """Database initialisee avec toutes les tables."""
    db = Database(test_settings)
    db.init_db()
    yield db
    db.dispose()


@pytest.fixture
def cast_synchronizer() -> CastSynchronizer:
    """Synchroniseur de distribution."""
    return CastSynchronizer()


@pytest.fixture
def actor_repo(database: Database, cast_synchronizer: CastSynchronizer) -> SQLModelActorRepository:
    """Repository des acteurs sur la base de test."""
    return SQLModelActorRepository(database, cast_synchronizer=cast_synchronizer)


@pytest.fixture
def movie_repo(database: Database, cast_synchronizer: CastSynchronizer) -> SQLModelMovieRepository:
    """Repository des films sur la base de test."""
    return SQLModelMovieRepository(database, cast_synchronizer)


@pytest.fixture
def actors(actor_repo: SQLModelActorRepository) -> list[Actor]:
    """Quatre acteurs persistes (IDs 1 a 4)."""
    names = [
        ("Timothee", "Chalamet", "actor"),
        ("Zendaya", "Coleman", "actor"),
        ("Rebecca", "Ferguson", "actor"),
        ("Hans", "Zimmer", "composer"),
    ]
    return [
        actor_repo.create(Actor(first_name=first, last_name=last, role=role))
        for first, last, role in names
    ]
