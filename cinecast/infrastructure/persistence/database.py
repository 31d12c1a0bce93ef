"""
Configuration de la base de donnees pour CineCast.

Ce module fournit la classe Database, construite explicitement a partir de
Settings et transmise aux repositories :
- Engine SQLAlchemy (SQLite configure pour le multi-thread et les cles etrangeres)
- Portee de lecture (session) et portee transactionnelle (transaction)
- Initialisation des tables

Chaque operation ouvre sa propre session ; seul le pool de connexions de
l'engine est partage entre les requetes concurrentes.
"""

from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path
from typing import Any

from loguru import logger
from sqlalchemy import Engine, event
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.pool import StaticPool
from sqlmodel import Session, SQLModel, create_engine

from cinecast.config import Settings
from cinecast.core.errors import CatalogError, StorageError, TransactionAbortError


def _is_memory_url(db_url: str) -> bool:
    return db_url in ("sqlite://", "sqlite:///:memory:") or "mode=memory" in db_url


def build_engine(settings: Settings) -> Engine:
    """
    Cree l'engine correspondant a la configuration.

    Pour SQLite :
    - le repertoire parent du fichier est cree si necessaire
    - une base en memoire partage une connexion unique (StaticPool)
    - les cles etrangeres sont activees a chaque connexion
    """
    db_url = settings.database_url
    kwargs: dict[str, Any] = {"echo": settings.database_echo}

    if settings.is_sqlite:
        kwargs["connect_args"] = {
            "check_same_thread": False,
            "timeout": settings.database_timeout,
        }
        if _is_memory_url(db_url):
            kwargs["poolclass"] = StaticPool
        elif db_url.startswith("sqlite:///"):
            db_path = Path(db_url.replace("sqlite:///", "", 1))
            db_path.parent.mkdir(exist_ok=True, parents=True)

    engine = create_engine(db_url, **kwargs)

    if settings.is_sqlite:

        @event.listens_for(engine, "connect")
        def _enable_foreign_keys(dbapi_connection, connection_record) -> None:
            cursor = dbapi_connection.cursor()
            cursor.execute("PRAGMA foreign_keys=ON")
            cursor.close()

    return engine


class Database:
    """
    Acces a la base de donnees.

    Utilisation :
        database = Database(settings)
        database.init_db()

        with database.transaction("movie.create") as session:
            session.add(model)
        # commit si le bloc se termine normalement, rollback sinon
    """

    def __init__(self, settings: Settings) -> None:
        """
        Initialise l'acces a la base.

        Args :
            settings : Configuration de l'application (URL, timeout, echo)
        """
        self._settings = settings
        self._engine = build_engine(settings)

    @property
    def engine(self) -> Engine:
        """Engine SQLAlchemy sous-jacent."""
        return self._engine

    @property
    def settings(self) -> Settings:
        """Configuration utilisee pour construire l'engine."""
        return self._settings

    def init_db(self) -> None:
        """
        Initialise la base de donnees en creant toutes les tables.

        Les modeles sont importes ici pour enregistrer leurs metadonnees
        dans SQLModel.metadata.
        """
        from cinecast.infrastructure.persistence import models  # noqa: F401

        SQLModel.metadata.create_all(self._engine)
        logger.debug("Tables initialisees", url=self._engine.url.render_as_string())

    def dispose(self) -> None:
        """Ferme toutes les connexions du pool."""
        self._engine.dispose()

    @contextmanager
    def session(self, operation: str) -> Iterator[Session]:
        """
        Portee de lecture.

        Les erreurs SQLAlchemy sont converties en StorageError.

        Args :
            operation : Nom de l'operation (pour les messages d'erreur et les logs)
        """
        session = Session(self._engine, expire_on_commit=False)
        try:
            yield session
        except SQLAlchemyError as exc:
            logger.error(f"Echec de {operation}: {exc}")
            raise StorageError(operation, exc) from exc
        finally:
            session.close()

    @contextmanager
    def transaction(self, operation: str, multi_statement: bool = True) -> Iterator[Session]:
        """
        Portee transactionnelle : commit si le bloc reussit, rollback sinon.

        Le rollback est garanti sur toute sortie anormale, y compris
        KeyboardInterrupt ou une erreur inattendue. Les erreurs du domaine
        (NotFoundError, ValidationError) sont relancees telles quelles ; les
        erreurs SQLAlchemy deviennent TransactionAbortError (ou StorageError
        pour une operation a requete unique).

        Args :
            operation : Nom de l'operation (pour les messages d'erreur et les logs)
            multi_statement : False pour une ecriture a requete unique
        """
        session = Session(self._engine, expire_on_commit=False)
        try:
            yield session
            session.commit()
        except CatalogError:
            session.rollback()
            logger.debug(f"Rollback de {operation}")
            raise
        except SQLAlchemyError as exc:
            session.rollback()
            logger.error(f"Rollback de {operation}: {exc}")
            if multi_statement:
                raise TransactionAbortError(operation, exc) from exc
            raise StorageError(operation, exc) from exc
        except BaseException:
            session.rollback()
            logger.warning(f"Rollback de {operation} sur erreur inattendue")
            raise
        finally:
            session.close()
