"""
Module de persistance pour CineCast.

Ce module fournit l'infrastructure de stockage utilisant SQLModel (SQLAlchemy).
Il contient :

- database.py : Engine, portees de session/transaction, initialisation
- models.py : Modeles SQLModel representant les tables
- query.py : Traduction filtres/tris/pagination en requetes SQL
- cast_sync.py : Synchronisation transactionnelle de la distribution

Les modeles ici sont des adapters de persistance, distincts des entites de domaine
(dataclass dans core/entities/). La conversion entre les deux se fait dans les
repositories.

Usage:
    from cinecast.config import Settings
    from cinecast.infrastructure.persistence import Database

    database = Database(Settings())
    database.init_db()  # Cree les tables si necessaire
"""

from cinecast.infrastructure.persistence.cast_sync import (
    CastDelta,
    CastSynchronizer,
    SyncMode,
)
from cinecast.infrastructure.persistence.database import Database, build_engine
from cinecast.infrastructure.persistence.models import (
    ActorModel,
    MovieActorModel,
    MovieModel,
)
from cinecast.infrastructure.persistence.query import (
    QueryTranslator,
    apply_page,
    count_rows,
)

__all__ = [
    "ActorModel",
    "CastDelta",
    "CastSynchronizer",
    "Database",
    "MovieActorModel",
    "MovieModel",
    "QueryTranslator",
    "SyncMode",
    "apply_page",
    "build_engine",
    "count_rows",
]
