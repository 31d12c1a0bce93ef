"""
Implementations SQLModel des repositories.

Ce module contient les implementations concretes des interfaces repository
definies dans cinecast/core/ports/repositories.py.

Chaque repository :
- Herite de l'interface ABC correspondante du domaine
- Recoit la Database (et la configuration) via injection de dependances
- Convertit entre entites de domaine (dataclass) et modeles DB (SQLModel)
"""

from cinecast.infrastructure.persistence.repositories.actor_repository import (
    SQLModelActorRepository,
)
from cinecast.infrastructure.persistence.repositories.movie_repository import (
    SQLModelMovieRepository,
)

__all__ = [
    "SQLModelActorRepository",
    "SQLModelMovieRepository",
]
