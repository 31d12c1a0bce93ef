"""
Entités métier représentant les concepts du domaine.

Exports:
- Actor: Acteur (participant a une distribution)
- Movie: Film avec sa distribution materialisee
- ActorList / MovieList: Pages de resultats avec total
"""

from cinecast.core.entities.catalog import (
    DEFAULT_ROLE,
    Actor,
    ActorList,
    Movie,
    MovieList,
)

__all__ = [
    "DEFAULT_ROLE",
    "Actor",
    "ActorList",
    "Movie",
    "MovieList",
]
