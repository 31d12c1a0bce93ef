"""
Ports (interfaces abstraites) définissant les contrats pour les adaptateurs.

Ports repository : Contrats de persistance des données
- IActorRepository : Stockage des acteurs
- IMovieRepository : Stockage des films et de leur distribution
"""

from cinecast.core.ports.repositories import IActorRepository, IMovieRepository

__all__ = [
    "IActorRepository",
    "IMovieRepository",
]
