"""
Entités du catalogue.

Films et acteurs tels que retournés par les repositories, avec la
distribution (cast) matérialisée sur chaque film.
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional

DEFAULT_ROLE = "actor"


@dataclass
class Actor:
    """
    Acteur pouvant figurer dans la distribution d'un film.

    Attributs:
        id: ID interne attribue par la base
        first_name: Prenom
        last_name: Nom
        role: Role libre (defaut "actor")
        created_at: Date de creation (attribuee par le systeme)
        updated_at: Date de derniere modification (attribuee par le systeme)
    """

    id: Optional[int] = None
    first_name: str = ""
    last_name: str = ""
    role: str = DEFAULT_ROLE
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @property
    def full_name(self) -> str:
        """Nom complet affichable."""
        return f"{self.first_name} {self.last_name}".strip()


@dataclass
class Movie:
    """
    Film du catalogue avec sa distribution materialisee.

    La distribution est un ensemble : l'ordre de `cast` n'a pas de sens
    (les acteurs sont tries par ID pour un affichage stable).

    Attributs:
        id: ID interne attribue par la base (monotone)
        title: Titre
        director: Realisateur
        year: Annee de sortie
        synopsis: Resume
        cast: Acteurs lies au film
        created_at: Date de creation
        updated_at: Date de derniere modification
    """

    id: Optional[int] = None
    title: str = ""
    director: str = ""
    year: int = 0
    synopsis: str = ""
    cast: tuple[Actor, ...] = ()
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @property
    def cast_ids(self) -> frozenset[int]:
        """IDs des acteurs de la distribution."""
        return frozenset(actor.id for actor in self.cast if actor.id is not None)


@dataclass
class ActorList:
    """Page d'acteurs et nombre total d'acteurs correspondant aux filtres."""

    items: list[Actor] = field(default_factory=list)
    total: int = 0


@dataclass
class MovieList:
    """Page de films et nombre total de films correspondant aux filtres."""

    items: list[Movie] = field(default_factory=list)
    total: int = 0
