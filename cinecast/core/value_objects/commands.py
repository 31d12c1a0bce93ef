"""
Commandes d'ecriture sur les films.

Requetes typees deja validees (champs obligatoires) par l'appelant.
Les IDs de distribution sont un ensemble : doublons et ordre sont ignores.
"""

from dataclasses import dataclass
from typing import Iterable


@dataclass(frozen=True)
class CreateMovieCommand:
    """Creation d'un film avec sa distribution."""

    title: str
    director: str
    year: int
    synopsis: str = ""
    cast_ids: tuple[int, ...] = ()

    @classmethod
    def build(
        cls,
        title: str,
        director: str,
        year: int,
        synopsis: str = "",
        cast_ids: Iterable[int] = (),
    ) -> "CreateMovieCommand":
        """Construit la commande a partir d'un iterable quelconque d'IDs."""
        return cls(title, director, year, synopsis, tuple(cast_ids))


@dataclass(frozen=True)
class UpdateMovieCommand:
    """Mise a jour complete d'un film et remplacement de sa distribution."""

    id: int
    title: str
    director: str
    year: int
    synopsis: str = ""
    cast_ids: tuple[int, ...] = ()

    @classmethod
    def build(
        cls,
        movie_id: int,
        title: str,
        director: str,
        year: int,
        synopsis: str = "",
        cast_ids: Iterable[int] = (),
    ) -> "UpdateMovieCommand":
        """Construit la commande a partir d'un iterable quelconque d'IDs."""
        return cls(movie_id, title, director, year, synopsis, tuple(cast_ids))
