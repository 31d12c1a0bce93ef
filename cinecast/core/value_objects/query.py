"""
Objets valeur pour les requetes de liste.

Descripteurs declaratifs de filtrage, de tri et de pagination, independants
du type d'entite. La traduction en requete SQL est faite par
l'infrastructure (QueryTranslator).
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional

DEFAULT_PAGE_SIZE = 10


class FilterOperator(Enum):
    """Operateurs de filtrage reconnus.

    Valeurs:
        EQ: egal
        NE: different
        GT / GTE: superieur / superieur ou egal
        LT / LTE: inferieur / inferieur ou egal
        SEARCH: recherche de sous-chaine insensible a la casse
    """

    EQ = "eq"
    NE = "ne"
    GT = "gt"
    GTE = "gte"
    LT = "lt"
    LTE = "lte"
    SEARCH = "search"

    @classmethod
    def parse(cls, value: "str | FilterOperator") -> Optional["FilterOperator"]:
        """Retourne l'operateur correspondant, ou None s'il est inconnu."""
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            return None


class SortDirection(Enum):
    """Sens de tri."""

    ASC = "asc"
    DESC = "desc"

    @classmethod
    def parse(cls, value: "str | SortDirection | None") -> "SortDirection":
        """Retourne le sens de tri, ascendant si la valeur est inconnue."""
        if isinstance(value, cls):
            return value
        if value is not None and str(value).strip().lower() == "desc":
            return cls.DESC
        return cls.ASC


@dataclass(frozen=True)
class FilterDescriptor:
    """
    Restriction `column OP value`.

    L'operateur est conserve tel que fourni : un operateur inconnu
    n'applique aucune restriction (il n'est pas rejete).
    """

    column: str
    operator: str
    value: Any


@dataclass(frozen=True)
class OrderDescriptor:
    """Tri sur une colonne (ascendant si le sens est inconnu)."""

    column: str
    direction: str = SortDirection.ASC.value


@dataclass(frozen=True)
class ListQuery:
    """
    Requete de liste generique.

    Attributs:
        page: Numero de page (1-based, <= 0 equivaut a la premiere page)
        limit: Taille de page (0 = taille par defaut)
        filters: Restrictions combinees en ET
        order_by: Tris appliques dans l'ordre
    """

    page: int = 1
    limit: int = 0
    filters: tuple[FilterDescriptor, ...] = ()
    order_by: tuple[OrderDescriptor, ...] = ()
