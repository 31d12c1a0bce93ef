"""
Objets valeur immutables representant des concepts du domaine sans identite.

Exports :
- FilterOperator / SortDirection : Operateurs de filtrage et sens de tri
- FilterDescriptor / OrderDescriptor : Descripteurs declaratifs de requete
- ListQuery : Requete de liste (page, taille, filtres, tris)
- CreateMovieCommand / UpdateMovieCommand : Commandes d'ecriture sur les films
"""

from cinecast.core.value_objects.commands import (
    CreateMovieCommand,
    UpdateMovieCommand,
)
from cinecast.core.value_objects.query import (
    DEFAULT_PAGE_SIZE,
    FilterDescriptor,
    FilterOperator,
    ListQuery,
    OrderDescriptor,
    SortDirection,
)

__all__ = [
    "DEFAULT_PAGE_SIZE",
    "FilterDescriptor",
    "FilterOperator",
    "ListQuery",
    "OrderDescriptor",
    "SortDirection",
    "CreateMovieCommand",
    "UpdateMovieCommand",
]
