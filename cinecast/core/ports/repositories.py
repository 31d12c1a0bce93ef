"""
Interfaces ports pour les repositories.

Interfaces abstraites (ports) définissant les contrats pour la persistance des
films et des acteurs. Les implémentations (adaptateurs) fournissent le
stockage concret (SQLModel).
"""

from abc import ABC, abstractmethod
from typing import Any, Mapping, Sequence

from cinecast.core.entities.catalog import Actor, ActorList, Movie, MovieList
from cinecast.core.value_objects.commands import CreateMovieCommand, UpdateMovieCommand
from cinecast.core.value_objects.query import FilterDescriptor, ListQuery


class IActorRepository(ABC):
    """
    Interface de stockage des acteurs.

    Définit les opérations CRUD et la liste filtrée/paginée des acteurs.
    """

    @abstractmethod
    def create(self, actor: Actor) -> Actor:
        """Crée un acteur et retourne l'entité avec son ID attribué."""
        ...

    @abstractmethod
    def get_by_id(self, actor_id: int) -> Actor:
        """Récupère un acteur. Lève NotFoundError s'il est absent."""
        ...

    @abstractmethod
    def update(self, actor: Actor) -> Actor:
        """Écrase toute la ligne de l'acteur (les champs non fournis ne sont pas conservés)."""
        ...

    @abstractmethod
    def delete(self, actor_id: int) -> bool:
        """
        Supprime un acteur et ses liens de distribution.

        Idempotent : supprimer un ID absent réussit et retourne False.
        """
        ...

    @abstractmethod
    def get_list(self, query: ListQuery) -> ActorList:
        """Liste paginée ; le total porte sur l'ensemble filtré non paginé."""
        ...


class IMovieRepository(ABC):
    """
    Interface de stockage des films et de leur distribution.

    Toute écriture touchant la distribution est atomique avec l'écriture
    de la ligne du film.
    """

    @abstractmethod
    def create(self, command: CreateMovieCommand) -> Movie:
        """Crée un film et sa distribution (tout ou rien)."""
        ...

    @abstractmethod
    def get_single(self, movie_id: int) -> Movie:
        """Récupère un film avec sa distribution. Lève NotFoundError s'il est absent."""
        ...

    @abstractmethod
    def update(self, command: UpdateMovieCommand) -> Movie:
        """Met à jour les champs du film et remplace sa distribution (tout ou rien)."""
        ...

    @abstractmethod
    def delete(self, movie_id: int) -> bool:
        """Supprime un film et ses liens. Idempotent : retourne False si absent."""
        ...

    @abstractmethod
    def get_list(self, query: ListQuery) -> MovieList:
        """Liste paginée de films avec distribution matérialisée."""
        ...

    @abstractmethod
    def update_fields(
        self,
        filters: Sequence[FilterDescriptor],
        values: Mapping[str, Any],
    ) -> int:
        """
        Met à jour en masse les films correspondant aux filtres.

        Au moins un filtre effectif est exigé. Retourne le nombre de lignes.
        """
        ...
