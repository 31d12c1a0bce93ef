"""
Utilitaires partages pour les commandes CLI de CineCast.

Ce module fournit :
- console : instance Rich Console partagee
- with_container : decorateur injectant un container initialise
- parse_filter / parse_order / parse_ids : conversion des options en descripteurs
- render_actors / render_movies : tableaux Rich
"""

from functools import wraps
from typing import Iterable, Optional

import typer
from rich.console import Console
from rich.table import Table

from cinecast.container import Container
from cinecast.core.entities.catalog import Actor, Movie
from cinecast.core.errors import CatalogError, NotFoundError, ValidationError
from cinecast.core.value_objects.query import FilterDescriptor, OrderDescriptor

console = Console()


def with_container():
    """
    Decorateur qui injecte un container initialise en premier argument.

    Les tables sont creees si besoin et le pool est libere a la sortie.
    Les erreurs du catalogue sont affichees en rouge et terminent la
    commande avec le code 1.

    Usage:
        @with_container()
        def _my_command(container, ...):
            repo = container.movie_repository()
    """
    def decorator(func):
        @wraps(func)
        def wrapper(*args, **kwargs):
            container = Container()
            container.database.init()
            try:
                return func(container, *args, **kwargs)
            except CatalogError as exc:
                console.print(f"[red]{error_label(exc)}:[/red] {exc}")
                raise typer.Exit(code=1) from exc
            finally:
                container.database.shutdown()
        return wrapper
    return decorator


def error_label(exc: CatalogError) -> str:
    """Libelle court d'une erreur du catalogue."""
    if isinstance(exc, NotFoundError):
        return "Introuvable"
    if isinstance(exc, ValidationError):
        return "Requete invalide"
    return "Erreur de stockage"


def parse_filter(raw: str) -> FilterDescriptor:
    """
    Convertit "colonne:operateur:valeur" en FilterDescriptor.

    La valeur peut contenir des ':' (seuls les deux premiers separent).
    """
    parts = raw.split(":", 2)
    if len(parts) != 3 or not parts[0]:
        raise typer.BadParameter(
            f"filtre invalide '{raw}' (attendu: colonne:operateur:valeur)"
        )
    column, operator, value = parts
    return FilterDescriptor(column=column.strip(), operator=operator.strip(), value=value)


def parse_order(raw: str) -> OrderDescriptor:
    """Convertit "colonne[:asc|desc]" en OrderDescriptor."""
    column, _, direction = raw.partition(":")
    if not column:
        raise typer.BadParameter(f"tri invalide '{raw}' (attendu: colonne[:asc|desc])")
    return OrderDescriptor(column=column.strip(), direction=direction.strip() or "asc")


def parse_ids(raw: Optional[str]) -> tuple[int, ...]:
    """Convertit "1,2,3" en tuple d'IDs (chaine vide ou None -> tuple vide)."""
    if not raw:
        return ()
    try:
        return tuple(int(part) for part in raw.split(",") if part.strip())
    except ValueError as exc:
        raise typer.BadParameter(f"liste d'IDs invalide '{raw}'") from exc


def render_actors(actors: Iterable[Actor], title: str = "Acteurs") -> Table:
    """Construit un tableau Rich d'acteurs."""
    table = Table(title=title)
    table.add_column("ID", justify="right", style="cyan")
    table.add_column("Prenom")
    table.add_column("Nom")
    table.add_column("Role", style="dim")
    for actor in actors:
        table.add_row(str(actor.id), actor.first_name, actor.last_name, actor.role)
    return table


def render_movies(movies: Iterable[Movie], title: str = "Films") -> Table:
    """Construit un tableau Rich de films avec leur distribution."""
    table = Table(title=title)
    table.add_column("ID", justify="right", style="cyan")
    table.add_column("Titre", style="bold")
    table.add_column("Realisateur")
    table.add_column("Annee", justify="right")
    table.add_column("Distribution", style="dim")
    for movie in movies:
        cast = ", ".join(actor.full_name for actor in movie.cast)
        table.add_row(str(movie.id), movie.title, movie.director, str(movie.year), cast)
    return table
