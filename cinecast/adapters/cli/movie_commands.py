"""
Commandes CLI de gestion des films (add, show, list, update, set, delete).
"""

from typing import Annotated, Optional

import typer

from cinecast.adapters.cli.helpers import (
    console,
    parse_filter,
    parse_ids,
    parse_order,
    render_movies,
    with_container,
)
from cinecast.core.value_objects.commands import CreateMovieCommand, UpdateMovieCommand
from cinecast.core.value_objects.query import FilterDescriptor, ListQuery

movies_app = typer.Typer(
    name="movies",
    help="Gestion des films et de leur distribution",
    rich_markup_mode="rich",
)


@movies_app.command("add")
def movie_add(
    title: Annotated[str, typer.Argument(help="Titre")],
    director: Annotated[str, typer.Argument(help="Realisateur")],
    year: Annotated[int, typer.Argument(help="Annee de sortie")],
    synopsis: Annotated[str, typer.Option("--synopsis", "-s", help="Resume")] = "",
    cast: Annotated[
        Optional[str], typer.Option("--cast", "-c", help="IDs des acteurs (ex: 1,2,3)")
    ] = None,
) -> None:
    """Ajoute un film et sa distribution."""
    _movie_add(CreateMovieCommand.build(title, director, year, synopsis, parse_ids(cast)))


@with_container()
def _movie_add(container, command: CreateMovieCommand) -> None:
    movie = container.movie_repository().create(command)
    console.print(f"[green]Film cree[/green] : {movie.title} (ID {movie.id})")


@movies_app.command("show")
def movie_show(movie_id: Annotated[int, typer.Argument(help="ID du film")]) -> None:
    """Affiche un film et sa distribution."""
    _movie_show(movie_id)


@with_container()
def _movie_show(container, movie_id: int) -> None:
    movie = container.movie_repository().get_single(movie_id)
    console.print(render_movies([movie], title=movie.title))
    if movie.synopsis:
        console.print(movie.synopsis)


@movies_app.command("update")
def movie_update(
    movie_id: Annotated[int, typer.Argument(help="ID du film")],
    title: Annotated[str, typer.Argument(help="Titre")],
    director: Annotated[str, typer.Argument(help="Realisateur")],
    year: Annotated[int, typer.Argument(help="Annee de sortie")],
    synopsis: Annotated[str, typer.Option("--synopsis", "-s", help="Resume")] = "",
    cast: Annotated[
        Optional[str],
        typer.Option("--cast", "-c", help="Nouvelle distribution complete (ex: 1,2,3)"),
    ] = None,
) -> None:
    """Met a jour un film et remplace sa distribution."""
    _movie_update(
        UpdateMovieCommand.build(movie_id, title, director, year, synopsis, parse_ids(cast))
    )


@with_container()
def _movie_update(container, command: UpdateMovieCommand) -> None:
    movie = container.movie_repository().update(command)
    console.print(f"[green]Film mis a jour[/green] : {movie.title} (ID {movie.id})")


@movies_app.command("set")
def movie_set(
    assignments: Annotated[list[str], typer.Argument(help="Affectations colonne=valeur")],
    filters: Annotated[
        Optional[list[str]],
        typer.Option("--filter", "-f", help="Filtre colonne:operateur:valeur (repetable)"),
    ] = None,
) -> None:
    """Modifie en masse les films correspondant aux filtres."""
    values = {}
    for raw in assignments:
        column, sep, value = raw.partition("=")
        if not sep or not column:
            raise typer.BadParameter(f"affectation invalide '{raw}' (attendu: colonne=valeur)")
        values[column.strip()] = value
    _movie_set(tuple(parse_filter(raw) for raw in filters or ()), values)


@with_container()
def _movie_set(container, filters: tuple[FilterDescriptor, ...], values: dict) -> None:
    affected = container.movie_repository().update_fields(filters, values)
    console.print(f"[green]{affected} film(s) modifie(s)[/green]")


@movies_app.command("delete")
def movie_delete(movie_id: Annotated[int, typer.Argument(help="ID du film")]) -> None:
    """Supprime un film et sa distribution."""
    _movie_delete(movie_id)


@with_container()
def _movie_delete(container, movie_id: int) -> None:
    if container.movie_repository().delete(movie_id):
        console.print(f"[green]Film {movie_id} supprime[/green]")
    else:
        console.print(f"[yellow]Film {movie_id} deja absent[/yellow]")


@movies_app.command("list")
def movie_list(
    page: Annotated[int, typer.Option("--page", "-p", help="Numero de page")] = 1,
    limit: Annotated[int, typer.Option("--limit", "-l", help="Taille de page")] = 0,
    filters: Annotated[
        Optional[list[str]],
        typer.Option("--filter", "-f", help="Filtre colonne:operateur:valeur (repetable)"),
    ] = None,
    order: Annotated[
        Optional[list[str]],
        typer.Option("--order", "-o", help="Tri colonne[:asc|desc] (repetable)"),
    ] = None,
) -> None:
    """Liste les films avec filtres, tris et pagination."""
    query = ListQuery(
        page=page,
        limit=limit,
        filters=tuple(parse_filter(raw) for raw in filters or ()),
        order_by=tuple(parse_order(raw) for raw in order or ()),
    )
    _movie_list(query)


@with_container()
def _movie_list(container, query: ListQuery) -> None:
    result = container.movie_repository().get_list(query)
    console.print(render_movies(result.items))
    console.print(f"[dim]{len(result.items)} affiche(s) sur {result.total}[/dim]")
