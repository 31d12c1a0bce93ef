"""
Commandes CLI de gestion des acteurs (add, show, list, update, delete).
"""

from typing import Annotated, Optional

import typer

from cinecast.adapters.cli.helpers import (
    console,
    parse_filter,
    parse_order,
    render_actors,
    with_container,
)
from cinecast.core.entities.catalog import DEFAULT_ROLE, Actor
from cinecast.core.value_objects.query import ListQuery

actors_app = typer.Typer(
    name="actors",
    help="Gestion des acteurs",
    rich_markup_mode="rich",
)


@actors_app.command("add")
def actor_add(
    first_name: Annotated[str, typer.Argument(help="Prenom")],
    last_name: Annotated[str, typer.Argument(help="Nom")],
    role: Annotated[str, typer.Option("--role", "-r", help="Role")] = DEFAULT_ROLE,
) -> None:
    """Ajoute un acteur."""
    _actor_add(Actor(first_name=first_name, last_name=last_name, role=role))


@with_container()
def _actor_add(container, actor: Actor) -> None:
    created = container.actor_repository().create(actor)
    console.print(f"[green]Acteur cree[/green] : {created.full_name} (ID {created.id})")


@actors_app.command("show")
def actor_show(actor_id: Annotated[int, typer.Argument(help="ID de l'acteur")]) -> None:
    """Affiche un acteur."""
    _actor_show(actor_id)


@with_container()
def _actor_show(container, actor_id: int) -> None:
    actor = container.actor_repository().get_by_id(actor_id)
    console.print(render_actors([actor], title=actor.full_name))


@actors_app.command("update")
def actor_update(
    actor_id: Annotated[int, typer.Argument(help="ID de l'acteur")],
    first_name: Annotated[str, typer.Argument(help="Prenom")],
    last_name: Annotated[str, typer.Argument(help="Nom")],
    role: Annotated[str, typer.Option("--role", "-r", help="Role")] = DEFAULT_ROLE,
) -> None:
    """Remplace toutes les informations d'un acteur."""
    _actor_update(Actor(id=actor_id, first_name=first_name, last_name=last_name, role=role))


@with_container()
def _actor_update(container, actor: Actor) -> None:
    updated = container.actor_repository().update(actor)
    console.print(f"[green]Acteur mis a jour[/green] : {updated.full_name} (ID {updated.id})")


@actors_app.command("delete")
def actor_delete(actor_id: Annotated[int, typer.Argument(help="ID de l'acteur")]) -> None:
    """Supprime un acteur (et le retire des distributions)."""
    _actor_delete(actor_id)


@with_container()
def _actor_delete(container, actor_id: int) -> None:
    if container.actor_repository().delete(actor_id):
        console.print(f"[green]Acteur {actor_id} supprime[/green]")
    else:
        console.print(f"[yellow]Acteur {actor_id} deja absent[/yellow]")


@actors_app.command("list")
def actor_list(
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
    """Liste les acteurs avec filtres, tris et pagination."""
    query = ListQuery(
        page=page,
        limit=limit,
        filters=tuple(parse_filter(raw) for raw in filters or ()),
        order_by=tuple(parse_order(raw) for raw in order or ()),
    )
    _actor_list(query)


@with_container()
def _actor_list(container, query: ListQuery) -> None:
    result = container.actor_repository().get_list(query)
    console.print(render_actors(result.items))
    console.print(f"[dim]{len(result.items)} affiche(s) sur {result.total}[/dim]")
