"""
Point d'entrée CLI de CineCast.

Le callback principal configure le logging ; les sous-commandes actors et
movies, comme init-db, ouvrent chacune leur propre container (voir
with_container).
"""

from typing import Annotated

import typer
from loguru import logger

from . import __version__
from .adapters.cli import actors_app, movies_app
from .adapters.cli.helpers import with_container
from .config import Settings
from .container import Container
from .logging_config import configure_logging

app = typer.Typer(
    name="cinecast",
    help="Catalogue de films et d'acteurs",
)
container = Container()

app.add_typer(actors_app, name="actors")
app.add_typer(movies_app, name="movies")


@app.callback()
def main_callback(
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Logs DEBUG sur la console"),
    ] = False,
    quiet: Annotated[
        bool,
        typer.Option("--quiet", "-q", help="Mode silencieux (erreurs uniquement)"),
    ] = False,
) -> None:
    """CineCast - films, acteurs et distributions."""
    settings = get_config()
    if quiet:
        settings = settings.model_copy(update={"log_level": "ERROR"})
    configure_logging(settings, verbose=verbose and not quiet)
    logger.debug(f"CineCast v{__version__}")


def get_config() -> Settings:
    """Récupère les paramètres de l'application depuis le container DI."""
    return container.config()


@app.command()
def info() -> None:
    """Affiche la configuration actuelle."""
    config = get_config()
    typer.echo(f"Base de données : {config.database_url}")
    typer.echo(f"Délai de verrou SQLite : {config.database_timeout} s")
    typer.echo(f"Taille de page : {config.default_page_size} (max {config.max_page_size})")
    typer.echo(f"Niveau de log : {config.log_level}")
    typer.echo(f"Fichier de log : {config.log_file}")


@app.command()
def version() -> None:
    """Affiche la version."""
    typer.echo(f"CineCast v{__version__}")


@app.command(name="init-db")
def init_db() -> None:
    """Crée les tables de la base de données."""
    _init_db()


@with_container()
def _init_db(container) -> None:
    # Tables creees par la Resource database du container
    database_url = container.config().database_url
    logger.info("Tables créées")
    typer.echo(f"Base initialisée : {database_url}")


def main() -> None:
    """Point d'entrée de l'application."""
    app()


if __name__ == "__main__":
    main()
