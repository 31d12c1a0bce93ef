"""
Interface en ligne de commande de CineCast.

- actor_commands : sous-commandes `cinecast actors ...`
- movie_commands : sous-commandes `cinecast movies ...`
- helpers : console Rich, injection du container, parsing des options
"""

from cinecast.adapters.cli.actor_commands import actors_app
from cinecast.adapters.cli.movie_commands import movies_app

__all__ = [
    "actors_app",
    "movies_app",
]
