"""
Tests unitaires pour les commandes CLI acteurs et films.

Les commandes s'executent contre une vraie base SQLite temporaire :
le container lit CINECAST_DATABASE_URL au moment de sa creation.
"""

from unittest.mock import MagicMock, patch

import pytest
from typer.testing import CliRunner

from cinecast.adapters.cli import actors_app, movies_app
from cinecast.core.errors import NotFoundError

runner = CliRunner()


# ============================================================================
# Fixtures
# ============================================================================


@pytest.fixture(autouse=True)
def database_url(monkeypatch, tmp_path):
    """Base fichier temporaire partagee par les invocations d'un test."""
    url = f"sqlite:///{tmp_path}/cli.db"
    monkeypatch.setenv("CINECAST_DATABASE_URL", url)
    monkeypatch.setenv("CINECAST_LOG_FILE", str(tmp_path / "cli.log"))
    return url


def _add_actor(first_name: str, last_name: str) -> None:
    result = runner.invoke(actors_app, ["add", first_name, last_name])
    assert result.exit_code == 0, result.output


# ============================================================================
# Acteurs
# ============================================================================


class TestActorCommands:
    """Tests des commandes actors."""

    def test_add_and_show(self):
        result = runner.invoke(actors_app, ["add", "Hans", "Zimmer", "--role", "composer"])
        assert result.exit_code == 0
        assert "Acteur cree" in result.output
        assert "(ID 1)" in result.output

        result = runner.invoke(actors_app, ["show", "1"])
        assert result.exit_code == 0
        assert "composer" in result.output

    def test_show_missing_exits_with_error(self):
        result = runner.invoke(actors_app, ["show", "42"])
        assert result.exit_code == 1
        assert "Introuvable" in result.output

    def test_delete_is_idempotent(self):
        _add_actor("Rebecca", "Ferguson")
        first = runner.invoke(actors_app, ["delete", "1"])
        second = runner.invoke(actors_app, ["delete", "1"])
        assert first.exit_code == 0
        assert "supprime" in first.output
        assert second.exit_code == 0
        assert "deja absent" in second.output

    def test_list_with_filter_and_limit(self):
        for first, last in [("Timothee", "Chalamet"), ("Zendaya", "Coleman"), ("Rebecca", "Ferguson")]:
            _add_actor(first, last)
        result = runner.invoke(
            actors_app,
            ["list", "--filter", "last_name:search:co", "--limit", "1"],
        )
        assert result.exit_code == 0
        assert "1 affiche(s) sur 1" in result.output

    def test_list_unknown_column(self):
        result = runner.invoke(actors_app, ["list", "--filter", "salary:gt:10"])
        assert result.exit_code == 1
        assert "Requete invalide" in result.output


# ============================================================================
# Films
# ============================================================================


class TestMovieCommands:
    """Tests des commandes movies."""

    def test_add_with_cast_and_show(self):
        _add_actor("Timothee", "Chalamet")
        _add_actor("Zendaya", "Coleman")
        result = runner.invoke(
            movies_app, ["add", "Dune", "Villeneuve", "2021", "--cast", "1,2,2"]
        )
        assert result.exit_code == 0, result.output
        assert "Film cree" in result.output

        result = runner.invoke(movies_app, ["show", "1"])
        assert result.exit_code == 0
        assert "Chalamet" in result.output
        assert "Coleman" in result.output

    def test_add_with_missing_actor_fails(self):
        result = runner.invoke(movies_app, ["add", "Dune", "Villeneuve", "2021", "--cast", "7"])
        assert result.exit_code == 1
        assert "Requete invalide" in result.output

        listing = runner.invoke(movies_app, ["list"])
        assert "0 affiche(s) sur 0" in listing.output

    def test_update_replaces_cast(self):
        _add_actor("Timothee", "Chalamet")
        _add_actor("Rebecca", "Ferguson")
        runner.invoke(movies_app, ["add", "Dune", "Villeneuve", "2021", "--cast", "1"])
        result = runner.invoke(
            movies_app, ["update", "1", "Dune", "Villeneuve", "2021", "--cast", "2"]
        )
        assert result.exit_code == 0

        shown = runner.invoke(movies_app, ["show", "1"])
        assert "Ferguson" in shown.output
        assert "Chalamet" not in shown.output

    def test_set_bulk_updates_matching_movies(self):
        runner.invoke(movies_app, ["add", "Dune", "Villeneuve", "2021"])
        runner.invoke(movies_app, ["add", "Arrival", "Villeneuve", "2016"])
        runner.invoke(movies_app, ["add", "Heat", "Mann", "1995"])
        result = runner.invoke(
            movies_app,
            ["set", "director=Denis Villeneuve", "--filter", "director:eq:Villeneuve"],
        )
        assert result.exit_code == 0
        assert "2 film(s) modifie(s)" in result.output

    def test_set_without_filter_is_refused(self):
        runner.invoke(movies_app, ["add", "Dune", "Villeneuve", "2021"])
        result = runner.invoke(movies_app, ["set", "title=Efface"])
        assert result.exit_code == 1
        assert "Requete invalide" in result.output

        shown = runner.invoke(movies_app, ["show", "1"])
        assert "Efface" not in shown.output

    def test_set_rejects_malformed_assignment(self):
        result = runner.invoke(movies_app, ["set", "director"])
        assert result.exit_code != 0

    def test_delete_missing_movie(self):
        result = runner.invoke(movies_app, ["delete", "99"])
        assert result.exit_code == 0
        assert "deja absent" in result.output


class TestWithContainer:
    """Tests du decorateur with_container avec un container mocke."""

    def test_catalog_error_is_rendered(self):
        with patch("cinecast.adapters.cli.helpers.Container") as mock_cls:
            container_instance = MagicMock()
            mock_cls.return_value = container_instance
            container_instance.movie_repository.return_value.get_single.side_effect = (
                NotFoundError("movie", 5)
            )
            result = runner.invoke(movies_app, ["show", "5"])

        assert result.exit_code == 1
        assert "movie with ID 5 not found" in result.output
        container_instance.database.init.assert_called_once()
        container_instance.database.shutdown.assert_called_once()
