"""
Tests du synchroniseur de distribution.

Verifie la deduplication, la validation d'existence des acteurs, les modes
CREATE et REPLACE (delta uniquement) et le chargement groupe des distributions.
"""

import pytest
from sqlmodel import select

from cinecast.core.errors import ActorNotFoundError
from cinecast.infrastructure.persistence.cast_sync import CastDelta, SyncMode
from cinecast.infrastructure.persistence.models import MovieActorModel, MovieModel


@pytest.fixture
def movie_id(database) -> int:
    """ID d'un film sans distribution."""
    with database.transaction("seed") as session:
        model = MovieModel(title="Dune", director="Denis Villeneuve", year=2021)
        session.add(model)
        session.flush()
        return model.id


def _links(database, movie_id: int) -> list[int]:
    with database.session("test") as session:
        statement = select(MovieActorModel.actor_id).where(MovieActorModel.movie_id == movie_id)
        return sorted(session.exec(statement).all())


class TestSyncCreate:
    """Tests du mode CREATE."""

    def test_links_desired_actors(self, database, cast_synchronizer, actors, movie_id):
        """Les acteurs demandes sont lies au film."""
        with database.transaction("test") as session:
            delta = cast_synchronizer.sync(session, movie_id, [1, 2], SyncMode.CREATE)
        assert delta == CastDelta(added=(1, 2), removed=())
        assert _links(database, movie_id) == [1, 2]

    def test_duplicates_collapsed(self, database, cast_synchronizer, actors, movie_id):
        """Les doublons sont ignores."""
        with database.transaction("test") as session:
            cast_synchronizer.sync(session, movie_id, [2, 1, 1, 2], SyncMode.CREATE)
        assert _links(database, movie_id) == [1, 2]

    def test_existing_link_is_ignored(self, database, cast_synchronizer, actors, movie_id):
        """Un lien deja present n'est pas une erreur et n'est pas duplique."""
        with database.transaction("test") as session:
            cast_synchronizer.sync(session, movie_id, [1], SyncMode.CREATE)
        with database.transaction("test") as session:
            delta = cast_synchronizer.sync(session, movie_id, [1, 3], SyncMode.CREATE)
        assert delta.added == (3,)
        assert _links(database, movie_id) == [1, 3]

    def test_create_keeps_links_not_requested(self, database, cast_synchronizer, actors, movie_id):
        """CREATE ne retire aucun lien."""
        with database.transaction("test") as session:
            cast_synchronizer.sync(session, movie_id, [1, 2], SyncMode.CREATE)
        with database.transaction("test") as session:
            delta = cast_synchronizer.sync(session, movie_id, [3], SyncMode.CREATE)
        assert delta.removed == ()
        assert _links(database, movie_id) == [1, 2, 3]


class TestSyncReplace:
    """Tests du mode REPLACE."""

    def test_final_set_equals_desired(self, database, cast_synchronizer, actors, movie_id):
        """Le jeu final est exactement le jeu demande."""
        with database.transaction("test") as session:
            cast_synchronizer.sync(session, movie_id, [1, 2], SyncMode.CREATE)
        with database.transaction("test") as session:
            delta = cast_synchronizer.sync(session, movie_id, [2, 3], SyncMode.REPLACE)
        assert delta == CastDelta(added=(3,), removed=(1,))
        assert _links(database, movie_id) == [2, 3]

    def test_replace_is_idempotent(self, database, cast_synchronizer, actors, movie_id):
        """Remplacer deux fois par le meme jeu ne change rien la seconde fois."""
        with database.transaction("test") as session:
            cast_synchronizer.sync(session, movie_id, [1, 4], SyncMode.REPLACE)
        first = _links(database, movie_id)
        with database.transaction("test") as session:
            delta = cast_synchronizer.sync(session, movie_id, [4, 1], SyncMode.REPLACE)
        assert not delta.changed
        assert _links(database, movie_id) == first == [1, 4]

    def test_replace_with_empty_set_unlinks_all(self, database, cast_synchronizer, actors, movie_id):
        """Un jeu vide retire tous les liens."""
        with database.transaction("test") as session:
            cast_synchronizer.sync(session, movie_id, [1, 2, 3], SyncMode.CREATE)
        with database.transaction("test") as session:
            delta = cast_synchronizer.sync(session, movie_id, [], SyncMode.REPLACE)
        assert delta.removed == (1, 2, 3)
        assert _links(database, movie_id) == []


class TestActorValidation:
    """Tests de la validation d'existence des acteurs."""

    def test_missing_actor_raises_with_id(self, database, cast_synchronizer, actors, movie_id):
        """Le premier acteur manquant est identifie."""
        with pytest.raises(ActorNotFoundError) as exc_info:
            with database.transaction("test") as session:
                cast_synchronizer.sync(session, movie_id, [1, 99, 42], SyncMode.CREATE)
        assert exc_info.value.actor_id == 99
        assert "99" in str(exc_info.value)

    def test_missing_actor_leaves_links_untouched(self, database, cast_synchronizer, actors, movie_id):
        """Un echec de validation n'applique aucune modification."""
        with database.transaction("test") as session:
            cast_synchronizer.sync(session, movie_id, [1, 2], SyncMode.CREATE)
        with pytest.raises(ActorNotFoundError):
            with database.transaction("test") as session:
                cast_synchronizer.sync(session, movie_id, [3, 99], SyncMode.REPLACE)
        assert _links(database, movie_id) == [1, 2]


class TestClearAndLoad:
    """Tests de clear, clear_actor et load_casts."""

    def test_clear_removes_movie_links(self, database, cast_synchronizer, actors, movie_id):
        """clear retire tous les liens du film."""
        with database.transaction("test") as session:
            cast_synchronizer.sync(session, movie_id, [1, 2], SyncMode.CREATE)
        with database.transaction("test") as session:
            assert cast_synchronizer.clear(session, movie_id) == 2
        assert _links(database, movie_id) == []

    def test_clear_actor_removes_actor_links(self, database, cast_synchronizer, actors, movie_id):
        """clear_actor retire l'acteur de toutes les distributions."""
        with database.transaction("test") as session:
            cast_synchronizer.sync(session, movie_id, [1, 2], SyncMode.CREATE)
        with database.transaction("test") as session:
            assert cast_synchronizer.clear_actor(session, 2) == 1
        assert _links(database, movie_id) == [1]

    def test_load_casts_groups_by_movie(self, database, cast_synchronizer, actors, movie_id):
        """load_casts retourne la distribution de chaque film demande."""
        with database.transaction("seed") as session:
            other = MovieModel(title="Arrival", director="Denis Villeneuve", year=2016)
            session.add(other)
            session.flush()
            other_id = other.id
            cast_synchronizer.sync(session, movie_id, [3, 1], SyncMode.CREATE)
            cast_synchronizer.sync(session, other_id, [2], SyncMode.CREATE)

        with database.session("test") as session:
            casts = cast_synchronizer.load_casts(session, [movie_id, other_id, 999])

        assert [actor.id for actor in casts[movie_id]] == [1, 3]
        assert [actor.last_name for actor in casts[other_id]] == ["Coleman"]
        assert casts[999] == ()
