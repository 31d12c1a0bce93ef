"""
Modeles SQLModel pour la base de donnees CineCast.

Ces modeles representent les tables de la base de donnees.
Ils sont distincts des entites de domaine (dataclass dans core/entities/)
selon l'architecture hexagonale.

Tables:
- movies: Films
- actors: Acteurs
- movie_actors: Liens de distribution (un seul lien par couple film/acteur)
"""

from datetime import datetime, timezone

from sqlmodel import Field, SQLModel


def utcnow() -> datetime:
    """Horodatage UTC des ecritures."""
    return datetime.now(timezone.utc)


class MovieModel(SQLModel, table=True):
    """
    Modele representant un film dans la base de donnees.

    La distribution n'est pas stockee ici : elle vit dans movie_actors
    et n'est ecrite que par le CastSynchronizer.
    """

    __tablename__ = "movies"
    # Un ID supprime n'est jamais reattribue
    __table_args__ = {"sqlite_autoincrement": True}

    id: int | None = Field(default=None, primary_key=True)
    title: str = Field(max_length=255, index=True)
    director: str = Field(max_length=255)
    year: int = Field(index=True)
    synopsis: str = Field(default="")
    created_at: datetime | None = Field(default_factory=utcnow)
    updated_at: datetime | None = Field(default_factory=utcnow)


class ActorModel(SQLModel, table=True):
    """Modele representant un acteur dans la base de donnees."""

    __tablename__ = "actors"
    __table_args__ = {"sqlite_autoincrement": True}

    id: int | None = Field(default=None, primary_key=True)
    first_name: str = Field(max_length=32)
    last_name: str = Field(max_length=32, index=True)
    role: str = Field(default="actor", max_length=32)
    created_at: datetime | None = Field(default_factory=utcnow)
    updated_at: datetime | None = Field(default_factory=utcnow)


class MovieActorModel(SQLModel, table=True):
    """
    Lien de distribution entre un film et un acteur.

    La cle primaire composite garantit l'unicite du couple (movie_id, actor_id).
    """

    __tablename__ = "movie_actors"

    movie_id: int = Field(foreign_key="movies.id", primary_key=True)
    actor_id: int = Field(foreign_key="actors.id", primary_key=True, index=True)
