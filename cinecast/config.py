"""
Configuration de l'application via pydantic-settings.

La configuration est chargée depuis les variables d'environnement avec le préfixe CINECAST_,
et peut optionnellement être fournie via un fichier .env.

L'objet Settings est construit explicitement puis transmis a Database et aux
repositories : aucun etat global n'est lu implicitement.
"""

from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# Trouver le fichier .env à la racine du projet (parent de cinecast/)
_PROJECT_ROOT = Path(__file__).parent.parent
_ENV_FILE = _PROJECT_ROOT / ".env"


class Settings(BaseSettings):
    """Paramètres de l'application avec support des variables d'environnement.

    Tous les paramètres peuvent être surchargés via des variables d'environnement
    avec le préfixe CINECAST_.
    Exemple : CINECAST_MAX_PAGE_SIZE=50
    """

    model_config = SettingsConfigDict(
        env_prefix="CINECAST_",
        env_file=_ENV_FILE if _ENV_FILE.exists() else ".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # Base de données
    database_url: str = Field(default="sqlite:///cinecast.db")
    database_echo: bool = Field(default=False)
    database_timeout: float = Field(default=30.0, gt=0)

    # Pagination (la taille demandee est ramenee silencieusement a max_page_size)
    default_page_size: int = Field(default=10, ge=1)
    max_page_size: int = Field(default=100, ge=1)

    # Logging (fichier + stderr, rotation 10MB, 5 fichiers de rétention)
    log_level: str = Field(default="INFO")
    log_file: Path = Field(default=Path("logs/cinecast.log"))
    log_rotation_size: str = Field(default="10 MB")
    log_retention_count: int = Field(default=5)

    @field_validator("log_file", mode="before")
    @classmethod
    def expand_path(cls, v: str | Path) -> Path:
        """Étend ~ vers le répertoire home dans les chemins."""
        return Path(v).expanduser()

    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_level(cls, v: str) -> str:
        """Normalise le niveau de log en majuscules."""
        return str(v).upper()

    @property
    def is_sqlite(self) -> bool:
        """Vérifie si la base configurée est SQLite."""
        return self.database_url.startswith("sqlite")
