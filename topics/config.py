"""
Configuration de l'application via pydantic-settings.

La configuration est chargée depuis les variables d'environnement avec le préfixe TOPICS_,
et peut optionnellement être fournie via un fichier .env.

Le backend de stockage par défaut est la mémoire ; "sqlite" active les
repositories SQLModel sur TOPICS_DATABASE_URL.
"""

from pathlib import Path
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# Trouver le fichier .env à la racine du projet (parent de topics/)
_PROJECT_ROOT = Path(__file__).parent.parent
_ENV_FILE = _PROJECT_ROOT / ".env"


class Settings(BaseSettings):
    """Paramètres de l'application avec support des variables d'environnement.

    Tous les paramètres peuvent être surchargés via des variables d'environnement
    avec le préfixe TOPICS_.
    Exemple : TOPICS_STORAGE_BACKEND=sqlite
    """

    model_config = SettingsConfigDict(
        env_prefix="TOPICS_",
        env_file=_ENV_FILE if _ENV_FILE.exists() else ".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # Stockage
    storage_backend: Literal["memory", "sqlite"] = Field(default="memory")
    database_url: str = Field(default="sqlite:///topics.db")

    # Tenant appliqué aux messages envoyés sans tenant explicite
    default_tenancy: str = Field(default="tenancy/default", min_length=1)

    # Logging (fichier + stderr, rotation 10MB, 5 fichiers de rétention)
    log_level: str = Field(default="INFO")
    log_file: Path = Field(default=Path("logs/topics.log"))
    events_file: Path = Field(default=Path("logs/events.log"))
    log_rotation_size: str = Field(default="10 MB")
    log_retention_count: int = Field(default=5, ge=1)

    @field_validator("log_file", "events_file", mode="before")
    @classmethod
    def expand_path(cls, v: str | Path) -> Path:
        """Étend ~ vers le répertoire home dans les chemins."""
        return Path(v).expanduser()

    @property
    def persistent(self) -> bool:
        """Vérifie si le stockage survit au processus."""
        return self.storage_backend == "sqlite"
