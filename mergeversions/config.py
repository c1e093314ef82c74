"""
Configuration de l'application via pydantic-settings.

La configuration est chargée depuis les variables d'environnement avec le préfixe
MERGEVERSIONS_, et peut optionnellement être fournie via un fichier .env.

Les listes (emplacements exclus) s'écrivent en JSON dans l'environnement :
MERGEVERSIONS_LOCATIONS_EXCLUDED='["/media/films/3D", "~/Vidéos/Temp"]'
"""

from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# Trouver le fichier .env à la racine du projet (parent de mergeversions/)
_PROJECT_ROOT = Path(__file__).parent.parent
_ENV_FILE = _PROJECT_ROOT / ".env"


class Settings(BaseSettings):
    """Paramètres de l'application avec support des variables d'environnement.

    Tous les paramètres peuvent être surchargés via des variables d'environnement
    avec le préfixe MERGEVERSIONS_.
    Exemple : MERGEVERSIONS_LOG_LEVEL=DEBUG

    Les chemins sont automatiquement étendus (~ -> répertoire home).
    """

    model_config = SettingsConfigDict(
        env_prefix="MERGEVERSIONS_",
        env_file=_ENV_FILE if _ENV_FILE.exists() else ".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # Base de données
    database_url: str = Field(default="sqlite:///mergeversions.db")

    # Emplacements dont les éléments ne sont jamais regroupés ni séparés
    locations_excluded: list[Path] = Field(default_factory=list)

    # Logging (fichier + stderr, rotation 10MB, 5 fichiers de rétention)
    log_level: str = Field(default="INFO")
    log_file: Path = Field(default=Path("logs/mergeversions.log"))
    log_rotation_size: str = Field(default="10 MB")
    log_retention_count: int = Field(default=5, ge=1)

    @field_validator("log_file", mode="before")
    @classmethod
    def expand_path(cls, v: str | Path) -> Path:
        """Étend ~ vers le répertoire home dans les chemins."""
        return Path(v).expanduser()

    @field_validator("locations_excluded", mode="before")
    @classmethod
    def expand_locations(cls, v: list[str | Path] | None) -> list[Path]:
        """Étend ~ dans chaque emplacement exclu."""
        if not v:
            return []
        return [Path(loc).expanduser() for loc in v]
