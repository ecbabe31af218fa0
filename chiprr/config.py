"""
Configuration de l'application via pydantic-settings.

La configuration est chargée depuis les variables d'environnement avec le préfixe CHIPRR_,
et peut optionnellement être fournie via un fichier .env.

Les repertoires et le jeton TMDB sont optionnels ici : chaque commande verifie
ceux dont elle a besoin (voir require_settings) et les options CLI les surchargent.
"""

from pathlib import Path
from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from chiprr.core.exceptions import ConfigurationError

# Trouver le fichier .env à la racine du projet (parent de chiprr/)
_PROJECT_ROOT = Path(__file__).parent.parent
_ENV_FILE = _PROJECT_ROOT / ".env"


class Settings(BaseSettings):
    """Paramètres de l'application avec support des variables d'environnement.

    Tous les paramètres peuvent être surchargés via des variables d'environnement
    avec le préfixe CHIPRR_.
    Exemple : CHIPRR_TMDB_TOKEN=eyJhbGciOi... CHIPRR_LOG_LEVEL=DEBUG

    Les chemins sont automatiquement étendus (~ -> répertoire home).
    """

    model_config = SettingsConfigDict(
        env_prefix="CHIPRR_",
        env_file=_ENV_FILE if _ENV_FILE.exists() else ".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # Chemins (avec expansion ~)
    input_dir: Optional[Path] = Field(default=None)
    sorted_dir: Optional[Path] = Field(default=None)
    cache_dir: Path = Field(default=Path(".cache/tmdb"))

    # Jeton TMDB (API Key v3 ou Read Access Token v4)
    tmdb_token: Optional[str] = Field(default=None)

    # Traitement
    max_concurrent_files: int = Field(default=4, ge=1)

    # Logging (fichier + stderr, rotation 10MB, 5 fichiers de rétention)
    log_level: str = Field(default="INFO")
    log_file: Path = Field(default=Path("logs/chiprr.log"))
    log_rotation_size: str = Field(default="10 MB")
    log_retention_count: int = Field(default=5)

    @field_validator("input_dir", "sorted_dir", "cache_dir", "log_file", mode="before")
    @classmethod
    def expand_path(cls, v: Optional[str | Path]) -> Optional[Path]:
        """Étend ~ vers le répertoire home dans les chemins."""
        if v is None or v == "":
            return None
        return Path(v).expanduser()

    @field_validator("log_level")
    @classmethod
    def normalize_log_level(cls, v: str) -> str:
        return v.upper()

    @property
    def tmdb_enabled(self) -> bool:
        """Vérifie si l'API TMDB est configurée."""
        return bool(self.tmdb_token)


def require_settings(settings: Settings, *names: str) -> None:
    """
    Vérifie que les paramètres nécessaires à une commande sont renseignés.

    Raises:
        ConfigurationError: Avec la liste des paramètres manquants
    """
    missing = [name for name in names if not getattr(settings, name)]
    if missing:
        variables = ", ".join(f"CHIPRR_{name.upper()}" for name in missing)
        raise ConfigurationError(f"Paramètre(s) manquant(s) : {variables}")
