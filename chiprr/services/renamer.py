"""
Service de nommage des episodes ranges.

Ce module fournit les fonctions de generation des chemins standardises
dans l'arborescence de rangement.

Format : <Serie>/Season <N>/<Serie> SxxExx.ext
"""

import unicodedata
from pathlib import Path

from pathvalidate import sanitize_filename

from chiprr.core.value_objects.match_result import MatchResult


# Longueur maximale du nom de fichier (hors extension)
MAX_FILENAME_LENGTH = 200

# Caractères spéciaux à remplacer par un tiret
# Note: pathvalidate gère déjà / \ : * " < > |
# Mais on veut un remplacement explicite par tiret
SPECIAL_CHARS_TO_DASH = frozenset({":", "/", "\\", "*", '"', "<", ">", "|"})

# Placeholder temporaire pour préserver les points de suspension
_ELLIPSIS_PLACEHOLDER = "…"


def sanitize_for_filesystem(text: str) -> str:
    """
    Nettoie une chaîne pour l'utiliser comme nom de fichier ou de repertoire.

    Transformations appliquées :
    - Normalisation Unicode NFKC
    - Caractères spéciaux (: / \\ * " < > |) -> tiret
    - Point d'interrogation (?) -> points de suspension (...)
    - Troncature à 200 caractères maximum

    Args:
        text: Texte à nettoyer.

    Returns:
        Texte valide pour un nom de fichier.
    """
    if not text:
        return ""

    text = unicodedata.normalize("NFKC", text)

    for char in SPECIAL_CHARS_TO_DASH:
        text = text.replace(char, "-")

    # pathvalidate supprime les points finaux
    text = text.replace("?", _ELLIPSIS_PLACEHOLDER)
    text = sanitize_filename(text, platform="universal", replacement_text="")
    text = text.replace(_ELLIPSIS_PLACEHOLDER, "...")

    if len(text) > MAX_FILENAME_LENGTH:
        text = text[:MAX_FILENAME_LENGTH]

    return text.strip()


def format_season_directory(season: int) -> str:
    """Nom du repertoire de saison, sans zero de remplissage ("Season 1")."""
    return f"Season {season}"


def generate_episode_filename(match: MatchResult, extension: str) -> str:
    """
    Genere le nom de fichier d'un episode.

    Args:
        match: Identite resolue de l'episode.
        extension: Extension du fichier source, avec ou sans point.

    Returns:
        Nom au format "Serie S01E05.mkv".
    """
    show = sanitize_for_filesystem(match.show_name)
    extension = extension.lstrip(".")
    if not extension:
        return f"{show} {match.episode_code}"
    return f"{show} {match.episode_code}.{extension}"


def build_episode_destination(sorted_dir: Path, match: MatchResult, extension: str) -> Path:
    """
    Construit le chemin complet du lien dans l'arborescence de rangement.

    Example:
        >>> build_episode_destination(Path("/sorted"), MatchResult("Money Heist", 2, 3), ".mkv")
        PosixPath('/sorted/Money Heist/Season 2/Money Heist S02E03.mkv')
    """
    return (
        sorted_dir
        / sanitize_for_filesystem(match.show_name)
        / format_season_directory(match.season)
        / generate_episode_filename(match, extension)
    )
