"""
Utilitaires et constantes pour chiprr.

Ce module contient les constantes et fonctions utilitaires partagees.
"""

from chiprr.utils.constants import (
    IGNORE_FILENAME,
    QUALITY_TOKENS,
    VIDEO_EXTENSIONS,
)

__all__ = [
    "VIDEO_EXTENSIONS",
    "QUALITY_TOKENS",
    "IGNORE_FILENAME",
]
