"""
Constantes globales pour chiprr.

Ce module contient les constantes utilisees dans l'application:
- Extensions video reconnues
- Marqueurs de qualite/codec retires des noms de serie
- Nom du fichier d'exclusion
"""

# Extensions video reconnues (comparaison insensible a la casse)
VIDEO_EXTENSIONS = frozenset({
    ".mp4",
    ".avi",
    ".mov",
    ".wmv",
    ".webm",
    ".flv",
    ".m4v",
    ".mkv",
    ".vob",
    ".ts",
    ".3gp",
    ".asf",
    ".divx",
})

# Marqueurs de qualite et de codec retires des noms (mots entiers, casse ignoree)
QUALITY_TOKENS = (
    "HDTV",
    "720p",
    "1080p",
    "480p",
    "WEB-DL",
    "BluRay",
    "DVDRip",
    "x264",
    "x265",
    "HEVC",
    "AAC",
    "AC3",
)

# Fichier d'exclusion au format gitignore, recherche dans chaque repertoire
IGNORE_FILENAME = ".chiprrignore"
