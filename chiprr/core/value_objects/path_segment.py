"""
Objets valeur pour les elements d'un chemin de fichier video.

Un chemin est decoupe en segments (repertoires puis fichier). Chaque segment
est analyse independamment pour produire un ParsedSegment : un nom de serie
"au mieux" et, si le segment en contient, un numero de saison et d'episode.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class SegmentType(Enum):
    """Nature d'un element de chemin.

    Valeurs:
        FILE: Dernier element du chemin (le fichier video)
        DIRECTORY: Repertoire parent
    """

    FILE = "file"
    DIRECTORY = "directory"


@dataclass(frozen=True)
class PathSegment:
    """
    Element brut d'un chemin, tel qu'il apparait sur le systeme de fichiers.

    Attributs:
        raw_name: Nom original de l'element (avec extension pour un fichier)
        type: FILE pour le dernier element, DIRECTORY sinon
        index: Position depuis la racine du chemin (0 = le plus eloigne du fichier)
    """

    raw_name: str
    type: SegmentType
    index: int


@dataclass(frozen=True)
class ParsedSegment:
    """
    Interpretation d'un element de chemin.

    Attributs:
        raw_name: Nom original de l'element
        best_effort_show_name: Nom de serie nettoye et en minuscules
        season: Numero de saison, ou None si le segment n'en porte pas
        episode: Numero d'episode, ou None si le segment n'en porte pas
        type: FILE ou DIRECTORY
        index: Position depuis la racine du chemin
    """

    raw_name: str
    best_effort_show_name: str
    season: Optional[int]
    episode: Optional[int]
    type: SegmentType
    index: int

    @property
    def has_episode_info(self) -> bool:
        """True si la saison ET l'episode sont connus."""
        return self.season is not None and self.episode is not None

    @property
    def is_file(self) -> bool:
        """True si le segment est le fichier video."""
        return self.type == SegmentType.FILE
