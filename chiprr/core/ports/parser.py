"""
Interface port pour l'inference d'episode depuis un chemin de fichier.
"""

from abc import ABC, abstractmethod
from pathlib import Path
from typing import Union

from chiprr.core.value_objects.path_segment import ParsedSegment


class IPathParser(ABC):
    """
    Interface pour l'analyse d'un chemin de fichier video.

    Chaque element du chemin (repertoires puis fichier) est interprete
    independamment : le matcher pourra ensuite essayer chaque nom de
    repertoire comme hypothese de nom de serie.
    """

    @abstractmethod
    def parse(self, file_path: Union[str, Path]) -> list[ParsedSegment]:
        """
        Analyse un chemin de fichier video.

        Args:
            file_path: Chemin complet ou relatif du fichier

        Retourne:
            Un ParsedSegment par element du chemin, de la racine vers le fichier.
            Le dernier element est toujours de type FILE.
        """
        ...
