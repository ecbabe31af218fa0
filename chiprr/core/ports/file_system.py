"""
Interfaces ports pour le système de fichiers.

Interfaces abstraites (ports) définissant les contrats pour les opérations fichiers
dont les services ont besoin : detection des videos, listage recursif et
creation de liens physiques.
"""

from abc import ABC, abstractmethod
from pathlib import Path
from typing import Iterator


class IFileSystem(ABC):
    """
    Interface pour les opérations sur les fichiers.
    """

    @abstractmethod
    def exists(self, path: Path) -> bool:
        """Vérifie si un chemin existe."""
        ...

    @abstractmethod
    def is_video_file(self, path: Path) -> bool:
        """Vérifie si un chemin designe un fichier video (selon son extension)."""
        ...

    @abstractmethod
    def list_files(self, directory: Path) -> Iterator[Path]:
        """
        Liste recursivement les fichiers reguliers d'un repertoire.

        Args :
            directory : Repertoire racine du parcours

        Retourne :
            Iterateur sur les chemins des fichiers (les liens symboliques sont exclus)
        """
        ...

    @abstractmethod
    def create_hard_link(self, source: Path, destination: Path) -> bool:
        """
        Crée un lien physique vers source a l'emplacement destination.

        Crée les répertoires parents si nécessaire.

        Args :
            source : Fichier existant
            destination : Chemin du lien a creer

        Retourne :
            True si le lien a ete cree, False si destination est deja un lien
            vers le meme fichier

        Raises :
            LinkCreationError : si destination existe et designe un autre fichier,
                                ou si le systeme refuse le lien
        """
        ...
