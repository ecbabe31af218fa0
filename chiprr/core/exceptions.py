"""
Hierarchie des exceptions metier de chiprr.

Toutes les erreurs levees volontairement par le domaine et les services
derivent de ChiprrError, ce qui permet a l'orchestrateur de distinguer
un echec attendu (fichier non reconnu) d'une erreur inattendue.
"""

from pathlib import Path
from typing import Optional


class ChiprrError(Exception):
    """Exception de base pour toutes les erreurs specifiques a chiprr."""

    pass


class NoEpisodeInfoError(ChiprrError):
    """
    Aucun element du chemin ne fournit a la fois une saison et un episode.

    Attributes:
        file_path: Chemin du fichier analyse
    """

    def __init__(self, file_path: str) -> None:
        self.file_path = file_path
        super().__init__(f"Aucune information d'episode trouvee dans : {file_path}")


class NoCatalogMatchError(ChiprrError):
    """
    Le catalogue ne retourne aucun candidat pour la requete de dernier recours.

    Attributes:
        query: Nom recherche
    """

    def __init__(self, query: str) -> None:
        self.query = query
        super().__init__(f"Aucune serie trouvee pour le nom : {query!r}")


class LinkCreationError(ChiprrError):
    """
    Le lien physique n'a pas pu etre cree.

    Attributes:
        source: Fichier a lier
        destination: Emplacement du lien
        reason: Cause de l'echec, si connue
    """

    def __init__(
        self, source: Path, destination: Path, reason: Optional[str] = None
    ) -> None:
        self.source = source
        self.destination = destination
        self.reason = reason
        message = f"Impossible de lier {source} vers {destination}"
        if reason:
            message = f"{message} : {reason}"
        super().__init__(message)


class ConfigurationError(ChiprrError):
    """Parametre obligatoire absent ou invalide pour la commande demandee."""

    pass
