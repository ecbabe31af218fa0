"""
Objet valeur pour le resultat du rapprochement avec le catalogue.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class MatchResult:
    """
    Identite definitive d'un episode.

    Attributs:
        show_name: Nom canonique de la serie (depuis le catalogue)
        season: Numero de saison (toujours renseigne)
        episode: Numero d'episode (toujours renseigne)
    """

    show_name: str
    season: int
    episode: int

    @property
    def episode_code(self) -> str:
        """Code standard SxxExx (ex: S01E05)."""
        return f"S{self.season:02d}E{self.episode:02d}"
