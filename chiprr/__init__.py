"""
chiprr - Organisation automatique de fichiers d'episodes de series.

Ce package deduit la serie, la saison et l'episode d'un fichier video a partir
de son chemin, confronte cette hypothese au catalogue TMDB, puis cree un lien
physique dans une arborescence canonique.

Architecture : Hexagonale (Ports et Adaptateurs)
- core/ : Couche domaine (objets valeur, ports, exceptions)
- services/ : Couche application (inference de chemin, matching, organisation)
- adapters/ : Couche infrastructure (CLI, client TMDB, systeme de fichiers)
"""

__version__ = "0.1.0"
