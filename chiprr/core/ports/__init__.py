"""
Ports (interfaces abstraites) définissant les contrats pour les adaptateurs.

Les ports sont les frontières de l'architecture hexagonale. Ils définissent
ce dont le domaine a besoin du monde extérieur sans spécifier
comment ces besoins sont satisfaits.

Port catalogue : Contrat du service de metadonnees externe
- ICatalogClient : Recherche de series par nom
- CatalogEntry : Serie candidate avec ses noms alternatifs
- CatalogLookup : Signature de la capacite de recherche consommee par le matcher

Port parser : Contrat d'inference depuis un chemin
- IPathParser : Decoupage et interpretation des elements d'un chemin

Port système de fichiers : Contrat pour les opérations fichiers
- IFileSystem : Detection video, listage, liens physiques
"""

from chiprr.core.ports.catalog import (
    CatalogEntry,
    CatalogLookup,
    ICatalogClient,
)
from chiprr.core.ports.file_system import IFileSystem
from chiprr.core.ports.parser import IPathParser

__all__ = [
    # Catalogue
    "ICatalogClient",
    "CatalogEntry",
    "CatalogLookup",
    # Parser
    "IPathParser",
    # Système de fichiers
    "IFileSystem",
]
