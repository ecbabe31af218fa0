"""
Interfaces ports pour le catalogue de series.

Interfaces abstraites (ports) définissant le contrat du catalogue de metadonnees
externe. L'implementation concrete (adaptateur) est le client TMDB.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Awaitable, Callable


@dataclass(frozen=True)
class CatalogEntry:
    """
    Serie candidate retournee par le catalogue.

    Attributs :
        id : ID spécifique au catalogue (ID TMDB)
        canonical_name : Nom officiel de la serie, utilise pour le rangement
        alternate_names : Ensemble des noms connus (traductions, titre original),
                          tous en minuscules
    """

    id: str
    canonical_name: str
    alternate_names: frozenset[str] = field(default_factory=frozenset)


# Capacite de recherche consommee par le matcher : nom -> candidats
CatalogLookup = Callable[[str], Awaitable[list[CatalogEntry]]]


class ICatalogClient(ABC):
    """
    Interface du catalogue de series.

    Une liste vide est une reponse valide (aucun candidat), pas une erreur.
    Les erreurs de transport sont propagees telles quelles.
    """

    @abstractmethod
    async def search_show(self, query: str) -> list[CatalogEntry]:
        """
        Recherche des series par nom.

        Args :
            query : Nom de serie a rechercher

        Retourne :
            Candidats dans l'ordre du catalogue, avec leurs noms alternatifs
        """
        ...
