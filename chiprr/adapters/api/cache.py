"""
Cache persistant des reponses du catalogue, avec TTL differencies.

Le cache utilise diskcache pour la persistence sur disque : les recherches
deja faites survivent aux redemarrages et ne coutent plus de requete HTTP.
Les ecritures sont idempotentes (une meme requete donne toujours la meme
valeur), deux taches concurrentes peuvent donc ecrire la meme cle sans verrou.

TTL par defaut:
- Recherches (SEARCH_TTL): 24 heures, de nouvelles series apparaissent
- Traductions (TRANSLATIONS_TTL): 7 jours, les noms d'une serie changent rarement
"""

import asyncio
from functools import partial
from pathlib import Path
from typing import Any, Callable, Optional, Union

from diskcache import Cache


class CatalogCache:
    """
    Cache asynchrone des recherches de series et de leurs traductions.

    Les acces disque de diskcache sont bloquants : ils passent par
    l'executor par defaut de la boucle.

    Example:
        cache = CatalogCache(cache_dir=".cache/tmdb")
        await cache.set_search("tmdb:search_show:breaking bad", entries)
        entries = await cache.get("tmdb:search_show:breaking bad")
    """

    SEARCH_TTL = 24 * 60 * 60
    TRANSLATIONS_TTL = 7 * 24 * 60 * 60

    def __init__(self, cache_dir: Union[str, Path] = ".cache/tmdb") -> None:
        self._cache = Cache(str(cache_dir))

    async def _in_executor(self, func: Callable[..., Any], *args: Any, **kwargs: Any) -> Any:
        loop = asyncio.get_running_loop()
        return await loop.run_in_executor(None, partial(func, *args, **kwargs))

    async def get(self, key: str) -> Optional[Any]:
        """Valeur associee a key, ou None si absente ou expiree."""
        return await self._in_executor(self._cache.get, key)

    async def set(self, key: str, value: Any, ttl: int) -> None:
        """Stocke value (picklable) pour ttl secondes."""
        await self._in_executor(self._cache.set, key, value, expire=ttl)

    async def set_search(self, key: str, value: Any) -> None:
        """Stocke un resultat de recherche (TTL de 24h)."""
        await self.set(key, value, self.SEARCH_TTL)

    async def set_translations(self, key: str, value: Any) -> None:
        """Stocke les noms traduits d'une serie (TTL de 7 jours)."""
        await self.set(key, value, self.TRANSLATIONS_TTL)

    def close(self) -> None:
        """Ferme la base du cache, en fin de commande."""
        self._cache.close()
