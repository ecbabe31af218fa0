"""
Client TMDB pour la recherche de series et de leurs noms alternatifs.

Implemente l'interface ICatalogClient pour TMDB (The Movie Database).
Utilise le cache persistant et le mecanisme de retry pour gerer
le rate limiting.

Usage:
    cache = CatalogCache()
    client = TMDBClient(api_key="your_token", cache=cache)
    entries = await client.search_show("la casa de papel")
    await client.close()
"""

import asyncio
from typing import Any, Optional

import httpx
from loguru import logger

from chiprr.adapters.api.cache import CatalogCache
from chiprr.adapters.api.retry import request_with_retry
from chiprr.core.ports.catalog import CatalogEntry, ICatalogClient
from chiprr.utils.helpers import strip_invisible_chars


def _lowercase_names(*names: Optional[str]) -> frozenset[str]:
    """Ensemble des noms non vides, en minuscules."""
    cleaned = (strip_invisible_chars(name).strip().lower() for name in names if name)
    return frozenset(name for name in cleaned if name)


class TMDBClient(ICatalogClient):
    """
    Client API TMDB pour le catalogue de series.

    Implemente ICatalogClient avec:
    - Recherche de series par nom (/search/tv)
    - Noms alternatifs depuis les traductions (/tv/{id}/translations)
    - Cache persistant (24h recherches, 7j traductions)
    - Retry automatique sur rate limiting (429)

    Si un resultat porte exactement le nom recherche, il est retourne seul
    et aucune traduction n'est demandee.

    Attributes:
        TMDB_BASE_URL: URL de base de l'API TMDB v3
    """

    TMDB_BASE_URL = "https://api.themoviedb.org/3"

    def __init__(self, api_key: str, cache: CatalogCache) -> None:
        """
        Initialise le client TMDB.

        Args:
            api_key: Cle API TMDB (API Key v3 ou Read Access Token v4)
            cache: Instance CatalogCache pour le caching des resultats
        """
        self._api_key = api_key
        self._cache = cache
        self._client: Optional[httpx.AsyncClient] = None

    def _get_client(self) -> httpx.AsyncClient:
        """
        Retourne le client HTTP, le cree si necessaire (lazy init).

        Supporte les deux modes d'authentification TMDB:
        - API Key v3 (32 caracteres hex) : passe en parametre api_key
        - Read Access Token v4 (long JWT) : passe en header Bearer
        """
        if self._client is None or self._client.is_closed:
            is_v4_token = len(self._api_key) > 40

            headers = {"Accept": "application/json"}
            params = {}

            if is_v4_token:
                headers["Authorization"] = f"Bearer {self._api_key}"
            else:
                params["api_key"] = self._api_key

            self._client = httpx.AsyncClient(
                base_url=self.TMDB_BASE_URL,
                headers=headers,
                params=params,
                timeout=30.0,
            )
        return self._client

    async def search_show(self, query: str) -> list[CatalogEntry]:
        """
        Recherche des series par nom.

        Utilise le pattern cache-first: verifie le cache AVANT de faire
        un appel API. Les resultats sont caches pour 24 heures.

        Args:
            query: Nom de serie a rechercher

        Returns:
            Liste de CatalogEntry dans l'ordre TMDB (vide si aucun resultat)
        """
        cache_key = f"tmdb:search_show:{query}"

        cached = await self._cache.get(cache_key)
        if cached is not None:
            logger.debug(f"Cache TMDB : {query!r} ({len(cached)} resultat(s))")
            return cached

        client = self._get_client()
        params = {
            "query": query,
            "include_adult": "true",
            "language": "en-US",
            "page": 1,
        }
        response = await request_with_retry(client, "GET", "/search/tv", params=params)
        items = response.json().get("results", [])
        logger.debug(f"Recherche TMDB : {query!r} -> {len(items)} resultat(s)")

        exact = self._find_exact_name(query, items)
        if exact is not None:
            entries = [self._build_entry(exact, ())]
        else:
            translated_names = await asyncio.gather(
                *(self._get_translated_names(str(item["id"])) for item in items)
            )
            entries = [
                self._build_entry(item, names)
                for item, names in zip(items, translated_names)
            ]

        await self._cache.set_search(cache_key, entries)
        return entries

    @staticmethod
    def _find_exact_name(query: str, items: list[dict[str, Any]]) -> Optional[dict[str, Any]]:
        """Retourne le premier resultat dont le nom est exactement la requete."""
        wanted = query.strip().lower()
        for item in items:
            if (item.get("name") or "").strip().lower() == wanted:
                return item
        return None

    @staticmethod
    def _build_entry(item: dict[str, Any], translated_names: tuple[str, ...]) -> CatalogEntry:
        """Construit une CatalogEntry depuis un resultat de recherche."""
        name = strip_invisible_chars(item.get("name") or item.get("original_name") or "").strip()
        return CatalogEntry(
            id=str(item["id"]),
            canonical_name=name,
            alternate_names=_lowercase_names(
                name, item.get("original_name"), *translated_names
            ),
        )

    async def _get_translated_names(self, show_id: str) -> tuple[str, ...]:
        """
        Recupere les noms traduits d'une serie (cache 7 jours).

        Les traductions sans nom (seul le synopsis est traduit) sont ignorees.
        """
        cache_key = f"tmdb:translations:{show_id}"

        cached = await self._cache.get(cache_key)
        if cached is not None:
            return cached

        client = self._get_client()
        response = await request_with_retry(client, "GET", f"/tv/{show_id}/translations")
        names = tuple(
            translation.get("data", {}).get("name")
            for translation in response.json().get("translations", [])
            if translation.get("data", {}).get("name")
        )

        await self._cache.set_translations(cache_key, names)
        return names

    async def close(self) -> None:
        """
        Ferme le client HTTP.

        Doit etre appele a la fin de l'utilisation pour liberer
        les ressources reseau.
        """
        if self._client is not None and not self._client.is_closed:
            await self._client.aclose()
            self._client = None
