"""
Relance des requetes au catalogue saturé (HTTP 429).

Seules les reponses 429 sont relancees. Le delai suit un backoff exponentiel
avec jitter, allonge si besoin jusqu'a la valeur du header Retry-After.
Les autres erreurs de transport remontent immediatement : c'est a
l'organisateur de classer le fichier en echec.

Usage:
    response = await request_with_retry(client, "GET", "/search/tv", params=params)
"""

from typing import Optional

import httpx
from loguru import logger
from tenacity import (
    RetryCallState,
    retry,
    retry_if_exception_type,
    stop_after_attempt,
    wait_random_exponential,
)

from chiprr.core.exceptions import ChiprrError


class RateLimitError(ChiprrError):
    """
    Le catalogue a repondu 429 Too Many Requests.

    Attributes:
        retry_after: Secondes a attendre selon le header Retry-After,
                     ou None si absent ou illisible
    """

    def __init__(self, retry_after: Optional[int] = None) -> None:
        self.retry_after = retry_after
        delay = f"{retry_after}s" if retry_after is not None else "inconnu"
        super().__init__(f"Catalogue sature (429), delai demande : {delay}")


def parse_retry_after(value: Optional[str]) -> Optional[int]:
    """Lit un header Retry-After exprime en secondes (les dates HTTP sont ignorees)."""
    if value is None or not value.strip().isdigit():
        return None
    return int(value.strip())


def _catalog_wait(max_wait: int):
    """Backoff exponentiel, jamais plus court que le Retry-After (plafonne a max_wait)."""
    backoff = wait_random_exponential(multiplier=1, min=1, max=max_wait)

    def _wait(retry_state: RetryCallState) -> float:
        delay = backoff(retry_state)
        error = retry_state.outcome.exception() if retry_state.outcome else None
        if isinstance(error, RateLimitError) and error.retry_after:
            delay = max(delay, min(error.retry_after, max_wait))
        return delay

    return _wait


def _log_retry(retry_state: RetryCallState) -> None:
    sleep = retry_state.next_action.sleep if retry_state.next_action else 0
    logger.debug(
        f"Catalogue sature, tentative {retry_state.attempt_number} echouee, "
        f"nouvel essai dans {sleep:.1f}s"
    )


def with_retry(max_attempts: int = 5, max_wait: int = 60):
    """
    Decorateur de relance sur RateLimitError pour une coroutine.

    Le jitter evite que les fichiers traites en parallele relancent tous
    au meme instant.

    Args:
        max_attempts: Nombre maximum de tentatives
        max_wait: Delai maximum entre deux tentatives, en secondes
    """
    return retry(
        retry=retry_if_exception_type(RateLimitError),
        wait=_catalog_wait(max_wait),
        stop=stop_after_attempt(max_attempts),
        before_sleep=_log_retry,
        reraise=True,
    )


async def request_with_retry(
    client: httpx.AsyncClient,
    method: str,
    url: str,
    max_attempts: int = 5,
    **kwargs,
) -> httpx.Response:
    """
    Execute une requete au catalogue, relancee tant qu'elle recoit un 429.

    Args:
        client: Client httpx async (base_url deja configuree)
        method: Methode HTTP
        url: Chemin relatif a la base_url
        max_attempts: Nombre maximum de tentatives
        **kwargs: Transmis a client.request()

    Raises:
        RateLimitError: Si le catalogue repond encore 429 apres max_attempts
        httpx.HTTPStatusError: Pour toute autre reponse en erreur
    """

    @with_retry(max_attempts=max_attempts)
    async def _send() -> httpx.Response:
        response = await client.request(method, url, **kwargs)
        if response.status_code == 429:
            raise RateLimitError(parse_retry_after(response.headers.get("Retry-After")))
        response.raise_for_status()
        return response

    return await _send()
