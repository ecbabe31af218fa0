"""
Tests unitaires pour le mecanisme de retry avec backoff exponentiel.

Ces tests verifient:
- RateLimitError capture le header Retry-After
- with_retry relance sur RateLimitError
- request_with_retry detecte les 429 et relance automatiquement
- Les autres erreurs HTTP remontent sans relance
"""

import httpx
import pytest
import respx

from chiprr.adapters.api.retry import (
    RateLimitError,
    parse_retry_after,
    request_with_retry,
    with_retry,
)
from chiprr.core.exceptions import ChiprrError


class TestRateLimitError:
    """Tests pour l'exception RateLimitError."""

    def test_rate_limit_error_stores_retry_after(self) -> None:
        error = RateLimitError(retry_after=60)
        assert error.retry_after == 60
        assert "60" in str(error)

    def test_rate_limit_error_without_retry_after(self) -> None:
        assert RateLimitError().retry_after is None

    def test_is_a_chiprr_error(self) -> None:
        assert isinstance(RateLimitError(), ChiprrError)

    @pytest.mark.parametrize(
        "header, expected",
        [("30", 30), (" 5 ", 5), (None, None), ("", None), ("Wed, 21 Oct 2015 07:28:00 GMT", None)],
    )
    def test_parse_retry_after(self, header, expected) -> None:
        assert parse_retry_after(header) == expected


class TestWithRetryDecorator:
    """Tests pour le decorateur with_retry."""

    @pytest.mark.asyncio
    async def test_retries_until_success(self) -> None:
        """with_retry relance quand RateLimitError est levee."""
        call_count = 0

        @with_retry(max_attempts=3, max_wait=1)
        async def flaky() -> str:
            nonlocal call_count
            call_count += 1
            if call_count < 2:
                raise RateLimitError(retry_after=1)
            return "ok"

        assert await flaky() == "ok"
        assert call_count == 2

    @pytest.mark.asyncio
    async def test_reraises_after_max_attempts(self) -> None:
        """with_retry abandonne apres max_attempts et relance l'exception d'origine."""
        call_count = 0

        @with_retry(max_attempts=2, max_wait=1)
        async def always_limited() -> str:
            nonlocal call_count
            call_count += 1
            raise RateLimitError(retry_after=1)

        with pytest.raises(RateLimitError):
            await always_limited()
        assert call_count == 2

    @pytest.mark.asyncio
    async def test_other_exceptions_are_not_retried(self) -> None:
        call_count = 0

        @with_retry(max_attempts=3, max_wait=1)
        async def broken() -> str:
            nonlocal call_count
            call_count += 1
            raise ValueError("boom")

        with pytest.raises(ValueError):
            await broken()
        assert call_count == 1


class TestRequestWithRetry:
    """Tests pour request_with_retry."""

    @pytest.mark.asyncio
    @respx.mock
    async def test_retries_on_429_then_succeeds(self) -> None:
        route = respx.get("https://api.example.com/search/tv").mock(
            side_effect=[
                httpx.Response(429, headers={"Retry-After": "1"}),
                httpx.Response(200, json={"results": []}),
            ]
        )

        async with httpx.AsyncClient(base_url="https://api.example.com") as client:
            response = await request_with_retry(client, "GET", "/search/tv", max_attempts=3)

        assert response.status_code == 200
        assert route.call_count == 2

    @pytest.mark.asyncio
    @respx.mock
    async def test_server_error_propagates_without_retry(self) -> None:
        route = respx.get("https://api.example.com/search/tv").mock(
            return_value=httpx.Response(500)
        )

        async with httpx.AsyncClient(base_url="https://api.example.com") as client:
            with pytest.raises(httpx.HTTPStatusError):
                await request_with_retry(client, "GET", "/search/tv")

        assert route.call_count == 1
