"""Jisho.org word search adapter.

Implements DictionaryPort by querying the Jisho word search API and
returning its envelope untouched inside ``{"ok": ..., "data": ...}``.

API: https://jisho.org/api/v1/search/words?keyword=<term>
Response: {"meta": {"status": 200}, "data": [<record>, ...]}
"""

import logging
import os
from typing import Any

import httpx
from tenacity import (
    retry,
    stop_after_attempt,
    wait_exponential,
    retry_if_exception_type,
)

logger = logging.getLogger(__name__)

JISHO_API_URL = os.getenv("JISHO_API_URL", "https://jisho.org/api/v1/search/words")
JISHO_TIMEOUT_SECONDS = float(os.getenv("JISHO_TIMEOUT_SECONDS", "5.0"))
USER_AGENT = "ankify-resolver/0.1"


class JishoAdapter:
    """Adapter that looks up terms in the Jisho word search API.

    Pass ``client`` to share one httpx.AsyncClient across lookups (and to
    inject a MockTransport in tests); otherwise a client is opened per
    lookup.
    """

    def __init__(
        self,
        base_url: str = JISHO_API_URL,
        timeout: float = JISHO_TIMEOUT_SECONDS,
        client: httpx.AsyncClient | None = None,
    ):
        self.base_url = base_url
        self.timeout = timeout
        self._client = client

    async def lookup(self, term: str) -> dict[str, Any] | None:
        """Look up a term.

        Returns:
            ``{"ok": True, "data": <payload>}`` on success, or
            ``{"ok": False, "error": <message>}`` on any failure.
        """
        try:
            if self._client is not None:
                response = await _fetch_with_retry(self._client, self.base_url, term)
            else:
                async with httpx.AsyncClient(
                    timeout=self.timeout, headers={"User-Agent": USER_AGENT},
                ) as client:
                    response = await _fetch_with_retry(client, self.base_url, term)

            response.raise_for_status()
            payload = response.json()

            if not isinstance(payload, dict):
                logger.warning(
                    "Unexpected response type from Jisho API",
                    extra={"term": term, "type": type(payload).__name__},
                )
                return {"ok": False, "error": "unexpected response type"}

            records = payload.get("data")
            logger.debug(
                "Jisho API lookup successful",
                extra={"term": term, "record_count": len(records) if isinstance(records, list) else 0},
            )
            return {"ok": True, "data": payload}

        except httpx.HTTPStatusError as e:
            logger.warning(
                "Jisho API HTTP error",
                extra={"term": term, "status_code": e.response.status_code},
            )
            return {"ok": False, "error": f"HTTP {e.response.status_code}"}
        except httpx.RequestError as e:
            logger.warning(
                "Jisho API request error",
                extra={"term": term, "error_type": type(e).__name__},
            )
            return {"ok": False, "error": type(e).__name__}
        except ValueError as e:
            logger.warning(
                "Jisho API returned invalid JSON",
                extra={"term": term, "error": str(e)},
            )
            return {"ok": False, "error": "invalid JSON"}


# ── HTTP helpers ─────────────────────────────────────────────


@retry(
    retry=retry_if_exception_type((httpx.TimeoutException, httpx.ConnectError)),
    stop=stop_after_attempt(3),
    wait=wait_exponential(multiplier=1, min=1, max=4),
    reraise=True,
)
async def _fetch_with_retry(client: httpx.AsyncClient, url: str, term: str) -> httpx.Response:
    """Fetch URL with automatic retry on transient failures."""
    return await client.get(url, params={"keyword": term})
