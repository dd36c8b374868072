"""
Adapter: HTTP trade document source.

Implements TradeDocumentSource.
Reads raw trade-state documents over HTTP with httpx. No retries, no caching.
"""

import logging

import httpx

from app.domain.trade.errors import TransportError
from app.domain.trade.ports import TradeDocumentSource

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT_SECONDS = 10.0


class HttpTradeDocumentSource(TradeDocumentSource):
    """Fetches trade documents with a blocking httpx client.

    Args:
        timeout: Request timeout in seconds.
        transport: Optional httpx transport (used to stub the network in tests).
    """

    def __init__(
        self,
        timeout: float = DEFAULT_TIMEOUT_SECONDS,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        self._timeout = timeout
        self._transport = transport

    def fetch(self, url: str) -> str:
        """Return the body of a GET on `url`.

        Raises:
            TransportError: On connection failures, timeouts and non-2xx responses.
        """
        try:
            with httpx.Client(
                timeout=self._timeout,
                transport=self._transport,
                follow_redirects=True,
            ) as client:
                response = client.get(url, headers={"Accept": "application/json"})
                response.raise_for_status()
        except httpx.HTTPStatusError as exc:
            logger.error("GET %s returned %d", url, exc.response.status_code)
            raise TransportError(url, f"HTTP {exc.response.status_code}") from exc
        except httpx.HTTPError as exc:
            logger.error("GET %s failed: %s", url, exc)
            raise TransportError(url, type(exc).__name__) from exc

        logger.debug("Fetched %d bytes from %s", len(response.content), url)
        return response.text
