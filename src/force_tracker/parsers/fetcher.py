# src/force_tracker/parsers/fetcher.py

import logging
from time import monotonic

import httpx

from force_tracker.errors import FetchError
from force_tracker.observability import names
from force_tracker.observability.base import MetricsHook, NoOpMetricsHook

from .config import FetcherConfig

logger = logging.getLogger(__name__)


class DocumentFetcher:
    """Downloads an uploaded document from its public URL.

    Single attempt, no retries. The HTTP client may be injected; otherwise
    one is built from config and owned by the fetcher.
    """

    def __init__(
        self,
        client: httpx.AsyncClient | None = None,
        config: FetcherConfig = FetcherConfig(),
        metrics_hook: MetricsHook = NoOpMetricsHook(),
    ) -> None:
        self._owns_client = client is None
        self._client = client or httpx.AsyncClient(
            timeout=config.timeout,
            follow_redirects=config.follow_redirects,
        )
        self.metrics_hook = metrics_hook

    async def fetch(self, url: str) -> bytes:
        start = monotonic()
        logger.debug("Fetching document: %s", url)

        try:
            response = await self._client.get(url)
            response.raise_for_status()
        except httpx.HTTPError as exc:
            self.metrics_hook.increment(
                names.DOCUMENT_ERRORS_TOTAL, labels={"stage": "fetch"}
            )
            logger.error("Failed to fetch document %s: %s", url, exc)
            raise FetchError(f"Could not fetch document: {url}") from exc

        elapsed_ms = 1000 * (monotonic() - start)
        self.metrics_hook.record_latency(names.DOCUMENT_FETCH_DURATION, elapsed_ms)
        logger.info(
            "Fetched %d bytes in %.0fms from %s", len(response.content), elapsed_ms, url
        )
        return response.content

    async def aclose(self) -> None:
        if self._owns_client:
            await self._client.aclose()
