# ABOUTME: httpx-based retrieval of paginated listing pages
# ABOUTME: One GET per call, no retry or caching; transport failures surface as FetchError

import httpx

from newsmirror.config import get_config
from newsmirror.errors import FetchError
from newsmirror.utils.logging import get_logger, log_api_call


class PageFetcher:
    """Fetch listing pages by index. Includes an httpx client that callers may inject."""

    def __init__(
        self,
        base_url: str | None = None,
        client: httpx.AsyncClient | None = None,
        timeout: float | None = None,
        user_agent: str | None = None,
    ):
        config = get_config()
        self.base_url = base_url or config.base_url
        self.timeout = timeout or config.request_timeout
        self._owns_client = client is None
        self.http_client = client or httpx.AsyncClient(  # Allow for dependency injection
            headers={"User-Agent": user_agent or config.user_agent},
            timeout=self.timeout,
        )
        self.logger = get_logger(__name__)

    @log_api_call("listing")
    async def fetch(self, page: int) -> str:
        """Fetch the raw HTML of listing page ``page`` (1-based)."""
        if page < 1:
            raise ValueError(f"Page index must be positive, got {page}")

        self.logger.debug("Requesting listing page", page=page, base_url=self.base_url)

        try:
            response = await self.http_client.get(self.base_url, params={"p": page}, follow_redirects=True)
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            raise FetchError(
                f"Listing page {page} returned HTTP {e.response.status_code}", page=page, url=str(e.request.url)
            ) from e
        except httpx.HTTPError as e:
            raise FetchError(f"Could not reach listing page {page}: {e!r}", page=page, url=self.base_url) from e

        self.logger.debug("Received listing page", page=page, url=str(response.url), bytes=len(response.content))
        return response.text

    async def close(self) -> None:
        """Close the HTTP client if this fetcher created it."""
        if self._owns_client:
            await self.http_client.aclose()

    async def __aenter__(self) -> "PageFetcher":
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()
