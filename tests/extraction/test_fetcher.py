# ABOUTME: Tests for the httpx page fetcher using pytest-httpx
# ABOUTME: Verifies request shape, header injection, and FetchError on transport failures

import httpx
import pytest
import pytest_asyncio

from newsmirror.errors import FetchError
from newsmirror.extraction.fetcher import PageFetcher

BASE_URL = "https://news.example.com/news"


@pytest_asyncio.fixture
async def fetcher():
    page_fetcher = PageFetcher(base_url=BASE_URL, timeout=5.0, user_agent="newsmirror-tests/1.0")
    yield page_fetcher
    await page_fetcher.close()


class TestFetch:
    """Test HTTP retrieval of listing pages"""

    @pytest.mark.asyncio
    async def test_fetch_returns_markup(self, fetcher, httpx_mock):
        httpx_mock.add_response(url=f"{BASE_URL}?p=1", text="<html>page one</html>")

        markup = await fetcher.fetch(1)

        assert markup == "<html>page one</html>"

    @pytest.mark.asyncio
    async def test_fetch_sends_page_parameter_and_user_agent(self, fetcher, httpx_mock):
        httpx_mock.add_response(url=f"{BASE_URL}?p=3", text="<html></html>")

        await fetcher.fetch(3)

        request = httpx_mock.get_request()
        assert request.url.params["p"] == "3"
        assert request.headers["User-Agent"] == "newsmirror-tests/1.0"

    @pytest.mark.asyncio
    async def test_non_success_status_raises_fetch_error(self, fetcher, httpx_mock):
        httpx_mock.add_response(url=f"{BASE_URL}?p=2", status_code=503)

        with pytest.raises(FetchError, match="HTTP 503") as exc_info:
            await fetcher.fetch(2)

        assert exc_info.value.page == 2
        assert isinstance(exc_info.value.__cause__, httpx.HTTPStatusError)

    @pytest.mark.asyncio
    async def test_timeout_raises_fetch_error(self, fetcher, httpx_mock):
        httpx_mock.add_exception(httpx.ReadTimeout("timed out"))

        with pytest.raises(FetchError) as exc_info:
            await fetcher.fetch(1)

        assert exc_info.value.page == 1

    @pytest.mark.asyncio
    async def test_connection_failure_raises_fetch_error(self, fetcher, httpx_mock):
        httpx_mock.add_exception(httpx.ConnectError("name or service not known"))

        with pytest.raises(FetchError, match="Could not reach"):
            await fetcher.fetch(1)

    @pytest.mark.asyncio
    async def test_fetch_is_not_retried(self, fetcher, httpx_mock):
        httpx_mock.add_response(url=f"{BASE_URL}?p=1", status_code=500)

        with pytest.raises(FetchError):
            await fetcher.fetch(1)

        assert len(httpx_mock.get_requests()) == 1

    @pytest.mark.asyncio
    async def test_page_must_be_positive(self, fetcher):
        with pytest.raises(ValueError):
            await fetcher.fetch(0)


class TestClientOwnership:
    """Test dependency injection of the httpx client"""

    def test_defaults_come_from_config(self, monkeypatch):
        monkeypatch.setenv("NEWSMIRROR_BASE_URL", "https://mirror.example/list")
        monkeypatch.setenv("NEWSMIRROR_USER_AGENT", "custom-agent")

        page_fetcher = PageFetcher()

        assert page_fetcher.base_url == "https://mirror.example/list"
        assert page_fetcher.http_client.headers["User-Agent"] == "custom-agent"

    @pytest.mark.asyncio
    async def test_injected_client_is_not_closed(self):
        client = httpx.AsyncClient()
        page_fetcher = PageFetcher(base_url=BASE_URL, client=client)

        assert page_fetcher.http_client is client
        await page_fetcher.close()
        assert not client.is_closed
        await client.aclose()

    @pytest.mark.asyncio
    async def test_owned_client_closed_by_context_manager(self):
        async with PageFetcher(base_url=BASE_URL) as page_fetcher:
            client = page_fetcher.http_client

        assert client.is_closed
