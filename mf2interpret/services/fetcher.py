"""
Mf2Fetcher - fetch a URL and parse it for microformats2

The default fetch collaborator for authorship discovery. It is never used
implicitly; pass its bound `fetch` method to the interpreters:

    async with Mf2Fetcher() as fetcher:
        doc = await fetcher.fetch("https://example.com/post/1")
        entry = await interpret_entry(doc, "https://example.com/post/1",
                                      fetch=fetcher.fetch)

HTTP errors are raised (httpx.HTTPStatusError, httpx.TransportError) and
not retried.
"""
import logging
from typing import Optional

import httpx
import mf2py

from ..config import get_settings
from ..models.document import Mf2Document

logger = logging.getLogger(__name__)


def parse_html(html: str, url: Optional[str] = None) -> Mf2Document:
    """
    Parse markup for microformats2.

    Args:
        html: page markup
        url: URL the page was served from, used to resolve relative URLs

    Returns:
        Parsed document
    """
    parsed = mf2py.parse(doc=html, url=url)
    return Mf2Document.from_dict(parsed)


class Mf2Fetcher:
    """
    Async fetcher that returns parsed mf2 documents.

    A client can be injected (shared pool, tests with MockTransport);
    otherwise one is created from settings and closed with the fetcher.
    """

    def __init__(self, client: Optional[httpx.AsyncClient] = None):
        self._owns_client = client is None
        self.client = client

    def _ensure_client(self) -> httpx.AsyncClient:
        """Ensure an httpx client exists."""
        if self.client is None or self.client.is_closed:
            settings = get_settings()
            self.client = httpx.AsyncClient(
                timeout=settings.http_timeout,
                follow_redirects=settings.follow_redirects,
                headers={'User-Agent': settings.user_agent},
            )
            self._owns_client = True
        return self.client

    async def fetch(self, url: str) -> Mf2Document:
        """
        Fetch document from URL and parse it for mf2.

        Relative URLs resolve against the final URL after redirects.
        """
        client = self._ensure_client()
        logger.info(f"Fetching {url}")
        response = await client.get(url)
        response.raise_for_status()
        final_url = str(response.url)
        if final_url != url:
            logger.debug(f"{url} redirected to {final_url}")
        return parse_html(response.text, final_url)

    async def close(self):
        """Close the client if this fetcher created it."""
        if self._owns_client and self.client is not None and not self.client.is_closed:
            await self.client.aclose()

    async def __aenter__(self) -> "Mf2Fetcher":
        return self

    async def __aexit__(self, exc_type, exc, tb):
        await self.close()
