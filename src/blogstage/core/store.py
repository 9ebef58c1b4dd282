"""Document stores.

A document store maps a post id to its raw markdown text. The resolver only
depends on the DocumentStore protocol, so content can live in a directory, in
the installed package, or behind an HTTP server.
"""

import asyncio
import logging
from importlib.resources import files
from pathlib import Path
from typing import TYPE_CHECKING, Protocol
from urllib.parse import quote

import httpx

from blogstage.core.errors import DocumentLoadError

if TYPE_CHECKING:
    from blogstage.config import PostsConfig

logger = logging.getLogger(__name__)

DOCUMENT_SUFFIX = ".md"


class DocumentStore(Protocol):
    """Source of raw post documents."""

    async def get(self, post_id: str) -> str:
        """Return the raw document text for a post.

        Raises:
            DocumentLoadError: If the document is missing or unreadable
        """
        ...


class FileDocumentStore:
    """Reads `<source_dir>/<post_id>.md` files as UTF-8."""

    def __init__(self, source_dir: Path) -> None:
        self._source_dir = source_dir

    @property
    def source_dir(self) -> Path:
        """Directory containing post documents."""
        return self._source_dir

    async def get(self, post_id: str) -> str:
        path = self._source_dir / f"{post_id}{DOCUMENT_SUFFIX}"
        logger.debug(f"Reading post document {path}")
        try:
            return await asyncio.to_thread(path.read_text, encoding="utf-8")
        except (OSError, UnicodeDecodeError, ValueError) as e:
            raise DocumentLoadError(post_id, str(e)) from e


class BundledDocumentStore:
    """Reads post documents shipped inside an installed package."""

    def __init__(self, package: str = "blogstage", directory: str = "content") -> None:
        self._package = package
        self._directory = directory

    async def get(self, post_id: str) -> str:
        return await asyncio.to_thread(self._read, post_id)

    def _read(self, post_id: str) -> str:
        resource = files(self._package).joinpath(self._directory, f"{post_id}{DOCUMENT_SUFFIX}")
        try:
            if not resource.is_file():
                raise DocumentLoadError(post_id, f"no bundled document in {self._package}/{self._directory}")
            return resource.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError, ValueError) as e:
            raise DocumentLoadError(post_id, str(e)) from e


class HttpDocumentStore:
    """Fetches `<base_url>/<post_id>.md` over HTTP."""

    def __init__(
        self,
        base_url: str,
        client: httpx.AsyncClient | None = None,
        *,
        timeout: float = 10.0,
    ) -> None:
        """Initialize HTTP store.

        Args:
            base_url: URL prefix documents are served under
                      (e.g., "http://127.0.0.1:8080/posts")
            client: Shared AsyncClient; a short-lived one is opened per
                    request when omitted
            timeout: Request timeout in seconds for owned clients
        """
        self.base_url = base_url.rstrip("/")
        self._client = client
        self._timeout = timeout

    async def get(self, post_id: str) -> str:
        url = f"{self.base_url}/{quote(post_id, safe='')}{DOCUMENT_SUFFIX}"
        logger.debug(f"Fetching post document {url}")
        try:
            if self._client is not None:
                response = await self._client.get(url)
            else:
                async with httpx.AsyncClient(timeout=self._timeout) as client:
                    response = await client.get(url)
            response.raise_for_status()
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            raise DocumentLoadError(post_id, str(e)) from e
        return response.text


def create_document_store(config: "PostsConfig") -> DocumentStore:
    """Pick a document store for the posts configuration.

    HTTP wins over a source directory; bundled content is the fallback.
    """
    if config.base_url:
        return HttpDocumentStore(config.base_url)
    if config.source_dir is not None:
        return FileDocumentStore(config.source_dir)
    return BundledDocumentStore()
