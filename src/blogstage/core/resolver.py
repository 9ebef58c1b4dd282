"""Post content resolution.

Turns a post id into parsed content: checks the registry, fetches the raw
document, and splits positional metadata lines from the markdown body.
"""

import logging
from dataclasses import dataclass
from enum import Enum

from blogstage.core.errors import DocumentLoadError
from blogstage.core.registry import PostRegistry
from blogstage.core.store import DocumentStore

logger = logging.getLogger(__name__)

HEADER_LINES = 3


@dataclass(frozen=True)
class ParsedPost:
    """Raw document split into metadata lines and markdown body.

    Headers are positional; by convention title, date, then tags.
    """

    headers: tuple[str, ...]
    body: str

    @property
    def title(self) -> str | None:
        return self._header(0)

    @property
    def date(self) -> str | None:
        return self._header(1)

    @property
    def tags(self) -> str | None:
        return self._header(2)

    def _header(self, position: int) -> str | None:
        if position < len(self.headers):
            return self.headers[position]
        return None


class NotFoundReason(Enum):
    """Why a post could not be resolved."""

    UNKNOWN_POST = "unknown_post"
    LOAD_FAILURE = "load_failure"


@dataclass(frozen=True)
class NotFound:
    """Resolution result for a post that cannot be shown."""

    post_id: str
    reason: NotFoundReason


def split_document(raw: str) -> ParsedPost:
    """Split a raw document into header lines and body.

    Documents shorter than the header block yield the lines they have as
    headers and an empty body.

    Args:
        raw: Newline-delimited document text

    Returns:
        ParsedPost with up to three headers and the remaining text as body
    """
    lines = raw.split("\n")
    headers = tuple(lines[:HEADER_LINES])
    body = "\n".join(lines[HEADER_LINES:])
    return ParsedPost(headers=headers, body=body)


class ContentResolver:
    """Resolves registered post ids to parsed documents.

    Results are never cached; every call re-fetches from the store.
    """

    def __init__(self, registry: PostRegistry, store: DocumentStore) -> None:
        self._registry = registry
        self._store = store

    @property
    def registry(self) -> PostRegistry:
        return self._registry

    async def fetch(self, post_id: str) -> str | NotFound:
        """Fetch the raw document of a registered post.

        Unregistered ids are rejected before the store is consulted, so
        arbitrary path input never reaches it.

        Args:
            post_id: Post id taken from the location

        Returns:
            Raw document text, or NotFound for unknown or unloadable posts
        """
        if not self._registry.exists(post_id):
            logger.debug(f"Post '{post_id}' is not registered")
            return NotFound(post_id=post_id, reason=NotFoundReason.UNKNOWN_POST)

        try:
            return await self._store.get(post_id)
        except DocumentLoadError as e:
            logger.warning(f"Registered post '{post_id}' failed to load: {e.reason}")
            return NotFound(post_id=post_id, reason=NotFoundReason.LOAD_FAILURE)

    async def resolve(self, post_id: str) -> ParsedPost | NotFound:
        """Resolve a post id to its headers and markdown body.

        Args:
            post_id: Post id taken from the location

        Returns:
            ParsedPost, or NotFound for unknown or unloadable posts
        """
        raw = await self.fetch(post_id)
        if isinstance(raw, NotFound):
            return raw
        return split_document(raw)
