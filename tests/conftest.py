"""Shared test fixtures."""

from pathlib import Path

import pytest
from blogstage.config import Config, PostsConfig, ServerConfig, SiteConfig
from blogstage.core.errors import DocumentLoadError
from blogstage.core.registry import PostRegistry
from blogstage.core.resolver import ContentResolver

HELLO_DOCUMENT = "Hello\n2024-01-01\nintro\nHello **world**"


class CountingStore:
    """In-memory document store that records every fetch."""

    def __init__(self, documents: dict[str, str]) -> None:
        self.documents = documents
        self.calls: list[str] = []

    async def get(self, post_id: str) -> str:
        self.calls.append(post_id)
        if post_id not in self.documents:
            raise DocumentLoadError(post_id, "missing from memory store")
        return self.documents[post_id]


@pytest.fixture
def store() -> CountingStore:
    """Store holding a document for "a" and none for "b"."""
    return CountingStore({"a": HELLO_DOCUMENT})


@pytest.fixture
def registry() -> PostRegistry:
    return PostRegistry(["a", "b"])


@pytest.fixture
def resolver(registry: PostRegistry, store: CountingStore) -> ContentResolver:
    return ContentResolver(registry, store)


@pytest.fixture
def posts_dir(tmp_path: Path) -> Path:
    """Create posts directory with one well-formed document."""
    posts = tmp_path / "posts"
    posts.mkdir()
    (posts / "a.md").write_text(HELLO_DOCUMENT, encoding="utf-8")
    return posts


@pytest.fixture
def test_config(posts_dir: Path) -> Config:
    """Create a configuration reading posts "a" and "b" from posts_dir."""
    return Config(
        server=ServerConfig(),
        posts=PostsConfig(order=["a", "b"], source_dir=posts_dir),
        site=SiteConfig(),
    )
