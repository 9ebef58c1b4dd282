"""Post registry.

Ordered, immutable list of known post identifiers. This is the single source
of truth for which posts exist: an id missing here never reaches a document
store.
"""

from collections.abc import Iterable, Iterator
from typing import TYPE_CHECKING

from blogstage.core.types import PostId

if TYPE_CHECKING:
    from blogstage.config import PostsConfig

DEFAULT_POSTS: tuple[str, ...] = ("hello-world",)


class PostRegistry:
    """Ordered set of post ids with O(1) membership checks.

    Insertion order defines display order in the post index.
    """

    __slots__ = ("_index", "_posts")

    def __init__(self, posts: Iterable[str]) -> None:
        """Initialize registry.

        Args:
            posts: Post ids in display order

        Raises:
            ValueError: If an id is empty, contains "/", or is duplicated
        """
        ordered: list[PostId] = []
        index: set[str] = set()
        for post in posts:
            if not post:
                raise ValueError("Post id must not be empty")
            if "/" in post:
                raise ValueError(f"Post id must be a single path segment: {post!r}")
            if post in index:
                raise ValueError(f"Duplicate post id: {post!r}")
            index.add(post)
            ordered.append(PostId(post))

        self._posts = tuple(ordered)
        self._index = frozenset(index)

    @classmethod
    def from_config(cls, config: "PostsConfig") -> "PostRegistry":
        """Build registry from the posts configuration section."""
        return cls(config.order)

    def exists(self, post_id: str) -> bool:
        """Check whether a post id is registered.

        Args:
            post_id: Candidate id, compared by exact string match

        Returns:
            True if the id is registered
        """
        return post_id in self._index

    def all(self) -> tuple[PostId, ...]:
        """Return all post ids in display order."""
        return self._posts

    def __contains__(self, post_id: object) -> bool:
        return post_id in self._index

    def __iter__(self) -> Iterator[PostId]:
        return iter(self._posts)

    def __len__(self) -> int:
        return len(self._posts)

    def __repr__(self) -> str:
        return f"PostRegistry({list(self._posts)!r})"
