"""Location to view dispatch."""

from dataclasses import dataclass

from blogstage.core.types import PostId

HOME_PATH = "/"
INDEX_PATH = "/blog"


@dataclass(frozen=True)
class HomeView:
    """Welcome page."""


@dataclass(frozen=True)
class IndexView:
    """List of all registered posts."""


@dataclass(frozen=True)
class PostView:
    """Single post page."""

    post_id: PostId


@dataclass(frozen=True)
class NotFoundView:
    """Fallback for paths no rule matches."""

    path: str


ViewDescriptor = HomeView | IndexView | PostView | NotFoundView


def select_view(path: str) -> ViewDescriptor:
    """Select the view for a location path.

    Rules are checked in order and the first match wins:
    "/" is home, "/blog" is the index, anything else starting with "/blog"
    is a post whose id is the third "/"-separated segment, and everything
    else falls back to NotFoundView.

    Args:
        path: Location path (e.g., "/blog/hello-world")

    Returns:
        View descriptor for the path
    """
    if path == HOME_PATH:
        return HomeView()
    if path == INDEX_PATH:
        return IndexView()
    if path.startswith(INDEX_PATH):
        segments = path.split("/")
        # "/blogs" has no third segment; "" is never a registered id
        post_id = segments[2] if len(segments) > 2 else ""
        return PostView(post_id=PostId(post_id))
    return NotFoundView(path=path)
