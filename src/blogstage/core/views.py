"""Composition root and mounted views.

The composition root receives the current location on every render, asks the
router for a view descriptor, and mounts the matching view. Post views resolve
their content asynchronously and only apply the result while they are still
the active view.
"""

import logging
from abc import ABC, abstractmethod
from collections.abc import Callable
from dataclasses import dataclass, field
from enum import Enum

from blogstage.core.registry import PostRegistry
from blogstage.core.renderer import MarkdownRenderer, TrustedHtml
from blogstage.core.resolver import ContentResolver, NotFound
from blogstage.core.router import (
    HomeView,
    IndexView,
    PostView,
    ViewDescriptor,
    select_view,
)
from blogstage.core.types import Location, PostId

logger = logging.getLogger(__name__)

DEFAULT_WELCOME = "# hello, this is the home!"
POST_MISSING_MESSAGE = "That page doesn't exist!"
PAGE_NOT_FOUND_HTML = "<h1>Page not found</h1>"


@dataclass(frozen=True)
class PostLink:
    """Index entry pointing at a post page."""

    post_id: PostId
    href: str

    def to_dict(self) -> dict[str, str]:
        """Convert to dictionary for JSON serialization."""
        return {"id": self.post_id, "href": self.href}


@dataclass(frozen=True)
class HtmlFragment:
    """Markup for the host surface to insert as is."""

    html: TrustedHtml


@dataclass(frozen=True)
class LinkList:
    """Structured list of post links for the host surface."""

    links: tuple[PostLink, ...]


RenderedView = HtmlFragment | LinkList


class ViewStatus(Enum):
    """Lifecycle of a post view's content."""

    UNRESOLVED = "unresolved"
    RESOLVING = "resolving"
    RESOLVED = "resolved"
    NOT_FOUND = "not_found"
    DISCARDED = "discarded"


@dataclass
class RenderState:
    """Per-instance state of a post view.

    An empty body means not yet resolved or not found.
    """

    body: str = ""
    headers: tuple[str, ...] = ()
    status: ViewStatus = ViewStatus.UNRESOLVED


def post_href(post_id: str) -> str:
    """Return the location path of a post page."""
    return f"/blog/{post_id}"


class MountedView(ABC):
    """A view instance mounted for a single render."""

    def __init__(self, descriptor: ViewDescriptor, generation: int) -> None:
        self.descriptor = descriptor
        self.generation = generation

    async def load(self) -> None:
        """Load asynchronous content. Static views have none."""

    @abstractmethod
    def render(self) -> RenderedView:
        """Return the output for the host surface."""


class HomePage(MountedView):
    def __init__(
        self,
        descriptor: HomeView,
        generation: int,
        renderer: MarkdownRenderer,
        welcome_markdown: str,
    ) -> None:
        super().__init__(descriptor, generation)
        self._renderer = renderer
        self._welcome_markdown = welcome_markdown

    def render(self) -> RenderedView:
        return HtmlFragment(self._renderer.render(self._welcome_markdown))


class IndexPage(MountedView):
    def __init__(self, descriptor: IndexView, generation: int, registry: PostRegistry) -> None:
        super().__init__(descriptor, generation)
        self._registry = registry

    def render(self) -> RenderedView:
        return LinkList(
            tuple(PostLink(post_id=post_id, href=post_href(post_id)) for post_id in self._registry.all())
        )


class NotFoundPage(MountedView):
    def render(self) -> RenderedView:
        return HtmlFragment(TrustedHtml(PAGE_NOT_FOUND_HTML))


class PostPage(MountedView):
    """Single post view.

    State moves UNRESOLVED -> RESOLVING -> RESOLVED or NOT_FOUND. A result that
    arrives after the view was superseded is dropped and the view ends in
    DISCARDED. There is no retry; a new navigation mounts a new view.
    """

    def __init__(
        self,
        descriptor: PostView,
        generation: int,
        resolver: ContentResolver,
        renderer: MarkdownRenderer,
        is_current: Callable[[int], bool],
    ) -> None:
        super().__init__(descriptor, generation)
        self.post_id = descriptor.post_id
        self.state = RenderState()
        self._resolver = resolver
        self._renderer = renderer
        self._is_current = is_current

    async def load(self) -> None:
        if self.state.status is not ViewStatus.UNRESOLVED:
            return

        self.state.status = ViewStatus.RESOLVING
        result = await self._resolver.resolve(self.post_id)

        if not self._is_current(self.generation):
            logger.debug(f"Discarding result for post '{self.post_id}' from superseded view {self.generation}")
            self.state.status = ViewStatus.DISCARDED
            return

        if isinstance(result, NotFound):
            self.state.status = ViewStatus.NOT_FOUND
            return

        self.state.body = result.body
        self.state.headers = result.headers
        self.state.status = ViewStatus.RESOLVED

    def render(self) -> RenderedView:
        if not self.state.body:
            return HtmlFragment(TrustedHtml(POST_MISSING_MESSAGE))
        return HtmlFragment(self._renderer.render(self.state.body))


@dataclass
class CompositionRoot:
    """Mounts the view selected for the current location.

    Each mount bumps the generation counter; only the view holding the
    current generation may apply asynchronously resolved content.
    """

    registry: PostRegistry
    resolver: ContentResolver
    renderer: MarkdownRenderer = field(default_factory=MarkdownRenderer)
    welcome_markdown: str = DEFAULT_WELCOME
    _generation: int = field(default=0, init=False, repr=False)
    _active: MountedView | None = field(default=None, init=False, repr=False)

    @property
    def active(self) -> MountedView | None:
        """Currently mounted view."""
        return self._active

    def is_current(self, generation: int) -> bool:
        return generation == self._generation

    def mount(self, location: Location) -> MountedView:
        """Route the location and mount the selected view.

        Supersedes the previously mounted view.

        Args:
            location: Current location, read only

        Returns:
            Newly mounted view; call load() before render() for post views
        """
        self._generation += 1
        descriptor = select_view(location.path)
        logger.debug(f"Mounting {descriptor} for {location.path!r} (generation {self._generation})")
        self._active = self._create_view(descriptor, self._generation)
        return self._active

    async def render(self, location: Location) -> RenderedView:
        """Mount the view for a location, load it, and return its output."""
        view = self.mount(location)
        await view.load()
        return view.render()

    def _create_view(self, descriptor: ViewDescriptor, generation: int) -> MountedView:
        if isinstance(descriptor, HomeView):
            return HomePage(descriptor, generation, self.renderer, self.welcome_markdown)
        if isinstance(descriptor, IndexView):
            return IndexPage(descriptor, generation, self.registry)
        if isinstance(descriptor, PostView):
            return PostPage(descriptor, generation, self.resolver, self.renderer, self.is_current)
        return NotFoundPage(descriptor, generation)
