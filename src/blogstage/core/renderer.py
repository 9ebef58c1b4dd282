"""Markdown to HTML rendering.

Security boundary: the renderer passes raw HTML found in markdown straight
through and its output is inserted into pages unescaped. It must only ever be
fed content authored by the site owner. Rendering user-supplied markdown
requires an HTML sanitizer in front of the host surface, which this package
does not provide.
"""

import logging

import mistune

logger = logging.getLogger(__name__)

MARKDOWN_PLUGINS = ["strikethrough", "table", "url"]


class TrustedHtml:
    """HTML markup that is safe to insert into a page without escaping.

    Only MarkdownRenderer and the fixed view templates construct these. Never
    wrap a string that came from a request, a form, or any other source the
    site owner does not control.
    """

    __slots__ = ("_markup",)

    def __init__(self, markup: str) -> None:
        self._markup = markup

    def __str__(self) -> str:
        return self._markup

    def __html__(self) -> str:
        """Markup protocol used by template engines to skip escaping."""
        return self._markup

    def __bool__(self) -> bool:
        return bool(self._markup)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TrustedHtml):
            return NotImplemented
        return self._markup == other._markup

    def __hash__(self) -> int:
        return hash(self._markup)

    def __repr__(self) -> str:
        return f"TrustedHtml({self._markup!r})"


class MarkdownRenderer:
    """Convert trusted markdown text to HTML.

    Supports standard markdown (headings, paragraphs, emphasis, links, code
    spans and blocks, lists) plus strikethrough, tables and bare URL links.
    """

    def __init__(self) -> None:
        """Initialize the mistune HTML renderer with raw HTML passthrough."""
        self.markdown = mistune.create_markdown(
            escape=False,
            plugins=MARKDOWN_PLUGINS,
        )

    def render(self, markdown_text: str) -> TrustedHtml:
        """Render markdown to HTML.

        Args:
            markdown_text: Markdown source authored by the site owner

        Returns:
            TrustedHtml, empty for empty input
        """
        if not markdown_text:
            return TrustedHtml("")

        logger.debug(f"Rendering {len(markdown_text)} characters of markdown")
        html = self.markdown(markdown_text)
        return TrustedHtml(str(html))
