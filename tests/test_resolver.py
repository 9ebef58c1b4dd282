"""Tests for content resolver."""

import pytest
from blogstage.core.registry import PostRegistry
from blogstage.core.resolver import (
    ContentResolver,
    NotFound,
    NotFoundReason,
    ParsedPost,
    split_document,
)

from tests.conftest import CountingStore


class TestSplitDocument:
    """Tests for split_document()."""

    def test__well_formed__splits_headers_and_body(self) -> None:
        """First three lines are headers, the rest is body."""
        post = split_document("Title\n2024-01-01\ntag\n# Heading\n\nText")

        assert post.headers == ("Title", "2024-01-01", "tag")
        assert post.body == "# Heading\n\nText"

    def test__exactly_three_lines__has_empty_body(self) -> None:
        """Header-only document has an empty body."""
        post = split_document("Title\n2024-01-01\ntag")

        assert post.headers == ("Title", "2024-01-01", "tag")
        assert post.body == ""

    def test__short_document__degrades_to_empty_body(self) -> None:
        """Fewer than three lines keep what is there as headers."""
        post = split_document("Only title")

        assert post.headers == ("Only title",)
        assert post.body == ""

    def test__empty_document__has_single_empty_header(self) -> None:
        """Empty text splits into one empty line."""
        post = split_document("")

        assert post.headers == ("",)
        assert post.body == ""

    def test__trailing_newline__is_kept_in_body(self) -> None:
        """Body keeps the document's trailing newline."""
        post = split_document("t\nd\ng\nbody\n")

        assert post.body == "body\n"

    def test__header_accessors__read_positions(self) -> None:
        """title, date and tags read header positions."""
        post = split_document("Title\n2024-01-01\ntag\nbody")

        assert post.title == "Title"
        assert post.date == "2024-01-01"
        assert post.tags == "tag"

    def test__header_accessors__missing_positions__return_none(self) -> None:
        """Accessors return None for absent headers."""
        post = ParsedPost(headers=("Title",), body="")

        assert post.title == "Title"
        assert post.date is None
        assert post.tags is None


class TestContentResolverResolve:
    """Tests for ContentResolver.resolve()."""

    @pytest.mark.asyncio
    async def test__registered_post__returns_parsed_post(
        self, resolver: ContentResolver
    ) -> None:
        """Resolve registered post with stored document."""
        result = await resolver.resolve("a")

        assert isinstance(result, ParsedPost)
        assert len(result.headers) == 3
        assert result.body == "Hello **world**"

    @pytest.mark.asyncio
    @pytest.mark.parametrize("post_id", ["c", "", "../etc/passwd", "a/../b"])
    async def test__unregistered_post__skips_fetch(
        self, resolver: ContentResolver, store: CountingStore, post_id: str
    ) -> None:
        """Unknown ids return NotFound without touching the store."""
        result = await resolver.resolve(post_id)

        assert result == NotFound(post_id=post_id, reason=NotFoundReason.UNKNOWN_POST)
        assert store.calls == []

    @pytest.mark.asyncio
    async def test__registered_but_missing__returns_load_failure(
        self, resolver: ContentResolver, store: CountingStore
    ) -> None:
        """Registered id without a document resolves to NotFound."""
        result = await resolver.resolve("b")

        assert result == NotFound(post_id="b", reason=NotFoundReason.LOAD_FAILURE)
        assert store.calls == ["b"]

    @pytest.mark.asyncio
    async def test__load_failure__logs_warning(
        self, resolver: ContentResolver, caplog: pytest.LogCaptureFixture
    ) -> None:
        """Load failures are logged as warnings."""
        with caplog.at_level("WARNING", logger="blogstage.core.resolver"):
            await resolver.resolve("b")

        assert "failed to load" in caplog.text

    @pytest.mark.asyncio
    async def test__unknown_post__logs_no_warning(
        self, resolver: ContentResolver, caplog: pytest.LogCaptureFixture
    ) -> None:
        """Unknown posts are not logged as exceptional."""
        with caplog.at_level("WARNING", logger="blogstage.core.resolver"):
            await resolver.resolve("c")

        assert caplog.records == []

    @pytest.mark.asyncio
    async def test__repeated_resolve__refetches(
        self, resolver: ContentResolver, store: CountingStore
    ) -> None:
        """Every resolution goes back to the store."""
        await resolver.resolve("a")
        await resolver.resolve("a")

        assert store.calls == ["a", "a"]

    @pytest.mark.asyncio
    async def test__short_document__resolves_with_empty_body(self) -> None:
        """Malformed documents degrade instead of failing."""
        store = CountingStore({"short": "Title\ndate"})
        resolver = ContentResolver(PostRegistry(["short"]), store)

        result = await resolver.resolve("short")

        assert result == ParsedPost(headers=("Title", "date"), body="")


class TestContentResolverFetch:
    """Tests for ContentResolver.fetch()."""

    @pytest.mark.asyncio
    async def test__registered_post__returns_raw_text(
        self, resolver: ContentResolver
    ) -> None:
        """Fetch returns the unparsed document."""
        result = await resolver.fetch("a")

        assert result == "Hello\n2024-01-01\nintro\nHello **world**"

    @pytest.mark.asyncio
    async def test__unregistered_post__returns_not_found(
        self, resolver: ContentResolver, store: CountingStore
    ) -> None:
        """Fetch applies the registry guard."""
        result = await resolver.fetch("zzz")

        assert isinstance(result, NotFound)
        assert store.calls == []
