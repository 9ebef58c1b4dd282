"""Exception hierarchy."""


class BlogstageError(Exception):
    """Base class for blogstage errors."""


class DocumentLoadError(BlogstageError):
    """Raised when a document store cannot supply a post document."""

    def __init__(self, post_id: str, reason: str) -> None:
        super().__init__(f"Cannot load document for post '{post_id}': {reason}")
        self.post_id = post_id
        self.reason = reason
