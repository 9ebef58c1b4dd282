"""Core type definitions."""

from dataclasses import dataclass
from typing import NewType

# Single URL path segment identifying a post (e.g., "hello-world")
PostId = NewType("PostId", str)


@dataclass(frozen=True)
class Location:
    """Current route path, read-only for everything in the core."""

    path: str
