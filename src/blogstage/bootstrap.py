"""Component wiring from configuration."""

from blogstage.config import Config
from blogstage.core.registry import PostRegistry
from blogstage.core.renderer import MarkdownRenderer
from blogstage.core.resolver import ContentResolver
from blogstage.core.store import create_document_store
from blogstage.core.views import CompositionRoot


def build_resolver(config: Config) -> ContentResolver:
    """Create the registry-guarded resolver for the configured store."""
    registry = PostRegistry.from_config(config.posts)
    return ContentResolver(registry, create_document_store(config.posts))


def build_composition_root(config: Config) -> CompositionRoot:
    """Create a composition root wired to the configured content."""
    resolver = build_resolver(config)
    return CompositionRoot(
        registry=resolver.registry,
        resolver=resolver,
        renderer=MarkdownRenderer(),
        welcome_markdown=config.site.welcome,
    )
