"""Configuration management for Blogstage.

Supports TOML configuration format with auto-discovery.
"""

import tomllib
from dataclasses import dataclass, field, replace
from pathlib import Path

from blogstage.core.registry import DEFAULT_POSTS
from blogstage.core.views import DEFAULT_WELCOME

CONFIG_FILENAME = "blogstage.toml"


@dataclass
class ServerConfig:
    """Document server configuration."""

    host: str = "127.0.0.1"
    port: int = 8080


@dataclass
class PostsConfig:
    """Post registry and document store configuration."""

    order: list[str] = field(default_factory=lambda: list(DEFAULT_POSTS))
    source_dir: Path | None = None
    base_url: str | None = None


@dataclass
class SiteConfig:
    """Site content configuration."""

    welcome: str = DEFAULT_WELCOME


@dataclass
class Config:
    """Application configuration."""

    server: ServerConfig
    posts: PostsConfig
    site: SiteConfig
    config_path: Path | None = None

    @classmethod
    def load(cls, config_path: Path | None = None) -> "Config":
        """Load configuration from file.

        If config_path is provided, loads from that file.
        Otherwise, searches for blogstage.toml in current directory and parents.

        Args:
            config_path: Optional explicit path to config file

        Returns:
            Config instance with defaults for missing sections

        Raises:
            FileNotFoundError: If explicit config_path doesn't exist
            ValueError: If configuration is invalid
        """
        if config_path is not None:
            if not config_path.exists():
                raise FileNotFoundError(f"Configuration file not found: {config_path}")
            return cls._load_from_file(config_path)

        discovered_path = cls._discover_config()
        if discovered_path is None:
            return cls._default()

        return cls._load_from_file(discovered_path)

    def with_overrides(
        self,
        *,
        host: str | None = None,
        port: int | None = None,
        source_dir: Path | None = None,
    ) -> "Config":
        """Return a copy with command-line overrides applied.

        Args:
            host: Server host override
            port: Server port override
            source_dir: Posts directory override; also drops posts.base_url
                        so documents are read from the directory

        Returns:
            New Config; None values leave the loaded setting untouched
        """
        server = self.server
        if host is not None:
            server = replace(server, host=host)
        if port is not None:
            server = replace(server, port=port)

        posts = self.posts
        if source_dir is not None:
            posts = replace(posts, source_dir=source_dir, base_url=None)

        return replace(self, server=server, posts=posts)

    @classmethod
    def _discover_config(cls) -> Path | None:
        """Search for config file in current directory and parents.

        Returns:
            Path to config file or None if not found
        """
        current = Path.cwd()
        while True:
            candidate = current / CONFIG_FILENAME
            if candidate.exists():
                return candidate
            parent = current.parent
            if parent == current:
                return None
            current = parent

    @classmethod
    def _default(cls) -> "Config":
        return cls(
            server=ServerConfig(),
            posts=PostsConfig(),
            site=SiteConfig(),
        )

    @classmethod
    def _load_from_file(cls, path: Path) -> "Config":
        """Load configuration from a specific file.

        Args:
            path: Path to TOML configuration file

        Returns:
            Config instance

        Raises:
            ValueError: If configuration is invalid
        """
        with path.open("rb") as f:
            data = tomllib.load(f)

        config_dir = path.parent

        return cls(
            server=cls._parse_server(data.get("server")),
            posts=cls._parse_posts(data.get("posts"), config_dir),
            site=cls._parse_site(data.get("site")),
            config_path=path,
        )

    @classmethod
    def _parse_server(cls, data: object) -> ServerConfig:
        """Parse server configuration section.

        Args:
            data: Raw server section data

        Returns:
            ServerConfig instance
        """
        if data is None:
            return ServerConfig()

        if not isinstance(data, dict):
            raise ValueError("server section must be a dictionary")

        host = data.get("host", "127.0.0.1")
        if not isinstance(host, str):
            raise ValueError("server.host must be a string")

        port = data.get("port", 8080)
        if not isinstance(port, int) or isinstance(port, bool):
            raise ValueError("server.port must be an integer")

        return ServerConfig(host=host, port=port)

    @classmethod
    def _parse_posts(cls, data: object, config_dir: Path) -> PostsConfig:
        """Parse posts configuration section.

        Args:
            data: Raw posts section data
            config_dir: Directory containing config file (for relative paths)

        Returns:
            PostsConfig instance
        """
        if data is None:
            return PostsConfig()

        if not isinstance(data, dict):
            raise ValueError("posts section must be a dictionary")

        order_raw = data.get("order", list(DEFAULT_POSTS))
        if not isinstance(order_raw, list):
            raise ValueError("posts.order must be a list")
        order: list[str] = []
        for item in order_raw:
            if not isinstance(item, str):
                raise ValueError("posts.order items must be strings")
            order.append(item)

        source_dir = data.get("source_dir")
        if source_dir is not None and not isinstance(source_dir, str):
            raise ValueError("posts.source_dir must be a string")

        base_url = data.get("base_url")
        if base_url is not None and not isinstance(base_url, str):
            raise ValueError("posts.base_url must be a string")

        return PostsConfig(
            order=order,
            source_dir=config_dir / source_dir if source_dir is not None else None,
            base_url=base_url,
        )

    @classmethod
    def _parse_site(cls, data: object) -> SiteConfig:
        if data is None:
            return SiteConfig()

        if not isinstance(data, dict):
            raise ValueError("site section must be a dictionary")

        welcome = data.get("welcome", DEFAULT_WELCOME)
        if not isinstance(welcome, str):
            raise ValueError("site.welcome must be a string")

        return SiteConfig(welcome=welcome)
