"""aiohttp server for Blogstage.

Serves the post registry and post documents for viewers that load content
over HTTP.
"""

from aiohttp import web

from blogstage.api.posts import create_posts_routes
from blogstage.app_keys import registry_key, resolver_key
from blogstage.bootstrap import build_resolver
from blogstage.config import Config


def create_app(config: Config) -> web.Application:
    """Create aiohttp application.

    Args:
        config: Application configuration

    Returns:
        Configured aiohttp application
    """
    app = web.Application()

    resolver = build_resolver(config)
    app[resolver_key] = resolver
    app[registry_key] = resolver.registry

    app.router.add_routes(create_posts_routes())

    return app


def run_server(config: Config) -> None:
    """Run the server.

    Args:
        config: Application configuration
    """
    app = create_app(config)
    web.run_app(app, host=config.server.host, port=config.server.port)
