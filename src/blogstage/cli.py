"""CLI interface for Blogstage."""

import asyncio
import logging
from pathlib import Path

import click

from blogstage.bootstrap import build_composition_root
from blogstage.config import Config
from blogstage.core.registry import PostRegistry
from blogstage.core.types import Location
from blogstage.core.views import HtmlFragment

config_option = click.option(
    "--config",
    "-c",
    "config_path",
    type=click.Path(exists=True, path_type=Path),
    default=None,
    help="Path to configuration file (default: auto-discover blogstage.toml)",
)

verbose_option = click.option(
    "--verbose",
    "-v",
    is_flag=True,
    help="Enable debug logging",
)


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )


def _load_config(config_path: Path | None) -> Config:
    try:
        return Config.load(config_path)
    except (FileNotFoundError, ValueError) as e:
        raise click.ClickException(str(e)) from e


@click.group()
def cli() -> None:
    """Blogstage - routed markdown posts."""


@cli.command()
@click.argument("path")
@config_option
@verbose_option
def render(path: str, config_path: Path | None, verbose: bool) -> None:
    """Render the view for a location PATH (e.g., /blog/hello-world)."""
    _configure_logging(verbose)
    config = _load_config(config_path)

    try:
        root = build_composition_root(config)
    except ValueError as e:
        raise click.ClickException(str(e)) from e

    output = asyncio.run(root.render(Location(path)))

    if isinstance(output, HtmlFragment):
        click.echo(str(output.html).rstrip("\n"))
        return

    for link in output.links:
        click.echo(f'<a href="{link.href}">{link.post_id}</a>')


@cli.command()
@config_option
def posts(config_path: Path | None) -> None:
    """List registered posts in display order."""
    config = _load_config(config_path)

    try:
        registry = PostRegistry.from_config(config.posts)
    except ValueError as e:
        raise click.ClickException(str(e)) from e

    for post_id in registry:
        click.echo(post_id)


@cli.command()
@config_option
@click.option(
    "--source-dir",
    "-s",
    type=click.Path(exists=True, path_type=Path, file_okay=False),
    default=None,
    help="Posts source directory (overrides config)",
)
@click.option(
    "--host",
    default=None,
    help="Host to bind to (overrides config)",
)
@click.option(
    "--port",
    "-p",
    type=int,
    default=None,
    help="Port to bind to (overrides config)",
)
@verbose_option
def serve(
    config_path: Path | None,
    source_dir: Path | None,
    host: str | None,
    port: int | None,
    verbose: bool,
) -> None:
    """Start the post document server."""
    from blogstage.server import run_server

    _configure_logging(verbose)
    config = _load_config(config_path).with_overrides(
        host=host,
        port=port,
        source_dir=source_dir,
    )

    click.echo(f"Starting server on {config.server.host}:{config.server.port}")
    if config.posts.base_url:
        click.echo(f"Posts URL: {config.posts.base_url}")
    elif config.posts.source_dir is not None:
        click.echo(f"Posts directory: {config.posts.source_dir}")
    else:
        click.echo("Posts: bundled content")
    click.echo(f"Registered posts: {len(config.posts.order)}")

    try:
        run_server(config)
    except ValueError as e:
        raise click.ClickException(str(e)) from e


if __name__ == "__main__":
    cli()
