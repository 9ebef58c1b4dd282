"""Application keys for type-safe app configuration access."""

from aiohttp import web

from blogstage.core.registry import PostRegistry
from blogstage.core.resolver import ContentResolver

registry_key = web.AppKey("registry", PostRegistry)
resolver_key = web.AppKey("resolver", ContentResolver)
