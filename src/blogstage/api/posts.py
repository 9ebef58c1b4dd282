"""Posts API endpoints.

Serves the post registry and post documents. Bodies are returned as markdown;
conversion to HTML happens in the viewer.
"""

from aiohttp import web

from blogstage.app_keys import registry_key, resolver_key
from blogstage.core.resolver import NotFound
from blogstage.core.store import DOCUMENT_SUFFIX


def create_posts_routes() -> list[web.RouteDef]:
    return [
        web.get("/api/posts", list_posts),
        web.get("/api/posts/{post_id}", get_post),
        web.get("/posts/{filename}", get_raw_post),
    ]


async def list_posts(request: web.Request) -> web.Response:
    registry = request.app[registry_key]
    return web.json_response({"posts": list(registry.all())})


async def get_post(request: web.Request) -> web.Response:
    post_id = request.match_info["post_id"]
    resolver = request.app[resolver_key]

    result = await resolver.resolve(post_id)
    if isinstance(result, NotFound):
        return web.json_response(
            {"error": "Post not found", "id": post_id},
            status=404,
        )

    return web.json_response(
        {
            "id": post_id,
            "headers": list(result.headers),
            "body": result.body,
        }
    )


async def get_raw_post(request: web.Request) -> web.Response:
    filename = request.match_info["filename"]
    if not filename.endswith(DOCUMENT_SUFFIX):
        raise web.HTTPNotFound()

    post_id = filename.removesuffix(DOCUMENT_SUFFIX)
    resolver = request.app[resolver_key]

    raw = await resolver.fetch(post_id)
    if isinstance(raw, NotFound):
        raise web.HTTPNotFound()

    return web.Response(text=raw, content_type="text/markdown", charset="utf-8")
