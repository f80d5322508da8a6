"""WordPress Client — read-only access to the blog's REST API (/wp-json/wp/v2).

Invariants:
    - Read-only: only GET requests
    - Non-2xx responses and transport failures raise ContentAPIError
    - Total pages read from X-WP-TotalPages (defaults to 1 when absent)

Design Decisions:
    - Returns raw WordPress JSON: schemas/blog.py shapes it for the API
"""

import logging
from dataclasses import dataclass

import httpx

from showcase.core.errors import ContentAPIError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PostPage:
    """One page of posts plus the pagination headers."""
    posts: list[dict]
    total: int
    total_pages: int


class WordPressClient:
    """Thin wrapper over the WordPress posts/categories endpoints."""

    def __init__(self, http: httpx.AsyncClient, base_url: str):
        self._http = http
        self._base_url = base_url.rstrip("/")

    async def _get(self, path: str, params: dict) -> httpx.Response:
        try:
            resp = await self._http.get(f"{self._base_url}{path}", params=params)
        except httpx.HTTPError as e:
            logger.error(f"WordPress request failed: {e}", extra={"service": "wordpress"})
            raise ContentAPIError(str(e))
        if resp.status_code >= 400:
            logger.warning(
                f"WordPress returned {resp.status_code} for {path}",
                extra={"service": "wordpress", "upstream_status": resp.status_code},
            )
            raise ContentAPIError(
                f"HTTP error! status: {resp.status_code}",
                upstream_status=resp.status_code,
            )
        return resp

    async def get_posts(self, params: dict) -> PostPage:
        resp = await self._get("/posts", params)
        return PostPage(
            posts=resp.json(),
            total=int(resp.headers.get("X-WP-Total", 0)),
            total_pages=int(resp.headers.get("X-WP-TotalPages", 1)),
        )

    async def get_post_by_slug(self, slug: str) -> dict | None:
        resp = await self._get("/posts", {"slug": slug, "_embed": ""})
        posts = resp.json()
        return posts[0] if posts else None

    async def get_categories(self, per_page: int) -> list[dict]:
        resp = await self._get("/categories", {"per_page": per_page})
        return resp.json()
