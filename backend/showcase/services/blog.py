"""Blog Service — WordPress posts and categories shaped for the site's pages.

Invariants:
    - Listing: page / per_page forwarded as-is, total pages from X-WP-TotalPages
    - Unknown slug -> ResourceNotFoundError (404)
    - Related posts never include the post being read
    - Upstream failures surface as ContentAPIError (502)
"""

import logging

from showcase.core.errors import ResourceNotFoundError
from showcase.core.pagination import (
    CATEGORIES_PER_PAGE,
    DEFAULT_PER_PAGE,
    RELATED_PER_PAGE,
    page_window,
    posts_query,
)
from showcase.infrastructure.wordpress_client import WordPressClient
from showcase.schemas.blog import Category, PostDetail, PostPageResponse, PostSummary

logger = logging.getLogger(__name__)


class BlogService:
    """Read-only blog adapter over the WordPress REST API."""

    def __init__(self, wp: WordPressClient):
        self.wp = wp

    async def list_posts(
        self, page: int = 1, per_page: int = DEFAULT_PER_PAGE,
        category: int | None = None,
    ) -> PostPageResponse:
        result = await self.wp.get_posts(posts_query(page, per_page, category))
        return PostPageResponse(
            posts=[PostSummary.from_wordpress(p) for p in result.posts],
            page=page,
            per_page=per_page,
            total=result.total,
            total_pages=result.total_pages,
            pages=page_window(page, result.total_pages),
        )

    async def get_post(self, slug: str) -> PostDetail:
        post = await self.wp.get_post_by_slug(slug)
        if not post:
            raise ResourceNotFoundError("Post", slug)
        return PostDetail.from_wordpress(post)

    async def list_categories(self) -> list[Category]:
        categories = await self.wp.get_categories(CATEGORIES_PER_PAGE)
        return [Category.model_validate(c) for c in categories]

    async def related_posts(
        self, category_id: int, exclude_post_id: int,
    ) -> list[PostSummary]:
        result = await self.wp.get_posts({
            "categories": category_id, "per_page": RELATED_PER_PAGE, "_embed": "",
        })
        return [
            PostSummary.from_wordpress(p)
            for p in result.posts
            if p.get("id") != exclude_post_id
        ]
