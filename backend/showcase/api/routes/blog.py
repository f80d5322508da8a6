"""Blog Routes — read-only proxy over the WordPress content API.

Invariants:
    - page >= 1, 1 <= per_page <= 100 (WordPress's own bounds)
    - Unknown slug -> 404; upstream failure -> 502 CONTENT_API_ERROR
"""

import logging

from fastapi import APIRouter, Depends, Query

from showcase.api.dependencies import get_blog_service
from showcase.core.pagination import DEFAULT_PER_PAGE
from showcase.schemas.blog import Category, PostDetail, PostPageResponse, PostSummary
from showcase.services.blog import BlogService

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/v1/blog", tags=["blog"])


@router.get("/posts", response_model=PostPageResponse)
async def list_posts(
    page: int = Query(1, ge=1),
    per_page: int = Query(DEFAULT_PER_PAGE, ge=1, le=100),
    category: int | None = Query(None, ge=1),
    blog: BlogService = Depends(get_blog_service),
):
    """One page of posts, newest first, with the page-number window."""
    return await blog.list_posts(page, per_page, category)


@router.get("/categories", response_model=list[Category])
async def list_categories(blog: BlogService = Depends(get_blog_service)):
    return await blog.list_categories()


@router.get("/posts/{post_id}/related", response_model=list[PostSummary])
async def related_posts(
    post_id: int,
    category: int = Query(..., ge=1),
    blog: BlogService = Depends(get_blog_service),
):
    """Up to five posts from the same category, excluding post_id."""
    return await blog.related_posts(category, post_id)


@router.get("/posts/{slug}", response_model=PostDetail)
async def get_post(slug: str, blog: BlogService = Depends(get_blog_service)):
    return await blog.get_post(slug)
