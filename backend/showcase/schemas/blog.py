"""Blog Schemas — WordPress posts and categories reshaped for the site.

Invariants:
    - title / excerpt / content keep WordPress's rendered HTML
    - featured_image is the first embedded wp:featuredmedia entry, or None

Design Decisions:
    - from_wordpress() classmethods isolate the _embedded lookups from routes
"""

from pydantic import BaseModel


class FeaturedMedia(BaseModel):
    source_url: str
    alt_text: str | None = None


def _featured_media(post: dict) -> FeaturedMedia | None:
    media = (post.get("_embedded") or {}).get("wp:featuredmedia") or []
    if not media or not isinstance(media[0], dict) or not media[0].get("source_url"):
        return None
    return FeaturedMedia(
        source_url=media[0]["source_url"],
        alt_text=media[0].get("alt_text") or None,
    )


class PostSummary(BaseModel):
    """Post card in listings and related-article blocks."""
    id: int
    slug: str
    date: str
    title: str
    excerpt: str
    categories: list[int] = []
    featured_image: FeaturedMedia | None = None

    @classmethod
    def from_wordpress(cls, post: dict) -> "PostSummary":
        return cls(
            id=post["id"],
            slug=post.get("slug", ""),
            date=post.get("date", ""),
            title=(post.get("title") or {}).get("rendered", ""),
            excerpt=(post.get("excerpt") or {}).get("rendered", ""),
            categories=post.get("categories") or [],
            featured_image=_featured_media(post),
        )


class PostDetail(PostSummary):
    """Full article."""
    content: str
    link: str | None = None

    @classmethod
    def from_wordpress(cls, post: dict) -> "PostDetail":
        summary = PostSummary.from_wordpress(post)
        return cls(
            **summary.model_dump(),
            content=(post.get("content") or {}).get("rendered", ""),
            link=post.get("link"),
        )


class Category(BaseModel):
    id: int
    name: str
    slug: str
    description: str = ""
    count: int = 0


class PostPageResponse(BaseModel):
    """One page of the blog listing plus the page-number window."""
    posts: list[PostSummary]
    page: int
    per_page: int
    total: int
    total_pages: int
    pages: list[int | str]
