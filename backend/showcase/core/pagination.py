"""Blog Pagination — upstream query parameters and the page-number window.

Invariants:
    - Pages are 1-based; per_page is forwarded unchanged to the content API
    - page_window always contains 1 and total_pages (when > 1), current ± delta,
      and "..." wherever numbers are skipped

Design Decisions:
    - "..." as a plain string sentinel: the page list serializes to JSON as-is
"""

ELLIPSIS = "..."
DEFAULT_PER_PAGE = 10
CATEGORIES_PER_PAGE = 100
RELATED_PER_PAGE = 5


def posts_query(
    page: int, per_page: int = DEFAULT_PER_PAGE, category_id: int | None = None,
) -> dict:
    """Query parameters for GET /wp/v2/posts (listing with embedded media)."""
    params: dict = {"page": page, "per_page": per_page, "_embed": ""}
    if category_id:
        params["categories"] = category_id
    return params


def page_window(current: int, total_pages: int, delta: int = 2) -> list[int | str]:
    """Page numbers to render, e.g. [1, "...", 4, 5, 6, 7, 8, "...", 20]."""
    if total_pages < 1:
        return []
    inner = list(range(
        max(2, current - delta), min(total_pages - 1, current + delta) + 1,
    ))

    window: list[int | str] = [1]
    if current - delta > 2:
        window.append(ELLIPSIS)
    window.extend(inner)
    if current + delta < total_pages - 1:
        window.extend([ELLIPSIS, total_pages])
    elif total_pages > 1:
        window.append(total_pages)
    return window
