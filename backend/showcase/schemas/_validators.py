"""Shared field validators for form schemas.

Invariants:
    - Empty strings on optional fields become None (forms send "" for untouched inputs)
    - Partial edits never send null to a NOT NULL column
    - URLs are checked with Pydantic's HttpUrl but stored as the user typed them
"""

from pydantic import HttpUrl, TypeAdapter, ValidationError

_HTTP_URL = TypeAdapter(HttpUrl)


def blank_to_none(v):
    if isinstance(v, str) and not v.strip():
        return None
    return v


def check_url(v: str | None) -> str | None:
    """Raise ValueError for malformed URLs, return the original string otherwise."""
    if v is None:
        return None
    try:
        _HTTP_URL.validate_python(v)
    except ValidationError:
        raise ValueError(f"invalid URL: {v}")
    return v


def split_csv(v):
    """Accept a list or a comma-separated string ("React, TypeScript") and return a list."""
    if v is None:
        return []
    if isinstance(v, str):
        return [item.strip() for item in v.split(",") if item.strip()]
    return [str(item).strip() for item in v if str(item).strip()]


def reject_nulls(model, fields: tuple[str, ...]):
    """Partial edits: an explicit null on a required column is an error, an omitted field is not."""
    for name in fields:
        if name in model.model_fields_set and getattr(model, name) is None:
            raise ValueError(f"{name} cannot be null")
    return model
