"""Page window arithmetic for listing responses."""

from dataclasses import dataclass


@dataclass(frozen=True)
class PageWindow:
    """Offset and page count for one requested page."""

    skip: int
    pages: int
    page: int
    limit: int


def paginate(total: int, page: int, limit: int) -> PageWindow:
    """
    Compute the window for ``page`` of size ``limit`` over ``total`` rows.

    ``pages`` is 0 exactly when ``total`` is 0.
    """
    if total < 0:
        raise ValueError("total must be non-negative")
    if page < 1 or limit < 1:
        raise ValueError("page and limit must be at least 1")

    return PageWindow(
        skip=(page - 1) * limit,
        pages=(total + limit - 1) // limit,
        page=page,
        limit=limit,
    )
