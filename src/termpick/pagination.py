"""Page math over filtered indices."""

from collections.abc import Sequence

DEFAULT_PAGE_SIZE = 100


def _per_page(size: int | None) -> int:
    """Page size as an int, 0 when paging is disabled."""
    return size if size is not None and size > 0 else 0


def is_paged(size: int | None) -> bool:
    """Paging is disabled for None, 0 or negative sizes."""
    return _per_page(size) > 0


def total_pages(filtered: Sequence[int], size: int | None) -> int:
    """Number of pages, never less than 1 (even for an empty list)."""
    per_page = _per_page(size)
    if not per_page:
        return 1
    return max(1, -(-len(filtered) // per_page))


def clamp_page(page: int, filtered: Sequence[int], size: int | None) -> int:
    return max(0, min(page, total_pages(filtered, size) - 1))


def page_indices(filtered: Sequence[int], size: int | None, page: int) -> tuple[int, ...]:
    """Slice of `filtered` shown on `page`.

    Pages beyond the last one are empty rather than an error.
    """
    if page < 0:
        return ()
    per_page = _per_page(size)
    if not per_page:
        return tuple(filtered) if page == 0 else ()
    start = page * per_page
    return tuple(filtered[start : start + per_page])


def page_of(position: int, size: int | None) -> int:
    """Page holding the given position within the filtered list."""
    per_page = _per_page(size)
    if not per_page or position < 0:
        return 0
    return position // per_page
