"""
Pagination helpers.

Builds the metadata block attached to every paged response.
"""

import math
from typing import Any, Mapping, Union

from jobboard.schemas.common import PaginationMeta


def build_pagination_meta(total: int, page: int, limit: int) -> PaginationMeta:
    """
    Describe where `page` sits within a result set of `total` items.

    Args:
        total: Total number of matching items
        page: Current page number (1-based)
        limit: Page size

    Returns:
        PaginationMeta: Derived pagination metadata
    """
    total_pages = math.ceil(total / limit)
    has_next = page < total_pages
    has_previous = page > 1

    return PaginationMeta(
        total=total,
        page=page,
        limit=limit,
        total_pages=total_pages,
        has_next=has_next,
        has_previous=has_previous,
        next_page=page + 1 if has_next else None,
        previous_page=page - 1 if has_previous else None,
    )


def build_search_pagination(
    search_response: Union[Mapping[str, Any], Any],
    limit: int,
) -> PaginationMeta:
    """Build pagination metadata from a Typesense search response."""
    if isinstance(search_response, Mapping):
        found = search_response["found"]
        page = search_response["page"]
    else:
        found = search_response.found
        page = search_response.page

    return build_pagination_meta(total=found, page=page, limit=limit)
