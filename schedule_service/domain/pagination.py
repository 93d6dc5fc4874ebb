"""Paginated query helpers - argument checks, cache keys and result shaping"""

import json
import math
from typing import Any

from ..errors import ValidationError

DEFAULT_PAGE = 1
DEFAULT_LIMIT = 10


def validate_page_args(page: int = DEFAULT_PAGE, limit: int = DEFAULT_LIMIT) -> tuple[int, int]:
    """Return (page, limit) or raise ValidationError when either is below 1"""
    if page is None:
        page = DEFAULT_PAGE
    if limit is None:
        limit = DEFAULT_LIMIT
    if page < 1:
        raise ValidationError("page must be greater than or equal to 1")
    if limit < 1:
        raise ValidationError("limit must be greater than or equal to 1")
    return page, limit


def page_offset(page: int, limit: int) -> int:
    """Rows to skip before the requested page"""
    return (page - 1) * limit


def build_page_key(namespace: str, page: int, limit: int) -> str:
    """Key for unfiltered listings, e.g. 'customers:page:1:limit:10'"""
    return f"{namespace}:page:{page}:limit:{limit}"


def build_args_key(namespace: str, args: dict[str, Any]) -> str:
    """
    Key for filtered listings: the namespace followed by the compact JSON of
    the full argument object. Keys keep their declaration order and unset
    filters are left out, so identical arguments always map to the same key
    and adding or removing a filter changes it.
    """
    present = {name: value for name, value in args.items() if value is not None}
    return f"{namespace}:{json.dumps(present, separators=(',', ':'), default=str)}"


def total_pages(total: int, limit: int) -> int:
    return math.ceil(total / limit)


def paginate(items: list, total: int, page: int, limit: int) -> dict:
    """Shape a page; total comes from a count query, not len(items)"""
    return {
        "items": items,
        "total": total,
        "page": page,
        "limit": limit,
        "totalPages": total_pages(total, limit),
    }
