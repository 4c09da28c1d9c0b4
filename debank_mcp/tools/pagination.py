"""Client-side pagination over already-fetched upstream results."""

from __future__ import annotations

import math
from typing import Any, Dict

from debank_mcp.config import DEFAULT_PAGE, DEFAULT_PAGE_SIZE


def paginate(results: Any, page: int = DEFAULT_PAGE, page_size: int = DEFAULT_PAGE_SIZE) -> Any:
    """
    Slice a list result into one page plus pagination metadata.

    Anything that is not a list (``None``, a single object) is returned
    unchanged. Pages past the end yield an empty ``data`` list.
    """
    if not isinstance(results, list):
        return results

    start = (page - 1) * page_size
    end = start + page_size
    total_items = len(results)

    pagination: Dict[str, int] = {
        "page": page,
        "page_size": page_size,
        "total_items": total_items,
        "total_pages": math.ceil(total_items / page_size),
    }
    return {"data": results[start:end], "pagination": pagination}
