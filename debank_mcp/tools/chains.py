"""Chain tools."""

from __future__ import annotations

from typing import Any, Optional

from debank_mcp.config import DEFAULT_PAGE, DEFAULT_PAGE_SIZE
from debank_mcp.debank_api import default_client
from debank_mcp.tools.routing import UpstreamCall, run_call
from debank_mcp.tools.validators import is_blank


def select_chain_call(*, id: Optional[str] = None) -> UpstreamCall:
    if not is_blank(id):
        return UpstreamCall("/v1/chain", {"id": id})
    return UpstreamCall("/v1/chain/list", paginate=True)


async def get_chain_info(
    *,
    id: Optional[str] = None,
    page: int = DEFAULT_PAGE,
    page_size: int = DEFAULT_PAGE_SIZE,
    client=default_client,
) -> Any:
    """
    Return a single chain when ``id`` is given, otherwise a page of all supported chains.
    """
    call = select_chain_call(id=id)
    return await run_call(call, client=client, page=page, page_size=page_size)
