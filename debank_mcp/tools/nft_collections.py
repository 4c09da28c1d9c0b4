"""NFT collection tools."""

from __future__ import annotations

from typing import Any, Optional

from debank_mcp.config import DEFAULT_PAGE, DEFAULT_PAGE_SIZE
from debank_mcp.debank_api import default_client
from debank_mcp.tools.routing import UpstreamCall, run_call, with_optional

DEFAULT_NFT_LIMIT = 20


async def get_collection_nft_list(
    *,
    id: str,
    chain_id: str,
    start: Optional[int] = 0,
    limit: Optional[int] = DEFAULT_NFT_LIMIT,
    page: int = DEFAULT_PAGE,
    page_size: int = DEFAULT_PAGE_SIZE,
    client=default_client,
) -> Any:
    """List NFTs in a collection (name, description, content, attributes)."""
    call = UpstreamCall(
        "/v1/collection/nft_list",
        with_optional({"id": id, "chain_id": chain_id}, start=start, limit=limit),
        paginate=True,
    )
    return await run_call(call, client=client, page=page, page_size=page_size)
