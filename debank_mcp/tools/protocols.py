"""Protocol tools."""

from __future__ import annotations

from typing import Any, Optional

from debank_mcp.config import DEFAULT_PAGE, DEFAULT_PAGE_SIZE
from debank_mcp.debank_api import default_client
from debank_mcp.tools.routing import ParamError, UpstreamCall, param_error, run_call, with_optional
from debank_mcp.tools.validators import is_blank

DEFAULT_TOP_HOLDERS_LIMIT = 10


def _tvl(protocol: Any) -> float:
    if not isinstance(protocol, dict):
        return 0
    return protocol.get("tvl") or 0


def sort_by_tvl(protocols: Any) -> Any:
    """Order protocols by descending TVL; missing TVL counts as zero."""
    if not isinstance(protocols, list):
        return protocols
    return sorted(protocols, key=_tvl, reverse=True)


def select_protocol_call(
    *,
    id: Optional[str] = None,
    chain_id: Optional[str] = None,
    get_top_holders: bool = False,
    start: Optional[int] = None,
    limit: Optional[int] = DEFAULT_TOP_HOLDERS_LIMIT,
) -> UpstreamCall | ParamError:
    # id takes precedence over chain_id when both are supplied.
    if not is_blank(id) and get_top_holders:
        return UpstreamCall(
            "/v1/protocol/top_holders",
            with_optional({"id": id}, start=start, limit=limit),
            paginate=True,
        )
    if not is_blank(id):
        return UpstreamCall("/v1/protocol", {"id": id})
    if not is_blank(chain_id):
        return UpstreamCall(
            "/v1/protocol/list",
            {"chain_id": chain_id},
            paginate=True,
            transform=sort_by_tvl,
        )
    return param_error("Either id or chain_id must be provided")


async def get_protocol_info(
    *,
    id: Optional[str] = None,
    chain_id: Optional[str] = None,
    get_top_holders: bool = False,
    start: Optional[int] = None,
    limit: Optional[int] = DEFAULT_TOP_HOLDERS_LIMIT,
    page: int = DEFAULT_PAGE,
    page_size: int = DEFAULT_PAGE_SIZE,
    client=default_client,
) -> Any:
    """
    Fetch protocol details, a protocol's top holders, or the protocols on a chain.

    Chain listings are sorted by TVL before pagination so page 1 holds the
    largest protocols.
    """
    call = select_protocol_call(
        id=id,
        chain_id=chain_id,
        get_top_holders=get_top_holders,
        start=start,
        limit=limit,
    )
    return await run_call(call, client=client, page=page, page_size=page_size)
