"""Token tools."""

from __future__ import annotations

from typing import Any, Optional

from debank_mcp.config import DEFAULT_PAGE, DEFAULT_PAGE_SIZE
from debank_mcp.debank_api import default_client
from debank_mcp.tools.routing import ParamError, UpstreamCall, param_error, run_call, with_optional
from debank_mcp.tools.validators import is_blank

TOKEN_ACTIONS = ("details", "holders", "history")
DEFAULT_HOLDERS_LIMIT = 100


def select_token_call(
    *,
    chain_id: str,
    id: str,
    action: str = "details",
    date_at: Optional[str] = None,
    start: Optional[int] = 0,
    limit: Optional[int] = DEFAULT_HOLDERS_LIMIT,
) -> UpstreamCall | ParamError:
    token = {"chain_id": chain_id, "id": id}
    if action == "details":
        return UpstreamCall("/v1/token", token)
    if action == "holders":
        return UpstreamCall(
            "/v1/token/top_holders",
            with_optional(token, start=start, limit=limit),
            paginate=True,
        )
    if action == "history":
        if is_blank(date_at):
            return param_error("date_at parameter is required for historical price")
        return UpstreamCall("/v1/token/history_price", {**token, "date_at": date_at})
    return param_error("Invalid action parameter. Use 'details', 'holders', or 'history'.")


async def get_token_info(
    *,
    chain_id: str,
    id: str,
    action: str = "details",
    date_at: Optional[str] = None,
    start: Optional[int] = 0,
    limit: Optional[int] = DEFAULT_HOLDERS_LIMIT,
    page: int = DEFAULT_PAGE,
    page_size: int = DEFAULT_PAGE_SIZE,
    client=default_client,
) -> Any:
    """Fetch token details, top holders, or the price on a given UTC date."""
    call = select_token_call(
        chain_id=chain_id,
        id=id,
        action=action,
        date_at=date_at,
        start=start,
        limit=limit,
    )
    return await run_call(call, client=client, page=page, page_size=page_size)
