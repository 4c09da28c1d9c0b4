"""User activity tools: protocol positions, transaction history and net-worth charts."""

from __future__ import annotations

from typing import Any, Optional

from debank_mcp.config import DEFAULT_PAGE, DEFAULT_PAGE_SIZE
from debank_mcp.debank_api import default_client
from debank_mcp.tools.routing import ParamError, UpstreamCall, param_error, run_call, with_optional
from debank_mcp.tools.validators import is_blank

ACTIVITY_TYPES = ("protocols", "history", "chart")


def _chain_filter(chain_ids: Optional[str]) -> Optional[str]:
    return None if is_blank(chain_ids) else chain_ids


def _protocols_call(
    user: dict,
    *,
    chain_id: Optional[str],
    protocol_id: Optional[str],
    chain_ids: Optional[str],
    is_simple: bool,
) -> UpstreamCall:
    if not is_blank(protocol_id):
        return UpstreamCall("/v1/user/protocol", {**user, "protocol_id": protocol_id})
    kind = "simple" if is_simple else "complex"
    if not is_blank(chain_id):
        return UpstreamCall(
            f"/v1/user/{kind}_protocol_list", {**user, "chain_id": chain_id}, paginate=True
        )
    return UpstreamCall(
        f"/v1/user/all_{kind}_protocol_list",
        with_optional(user, chain_ids=_chain_filter(chain_ids)),
        paginate=True,
    )


def _history_call(
    user: dict,
    *,
    chain_id: Optional[str],
    chain_ids: Optional[str],
    page_count: Optional[int],
    start_time: Optional[int],
) -> UpstreamCall:
    if not is_blank(chain_id):
        path = "/v1/user/history_list"
        params = {**user, "chain_id": chain_id}
    else:
        path = "/v1/user/history"
        params = with_optional(user, chain_ids=_chain_filter(chain_ids))
    return UpstreamCall(
        path,
        with_optional(params, page_count=page_count, start_time=start_time),
        paginate=True,
    )


def _chart_call(user: dict, *, chain_id: Optional[str], chain_ids: Optional[str]) -> UpstreamCall:
    if not is_blank(chain_id):
        return UpstreamCall("/v1/user/chain_net_curve", {**user, "chain_id": chain_id}, paginate=True)
    return UpstreamCall(
        "/v1/user/total_net_curve",
        with_optional(user, chain_ids=_chain_filter(chain_ids)),
        paginate=True,
    )


def select_user_activities_call(
    *,
    id: str,
    activity_type: Optional[str] = None,
    chain_id: Optional[str] = None,
    protocol_id: Optional[str] = None,
    chain_ids: Optional[str] = None,
    page_count: Optional[int] = None,
    start_time: Optional[int] = None,
    is_simple: bool = True,
) -> UpstreamCall | ParamError:
    user = {"id": id}
    if activity_type == "protocols":
        return _protocols_call(
            user,
            chain_id=chain_id,
            protocol_id=protocol_id,
            chain_ids=chain_ids,
            is_simple=is_simple,
        )
    if activity_type == "history":
        return _history_call(
            user,
            chain_id=chain_id,
            chain_ids=chain_ids,
            page_count=page_count,
            start_time=start_time,
        )
    if activity_type == "chart":
        return _chart_call(user, chain_id=chain_id, chain_ids=chain_ids)
    return param_error("Invalid activity_type parameter")


async def get_user_activities(
    *,
    id: str,
    activity_type: Optional[str] = None,
    chain_id: Optional[str] = None,
    protocol_id: Optional[str] = None,
    chain_ids: Optional[str] = None,
    page_count: Optional[int] = None,
    start_time: Optional[int] = None,
    is_simple: bool = True,
    page: int = DEFAULT_PAGE,
    page_size: int = DEFAULT_PAGE_SIZE,
    client=default_client,
) -> Any:
    """
    Fetch a wallet's protocol positions, transaction history or net-worth curve.

    A ``protocol_id`` wins over ``chain_id`` for position queries; everything
    but a single-protocol position is paginated.
    """
    call = select_user_activities_call(
        id=id,
        activity_type=activity_type,
        chain_id=chain_id,
        protocol_id=protocol_id,
        chain_ids=chain_ids,
        page_count=page_count,
        start_time=start_time,
        is_simple=is_simple,
    )
    return await run_call(call, client=client, page=page, page_size=page_size)
