"""User token/NFT approval tools."""

from __future__ import annotations

from typing import Any

from debank_mcp.config import DEFAULT_PAGE, DEFAULT_PAGE_SIZE
from debank_mcp.debank_api import default_client
from debank_mcp.tools.routing import ParamError, UpstreamCall, param_error, run_call

AUTH_PATHS = {
    "token": "/v1/user/token_auth_list",
    "nft": "/v1/user/nft_auth_list",
}


def select_user_authorizations_call(
    *, id: str, chain_id: str, auth_type: str = "token"
) -> UpstreamCall | ParamError:
    path = AUTH_PATHS.get(auth_type) if isinstance(auth_type, str) else None
    if path is None:
        return param_error("Invalid auth_type parameter. Use 'token' or 'nft'.")
    return UpstreamCall(path, {"id": id, "chain_id": chain_id}, paginate=True)


async def get_user_authorizations(
    *,
    id: str,
    chain_id: str,
    auth_type: str = "token",
    page: int = DEFAULT_PAGE,
    page_size: int = DEFAULT_PAGE_SIZE,
    client=default_client,
) -> Any:
    """List the token or NFT approvals a wallet has granted on one chain."""
    call = select_user_authorizations_call(id=id, chain_id=chain_id, auth_type=auth_type)
    return await run_call(call, client=client, page=page, page_size=page_size)
