"""User asset tools: balances, used chains, tokens and NFTs."""

from __future__ import annotations

from typing import Any, Optional

from debank_mcp.config import DEFAULT_PAGE, DEFAULT_PAGE_SIZE
from debank_mcp.debank_api import default_client
from debank_mcp.tools.routing import ParamError, UpstreamCall, param_error, run_call, with_optional
from debank_mcp.tools.validators import is_blank

ASSET_TYPES = ("balance", "chains", "tokens", "token", "nfts")


def _single_or_all_chains(
    user: dict,
    *,
    chain_id: Optional[str],
    chain_ids: Optional[str],
    single_path: str,
    all_path: str,
    paginate: bool,
) -> UpstreamCall:
    if not is_blank(chain_id):
        return UpstreamCall(single_path, {**user, "chain_id": chain_id}, paginate=paginate)
    chain_filter = None if is_blank(chain_ids) else chain_ids
    return UpstreamCall(all_path, with_optional(user, chain_ids=chain_filter), paginate=paginate)


def select_user_assets_call(
    *,
    id: str,
    asset_type: str = "balance",
    chain_id: Optional[str] = None,
    token_id: Optional[str] = None,
    chain_ids: Optional[str] = None,
) -> UpstreamCall | ParamError:
    user = {"id": id}
    if asset_type == "balance":
        return _single_or_all_chains(
            user,
            chain_id=chain_id,
            chain_ids=chain_ids,
            single_path="/v1/user/chain_balance",
            all_path="/v1/user/total_balance",
            paginate=False,
        )
    if asset_type == "chains":
        return UpstreamCall("/v1/user/used_chain_list", user, paginate=True)
    if asset_type == "tokens":
        return _single_or_all_chains(
            user,
            chain_id=chain_id,
            chain_ids=chain_ids,
            single_path="/v1/user/token_list",
            all_path="/v1/user/all_token_list",
            paginate=True,
        )
    if asset_type == "token":
        if is_blank(chain_id) or is_blank(token_id):
            return param_error("chain_id and token_id are required for token balance query")
        return UpstreamCall(
            "/v1/user/token_balance",
            {**user, "chain_id": chain_id, "token_id": token_id},
        )
    if asset_type == "nfts":
        return _single_or_all_chains(
            user,
            chain_id=chain_id,
            chain_ids=chain_ids,
            single_path="/v1/user/nft_list",
            all_path="/v1/user/all_nft_list",
            paginate=True,
        )
    return param_error("Invalid asset_type parameter")


async def get_user_assets(
    *,
    id: str,
    asset_type: str = "balance",
    chain_id: Optional[str] = None,
    token_id: Optional[str] = None,
    chain_ids: Optional[str] = None,
    page: int = DEFAULT_PAGE,
    page_size: int = DEFAULT_PAGE_SIZE,
    client=default_client,
) -> Any:
    """
    Fetch a wallet's balance, used chains, token list, single token balance or NFTs.

    ``chain_id`` narrows balance/token/NFT queries to one chain; without it the
    all-chain endpoint is used, optionally filtered by comma-separated
    ``chain_ids``.
    """
    call = select_user_assets_call(
        id=id,
        asset_type=asset_type,
        chain_id=chain_id,
        token_id=token_id,
        chain_ids=chain_ids,
    )
    return await run_call(call, client=client, page=page, page_size=page_size)
