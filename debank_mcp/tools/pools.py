"""Liquidity pool tools."""

from __future__ import annotations

from typing import Any

from debank_mcp.debank_api import default_client
from debank_mcp.tools.routing import UpstreamCall, run_call


async def get_pool_info(*, id: str, chain_id: str, client=default_client) -> Any:
    """Fetch deposits, user counts and protocol details for one pool."""
    call = UpstreamCall("/v1/pool", {"id": id, "chain_id": chain_id})
    return await run_call(call, client=client)
