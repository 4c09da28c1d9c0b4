"""Minimal live sanity checks for the DeBank MCP tools (requires ACCESS_KEY)."""

from __future__ import annotations

import asyncio
import os
import sys

REPO_ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if REPO_ROOT not in sys.path:
    sys.path.insert(0, REPO_ROOT)

from debank_mcp.debank_api import default_client  # noqa: E402
from debank_mcp.tools import (  # noqa: E402
    get_chain_info,
    get_protocol_info,
    get_token_info,
    get_user_assets,
    wallet_tools,
)

# Default to a well-known public wallet; override via env.
SAMPLE_ADDRESS = os.getenv("DEBANK_SAMPLE_ADDRESS", "0xd8da6bf26964af9d7eed9e03e53415d37aa96045")
SAMPLE_CHAIN = os.getenv("DEBANK_SAMPLE_CHAIN", "eth")
# Opt-in to wallet-level queries (they cost more API units).
RUN_USER_QUERIES = os.getenv("RUN_USER_SANITY", "false").lower() in {"1", "true", "yes"}


async def main() -> None:
    try:
        print("Chain:", await get_chain_info(id=SAMPLE_CHAIN))
        print("Chains (page 1):", await get_chain_info(page_size=3))
        print("Top protocols:", await get_protocol_info(chain_id=SAMPLE_CHAIN, page_size=3))
        print("Token:", await get_token_info(chain_id=SAMPLE_CHAIN, id=SAMPLE_CHAIN))
        print("Gas market:", await wallet_tools(action="gas", chain_id=SAMPLE_CHAIN))

        if RUN_USER_QUERIES:
            print("Total balance:", await get_user_assets(id=SAMPLE_ADDRESS))
            print("Used chains:", await get_user_assets(id=SAMPLE_ADDRESS, asset_type="chains"))
    finally:
        await default_client.aclose()


if __name__ == "__main__":
    asyncio.run(main())
