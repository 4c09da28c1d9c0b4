"""
Tool registry and dispatch for the MCP surface.

The registry is a fixed, ordered list of tool descriptors built at import
time, plus a name-to-handler table. ``call_tool`` looks a tool up, invokes its
handler, and wraps whatever happens into a text content envelope; it never
raises to the transport layer.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from typing import Any, Awaitable, Callable, Dict, List, Optional

from debank_mcp.config import DEFAULT_PAGE, DEFAULT_PAGE_SIZE
from debank_mcp.metrics import default_metrics
from debank_mcp.tools import (
    get_chain_info,
    get_collection_nft_list,
    get_pool_info,
    get_protocol_info,
    get_token_info,
    get_user_activities,
    get_user_assets,
    get_user_authorizations,
    wallet_tools,
)
from debank_mcp.tools.routing import ParamError
from debank_mcp.tools.tokens import TOKEN_ACTIONS
from debank_mcp.tools.user_activities import ACTIVITY_TYPES
from debank_mcp.tools.user_assets import ASSET_TYPES
from debank_mcp.tools.user_authorizations import AUTH_PATHS
from debank_mcp.tools.wallet import WALLET_ACTIONS

logger = logging.getLogger(__name__)

# Every unknown tool name is counted under this one key.
UNKNOWN_TOOL_KEY = "<unknown>"

CHAIN_ID_DESCRIPTION = "Chain identifier (e.g. eth, bsc, xdai)"
USER_ID_DESCRIPTION = "User wallet address"
CHAIN_IDS_DESCRIPTION = "Optional comma-separated list of chain IDs"


def _pagination_properties() -> Dict[str, Any]:
    return {
        "page": {
            "type": "integer",
            "minimum": 1,
            "description": "Page number, starting from 1",
            "default": DEFAULT_PAGE,
        },
        "page_size": {
            "type": "integer",
            "minimum": 1,
            "description": "Number of records per page",
            "default": DEFAULT_PAGE_SIZE,
        },
    }


def _object_schema(properties: Dict[str, Any], required: Optional[List[str]] = None) -> Dict[str, Any]:
    return {"type": "object", "properties": properties, "required": required or []}


ToolHandler = Callable[..., Awaitable[Any]]


@dataclass(frozen=True, slots=True)
class ToolDefinition:
    name: str
    description: str
    input_schema: Dict[str, Any]


TOOLS: List[ToolDefinition] = [
    ToolDefinition(
        name="get_chain_info",
        description=(
            "Get information about blockchains via GET requests to /v1/chain or /v1/chain/list. "
            "Can retrieve details about a specific chain or list all supported chains."
        ),
        input_schema=_object_schema(
            {
                "id": {"type": "string", "description": "Optional chain identifier (e.g. eth, bsc, xdai)"},
                **_pagination_properties(),
            }
        ),
    ),
    ToolDefinition(
        name="get_protocol_info",
        description=(
            "Get information about DeFi protocols via GET requests to various protocol endpoints. "
            "Can retrieve details about a specific protocol, list protocols on a chain, or fetch top holders."
        ),
        input_schema=_object_schema(
            {
                "id": {"type": "string", "description": "Protocol identifier (e.g. curve, uniswap)"},
                "chain_id": {"type": "string", "description": "Chain identifier (e.g. eth, bsc)"},
                "get_top_holders": {
                    "type": "boolean",
                    "description": "Set to True to fetch the top holders of a protocol",
                    "default": False,
                },
                "start": {"type": "integer", "minimum": 0, "description": "Integer offset for pagination"},
                "limit": {"type": "integer", "minimum": 1, "description": "Number of results to return", "default": 10},
                **_pagination_properties(),
            }
        ),
    ),
    ToolDefinition(
        name="get_token_info",
        description=(
            "Get information about tokens via GET requests to various token endpoints. "
            "Can retrieve token details, top holders, or historical prices."
        ),
        input_schema=_object_schema(
            {
                "chain_id": {"type": "string", "description": CHAIN_ID_DESCRIPTION},
                "id": {
                    "type": "string",
                    "description": "Token identifier - either a contract address or a native token id",
                },
                "action": {
                    "type": "string",
                    "description": "Type of information to retrieve",
                    "enum": list(TOKEN_ACTIONS),
                    "default": "details",
                },
                "date_at": {"type": "string", "description": "UTC timezone date in YYYY-MM-DD format"},
                "start": {"type": "integer", "minimum": 0, "description": "Integer offset for pagination", "default": 0},
                "limit": {"type": "integer", "minimum": 1, "description": "Number of holders to return", "default": 100},
                **_pagination_properties(),
            },
            ["chain_id", "id"],
        ),
    ),
    ToolDefinition(
        name="get_pool_info",
        description=(
            "Get detailed information about a specific liquidity pool via a GET request to /v1/pool. "
            "Returns detailed statistics about the pool including its deposits, user counts, and associated protocol."
        ),
        input_schema=_object_schema(
            {
                "id": {"type": "string", "description": "Pool identifier"},
                "chain_id": {"type": "string", "description": CHAIN_ID_DESCRIPTION},
            },
            ["id", "chain_id"],
        ),
    ),
    ToolDefinition(
        name="get_user_assets",
        description=(
            "Get information about a user's assets across different blockchains. "
            "Can retrieve basic balance, token lists, NFTs, and more with optional chain filtering."
        ),
        input_schema=_object_schema(
            {
                "id": {"type": "string", "description": USER_ID_DESCRIPTION},
                "asset_type": {
                    "type": "string",
                    "description": "Type of asset information to retrieve",
                    "enum": list(ASSET_TYPES),
                    "default": "balance",
                },
                "chain_id": {"type": "string", "description": "Chain identifier for single-chain queries"},
                "token_id": {"type": "string", "description": "Token identifier for specific token balance query"},
                "chain_ids": {"type": "string", "description": CHAIN_IDS_DESCRIPTION},
                **_pagination_properties(),
            },
            ["id"],
        ),
    ),
    ToolDefinition(
        name="get_user_activities",
        description=(
            "Get information about a user's protocol positions, transaction history, and balance charts. "
            "Supports filtering by chain and protocol."
        ),
        input_schema=_object_schema(
            {
                "id": {"type": "string", "description": USER_ID_DESCRIPTION},
                "activity_type": {
                    "type": "string",
                    "description": "Type of activity information to retrieve",
                    "enum": list(ACTIVITY_TYPES),
                },
                "chain_id": {"type": "string", "description": "Chain identifier for single-chain queries"},
                "protocol_id": {"type": "string", "description": "Protocol identifier for specific protocol query"},
                "chain_ids": {"type": "string", "description": CHAIN_IDS_DESCRIPTION},
                "page_count": {
                    "type": "integer",
                    "minimum": 1,
                    "description": "Optional number of pages to return for history queries",
                },
                "start_time": {
                    "type": "integer",
                    "minimum": 0,
                    "description": "Optional Unix timestamp to start from for history queries",
                },
                "is_simple": {
                    "type": "boolean",
                    "description": "Whether to use simple or complex protocol list",
                    "default": True,
                },
                **_pagination_properties(),
            },
            ["id", "activity_type"],
        ),
    ),
    ToolDefinition(
        name="get_user_authorizations",
        description="Get information about a user's token and NFT authorizations on a specific blockchain.",
        input_schema=_object_schema(
            {
                "id": {"type": "string", "description": USER_ID_DESCRIPTION},
                "chain_id": {"type": "string", "description": CHAIN_ID_DESCRIPTION},
                "auth_type": {
                    "type": "string",
                    "description": "Type of authorization to retrieve",
                    "enum": list(AUTH_PATHS),
                    "default": "token",
                },
                **_pagination_properties(),
            },
            ["id", "chain_id"],
        ),
    ),
    ToolDefinition(
        name="get_collection_nft_list",
        description=(
            "Get a list of NFTs in a specific collection using a GET request to /v1/collection/nft_list. "
            "Returns an array of NFT objects with details like name, description, content, and attributes."
        ),
        input_schema=_object_schema(
            {
                "id": {"type": "string", "description": "NFT contract address"},
                "chain_id": {"type": "string", "description": CHAIN_ID_DESCRIPTION},
                "start": {"type": "integer", "minimum": 0, "description": "Integer offset for pagination", "default": 0},
                "limit": {"type": "integer", "minimum": 1, "description": "Number of NFTs to return", "default": 20},
                **_pagination_properties(),
            },
            ["id", "chain_id"],
        ),
    ),
    ToolDefinition(
        name="wallet_tools",
        description=(
            "Access wallet-related functionality: get gas prices, analyze transactions, or simulate transactions."
        ),
        input_schema=_object_schema(
            {
                "action": {
                    "type": "string",
                    "description": "Type of wallet action to perform",
                    "enum": list(WALLET_ACTIONS),
                },
                "chain_id": {"type": "string", "description": CHAIN_ID_DESCRIPTION},
                "tx": {"type": "object", "description": "Transaction object"},
                "pending_tx_list": {
                    "type": "array",
                    "items": {"type": "object"},
                    "description": "Optional list of transactions to execute before the main transaction",
                },
                **_pagination_properties(),
            },
            ["action"],
        ),
    ),
]

TOOL_HANDLERS: Dict[str, ToolHandler] = {
    "get_chain_info": get_chain_info,
    "get_protocol_info": get_protocol_info,
    "get_token_info": get_token_info,
    "get_pool_info": get_pool_info,
    "get_user_assets": get_user_assets,
    "get_user_activities": get_user_activities,
    "get_user_authorizations": get_user_authorizations,
    "get_collection_nft_list": get_collection_nft_list,
    "wallet_tools": wallet_tools,
}


def get_tool(tool_name: str) -> Optional[ToolDefinition]:
    return next((tool for tool in TOOLS if tool.name == tool_name), None)


def list_tools() -> List[Dict[str, Any]]:
    """Return tool descriptors in registry order."""
    return [
        {
            "name": tool.name,
            "description": tool.description,
            "inputSchema": tool.input_schema,
        }
        for tool in TOOLS
    ]


def text_content(text: str) -> Dict[str, Any]:
    return {"content": [{"type": "text", "text": text}]}


def _declared_arguments(tool: ToolDefinition, arguments: Dict[str, Any]) -> Dict[str, Any]:
    # Undeclared keys are dropped so they can never reach handler keywords such as ``client``.
    declared = tool.input_schema.get("properties", {})
    return {key: value for key, value in arguments.items() if key in declared}


async def call_tool(tool_name: str, arguments: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
    """Dispatch to a tool by name and wrap the outcome in a text content envelope."""
    arguments = arguments or {}
    tool = get_tool(tool_name)
    if tool is None:
        logger.warning("tool=%s outcome=not_found", tool_name, extra={"tool": tool_name})
        default_metrics.record_tool(UNKNOWN_TOOL_KEY, outcome="not_found")
        return text_content(f"Tool {tool_name} not found")

    handler = TOOL_HANDLERS.get(tool_name)
    if handler is None:
        logger.error("tool=%s outcome=handler_missing", tool_name, extra={"tool": tool_name})
        default_metrics.record_tool(tool_name, outcome="failure")
        return text_content(f"Handler for {tool_name} not found")

    logger.info("Calling handler for %s", tool_name, extra={"tool": tool_name})
    try:
        result = await handler(**_declared_arguments(tool, arguments))
    except Exception as exc:
        logger.exception("tool=%s outcome=failure", tool_name, extra={"tool": tool_name, "error": str(exc)})
        default_metrics.record_tool(tool_name, outcome="failure")
        return text_content(f"Tool {tool_name} failed: {exc}")

    if isinstance(result, ParamError):
        logger.warning(
            "tool=%s outcome=error error=%s",
            tool_name,
            result.get("error"),
            extra={"tool": tool_name, "error": result.get("error")},
        )
        default_metrics.record_tool(tool_name, outcome="error")
    else:
        logger.info("tool=%s outcome=success", tool_name, extra={"tool": tool_name})
        default_metrics.record_tool(tool_name, outcome="success")
    return text_content(json.dumps(result))
