"""LLM-facing tool implementations."""

from .chains import get_chain_info
from .protocols import get_protocol_info
from .tokens import get_token_info
from .pools import get_pool_info
from .user_assets import get_user_assets
from .user_activities import get_user_activities
from .user_authorizations import get_user_authorizations
from .nft_collections import get_collection_nft_list
from .wallet import wallet_tools
from .pagination import paginate
from . import validators

__all__ = [
    "get_chain_info",
    "get_protocol_info",
    "get_token_info",
    "get_pool_info",
    "get_user_assets",
    "get_user_activities",
    "get_user_authorizations",
    "get_collection_nft_list",
    "wallet_tools",
    "paginate",
    "validators",
]
