"""
DeBank MCP server package.

This package exposes LLM-friendly tools backed by the DeBank Pro OpenAPI
(chains, protocols, tokens, pools, user assets and activity, NFT collections,
wallet helpers). See DESIGN.md for full details.
"""

__all__ = ["config"]
