"""Run the DeBank MCP server: ``python -m debank_mcp``."""

from __future__ import annotations

import uvicorn

from debank_mcp.config import default_config


def main() -> None:
    uvicorn.run(
        "debank_mcp.server:app",
        host=default_config.host,
        port=default_config.port,
        log_level=default_config.log_level.lower(),
    )


if __name__ == "__main__":
    main()
