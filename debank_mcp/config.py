"""
Configuration helpers for the DeBank MCP server.

This module centralizes the upstream base URL, AccessKey loading, listening
address and logging options. No secrets are stored in the repository; the
AccessKey is read once from environment or a local file if present.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

# Upstream connection settings
DEFAULT_BASE_URL = os.getenv("DEBANK_BASE_URL", "https://pro-openapi.debank.com")


def _load_timeout() -> float:
    raw_timeout = os.getenv("DEBANK_HTTP_TIMEOUT")
    if raw_timeout:
        try:
            return float(raw_timeout)
        except ValueError:
            return 10.0
    return 10.0


def _load_port() -> int:
    raw_port = os.getenv("DEBANK_MCP_PORT")
    if raw_port:
        try:
            port = int(raw_port)
        except ValueError:
            return 8080
        if 0 < port < 65536:
            return port
    return 8080


DEFAULT_TIMEOUT = _load_timeout()
DEFAULT_HOST = os.getenv("DEBANK_MCP_HOST", "0.0.0.0")
DEFAULT_PORT = _load_port()

# AccessKey handling
ACCESS_KEY_ENV_VAR = "ACCESS_KEY"
ACCESS_KEY_FILE_ENV_VAR = "DEBANK_ACCESS_KEY_FILE"
DEFAULT_ACCESS_KEY_FILE = "accesskey.txt"

# Post-processing pagination
DEFAULT_PAGE = 1
DEFAULT_PAGE_SIZE = 5

LOG_LEVEL = os.getenv("DEBANK_MCP_LOG_LEVEL", "INFO")
LOG_FORMAT = os.getenv("DEBANK_MCP_LOG_FORMAT", "json")  # json or plain


def load_access_key() -> str:
    """
    Load the DeBank AccessKey from environment or a local file.

    Returns:
        The key string, or an empty string when none is configured. An absent
        key is forwarded upstream as-is; it is never logged.
    """
    env_key = os.getenv(ACCESS_KEY_ENV_VAR)
    if env_key:
        return env_key.strip()

    key_path = os.getenv(ACCESS_KEY_FILE_ENV_VAR, DEFAULT_ACCESS_KEY_FILE)
    if key_path:
        path = Path(key_path)
        if path.is_file():
            return path.read_text(encoding="utf-8").strip()

    return ""


@dataclass(slots=True)
class DebankConfig:
    """Runtime configuration for upstream access and the HTTP server."""

    base_url: str = DEFAULT_BASE_URL
    timeout: float = DEFAULT_TIMEOUT
    access_key: str = load_access_key()
    host: str = DEFAULT_HOST
    port: int = DEFAULT_PORT
    default_page: int = DEFAULT_PAGE
    default_page_size: int = DEFAULT_PAGE_SIZE
    log_level: str = LOG_LEVEL
    log_format: str = LOG_FORMAT


default_config = DebankConfig()
