import json
import logging

from debank_mcp.config import default_config
from debank_mcp.server import JsonFormatter


def test_logging_level_config():
    level = getattr(logging, default_config.log_level.upper(), logging.INFO)
    assert level in (
        logging.DEBUG,
        logging.INFO,
        logging.WARNING,
        logging.ERROR,
        logging.CRITICAL,
    )


def test_json_formatter_includes_tool_extras():
    record = logging.LogRecord("debank_mcp.mcp", logging.WARNING, __file__, 1, "tool=%s outcome=error", ("x",), None)
    record.tool = "get_token_info"
    record.error = "date_at parameter is required for historical price"
    payload = json.loads(JsonFormatter().format(record))
    assert payload == {
        "level": "WARNING",
        "message": "tool=x outcome=error",
        "name": "debank_mcp.mcp",
        "tool": "get_token_info",
        "error": "date_at parameter is required for historical price",
    }
