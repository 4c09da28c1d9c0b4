"""FastAPI application exposing the DeBank tools over a JSON-RPC MCP endpoint."""

from __future__ import annotations

import json
import logging
import time
import uuid
from contextlib import asynccontextmanager
from typing import Any, Dict, Optional

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse, Response

from debank_mcp import mcp
from debank_mcp.config import DebankConfig, default_config
from debank_mcp.debank_api import default_client
from debank_mcp.metrics import default_metrics

logger = logging.getLogger(__name__)


class JsonFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        payload = {
            "level": record.levelname,
            "message": record.getMessage(),
            "name": record.name,
        }
        for key in ("tool", "request_id", "error"):
            if hasattr(record, key):
                payload[key] = getattr(record, key)
        return json.dumps(payload)


def configure_logging(config: DebankConfig = default_config) -> None:
    level = getattr(logging, config.log_level.upper(), logging.INFO)
    if config.log_format.lower() == "json":
        handler = logging.StreamHandler()
        handler.setFormatter(JsonFormatter())
        logging.basicConfig(level=level, handlers=[handler])
    else:
        logging.basicConfig(level=level)


configure_logging()
HEALTH_STATUS = {"status": "ok"}
APP_VERSION = "1.0.0"
MCP_SERVER_NAME = "debank"
MCP_SERVER_VERSION = APP_VERSION
DEFAULT_PROTOCOL_VERSION = "2025-03-26"
INTERNAL_ERROR_CODE = -32603


@asynccontextmanager
async def lifespan(_app: FastAPI):
    # Startup
    logger.info("DeBank MCP server starting base_url=%s", default_config.base_url)
    yield
    # Shutdown
    logger.info("Shutting down server...")
    await default_client.aclose()


app = FastAPI(
    title="DeBank MCP Server",
    description="DeBank Pro OpenAPI tool surface for LLM agents.",
    version=APP_VERSION,
    lifespan=lifespan,
)


@app.middleware("http")
async def add_request_context(request: Request, call_next):
    request_id = str(uuid.uuid4())
    request.state.request_id = request_id
    start = time.time()
    default_metrics.incr_request()
    response = await call_next(request)
    duration_ms = (time.time() - start) * 1000
    default_metrics.record_duration(request_id, duration_ms)
    response.headers["X-Request-ID"] = request_id
    return response


@app.get("/health")
async def health() -> JSONResponse:
    """Lightweight health endpoint for monitoring."""
    return JSONResponse(content=HEALTH_STATUS)


@app.get("/metrics")
async def metrics() -> JSONResponse:
    """Return in-process metrics snapshot."""
    return JSONResponse(content=default_metrics.snapshot())


@app.post("/mcp")
async def mcp_gateway(request: Request) -> Response:
    """
    Minimal JSON-RPC gateway for MCP clients.

    Supported methods:
      - initialize
      - tools/list (alias list_tools)
      - tools/call (alias call_tool)
      - notifications/initialized
    """
    request_id = getattr(request.state, "request_id", None)
    try:
        return await _handle_rpc(request, request_id)
    except Exception:
        logger.exception("Error handling MCP request", extra={"request_id": request_id})
        return _internal_error()


async def _handle_rpc(request: Request, request_id: Optional[str]) -> Response:
    start_time = time.time()

    def _respond(payload: Dict[str, Any], status_code: int = 200, *, outcome: str, method_label: Optional[str] = None, tool_label: Optional[str] = None, error_code: Optional[int] = None) -> JSONResponse:
        duration_ms = (time.time() - start_time) * 1000
        logger.debug(
            "mcp outcome=%s method=%s tool=%s id=%s status=%s duration_ms=%.2f error_code=%s",
            outcome,
            method_label,
            tool_label,
            payload.get("id"),
            status_code,
            duration_ms,
            error_code,
            extra={"request_id": request_id, "tool": tool_label, "error": error_code},
        )
        return JSONResponse(status_code=status_code, content=payload)

    try:
        body = await request.json()
    except ValueError:
        logger.warning("mcp request body is not valid JSON", extra={"request_id": request_id})
        return _internal_error()

    if not isinstance(body, dict) or not body.get("method"):
        logger.warning("mcp request is not a JSON-RPC call", extra={"request_id": request_id})
        return _internal_error()

    method = body["method"]
    rpc_id = body.get("id")
    raw_params = body.get("params")
    if raw_params is None:
        params = {}
    elif isinstance(raw_params, dict):
        params = raw_params
    else:
        payload = _jsonrpc_error_payload(rpc_id, -32602, "Invalid params")
        return _respond(payload, outcome="error", method_label=method, error_code=-32602)

    if method == "initialize":
        protocol_version = params.get("protocolVersion")
        if not isinstance(protocol_version, str) or not protocol_version:
            protocol_version = DEFAULT_PROTOCOL_VERSION
        result = {
            "protocolVersion": protocol_version,
            "serverInfo": {"name": MCP_SERVER_NAME, "version": MCP_SERVER_VERSION},
            "capabilities": {"tools": {"listChanged": False}},
        }
        return _respond(_jsonrpc_success_payload(rpc_id, result), outcome="success", method_label=method)

    if method in ("list_tools", "tools/list"):
        logger.info("Handling listTools request", extra={"request_id": request_id})
        result = {"tools": mcp.list_tools()}
        return _respond(_jsonrpc_success_payload(rpc_id, result), outcome="success", method_label=method)

    if method in ("call_tool", "tools/call"):
        tool_name = params.get("name") or params.get("tool")
        tool_arguments = params.get("arguments")
        if tool_arguments is None:
            tool_arguments = params.get("params") or {}
        if not isinstance(tool_name, str) or not tool_name.strip():
            payload = _jsonrpc_error_payload(rpc_id, -32602, "Invalid params")
            return _respond(payload, outcome="error", method_label=method, error_code=-32602)
        if not isinstance(tool_arguments, dict):
            payload = _jsonrpc_error_payload(rpc_id, -32602, "Invalid params")
            return _respond(payload, outcome="error", method_label=method, tool_label=tool_name, error_code=-32602)
        logger.info(
            "Handling callTool request for tool: %s",
            tool_name,
            extra={"request_id": request_id, "tool": tool_name},
        )
        result = await mcp.call_tool(tool_name, tool_arguments)
        return _respond(
            _jsonrpc_success_payload(rpc_id, result),
            outcome="success",
            method_label=method,
            tool_label=tool_name,
        )

    if method in ("notifications/initialized", "initialized"):
        # Notifications should not return a JSON-RPC response body.
        return Response(status_code=204)

    payload = _jsonrpc_error_payload(rpc_id, -32601, "Method not found")
    return _respond(payload, outcome="error", method_label=method, error_code=-32601)


# Run with: python -m debank_mcp  (or uvicorn debank_mcp.server:app)


def _jsonrpc_success_payload(rpc_id: Any, result: Any) -> Dict[str, Any]:
    return {"jsonrpc": "2.0", "id": rpc_id, "result": result}


def _jsonrpc_error_payload(rpc_id: Any, code: int, message: str) -> Dict[str, Any]:
    return {"jsonrpc": "2.0", "id": rpc_id, "error": {"code": code, "message": message}}


def _internal_error() -> JSONResponse:
    return JSONResponse(
        status_code=500,
        content=_jsonrpc_error_payload(None, INTERNAL_ERROR_CODE, "Internal server error"),
    )
