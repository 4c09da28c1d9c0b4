import json

from fastapi.testclient import TestClient

from debank_mcp.server import MCP_SERVER_NAME, MCP_SERVER_VERSION, app


def test_mcp_list_tools():
    client = TestClient(app)
    resp = client.post("/mcp", json={"jsonrpc": "2.0", "id": 1, "method": "tools/list"})
    assert resp.status_code == 200
    data = resp.json()
    assert data["jsonrpc"] == "2.0"
    assert data["id"] == 1
    tools = data["result"]["tools"]
    assert len(tools) == 9
    assert tools[0]["name"] == "get_chain_info"
    assert tools[-1]["name"] == "wallet_tools"
    assert all("inputSchema" in tool for tool in tools)


def test_mcp_list_tools_alias():
    client = TestClient(app)
    resp = client.post("/mcp", json={"jsonrpc": "2.0", "id": 3, "method": "list_tools"})
    assert resp.status_code == 200
    assert any(tool["name"] == "get_pool_info" for tool in resp.json()["result"]["tools"])


def test_mcp_initialize():
    client = TestClient(app)
    resp = client.post(
        "/mcp",
        json={
            "jsonrpc": "2.0",
            "id": 10,
            "method": "initialize",
            "params": {
                "protocolVersion": "2025-03-26",
                "capabilities": {},
                "clientInfo": {"name": "test-client", "version": "0.0.0"},
            },
        },
    )
    assert resp.status_code == 200
    result = resp.json()["result"]
    assert result["protocolVersion"] == "2025-03-26"
    assert result["serverInfo"] == {"name": MCP_SERVER_NAME, "version": MCP_SERVER_VERSION}
    assert result["capabilities"]["tools"]["listChanged"] is False


def test_mcp_tools_call_parameter_error_is_text_payload():
    client = TestClient(app)
    resp = client.post(
        "/mcp",
        json={
            "jsonrpc": "2.0",
            "id": 4,
            "method": "tools/call",
            "params": {"name": "get_token_info", "arguments": {"chain_id": "eth", "id": "eth", "action": "history"}},
        },
    )
    assert resp.status_code == 200
    data = resp.json()
    assert data["id"] == 4
    content = data["result"]["content"][0]
    assert content["type"] == "text"
    assert json.loads(content["text"]) == {"error": "date_at parameter is required for historical price"}


def test_mcp_call_tool_alias_unknown_tool():
    client = TestClient(app)
    resp = client.post(
        "/mcp",
        json={"jsonrpc": "2.0", "id": 5, "method": "call_tool", "params": {"tool": "nope", "params": {}}},
    )
    assert resp.status_code == 200
    assert resp.json()["result"]["content"][0]["text"] == "Tool nope not found"


def test_mcp_tools_call_uses_dispatch(monkeypatch):
    async def fake_call_tool(name, arguments=None):
        return {"content": [{"type": "text", "text": json.dumps({"name": name, "args": arguments})}]}

    monkeypatch.setattr("debank_mcp.server.mcp.call_tool", fake_call_tool)

    client = TestClient(app)
    resp = client.post(
        "/mcp",
        json={
            "jsonrpc": "2.0",
            "id": 15,
            "method": "tools/call",
            "params": {"name": "get_chain_info", "arguments": {"id": "eth"}},
        },
    )
    text = resp.json()["result"]["content"][0]["text"]
    assert json.loads(text) == {"name": "get_chain_info", "args": {"id": "eth"}}


def test_mcp_unknown_method_returns_error():
    client = TestClient(app)
    resp = client.post("/mcp", json={"jsonrpc": "2.0", "id": 7, "method": "not_a_real_method"})
    assert resp.status_code == 200
    assert resp.json()["error"]["code"] == -32601


def test_mcp_invalid_params_type():
    client = TestClient(app)
    resp = client.post("/mcp", json={"jsonrpc": "2.0", "id": 11, "method": "tools/call", "params": []})
    assert resp.status_code == 200
    data = resp.json()
    assert data["id"] == 11
    assert data["error"]["code"] == -32602


def test_mcp_call_tool_missing_name_is_invalid_params():
    client = TestClient(app)
    resp = client.post(
        "/mcp",
        json={"jsonrpc": "2.0", "id": 13, "method": "tools/call", "params": {"arguments": {}}},
    )
    assert resp.json()["error"]["code"] == -32602


def test_mcp_non_object_arguments_is_invalid_params():
    client = TestClient(app)
    resp = client.post(
        "/mcp",
        json={"jsonrpc": "2.0", "id": 14, "method": "tools/call", "params": {"name": "get_chain_info", "arguments": [1]}},
    )
    assert resp.json()["error"]["code"] == -32602


def test_mcp_malformed_json_is_internal_error():
    client = TestClient(app)
    resp = client.post("/mcp", content="{not json", headers={"Content-Type": "application/json"})
    assert resp.status_code == 500
    assert resp.json() == {
        "jsonrpc": "2.0",
        "id": None,
        "error": {"code": -32603, "message": "Internal server error"},
    }


def test_mcp_non_object_body_is_internal_error():
    client = TestClient(app)
    resp = client.post("/mcp", json=[1, 2, 3])
    assert resp.status_code == 500
    assert resp.json()["error"]["code"] == -32603


def test_mcp_missing_method_is_internal_error():
    client = TestClient(app)
    resp = client.post("/mcp", json={"jsonrpc": "2.0", "id": 12})
    assert resp.status_code == 500
    assert resp.json()["error"]["code"] == -32603


def test_mcp_unexpected_exception_is_internal_error(monkeypatch):
    def broken_list_tools():
        raise RuntimeError("registry exploded")

    monkeypatch.setattr("debank_mcp.server.mcp.list_tools", broken_list_tools)
    client = TestClient(app)
    resp = client.post("/mcp", json={"jsonrpc": "2.0", "id": 2, "method": "tools/list"})
    assert resp.status_code == 500
    assert resp.json()["error"]["code"] == -32603


def test_mcp_initialized_notification_ignored():
    client = TestClient(app)
    resp = client.post("/mcp", json={"jsonrpc": "2.0", "method": "notifications/initialized"})
    assert resp.status_code == 204
    assert resp.text == ""
