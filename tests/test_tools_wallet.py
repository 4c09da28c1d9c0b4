import pytest

from debank_mcp.tools.wallet import select_wallet_call, wallet_tools

TX = {
    "chainId": 1,
    "from": "0x5853ed4f26a3fcea565b3fbc698bb19cdf6deb85",
    "to": "0xdac17f958d2ee523a2206206994597c13d831ec7",
    "value": "0x0",
    "data": "0x",
}


@pytest.mark.asyncio
async def test_gas_requires_chain(stub_client):
    result = await wallet_tools(action="gas", client=stub_client)
    assert result == {"error": "chain_id parameter is required for gas price query"}
    assert stub_client.calls == []


@pytest.mark.asyncio
async def test_gas_market_paginated(stub_client):
    stub_client.response = [{"level": "slow"}, {"level": "normal"}, {"level": "fast"}, {"level": "custom"}]
    result = await wallet_tools(action="gas", chain_id="eth", page_size=3, client=stub_client)
    assert [g["level"] for g in result["data"]] == ["slow", "normal", "fast"]
    assert stub_client.calls == [{"method": "GET", "path": "/v1/wallet/gas_market", "params": {"chain_id": "eth"}}]


@pytest.mark.asyncio
async def test_explain_tx_posts_tx(stub_client):
    stub_client.response = {"abi": {"func": "transfer"}}
    result = await wallet_tools(action="explain_tx", tx=TX, client=stub_client)
    assert result == {"abi": {"func": "transfer"}}
    assert stub_client.calls == [{"method": "POST", "path": "/v1/wallet/explain_tx", "body": {"tx": TX}}]


@pytest.mark.asyncio
async def test_explain_tx_requires_tx(stub_client):
    result = await wallet_tools(action="explain_tx", client=stub_client)
    assert result == {"error": "tx parameter is required for transaction explanation"}
    assert stub_client.calls == []


@pytest.mark.asyncio
async def test_simulate_tx_forwards_pending_list_verbatim(stub_client):
    pending = [{"chainId": 1, "nonce": "0x1"}, {"chainId": 1, "nonce": "0x2"}]
    stub_client.response = {"balance_change": {}}
    result = await wallet_tools(action="simulate_tx", tx=TX, pending_tx_list=pending, client=stub_client)
    assert result == {"balance_change": {}}
    call = stub_client.calls[0]
    assert call["method"] == "POST"
    assert call["path"] == "/v1/wallet/pre_exec_tx"
    assert call["body"] == {"tx": TX, "pending_tx_list": pending}
    assert call["body"]["tx"] is TX
    assert call["body"]["pending_tx_list"] is pending


@pytest.mark.asyncio
async def test_simulate_tx_without_pending_list(stub_client):
    await wallet_tools(action="simulate_tx", tx=TX, client=stub_client)
    assert stub_client.calls[0]["body"] == {"tx": TX}


@pytest.mark.asyncio
async def test_simulate_tx_requires_tx(stub_client):
    result = await wallet_tools(action="simulate_tx", pending_tx_list=[TX], client=stub_client)
    assert result == {"error": "tx parameter is required for transaction simulation"}
    assert stub_client.calls == []


def test_empty_tx_object_counts_as_supplied():
    call = select_wallet_call(action="explain_tx", tx={})
    assert call.method == "POST"
    assert call.body == {"tx": {}}


def test_wallet_unknown_action():
    assert select_wallet_call(action="sign") == {
        "error": "Invalid action parameter. Use 'gas', 'explain_tx', or 'simulate_tx'."
    }


@pytest.mark.asyncio
async def test_wallet_requires_action(stub_client):
    result = await wallet_tools(chain_id="eth", client=stub_client)
    assert result == {"error": "Invalid action parameter. Use 'gas', 'explain_tx', or 'simulate_tx'."}
    assert stub_client.calls == []
