"""Wallet tools: gas market, transaction explanation and pre-execution."""

from __future__ import annotations

from typing import Any, Dict, List, Optional

from debank_mcp.config import DEFAULT_PAGE, DEFAULT_PAGE_SIZE
from debank_mcp.debank_api import default_client
from debank_mcp.tools.routing import ParamError, UpstreamCall, param_error, run_call
from debank_mcp.tools.validators import is_blank

WALLET_ACTIONS = ("gas", "explain_tx", "simulate_tx")


def select_wallet_call(
    *,
    action: Optional[str] = None,
    chain_id: Optional[str] = None,
    tx: Optional[Dict[str, Any]] = None,
    pending_tx_list: Optional[List[Any]] = None,
) -> UpstreamCall | ParamError:
    if action == "gas":
        if is_blank(chain_id):
            return param_error("chain_id parameter is required for gas price query")
        return UpstreamCall("/v1/wallet/gas_market", {"chain_id": chain_id}, paginate=True)
    if action == "explain_tx":
        if is_blank(tx):
            return param_error("tx parameter is required for transaction explanation")
        return UpstreamCall("/v1/wallet/explain_tx", body={"tx": tx})
    if action == "simulate_tx":
        if is_blank(tx):
            return param_error("tx parameter is required for transaction simulation")
        body: Dict[str, Any] = {"tx": tx}
        if not is_blank(pending_tx_list):
            body["pending_tx_list"] = pending_tx_list
        return UpstreamCall("/v1/wallet/pre_exec_tx", body=body)
    return param_error("Invalid action parameter. Use 'gas', 'explain_tx', or 'simulate_tx'.")


async def wallet_tools(
    *,
    action: Optional[str] = None,
    chain_id: Optional[str] = None,
    tx: Optional[Dict[str, Any]] = None,
    pending_tx_list: Optional[List[Any]] = None,
    page: int = DEFAULT_PAGE,
    page_size: int = DEFAULT_PAGE_SIZE,
    client=default_client,
) -> Any:
    """
    Run a wallet action.

    ``gas`` reads the gas market for ``chain_id``. ``explain_tx`` and
    ``simulate_tx`` POST the transaction upstream; simulation also forwards
    ``pending_tx_list`` so earlier transactions execute first.
    """
    call = select_wallet_call(
        action=action,
        chain_id=chain_id,
        tx=tx,
        pending_tx_list=pending_tx_list,
    )
    return await run_call(call, client=client, page=page, page_size=page_size)
