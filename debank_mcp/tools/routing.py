"""
Upstream call plans and their execution.

Each tool selects exactly one :class:`UpstreamCall` from its arguments (or a
parameter-error payload) before any network access happens. ``run_call`` then
performs the request and applies the plan's post-processing.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Optional

from debank_mcp.config import DEFAULT_PAGE, DEFAULT_PAGE_SIZE
from debank_mcp.tools.pagination import paginate
from debank_mcp.tools.validators import coerce_positive_int


class ParamError(dict):
    """An ``{"error": message}`` payload produced by argument checks, not by upstream."""


@dataclass(frozen=True, slots=True)
class UpstreamCall:
    path: str
    params: Dict[str, Any] = field(default_factory=dict)
    body: Optional[Dict[str, Any]] = None
    paginate: bool = False
    transform: Optional[Callable[[Any], Any]] = None

    @property
    def method(self) -> str:
        return "GET" if self.body is None else "POST"


def param_error(message: str) -> ParamError:
    return ParamError(error=message)


def with_optional(params: Dict[str, Any], **optional: Any) -> Dict[str, Any]:
    """Return ``params`` extended with every optional value that is not None."""
    merged = dict(params)
    for key, value in optional.items():
        if value is not None:
            merged[key] = value
    return merged


async def run_call(
    call: UpstreamCall | ParamError,
    *,
    client,
    page: Any = DEFAULT_PAGE,
    page_size: Any = DEFAULT_PAGE_SIZE,
) -> Any:
    """Execute a selected plan; parameter errors are returned without a request."""
    if not isinstance(call, UpstreamCall):
        return call

    if call.body is not None:
        result = await client.post(call.path, call.body)
    else:
        result = await client.get(call.path, params=call.params or None)

    if result is None:
        return None
    if call.transform is not None:
        result = call.transform(result)
    if call.paginate:
        return paginate(
            result,
            coerce_positive_int(page, default=DEFAULT_PAGE),
            coerce_positive_int(page_size, default=DEFAULT_PAGE_SIZE),
        )
    return result
