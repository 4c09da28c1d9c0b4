import os
import sys

import pytest

# Ensure repository root is on sys.path before importing project modules.
repo_root = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if repo_root not in sys.path:
    sys.path.insert(0, repo_root)

from debank_mcp.metrics import default_metrics  # noqa: E402


class StubClient:
    """Records every upstream call and replies with a canned payload."""

    def __init__(self, response=None):
        self.response = response
        self.calls = []

    async def get(self, path, params=None):
        self.calls.append({"method": "GET", "path": path, "params": params})
        return self.response

    async def post(self, path, body):
        self.calls.append({"method": "POST", "path": path, "body": body})
        return self.response


@pytest.fixture(autouse=True)
def reset_metrics():
    default_metrics.reset()
    yield
    default_metrics.reset()


@pytest.fixture
def stub_client():
    return StubClient()
