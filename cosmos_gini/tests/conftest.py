"""
Shared fixtures: a fake Tendermint /validators endpoint
"""

import pytest
from unittest.mock import Mock, patch


def make_response(status_code=200, payload=None, json_error=None):
    """Build a stand-in for requests.Response"""
    response = Mock()
    response.status_code = status_code
    response.ok = 200 <= status_code < 300
    response.reason = "OK" if response.ok else "Internal Server Error"
    if json_error is not None:
        response.json.side_effect = json_error
    else:
        response.json.return_value = payload
    return response


def validators_payload(voting_powers):
    return {
        "jsonrpc": "2.0",
        "id": -1,
        "result": {
            "block_height": "0",
            "validators": [
                {"address": f"VAL{i}", "voting_power": str(power), "proposer_priority": "0"}
                for i, power in enumerate(voting_powers)
            ],
            "count": str(len(voting_powers)),
            "total": str(len(voting_powers))
        }
    }


@pytest.fixture
def fake_rpc():
    """
    Patch requests.Session.get; set fake_rpc.heights[h] to a voting power list
    or to an int status code to fail that height
    """
    heights = {}
    calls = []

    def fake_get(session, url, params=None, **kwargs):
        calls.append((url, dict(params or {})))
        entry = heights.get(params["height"], [])
        if isinstance(entry, int):
            return make_response(status_code=entry, payload={"error": "boom"})
        return make_response(payload=validators_payload(entry))

    with patch("requests.Session.get", autospec=True, side_effect=fake_get) as mock_get:
        mock_get.heights = heights
        mock_get.calls = calls
        yield mock_get
