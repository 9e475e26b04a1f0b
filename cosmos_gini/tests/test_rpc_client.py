"""
Tests for TendermintRpcClient
"""

import pytest
import requests
from unittest.mock import patch

from cosmos_gini.rpc_client import TendermintRpcClient, fetch_validators, VALIDATORS_PER_PAGE
from cosmos_gini.exceptions import RpcError, ResponseFormatError, NetworkError

from conftest import make_response


class TestTendermintRpcClient:
    def test_request_shape(self, fake_rpc):
        fake_rpc.heights[100] = [10, 20]
        client = TendermintRpcClient("http://node.example:26657/")

        client.fetch_validators(100)

        assert fake_rpc.calls == [
            ("http://node.example:26657/validators", {"height": 100, "per_page": VALIDATORS_PER_PAGE})
        ]
        assert VALIDATORS_PER_PAGE == 200

    def test_parses_string_and_numeric_voting_power(self):
        payload = {"result": {"validators": [{"voting_power": "15"}, {"voting_power": 5}, {"voting_power": 2.5}]}}
        with patch("requests.Session.get", return_value=make_response(payload=payload)):
            validator_set = TendermintRpcClient().fetch_validators(42)

        assert validator_set.height == 42
        assert validator_set.voting_powers == (15.0, 5.0, 2.5)
        assert validator_set.total_voting_power == 22.5
        assert len(validator_set) == 3

    def test_http_error_status(self, fake_rpc):
        fake_rpc.heights[7] = 500
        with pytest.raises(RpcError) as exc_info:
            TendermintRpcClient().fetch_validators(7)

        assert exc_info.value.status_code == 500
        assert exc_info.value.height == 7
        assert isinstance(exc_info.value, NetworkError)

    def test_transport_failure(self):
        with patch("requests.Session.get", side_effect=requests.ConnectionError("refused")):
            with pytest.raises(RpcError, match="refused"):
                TendermintRpcClient().fetch_validators(1)

    def test_invalid_json_body(self):
        response = make_response(json_error=ValueError("Expecting value"))
        with patch("requests.Session.get", return_value=response):
            with pytest.raises(ResponseFormatError):
                TendermintRpcClient().fetch_validators(1)

    @pytest.mark.parametrize("payload", [
        {"error": {"code": -32603, "message": "height 1 is not available"}},
        {"result": {}},
        {"result": {"validators": None}},
        {"result": {"validators": [{"address": "X"}]}},
        {"result": {"validators": [{"voting_power": "lots"}]}},
        {"result": {"validators": [{"voting_power": None}]}},
        [],
    ])
    def test_unexpected_shape(self, payload):
        with patch("requests.Session.get", return_value=make_response(payload=payload)):
            with pytest.raises(ResponseFormatError):
                TendermintRpcClient().fetch_validators(1)

    def test_module_level_fetch(self, fake_rpc):
        fake_rpc.heights[3] = [1, 1]
        validator_set = fetch_validators("http://localhost:26657", 3)
        assert validator_set.voting_powers == (1.0, 1.0)
