#!/usr/bin/env python3
"""
Tendermint RPC Client
Fetches validator voting powers at a given block height
"""

import logging
import requests
from requests.adapters import HTTPAdapter
from typing import Optional

from . import __version__
from .exceptions import RpcError, ResponseFormatError
from .models import ValidatorSet

logger = logging.getLogger(__name__)

DEFAULT_RPC_URL = "http://localhost:26657"

# Single page only; sets above this size come back truncated
VALIDATORS_PER_PAGE = 200


class TendermintRpcClient:
    """Queries the /validators endpoint of a Tendermint/CometBFT node"""

    def __init__(self, rpc_url: str = DEFAULT_RPC_URL, pool_size: int = 10,
                 session: Optional[requests.Session] = None):
        """
        Initialize RPC client

        Args:
            rpc_url: Base URL of the node's RPC endpoint
            pool_size: Connections kept open to the node, match to concurrency
            session: Pre-configured session, mostly for testing
        """
        self.rpc_url = rpc_url.rstrip("/")

        self.session = session or requests.Session()
        adapter = HTTPAdapter(pool_connections=1, pool_maxsize=pool_size)
        self.session.mount("http://", adapter)
        self.session.mount("https://", adapter)
        self.session.headers.update({
            'User-Agent': f'cosmos-gini/{__version__}',
            'Accept': 'application/json'
        })

    @property
    def validators_url(self) -> str:
        return f"{self.rpc_url}/validators"

    def fetch_validators(self, height: int) -> ValidatorSet:
        """
        Fetch the voting power of every validator at a block height

        Args:
            height: Block height retained by the node

        Returns:
            ValidatorSet in server order

        Raises:
            RpcError: transport failure or non-2xx status
            ResponseFormatError: body is not the expected JSON shape
        """
        params = {"height": height, "per_page": VALIDATORS_PER_PAGE}
        logger.debug(f"GET {self.validators_url} height={height} per_page={VALIDATORS_PER_PAGE}")

        try:
            response = self.session.get(self.validators_url, params=params)
        except requests.RequestException as e:
            raise RpcError(self.validators_url, height, str(e)) from e

        if not response.ok:
            raise RpcError(
                self.validators_url, height,
                f"HTTP {response.status_code} {response.reason or ''}".strip(),
                status_code=response.status_code
            )

        try:
            data = response.json()
        except ValueError as e:
            raise ResponseFormatError(self.validators_url, height, f"Invalid JSON body: {e}",
                                      status_code=response.status_code) from e

        voting_powers = self._parse_voting_powers(data, height)

        if len(voting_powers) == VALIDATORS_PER_PAGE:
            logger.debug(f"Height {height} returned a full page of {VALIDATORS_PER_PAGE} validators, "
                         f"larger sets are truncated")

        return ValidatorSet(height=height, voting_powers=voting_powers)

    def _parse_voting_powers(self, data, height: int):
        """Extract result.validators[*].voting_power as floats"""
        try:
            validators = data["result"]["validators"]
            if not isinstance(validators, list):
                raise TypeError(f"validators is {type(validators).__name__}, expected list")
            return tuple(self._to_number(validator["voting_power"]) for validator in validators)
        except (KeyError, TypeError, ValueError) as e:
            raise ResponseFormatError(self.validators_url, height,
                                      f"Unexpected response shape: {e!r}") from e

    @staticmethod
    def _to_number(value) -> float:
        if isinstance(value, bool) or value is None:
            raise TypeError(f"voting_power {value!r} is not numeric")
        return float(value)

    def close(self):
        self.session.close()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()


def fetch_validators(rpc_url: str, height: int) -> ValidatorSet:
    """
    Convenience function for a one-off validators query

    Args:
        rpc_url: Base URL of the node's RPC endpoint
        height: Block height

    Returns:
        ValidatorSet for that height
    """
    with TendermintRpcClient(rpc_url, pool_size=1) as client:
        return client.fetch_validators(height)
