"""
cosmos-gini: Gini coefficient of validator voting power across block heights
"""

__version__ = "1.0.0"
__author__ = "cosmos-gini contributors"

from .models import ValidatorSet, HeightSample, HeightRange, RangeValidation, RunResult
from .rpc_client import TendermintRpcClient, fetch_validators
from .concurrency_limiter import ConcurrencyLimiter
from .orchestrator import GiniRangeRunner, run
from .utils import calculate_gini_coefficient
from .exceptions import *


__all__ = [
    "ValidatorSet",
    "HeightSample",
    "HeightRange",
    "RangeValidation",
    "RunResult",
    "TendermintRpcClient",
    "fetch_validators",
    "ConcurrencyLimiter",
    "GiniRangeRunner",
    "run",
    "calculate_gini_coefficient",
    "CosmosGiniException",
    "ValidationError",
    "ConfigurationError",
    "NetworkError",
    "RpcError",
    "ResponseFormatError"
]
