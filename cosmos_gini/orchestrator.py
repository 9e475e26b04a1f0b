#!/usr/bin/env python3
"""
Gini Range Runner
Samples validator voting power across a block height range and averages the Gini coefficients
"""

import logging
from typing import Callable, List, Optional

from .concurrency_limiter import ConcurrencyLimiter
from .exceptions import ConfigurationError
from .models import HeightRange, HeightSample, RunResult
from .rpc_client import TendermintRpcClient, DEFAULT_RPC_URL
from .utils import calculate_gini_coefficient, format_coefficient

logger = logging.getLogger(__name__)

DEFAULT_CONCURRENCY = 3
DEFAULT_STEP = 500

SampleCallback = Callable[[HeightSample], None]


class GiniRangeRunner:
    """Drives concurrent fetch -> Gini computation for each sampled height"""

    def __init__(self, rpc: str = DEFAULT_RPC_URL, concurrency: int = DEFAULT_CONCURRENCY,
                 client: Optional[TendermintRpcClient] = None):
        self.limiter = ConcurrencyLimiter(concurrency)
        self.client = client or TendermintRpcClient(rpc, pool_size=concurrency)

    def gini_by_height(self, height: int, on_sample: Optional[SampleCallback] = None) -> HeightSample:
        """Fetch the validator set at one height and compute its coefficient"""
        validator_set = self.client.fetch_validators(height)
        sample = HeightSample(height=height, coefficient=calculate_gini_coefficient(validator_set.voting_powers))

        logger.info(f"Height {height}: {len(validator_set)} validators, "
                    f"Gini {format_coefficient(sample.coefficient)}")
        if on_sample is not None:
            on_sample(sample)
        return sample

    def run(self, start_height: int, end_height: int, step: int = DEFAULT_STEP,
            on_sample: Optional[SampleCallback] = None) -> RunResult:
        """
        Compute the Gini coefficient at every sampled height in the range

        Args:
            start_height: First height sampled
            end_height: Upper bound, must be greater than start_height
            step: Blocks between samples
            on_sample: Called with each HeightSample as soon as it is computed

        Returns:
            RunResult with samples ordered by height

        Raises:
            ConfigurationError: invalid range, raised before any RPC call
            RpcError: any height failed; no partial result is returned
        """
        height_range = HeightRange(start_height, end_height, step)
        validation = height_range.validate()
        if not validation.valid:
            raise ConfigurationError(validation)

        heights = height_range.heights()
        logger.info(f"Sampling {len(heights)} heights between blocks {start_height}-{end_height} "
                    f"(step {step}, concurrency {self.limiter.max_concurrent})")

        tasks = [self._task_for(height, on_sample) for height in heights]
        samples: List[HeightSample] = self.limiter.run_all(tasks)

        result = RunResult(
            start_height=start_height,
            end_height=end_height,
            step=step,
            samples=sorted(samples, key=lambda sample: sample.height)
        )
        logger.info(f"Average Gini coefficient {result.average:.4f} over {len(samples)} heights")
        return result

    def _task_for(self, height: int, on_sample: Optional[SampleCallback]):
        return lambda: self.gini_by_height(height, on_sample)

    def close(self):
        self.client.close()


def run(rpc: str, concurrency: int, start_height: int, end_height: int, step: int = DEFAULT_STEP,
        on_sample: Optional[SampleCallback] = None) -> RunResult:
    """Convenience function: one-shot run against an RPC endpoint"""
    runner = GiniRangeRunner(rpc, concurrency)
    try:
        return runner.run(start_height, end_height, step, on_sample=on_sample)
    finally:
        runner.close()
