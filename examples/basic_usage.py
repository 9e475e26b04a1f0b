#!/usr/bin/env python3
"""
Basic usage example for cosmos-gini library
"""

import json

from cosmos_gini import GiniRangeRunner, TendermintRpcClient, calculate_gini_coefficient


def main():
    rpc = "http://localhost:26657"

    # Single height
    with TendermintRpcClient(rpc) as client:
        validator_set = client.fetch_validators(1000)
    print(f"{len(validator_set)} validators at height 1000, "
          f"Gini {calculate_gini_coefficient(validator_set.voting_powers):.4f}")

    # Height range, printing each sample as it arrives
    runner = GiniRangeRunner(rpc, concurrency=3)
    try:
        result = runner.run(1000, 5000, step=1000,
                            on_sample=lambda s: print(f"  block {s.height}: {s.coefficient:.4f}"))
    finally:
        runner.close()

    print(f"Average: {result.average:.4f}")
    print(json.dumps(result.to_dict(), indent=2))


if __name__ == "__main__":
    main()
