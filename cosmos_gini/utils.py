#!/usr/bin/env python3
"""
Utility Functions
Gini calculation and result formatting shared by the runner and the CLI
"""

import math
from typing import Sequence


def calculate_gini_coefficient(voting_powers: Sequence[float]) -> float:
    """
    Calculate the discrete Gini coefficient of a voting power distribution

    Uses the closed form sum((2*rank - n - 1) * x) / (n * sum(x)) over the
    values sorted ascending, with rank starting at 1. Values must be
    non-negative; this is not checked.

    Args:
        voting_powers: Voting power of each validator, any order

    Returns:
        Coefficient in [0, (n-1)/n]. An empty or all-zero input has a zero
        denominator and yields NaN.
    """
    sorted_powers = sorted(voting_powers)
    n = len(sorted_powers)
    total = sum(sorted_powers)

    numerator = sum(
        power * (2 * rank - n - 1)
        for rank, power in enumerate(sorted_powers, start=1)
    )
    denominator = n * total

    if denominator == 0:
        return math.nan
    return numerator / denominator


def format_coefficient(value: float) -> str:
    """Full precision rendering, without a trailing '.0' for whole numbers"""
    if math.isfinite(value) and float(value).is_integer():
        return str(int(value))
    return repr(float(value))


def format_sample_line(height: int, coefficient: float) -> str:
    return f"{format_coefficient(coefficient)} Gini coefficient for block {height}"


def format_average_line(average: float, start_height: int, end_height: int) -> str:
    return f"{average:.4f} avg. Gini coefficient between blocks {start_height}-{end_height}"
