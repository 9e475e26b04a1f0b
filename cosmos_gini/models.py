#!/usr/bin/env python3
"""
Gini Data Models
Data structures for validator sets, per-height samples and run results
"""

import math
from dataclasses import dataclass, field, asdict
from typing import Dict, List, Tuple, Any


@dataclass(frozen=True)
class ValidatorSet:
    """Voting powers reported by the node for one block height, in server order"""
    height: int
    voting_powers: Tuple[float, ...]

    def __len__(self) -> int:
        return len(self.voting_powers)

    @property
    def total_voting_power(self) -> float:
        return sum(self.voting_powers)


@dataclass(frozen=True)
class HeightSample:
    """Gini coefficient computed for a single block height"""
    height: int
    coefficient: float


@dataclass
class RangeValidation:
    """Outcome of checking a height range before any network activity"""
    valid: bool
    errors: List[str] = field(default_factory=list)


@dataclass(frozen=True)
class HeightRange:
    """Block heights to sample: start, start+step, ... for ceil((end-start)/step) iterations"""
    start_height: int
    end_height: int
    step: int

    def validate(self) -> RangeValidation:
        errors = []
        if self.start_height >= self.end_height:
            errors.append("Start height must be less than end height")
        if self.step < 1:
            errors.append("Step must be a positive number of blocks")
        return RangeValidation(valid=not errors, errors=errors)

    @property
    def iterations(self) -> int:
        return math.ceil((self.end_height - self.start_height) / self.step)

    def heights(self) -> List[int]:
        """Sampled heights; end_height itself is only included when the step lands short of it"""
        return [self.start_height + i * self.step for i in range(self.iterations)]


@dataclass
class RunResult:
    """Per-height samples for one invocation plus their average"""
    start_height: int
    end_height: int
    step: int
    samples: List[HeightSample] = field(default_factory=list)

    @property
    def coefficients(self) -> List[float]:
        return [sample.coefficient for sample in self.samples]

    @property
    def average(self) -> float:
        coefficients = self.coefficients
        return sum(coefficients) / len(coefficients)

    def to_dict(self) -> Dict[str, Any]:
        data = asdict(self)
        data["average"] = self.average
        return data
