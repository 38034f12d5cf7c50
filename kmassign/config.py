"""
Solver Configuration

This module holds the options shared by the public entry points.
"""

import numbers
from dataclasses import dataclass
from typing import Optional

from .exceptions import InvalidInputError, NumericOverflowError
from .utils.preprocessing import INT64_MAX


@dataclass
class SolverConfig:
    """Options for one call of the Hungarian solver"""
    allow_negatives: bool = True  # Shift negative costs instead of rejecting
    pad_value: Optional[int] = None  # Sentinel for padding; None = largest cost
    verbose: int = 0  # 0 silent, 1 summary, 2 every step

    def __post_init__(self):
        if self.verbose not in (0, 1, 2):
            raise InvalidInputError(f"verbose must be 0, 1 or 2, got {self.verbose}")

        if self.pad_value is not None:
            if isinstance(self.pad_value, bool) or not isinstance(self.pad_value, numbers.Integral):
                raise InvalidInputError(
                    f"pad_value must be an integer, got {type(self.pad_value).__name__}"
                )
            if self.pad_value < 0:
                raise InvalidInputError(f"pad_value must be non-negative, got {self.pad_value}")
            if self.pad_value > INT64_MAX:
                raise NumericOverflowError(
                    f"pad_value {self.pad_value} does not fit in a 64-bit integer"
                )
            self.pad_value = int(self.pad_value)

        self.allow_negatives = bool(self.allow_negatives)

    def info(self):
        """Print the configuration"""
        pad = "largest cost" if self.pad_value is None else self.pad_value
        print(f"Allow negatives: {self.allow_negatives}")
        print(f"Padding value: {pad}")
        print(f"Verbosity: {self.verbose}")
