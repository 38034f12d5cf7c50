"""
Mask and Cover State of the Hungarian Step Engine

The step engine rewrites a cost matrix together with a mask of starred and
primed zeros and two cover vectors. All of it is owned by a single
``MunkresState`` created for one call and discarded afterwards.

Mask values:
------------
- ``Mark.NONE``  (0): ordinary cell
- ``Mark.STAR``  (1): starred zero, part of the current partial assignment
- ``Mark.PRIME`` (2): primed zero, candidate found during the path search
"""

from dataclasses import dataclass, field
from enum import IntEnum
from typing import List, Optional, Tuple

import numpy as np


class Step(IntEnum):
    """Program counter of the step engine"""
    REDUCE_ROWS = 1
    STAR_ZEROS = 2
    COVER_COLUMNS = 3
    PRIME_ZEROS = 4
    AUGMENT_PATH = 5
    ADJUST_MATRIX = 6
    DONE = 7


class Mark(IntEnum):
    """Tag of a mask cell"""
    NONE = 0
    STAR = 1
    PRIME = 2


@dataclass
class MunkresState:
    """Working data of one run of the step engine"""
    cost: np.ndarray  # square int64 working matrix, mutated in place
    shape: Tuple[int, int]  # shape of the caller's matrix before padding
    mask: np.ndarray = None
    row_cover: np.ndarray = None
    col_cover: np.ndarray = None
    path: List[Tuple[int, int]] = field(default_factory=list)
    path_start: Optional[Tuple[int, int]] = None
    n_augmentations: int = 0
    n_adjustments: int = 0
    verbose: int = 0

    def __post_init__(self):
        n = self.size
        if self.mask is None:
            self.mask = np.zeros((n, n), dtype=np.int8)
        if self.row_cover is None:
            self.row_cover = np.zeros(n, dtype=bool)
        if self.col_cover is None:
            self.col_cover = np.zeros(n, dtype=bool)

    @property
    def size(self) -> int:
        return self.cost.shape[0]

    def clear_covers(self):
        self.row_cover[:] = False
        self.col_cover[:] = False

    def erase_primes(self):
        self.mask[self.mask == Mark.PRIME] = Mark.NONE

    def star_count(self) -> int:
        return int(np.count_nonzero(self.mask == Mark.STAR))

    def find_star_in_row(self, row: int) -> int:
        """Column of the starred zero in ``row``, or -1"""
        cols = np.flatnonzero(self.mask[row, :] == Mark.STAR)
        return int(cols[0]) if len(cols) > 0 else -1

    def find_star_in_col(self, col: int) -> int:
        """Row of the starred zero in ``col``, or -1"""
        rows = np.flatnonzero(self.mask[:, col] == Mark.STAR)
        return int(rows[0]) if len(rows) > 0 else -1

    def find_prime_in_row(self, row: int) -> int:
        """Column of the primed zero in ``row``, or -1"""
        cols = np.flatnonzero(self.mask[row, :] == Mark.PRIME)
        return int(cols[0]) if len(cols) > 0 else -1

    def find_uncovered_zero(self) -> Tuple[int, int]:
        """
        First zero whose row and column are both uncovered.

        Cells are visited row by row, left to right. Returns ``(-1, -1)``
        when there is none.
        """
        uncovered = (self.cost == 0) & ~self.row_cover[:, None] & ~self.col_cover[None, :]
        hits = np.argwhere(uncovered)
        if len(hits) == 0:
            return -1, -1
        return int(hits[0, 0]), int(hits[0, 1])
