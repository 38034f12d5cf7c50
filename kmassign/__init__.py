"""
kmassign: Kuhn-Munkres Assignment Solver

Exact minimum-cost assignment of rows to columns for integral cost
matrices, using the step-by-step Munkres formulation of the Hungarian
algorithm.

- **hungarian**: total optimal cost (optionally with the assigned pairs)
- **solve**: full result with matching matrix and iteration counts
- **solve_many**: one result per matrix for a batch of independent problems

Typical Usage
=============

1. Optimal cost:

    >>> from kmassign import hungarian
    >>> hungarian([[25, 40, 35], [40, 60, 35], [20, 40, 25]])
    95

2. Cost and assignment of a rectangular matrix (padded internally):

    >>> cost, pairs = hungarian([[4, 1, 3], [2, 0, 5]], return_pairs=True)
    >>> cost, pairs
    (3, [(0, 1), (1, 0)])

3. Negative costs are shifted by default, or rejected on request:

    >>> hungarian([[-1, 2], [3, 4]])
    3
    >>> hungarian([[-1, 2], [3, 4]], allow_negatives=False)
    Traceback (most recent call last):
        ...
    kmassign.exceptions.InvalidInputError: negative costs not permitted (minimum entry is -1)

4. Full result with options:

    >>> from kmassign import solve, SolverConfig
    >>> result = solve(matrix, SolverConfig(verbose=1))
    >>> result.cost, result.pairs, result.matching

Maximization
============

The solver only minimizes. To maximize, negate the costs (or subtract them
from their maximum) before calling it.

Floating-point costs are rejected: every step of the algorithm has to be
exact, so scale them to integers first.

License: MIT
"""

__version__ = "1.0.0"
__all__ = [
    # Solvers
    'hungarian',
    'solve',
    'solve_many',
    'run_steps',
    'AssignmentResult',
    # Configuration and state
    'SolverConfig',
    'MunkresState',
    'Step',
    'Mark',
    # Errors
    'KMAssignError',
    'InvalidInputError',
    'NumericOverflowError',
    'InternalError',
]

from .hungarian import hungarian, solve, solve_many, run_steps, AssignmentResult
from .config import SolverConfig
from .state import MunkresState, Step, Mark
from .exceptions import (
    KMAssignError,
    InvalidInputError,
    NumericOverflowError,
    InternalError,
)
