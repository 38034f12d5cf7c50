#!/usr/bin/env python
"""
kmassign Examples

Runs the solver on a set of sample cost matrices and prints the matrix,
the optimal assignment and the optimal cost of each.
"""

import numpy as np

from kmassign import hungarian, solve, SolverConfig, InvalidInputError
from kmassign.utils import brute_force_cost, reference_assignment


# A 20x8 matrix: twelve rows stay unassigned
TALL_MATRIX = [
    [85, 12, 36, 83, 50, 96, 12, 1],
    [84, 35, 16, 17, 40, 94, 16, 52],
    [14, 16, 8, 53, 14, 12, 70, 50],
    [73, 83, 19, 44, 83, 66, 71, 18],
    [36, 45, 29, 4, 61, 15, 70, 47],
    [7, 14, 11, 69, 57, 32, 37, 81],
    [9, 65, 38, 74, 87, 51, 86, 52],
    [52, 40, 56, 10, 42, 2, 26, 36],
    [85, 86, 36, 90, 49, 89, 41, 74],
    [40, 67, 2, 70, 18, 5, 94, 43],
] * 2

SMALL_MATRICES = [
    [[25, 40, 35],
     [40, 60, 35],
     [20, 40, 25]],

    [[64, 18, 75],
     [97, 60, 24],
     [87, 63, 15]],

    [[80, 40, 50, 46],
     [40, 70, 20, 25],
     [30, 10, 20, 30],
     [35, 20, 25, 30]],

    [[10, 19, 8, 15],
     [10, 18, 7, 17],
     [13, 16, 9, 14],
     [12, 19, 8, 18],
     [14, 17, 10, 19]],
]


def example_1_basic():
    """Example 1: Sample matrices, square and rectangular"""
    print("\n" + "="*70)
    print("EXAMPLE 1: Sample Cost Matrices")
    print("="*70)

    hungarian(TALL_MATRIX, verbose=1)
    print("-----------------\n")

    for matrix in SMALL_MATRICES:
        hungarian(matrix, verbose=1)
        print("-----------------\n")


def example_2_negative_costs():
    """Example 2: Negative costs are shifted, or rejected on request"""
    print("\n" + "="*70)
    print("EXAMPLE 2: Negative Costs")
    print("="*70)

    matrix = [[-1, 2], [3, 4]]
    cost, pairs = hungarian(matrix, return_pairs=True)
    print(f"Cost matrix: {matrix}")
    print(f"Optimal cost: {cost}, pairs: {pairs}")

    try:
        hungarian(matrix, allow_negatives=False)
    except InvalidInputError as exc:
        print(f"Rejected with allow_negatives=False: {exc}")


def example_3_rectangular():
    """Example 3: Rectangular matrix, solved through padding"""
    print("\n" + "="*70)
    print("EXAMPLE 3: Rectangular Matrix")
    print("="*70)

    matrix = [[4, 1, 3],
              [2, 0, 5]]
    result = solve(matrix, SolverConfig(verbose=1))
    print(f"Pairs: {result.pairs}")
    print(f"Augmentations: {result.n_augmentations}, adjustments: {result.n_adjustments}")


def example_4_cross_check():
    """Example 4: Compare against scipy and brute force on random matrices"""
    print("\n" + "="*70)
    print("EXAMPLE 4: Cross-check on Random Matrices")
    print("="*70)

    rng = np.random.default_rng(42)
    for n in range(2, 7):
        C = rng.integers(0, 50, size=(n, n))
        cost = hungarian(C)
        ref_cost, _ = reference_assignment(C)
        brute = brute_force_cost(C)
        status = "✓" if cost == ref_cost == brute else "✗"
        print(f"  {status} n={n}: kmassign={cost}, scipy={ref_cost}, brute force={brute}")


if __name__ == "__main__":
    example_1_basic()
    example_2_negative_costs()
    example_3_rectangular()
    example_4_cross_check()
