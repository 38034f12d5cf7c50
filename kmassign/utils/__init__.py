"""
Utility modules for the Hungarian solver.
"""

from .preprocessing import (
    as_cost_matrix,
    handle_negatives,
    pad_matrix,
    check_overflow,
)
from .extraction import (
    output_solution,
    starred_pairs,
    assignment_matrix,
)
from .display import (
    format_matrix,
    format_mask,
    print_matrix,
)
from .evaluation import (
    brute_force_cost,
    reference_assignment,
    is_valid_assignment,
)

__all__ = [
    # Preprocessing
    'as_cost_matrix',
    'handle_negatives',
    'pad_matrix',
    'check_overflow',
    # Extraction
    'output_solution',
    'starred_pairs',
    'assignment_matrix',
    # Display
    'format_matrix',
    'format_mask',
    'print_matrix',
    # Evaluation
    'brute_force_cost',
    'reference_assignment',
    'is_valid_assignment',
]
