"""
Pairwise similarity of entities computed from binary co-occurrence data.
"""

from .binary_correlation import BinaryCorrelation, create_binary_correlation
from .correlation_matrix import build_binary_matrix, compute_correlations, get_nearest_neighbors
from .jaccard import Jaccard

__all__ = [
    "BinaryCorrelation",
    "Jaccard",
    "create_binary_correlation",
    "build_binary_matrix",
    "compute_correlations",
    "get_nearest_neighbors",
]
