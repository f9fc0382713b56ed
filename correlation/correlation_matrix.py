"""
Builds dense correlation matrices from binary entity-feature data.
For item correlation the entities are items and the features are the users who rated them.
"""

import numpy as np
import scipy.sparse as sp

from common.constants import CORRELATION, PATHS
from common.logging import log_matrix_summary
from common.utils import setup_logging
from data_type import Matrix

from .binary_correlation import BinaryCorrelation

logger = setup_logging(__name__, PATHS["app_log_file"])


def build_binary_matrix(entity_ids, feature_ids, n_entities, n_features):
    """Build sparse binary (entity x feature) matrix; repeated pairs count once."""
    entity_ids = np.asarray(entity_ids, dtype=np.int64)
    feature_ids = np.asarray(feature_ids, dtype=np.int64)
    data = np.ones(len(entity_ids), dtype=np.float32)

    matrix = sp.csr_matrix((data, (entity_ids, feature_ids)), shape=(n_entities, n_features), dtype=np.float32)
    # csr_matrix sums duplicates, clip back to 0/1
    matrix.data[:] = 1.0
    return matrix


def compute_correlations(binary_matrix, correlation: BinaryCorrelation, dtype=None) -> Matrix:
    """
    Compute the (entity x entity) correlation matrix.

    The overlap of two entities is the number of features both have; the counts are the
    number of features each has. The strategy is called once per pair with non-zero overlap
    (once per unordered pair when it is symmetric). Pairs without overlap stay 0, the diagonal is 1.
    """
    binary_matrix = sp.csr_matrix(binary_matrix)
    n_entities = binary_matrix.shape[0]

    overlap = (binary_matrix @ binary_matrix.T).tocoo()
    counts = np.asarray(binary_matrix.sum(axis=1)).ravel()
    logger.info(f"Computing {type(correlation).__name__} for {n_entities} entities, {overlap.nnz} overlapping pairs")

    if dtype is None:
        dtype = CORRELATION["dtype"]
    result = Matrix(n_entities, n_entities, dtype=dtype)

    for x, y, n_overlap in zip(overlap.row, overlap.col, overlap.data):
        if x == y:
            continue
        if correlation.is_symmetric:
            if x > y:
                continue
            value = correlation.compute_from_overlap(float(n_overlap), float(counts[x]), float(counts[y]))
            result[x, y] = value
            result[y, x] = value
        else:
            result[x, y] = correlation.compute_from_overlap(float(n_overlap), float(counts[x]), float(counts[y]))

    for i in range(n_entities):
        result[i, i] = 1

    log_matrix_summary(logger, result)
    return result


def get_nearest_neighbors(correlation_matrix: Matrix, entity_id: int, k: int = None):
    """
    Return the ids of the ``k`` entities most correlated with ``entity_id``, best first.
    The entity itself and entities with zero correlation are left out.
    """
    k = CORRELATION["num_neighbors"] if k is None else k
    if k < 0:
        raise ValueError(f"k must be non-negative, got {k}")

    row = correlation_matrix.get_row(entity_id)
    row[entity_id] = 0
    candidates = np.flatnonzero(row > 0)

    # Stable sort keeps lower ids first among ties
    order = np.argsort(-row[candidates], kind="stable")
    return candidates[order][:k]
