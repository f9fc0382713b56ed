import time

from common.constants import CORRELATION, PATHS
from common.utils import setup_logging
from correlation import build_binary_matrix, compute_correlations, create_binary_correlation
from rating_prediction import Ratings

logger = setup_logging(__name__, PATHS["app_log_file"])


def train_item_correlation(ratings: Ratings, correlation_name=None):
    """Item x item correlation from which users rated which items."""
    correlation = create_binary_correlation(correlation_name or CORRELATION["type"])
    logger.info(f"Correlation: {type(correlation).__name__} (symmetric={correlation.is_symmetric})")

    item_user_matrix = build_binary_matrix(
        ratings.items, ratings.users, ratings.max_item_id + 1, ratings.max_user_id + 1
    )
    logger.info(f"Binary matrix shape (item x user): {item_user_matrix.shape}")

    start_time = time.time()
    correlation_matrix = compute_correlations(item_user_matrix, correlation)
    logger.info(f"Correlation computed in {time.time() - start_time:.2f} seconds")

    return correlation_matrix
