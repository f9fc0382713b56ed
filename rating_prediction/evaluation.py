import numpy as np

from common.constants import PATHS
from common.helpers import coverage, mae, rmse
from common.logging import log_evaluation_report
from common.utils import setup_logging

from .data_models import Ratings
from .entity_average import EntityAverage

logger = setup_logging(__name__, PATHS["app_log_file"])


def evaluate(predictor: EntityAverage, test_ratings: Ratings) -> dict:
    """
    Score a trained predictor against held-out ratings.

    Returns rmse, mae, coverage (share of test ratings answered from the entity's own average) and count.
    """
    entity_ids = test_ratings.entity_ids(predictor.entity_type)
    predictions = predictor.predict_many(entity_ids)
    # Covered means answered from the entity's own ratings, not the global average fallback
    counts = predictor.entity_counts
    covered = np.array(
        [predictor.can_predict(int(entity_id)) and counts[entity_id] > 0 for entity_id in entity_ids], dtype=bool
    )

    report = {
        "rmse": rmse(test_ratings.values, predictions),
        "mae": mae(test_ratings.values, predictions),
        "coverage": coverage(covered),
        "count": len(test_ratings),
    }
    log_evaluation_report(logger, report)
    return report
