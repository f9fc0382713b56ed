import time

from common.constants import BASELINE, PATHS
from common.utils import setup_logging
from rating_prediction import EntityType, ItemAverage, Ratings, UserAverage

logger = setup_logging(__name__, PATHS["app_log_file"])

PREDICTORS = {
    EntityType.ITEM: ItemAverage,
    EntityType.USER: UserAverage,
}


def train_baseline(ratings: Ratings, entity_type=None):
    """Train an entity-average predictor on the given axis ("item" or "user")."""
    entity_type = EntityType(entity_type or BASELINE["entity_type"])
    predictor = PREDICTORS[entity_type]()

    logger.info(f"Training {type(predictor).__name__} on {len(ratings):,} ratings...")
    start_time = time.time()
    predictor.train(ratings)
    logger.info(f"Training completed in {time.time() - start_time:.2f} seconds")

    return predictor
