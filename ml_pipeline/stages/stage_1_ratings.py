import numpy as np
import pandas as pd
from pydantic import ConfigDict, validate_call

from common.constants import EVALUATION, PATHS, RATINGS
from common.utils import build_index_mapping, setup_logging
from rating_prediction import Ratings

logger = setup_logging(__name__, PATHS["app_log_file"])


@validate_call(config=ConfigDict(arbitrary_types_allowed=True))
def prepare_ratings(ratings_df: pd.DataFrame):
    """
    Clean a raw ratings DataFrame and map user/item ids to contiguous 0-based indices.
    Returns: (Ratings, user_id_to_idx, item_id_to_idx)
    """
    user_col, item_col, rating_col = RATINGS["user_col"], RATINGS["item_col"], RATINGS["rating_col"]

    missing_cols = [c for c in (user_col, item_col, rating_col) if c not in ratings_df.columns]
    if missing_cols:
        raise ValueError(f"Missing columns in ratings DataFrame: {missing_cols}")

    # Drop rows with missing user, item or rating
    ratings_df = ratings_df.dropna(subset=[user_col, item_col, rating_col])
    ratings_df = ratings_df.assign(**{rating_col: pd.to_numeric(ratings_df[rating_col], errors="coerce")})
    ratings_df = ratings_df[ratings_df[rating_col].notna()]

    # Deduplicate (user, item) pairs, keeping the last rating
    ratings_df = ratings_df.drop_duplicates(subset=[user_col, item_col], keep="last")
    logger.info(f"Ratings data size after cleaning: {ratings_df.shape}")

    # idx follows the order of appearance in ratings_df
    user_id_to_idx, _ = build_index_mapping(ratings_df[user_col])
    item_id_to_idx, _ = build_index_mapping(ratings_df[item_col])
    logger.info("Users: %s", f"{len(user_id_to_idx):,}")
    logger.info("Items: %s", f"{len(item_id_to_idx):,}")

    ratings = Ratings(
        ratings_df[user_col].map(user_id_to_idx).to_numpy(dtype=np.int64),
        ratings_df[item_col].map(item_id_to_idx).to_numpy(dtype=np.int64),
        ratings_df[rating_col].to_numpy(dtype=np.float64),
    )
    logger.info("Index mapping complete.")
    return ratings, user_id_to_idx, item_id_to_idx


def split_ratings(ratings: Ratings, test_ratio=None, seed=None):
    """Random train/test split of the ratings."""
    test_ratio = EVALUATION["test_ratio"] if test_ratio is None else test_ratio
    seed = EVALUATION["random_state"] if seed is None else seed

    rng = np.random.RandomState(seed)
    order = rng.permutation(len(ratings))
    n_test = int(round(test_ratio * len(ratings)))

    train = ratings.subset(np.sort(order[n_test:]))
    test = ratings.subset(np.sort(order[:n_test]))
    logger.info("Train ratings: %s", f"{len(train):,}")
    logger.info("Test ratings: %s", f"{len(test):,}")
    return train, test
