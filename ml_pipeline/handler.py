from typing import Optional

import pandas as pd
from pydantic import ConfigDict, validate_call

from ml_pipeline.stages import stage_1_ratings as stage_1
from ml_pipeline.stages import stage_2_correlation as stage_2
from ml_pipeline.stages import stage_3_baseline as stage_3

from common.constants import BASELINE, CORRELATION, PATHS
from common.utils import setup_logging
from rating_prediction import evaluate

logger = setup_logging(__name__, PATHS["app_log_file"])


def run_stage_1_ratings(state):
    try:
        logger.info("Preparing ratings...")
        ratings, user_id_to_idx, item_id_to_idx = stage_1.prepare_ratings(state["ratings_df"])
        train_ratings, test_ratings = stage_1.split_ratings(ratings, state["test_ratio"])

        state.update(
            ratings=ratings,
            train_ratings=train_ratings,
            test_ratings=test_ratings,
            user_id_to_idx=user_id_to_idx,
            item_id_to_idx=item_id_to_idx,
        )
        logger.info("✓ Stage 1 completed")
    except Exception as e:
        logger.error(f"Stage 1 failed: {e}")
        raise


def run_stage_2_correlation(state):
    try:
        logger.info("Computing item correlations...")
        state["correlation_matrix"] = stage_2.train_item_correlation(state["train_ratings"], state["correlation"])
        logger.info(f"✓ Stage 2 completed - correlation matrix shape: {state['correlation_matrix'].shape}")
    except Exception as e:
        logger.error(f"Stage 2 failed: {e}")
        raise


def run_stage_3_baseline(state):
    try:
        logger.info("Training baseline predictor...")
        state["predictor"] = stage_3.train_baseline(state["train_ratings"], state["entity_type"])
        logger.info("✓ Stage 3 completed")
    except Exception as e:
        logger.error(f"Stage 3 failed: {e}")
        raise


def run_stage_4_evaluation(state):
    try:
        logger.info("Running evaluation...")
        state["report"] = evaluate(state["predictor"], state["test_ratings"])
        logger.info("✓ Stage 4 completed")
    except Exception as e:
        logger.error(f"Stage 4 failed: {e}")
        raise


# Stage registry - order and dependencies
STAGES = [
    ("stage_1_ratings", run_stage_1_ratings, []),
    ("stage_2_correlation", run_stage_2_correlation, ["stage_1_ratings"]),
    ("stage_3_baseline", run_stage_3_baseline, ["stage_1_ratings"]),
    ("stage_4_evaluation", run_stage_4_evaluation, ["stage_3_baseline"]),
]


@validate_call(config=ConfigDict(arbitrary_types_allowed=True))
def run_training(
    ratings_df: pd.DataFrame,
    entity_type: Optional[str] = None,
    correlation: Optional[str] = None,
    test_ratio: Optional[float] = None,
):
    """
    Run every stage over an in-memory ratings DataFrame.
    The correlation and baseline stages read the same training ratings and share no state.
    """
    state = {
        "ratings_df": ratings_df,
        "entity_type": entity_type or BASELINE["entity_type"],
        "correlation": correlation or CORRELATION["type"],
        "test_ratio": test_ratio,
    }

    for stage_name, run_stage, depends_on in STAGES:
        logger.info(f"Running {stage_name} (depends on: {', '.join(depends_on) or 'nothing'})")
        run_stage(state)

    del state["ratings_df"]
    return state
