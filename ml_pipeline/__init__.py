"""
ML Pipeline - Functional training workflow orchestration.

Simple functions for each pipeline stage.
"""

from ml_pipeline.handler import (
    run_stage_1_ratings,
    run_stage_2_correlation,
    run_stage_3_baseline,
    run_stage_4_evaluation,
    run_training,
    STAGES,
)

__all__ = [
    "run_stage_1_ratings",
    "run_stage_2_correlation",
    "run_stage_3_baseline",
    "run_stage_4_evaluation",
    "run_training",
    "STAGES",
]
