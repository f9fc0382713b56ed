"""
Centralized configuration for the rating-prediction core.
Defines paths, dtypes, and defaults used across the matrix, correlation, and baseline modules.
"""

from datetime import datetime
from pathlib import Path

import numpy as np

PROJECT_ROOT = Path(__file__).parent.parent.absolute()
LOGS_DIR = PROJECT_ROOT / "logs"
APP_LOGS_DIR = LOGS_DIR / "app_logs"

date_str = datetime.now().strftime("%m%d%Y")

PATHS = {
    "logs_dir": str(LOGS_DIR),
    "app_log_file": str(APP_LOGS_DIR / f"{date_str}_core.log"),
}

MATRIX = {
    # numpy dtype of a freshly constructed Matrix; new slots hold the dtype's zero
    "default_dtype": np.float64,
}

CORRELATION = {
    "type": "jaccard",
    "dtype": np.float32,
    "num_neighbors": 20,
}

BASELINE = {
    "entity_type": "item",  # "item" or "user"
}

RATINGS = {
    "user_col": "user_id",
    "item_col": "item_id",
    "rating_col": "rating",
}

EVALUATION = {
    "test_ratio": 0.2,
    "random_state": 42,
}
