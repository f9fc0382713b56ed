import numpy as np
from sklearn.metrics import mean_absolute_error, mean_squared_error


# region Metrics
def rmse(y_true, y_pred):
    """Root mean squared error of a set of rating predictions."""
    if len(y_true) == 0:
        return np.nan
    return float(np.sqrt(mean_squared_error(y_true, y_pred)))


def mae(y_true, y_pred):
    """Mean absolute error of a set of rating predictions."""
    if len(y_true) == 0:
        return np.nan
    return float(mean_absolute_error(y_true, y_pred))


def coverage(covered_mask):
    """
    Fraction of test cases the predictor answered from its own table.
    Interpretation: the rest were answered with the global average fallback.
    """
    covered_mask = np.asarray(covered_mask, dtype=bool)
    if covered_mask.size == 0:
        return np.nan
    return float(covered_mask.mean())


# endregion
