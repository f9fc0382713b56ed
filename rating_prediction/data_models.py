"""
Type definitions for rating prediction.
Ratings are held as parallel numpy arrays; configs are TypedDicts.
"""

from enum import Enum
from typing import Iterable, Iterator, NamedTuple, Optional, TypedDict

import numpy as np
import pandas as pd

from common.constants import RATINGS


class EntityType(str, Enum):
    """The axis a predictor is keyed by."""
    USER = "user"
    ITEM = "item"


class Rating(NamedTuple):
    user_id: int
    item_id: int
    value: float


class BaselineConfig(TypedDict, total=False):
    entity_type: str  # "item" or "user"


class CorrelationConfig(TypedDict, total=False):
    type: str  # registered binary correlation name, e.g. "jaccard"
    dtype: type  # numpy dtype of the correlation matrix
    num_neighbors: int  # neighbors returned per entity


def _as_ids(ids, axis):
    """Convert ids to int64, refusing values that are not whole numbers."""
    ids = np.asarray(ids)
    if ids.size and not np.issubdtype(ids.dtype, np.integer):
        if not np.issubdtype(ids.dtype, np.floating) or not np.isfinite(ids).all() or (ids != np.floor(ids)).any():
            raise ValueError(f"{axis} ids must be integers, got dtype {ids.dtype}")
    return ids.astype(np.int64)


class Ratings:
    """
    Read-only collection of (user_id, item_id, value) records.
    Ids are non-negative integers; the maximum id on each axis is tracked for coverage checks.
    """

    def __init__(self, users, items, values):
        self.users = _as_ids(users, "user")
        self.items = _as_ids(items, "item")
        self.values = np.asarray(values, dtype=np.float64)

        if not (len(self.users) == len(self.items) == len(self.values)):
            raise ValueError(
                f"users, items and values must have equal length, got "
                f"{len(self.users)}, {len(self.items)}, {len(self.values)}"
            )
        if (self.users < 0).any() or (self.items < 0).any():
            raise ValueError("user and item ids must be non-negative")

        self.max_user_id = int(self.users.max()) if len(self.users) else -1
        self.max_item_id = int(self.items.max()) if len(self.items) else -1

    @classmethod
    def from_records(cls, records: Iterable) -> "Ratings":
        """Build from an iterable of (user_id, item_id, value) tuples."""
        records = list(records)
        if not records:
            return cls([], [], [])
        users, items, values = zip(*records)
        return cls(users, items, values)

    @classmethod
    def from_dataframe(
        cls,
        df: pd.DataFrame,
        user_col: Optional[str] = None,
        item_col: Optional[str] = None,
        rating_col: Optional[str] = None,
    ) -> "Ratings":
        user_col = user_col or RATINGS["user_col"]
        item_col = item_col or RATINGS["item_col"]
        rating_col = rating_col or RATINGS["rating_col"]

        missing_cols = [c for c in (user_col, item_col, rating_col) if c not in df.columns]
        if missing_cols:
            raise ValueError(f"Missing columns in ratings DataFrame: {missing_cols}")

        return cls(
            df[user_col].to_numpy(),
            df[item_col].to_numpy(),
            df[rating_col].to_numpy(dtype=np.float64),
        )

    def to_dataframe(self) -> pd.DataFrame:
        return pd.DataFrame(
            {RATINGS["user_col"]: self.users, RATINGS["item_col"]: self.items, RATINGS["rating_col"]: self.values}
        )

    def entity_ids(self, entity_type: EntityType) -> np.ndarray:
        return self.items if EntityType(entity_type) == EntityType.ITEM else self.users

    def max_entity_id(self, entity_type: EntityType) -> int:
        return self.max_item_id if EntityType(entity_type) == EntityType.ITEM else self.max_user_id

    def subset(self, indices) -> "Ratings":
        """Ratings at the given positions."""
        return Ratings(self.users[indices], self.items[indices], self.values[indices])

    def __len__(self):
        return len(self.values)

    def __iter__(self) -> Iterator[Rating]:
        for user_id, item_id, value in zip(self.users, self.items, self.values):
            yield Rating(int(user_id), int(item_id), float(value))

    def __repr__(self):
        return f"Ratings(n={len(self)}, max_user_id={self.max_user_id}, max_item_id={self.max_item_id})"
