"""
Baseline rating predictors using the average rating of a user or an item.
"""

from abc import ABC, abstractmethod

import numpy as np

from common.constants import PATHS
from common.exceptions import GlobalAverageUndefined
from common.logging import log_average_statistics
from common.utils import setup_logging

from .data_models import EntityType, Ratings

logger = setup_logging(__name__, PATHS["app_log_file"])


class EntityAverage(ABC):
    """
    Predicts the average rating of an entity, falling back to the global average.

    Keeps a running (sum, count) per entity id in ``[0, max_entity_id]`` plus one global
    (sum, count), so single ratings can be folded in without rescanning the training data.

    Not thread-safe: ``incremental_update`` mutates shared state and must not run concurrently
    with itself or with reads of the same entity. Reads after training may run concurrently.
    """

    entity_type: EntityType

    def __init__(self):
        self._sums = np.zeros(0, dtype=np.float64)
        self._counts = np.zeros(0, dtype=np.int64)
        self.max_entity_id = -1
        self.global_sum = 0.0
        self.global_count = 0
        self.is_trained = False

    # region State
    @property
    def entity_sums(self) -> np.ndarray:
        return self._sums[: self.max_entity_id + 1]

    @property
    def entity_counts(self) -> np.ndarray:
        return self._counts[: self.max_entity_id + 1]

    @property
    def entity_averages(self) -> np.ndarray:
        """Per-entity averages, NaN where an id in range has no ratings."""
        sums = self.entity_sums
        counts = self.entity_counts
        averages = np.full(len(sums), np.nan)
        np.divide(sums, counts, out=averages, where=counts > 0)
        return averages

    @property
    def global_average(self) -> float:
        if self.global_count == 0:
            raise GlobalAverageUndefined("No ratings observed, the global average is undefined")
        return self.global_sum / self.global_count

    def entity_average(self, entity_id: int) -> float:
        if not self.can_predict(entity_id) or self._counts[entity_id] == 0:
            return np.nan
        return self._sums[entity_id] / self._counts[entity_id]

    def _ensure_capacity(self, entity_id):
        if entity_id >= len(self._sums):
            capacity = max(entity_id + 1, 2 * len(self._sums))
            sums = np.zeros(capacity, dtype=np.float64)
            counts = np.zeros(capacity, dtype=np.int64)
            sums[: len(self._sums)] = self._sums
            counts[: len(self._counts)] = self._counts
            self._sums, self._counts = sums, counts

    # endregion

    # region Training
    @abstractmethod
    def train(self, ratings: Ratings):
        """Learn the averages from ``ratings``, replacing any previous state."""

    def _train(self, ratings: Ratings, entity_type: EntityType):
        if len(ratings) == 0:
            raise GlobalAverageUndefined("Cannot train on zero ratings, the global average is undefined")

        entity_ids = ratings.entity_ids(entity_type)
        n_entities = ratings.max_entity_id(entity_type) + 1

        # One pass over the ratings per aggregate
        self._sums = np.bincount(entity_ids, weights=ratings.values, minlength=n_entities).astype(np.float64)
        self._counts = np.bincount(entity_ids, minlength=n_entities).astype(np.int64)
        self.max_entity_id = n_entities - 1
        self.global_sum = float(ratings.values.sum())
        self.global_count = len(ratings)
        self.is_trained = True

        log_average_statistics(logger, self)

    def incremental_update(self, entity_id: int, rating: float):
        """
        Fold one new rating for ``entity_id`` into the entity and global aggregates.
        Ids beyond ``max_entity_id`` extend the table.
        """
        if entity_id < 0:
            raise ValueError(f"entity_id must be non-negative, got {entity_id}")

        self._ensure_capacity(entity_id)
        self._sums[entity_id] += rating
        self._counts[entity_id] += 1
        self.max_entity_id = max(self.max_entity_id, entity_id)

        self.global_sum += rating
        self.global_count += 1
        self.is_trained = True
        logger.debug(f"Added rating {rating} for {self.entity_type.value} {entity_id}")

    def add_ratings(self, ratings: Ratings):
        """Fold a batch of new ratings in, one incremental update each."""
        for entity_id, value in zip(ratings.entity_ids(self.entity_type), ratings.values):
            self.incremental_update(int(entity_id), float(value))
        logger.info(f"Added {len(ratings)} ratings incrementally, {self.global_count} ratings seen")

    # endregion

    # region Prediction
    def can_predict(self, entity_id: int) -> bool:
        """True if ``entity_id`` lies in the observed id range; a coverage check only."""
        return 0 <= entity_id <= self.max_entity_id

    def predict(self, entity_id: int) -> float:
        """The entity's average rating, or the global average for unknown or unrated entities."""
        if self.can_predict(entity_id) and self._counts[entity_id] > 0:
            return float(self._sums[entity_id] / self._counts[entity_id])
        return self.global_average

    def predict_many(self, entity_ids) -> np.ndarray:
        return np.array([self.predict(int(entity_id)) for entity_id in entity_ids], dtype=np.float64)

    # endregion

    def __repr__(self):
        return (
            f"{type(self).__name__}(max_entity_id={self.max_entity_id}, "
            f"global_count={self.global_count}, is_trained={self.is_trained})"
        )
