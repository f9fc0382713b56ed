from .data_models import EntityType, Ratings
from .entity_average import EntityAverage


class UserAverage(EntityAverage):
    """Uses the average rating value of a user for prediction. Supports incremental updates."""

    entity_type = EntityType.USER

    def train(self, ratings: Ratings):
        self._train(ratings, EntityType.USER)
