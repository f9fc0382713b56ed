from .data_models import EntityType, Ratings
from .entity_average import EntityAverage


class ItemAverage(EntityAverage):
    """Uses the average rating value of an item for prediction. Supports incremental updates."""

    entity_type = EntityType.ITEM

    def train(self, ratings: Ratings):
        self._train(ratings, EntityType.ITEM)
