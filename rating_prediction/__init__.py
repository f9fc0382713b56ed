"""
Baseline rating predictors.
"""

from .data_models import BaselineConfig, CorrelationConfig, EntityType, Rating, Ratings
from .entity_average import EntityAverage
from .evaluation import evaluate
from .item_average import ItemAverage
from .user_average import UserAverage

__all__ = [
    "BaselineConfig",
    "CorrelationConfig",
    "EntityType",
    "Rating",
    "Ratings",
    "EntityAverage",
    "ItemAverage",
    "UserAverage",
    "evaluate",
]
