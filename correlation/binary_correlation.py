"""
Correlation measures computed from overlap statistics of binary data.
"""

from abc import ABC, abstractmethod


class BinaryCorrelation(ABC):
    """
    Converts raw overlap statistics of two entities into a similarity score.
    Implementations are stateless and side-effect-free.
    """

    @property
    @abstractmethod
    def is_symmetric(self) -> bool:
        """True if corr(x, y) == corr(y, x) for every pair of entities."""

    @abstractmethod
    def compute_from_overlap(self, overlap: float, count_x: float, count_y: float) -> float:
        """
        Compute the correlation of two entities.

        :param overlap: number of observations shared by x and y
        :param count_x: number of observations of x
        :param count_y: number of observations of y
        """


_REGISTRY = {}


def register_binary_correlation(name):
    """Class decorator registering a correlation under ``name`` for config lookups."""

    def decorator(cls):
        _REGISTRY[name] = cls
        return cls

    return decorator


def create_binary_correlation(name: str) -> BinaryCorrelation:
    """Instantiate the correlation registered under ``name`` (e.g. "jaccard")."""
    try:
        return _REGISTRY[name.lower()]()
    except KeyError:
        raise ValueError(f"Unknown binary correlation: {name!r}, expected one of {sorted(_REGISTRY)}")
