"""
Data types shared by the correlation and rating-prediction components.
"""

from .matrix import Matrix

__all__ = [
    "Matrix",
]
