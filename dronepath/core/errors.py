"""Exceptions raised by the recommendation core."""

from __future__ import annotations


class RecommendationError(Exception):
    """Base exception for recommendation errors."""
    pass


class InsufficientPointsError(RecommendationError):
    """Fewer points than needed to define a path."""

    def __init__(self, received: int, required: int = 2):
        self.received = received
        self.required = required
        super().__init__(f"At least {required} points are required, got {received}")
