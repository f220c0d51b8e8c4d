"""Data access layer: repository interfaces and shared persistence models."""

from shared.dal.models import NUM_PLAYERS, NUM_ROUNDS, Card, GameResult, SeedSummary
from shared.dal.result_repository import ResultLoadError, ResultRepository

__all__ = [
    "NUM_PLAYERS",
    "NUM_ROUNDS",
    "Card",
    "GameResult",
    "ResultLoadError",
    "ResultRepository",
    "SeedSummary",
]
