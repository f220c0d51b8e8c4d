"""Abstract interface for game result persistence."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from shared.dal.models import GameResult, SeedSummary


class ResultLoadError(Exception):
    """Raised when a stored game result cannot be parsed or validated."""


class ResultRepository(ABC):
    """Abstract interface for game result persistence, keyed by seed."""

    @abstractmethod
    async def add_result(self, seed: str, result: GameResult) -> None: ...

    @abstractmethod
    async def get_results(self, seed: str) -> list[GameResult]: ...

    @abstractmethod
    async def list_seeds(self, limit: int = 50) -> list[SeedSummary]: ...
