"""SQLite-backed game result repository."""

from __future__ import annotations

import asyncio
import json
from typing import TYPE_CHECKING

import structlog
from pydantic import ValidationError

from shared.dal.models import GameResult, SeedSummary
from shared.dal.result_repository import ResultLoadError, ResultRepository

if TYPE_CHECKING:
    from shared.db.connection import Database

logger = structlog.get_logger()


class SqliteResultRepository(ResultRepository):
    """SQLite implementation of ResultRepository.

    Each result is stored as one JSON document (PascalCase keys) next to its
    seed. Results for a seed are returned in insertion order.
    """

    def __init__(self, db: Database) -> None:
        self._db = db
        self._lock = asyncio.Lock()

    async def add_result(self, seed: str, result: GameResult) -> None:
        """Insert a result under the given seed."""
        async with self._lock:
            self._db.connection.execute(
                "INSERT INTO KlaverjasResults (seed, result) VALUES (?, ?)",
                (seed, result.model_dump_json(by_alias=True)),
            )
            self._db.connection.commit()
        logger.info("result stored", seed=seed)

    async def get_results(self, seed: str) -> list[GameResult]:
        """Retrieve every result stored under a seed.

        Raises ResultLoadError if any stored row is malformed; callers must
        not render a partial group.
        """
        rows = self._db.connection.execute(
            "SELECT id, result FROM KlaverjasResults WHERE seed = ? ORDER BY id",
            (seed,),
        ).fetchall()
        return [_parse_row(seed, row_id, raw) for row_id, raw in rows]

    async def list_seeds(self, limit: int = 50) -> list[SeedSummary]:
        """Retrieve seeds with their result counts, most recently stored first."""
        rows = self._db.connection.execute(
            "SELECT seed, COUNT(*) FROM KlaverjasResults GROUP BY seed ORDER BY MAX(id) DESC LIMIT ?",
            (limit,),
        ).fetchall()
        return [SeedSummary(seed=seed, num_games=count) for seed, count in rows]


def _parse_row(seed: str, row_id: int, raw: str | bytes) -> GameResult:
    try:
        data = json.loads(raw)
    except json.JSONDecodeError as exc:
        msg = f"Malformed JSON in result {row_id} for seed {seed!r}: {exc}"
        raise ResultLoadError(msg) from exc
    try:
        return GameResult.model_validate(data)
    except ValidationError as exc:
        msg = f"Invalid result {row_id} for seed {seed!r}: {exc}"
        raise ResultLoadError(msg) from exc
