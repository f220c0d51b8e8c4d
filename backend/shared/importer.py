"""Load game result JSON files and store them under a seed."""

from __future__ import annotations

from typing import TYPE_CHECKING

import structlog
from pydantic import ValidationError

from shared.dal import GameResult, ResultLoadError

if TYPE_CHECKING:
    from collections.abc import Iterable
    from pathlib import Path

    from shared.dal import ResultRepository

logger = structlog.get_logger()


def load_result_file(path: Path) -> GameResult:
    """Read and validate one result file.

    Raises:
        ResultLoadError: If the file cannot be read or is not a valid game result.
    """
    try:
        raw = path.read_bytes()
    except OSError as e:
        raise ResultLoadError(f"Cannot read {path}: {e}") from e
    try:
        return GameResult.model_validate_json(raw)
    except ValidationError as e:
        raise ResultLoadError(f"{path} is not a valid game result:\n{e}") from e


async def import_results(seed: str, paths: Iterable[Path], repo: ResultRepository) -> int:
    """Validate every file, then store the results under ``seed`` in file order.

    Nothing is stored if any file fails to load. Returns the number of results stored.
    """
    results = [load_result_file(path) for path in paths]
    for result in results:
        await repo.add_result(seed, result)
    logger.info("results imported", seed=seed, count=len(results))
    return len(results)
