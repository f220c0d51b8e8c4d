"""Import game result JSON files into the results database under a seed.

Usage: uv run python bin/import-results.py <seed> <result.json>...

Every file is validated before anything is stored; one invalid file aborts
the whole import.
"""

import asyncio
import sys
from pathlib import Path

# Add backend to path for imports
sys.path.insert(0, str(Path(__file__).resolve().parent.parent / "backend"))

from shared.dal import ResultLoadError
from shared.db import Database, SqliteResultRepository
from shared.importer import import_results
from viewer.server.settings import CompareServerSettings


async def main() -> None:
    if len(sys.argv) < 3:
        print(f"Usage: {sys.argv[0]} <seed> <result.json>...")
        sys.exit(1)

    seed = sys.argv[1]
    paths = [Path(arg) for arg in sys.argv[2:]]

    settings = CompareServerSettings()
    db = Database(settings.database_path)
    db.connect()
    try:
        repo = SqliteResultRepository(db)
        try:
            count = await import_results(seed, paths, repo)
        except ResultLoadError as e:
            print(f"Error: {e}")
            sys.exit(1)
        stored = await repo.get_results(seed)
    finally:
        db.close()

    print(f"Imported {count} result(s) for seed {seed!r}; {len(stored)} stored in total.")


if __name__ == "__main__":
    asyncio.run(main())
