"""Tests for SqliteResultRepository."""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

import pytest

from klaverjas.tests.factories import make_result, result_json
from shared.dal import ResultLoadError
from shared.db.connection import Database
from shared.db.result_repository import SqliteResultRepository

if TYPE_CHECKING:
    from pathlib import Path


@pytest.fixture
def db(tmp_path: Path):
    database = Database(tmp_path / "test.db")
    database.connect()
    yield database
    database.close()


@pytest.fixture
def repo(db: Database) -> SqliteResultRepository:
    return SqliteResultRepository(db)


def _insert_raw(db: Database, seed: str, raw: str) -> None:
    db.connection.execute("INSERT INTO KlaverjasResults (seed, result) VALUES (?, ?)", (seed, raw))
    db.connection.commit()


class TestAddAndGet:
    async def test_add_and_get_result(self, repo: SqliteResultRepository) -> None:
        result = make_result()
        await repo.add_result("seed-1", result)

        assert await repo.get_results("seed-1") == [result]

    async def test_unknown_seed_returns_empty_list(self, repo: SqliteResultRepository) -> None:
        assert await repo.get_results("nope") == []

    async def test_results_keep_insertion_order(self, repo: SqliteResultRepository) -> None:
        first = make_result(players=("A1", "A2", "A3", "A4"))
        second = make_result(players=("B1", "B2", "B3", "B4"))
        third = make_result(players=("C1", "C2", "C3", "C4"))
        for r in (first, second, third):
            await repo.add_result("s", r)

        assert await repo.get_results("s") == [first, second, third]

    async def test_seeds_are_kept_apart(self, repo: SqliteResultRepository) -> None:
        await repo.add_result("a", make_result(trump="CLUBS"))
        await repo.add_result("b", make_result(trump="SPADES"))

        assert [r.trump for r in await repo.get_results("a")] == ["CLUBS"]
        assert [r.trump for r in await repo.get_results("b")] == ["SPADES"]

    async def test_stores_pascal_case_json(self, repo: SqliteResultRepository, db: Database) -> None:
        await repo.add_result("s", make_result())

        raw = db.connection.execute("SELECT result FROM KlaverjasResults").fetchone()[0]
        assert json.loads(raw)["StartingPlayer"] == 0

    async def test_reads_rows_written_by_other_clients(self, repo: SqliteResultRepository, db: Database) -> None:
        _insert_raw(db, "s", json.dumps(result_json(Trump="DIAMONDS")))

        results = await repo.get_results("s")
        assert results[0].trump == "DIAMONDS"


class TestMalformedRows:
    async def test_invalid_json_raises(self, repo: SqliteResultRepository, db: Database) -> None:
        await repo.add_result("s", make_result())
        _insert_raw(db, "s", "{not json")

        with pytest.raises(ResultLoadError, match="Malformed JSON"):
            await repo.get_results("s")

    async def test_invalid_record_raises(self, repo: SqliteResultRepository, db: Database) -> None:
        data = result_json()
        data["Rounds"] = data["Rounds"][:7]
        _insert_raw(db, "s", json.dumps(data))

        with pytest.raises(ResultLoadError, match="Invalid result"):
            await repo.get_results("s")

    async def test_error_names_the_seed(self, repo: SqliteResultRepository, db: Database) -> None:
        _insert_raw(db, "bad-seed", json.dumps(result_json(StartingPlayer=7)))

        with pytest.raises(ResultLoadError, match="bad-seed"):
            await repo.get_results("bad-seed")

    async def test_other_seeds_unaffected(self, repo: SqliteResultRepository, db: Database) -> None:
        _insert_raw(db, "bad", "[]")
        await repo.add_result("good", make_result())

        assert len(await repo.get_results("good")) == 1


class TestListSeeds:
    async def test_empty(self, repo: SqliteResultRepository) -> None:
        assert await repo.list_seeds() == []

    async def test_counts_and_recency_order(self, repo: SqliteResultRepository) -> None:
        await repo.add_result("old", make_result())
        await repo.add_result("new", make_result())
        await repo.add_result("old", make_result())
        await repo.add_result("newest", make_result())

        seeds = await repo.list_seeds()
        assert [(s.seed, s.num_games) for s in seeds] == [("newest", 1), ("old", 2), ("new", 1)]

    async def test_limit(self, repo: SqliteResultRepository) -> None:
        for i in range(5):
            await repo.add_result(f"s{i}", make_result())

        assert len(await repo.list_seeds(limit=3)) == 3
