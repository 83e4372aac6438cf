from __future__ import annotations

import os
import tempfile
from collections import defaultdict
from collections.abc import Mapping, Sequence
from datetime import UTC, datetime
from pathlib import Path
from typing import Any
from uuid import uuid4

_TEST_DATA_DIR = Path(tempfile.mkdtemp(prefix="jobhunt-tests-"))
os.environ["DATABASE_URL"] = f"sqlite:///{_TEST_DATA_DIR / 'jobhunt.db'}"
os.environ["DATA_DIR"] = str(_TEST_DATA_DIR)
os.environ["APP_ENV"] = "test"

import pytest  # noqa: E402
from sqlalchemy.exc import OperationalError  # noqa: E402

from jobhunt.db.base import Base  # noqa: E402
from jobhunt.db.session import engine  # noqa: E402
from jobhunt.errors import RecordNotFoundError  # noqa: E402


class FakeStore:
    """In-memory store that records every call and payload."""

    def __init__(self) -> None:
        self.tables: dict[str, dict[str, dict[str, Any]]] = defaultdict(dict)
        self.calls: list[tuple[str, str]] = []
        self.payloads: list[tuple[str, str, dict[str, Any]]] = []

    def count(self, operation: str, table: str) -> int:
        return self.calls.count((operation, table))

    def select_all(self, table: str, order_by: Sequence[str]) -> list[dict[str, Any]]:
        self.calls.append(("select_all", table))
        rows = [dict(row) for row in self.tables[table].values()]
        for column in reversed(order_by):
            rows.sort(key=lambda row: (row.get(column) is not None, row.get(column)), reverse=True)
        return rows

    def insert(self, table: str, values: Mapping[str, Any]) -> dict[str, Any]:
        self.calls.append(("insert", table))
        self.payloads.append(("insert", table, dict(values)))
        now = datetime.now(UTC)
        row = {"id": str(uuid4()), "created_at": now, "updated_at": now, **values}
        self.tables[table][row["id"]] = row
        return dict(row)

    def update(self, table: str, record_id: str, values: Mapping[str, Any]) -> dict[str, Any]:
        self.calls.append(("update", table))
        self.payloads.append(("update", table, dict(values)))
        if record_id not in self.tables[table]:
            raise RecordNotFoundError(table, record_id)
        self.tables[table][record_id].update(values)
        return dict(self.tables[table][record_id])

    def delete(self, table: str, record_id: str) -> None:
        self.calls.append(("delete", table))
        self.tables[table].pop(record_id, None)


class UnreachableStore:
    """Every call fails the way a dropped database connection does."""

    def __init__(self) -> None:
        self.error = OperationalError("SELECT 1", {}, ConnectionRefusedError("connection refused"))
        self.attempts = 0

    def _fail(self, *args: Any, **kwargs: Any) -> Any:
        self.attempts += 1
        raise self.error

    select_all = insert = update = delete = _fail


@pytest.fixture()
def fake_store() -> FakeStore:
    return FakeStore()


@pytest.fixture()
def unreachable_store() -> UnreachableStore:
    return UnreachableStore()


@pytest.fixture(autouse=True)
def reset_db() -> None:
    Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)
    yield
