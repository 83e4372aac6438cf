from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any, Protocol

from sqlalchemy import Table, delete, insert, select, update
from sqlalchemy.orm import Session, sessionmaker

from jobhunt.db.base import Base
from jobhunt.db import models  # noqa: F401
from jobhunt.errors import RecordNotFoundError, StoreError

Row = dict[str, Any]


class Store(Protocol):
    """Rows cross this boundary as plain dicts keyed by column name."""

    def select_all(self, table: str, order_by: Sequence[str]) -> list[Row]: ...

    def insert(self, table: str, values: Mapping[str, Any]) -> Row: ...

    def update(self, table: str, record_id: str, values: Mapping[str, Any]) -> Row: ...

    def delete(self, table: str, record_id: str) -> None: ...


class SqlStore:
    def __init__(self, session_factory: sessionmaker[Session]):
        self.session_factory = session_factory

    def _table(self, name: str) -> Table:
        table = Base.metadata.tables.get(name)
        if table is None:
            raise StoreError(f"unknown table '{name}'")
        return table

    def select_all(self, table: str, order_by: Sequence[str]) -> list[Row]:
        target = self._table(table)
        statement = select(target).order_by(*(target.c[column].desc() for column in order_by))
        with self.session_factory() as session:
            return [dict(row) for row in session.execute(statement).mappings().all()]

    def insert(self, table: str, values: Mapping[str, Any]) -> Row:
        target = self._table(table)
        with self.session_factory() as session:
            result = session.execute(insert(target).values(**values))
            record_id = result.inserted_primary_key[0]
            session.commit()
            row = session.execute(select(target).where(target.c.id == record_id)).mappings().one()
            return dict(row)

    def update(self, table: str, record_id: str, values: Mapping[str, Any]) -> Row:
        target = self._table(table)
        with self.session_factory() as session:
            result = session.execute(update(target).where(target.c.id == record_id).values(**values))
            if result.rowcount == 0:
                session.rollback()
                raise RecordNotFoundError(table, record_id)
            session.commit()
            row = session.execute(select(target).where(target.c.id == record_id)).mappings().one()
            return dict(row)

    def delete(self, table: str, record_id: str) -> None:
        target = self._table(table)
        with self.session_factory() as session:
            session.execute(delete(target).where(target.c.id == record_id))
            session.commit()
