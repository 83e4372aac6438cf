from __future__ import annotations


class JobHuntError(Exception):
    """Base class for errors raised by the data-access layer."""


class StoreError(JobHuntError):
    pass


class RecordNotFoundError(StoreError):
    def __init__(self, table: str, record_id: str) -> None:
        super().__init__(f"{table} record {record_id} not found")
        self.table = table
        self.record_id = record_id


class MalformedRowError(JobHuntError):
    """A storage row did not match the schema of its entity kind."""

    def __init__(self, kind: str, detail: str) -> None:
        super().__init__(f"malformed {kind} row: {detail}")
        self.kind = kind
        self.detail = detail


class UnknownEntityError(JobHuntError, KeyError):
    def __init__(self, kind: str) -> None:
        super().__init__(kind)
        self.kind = kind

    def __str__(self) -> str:
        return f"unknown entity kind '{self.kind}'"
