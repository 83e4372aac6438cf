from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any, Generic

from sqlalchemy.exc import SQLAlchemyError

from jobhunt.core.cache import CollectionCache
from jobhunt.db.store import Store
from jobhunt.db.transforms import (
    CONTACTS,
    DOCUMENTS,
    INTERVIEW_QUESTIONS,
    JOB_APPLICATIONS,
    LEARNING_ITEMS,
    LINKS,
    NOTES,
    PROJECTS,
    RECRUITER_CALLS,
    RESUMES,
    TODOS,
    CreateT,
    RecordT,
    RecordTransform,
    UpdateT,
)
from jobhunt.errors import StoreError, UnknownEntityError

logger = logging.getLogger(__name__)

# Failures at the store boundary that a collection read reports as "nothing loaded".
READ_FAILURES = (SQLAlchemyError, StoreError, OSError)


class EntityRepository(Generic[RecordT, CreateT, UpdateT]):
    """get_all/create/update/delete for one entity kind, cached per kind."""

    def __init__(
        self,
        store: Store,
        cache: CollectionCache,
        transform: RecordTransform[RecordT, CreateT, UpdateT],
    ):
        self.store = store
        self.cache = cache
        self.transform = transform

    @property
    def kind(self) -> str:
        return self.transform.kind

    def invalidate(self) -> None:
        logger.debug("Invalidating cached %s", self.kind)
        self.cache.invalidate(self.kind)

    def get_all(self) -> list[RecordT]:
        cached = self.cache.get(self.kind)
        if cached is not None:
            return cached

        try:
            rows = self.store.select_all(self.transform.table, self.transform.order_by)
        except READ_FAILURES:
            logger.exception("Error fetching %s", self.kind)
            return []

        records = [self.transform.to_record(row) for row in rows]
        self.cache.put(self.kind, records)
        return records

    def create(self, new: CreateT | Mapping[str, Any]) -> RecordT:
        payload = self.transform.to_insert(self.transform.coerce_create(new))
        try:
            row = self.store.insert(self.transform.table, payload)
        except Exception:
            logger.exception("Error creating %s record", self.kind)
            raise
        self.invalidate()
        return self.transform.to_record(row)

    def update(self, record_id: str, changes: UpdateT | Mapping[str, Any]) -> RecordT:
        payload = self.transform.to_update(self.transform.coerce_update(changes))
        try:
            row = self.store.update(self.transform.table, record_id, payload)
        except Exception:
            logger.exception("Error updating %s record %s", self.kind, record_id)
            raise
        self.invalidate()
        return self.transform.to_record(row)

    def delete(self, record_id: str) -> None:
        try:
            self.store.delete(self.transform.table, record_id)
        except Exception:
            logger.exception("Error deleting %s record %s", self.kind, record_id)
            raise
        self.invalidate()


class DataAccess:
    """Entry point for every collection, sharing one store and one cache."""

    def __init__(self, store: Store, cache: CollectionCache | None = None):
        self.store = store
        self.cache = cache if cache is not None else CollectionCache()

        self.resumes = EntityRepository(store, self.cache, RESUMES)
        self.applications = EntityRepository(store, self.cache, JOB_APPLICATIONS)
        self.documents = EntityRepository(store, self.cache, DOCUMENTS)
        self.links = EntityRepository(store, self.cache, LINKS)
        self.contacts = EntityRepository(store, self.cache, CONTACTS)
        self.calls = EntityRepository(store, self.cache, RECRUITER_CALLS)
        self.learning_items = EntityRepository(store, self.cache, LEARNING_ITEMS)
        self.notes = EntityRepository(store, self.cache, NOTES)
        self.todos = EntityRepository(store, self.cache, TODOS)
        self.projects = EntityRepository(store, self.cache, PROJECTS)
        self.interview_questions = EntityRepository(store, self.cache, INTERVIEW_QUESTIONS)

        self._by_kind: dict[str, EntityRepository[Any, Any, Any]] = {
            repo.kind: repo
            for repo in (
                self.resumes,
                self.applications,
                self.documents,
                self.links,
                self.contacts,
                self.calls,
                self.learning_items,
                self.notes,
                self.todos,
                self.projects,
                self.interview_questions,
            )
        }

    @property
    def kinds(self) -> list[str]:
        return list(self._by_kind)

    def repository(self, kind: str) -> EntityRepository[Any, Any, Any]:
        try:
            return self._by_kind[kind]
        except KeyError:
            raise UnknownEntityError(kind) from None

    def clear_cache(self) -> None:
        self.cache.clear()
