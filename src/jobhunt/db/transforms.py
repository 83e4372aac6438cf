"""Row <-> record mapping for every entity kind."""

from __future__ import annotations

import copy
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any, Generic, TypeVar

from pydantic import BaseModel, ValidationError

from jobhunt.db.base import utcnow
from jobhunt.errors import MalformedRowError
from jobhunt.types import (
    ChangeSet,
    Contact,
    ContactCreate,
    ContactUpdate,
    Document,
    DocumentCreate,
    DocumentUpdate,
    InterviewQuestion,
    InterviewQuestionCreate,
    InterviewQuestionUpdate,
    JobApplication,
    JobApplicationCreate,
    JobApplicationUpdate,
    LearningItem,
    LearningItemCreate,
    LearningItemUpdate,
    Link,
    LinkCreate,
    LinkUpdate,
    Note,
    NoteCreate,
    NoteUpdate,
    Project,
    ProjectCreate,
    ProjectUpdate,
    RecruiterCall,
    RecruiterCallCreate,
    RecruiterCallUpdate,
    Resume,
    ResumeCreate,
    ResumeUpdate,
    Todo,
    TodoCreate,
    TodoUpdate,
    blank_to_none,
)

RecordT = TypeVar("RecordT", bound=BaseModel)
CreateT = TypeVar("CreateT", bound=BaseModel)
UpdateT = TypeVar("UpdateT", bound=ChangeSet)


def _is_blank(value: Any) -> bool:
    return value is None or (isinstance(value, str) and not value.strip())


def _columns(*names: str, **renamed: str) -> dict[str, str]:
    mapping = {name: name for name in names}
    mapping.update(renamed)
    return mapping


@dataclass(frozen=True)
class RecordTransform(Generic[RecordT, CreateT, UpdateT]):
    kind: str
    table: str
    record: type[RecordT]
    create_model: type[CreateT]
    update_model: type[UpdateT]
    # record attribute -> storage column, excluding ``id``
    columns: Mapping[str, str]
    order_by: tuple[str, ...]
    non_nullable: frozenset[str] = frozenset()
    blank_as_null: frozenset[str] = frozenset()
    defaults: Mapping[str, Any] = field(default_factory=dict)
    fallbacks: Mapping[str, str] = field(default_factory=dict)

    def to_record(self, row: Mapping[str, Any]) -> RecordT:
        data: dict[str, Any] = {"id": row.get("id")}
        for name, column in self.columns.items():
            value = row.get(column)
            if value is None and name in self.fallbacks:
                value = row.get(self.fallbacks[name])
            if value is None and name in self.defaults:
                value = copy.deepcopy(self.defaults[name])
            data[name] = value
        try:
            return self.record.model_validate(data)
        except ValidationError as exc:
            raise MalformedRowError(self.kind, str(exc)) from exc

    def to_insert(self, new: CreateT) -> dict[str, Any]:
        values = new.model_dump()
        payload: dict[str, Any] = {}
        for name, column in self.columns.items():
            if name not in values:
                continue
            value = values[name]
            if name in self.blank_as_null:
                value = blank_to_none(value)
            payload[column] = value
        return payload

    def to_update(self, changes: UpdateT) -> dict[str, Any]:
        payload: dict[str, Any] = {}
        for name, value in changes.changes().items():
            if name in self.non_nullable and _is_blank(value):
                continue
            if name in self.blank_as_null:
                value = blank_to_none(value)
            payload[self.columns[name]] = value
        payload["updated_at"] = utcnow()
        return payload

    def coerce_create(self, new: CreateT | Mapping[str, Any]) -> CreateT:
        if isinstance(new, self.create_model):
            return new
        return self.create_model.model_validate(new)

    def coerce_update(self, changes: UpdateT | Mapping[str, Any]) -> UpdateT:
        if isinstance(changes, self.update_model):
            return changes
        return self.update_model.model_validate(changes)


RESUMES: RecordTransform[Resume, ResumeCreate, ResumeUpdate] = RecordTransform(
    kind="resumes",
    table="resumes",
    record=Resume,
    create_model=ResumeCreate,
    update_model=ResumeUpdate,
    columns=_columns("name", "type", "file_url", "file_name", "uploaded_at", "last_modified"),
    order_by=("uploaded_at",),
    non_nullable=frozenset({"name", "type", "file_url", "file_name", "last_modified"}),
    fallbacks={"last_modified": "updated_at"},
)

JOB_APPLICATIONS: RecordTransform[JobApplication, JobApplicationCreate, JobApplicationUpdate] = (
    RecordTransform(
        kind="job_applications",
        table="job_applications",
        record=JobApplication,
        create_model=JobApplicationCreate,
        update_model=JobApplicationUpdate,
        columns=_columns(
            "company_name",
            "position",
            "contact_person",
            "contact_email",
            "contact_phone",
            "applied_date",
            "status",
            "follow_up_date",
            "notes",
            "recruiter_email",
            "recruiter_phone",
            "job_url",
            "resume_used",
        ),
        order_by=("applied_date",),
        non_nullable=frozenset(
            {"company_name", "position", "contact_person", "contact_email", "applied_date", "status"}
        ),
        defaults={"notes": "", "contact_person": "", "contact_email": ""},
    )
)

DOCUMENTS: RecordTransform[Document, DocumentCreate, DocumentUpdate] = RecordTransform(
    kind="documents",
    table="documents",
    record=Document,
    create_model=DocumentCreate,
    update_model=DocumentUpdate,
    columns=_columns("name", "type", "file_url", "file_name", "uploaded_at"),
    order_by=("uploaded_at",),
    non_nullable=frozenset({"name", "type", "file_url", "file_name"}),
)

LINKS: RecordTransform[Link, LinkCreate, LinkUpdate] = RecordTransform(
    kind="links",
    table="links",
    record=Link,
    create_model=LinkCreate,
    update_model=LinkUpdate,
    columns=_columns("title", "url", "category", "description"),
    order_by=("created_at",),
    non_nullable=frozenset({"title", "url", "category"}),
)

CONTACTS: RecordTransform[Contact, ContactCreate, ContactUpdate] = RecordTransform(
    kind="contacts",
    table="contacts",
    record=Contact,
    create_model=ContactCreate,
    update_model=ContactUpdate,
    columns=_columns(
        "name", "email", "phone", "linkedin_url", "role", "company", "notes", "is_reference"
    ),
    order_by=("created_at",),
    non_nullable=frozenset({"name", "is_reference"}),
    defaults={"is_reference": False},
)

RECRUITER_CALLS: RecordTransform[RecruiterCall, RecruiterCallCreate, RecruiterCallUpdate] = (
    RecordTransform(
        kind="recruiter_calls",
        table="recruiter_calls",
        record=RecruiterCall,
        create_model=RecruiterCallCreate,
        update_model=RecruiterCallUpdate,
        columns=_columns(
            "company_name",
            "recruiter_name",
            "call_date",
            "call_time",
            "follow_up_happened",
            "follow_up_date",
            "follow_up_notes",
            "discussion_notes",
            "recruiter_phone",
            "recruiter_email",
            "position",
            "status",
        ),
        order_by=("call_date", "call_time"),
        non_nullable=frozenset(
            {
                "company_name",
                "call_date",
                "call_time",
                "follow_up_happened",
                "discussion_notes",
                "status",
            }
        ),
        blank_as_null=frozenset(
            {"recruiter_name", "follow_up_notes", "recruiter_phone", "recruiter_email", "position"}
        ),
        defaults={"follow_up_happened": False, "discussion_notes": ""},
    )
)

LEARNING_ITEMS: RecordTransform[LearningItem, LearningItemCreate, LearningItemUpdate] = (
    RecordTransform(
        kind="learning_items",
        table="learning_items",
        record=LearningItem,
        create_model=LearningItemCreate,
        update_model=LearningItemUpdate,
        columns=_columns("title", "category", "status", "notes", "started_date", "completed_date"),
        order_by=("created_at",),
        non_nullable=frozenset({"title", "category", "status"}),
    )
)

NOTES: RecordTransform[Note, NoteCreate, NoteUpdate] = RecordTransform(
    kind="notes",
    table="notes",
    record=Note,
    create_model=NoteCreate,
    update_model=NoteUpdate,
    columns=_columns("title", "content", "created_at", "updated_at"),
    order_by=("created_at",),
    non_nullable=frozenset({"title", "content"}),
    defaults={"content": ""},
)

TODOS: RecordTransform[Todo, TodoCreate, TodoUpdate] = RecordTransform(
    kind="todos",
    table="todos",
    record=Todo,
    create_model=TodoCreate,
    update_model=TodoUpdate,
    columns=_columns(
        "title", "description", "completed", "priority", "due_date", "created_at", "updated_at"
    ),
    order_by=("created_at",),
    non_nullable=frozenset({"title", "completed", "priority"}),
    blank_as_null=frozenset({"description"}),
    defaults={"completed": False, "priority": "medium"},
)

PROJECTS: RecordTransform[Project, ProjectCreate, ProjectUpdate] = RecordTransform(
    kind="projects",
    table="projects",
    record=Project,
    create_model=ProjectCreate,
    update_model=ProjectUpdate,
    columns=_columns(
        "name",
        "description",
        "problem_statement",
        "github_link",
        "files",
        metadata="metadata_json",
    ),
    order_by=("created_at",),
    non_nullable=frozenset({"name", "github_link", "files", "metadata"}),
    blank_as_null=frozenset({"description", "problem_statement"}),
    defaults={"files": [], "metadata": {}},
)

INTERVIEW_QUESTIONS: RecordTransform[
    InterviewQuestion, InterviewQuestionCreate, InterviewQuestionUpdate
] = RecordTransform(
    kind="interview_questions",
    table="interview_questions",
    record=InterviewQuestion,
    create_model=InterviewQuestionCreate,
    update_model=InterviewQuestionUpdate,
    columns=_columns(
        "question",
        "answer",
        "category",
        "technology",
        "difficulty",
        "tags",
        "notes",
        "times_practiced",
        "last_practiced_date",
        "created_at",
        "updated_at",
    ),
    order_by=("created_at",),
    non_nullable=frozenset(
        {"question", "category", "technology", "difficulty", "times_practiced"}
    ),
    defaults={"times_practiced": 0},
)

TRANSFORMS: dict[str, RecordTransform[Any, Any, Any]] = {
    transform.kind: transform
    for transform in (
        RESUMES,
        JOB_APPLICATIONS,
        DOCUMENTS,
        LINKS,
        CONTACTS,
        RECRUITER_CALLS,
        LEARNING_ITEMS,
        NOTES,
        TODOS,
        PROJECTS,
        INTERVIEW_QUESTIONS,
    )
}
