from __future__ import annotations

from datetime import UTC, date, datetime
from typing import Annotated, Any, Literal

from pydantic import BaseModel, BeforeValidator, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

ResumeType = Literal[
    "java-angular-aws",
    "java-react-aws",
    "pure-frontend",
    "qa-automation",
    "dotnet-react-aws",
    "dotnet-angular-aws",
    "ai-ml",
]
ApplicationStatus = Literal[
    "applied",
    "interview-scheduled",
    "interviewed",
    "offer",
    "rejected",
    "no-response",
]
DocumentType = Literal[
    "driving-license",
    "ead",
    "stem-ead",
    "aws-certificate",
    "linkedin-certificate",
    "other",
]
LinkCategory = Literal[
    "job-board",
    "portfolio",
    "github",
    "linkedin",
    "certification",
    "learning",
    "tool",
    "other",
]
LearningCategory = Literal[
    "java",
    "react",
    "angular",
    "aws",
    "spring-boot",
    "python",
    "system-design",
    "leetcode",
    "behavioral",
    "other",
]
LearningStatus = Literal["not-started", "in-progress", "completed"]
CallStatus = Literal["pending", "followed-up", "no-follow-up"]
TodoPriority = Literal["low", "medium", "high"]
QuestionCategory = Literal["behavioral", "technical"]
QuestionDifficulty = Literal["easy", "medium", "hard"]
InterviewTechnology = Literal[
    "java",
    "react",
    "angular",
    "aws",
    "spring-boot",
    "python",
    "javascript",
    "typescript",
    "nodejs",
    "sql",
    "system-design",
    "data-structures",
    "algorithms",
    "leetcode",
    "behavioral",
    "html-css",
    "docker",
    "kubernetes",
    "microservices",
    "other",
]


def blank_to_none(value: Any) -> Any:
    if isinstance(value, str) and not value.strip():
        return None
    return value


# Form inputs submit "" for an unset date; the store must see NULL instead.
OptionalDate = Annotated[date | None, BeforeValidator(blank_to_none)]
OptionalDateTime = Annotated[datetime | None, BeforeValidator(blank_to_none)]


def _now() -> datetime:
    return datetime.now(UTC)


def blank_to_now(value: Any) -> Any:
    if value is None or (isinstance(value, str) and not value.strip()):
        return _now()
    return value


StampedDateTime = Annotated[datetime, BeforeValidator(blank_to_now)]


class RecordModel(BaseModel):
    """Application-level shape: snake_case attributes, camelCase on the wire."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class ChangeSet(RecordModel):
    """Sparse update; only attributes explicitly set are sent to the store."""

    def changes(self) -> dict[str, Any]:
        return self.model_dump(exclude_unset=True)


class ProjectFile(RecordModel):
    name: str
    url: str
    size: int = 0
    type: str = ""


# -- Resume -----------------------------------------------------------------


class Resume(RecordModel):
    id: str
    name: str
    type: ResumeType
    file_url: str
    file_name: str
    uploaded_at: datetime | None = None
    last_modified: datetime | None = None


class ResumeCreate(RecordModel):
    name: str
    type: ResumeType
    file_url: str
    file_name: str
    uploaded_at: StampedDateTime = Field(default_factory=_now)
    last_modified: StampedDateTime = Field(default_factory=_now)


class ResumeUpdate(ChangeSet):
    name: str | None = None
    type: ResumeType | None = None
    file_url: str | None = None
    file_name: str | None = None
    last_modified: OptionalDateTime = None


# -- Job application --------------------------------------------------------


class JobApplication(RecordModel):
    id: str
    company_name: str
    position: str
    contact_person: str = ""
    contact_email: str = ""
    contact_phone: str | None = None
    applied_date: date
    status: ApplicationStatus
    follow_up_date: date | None = None
    notes: str = ""
    recruiter_email: str | None = None
    recruiter_phone: str | None = None
    job_url: str | None = None
    resume_used: str | None = None


class JobApplicationCreate(RecordModel):
    company_name: str
    position: str
    contact_person: str = ""
    contact_email: str = ""
    contact_phone: str | None = None
    applied_date: date
    status: ApplicationStatus = "applied"
    follow_up_date: OptionalDate = None
    notes: str = ""
    recruiter_email: str | None = None
    recruiter_phone: str | None = None
    job_url: str | None = None
    resume_used: str | None = None


class JobApplicationUpdate(ChangeSet):
    company_name: str | None = None
    position: str | None = None
    contact_person: str | None = None
    contact_email: str | None = None
    contact_phone: str | None = None
    applied_date: OptionalDate = None
    status: ApplicationStatus | None = None
    follow_up_date: OptionalDate = None
    notes: str | None = None
    recruiter_email: str | None = None
    recruiter_phone: str | None = None
    job_url: str | None = None
    resume_used: str | None = None


# -- Document ---------------------------------------------------------------


class Document(RecordModel):
    id: str
    name: str
    type: DocumentType
    file_url: str
    file_name: str
    uploaded_at: datetime | None = None


class DocumentCreate(RecordModel):
    name: str
    type: DocumentType
    file_url: str
    file_name: str
    uploaded_at: StampedDateTime = Field(default_factory=_now)


class DocumentUpdate(ChangeSet):
    name: str | None = None
    type: DocumentType | None = None
    file_url: str | None = None
    file_name: str | None = None


# -- Link -------------------------------------------------------------------


class Link(RecordModel):
    id: str
    title: str
    url: str
    category: LinkCategory
    description: str | None = None


class LinkCreate(RecordModel):
    title: str
    url: str
    category: LinkCategory = "other"
    description: str | None = None


class LinkUpdate(ChangeSet):
    title: str | None = None
    url: str | None = None
    category: LinkCategory | None = None
    description: str | None = None


# -- Contact ----------------------------------------------------------------


class Contact(RecordModel):
    id: str
    name: str
    email: str | None = None
    phone: str | None = None
    linkedin_url: str | None = None
    role: str | None = None
    company: str | None = None
    notes: str | None = None
    is_reference: bool = False


class ContactCreate(RecordModel):
    name: str
    email: str | None = None
    phone: str | None = None
    linkedin_url: str | None = None
    role: str | None = None
    company: str | None = None
    notes: str | None = None
    is_reference: bool = False


class ContactUpdate(ChangeSet):
    name: str | None = None
    email: str | None = None
    phone: str | None = None
    linkedin_url: str | None = None
    role: str | None = None
    company: str | None = None
    notes: str | None = None
    is_reference: bool | None = None


# -- Recruiter call ---------------------------------------------------------


class RecruiterCall(RecordModel):
    id: str
    company_name: str
    recruiter_name: str | None = None
    call_date: date
    call_time: str
    follow_up_happened: bool = False
    follow_up_date: date | None = None
    follow_up_notes: str | None = None
    discussion_notes: str = ""
    recruiter_phone: str | None = None
    recruiter_email: str | None = None
    position: str | None = None
    status: CallStatus = "pending"


class RecruiterCallCreate(RecordModel):
    company_name: str
    recruiter_name: str | None = None
    call_date: date
    call_time: str
    follow_up_happened: bool = False
    follow_up_date: OptionalDate = None
    follow_up_notes: str | None = None
    discussion_notes: str = ""
    recruiter_phone: str | None = None
    recruiter_email: str | None = None
    position: str | None = None
    status: CallStatus = "pending"


class RecruiterCallUpdate(ChangeSet):
    company_name: str | None = None
    recruiter_name: str | None = None
    call_date: OptionalDate = None
    call_time: str | None = None
    follow_up_happened: bool | None = None
    follow_up_date: OptionalDate = None
    follow_up_notes: str | None = None
    discussion_notes: str | None = None
    recruiter_phone: str | None = None
    recruiter_email: str | None = None
    position: str | None = None
    status: CallStatus | None = None


# -- Learning item ----------------------------------------------------------


class LearningItem(RecordModel):
    id: str
    title: str
    category: LearningCategory
    status: LearningStatus = "not-started"
    notes: str | None = None
    started_date: date | None = None
    completed_date: date | None = None


class LearningItemCreate(RecordModel):
    title: str
    category: LearningCategory = "other"
    status: LearningStatus = "not-started"
    notes: str | None = None
    started_date: OptionalDate = None
    completed_date: OptionalDate = None


class LearningItemUpdate(ChangeSet):
    title: str | None = None
    category: LearningCategory | None = None
    status: LearningStatus | None = None
    notes: str | None = None
    started_date: OptionalDate = None
    completed_date: OptionalDate = None


# -- Note -------------------------------------------------------------------


class Note(RecordModel):
    id: str
    title: str
    content: str = ""
    created_at: datetime
    updated_at: datetime


class NoteCreate(RecordModel):
    title: str
    content: str = ""


class NoteUpdate(ChangeSet):
    title: str | None = None
    content: str | None = None


# -- Todo -------------------------------------------------------------------


class Todo(RecordModel):
    id: str
    title: str
    description: str | None = None
    completed: bool = False
    priority: TodoPriority = "medium"
    due_date: date | None = None
    created_at: datetime
    updated_at: datetime


class TodoCreate(RecordModel):
    title: str
    description: str | None = None
    completed: bool = False
    priority: TodoPriority = "medium"
    due_date: OptionalDate = None


class TodoUpdate(ChangeSet):
    title: str | None = None
    description: str | None = None
    completed: bool | None = None
    priority: TodoPriority | None = None
    due_date: OptionalDate = None


# -- Project ----------------------------------------------------------------


class Project(RecordModel):
    id: str
    name: str
    description: str | None = None
    problem_statement: str | None = None
    github_link: str
    files: list[ProjectFile] = Field(default_factory=list)
    metadata: dict[str, Any] = Field(default_factory=dict)


class ProjectCreate(RecordModel):
    name: str
    description: str | None = None
    problem_statement: str | None = None
    github_link: str
    files: list[ProjectFile] = Field(default_factory=list)
    metadata: dict[str, Any] = Field(default_factory=dict)

    @field_validator("name", "github_link")
    @classmethod
    def require_text(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("must not be blank")
        return value.strip()


class ProjectUpdate(ChangeSet):
    name: str | None = None
    description: str | None = None
    problem_statement: str | None = None
    github_link: str | None = None
    files: list[ProjectFile] | None = None
    metadata: dict[str, Any] | None = None


# -- Interview question -----------------------------------------------------


class InterviewQuestion(RecordModel):
    id: str
    question: str
    answer: str | None = None
    category: QuestionCategory = "technical"
    technology: InterviewTechnology = "java"
    difficulty: QuestionDifficulty = "medium"
    tags: str | None = None
    notes: str | None = None
    times_practiced: int = 0
    last_practiced_date: date | None = None
    created_at: datetime
    updated_at: datetime


class InterviewQuestionCreate(RecordModel):
    question: str
    answer: str | None = None
    category: QuestionCategory = "technical"
    technology: InterviewTechnology = "java"
    difficulty: QuestionDifficulty = "medium"
    tags: str | None = None
    notes: str | None = None
    times_practiced: int = 0
    last_practiced_date: OptionalDate = None


class InterviewQuestionUpdate(ChangeSet):
    question: str | None = None
    answer: str | None = None
    category: QuestionCategory | None = None
    technology: InterviewTechnology | None = None
    difficulty: QuestionDifficulty | None = None
    tags: str | None = None
    notes: str | None = None
    times_practiced: int | None = None
    last_practiced_date: OptionalDate = None
