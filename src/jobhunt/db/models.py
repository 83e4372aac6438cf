from __future__ import annotations

from datetime import date, datetime
from typing import Any

from sqlalchemy import JSON, Boolean, Date, DateTime, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from jobhunt.db.base import Base, IdentifierMixin, TimestampMixin


class Resume(IdentifierMixin, TimestampMixin, Base):
    __tablename__ = "resumes"

    name: Mapped[str] = mapped_column(String(255), nullable=False)
    type: Mapped[str] = mapped_column(String(40), nullable=False)
    file_url: Mapped[str] = mapped_column(Text, nullable=False)
    file_name: Mapped[str] = mapped_column(String(255), nullable=False)
    uploaded_at: Mapped[datetime | None] = mapped_column(DateTime(timezone=True), nullable=True, index=True)
    last_modified: Mapped[datetime | None] = mapped_column(DateTime(timezone=True), nullable=True)


class JobApplication(IdentifierMixin, TimestampMixin, Base):
    __tablename__ = "job_applications"

    company_name: Mapped[str] = mapped_column(String(255), nullable=False)
    position: Mapped[str] = mapped_column(String(255), nullable=False)
    contact_person: Mapped[str] = mapped_column(String(255), default="", nullable=False)
    contact_email: Mapped[str] = mapped_column(String(255), default="", nullable=False)
    contact_phone: Mapped[str | None] = mapped_column(String(40), nullable=True)
    applied_date: Mapped[date] = mapped_column(Date, nullable=False, index=True)
    status: Mapped[str] = mapped_column(String(40), default="applied", nullable=False)
    follow_up_date: Mapped[date | None] = mapped_column(Date, nullable=True)
    notes: Mapped[str | None] = mapped_column(Text, nullable=True)
    recruiter_email: Mapped[str | None] = mapped_column(String(255), nullable=True)
    recruiter_phone: Mapped[str | None] = mapped_column(String(40), nullable=True)
    job_url: Mapped[str | None] = mapped_column(String(1000), nullable=True)
    resume_used: Mapped[str | None] = mapped_column(String(255), nullable=True)


class Document(IdentifierMixin, TimestampMixin, Base):
    __tablename__ = "documents"

    name: Mapped[str] = mapped_column(String(255), nullable=False)
    type: Mapped[str] = mapped_column(String(40), nullable=False)
    file_url: Mapped[str] = mapped_column(Text, nullable=False)
    file_name: Mapped[str] = mapped_column(String(255), nullable=False)
    uploaded_at: Mapped[datetime | None] = mapped_column(DateTime(timezone=True), nullable=True, index=True)


class Link(IdentifierMixin, TimestampMixin, Base):
    __tablename__ = "links"

    title: Mapped[str] = mapped_column(String(255), nullable=False)
    url: Mapped[str] = mapped_column(String(1000), nullable=False)
    category: Mapped[str] = mapped_column(String(40), nullable=False)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)


class Contact(IdentifierMixin, TimestampMixin, Base):
    __tablename__ = "contacts"

    name: Mapped[str] = mapped_column(String(255), nullable=False)
    email: Mapped[str | None] = mapped_column(String(255), nullable=True)
    phone: Mapped[str | None] = mapped_column(String(40), nullable=True)
    linkedin_url: Mapped[str | None] = mapped_column(String(500), nullable=True)
    role: Mapped[str | None] = mapped_column(String(255), nullable=True)
    company: Mapped[str | None] = mapped_column(String(255), nullable=True)
    notes: Mapped[str | None] = mapped_column(Text, nullable=True)
    is_reference: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)


class RecruiterCall(IdentifierMixin, TimestampMixin, Base):
    __tablename__ = "recruiter_calls"

    company_name: Mapped[str] = mapped_column(String(255), nullable=False)
    recruiter_name: Mapped[str | None] = mapped_column(String(255), nullable=True)
    call_date: Mapped[date] = mapped_column(Date, nullable=False, index=True)
    call_time: Mapped[str] = mapped_column(String(8), nullable=False)
    follow_up_happened: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)
    follow_up_date: Mapped[date | None] = mapped_column(Date, nullable=True)
    follow_up_notes: Mapped[str | None] = mapped_column(Text, nullable=True)
    discussion_notes: Mapped[str] = mapped_column(Text, default="", nullable=False)
    recruiter_phone: Mapped[str | None] = mapped_column(String(40), nullable=True)
    recruiter_email: Mapped[str | None] = mapped_column(String(255), nullable=True)
    position: Mapped[str | None] = mapped_column(String(255), nullable=True)
    status: Mapped[str] = mapped_column(String(40), default="pending", nullable=False)


class LearningItem(IdentifierMixin, TimestampMixin, Base):
    __tablename__ = "learning_items"

    title: Mapped[str] = mapped_column(String(255), nullable=False)
    category: Mapped[str] = mapped_column(String(40), nullable=False)
    status: Mapped[str] = mapped_column(String(40), default="not-started", nullable=False)
    notes: Mapped[str | None] = mapped_column(Text, nullable=True)
    started_date: Mapped[date | None] = mapped_column(Date, nullable=True)
    completed_date: Mapped[date | None] = mapped_column(Date, nullable=True)


class Note(IdentifierMixin, TimestampMixin, Base):
    __tablename__ = "notes"

    title: Mapped[str] = mapped_column(String(255), nullable=False)
    content: Mapped[str] = mapped_column(Text, default="", nullable=False)


class Todo(IdentifierMixin, TimestampMixin, Base):
    __tablename__ = "todos"

    title: Mapped[str] = mapped_column(String(255), nullable=False)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    completed: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)
    priority: Mapped[str] = mapped_column(String(20), default="medium", nullable=False)
    due_date: Mapped[date | None] = mapped_column(Date, nullable=True)


class Project(IdentifierMixin, TimestampMixin, Base):
    __tablename__ = "projects"

    name: Mapped[str] = mapped_column(String(255), nullable=False)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    problem_statement: Mapped[str | None] = mapped_column(Text, nullable=True)
    github_link: Mapped[str] = mapped_column(String(500), nullable=False)
    files: Mapped[list[dict[str, Any]]] = mapped_column(JSON, default=list, nullable=False)
    metadata_json: Mapped[dict[str, Any]] = mapped_column(JSON, default=dict, nullable=False)


class InterviewQuestion(IdentifierMixin, TimestampMixin, Base):
    __tablename__ = "interview_questions"

    question: Mapped[str] = mapped_column(Text, nullable=False)
    answer: Mapped[str | None] = mapped_column(Text, nullable=True)
    category: Mapped[str] = mapped_column(String(20), default="technical", nullable=False)
    technology: Mapped[str] = mapped_column(String(40), default="java", nullable=False)
    difficulty: Mapped[str] = mapped_column(String(20), default="medium", nullable=False)
    tags: Mapped[str | None] = mapped_column(String(500), nullable=True)
    notes: Mapped[str | None] = mapped_column(Text, nullable=True)
    times_practiced: Mapped[int] = mapped_column(Integer, default=0, nullable=False)
    last_practiced_date: Mapped[date | None] = mapped_column(Date, nullable=True)
