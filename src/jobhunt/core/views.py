from __future__ import annotations

from collections import defaultdict
from collections.abc import Iterable, Sequence
from datetime import date, datetime, time
from typing import Literal, Protocol, TypeVar

from jobhunt.db.repositories import DataAccess
from jobhunt.types import (
    Contact,
    InterviewQuestion,
    JobApplication,
    LearningItem,
    Link,
    RecruiterCall,
    Todo,
)

TodoFilter = Literal["all", "active", "completed"]
ReferenceFilter = Literal["all", "references", "contacts"]

PRIORITY_RANK = {"high": 3, "medium": 2, "low": 1}


class _Categorised(Protocol):
    category: str


CategorisedT = TypeVar("CategorisedT", bound=_Categorised)


def filter_applications(applications: Iterable[JobApplication], status: str = "all") -> list[JobApplication]:
    if status == "all":
        return list(applications)
    return [app for app in applications if app.status == status]


def recent_applications(applications: Iterable[JobApplication], limit: int = 5) -> list[JobApplication]:
    return sorted(applications, key=lambda app: app.applied_date, reverse=True)[:limit]


def filter_todos(todos: Iterable[Todo], status: TodoFilter = "all") -> list[Todo]:
    if status == "completed":
        return [todo for todo in todos if todo.completed]
    if status == "active":
        return [todo for todo in todos if not todo.completed]
    return list(todos)


def sort_todos(todos: Iterable[Todo]) -> list[Todo]:
    """Open items first, then by priority, due date, and newest creation."""
    # Stable sorts applied from the least to the most significant key.
    ordered = sorted(todos, key=lambda todo: todo.created_at, reverse=True)
    ordered.sort(key=lambda todo: (todo.due_date is None, todo.due_date or date.min))
    ordered.sort(key=lambda todo: PRIORITY_RANK.get(todo.priority, 0), reverse=True)
    ordered.sort(key=lambda todo: todo.completed)
    return ordered


def _call_moment(call: RecruiterCall) -> datetime:
    try:
        at = time.fromisoformat(call.call_time)
    except ValueError:
        at = time.min
    return datetime.combine(call.call_date, at)


def sort_calls(calls: Iterable[RecruiterCall]) -> list[RecruiterCall]:
    return sorted(calls, key=_call_moment, reverse=True)


def recent_calls(calls: Iterable[RecruiterCall], limit: int = 5) -> list[RecruiterCall]:
    return sort_calls(calls)[:limit]


def filter_learning_items(
    items: Iterable[LearningItem],
    category: str = "all",
    status: str = "all",
) -> list[LearningItem]:
    return [
        item
        for item in items
        if (category == "all" or item.category == category)
        and (status == "all" or item.status == status)
    ]


def filter_links(links: Iterable[Link], category: str = "all") -> list[Link]:
    if category == "all":
        return list(links)
    return [link for link in links if link.category == category]


def group_by_category(items: Iterable[CategorisedT]) -> dict[str, list[CategorisedT]]:
    grouped: dict[str, list[CategorisedT]] = defaultdict(list)
    for item in items:
        grouped[item.category].append(item)
    return dict(grouped)


def split_contacts(contacts: Iterable[Contact]) -> tuple[list[Contact], list[Contact]]:
    references: list[Contact] = []
    regular: list[Contact] = []
    for contact in contacts:
        (references if contact.is_reference else regular).append(contact)
    return references, regular


def filter_contacts(contacts: Iterable[Contact], reference: ReferenceFilter = "all") -> list[Contact]:
    references, regular = split_contacts(contacts)
    if reference == "references":
        return references
    if reference == "contacts":
        return regular
    return references + regular


def filter_interview_questions(
    questions: Sequence[InterviewQuestion],
    category: str = "all",
    technology: str = "all",
    difficulty: str = "all",
) -> list[InterviewQuestion]:
    return [
        question
        for question in questions
        if (category == "all" or question.category == category)
        and (technology == "all" or question.technology == technology)
        and (difficulty == "all" or question.difficulty == difficulty)
    ]


def dashboard_stats(access: DataAccess) -> dict[str, int]:
    return {
        "resumes": len(access.resumes.get_all()),
        "applications": len(access.applications.get_all()),
        "documents": len(access.documents.get_all()),
        "links": len(access.links.get_all()),
        "contacts": len(access.contacts.get_all()),
        "calls": len(access.calls.get_all()),
    }
