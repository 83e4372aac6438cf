"""Change sets for the one-click actions on list views."""

from __future__ import annotations

from collections.abc import Mapping
from datetime import date
from typing import Any

from jobhunt.types import (
    InterviewQuestion,
    InterviewQuestionUpdate,
    LearningItem,
    LearningItemCreate,
    LearningItemUpdate,
    LearningStatus,
    Project,
    ProjectUpdate,
    RecruiterCallUpdate,
    Todo,
    TodoUpdate,
)


def follow_up_changes(happened: bool) -> RecruiterCallUpdate:
    return RecruiterCallUpdate(
        follow_up_happened=happened,
        status="followed-up" if happened else "pending",
    )


def learning_status_changes(
    item: LearningItem,
    new_status: LearningStatus,
    today: date | None = None,
) -> LearningItemUpdate:
    today = today or date.today()
    values: dict[str, object] = {"status": new_status}
    if new_status == "in-progress" and not item.started_date:
        values["started_date"] = today
    if new_status == "completed" and not item.completed_date:
        values["completed_date"] = today
    return LearningItemUpdate.model_validate(values)


def new_learning_item(
    values: LearningItemCreate | Mapping[str, Any],
    today: date | None = None,
) -> LearningItemCreate:
    item = values if isinstance(values, LearningItemCreate) else LearningItemCreate.model_validate(values)
    if item.status in ("in-progress", "completed") and not item.started_date:
        return item.model_copy(update={"started_date": today or date.today()})
    return item


def practice_changes(question: InterviewQuestion, today: date | None = None) -> InterviewQuestionUpdate:
    return InterviewQuestionUpdate(
        times_practiced=(question.times_practiced or 0) + 1,
        last_practiced_date=today or date.today(),
    )


def toggle_todo_changes(todo: Todo) -> TodoUpdate:
    return TodoUpdate(completed=not todo.completed)


def remove_project_file_changes(project: Project, index: int) -> ProjectUpdate:
    if index < 0 or index >= len(project.files):
        raise IndexError(f"project {project.id} has no file at index {index}")
    files = [item for position, item in enumerate(project.files) if position != index]
    return ProjectUpdate(files=files)
