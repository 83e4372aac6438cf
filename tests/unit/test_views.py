from __future__ import annotations

from datetime import date, datetime

import pytest

from jobhunt.core.actions import (
    follow_up_changes,
    learning_status_changes,
    new_learning_item,
    practice_changes,
    remove_project_file_changes,
    toggle_todo_changes,
)
from jobhunt.core.labels import format_date, format_datetime, resume_type_label, technology_label
from jobhunt.core.views import (
    dashboard_stats,
    filter_applications,
    filter_contacts,
    filter_interview_questions,
    filter_learning_items,
    filter_links,
    filter_todos,
    group_by_category,
    recent_applications,
    recent_calls,
    sort_calls,
    sort_todos,
    split_contacts,
)
from jobhunt.db.repositories import DataAccess
from jobhunt.types import (
    Contact,
    InterviewQuestion,
    JobApplication,
    LearningItem,
    Link,
    Project,
    ProjectFile,
    RecruiterCall,
    Todo,
)

CREATED = datetime(2025, 1, 1, 9, 0)


def _todo(todo_id: str, **fields) -> Todo:
    values = {"title": todo_id, "created_at": CREATED, "updated_at": CREATED}
    values.update(fields)
    return Todo(id=todo_id, **values)


def _application(app_id: str, applied: date, status: str = "applied") -> JobApplication:
    return JobApplication(
        id=app_id,
        company_name="Acme",
        position="Engineer",
        applied_date=applied,
        status=status,
    )


def _call(call_id: str, call_date: date, call_time: str) -> RecruiterCall:
    return RecruiterCall(id=call_id, company_name="Globex", call_date=call_date, call_time=call_time)


def _question(question_id: str, **fields) -> InterviewQuestion:
    return InterviewQuestion(
        id=question_id, question=question_id, created_at=CREATED, updated_at=CREATED, **fields
    )


def test_sort_todos_puts_open_urgent_work_first() -> None:
    todos = [
        _todo("done-high", completed=True, priority="high"),
        _todo("low", priority="low"),
        _todo("high-no-due", priority="high"),
        _todo("high-late", priority="high", due_date=date(2025, 3, 1)),
        _todo("high-soon", priority="high", due_date=date(2025, 2, 1)),
        _todo("medium-old", created_at=datetime(2024, 12, 1)),
        _todo("medium-new", created_at=datetime(2025, 1, 2)),
    ]

    ordered = [todo.id for todo in sort_todos(todos)]

    assert ordered == [
        "high-soon",
        "high-late",
        "high-no-due",
        "medium-new",
        "medium-old",
        "low",
        "done-high",
    ]


def test_filter_todos_by_completion() -> None:
    todos = [_todo("a"), _todo("b", completed=True)]
    assert [todo.id for todo in filter_todos(todos, "active")] == ["a"]
    assert [todo.id for todo in filter_todos(todos, "completed")] == ["b"]
    assert len(filter_todos(todos)) == 2


def test_application_filters_and_recent_slice() -> None:
    applications = [
        _application("old", date(2025, 1, 1)),
        _application("offer", date(2025, 3, 1), status="offer"),
        _application("mid", date(2025, 2, 1)),
    ]

    assert [app.id for app in filter_applications(applications, "offer")] == ["offer"]
    assert len(filter_applications(applications)) == 3
    assert [app.id for app in recent_applications(applications, limit=2)] == ["offer", "mid"]


def test_calls_sort_by_date_then_time_newest_first() -> None:
    calls = [
        _call("morning", date(2025, 2, 3), "09:15"),
        _call("earlier-day", date(2025, 2, 1), "17:00"),
        _call("afternoon", date(2025, 2, 3), "14:30"),
        _call("unparsed", date(2025, 2, 3), "sometime"),
    ]

    assert [call.id for call in sort_calls(calls)] == ["afternoon", "morning", "unparsed", "earlier-day"]
    assert [call.id for call in recent_calls(calls, limit=1)] == ["afternoon"]


def test_learning_filters_and_grouping() -> None:
    items = [
        LearningItem(id="1", title="Streams", category="java", status="completed"),
        LearningItem(id="2", title="Hooks", category="react", status="in-progress"),
        LearningItem(id="3", title="Records", category="java", status="in-progress"),
    ]

    assert [item.id for item in filter_learning_items(items, category="java")] == ["1", "3"]
    assert [item.id for item in filter_learning_items(items, status="in-progress")] == ["2", "3"]
    assert [item.id for item in filter_learning_items(items, "java", "in-progress")] == ["3"]

    grouped = group_by_category(items)
    assert set(grouped) == {"java", "react"}
    assert [item.id for item in grouped["java"]] == ["1", "3"]


def test_contacts_split_into_references() -> None:
    contacts = [
        Contact(id="a", name="Ana"),
        Contact(id="b", name="Ben", is_reference=True),
    ]

    references, regular = split_contacts(contacts)
    assert [contact.id for contact in references] == ["b"]
    assert [contact.id for contact in regular] == ["a"]
    assert [contact.id for contact in filter_contacts(contacts, "references")] == ["b"]
    assert [contact.id for contact in filter_contacts(contacts, "contacts")] == ["a"]


def test_interview_question_filters_combine() -> None:
    questions = [
        _question("q1", technology="python", difficulty="easy"),
        _question("q2", technology="python", difficulty="hard"),
        _question("q3", category="behavioral", technology="behavioral"),
    ]

    assert [q.id for q in filter_interview_questions(questions, technology="python")] == ["q1", "q2"]
    assert [q.id for q in filter_interview_questions(questions, difficulty="hard")] == ["q2"]
    assert [q.id for q in filter_interview_questions(questions, category="behavioral")] == ["q3"]


def test_dashboard_stats_counts_collections(fake_store) -> None:
    access = DataAccess(fake_store)
    access.links.create({"title": "Board", "url": "https://jobs.test"})
    access.contacts.create({"name": "Sam"})
    access.contacts.create({"name": "Kim", "isReference": True})

    stats = dashboard_stats(access)

    assert stats == {
        "resumes": 0,
        "applications": 0,
        "documents": 0,
        "links": 1,
        "contacts": 2,
        "calls": 0,
    }


def test_dashboard_stats_survive_an_unreachable_store(unreachable_store) -> None:
    stats = dashboard_stats(DataAccess(unreachable_store))
    assert set(stats.values()) == {0}


def test_labels_fall_back_to_raw_value() -> None:
    assert resume_type_label("dotnet-react-aws") == ".NET + React + AWS"
    assert resume_type_label("cobol") == "cobol"
    assert technology_label("nodejs") == "Node.js"
    assert technology_label("elixir") == "elixir"


def test_date_formatting() -> None:
    assert format_date(date(2025, 1, 5)) == "Jan 5, 2025"
    assert format_date("2025-11-20") == "Nov 20, 2025"
    assert format_datetime(datetime(2025, 1, 5, 14, 30)) == "Jan 5, 2025, 02:30 PM"


@pytest.mark.parametrize("happened,status", [(True, "followed-up"), (False, "pending")])
def test_follow_up_changes_carry_matching_status(happened: bool, status: str) -> None:
    changes = follow_up_changes(happened).changes()
    assert changes == {"follow_up_happened": happened, "status": status}


def test_learning_status_stamps_dates_once() -> None:
    today = date(2025, 4, 1)
    fresh = LearningItem(id="1", title="Kafka", category="other")
    started = LearningItem(id="2", title="Lambda", category="aws", started_date=date(2025, 1, 1))

    assert learning_status_changes(fresh, "in-progress", today).changes() == {
        "status": "in-progress",
        "started_date": today,
    }
    assert learning_status_changes(started, "in-progress", today).changes() == {"status": "in-progress"}
    assert learning_status_changes(started, "completed", today).changes() == {
        "status": "completed",
        "completed_date": today,
    }


def test_practice_changes_increment_counter() -> None:
    today = date(2025, 4, 2)
    changes = practice_changes(_question("q1", times_practiced=2), today).changes()
    assert changes == {"times_practiced": 3, "last_practiced_date": today}


def test_toggle_todo_changes() -> None:
    assert toggle_todo_changes(_todo("a")).changes() == {"completed": True}
    assert toggle_todo_changes(_todo("b", completed=True)).changes() == {"completed": False}


def test_remove_project_file_changes() -> None:
    project = Project(
        id="p1",
        name="Tracker",
        github_link="https://github.com/example/tracker",
        files=[
            ProjectFile(name="a.md", url="data:,a"),
            ProjectFile(name="b.md", url="data:,b"),
        ],
    )

    changes = remove_project_file_changes(project, 0)
    assert [item.name for item in changes.files] == ["b.md"]

    with pytest.raises(IndexError):
        remove_project_file_changes(project, 2)


def test_filter_links_by_category() -> None:
    links = [
        Link(id="1", title="Board", url="https://jobs.test", category="job-board"),
        Link(id="2", title="Repo", url="https://github.com/example", category="github"),
    ]
    assert [link.id for link in filter_links(links, "github")] == ["2"]
    assert len(filter_links(links)) == 2


@pytest.mark.parametrize("status", ["in-progress", "completed"])
def test_new_learning_item_started_today_when_already_underway(status: str) -> None:
    today = date(2025, 4, 3)
    item = new_learning_item({"title": "Kafka", "status": status}, today)
    assert item.started_date == today


def test_new_learning_item_not_started_has_no_start_date(fake_store) -> None:
    item = new_learning_item({"title": "Kafka"}, date(2025, 4, 3))
    assert item.started_date is None

    stored = DataAccess(fake_store).learning_items.create(
        new_learning_item({"title": "Lambda", "status": "in-progress"}, date(2025, 4, 3))
    )
    assert stored.started_date == date(2025, 4, 3)
