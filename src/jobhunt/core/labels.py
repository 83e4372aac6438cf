from __future__ import annotations

from datetime import date, datetime

RESUME_TYPE_LABELS = {
    "java-angular-aws": "Java + Angular + AWS",
    "java-react-aws": "Java + React + AWS",
    "pure-frontend": "Pure Frontend Developer",
    "qa-automation": "QA / Automation Testing",
    "dotnet-react-aws": ".NET + React + AWS",
    "dotnet-angular-aws": ".NET + Angular + AWS",
    "ai-ml": "AI + ML",
}

TECHNOLOGY_LABELS = {
    "java": "Java",
    "react": "React",
    "angular": "Angular",
    "aws": "AWS",
    "spring-boot": "Spring Boot",
    "python": "Python",
    "javascript": "JavaScript",
    "typescript": "TypeScript",
    "nodejs": "Node.js",
    "sql": "SQL",
    "system-design": "System Design",
    "data-structures": "Data Structures",
    "algorithms": "Algorithms",
    "leetcode": "LeetCode",
    "behavioral": "Behavioral",
    "html-css": "HTML/CSS",
    "docker": "Docker",
    "kubernetes": "Kubernetes",
    "microservices": "Microservices",
    "other": "Other",
}


def resume_type_label(value: str) -> str:
    return RESUME_TYPE_LABELS.get(value, value)


def technology_label(value: str) -> str:
    return TECHNOLOGY_LABELS.get(value, value)


def _coerce(value: str | date | datetime) -> date | datetime:
    if isinstance(value, str):
        return datetime.fromisoformat(value)
    return value


def format_date(value: str | date | datetime) -> str:
    """Render as e.g. ``Jan 5, 2025``."""
    moment = _coerce(value)
    return f"{moment:%b} {moment.day}, {moment.year}"


def format_datetime(value: str | datetime) -> str:
    moment = _coerce(value)
    if not isinstance(moment, datetime):
        moment = datetime.combine(moment, datetime.min.time())
    return f"{format_date(moment)}, {moment:%I:%M %p}"
