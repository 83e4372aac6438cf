from __future__ import annotations

from pydantic import BaseModel

# URL slug -> entity kind
COLLECTIONS: dict[str, str] = {
    "resumes": "resumes",
    "applications": "job_applications",
    "documents": "documents",
    "links": "links",
    "contacts": "contacts",
    "calls": "recruiter_calls",
    "learning": "learning_items",
    "notes": "notes",
    "todos": "todos",
    "projects": "projects",
    "interview-questions": "interview_questions",
}


class DeleteResponse(BaseModel):
    ok: bool = True
    id: str


class StatsResponse(BaseModel):
    resumes: int
    applications: int
    documents: int
    links: int
    contacts: int
    calls: int
