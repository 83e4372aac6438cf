from __future__ import annotations

from fastapi import Request

from jobhunt.db.repositories import DataAccess


def get_data_access(request: Request) -> DataAccess:
    return request.app.state.data_access
