from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Body, Depends, HTTPException
from pydantic import ValidationError
from sqlalchemy.exc import SQLAlchemyError

from jobhunt.api.deps import get_data_access
from jobhunt.api.schemas import COLLECTIONS, DeleteResponse, StatsResponse
from jobhunt.core.views import dashboard_stats
from jobhunt.db.repositories import DataAccess
from jobhunt.db.transforms import TRANSFORMS
from jobhunt.errors import JobHuntError, RecordNotFoundError

router = APIRouter(prefix="/api", tags=["api"])


def _validation_detail(exc: ValidationError) -> list[dict[str, Any]]:
    return [
        {"loc": list(error["loc"]), "msg": error["msg"], "type": error["type"]}
        for error in exc.errors()
    ]


@router.get("/stats", response_model=StatsResponse)
def get_stats(access: DataAccess = Depends(get_data_access)) -> StatsResponse:
    return StatsResponse(**dashboard_stats(access))


def register_collection(slug: str, kind: str) -> None:
    record_model = TRANSFORMS[kind].record
    label = kind.replace("_", " ")

    @router.get(f"/{slug}", response_model=list[record_model], name=f"list_{kind}")
    def list_records(access: DataAccess = Depends(get_data_access)) -> Any:
        return access.repository(kind).get_all()

    @router.post(f"/{slug}", response_model=record_model, name=f"create_{kind}")
    def create_record(
        payload: dict[str, Any] = Body(...),
        access: DataAccess = Depends(get_data_access),
    ) -> Any:
        try:
            return access.repository(kind).create(payload)
        except ValidationError as exc:
            raise HTTPException(status_code=422, detail=_validation_detail(exc)) from exc
        except (JobHuntError, SQLAlchemyError) as exc:
            raise HTTPException(status_code=500, detail=f"Failed to save {label}") from exc

    @router.patch(f"/{slug}/{{record_id}}", response_model=record_model, name=f"update_{kind}")
    def update_record(
        record_id: str,
        payload: dict[str, Any] = Body(...),
        access: DataAccess = Depends(get_data_access),
    ) -> Any:
        try:
            return access.repository(kind).update(record_id, payload)
        except ValidationError as exc:
            raise HTTPException(status_code=422, detail=_validation_detail(exc)) from exc
        except RecordNotFoundError as exc:
            raise HTTPException(status_code=404, detail=str(exc)) from exc
        except (JobHuntError, SQLAlchemyError) as exc:
            raise HTTPException(status_code=500, detail=f"Failed to update {label}") from exc

    @router.delete(f"/{slug}/{{record_id}}", response_model=DeleteResponse, name=f"delete_{kind}")
    def delete_record(record_id: str, access: DataAccess = Depends(get_data_access)) -> Any:
        try:
            access.repository(kind).delete(record_id)
        except (JobHuntError, SQLAlchemyError) as exc:
            raise HTTPException(status_code=500, detail=f"Failed to delete {label}") from exc
        return DeleteResponse(id=record_id)


for _slug, _kind in COLLECTIONS.items():
    register_collection(_slug, _kind)
