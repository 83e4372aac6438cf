from __future__ import annotations

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from jobhunt.api.routes import router as api_router
from jobhunt.config import get_settings
from jobhunt.db.init import init_database
from jobhunt.db.repositories import DataAccess
from jobhunt.db.session import SessionLocal
from jobhunt.db.store import SqlStore


def create_app(data_access: DataAccess | None = None) -> FastAPI:
    settings = get_settings()

    app = FastAPI(title=settings.app_name)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origin_list or ["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.state.data_access = data_access or DataAccess(SqlStore(SessionLocal))

    @app.on_event("startup")
    def _startup() -> None:
        init_database()

    @app.get("/health")
    def health() -> JSONResponse:
        return JSONResponse({"status": "ok"})

    app.include_router(api_router)
    return app
