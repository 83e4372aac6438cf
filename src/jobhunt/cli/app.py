from __future__ import annotations

import json

import typer
import uvicorn

from jobhunt.api.app import create_app
from jobhunt.api.schemas import COLLECTIONS
from jobhunt.config import get_settings
from jobhunt.core.views import dashboard_stats
from jobhunt.db.init import init_database
from jobhunt.db.repositories import DataAccess
from jobhunt.db.session import SessionLocal
from jobhunt.db.store import SqlStore
from jobhunt.logging_config import configure_logging

app = typer.Typer(help="JobHunt CLI")

_INITIALIZED = False


def ensure_initialized() -> None:
    global _INITIALIZED
    if _INITIALIZED:
        return
    init_database()
    _INITIALIZED = True


def _data_access() -> DataAccess:
    configure_logging()
    ensure_initialized()
    return DataAccess(SqlStore(SessionLocal))


def _kind_for(slug: str) -> str:
    if slug not in COLLECTIONS:
        raise typer.BadParameter(f"unknown collection '{slug}', expected one of {sorted(COLLECTIONS)}")
    return COLLECTIONS[slug]


@app.command("init")
def init_cmd() -> None:
    """Create the data directory and database tables."""
    configure_logging()
    result = init_database()
    typer.echo(json.dumps({"ok": True, **result}, indent=2))


@app.command("serve")
def serve(
    host: str = typer.Option("", "--host"),
    port: int = typer.Option(0, "--port"),
) -> None:
    """Run the HTTP API."""
    configure_logging()
    settings = get_settings()
    uvicorn.run(create_app(), host=host or settings.app_host, port=port or settings.app_port)


@app.command("stats")
def stats() -> None:
    """Print dashboard counts."""
    access = _data_access()
    typer.echo(json.dumps(dashboard_stats(access), indent=2))


@app.command("list")
def list_cmd(collection: str = typer.Argument(..., help="Collection slug, e.g. todos")) -> None:
    kind = _kind_for(collection)
    access = _data_access()
    records = access.repository(kind).get_all()
    typer.echo(json.dumps([record.model_dump(mode="json", by_alias=True) for record in records], indent=2))


@app.command("delete")
def delete_cmd(
    collection: str = typer.Argument(...),
    record_id: str = typer.Argument(...),
) -> None:
    kind = _kind_for(collection)
    access = _data_access()
    access.repository(kind).delete(record_id)
    typer.echo(json.dumps({"ok": True, "id": record_id}, indent=2))


def main() -> None:
    app()
