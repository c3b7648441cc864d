"""Ratings Spine CLI."""

import json
from pathlib import Path
from typing import Optional

import typer

from ratings_spine.core.errors import InputError, RatingsError
from ratings_spine.core.settings import get_settings

app = typer.Typer(
    name="ratings",
    help="Stock analyst ratings service CLI",
    no_args_is_help=True,
)

db_app = typer.Typer(help="Database management commands")
app.add_typer(db_app, name="db")


@app.command("serve")
def serve(
    host: Optional[str] = typer.Option(None, help="Bind address (defaults to settings)"),
    port: Optional[int] = typer.Option(None, help="Bind port (defaults to settings)"),
    reload: bool = typer.Option(False, help="Reload on code changes"),
):
    """Run the HTTP API."""
    import uvicorn

    settings = get_settings()
    uvicorn.run(
        "ratings_spine.api.main:create_app",
        factory=True,
        host=host or settings.api_host,
        port=port or settings.api_port,
        reload=reload or settings.api_reload,
    )


@db_app.command("migrate")
def db_migrate(
    migrations_path: str = typer.Option("migrations", help="Path to migrations directory"),
):
    """Apply pending SQL migrations."""
    import psycopg

    from ratings_spine.core.database import apply_migrations, get_connection

    migrations_dir = Path(migrations_path)
    if not migrations_dir.exists():
        typer.echo(f"Migrations directory not found: {migrations_dir}", err=True)
        raise typer.Exit(1)

    try:
        with get_connection() as conn:
            applied = apply_migrations(conn, migrations_dir)
    except psycopg.Error as e:
        typer.echo(f"Migration failed: {e}", err=True)
        raise typer.Exit(1)

    for name in applied:
        typer.echo(f"  Applied: {name}")
    typer.echo("Migrations complete" if applied else "Nothing to apply")


def _load_items(path: Path) -> list:
    try:
        items = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError) as e:
        typer.echo(f"Cannot read {path}: {e}", err=True)
        raise typer.Exit(1)

    if not isinstance(items, list):
        typer.echo(f"{path} must contain a JSON array of ratings", err=True)
        raise typer.Exit(1)
    return items


@app.command("check")
def check(file: Path = typer.Argument(..., help="JSON array of raw ratings")):
    """Validate a bulk file without storing anything."""
    from ratings_spine.ingest import build_ratings

    items = _load_items(file)
    try:
        ratings = build_ratings(items)
    except InputError as e:
        typer.echo(f"Invalid: {e.message}", err=True)
        raise typer.Exit(1)

    typer.echo(f"OK: {len(ratings)} ratings valid")


@app.command("ingest")
def ingest(file: Path = typer.Argument(..., help="JSON array of raw ratings")):
    """Bulk-load a file; nothing is stored unless every item is valid."""
    from ratings_spine.api.main import build_store
    from ratings_spine.core.database import close_pool
    from ratings_spine.observability.logging import configure_logging
    from ratings_spine.services.ratings import RatingService

    settings = get_settings()
    configure_logging(settings)

    items = _load_items(file)
    service = RatingService(build_store(settings), default_page_size=settings.default_page_size)
    try:
        stored = service.create_batch(items)
    except RatingsError as e:
        typer.echo(f"Ingest failed: {e.message}", err=True)
        raise typer.Exit(1)
    finally:
        close_pool()

    typer.echo(f"Stored {len(stored)} ratings")


if __name__ == "__main__":
    app()
