"""Task tracker CLI entry point"""

from pathlib import Path

import typer
import uvicorn
from alembic import command
from alembic.config import Config
from rich.console import Console

from tasktracker import __version__
from tasktracker.api.config import get_database_settings, get_server_settings

app = typer.Typer(name="tasktracker", help="Task tracker REST API")
console = Console()

MIGRATIONS_DIR = Path(__file__).resolve().parents[1] / "migrations"


def alembic_config(database_url: str) -> Config:
    """Alembic configuration pointing at the bundled migrations."""
    config = Config()
    config.set_main_option("script_location", str(MIGRATIONS_DIR))
    config.set_main_option("sqlalchemy.url", database_url)
    return config


@app.command()
def serve(
    host: str | None = typer.Option(None, help="Bind address (default: HOST)"),
    port: int | None = typer.Option(None, help="Listening port (default: PORT)"),
    reload: bool = typer.Option(False, help="Reload on code changes"),
) -> None:
    """Run the API server"""
    settings = get_server_settings()
    host = host or settings.host
    port = port or settings.port

    console.print(f"API listening on {host}:{port}", style="bold green")
    uvicorn.run(
        "tasktracker.api.main:app",
        host=host,
        port=port,
        reload=reload,
        log_config=None,  # Use structlog instead
    )


@app.command()
def migrate(
    revision: str = typer.Option("head", help="Target revision"),
) -> None:
    """Apply database migrations"""
    url = get_database_settings().url
    command.upgrade(alembic_config(url), revision)
    console.print(f"Database upgraded to {revision}", style="green")


@app.command()
def version() -> None:
    """Print the package version"""
    console.print(__version__)


if __name__ == "__main__":
    app()
