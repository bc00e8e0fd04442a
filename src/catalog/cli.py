"""Command-line interface for running and initializing the catalog service."""

import typer
from rich.console import Console

console = Console()

app = typer.Typer(
    name="catalog",
    help="📚 Library Catalog CLI - Manage the catalog database and API server",
    no_args_is_help=True,
    rich_markup_mode="rich",
)


@app.command("init-db")
def init_db() -> None:
    """Create all catalog tables in the configured database."""
    from src.catalog.core.services import DbSessionService
    from src.catalog.runtime.context import get_config

    config = get_config()
    console.print(f"[blue]Initializing database for {config.app.environment}...[/blue]")
    database_service = DbSessionService()
    try:
        database_service.create_all()
    finally:
        database_service.dispose()
    console.print("[green]✅ Database initialized[/green]")


@app.command()
def serve(
    host: str | None = typer.Option(None, "--host", help="Bind address"),
    port: int | None = typer.Option(None, "--port", help="Bind port"),
    reload: bool = typer.Option(False, "--reload", help="Reload on code changes"),
) -> None:
    """Run the HTTP API with uvicorn."""
    import uvicorn

    from src.catalog.runtime.context import get_config

    config = get_config()
    bind_host = host or config.app.host
    bind_port = port or config.app.port
    console.print(f"[blue]Serving catalog API on http://{bind_host}:{bind_port}[/blue]")
    uvicorn.run(
        "src.catalog.api.http.app:app",
        host=bind_host,
        port=bind_port,
        reload=reload,
        access_log=False,  # We handle access logging in middleware
    )


def main() -> None:
    """Main entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
