"""ContactDesk CLI - run the API server."""

from __future__ import annotations

import os

import typer
from rich.console import Console

app = typer.Typer(
    name="contactdesk",
    help="ContactDesk - contact and activity tracking backend",
    no_args_is_help=True,
)
console = Console()


@app.callback()
def main() -> None:
    """ContactDesk command line."""


@app.command("serve")
def serve(
    port: int = typer.Option(8020, "--port", "-p", help="Port to run on"),
    host: str = typer.Option("127.0.0.1", "--host", help="Host to bind to"),
    storage: str | None = typer.Option(
        None, "--storage", "-s", help="Storage backend: memory or database"
    ),
    reload: bool = typer.Option(False, "--reload", help="Reload on code changes"),
):
    """Launch the ContactDesk API."""
    import uvicorn

    if storage:
        if storage not in {"memory", "database"}:
            console.print(f"[red]Unknown storage backend: {storage}[/red]")
            raise typer.Exit(1)
        os.environ["CONTACTDESK_STORAGE_BACKEND"] = storage

    console.print(f"[bold cyan]Starting ContactDesk at http://{host}:{port}[/bold cyan]")
    uvicorn.run("contactdesk.main:app", host=host, port=port, reload=reload)


if __name__ == "__main__":
    app()
