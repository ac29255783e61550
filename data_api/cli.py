"""Data API CLI - run the service or talk to a running one."""

import logging
import socket
import sys
from collections.abc import Callable
from typing import Any

import httpx
import typer
import uvicorn
from rich.console import Console
from rich.table import Table

from data_api.core.config import settings
from data_api.core.observability import setup_logging
from data_api.main import create_app
from data_api.models import ServiceInfo
from data_api.services import ApiClientService

app = typer.Typer(help="Data API CLI")
records_app = typer.Typer(help="Record management commands")
app.add_typer(records_app, name="records")

console = Console()
logger = logging.getLogger(__name__)


@app.command("serve")
def serve(
    name: str = typer.Argument(None, help="Service name reported by /info"),
    host: str = typer.Option(settings.host, "--host", help="Bind address"),
    port: int = typer.Option(settings.port, "--port", "-p", help="Listen port"),
    log_level: str = typer.Option(settings.log_level, "--log-level", help="Log level"),
):
    """Start the record service."""
    try:
        service_info = ServiceInfo.create(name or "")
    except ValueError:
        typer.echo("FATAL: Service name not provided.")
        raise typer.Exit(1) from None

    setup_logging(
        log_level,
        settings.log_format,
        service_info.standard_log_fields(socket.gethostname()),
    )
    logger.info(
        "Service started successfully.",
        extra={"mode": "init", "argv": sys.argv},
    )

    api = create_app(service_info=service_info)

    logger.info(f"Listening on port {port}", extra={"mode": "run"})
    uvicorn.run(api, host=host, port=port, log_level=log_level.lower())


def _call(func: Callable[..., Any], *args: Any) -> Any:
    """Run a client call, turning HTTP failures into a clean exit."""
    try:
        with ApiClientService.get_client(settings.api_url) as client:
            return func(*args, client=client)
    except httpx.HTTPStatusError as e:
        try:
            message = e.response.json()["error"]["message"]
        except (ValueError, KeyError, TypeError):
            message = e.response.text
        console.print(f"[red]✗[/red] {e.response.status_code}: {message}")
        raise typer.Exit(1) from e
    except httpx.RequestError as e:
        console.print(f"[red]✗[/red] Could not reach {settings.api_url}: {e}")
        raise typer.Exit(1) from e


@records_app.command("list")
def list_records():
    """List all records."""
    records = _call(ApiClientService.list_records)

    if not records:
        console.print("[yellow]No records found[/yellow]")
        return

    table = Table(title=f"Records ({len(records)})")
    table.add_column("ID", style="cyan", no_wrap=True)
    table.add_column("Message", style="white")

    for record in records:
        table.add_row(record["ID"], record["Message"])

    console.print(table)


@records_app.command("get")
def get_record(record_id: str = typer.Argument(..., help="Record ID")):
    """Show a record."""
    record = _call(ApiClientService.get_record, record_id)

    console.print(f"[bold]Record {record['ID']}[/bold]")
    console.print(f"  Message: {record['Message']}")


@records_app.command("create")
def create_record(
    record_id: str = typer.Argument(..., help="Record ID"),
    message: str = typer.Argument(..., help="Record message"),
):
    """Create a new record."""
    record = _call(ApiClientService.create_record, record_id, message)

    console.print(f"[green]✓[/green] Record created: [bold]{record['ID']}[/bold]")


@records_app.command("update")
def update_record(
    record_id: str = typer.Argument(..., help="Record ID"),
    message: str = typer.Argument(..., help="New message"),
):
    """Replace a record's message."""
    previous = _call(ApiClientService.update_record, record_id, message)

    console.print(f"[green]✓[/green] Record updated: [bold]{record_id}[/bold]")
    console.print(f"  Previous message: [dim]{previous['Message']}[/dim]")


@records_app.command("delete")
def delete_record(record_id: str = typer.Argument(..., help="Record ID")):
    """Delete a record."""
    _call(ApiClientService.delete_record, record_id)

    console.print(f"[green]✓[/green] Record deleted: [bold]{record_id}[/bold]")


if __name__ == "__main__":
    app()
