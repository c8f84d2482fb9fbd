"""BookStack CLI - Command-line interface for the BookStack API.

This module provides a typer-based CLI over :class:`BookStackClient` for
listing, reading, creating and deleting books and for inspecting users.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

import typer
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from bookstack_api.client import BookStackClient
from bookstack_api.common.config import AppConfig
from bookstack_api.common.errors import APIError, ConfigurationError, ValidationError
from bookstack_api.common.logging import setup_logging
from bookstack_api.options import set_logger

app = typer.Typer(
    name="bookstack",
    help="BookStack API CLI - Manage documentation programmatically",
    no_args_is_help=True,
)

books_app = typer.Typer(help="Manage books")
users_app = typer.Typer(help="Manage users")

app.add_typer(books_app, name="books")
app.add_typer(users_app, name="users")

console = Console()

_state: dict[str, Any] = {"verbose": False}


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable verbose output (DEBUG level)"),
):
    """BookStack API CLI - Manage documentation programmatically."""
    _state["verbose"] = verbose


def get_client() -> BookStackClient:
    """Get configured BookStack client."""
    try:
        config = AppConfig()
        config.require_valid("bookstack")
    except ConfigurationError as err:
        console.print(f"[red]Configuration Error:[/red] {err}")
        raise typer.Exit(1) from err

    level = logging.DEBUG if _state["verbose"] else config.log_level
    logger = setup_logging("bookstack_api", level=level)
    return BookStackClient.from_config(config.bookstack, set_logger(logger))


BOOK_FIELDS = ["id", "name", "slug", "description", "owned_by", "tags", "contents", "updated_at"]
USER_FIELDS = ["id", "name", "email", "roles", "last_activity_at", "profile_url"]


def _cell(value: Any) -> str:
    """Render a field of a model dict for display."""
    if isinstance(value, dict):
        return str(value.get("name", value.get("id", "")))
    if isinstance(value, list):
        return f"{len(value)} items"
    if value is None or value == "":
        return "-"
    return str(value)


def print_item(item: dict[str, Any], fields: list[str], title: str) -> None:
    """Print selected fields of one entity as a panel."""
    content = [f"[bold]{field}:[/bold] {escape(_cell(item.get(field)))}" for field in fields]
    console.print(Panel("\n".join(content), title=f"[cyan]{escape(title)}[/cyan]", border_style="cyan"))


def print_list(items: list[dict[str, Any]], columns: list[str], title: str) -> None:
    """Print a list of entities as a table."""
    table = Table(title=title, show_header=True, header_style="bold cyan")

    for col in columns:
        table.add_column(col.replace("_", " ").title(), style="white")

    for item in items:
        table.add_row(*[escape(_cell(item.get(col))[:50]) for col in columns])

    console.print(table)
    console.print(f"\n[dim]Total: {len(items)} items[/dim]")


def print_json(data: Any) -> None:
    console.print_json(json.dumps(data))


def print_dry_run(action: str, data: dict[str, Any]) -> None:
    """Print dry-run preview."""
    console.print(Panel.fit("[bold cyan]DRY RUN MODE[/bold cyan]", border_style="cyan"))
    console.print(f"[green]Action:[/green] {action}")
    print_json(data)
    console.print("[yellow]To execute, run again with --no-dry-run[/yellow]")


def print_success(action: str, item_id: int, name: str | None = None) -> None:
    """Print success message for a created or deleted entity."""
    console.print(Panel.fit(f"[bold green]{action}[/bold green]", border_style="green"))
    console.print(f"ID: {item_id}")
    if name:
        console.print(f"Name: {escape(name)}")


def fail(err: Exception) -> typer.Exit:
    console.print(f"[red]Error:[/red] {escape(str(err))}")
    return typer.Exit(1)


# =============================================================================
# Books Commands
# =============================================================================


@books_app.command("list")
def books_list(
    sort: str | None = typer.Option(None, "--sort", "-s", help="Sort field, prefix with - for descending"),
    output_json: bool = typer.Option(False, "--json", "-j", help="Output as JSON"),
):
    """List books."""
    with get_client() as client:
        try:
            books = [book.to_dict() for book in client.books.list_all(sort=sort)]
        except APIError as err:
            raise fail(err) from err

    if output_json:
        print_json(books)
    else:
        print_list(books, ["id", "name", "slug", "updated_at"], "Books")


@books_app.command("read")
def books_read(
    book_id: int = typer.Argument(..., help="Book ID"),
    output_json: bool = typer.Option(False, "--json", "-j", help="Output as JSON"),
):
    """Read a book's details and contents."""
    with get_client() as client:
        try:
            book = client.books.read(book_id)
        except APIError as err:
            raise fail(err) from err

    if output_json:
        print_json(book.to_dict())
    else:
        print_item(book.to_dict(), BOOK_FIELDS, f"Book: {book.name or book_id}")


@books_app.command("create")
def books_create(
    name: str = typer.Argument(..., help="Book name"),
    description: str | None = typer.Option(None, "--description", "-d", help="Description"),
    image: Path | None = typer.Option(None, "--image", "-i", help="Cover image file"),
    dry_run: bool = typer.Option(True, "--dry-run/--no-dry-run", help="Preview without creating"),
):
    """Create a new book."""
    if dry_run:
        data = {"name": name, "description": description, "image": str(image) if image else None}
        print_dry_run("Create Book", {k: v for k, v in data.items() if v is not None})
        return

    with get_client() as client:
        try:
            book = client.books.create(name=name, description=description, image=image)
        except (APIError, ValidationError) as err:
            raise fail(err) from err

    print_success("Book Created", book.id, book.name)


@books_app.command("delete")
def books_delete(
    book_id: int = typer.Argument(..., help="Book ID"),
    dry_run: bool = typer.Option(True, "--dry-run/--no-dry-run", help="Preview without deleting"),
):
    """Delete a book."""
    if dry_run:
        print_dry_run("Delete Book", {"book_id": book_id})
        return

    with get_client() as client:
        try:
            client.books.delete(book_id)
        except APIError as err:
            raise fail(err) from err

    print_success("Book Deleted", book_id)


# =============================================================================
# Users Commands
# =============================================================================


@users_app.command("list")
def users_list(
    output_json: bool = typer.Option(False, "--json", "-j", help="Output as JSON"),
):
    """List users."""
    with get_client() as client:
        try:
            users = [user.to_dict() for user in client.users.list_all()]
        except APIError as err:
            raise fail(err) from err

    if output_json:
        print_json(users)
    else:
        print_list(users, ["id", "name", "email", "last_activity_at"], "Users")


@users_app.command("read")
def users_read(
    user_id: int = typer.Argument(..., help="User ID"),
    output_json: bool = typer.Option(False, "--json", "-j", help="Output as JSON"),
):
    """Read a user's details."""
    with get_client() as client:
        try:
            user = client.users.read(user_id)
        except APIError as err:
            raise fail(err) from err

    if output_json:
        print_json(user.to_dict())
    else:
        print_item(user.to_dict(), USER_FIELDS, f"User: {user.name or user_id}")


if __name__ == "__main__":
    app()
