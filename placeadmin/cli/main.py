"""placeadmin CLI - Main commands."""
import asyncio
import json
import mimetypes
import os
from pathlib import Path
from typing import Any

import typer
from rich.console import Console
from rich.table import Table

from placeadmin.core.api.errors import APIError, AuthorizationRejected, ConfigurationError

app = typer.Typer(
    name="placeadmin",
    help="Places administration backend CLI",
    add_completion=False
)
console = Console()

CONFIG_DIR_ENV = "PLACEADMIN_CONFIG_DIR"


# Session path: ~/.config/placeadmin/session.session
def get_session_path() -> Path:
    config_dir = Path(os.environ.get(CONFIG_DIR_ENV, Path.home() / ".config" / "placeadmin"))
    config_dir.mkdir(parents=True, exist_ok=True)
    return config_dir / "session"


def run_async(coro):
    """Run async function."""
    return asyncio.run(coro)


def on_navigate(route: str) -> None:
    console.print("[red]Session expired. Run 'placeadmin login' again.[/red]")


def make_client(hint: bool = True):
    """Client bound to the persisted session."""
    from placeadmin import PlaceAdminClient, CallbackNavigator, MemoryNavigator
    
    navigator = CallbackNavigator(on_navigate) if hint else MemoryNavigator()
    try:
        return PlaceAdminClient(str(get_session_path()), navigator=navigator)
    except ConfigurationError as e:
        console.print(f"[red]{e}[/red]")
        raise typer.Exit(1)


def require_session():
    if not get_session_path().with_suffix(".session").exists():
        console.print("[red]Not logged in. Run 'placeadmin login' first.[/red]")
        raise typer.Exit(1)


def call(operation, hint: bool = True) -> Any:
    """
    Run one client operation, turning API errors into exit code 1.
    
    With hint=False a 401 does not print the re-login prompt.
    """
    async def runner():
        async with make_client(hint) as api:
            return await operation(api)
    
    try:
        return run_async(runner())
    except AuthorizationRejected:
        raise typer.Exit(1)
    except APIError as e:
        console.print(f"[red]Request failed: {e}[/red]")
        raise typer.Exit(1)


def print_table(rows: Any, columns) -> None:
    if not isinstance(rows, list):
        print_json(rows)
        return
    
    table = Table()
    for column in columns:
        table.add_column(column, style="cyan" if column == "id" else None)
    for row in rows:
        table.add_row(*(str(row.get(column, "")) for column in columns))
    console.print(table)


def print_json(data: Any) -> None:
    console.print_json(json.dumps(data))


@app.command()
def login(
    email: str = typer.Option(None, "--email", "-e", help="Account email"),
    password: str = typer.Option(None, "--password", "-p", help="Account password"),
):
    """Login and save the session token."""
    if not email:
        email = typer.prompt("Email")
    if not password:
        password = typer.prompt("Password", hide_input=True)
    
    try:
        call(lambda api: api.login(email, password), hint=False)
    except typer.Exit:
        console.print("[red]Login failed[/red]")
        raise
    console.print(f"[green]Logged in as {email}[/green]")


@app.command()
def logout():
    """Logout and drop the session token."""
    session_file = get_session_path().with_suffix(".session")
    if not session_file.exists():
        console.print("[yellow]No active session[/yellow]")
        return
    
    try:
        call(lambda api: api.logout())
    finally:
        session_file.unlink(missing_ok=True)
    console.print("[green]Logged out successfully[/green]")


@app.command()
def whoami():
    """Show whether a session token is stored."""
    from placeadmin.core.session import SQLiteSession
    
    require_session()
    with SQLiteSession(str(get_session_path())) as store:
        token = store.get()
    
    if token:
        console.print("[green]Authenticated[/green]")
        console.print(f"Session: {get_session_path().with_suffix('.session')}")
    else:
        console.print("[yellow]Not authenticated. Run 'placeadmin login'.[/yellow]")


@app.command()
def places():
    """List places."""
    require_session()
    print_table(call(lambda api: api.places.list()), ["id", "name"])


@app.command()
def place(place_id: int = typer.Argument(..., help="Place identifier")):
    """Show one place."""
    require_session()
    print_json(call(lambda api: api.places.details(place_id)))


@app.command("delete-place")
def delete_place(
    place_id: int = typer.Argument(..., help="Place identifier"),
    yes: bool = typer.Option(False, "--yes", "-y", help="Do not ask for confirmation"),
):
    """Delete a place."""
    require_session()
    if not yes:
        typer.confirm(f"Delete place {place_id}?", abort=True)
    call(lambda api: api.places.delete(place_id))
    console.print(f"[green]Deleted place {place_id}[/green]")


@app.command()
def categories():
    """List categories."""
    require_session()
    print_table(call(lambda api: api.categories.list()), ["id", "name"])


@app.command()
def tags():
    """List tags."""
    require_session()
    print_table(call(lambda api: api.tags.list()), ["id", "name"])


@app.command()
def images(place_id: int = typer.Argument(..., help="Place identifier")):
    """List the images of a place."""
    require_session()
    print_table(call(lambda api: api.images.list(place_id)), ["id", "image"])


@app.command("add-image")
def add_image(
    place_id: int = typer.Argument(..., help="Place identifier"),
    file_path: Path = typer.Argument(..., help="Image file to upload", exists=True),
    field: str = typer.Option("image", "--field", "-f", help="Form field name"),
):
    """Upload an image to a place."""
    require_session()
    content_type = mimetypes.guess_type(file_path.name)[0] or "application/octet-stream"
    form = {field: (file_path.name, file_path.read_bytes(), content_type)}
    print_json(call(lambda api: api.images.add(place_id, form)))


@app.command()
def social(place_id: int = typer.Argument(..., help="Place identifier")):
    """List the social media records of a place."""
    require_session()
    print_table(call(lambda api: api.social.list(place_id)), ["id", "platform", "url"])


def main():
    """Entry point."""
    app()


if __name__ == "__main__":
    main()
