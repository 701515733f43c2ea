import json as json_lib

from rich.console import Console
from rich.markup import escape
from rich.table import Table
import typer

from project_store.errors import ProjectStoreError
from project_store.logging_config import get_logger
from project_store.models import Project, ProjectStatus
from project_store.store import ProjectStore
from project_store.validation import validate

app = typer.Typer()
console = Console(soft_wrap=True)
err_console = Console(stderr=True, soft_wrap=True)
logger = get_logger(__name__)


def get_store(ctx: typer.Context) -> ProjectStore:
    return ctx.obj


def print_error(error: Exception) -> None:
    err_console.print(f"[bold red]Error:[/bold red] {escape(str(error))}")


@app.command()
def list(
    ctx: typer.Context,
    json_output: bool = typer.Option(False, "--json", help="Output as JSON"),
):
    """List all projects in the data file."""
    store = get_store(ctx)
    try:
        projects = store.list_projects()
    except ProjectStoreError as e:
        # Listing is informational: report and carry on
        logger.debug("project_list_failed", path=str(store.path), error=str(e))
        print_error(e)
        return

    if json_output:
        typer.echo(json_lib.dumps([p.model_dump(mode="json") for p in projects], indent=2))
        return

    table = Table(title="Projects")
    table.add_column("Name", style="magenta")
    table.add_column("Status", style="green")
    table.add_column("Focus", justify="right", style="cyan")

    for p in projects:
        table.add_row(p.name, p.status.value, str(p.focus))

    console.print(table)


@app.command()
def get(
    ctx: typer.Context,
    name: str,
    json_output: bool = typer.Option(False, "--json", help="Output as JSON"),
):
    """Show the project with the given name."""
    try:
        project = get_store(ctx).get(name)
    except ProjectStoreError as e:
        print_error(e)
        raise typer.Exit(1) from e

    if project is None:
        typer.echo("Project not found.")
        return

    if json_output:
        typer.echo(json_lib.dumps(project.model_dump(mode="json"), indent=2))
        return

    status_color = "green" if project.status is ProjectStatus.ACTIVE else "yellow"
    console.print(f"[bold]Project: {escape(project.name)}[/bold]")
    console.print(f"Status: [{status_color}]{project.status.value}[/{status_color}]")
    console.print(f"Focus: [cyan]{project.focus}[/cyan]")


@app.command("set")
@validate(Project)
def set_project(
    ctx: typer.Context,
    name: str = typer.Option(..., "--name", "-n", help="Project name"),
    status: str = typer.Option(
        ..., "--status", "-s", help="One of: Active, Inactive, Archived"
    ),
    focus: int = typer.Option(..., "--focus", "-f", help="Focus percentage (0-100)"),
    json_output: bool = typer.Option(False, "--json", help="Output as JSON"),
):
    """Update the project with this name, or add it if it is new.

    The data file must already exist; see `init`.
    """
    store = get_store(ctx)
    project = Project(name=name, status=status, focus=focus)
    try:
        projects = store.put(project)
    except ProjectStoreError as e:
        print_error(e)
        raise typer.Exit(1) from e

    if json_output:
        typer.echo(json_lib.dumps(project.model_dump(mode="json"), indent=2))
        return

    console.print("[bold green]✓ Project saved![/bold green]")
    console.print(f"Name: [magenta]{escape(project.name)}[/magenta]")
    console.print(f"Total projects: [cyan]{len(projects)}[/cyan]")


@app.command()
def init(
    ctx: typer.Context,
    force: bool = typer.Option(False, "--force", help="Overwrite an existing data file"),
):
    """Create the data file with an empty project list."""
    store = get_store(ctx)
    if store.exists() and not force:
        err_console.print(
            f"[bold red]Error:[/bold red] {escape(str(store.path))} already exists "
            "(use --force to overwrite)"
        )
        raise typer.Exit(1)

    try:
        store.save([])
    except ProjectStoreError as e:
        print_error(e)
        raise typer.Exit(1) from e

    console.print(f"[bold green]✓ Created[/bold green] {escape(str(store.path))}")
