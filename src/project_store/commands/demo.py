"""Reference run: seed, find, list, update, list again."""

import typer

from project_store.commands.project import err_console, get_store, print_error
from project_store.errors import ProjectStoreError
from project_store.models import Project
from project_store.seed import demo_update, seed_projects
from project_store.store import ProjectStore, find_by_name, upsert


def format_project(project: Project) -> str:
    return (
        f"Project Name: {project.name}, Status: {project.status.value}, "
        f"Focus: {project.focus}"
    )


def print_all(store: ProjectStore) -> None:
    """Print every stored project; read errors are reported, not raised."""
    try:
        projects = store.load()
    except ProjectStoreError as e:
        err_console.print(f"Failed to read projects: {e}", markup=False)
        return

    for project in projects:
        typer.echo(format_project(project))


def demo(
    ctx: typer.Context,
    name: str = typer.Option(
        "two",
        "--name",
        "-n",
        help="Name for the find step only; the seed and update are fixed",
    ),
):
    """Seed the data file, look up a project, update it and list the result."""
    store = get_store(ctx)

    try:
        # Write
        projects = seed_projects()
        store.save(projects)

        # Find one, in memory
        found = find_by_name(projects, name)
        if found is not None:
            typer.echo(
                f'Found project: "{found.name}", Status: {found.status.value}, '
                f"Focus: {found.focus}"
            )
        else:
            typer.echo("Project not found.")

        # Get all
        print_all(store)

        # Update: a failed load here aborts the run
        projects = store.load()
        upsert(projects, demo_update())
        store.save(projects, pretty=True)
    except ProjectStoreError as e:
        print_error(e)
        raise typer.Exit(1) from e

    typer.echo("Updated Projects:")
    print_all(store)
