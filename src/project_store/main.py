from pathlib import Path

import typer

from project_store.commands import project
from project_store.commands.demo import demo
from project_store.config import get_settings
from project_store.logging_config import setup_logging
from project_store.store import ProjectStore

app = typer.Typer(
    name="project-store",
    help="Manage project records stored in a JSON file",
    add_completion=False,
)

app.add_typer(project.app, name="project", help="Read and update projects")
app.command()(demo)


@app.callback()
def callback(
    ctx: typer.Context,
    data_file: Path | None = typer.Option(
        None,
        "--data-file",
        "-d",
        help="Data file to use instead of PROJECT_STORE_DATA_FILE",
    ),
):
    """
    Project Store CLI
    """
    settings = get_settings()
    setup_logging(
        service_name=settings.service_name,
        log_format=settings.log_format,
        log_level=settings.log_level,
    )
    if data_file is not None:
        settings = settings.model_copy(update={"data_file": data_file})
    ctx.obj = ProjectStore.from_settings(settings)


if __name__ == "__main__":
    app()
