"""Read-modify-write storage of project records in a single JSON file.

The whole file is loaded into a list, changed in memory and written back
in full. There is no locking: one process owns the file at a time.

Usage:
    from project_store.store import ProjectStore

    store = ProjectStore("projects.json")
    store.put(Project(name="two", status=ProjectStatus.ACTIVE, focus=33))
"""

import contextlib
import os
from pathlib import Path
import shutil
import tempfile

from pydantic import ValidationError

from project_store.config import Settings
from project_store.errors import (
    DeserializationError,
    ProjectNotFoundError,
    ProjectStoreIOError,
)
from project_store.logging_config import get_logger
from project_store.models import Project, decode_projects, encode_projects

logger = get_logger(__name__)


def _describe_validation_error(error: ValidationError) -> str:
    parts = []
    for err in error.errors():
        loc = ".".join(str(x) for x in err["loc"])
        parts.append(f"{loc}: {err['msg']}" if loc else err["msg"])
    return "; ".join(parts)


def load(path: Path | str) -> list[Project]:
    """Read every project from the data file.

    Raises:
        ProjectNotFoundError: The file does not exist.
        ProjectStoreIOError: The file exists but cannot be read.
        DeserializationError: The content is not a JSON array of projects.
    """
    path = Path(path)
    try:
        raw = path.read_bytes()
    except FileNotFoundError as e:
        raise ProjectNotFoundError(f"Data file not found: {path}", path) from e
    except OSError as e:
        raise ProjectStoreIOError(f"Cannot read {path}: {e}", path) from e

    try:
        projects = decode_projects(raw)
    except ValidationError as e:
        raise DeserializationError(
            f"Invalid project data in {path}: {_describe_validation_error(e)}", path
        ) from e

    logger.debug("projects_loaded", path=str(path), count=len(projects))
    return projects


def _current_umask() -> int:
    mask = os.umask(0)
    os.umask(mask)
    return mask


def _atomic_write_bytes(path: Path, payload: bytes) -> None:
    """Write to a temp file next to path, then rename it over path.

    Symlinks are followed so the link target is the file that gets replaced.
    A new file gets the umask-derived mode an in-place create would give.
    """
    path = Path(os.path.realpath(path))
    fd, tmp_path = tempfile.mkstemp(
        dir=str(path.parent),
        prefix=f".{path.name}.",
        suffix=".tmp",
    )
    try:
        with os.fdopen(fd, "wb") as tmp_file:
            tmp_file.write(payload)
            tmp_file.flush()
            os.fsync(tmp_file.fileno())
        if path.is_file():
            shutil.copymode(path, tmp_path)
        else:
            os.chmod(tmp_path, 0o666 & ~_current_umask())
        os.replace(tmp_path, path)
    except BaseException:
        with contextlib.suppress(OSError):
            os.unlink(tmp_path)
        raise


def save(
    projects: list[Project],
    path: Path | str,
    *,
    pretty: bool = False,
    atomic: bool = True,
) -> None:
    """Overwrite the data file with the full collection.

    With atomic=False the file is truncated and written in place, so an
    interrupted write loses the previous content.

    Raises:
        ProjectStoreIOError: The file cannot be created or written.
    """
    path = Path(path)
    payload = encode_projects(projects, pretty=pretty)
    try:
        if atomic:
            _atomic_write_bytes(path, payload)
        else:
            with path.open("wb") as f:
                f.write(payload)
    except OSError as e:
        raise ProjectStoreIOError(f"Cannot write {path}: {e}", path) from e

    logger.info(
        "projects_saved",
        path=str(path),
        count=len(projects),
        pretty=pretty,
        atomic=atomic,
    )


def find_by_name(projects: list[Project], name: str) -> Project | None:
    """Return the first project named exactly `name`, or None."""
    found = next((p for p in projects if p.name == name), None)
    logger.debug("project_lookup", name=name, found=found is not None)
    return found


def upsert(projects: list[Project], project: Project) -> None:
    """Replace the project with the same name in place, or append it."""
    for index, existing in enumerate(projects):
        if existing.name == project.name:
            projects[index] = project
            logger.info("project_updated", name=project.name, position=index)
            return

    projects.append(project)
    logger.info("project_added", name=project.name, position=len(projects) - 1)


class ProjectStore:
    """Facade binding the collection functions to one data file."""

    def __init__(self, path: Path | str, *, atomic: bool = True):
        self.path = Path(path)
        self.atomic = atomic

    @classmethod
    def from_settings(cls, settings: Settings) -> "ProjectStore":
        return cls(settings.data_file, atomic=settings.atomic_writes)

    def exists(self) -> bool:
        return self.path.is_file()

    def load(self) -> list[Project]:
        return load(self.path)

    def save(self, projects: list[Project], *, pretty: bool = False) -> None:
        save(projects, self.path, pretty=pretty, atomic=self.atomic)

    def list_projects(self) -> list[Project]:
        return self.load()

    def get(self, name: str) -> Project | None:
        return find_by_name(self.load(), name)

    def put(self, project: Project, *, pretty: bool = True) -> list[Project]:
        """Load, upsert and save. Returns the saved collection.

        A failed load propagates before anything is written.
        """
        projects = self.load()
        upsert(projects, project)
        self.save(projects, pretty=pretty)
        return projects
