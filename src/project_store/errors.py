from pathlib import Path


class ProjectStoreError(Exception):
    """Base class for data file errors."""

    def __init__(self, message: str, path: Path | str | None = None):
        super().__init__(message)
        self.path = Path(path) if path is not None else None


class ProjectNotFoundError(ProjectStoreError):
    """Raised when the data file does not exist."""

    pass


class ProjectStoreIOError(ProjectStoreError):
    """Raised when the data file cannot be opened, created or written."""

    pass


class DeserializationError(ProjectStoreError):
    """Raised when the data file does not decode into project records."""

    pass
