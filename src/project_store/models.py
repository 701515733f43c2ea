"""Project record and the JSON codec for the data file."""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter


class ProjectStatus(str, Enum):
    ACTIVE = "Active"
    INACTIVE = "Inactive"
    ARCHIVED = "Archived"


class Project(BaseModel):
    """One record of the data file, keyed by name."""

    model_config = ConfigDict(extra="forbid")

    name: str = Field(
        ...,
        min_length=1,
        description="Project name, unique within the collection",
        examples=["one", "two"],
    )
    status: ProjectStatus
    focus: int = Field(
        ...,
        ge=0,
        le=100,
        strict=True,
        description="Focus percentage (0-100)",
    )


# The data file holds a bare JSON array of projects
ProjectList = TypeAdapter(list[Project])


def decode_projects(data: bytes | str) -> list[Project]:
    """Decode a JSON array into projects. Raises pydantic.ValidationError."""
    return ProjectList.validate_json(data)


def encode_projects(projects: list[Project], pretty: bool = False) -> bytes:
    """Encode projects as a JSON array, compact unless pretty is set."""
    return ProjectList.dump_json(projects, indent=2 if pretty else None)
