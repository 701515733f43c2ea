"""Bootstrap records for the demo command when no data file exists yet."""

from project_store.models import Project, ProjectStatus


def seed_projects() -> list[Project]:
    """Return a fresh list of the two starter projects."""
    return [
        Project(name="one", status=ProjectStatus.ACTIVE, focus=100),
        Project(name="two", status=ProjectStatus.ARCHIVED, focus=75),
    ]


def demo_update() -> Project:
    """Record the demo upserts over the seeded `two`."""
    return Project(name="two", status=ProjectStatus.ACTIVE, focus=33)
