"""File-backed store for project records."""
