"""Unit tests for the project record and its JSON codec."""

from pydantic import ValidationError
import pytest

from project_store.models import (
    Project,
    ProjectStatus,
    decode_projects,
    encode_projects,
)


class TestProject:
    """Tests for Project model."""

    def test_valid_project(self):
        """Valid fields pass validation."""
        project = Project(name="one", status=ProjectStatus.ACTIVE, focus=100)
        assert project.name == "one"
        assert project.status is ProjectStatus.ACTIVE
        assert project.focus == 100  # noqa: PLR2004

    def test_status_from_wire_string(self):
        """Status accepts its wire literal."""
        project = Project(name="two", status="Archived", focus=75)
        assert project.status is ProjectStatus.ARCHIVED

    def test_empty_name_fails(self):
        """Empty name fails min_length validation."""
        with pytest.raises(ValidationError) as exc_info:
            Project(name="", status=ProjectStatus.ACTIVE, focus=0)

        errors = exc_info.value.errors()
        assert any("name" in str(err["loc"]) for err in errors)
        assert any("at least 1 character" in err["msg"].lower() for err in errors)

    @pytest.mark.parametrize("focus", [-1, 101])
    def test_focus_out_of_range_fails(self, focus):
        """Focus outside 0-100 is rejected."""
        with pytest.raises(ValidationError) as exc_info:
            Project(name="one", status=ProjectStatus.ACTIVE, focus=focus)

        assert exc_info.value.errors()[0]["loc"] == ("focus",)

    @pytest.mark.parametrize("focus", [0, 100])
    def test_focus_bounds_allowed(self, focus):
        """Both ends of the range are valid."""
        assert Project(name="one", status=ProjectStatus.ACTIVE, focus=focus).focus == focus

    def test_lowercase_status_fails(self):
        """Status literals are case-sensitive."""
        with pytest.raises(ValidationError):
            Project(name="one", status="active", focus=10)

    def test_extra_field_fails(self):
        """Records carry exactly three fields."""
        with pytest.raises(ValidationError):
            Project(name="one", status="Active", focus=10, owner="me")


class TestCodec:
    """Tests for the JSON array codec."""

    def test_encode_compact(self):
        """Default encoding has no whitespace."""
        projects = [Project(name="two", status=ProjectStatus.ARCHIVED, focus=75)]
        assert encode_projects(projects) == b'[{"name":"two","status":"Archived","focus":75}]'

    def test_encode_pretty(self):
        """Pretty encoding is indented."""
        projects = [Project(name="two", status=ProjectStatus.ARCHIVED, focus=75)]
        encoded = encode_projects(projects, pretty=True).decode()
        assert encoded.startswith("[\n  {\n")
        assert '"status": "Archived"' in encoded

    def test_decode_ignores_field_order_and_whitespace(self):
        """Field order and whitespace are not significant."""
        raw = '[ {"focus": 75,\n "status": "Archived", "name": "two"} ]'
        assert decode_projects(raw) == [
            Project(name="two", status=ProjectStatus.ARCHIVED, focus=75)
        ]

    def test_decode_unknown_status_fails(self):
        """Unknown status values are never defaulted."""
        with pytest.raises(ValidationError):
            decode_projects('[{"name": "one", "status": "Paused", "focus": 1}]')

    @pytest.mark.parametrize("focus", ['"75"', "75.5", "true"])
    def test_decode_non_integer_focus_fails(self, focus):
        """Focus must be a JSON integer."""
        with pytest.raises(ValidationError):
            decode_projects(f'[{{"name": "one", "status": "Active", "focus": {focus}}}]')

    def test_decode_object_instead_of_array_fails(self):
        """The top level must be an array."""
        with pytest.raises(ValidationError):
            decode_projects('{"name": "one", "status": "Active", "focus": 1}')

    def test_decode_missing_field_fails(self):
        """All three fields are required."""
        with pytest.raises(ValidationError):
            decode_projects('[{"name": "one", "status": "Active"}]')
