from pydantic import BaseModel, Field
import typer
from typer.testing import CliRunner

from project_store.validation import validate

runner = CliRunner()


class Item(BaseModel):
    name: str = Field(..., min_length=1)
    size: int = Field(..., ge=0, le=10)


def make_app() -> typer.Typer:
    app = typer.Typer()

    @app.command()
    @validate(Item)
    def add(
        name: str = typer.Option(..., "--name"),
        size: int = typer.Option(..., "--size"),
        loud: bool = typer.Option(False, "--loud"),
    ):
        typer.echo(f"{name}:{size}:{loud}")

    return app


class TestValidate:
    def test_valid_arguments_pass_through(self):
        """Validated fields and extra options reach the command"""
        result = runner.invoke(make_app(), ["--name", "box", "--size", "3", "--loud"])

        assert result.exit_code == 0
        assert result.output.strip() == "box:3:True"

    def test_invalid_arguments_exit_1(self):
        """Each failing field is reported and the command does not run"""
        result = runner.invoke(make_app(), ["--name", "", "--size", "11"])

        assert result.exit_code == 1
        assert "✗ name:" in result.output
        assert "✗ size:" in result.output
        assert "box" not in result.output

    def test_signature_preserved(self):
        """Typer still sees the original options"""
        result = runner.invoke(make_app(), ["--help"])

        assert result.exit_code == 0
        assert "--loud" in result.output
