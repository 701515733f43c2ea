"""Pydantic validation decorator for CLI commands."""

from collections.abc import Callable
from typing import Any, TypeVar

from makefun import wraps
from pydantic import BaseModel, ValidationError
import typer

F = TypeVar("F", bound=Callable[..., Any])


def validate(model_class: type[BaseModel]) -> Callable[[F], F]:
    """Validate CLI arguments against a Pydantic model before running a command.

    Uses makefun.wraps so Typer still sees the original signature and builds
    the same options and help text.

    Keyword arguments named like model fields are validated together and
    passed on as the validated (coerced) values under the same names.
    Anything else is passed through untouched. Validation errors are printed
    one per field to stderr and the command exits with code 1.

    Args:
        model_class: Pydantic model class to validate against

    Example:
        @app.command()
        @validate(Project)
        def set(name: str, status: str, focus: int):
            ...
    """

    def decorator(func: F) -> F:
        @wraps(func)
        def wrapper(**kwargs: Any) -> Any:
            model_fields = model_class.model_fields.keys()
            model_data = {k: v for k, v in kwargs.items() if k in model_fields}

            try:
                validated = model_class(**model_data)
            except ValidationError as e:
                for err in e.errors():
                    loc = ".".join(str(x) for x in err["loc"])
                    typer.echo(f"✗ {loc}: {err['msg']}", err=True)
                raise typer.Exit(1) from e

            all_kwargs = {k: getattr(validated, k) for k in model_fields}
            remaining_kwargs = {k: v for k, v in kwargs.items() if k not in model_fields}
            all_kwargs.update(remaining_kwargs)

            return func(**all_kwargs)

        return wrapper  # type: ignore

    return decorator
