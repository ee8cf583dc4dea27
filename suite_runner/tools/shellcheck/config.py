"""Configuration for the ShellCheck linter."""

from collections.abc import Sequence

from pydantic import Field

from suite_runner.models.base import Model


class ShellcheckConfig(Model):
    """Configuration for the ShellCheck linter."""

    executable: str = "shellcheck"
    extra_args: Sequence[str] = Field(
        default=(), description="Arguments placed before --rcfile and targets"
    )
