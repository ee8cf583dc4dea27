"""Runner settings loaded from environment variables."""

from collections.abc import Sequence
from pathlib import Path
from typing import Annotated, Any, Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict


class RunnerSettings(BaseSettings):
    """Orchestrator settings, read from ``SUITE_RUNNER_*`` variables."""

    model_config = SettingsConfigDict(
        env_prefix="SUITE_RUNNER_",
        env_file=".env",
        extra="ignore",
        case_sensitive=False,
        frozen=True,
    )

    project_root: Path | None = None
    tests_dir: str = "tests"
    lint_extensions: Annotated[Sequence[str], NoDecode] = (".bats", ".sh")
    lint_config: str = ".shellcheckrc"

    linter: str = "shellcheck"
    linter_config: dict[str, Any] = Field(default_factory=dict)
    test_runner: str = "bats"
    test_runner_config: dict[str, Any] = Field(default_factory=dict)

    default_term: str = "xterm-256color"
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"

    @field_validator("lint_extensions", mode="before")
    @classmethod
    def split_extensions(cls, v: str | Sequence[str]) -> Sequence[str]:
        """Split a comma-separated list from the environment."""
        if isinstance(v, str):
            return tuple(e.strip() for e in v.split(",") if e.strip())
        return tuple(v)

    @field_validator("log_level", mode="before")
    @classmethod
    def upper_log_level(cls, v: str) -> str:
        """Accept level names in any case."""
        return v.upper() if isinstance(v, str) else v
