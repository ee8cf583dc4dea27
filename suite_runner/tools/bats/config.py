"""Configuration for the bats-core test runner."""

from collections.abc import Sequence

from pydantic import Field

from suite_runner.models.base import Model

# "{flag}" is replaced by the escaped flag before matching
DEFAULT_REJECTION_PATTERNS: Sequence[str] = (
    r"Bad command line option '?{flag}'?",
    r"(?:unknown|unrecognized|unrecognised|invalid|illegal) option\W*{flag}",
    r"^\s*usage:\s+bats\b",
)


class BatsConfig(Model):
    """Configuration for the bats-core test runner."""

    executable: str = "bats"
    pretty_flag: str = "--pretty"
    tap_flag: str = "--tap"
    rejection_patterns: Sequence[str] = Field(
        default=DEFAULT_REJECTION_PATTERNS,
        description="Case-insensitive stderr patterns marking a refused flag",
    )
