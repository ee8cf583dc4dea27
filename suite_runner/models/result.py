"""Models for external tool invocation outcomes."""

from collections.abc import Sequence
from dataclasses import dataclass
from typing import Literal, TypeAlias

OutputMode: TypeAlias = Literal["pretty", "tap", "plain"]

EXIT_NOT_EXECUTABLE = 126
EXIT_NOT_FOUND = 127


@dataclass(frozen=True, kw_only=True)
class Completed:
    """The process started and exited on its own terms.

    A non-zero exit code here means the payload ran and failed.
    """

    exit_code: int
    stderr_tail: Sequence[str] = ()


@dataclass(frozen=True, kw_only=True)
class FlagRejected:
    """The process started but refused an output mode flag."""

    flag: str
    exit_code: int
    stderr_tail: Sequence[str] = ()


@dataclass(frozen=True, kw_only=True)
class LaunchFailed:
    """The process could not be started at all."""

    reason: str
    exit_code: int = EXIT_NOT_FOUND


ToolOutcome: TypeAlias = Completed | FlagRejected | LaunchFailed
