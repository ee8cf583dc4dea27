"""Abstract base classes for external tools driven by the orchestrator."""

import asyncio
import codecs
import logging
import os
import shlex
import shutil
import sys
from abc import ABC, abstractmethod
from collections import deque
from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from pathlib import Path
from typing import ClassVar

from suite_runner.models.result import (
    EXIT_NOT_EXECUTABLE,
    Completed,
    FlagRejected,
    LaunchFailed,
    OutputMode,
    ToolOutcome,
)

log = logging.getLogger(__name__)

STDERR_TAIL_LINES = 50
STDERR_LINE_CHARS = 4096
STREAM_CHUNK_SIZE = 65536


def is_available(tool_name: str, env: Mapping[str, str] | None = None) -> bool:
    """Check whether an executable is resolvable on the search path.

    The tool is never invoked. A missing tool is an ordinary outcome and
    yields False rather than an error. An env without PATH is searched with
    os.defpath, as process launch does.
    """
    environ = os.environ if env is None else env
    return shutil.which(tool_name, path=environ.get("PATH", os.defpath)) is not None


def normalize_returncode(returncode: int) -> int:
    """Map a signal death (negative returncode) to the shell's 128 + N."""
    if returncode < 0:
        return 128 - returncode
    return returncode


async def tee_stream(stream: asyncio.StreamReader) -> Sequence[str]:
    """Forward a child's stream to our stderr and return its last lines.

    The stream is read in fixed-size chunks, so a line of any length is
    forwarded whole. Only the last STDERR_LINE_CHARS of each kept line are
    retained.
    """
    decoder = codecs.getincrementaldecoder("utf-8")(errors="replace")
    tail: deque[str] = deque(maxlen=STDERR_TAIL_LINES)
    pending = ""

    while True:
        chunk = await stream.read(STREAM_CHUNK_SIZE)
        text = decoder.decode(chunk, final=not chunk)
        if text:
            sys.stderr.write(text)
            sys.stderr.flush()
            *lines, pending = (pending + text).split("\n")
            tail.extend(line.rstrip("\r")[-STDERR_LINE_CHARS:] for line in lines)
            pending = pending[-STDERR_LINE_CHARS:]
        if not chunk:
            break

    if pending:
        tail.append(pending.rstrip("\r"))
    return tuple(tail)


@dataclass(frozen=True, kw_only=True)
class ExternalTool(ABC):
    """An executable the orchestrator discovers and delegates to."""

    display_name: ClassVar[str]

    executable: str

    def is_available(self, env: Mapping[str, str] | None = None) -> bool:
        """Check whether the tool's executable is on the search path."""
        return is_available(self.executable, env)

    async def invoke(
        self,
        args: Sequence[str],
        *,
        cwd: Path | None = None,
        env: Mapping[str, str] | None = None,
        capture_stderr: bool = False,
    ) -> Completed | LaunchFailed:
        """Run the tool to completion with stdout attached to ours.

        Args:
            args: Arguments passed after the executable
            cwd: Working directory for the child process
            env: Environment for the child process (ours when None)
            capture_stderr: Tee stderr to ours and keep its tail for
                classification instead of letting the child inherit it.
                The child's fd 2 is then a pipe, not our terminal, so tools
                probing stderr for a TTY see none

        Returns:
            Completed when the process ran, LaunchFailed when it never started

        """
        command = [self.executable, *args]
        log.debug("Running: %s", shlex.join(command))

        try:
            process = await asyncio.create_subprocess_exec(
                *command,
                cwd=cwd,
                env=None if env is None else dict(env),
                stderr=asyncio.subprocess.PIPE if capture_stderr else None,
            )
        except PermissionError as exc:
            return LaunchFailed(reason=str(exc), exit_code=EXIT_NOT_EXECUTABLE)
        except OSError as exc:
            return LaunchFailed(reason=str(exc))

        stderr_tail: Sequence[str] = ()
        try:
            if process.stderr is not None:
                stderr_tail = await tee_stream(process.stderr)
        finally:
            returncode = await process.wait()

        return Completed(
            exit_code=normalize_returncode(returncode), stderr_tail=stderr_tail
        )


@dataclass(frozen=True, kw_only=True)
class Linter(ExternalTool):
    """A linter run once over a batch of files."""

    @abstractmethod
    def build_lint_args(
        self, targets: Sequence[Path], config_file: Path | None
    ) -> Sequence[str]:
        """Build the argument list for linting targets.

        Args:
            targets: Files to lint, in the order they should be reported
            config_file: Project ruleset to apply, None for built-in defaults

        Returns:
            Arguments to pass after the executable

        """

    async def lint(
        self,
        targets: Sequence[Path],
        config_file: Path | None,
        *,
        cwd: Path | None = None,
        env: Mapping[str, str] | None = None,
    ) -> ToolOutcome:
        """Lint all targets in a single invocation."""
        args = self.build_lint_args(targets, config_file)
        return await self.invoke(args, cwd=cwd, env=env)


@dataclass(frozen=True, kw_only=True)
class TestRunner(ExternalTool):
    """A test runner invoked with an output mode and target paths."""

    __test__ = False

    @property
    @abstractmethod
    def install_guidance(self) -> str:
        """Human readable installation instructions."""

    @abstractmethod
    def flag_for(self, mode: OutputMode) -> str | None:
        """Return the command line flag selecting an output mode, if any."""

    @abstractmethod
    def is_flag_rejection(
        self, flag: str, exit_code: int, stderr_tail: Sequence[str]
    ) -> bool:
        """Check whether a failed run refused the flag instead of running."""

    def build_run_args(
        self, targets: Sequence[str], mode: OutputMode
    ) -> Sequence[str]:
        """Build the argument list for running targets in an output mode."""
        if (flag := self.flag_for(mode)) is not None:
            return [flag, *targets]
        return list(targets)

    async def run_suite(
        self,
        targets: Sequence[str],
        mode: OutputMode,
        *,
        cwd: Path | None = None,
        env: Mapping[str, str] | None = None,
        detect_rejection: bool = False,
    ) -> ToolOutcome:
        """Run the suite once.

        With detect_rejection, a run that exits non-zero because the mode
        flag was refused is reported as FlagRejected rather than Completed.
        """
        flag = self.flag_for(mode) if detect_rejection else None
        outcome = await self.invoke(
            self.build_run_args(targets, mode),
            cwd=cwd,
            env=env,
            capture_stderr=flag is not None,
        )

        if (
            flag is not None
            and isinstance(outcome, Completed)
            and outcome.exit_code != 0
            and self.is_flag_rejection(flag, outcome.exit_code, outcome.stderr_tail)
        ):
            return FlagRejected(
                flag=flag,
                exit_code=outcome.exit_code,
                stderr_tail=outcome.stderr_tail,
            )
        return outcome
