"""Fake tool executables that record how they were invoked."""

import stat
from collections.abc import Sequence
from dataclasses import dataclass
from pathlib import Path

FIELD_SEPARATOR = "\t"


@dataclass(frozen=True, kw_only=True)
class RecordedCall:
    """One invocation of a fake tool."""

    cwd: str
    term: str
    args: Sequence[str]


def write_fake_tool(
    bin_dir: Path,
    name: str,
    *,
    record: Path,
    exit_code: int = 0,
    reject_flag: str | None = None,
) -> Path:
    """Write an executable shell script that logs its arguments.

    Every call appends its working directory, TERM and arguments to
    ``record``. With ``reject_flag``, a call carrying that flag prints a
    bats-style argument error and exits 1 before doing anything else.
    """
    reject = ""
    if reject_flag is not None:
        reject = f"""\
for arg in "$@"; do
    if [ "$arg" = "{reject_flag}" ]; then
        echo "Error: Bad command line option '{reject_flag}'" >&2
        exit 1
    fi
done
"""

    script = f"""\
#!/bin/sh
{{
    printf '%s\\t' "$(pwd -P)" "${{TERM:-}}" "$@"
    printf '\\n'
}} >> "{record}"
{reject}exit {exit_code}
"""
    tool = bin_dir / name
    tool.write_text(script)
    tool.chmod(tool.stat().st_mode | stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH)
    return tool


def read_calls(record: Path) -> Sequence[RecordedCall]:
    """Parse the invocations logged by a fake tool."""
    if not record.exists():
        return []

    calls: list[RecordedCall] = []
    for line in record.read_text().splitlines():
        cwd, term, *args = line.split(FIELD_SEPARATOR)[:-1]
        calls.append(RecordedCall(cwd=cwd, term=term, args=args))
    return calls
