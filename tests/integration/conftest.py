"""Fixtures for integration tests with fake tool executables."""

from pathlib import Path
from typing import Protocol

import pytest

from suite_runner.testing.fake_tools import write_fake_tool


class InstallToolFn(Protocol):
    """Protocol for fake tool installation function."""

    def __call__(
        self, name: str, *, exit_code: int = 0, reject_flag: str | None = None
    ) -> Path:
        """Install a fake tool and return the path of its call log."""


@pytest.fixture
def bin_dir(tmp_path: Path) -> Path:
    """Create an empty directory used as the only PATH entry."""
    path = tmp_path / "bin"
    path.mkdir()
    return path


@pytest.fixture
def tool_env(bin_dir: Path) -> dict[str, str]:
    """Environment whose PATH only contains the fake tools."""
    return {"PATH": str(bin_dir)}


@pytest.fixture
def install_tool(bin_dir: Path, tmp_path: Path) -> InstallToolFn:
    """Return a function to install fake tools on PATH."""

    def _install(
        name: str, *, exit_code: int = 0, reject_flag: str | None = None
    ) -> Path:
        record = tmp_path / f"{name}.calls"
        write_fake_tool(
            bin_dir,
            name,
            record=record,
            exit_code=exit_code,
            reject_flag=reject_flag,
        )
        return record

    return _install


@pytest.fixture
def project(tmp_path: Path) -> Path:
    """Create a project with bats tests, a helper and a launcher script."""
    root = tmp_path / "project"
    (root / "tests" / "helpers").mkdir(parents=True)
    (root / "tests" / "run.py").write_text("")
    (root / "tests" / "math.bats").write_text("@test 'adds' { true; }\n")
    (root / "tests" / "helpers" / "setup.sh").write_text("#!/bin/sh\n")
    (root / "tests" / "README.md").write_text("docs\n")
    return root
