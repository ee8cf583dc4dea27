"""Tests for tool loading module."""

import pytest
from pydantic import ValidationError

from suite_runner.tools.base import Linter, TestRunner
from suite_runner.tools.bats import BatsRunner, bats_manifest
from suite_runner.tools.loading import (
    ToolNotFoundError,
    ToolRoleError,
    build_tool,
    load_tool_manifest,
)
from suite_runner.tools.shellcheck import ShellcheckLinter, shellcheck_manifest


def test_load_tool_manifest_returns_manifest() -> None:
    """Loads tool manifests by key."""
    assert load_tool_manifest("shellcheck") is shellcheck_manifest
    assert load_tool_manifest("bats") is bats_manifest


def test_load_tool_manifest_raises_for_unknown_tool() -> None:
    """Raises ToolNotFoundError for unknown tool key."""
    with pytest.raises(ToolNotFoundError) as exc_info:
        load_tool_manifest("unknown-tool")

    assert "unknown-tool" in str(exc_info.value)
    assert "Available tools" in str(exc_info.value)


def test_build_tool_applies_config() -> None:
    """Builds the tool from its validated configuration."""
    runner = build_tool("bats", {"executable": "bats-core"}, TestRunner)

    assert isinstance(runner, BatsRunner)
    assert runner.executable == "bats-core"


def test_build_tool_uses_defaults_for_empty_config() -> None:
    """An empty configuration yields the defaults."""
    linter = build_tool("shellcheck", {}, Linter)

    assert isinstance(linter, ShellcheckLinter)
    assert linter.executable == "shellcheck"


def test_build_tool_rejects_wrong_role() -> None:
    """A linter cannot be used as a test runner."""
    with pytest.raises(ToolRoleError, match="not a TestRunner"):
        build_tool("shellcheck", {}, TestRunner)


def test_build_tool_rejects_invalid_config() -> None:
    """Unknown configuration keys are rejected."""
    with pytest.raises(ValidationError):
        build_tool("bats", {"colour": True}, TestRunner)
