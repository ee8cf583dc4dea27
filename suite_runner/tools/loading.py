"""Loading of tools from entry points."""

from collections.abc import Mapping
from importlib.metadata import entry_points
from typing import Any, TypeVar

from suite_runner.tools.base import ExternalTool
from suite_runner.tools.manifest import ToolManifest

ENTRY_POINT_GROUP = "suite_runner.tools"

ToolT = TypeVar("ToolT", bound=ExternalTool)


class ToolNotFoundError(Exception):
    """Raised when a tool plugin is not found."""


class ToolRoleError(Exception):
    """Raised when a tool plugin does not fill the role it is used for."""


def load_tool_manifest(key: str) -> ToolManifest[Any, Any]:
    """Load a tool manifest by key.

    Args:
        key: The tool key as registered in pyproject.toml
             (e.g., "shellcheck", "bats")

    Returns:
        The tool manifest instance

    Raises:
        ToolNotFoundError: If no tool with the given key is found

    """
    entries = entry_points(group=ENTRY_POINT_GROUP)

    for entry in entries:
        if entry.name == key:
            manifest: ToolManifest[Any, Any] = entry.load()
            return manifest

    available = [e.name for e in entries]
    raise ToolNotFoundError(f"Tool '{key}' not found. Available tools: {available}")


def build_tool(
    key: str, config: Mapping[str, Any], expected: type[ToolT]
) -> ToolT:
    """Build a tool from its manifest and check it fills the expected role.

    Raises:
        ToolNotFoundError: If no tool with the given key is found
        ToolRoleError: If the tool is not an instance of ``expected``
        pydantic.ValidationError: If the configuration is invalid

    """
    manifest = load_tool_manifest(key)
    tool = manifest.tool_factory(manifest.config_cls(**config))

    if not isinstance(tool, expected):
        raise ToolRoleError(f"Tool '{key}' is not a {expected.__name__}")
    return tool
