"""Tool manifest definition for the plugin system."""

from collections.abc import Callable
from dataclasses import dataclass
from typing import Generic, TypeVar

from pydantic import BaseModel

from suite_runner.tools.base import ExternalTool

ConfigT = TypeVar("ConfigT", bound=BaseModel)
ToolT = TypeVar("ToolT", bound=ExternalTool)


@dataclass(frozen=True, kw_only=True)
class ToolManifest(Generic[ConfigT, ToolT]):
    """Manifest describing a tool plugin.

    The manifest pairs the tool's configuration model with the factory that
    builds the tool from it, so tools can be looked up lazily by key.
    """

    config_cls: type[ConfigT]
    tool_factory: Callable[[ConfigT], ToolT]
