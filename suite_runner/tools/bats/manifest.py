"""bats-core tool manifest."""

from suite_runner.tools.bats.config import BatsConfig
from suite_runner.tools.bats.runner import BatsRunner
from suite_runner.tools.manifest import ToolManifest

bats_manifest = ToolManifest(
    config_cls=BatsConfig,
    tool_factory=BatsRunner.from_config,
)
