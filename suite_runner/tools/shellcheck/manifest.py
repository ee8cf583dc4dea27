"""ShellCheck tool manifest."""

from suite_runner.tools.manifest import ToolManifest
from suite_runner.tools.shellcheck.config import ShellcheckConfig
from suite_runner.tools.shellcheck.linter import ShellcheckLinter

shellcheck_manifest = ToolManifest(
    config_cls=ShellcheckConfig,
    tool_factory=ShellcheckLinter.from_config,
)
