"""ShellCheck linter module."""

from suite_runner.tools.shellcheck.config import ShellcheckConfig
from suite_runner.tools.shellcheck.linter import ShellcheckLinter
from suite_runner.tools.shellcheck.manifest import shellcheck_manifest

__all__ = ["ShellcheckConfig", "ShellcheckLinter", "shellcheck_manifest"]
