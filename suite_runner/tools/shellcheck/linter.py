"""ShellCheck linter implementation."""

from collections.abc import Sequence
from dataclasses import dataclass
from pathlib import Path

from suite_runner.tools.base import Linter
from suite_runner.tools.shellcheck.config import ShellcheckConfig


@dataclass(frozen=True, kw_only=True)
class ShellcheckLinter(Linter):
    """ShellCheck over shell and bats files."""

    display_name = "shellcheck"

    config: ShellcheckConfig

    @classmethod
    def from_config(cls, config: ShellcheckConfig) -> "ShellcheckLinter":
        """Create linter from configuration."""
        return cls(executable=config.executable, config=config)

    def build_lint_args(
        self, targets: Sequence[Path], config_file: Path | None
    ) -> Sequence[str]:
        """Build ShellCheck arguments, pinning the rcfile when one exists."""
        args = list(self.config.extra_args)
        if config_file is not None:
            args.extend(["--rcfile", str(config_file)])
        args.extend(str(target) for target in targets)
        return args
