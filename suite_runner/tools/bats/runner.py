"""bats-core test runner implementation."""

import re
from collections.abc import Sequence
from dataclasses import dataclass

from suite_runner.models.result import OutputMode
from suite_runner.tools.base import TestRunner
from suite_runner.tools.bats.config import BatsConfig

INSTALL_GUIDANCE = """\
To install BATS:
  - macOS: brew install bats-core
  - npm:   npm install -g bats
  - Linux: sudo apt-get install bats (or use the bats-core repo)
"""


@dataclass(frozen=True, kw_only=True)
class BatsRunner(TestRunner):
    """bats-core test runner."""

    display_name = "bats-core"

    config: BatsConfig

    @classmethod
    def from_config(cls, config: BatsConfig) -> "BatsRunner":
        """Create runner from configuration."""
        return cls(executable=config.executable, config=config)

    @property
    def install_guidance(self) -> str:
        """Installation channels for bats-core."""
        return INSTALL_GUIDANCE

    def flag_for(self, mode: OutputMode) -> str | None:
        """Map an output mode to its bats flag."""
        match mode:
            case "pretty":
                return self.config.pretty_flag
            case "tap":
                return self.config.tap_flag
            case "plain":
                return None

    def is_flag_rejection(
        self, flag: str, exit_code: int, stderr_tail: Sequence[str]
    ) -> bool:
        """Match stderr against the argument-error signatures for the flag."""
        if exit_code == 0:
            return False

        escaped = re.escape(flag)
        patterns = [
            re.compile(pattern.replace("{flag}", escaped), re.IGNORECASE)
            for pattern in self.config.rejection_patterns
        ]
        return any(
            pattern.search(line) for line in stderr_tail for pattern in patterns
        )
