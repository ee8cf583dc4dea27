"""bats-core test runner module."""

from suite_runner.tools.bats.config import BatsConfig
from suite_runner.tools.bats.manifest import bats_manifest
from suite_runner.tools.bats.runner import BatsRunner

__all__ = ["BatsConfig", "BatsRunner", "bats_manifest"]
