"""Discover shell and bats files to lint."""

import logging
from collections.abc import Sequence
from pathlib import Path

log = logging.getLogger(__name__)


def discover_lint_targets(
    tests_dir: Path, extensions: Sequence[str]
) -> Sequence[Path]:
    """Find regular files under tests_dir whose names end in an extension.

    Args:
        tests_dir: Directory scanned recursively
        extensions: Name suffixes to match (e.g., [".bats", ".sh"])

    Returns:
        Matching regular files, symlinks excluded, sorted by their full path
        string; empty when tests_dir is missing

    """
    if not tests_dir.is_dir():
        log.debug("Tests directory %s does not exist", tests_dir)
        return []

    suffixes = tuple(extensions)
    return sorted(
        (
            path
            for path in tests_dir.rglob("*")
            if path.name.endswith(suffixes)
            and path.is_file()
            and not path.is_symlink()
        ),
        key=str,
    )
