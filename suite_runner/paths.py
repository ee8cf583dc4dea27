"""Project root resolution from the invoking script's location."""

from dataclasses import dataclass
from pathlib import Path


class ProjectRootError(Exception):
    """Raised when the project root cannot be resolved."""


@dataclass(frozen=True, kw_only=True)
class ProjectPaths:
    """Canonical locations of the invoking script and the project."""

    script_dir: Path
    project_root: Path


def resolve_directory(path: Path) -> Path:
    """Resolve a directory to canonical absolute form, following symlinks.

    Raises:
        ProjectRootError: If the path does not resolve to a directory

    """
    try:
        resolved = path.resolve(strict=True)
    except (OSError, RuntimeError) as exc:
        raise ProjectRootError(f"Cannot resolve directory '{path}': {exc}") from exc

    if not resolved.is_dir():
        raise ProjectRootError(f"Not a directory: '{resolved}'")
    return resolved


def resolve_project_root(script_path: Path) -> ProjectPaths:
    """Resolve the script's directory and its parent, the project root.

    Args:
        script_path: Location of the invoking script (e.g., ``tests/run``)

    Returns:
        The script directory and project root, both canonical and absolute

    Raises:
        ProjectRootError: If either directory cannot be resolved

    """
    script_dir = resolve_directory(script_path.parent)
    project_root = resolve_directory(script_dir / "..")
    return ProjectPaths(script_dir=script_dir, project_root=project_root)
