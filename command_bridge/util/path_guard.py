import logging
from pathlib import Path
from typing import Optional

logger = logging.getLogger(__name__)


def resolve_within(path: str, root: Optional[str] = None) -> Path:
    """
    Resolve a caller-supplied path, optionally confined to a root directory.

    Without a root the path is returned unchanged, so the file commands can
    reach anything the process can. With a root, relative paths are taken
    relative to it and the resolved location (symlinks followed) must stay
    inside it.

    Args:
        path: Path supplied by the caller
        root: Optional sandbox directory

    Returns:
        Path to operate on

    Raises:
        PermissionError: If the resolved path escapes the root
    """
    if root is None:
        return Path(path)

    root_path = Path(root).resolve()
    candidate = (root_path / path).resolve()

    if candidate != root_path and root_path not in candidate.parents:
        logger.warning(f"Rejected path outside sandbox root {root_path}: {path}")
        raise PermissionError(f"Path '{path}' is outside the allowed root '{root_path}'")

    return candidate
