"""Thin filesystem and numeric helpers."""

import os
import re
import shutil
from pathlib import Path
from typing import Any, Union

from primval.logging import get_logger

logger = get_logger(__name__)

_PATH_SEPARATORS = re.compile(r"[\0\x0b\n\r/\\]+")


def path_join(*paths: Union[str, Path]) -> str:
    """Join path components with the platform separator.

    Runs of slashes, backslashes and stray control characters (NUL, vertical
    tab, CR, LF) collapse into a single ``os.sep``.

    Examples:
        >>> path_join("abc///", "/def") == os.sep.join(["abc", "def"])
        True
    """
    return _PATH_SEPARATORS.sub(
        lambda _: os.sep,
        "/".join(str(p) for p in paths),
    )


def clamp(value: Any, minimum: Any, maximum: Any) -> Any:
    """Limit ``value`` to ``[minimum, maximum]``. None is returned as is."""
    if value is None:
        return None
    return min(max(value, minimum), maximum)


def rmdir_recursive(path: Union[str, Path]) -> None:
    """Remove a directory along with all its files and subdirectories."""
    logger.debug(f"Removing directory tree {path}")
    shutil.rmtree(path)
