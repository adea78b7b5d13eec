"""Tool-specific ignore file handling (`.globpathsignore`)."""

from __future__ import annotations

import logging
from pathlib import Path

from globpaths.defaults import TOOL_NAME

logger = logging.getLogger(__name__)


def _read_ignore_file(path: Path) -> list[str] | None:
    """
    Read ignore patterns from `path`, skipping blank lines and `#` comments.
    Returns `None` if the file is missing, unreadable, not UTF-8, or has no patterns.
    """
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        logger.debug("Skipping ignore file %s: %s", path, e)
        return None
    lines = [line.strip() for line in text.splitlines()]
    patterns = [line for line in lines if line and not line.startswith("#")]
    return patterns or None


def find_ignore_file(start_dir: Path, tool_name: str = TOOL_NAME) -> Path | None:
    """
    Walk up from `start_dir` looking for `.{tool_name}ignore`. Returns the
    first one found, or `None`.
    """
    ignore_name = f".{tool_name}ignore"
    current = start_dir.resolve()
    while True:
        candidate = current / ignore_name
        if candidate.is_file():
            return candidate
        parent = current.parent
        if parent == current:
            return None
        current = parent


def load_ignore_patterns(start_dir: Path, tool_name: str = TOOL_NAME) -> list[str]:
    """
    Patterns from the nearest `.{tool_name}ignore`, in glob engine syntax.
    Empty if there is none.
    """
    ignore_file = find_ignore_file(start_dir, tool_name)
    if ignore_file is None:
        return []
    patterns = _read_ignore_file(ignore_file) or []
    logger.info("Loaded %d ignore pattern(s) from %s", len(patterns), ignore_file)
    return patterns
