"""
Filesystem collaborators used by the expander: glob matching, file probing,
recursive listing and absolutization.

`Filesystem` is the seam; `LocalFilesystem` is the real implementation.
"""

from __future__ import annotations

import os
import stat
from typing import Any, Protocol

from wcmatch import glob

from globpaths.defaults import DEFAULT_GLOB_FLAGS
from globpaths.types import GlobOptions


class Filesystem(Protocol):
    def glob(self, pattern: str, options: GlobOptions) -> list[str]: ...

    def is_file(self, path: str) -> bool: ...

    def list_tree(self, path: str) -> list[str]: ...

    def absolute(self, path: str) -> str: ...


class LocalFilesystem:
    """Filesystem access backed by `wcmatch.glob` and `os`."""

    def glob(self, pattern: str, options: GlobOptions) -> list[str]:
        """
        Match `pattern`, returning paths in the order the engine yields them.

        The engine reports matches relative to `options.cwd`; they are joined
        back onto it so each result names a real path from the process cwd.
        """
        matches = glob.glob(pattern, **glob_kwargs(options))
        if options.cwd is None:
            return matches
        return [os.path.join(options.cwd, match) for match in matches]

    def is_file(self, path: str) -> bool:
        """
        True for a regular file (symlinks followed). Raises `FileNotFoundError`
        when `path` doesn't exist.
        """
        return stat.S_ISREG(os.stat(path).st_mode)

    def list_tree(self, path: str) -> list[str]:
        """
        All descendants of directory `path`, files and directories alike,
        sorted within each directory. Walk errors are raised, not skipped.
        """
        entries: list[str] = []
        for dirpath, dirnames, filenames in os.walk(path, onerror=_raise):
            dirnames.sort()
            for name in sorted(dirnames + filenames):
                entries.append(os.path.join(dirpath, name))
        return entries

    def absolute(self, path: str) -> str:
        return os.path.abspath(path)


def glob_kwargs(options: GlobOptions) -> dict[str, Any]:
    """
    Translate set `GlobOptions` fields into `wcmatch.glob.glob()` arguments.
    Unset fields contribute nothing.
    """
    explicit = options.explicit()
    flags = DEFAULT_GLOB_FLAGS
    kwargs: dict[str, Any] = {}

    if explicit.get("dot"):
        flags |= glob.DOTGLOB
    if explicit.get("follow_symlinks"):
        flags |= glob.FOLLOW
    if "case_sensitive" in explicit:
        flags |= glob.CASE if explicit["case_sensitive"] else glob.IGNORECASE
    if "ignore" in explicit:
        kwargs["exclude"] = list(explicit["ignore"])
    if "cwd" in explicit:
        kwargs["root_dir"] = explicit["cwd"]
    if "limit" in explicit:
        kwargs["limit"] = explicit["limit"]

    kwargs["flags"] = flags
    return kwargs


def _raise(error: OSError) -> None:
    raise error
