"""
PathExpander: main entry point for path expansion.

Resolves a mix of files, directories, and glob masks into a deduplicated list
of absolute file paths, in input order, optionally filtered by extension.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Callable, Iterable, Sequence
from concurrent.futures import FIRST_EXCEPTION, Future, ThreadPoolExecutor, wait
from typing import TypeVar

from globpaths.errors import NoMatchError
from globpaths.fs import Filesystem, LocalFilesystem
from globpaths.types import ExpandOptions, GlobOptions

logger = logging.getLogger(__name__)

_T = TypeVar("_T")
_R = TypeVar("_R")


class PathExpander:
    """
    Expands path patterns in two passes.

    Pass 1 matches every pattern with the glob engine; a pattern with no
    matches fails the whole call with `NoMatchError`. Pass 2 turns each
    matched path into files: a file stays as-is, a directory becomes every
    file beneath it. Both passes keep input order and drop repeats.
    """

    def __init__(
        self,
        expand_opts: ExpandOptions | None = None,
        glob_opts: GlobOptions | None = None,
        fs: Filesystem | None = None,
    ) -> None:
        self._expand_opts: ExpandOptions = expand_opts or ExpandOptions()
        self._glob_opts: GlobOptions = glob_opts or GlobOptions()
        self._fs: Filesystem = fs or LocalFilesystem()

    def expand(self, patterns: str | Sequence[str]) -> list[str]:
        """
        Expand `patterns` (one pattern or a sequence of them) into absolute
        file paths. Errors from the filesystem propagate unchanged.
        """
        if isinstance(patterns, str):
            patterns = [patterns]
        patterns = list(patterns)

        matched = self._process(patterns, self._match)
        logger.debug("Matched %d path(s) from %d pattern(s)", len(matched), len(patterns))

        # Read the cwd once so every path in this call shares the same root.
        root = self._expand_opts.root or os.getcwd()
        result = self._process(matched, lambda path: self._expand_path(path, root))
        logger.debug("Expanded to %d file(s)", len(result))
        return result

    def _process(self, items: list[_T], fn: Callable[[_T], list[str]]) -> list[str]:
        """Run `fn` over `items` concurrently, then flatten and dedupe in input order."""
        chunks = _map_ordered(fn, items, self._expand_opts.effective_max_workers)
        return _unique(path for chunk in chunks for path in chunk)

    def _match(self, pattern: str) -> list[str]:
        paths = self._fs.glob(pattern, self._glob_opts)
        if not paths:
            raise NoMatchError(pattern)
        return list(paths)

    def _expand_path(self, path: str, root: str) -> list[str]:
        base = os.path.normpath(os.path.join(root, path))

        if self._fs.is_file(base):
            files = [base]
        else:
            files = [p for p in self._fs.list_tree(base) if self._fs.is_file(p)]

        return [
            self._fs.absolute(f) for f in files if self._expand_opts.matches_formats(f)
        ]


def expand_paths(
    patterns: str | Sequence[str],
    expand_opts: ExpandOptions | None = None,
    glob_opts: GlobOptions | None = None,
) -> list[str]:
    """
    Expand files, directories and glob masks into a deduplicated list of
    absolute file paths.

    Raises `NoMatchError` if any pattern matches nothing.
    """
    return PathExpander(expand_opts, glob_opts).expand(patterns)


def _map_ordered(fn: Callable[[_T], _R], items: list[_T], max_workers: int) -> list[_R]:
    """
    Apply `fn` to each item on a bounded thread pool and return results in
    item order. On the first failure, pending calls are cancelled and the
    failure from the earliest item is raised.
    """
    if not items:
        return []
    if max_workers == 1 or len(items) == 1:
        return [fn(item) for item in items]

    with ThreadPoolExecutor(max_workers=min(max_workers, len(items))) as ex:
        futures: list[Future[_R]] = [ex.submit(fn, item) for item in items]
        _, not_done = wait(futures, return_when=FIRST_EXCEPTION)
        for f in not_done:
            f.cancel()
        # Calls already running can't be cancelled; let them settle so the
        # earliest failure wins regardless of completion order.
        wait(futures)
        for f in futures:
            error = None if f.cancelled() else f.exception()
            if error is not None:
                raise error
        return [f.result() for f in futures]


def _unique(paths: Iterable[str]) -> list[str]:
    """Drop repeated paths, keeping first occurrences."""
    return list(dict.fromkeys(paths))
