"""Configuration types for path expansion."""

from __future__ import annotations

import os
from dataclasses import dataclass, fields
from typing import Any

from globpaths.defaults import DEFAULT_MAX_WORKERS


@dataclass(frozen=True)
class ExpandOptions:
    """
    Options for turning matched paths into concrete files.

    `root=None` means matched paths are resolved against the current working
    directory at call time. `formats=None` disables extension filtering; each
    format is an extension with its leading dot (e.g. `".js"`), compared
    case-sensitively.
    """

    root: str | None = None
    formats: list[str] | None = None
    max_workers: int = DEFAULT_MAX_WORKERS

    def __post_init__(self) -> None:
        if isinstance(self.formats, str):
            raise TypeError(f"formats must be a list of extensions, got {self.formats!r}")

    def matches_formats(self, path: str) -> bool:
        """Check if `path` has one of the configured extensions."""
        if self.formats is None:
            return True
        _, ext = os.path.splitext(path)
        return ext in self.formats

    @property
    def effective_max_workers(self) -> int:
        return max(1, self.max_workers)


@dataclass(frozen=True)
class GlobOptions:
    """
    Options passed through to the glob engine.

    Every field is optional. `None` means "not set": the field is left out of
    the engine call entirely so the engine's own default applies.
    """

    ignore: list[str] | None = None
    cwd: str | None = None
    dot: bool | None = None
    follow_symlinks: bool | None = None
    case_sensitive: bool | None = None
    limit: int | None = None

    def explicit(self) -> dict[str, Any]:
        """Only the fields that were actually set."""
        values = {f.name: getattr(self, f.name) for f in fields(self)}
        return {name: value for name, value in values.items() if value is not None}

    def with_ignore(self, patterns: list[str]) -> GlobOptions:
        """Copy with `patterns` appended to `ignore`."""
        if not patterns:
            return self
        values = self.explicit()
        values["ignore"] = list(self.ignore or []) + patterns
        return GlobOptions(**values)

