"""Errors raised by path expansion."""

from __future__ import annotations


class NoMatchError(Exception):
    """A pattern matched no paths at all."""

    def __init__(self, pattern: str) -> None:
        self.pattern: str = pattern
        super().__init__(f"Cannot find files by mask {pattern}")
