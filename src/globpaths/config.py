"""
Settings for the `globpaths` command read from TOML.

A config is `.globpaths.toml`, `globpaths.toml`, or the `[tool.globpaths]`
table of a `pyproject.toml`, found by walking up from the working directory.
Keys may sit at the top level or inside any table (`[expand]`, `[glob]`);
values are checked against the expected type before they reach the CLI.
"""

from __future__ import annotations

import sys
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any, TypeVar

if sys.version_info >= (3, 11):
    import tomllib  # pyright: ignore[reportUnreachable]
else:
    import tomli as tomllib  # type: ignore[no-redef]  # pyright: ignore[reportUnreachable]


@dataclass
class GlobpathsConfig:
    """Settings from a config file. `None` means the key was absent."""

    root: str | None = None
    formats: list[str] | None = None
    max_workers: int | None = None
    ignore: list[str] | None = None
    dot: bool | None = None
    follow_symlinks: bool | None = None
    case_sensitive: bool | None = None


_CONFIG_FILENAMES = (".globpaths.toml", "globpaths.toml", "pyproject.toml")

_STR_KEYS = {"root"}
_STR_LIST_KEYS = {"formats", "ignore"}
_BOOL_KEYS = {"dot", "follow_symlinks", "case_sensitive"}
_INT_KEYS = {"max_workers"}


def find_config_file(start_dir: Path) -> Path | None:
    """
    Nearest config file at or above `start_dir`. Within one directory the
    names are tried in `_CONFIG_FILENAMES` order, and a `pyproject.toml`
    only counts when it has a `[tool.globpaths]` table.
    """
    for directory in (start_dir.resolve(), *start_dir.resolve().parents):
        for filename in _CONFIG_FILENAMES:
            candidate = directory / filename
            if not candidate.is_file():
                continue
            if filename != "pyproject.toml" or _pyproject_table(candidate) is not None:
                return candidate
    return None


def _pyproject_table(path: Path) -> dict[str, Any] | None:
    try:
        data = tomllib.loads(path.read_text())
    except (tomllib.TOMLDecodeError, OSError):
        return None
    table = data.get("tool", {}).get("globpaths")
    return table if isinstance(table, dict) else None


def load_config(config_path: Path) -> GlobpathsConfig:
    """
    Read `config_path`. A relative `root` names a directory next to the
    config file, not the working directory.

    Raises `ValueError` (or `tomllib.TOMLDecodeError`) for a bad file.
    """
    data = tomllib.loads(config_path.read_text())
    if config_path.name == "pyproject.toml":
        data = data.get("tool", {}).get("globpaths", {})

    config = parse_config(data, source=str(config_path))
    if config.root is not None:
        config.root = str(config_path.parent.resolve() / config.root)
    return config


def parse_config(data: dict[str, Any], source: str = "config") -> GlobpathsConfig:
    """
    Build a `GlobpathsConfig` from TOML data. Kebab-case keys map to the
    matching fields and unknown keys are ignored. A lone string is accepted
    where a list of strings is expected.
    """
    values: dict[str, Any] = {}
    for key, value in _flatten(data).items():
        name = key.replace("-", "_")
        if name in _STR_KEYS:
            values[name] = _check(key, value, str, "a string", source)
        elif name in _STR_LIST_KEYS:
            values[name] = _str_list(key, value, source)
        elif name in _BOOL_KEYS:
            values[name] = _check(key, value, bool, "true or false", source)
        elif name in _INT_KEYS:
            # TOML booleans are not integers here.
            if isinstance(value, bool):
                raise _type_error(key, "an integer", value, source)
            values[name] = _check(key, value, int, "an integer", source)

    for ext in values.get("formats") or []:
        if not ext.startswith("."):
            raise ValueError(f"{source}: each entry of 'formats' must start with '.', got {ext!r}")

    return GlobpathsConfig(**values)


def _flatten(data: dict[str, Any]) -> dict[str, Any]:
    flat: dict[str, Any] = {}
    for key, value in data.items():
        if isinstance(value, dict):
            flat.update(value)
        else:
            flat[key] = value
    return flat


def _check(key: str, value: Any, kind: type, expected: str, source: str) -> Any:
    if not isinstance(value, kind):
        raise _type_error(key, expected, value, source)
    return value


def _str_list(key: str, value: Any, source: str) -> list[str]:
    if isinstance(value, str):
        return [value]
    if not isinstance(value, list) or not all(isinstance(v, str) for v in value):
        raise _type_error(key, "a string or a list of strings", value, source)
    return list(value)


def _type_error(key: str, expected: str, value: Any, source: str) -> ValueError:
    return ValueError(f"{source}: '{key}' must be {expected}, got {value!r}")


_T = TypeVar("_T")


def merge_cli_with_config(
    cli_opts: _T,
    config: GlobpathsConfig | None,
    explicit_flags: set[str],
) -> _T:
    """
    Fill options the user didn't pass on the command line from `config`.
    Names in `explicit_flags` keep their command-line value.
    """
    if config is None:
        return cli_opts

    for cfg_field in fields(GlobpathsConfig):
        value = getattr(config, cfg_field.name)
        if value is None or cfg_field.name in explicit_flags:
            continue
        if hasattr(cli_opts, cfg_field.name):
            setattr(cli_opts, cfg_field.name, value)

    return cli_opts
