#!/usr/bin/env python3
"""
globpaths: Expand files, directories, and glob masks into absolute file paths

Common usage:
  globpaths 'src/**/*.py'
  globpaths src/ tests/ --format .py
  globpaths --root ~/project 'docs/*.md' README.md
  globpaths --is-mask 'src/*.py' setup.py

Options not given on the command line are read from `.globpaths.toml`,
`globpaths.toml`, or `[tool.globpaths]` in `pyproject.toml`.
"""

from __future__ import annotations

import argparse
import importlib.metadata
import logging
import sys
from dataclasses import dataclass
from pathlib import Path

from globpaths.config import find_config_file, load_config, merge_cli_with_config
from globpaths.defaults import DEFAULT_MAX_WORKERS
from globpaths.errors import NoMatchError
from globpaths.expander import PathExpander
from globpaths.ignore import load_ignore_patterns
from globpaths.masks import is_mask
from globpaths.types import ExpandOptions, GlobOptions

logger = logging.getLogger(__name__)


@dataclass
class Options:
    """Command-line options for the globpaths tool."""

    patterns: list[str]
    # Expansion options
    root: str | None
    formats: list[str] | None
    max_workers: int | None
    # Glob engine options
    ignore: list[str] | None
    dot: bool | None
    follow_symlinks: bool | None
    case_sensitive: bool | None
    use_ignore_file: bool
    # Modes
    is_mask: bool
    verbose: int
    version: bool

    def expand_options(self) -> ExpandOptions:
        # `root` is applied once, as the glob cwd; matches come back already
        # joined onto it.
        return ExpandOptions(
            formats=self.formats,
            max_workers=self.max_workers if self.max_workers is not None else DEFAULT_MAX_WORKERS,
        )

    def glob_options(self) -> GlobOptions:
        return GlobOptions(
            ignore=self.ignore,
            cwd=self.root,
            dot=self.dot,
            follow_symlinks=self.follow_symlinks,
            case_sensitive=self.case_sensitive,
        )


# Options that a config file may supply when the flag isn't given.
_CONFIGURABLE = (
    "root",
    "formats",
    "max_workers",
    "ignore",
    "dot",
    "follow_symlinks",
    "case_sensitive",
)


def _parse_args(args: list[str] | None = None) -> tuple[Options, set[str]]:
    """
    Parse command-line arguments.

    Returns `(options, explicit_flags)`. Configurable options default to
    `None`, so `explicit_flags` is exactly the set of those the user passed.
    """
    module_doc = __doc__ or ""
    doc_parts = module_doc.split("\n\n")
    description = doc_parts[0]
    epilog = "\n\n".join(doc_parts[1:])

    parser = argparse.ArgumentParser(
        prog="globpaths",
        description=description,
        epilog=epilog,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "patterns",
        nargs="*",
        type=str,
        default=[],
        help="Files, directories, or glob masks to expand",
    )
    parser.add_argument(
        "--root",
        type=str,
        default=None,
        metavar="DIR",
        help="Match patterns inside this directory (default: current directory)",
    )
    parser.add_argument(
        "-f",
        "--format",
        action="append",
        dest="formats",
        default=None,
        metavar="EXT",
        help="Only keep files with this extension, including the dot (e.g. '.py'). "
        "Can be repeated",
    )
    parser.add_argument(
        "--ignore",
        action="append",
        default=None,
        metavar="PATTERN",
        help="Exclude matches of this glob pattern. Can be repeated",
    )
    parser.add_argument(
        "--dot",
        action="store_true",
        default=None,
        help="Let wildcards match names starting with '.'",
    )
    parser.add_argument(
        "--follow-symlinks",
        action="store_true",
        dest="follow_symlinks",
        default=None,
        help="Follow symlinked directories when matching '**'",
    )
    case_group = parser.add_mutually_exclusive_group()
    case_group.add_argument(
        "--case-sensitive",
        action="store_const",
        const=True,
        dest="case_sensitive",
        default=None,
        help="Match patterns case-sensitively",
    )
    case_group.add_argument(
        "--ignore-case",
        action="store_const",
        const=False,
        dest="case_sensitive",
        help="Match patterns case-insensitively",
    )
    parser.add_argument(
        "--max-workers",
        type=int,
        dest="max_workers",
        default=None,
        metavar="N",
        help=f"Maximum concurrent filesystem calls (default: {DEFAULT_MAX_WORKERS})",
    )
    parser.add_argument(
        "--no-ignore-file",
        action="store_true",
        dest="no_ignore_file",
        help="Do not read patterns from .globpathsignore",
    )
    parser.add_argument(
        "--is-mask",
        action="store_true",
        dest="is_mask",
        help="Print whether each pattern is a glob mask ('true'/'false') instead of expanding",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="count",
        default=0,
        help="Log progress to stderr (repeat for debug output)",
    )
    parser.add_argument(
        "--version",
        action="store_true",
        help="Show version information and exit",
    )
    opts = parser.parse_args(args)

    explicit_flags = {name for name in _CONFIGURABLE if getattr(opts, name) is not None}

    return (
        Options(
            patterns=opts.patterns,
            root=opts.root,
            formats=opts.formats,
            max_workers=opts.max_workers,
            ignore=opts.ignore,
            dot=opts.dot,
            follow_symlinks=opts.follow_symlinks,
            case_sensitive=opts.case_sensitive,
            use_ignore_file=not opts.no_ignore_file,
            is_mask=opts.is_mask,
            verbose=opts.verbose,
            version=opts.version,
        ),
        explicit_flags,
    )


def _configure_logging(verbose: int) -> None:
    level = logging.WARNING
    if verbose == 1:
        level = logging.INFO
    elif verbose > 1:
        level = logging.DEBUG
    logging.basicConfig(level=level, format="%(levelname)s: %(name)s: %(message)s")


def _expand(options: Options) -> list[str]:
    """Build expansion settings from options and the ignore file, then expand."""
    glob_opts = options.glob_options()
    if options.use_ignore_file:
        start_dir = Path(options.root) if options.root else Path.cwd()
        glob_opts = glob_opts.with_ignore(load_ignore_patterns(start_dir))

    expander = PathExpander(options.expand_options(), glob_opts)
    return expander.expand(options.patterns)


def main(args: list[str] | None = None) -> int:
    """
    Main entry point for the globpaths CLI.

    Args:
        args: Command-line arguments (uses sys.argv if None)

    Returns:
        Exit code (0 for success, non-zero for errors)
    """
    options, explicit_flags = _parse_args(args)
    _configure_logging(options.verbose)

    if options.version:
        try:
            version = importlib.metadata.version("globpaths")
            print(f"v{version}")
        except importlib.metadata.PackageNotFoundError:
            print("unknown (package not installed)")
        return 0

    if not options.patterns:
        print(
            "Error: No input specified. Provide files, directories, or glob masks"
            " (use '.' for current directory, --help for more options).",
            file=sys.stderr,
        )
        return 1

    if options.is_mask:
        for pattern in options.patterns:
            print("true" if is_mask(pattern) else "false")
        return 0

    try:
        config_path = find_config_file(Path.cwd())
        if config_path:
            logger.info("Using config file %s", config_path)
            merge_cli_with_config(options, load_config(config_path), explicit_flags)

        paths = _expand(options)
    except NoMatchError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    except OSError as e:
        # Filesystem errors (missing path, permission denied) and unreadable config.
        print(f"Error: {e}", file=sys.stderr)
        return 1
    except ValueError as e:
        # Includes malformed TOML (TOMLDecodeError subclasses ValueError).
        print(f"Error: {e}", file=sys.stderr)
        return 1

    for path in paths:
        print(path)
    return 0


if __name__ == "__main__":
    sys.exit(main())
