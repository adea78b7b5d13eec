"""
Expand files, directories, and glob masks into a deduplicated list of
absolute file paths.

Usage::

    from globpaths import ExpandOptions, expand_paths, is_mask

    files = expand_paths(["src/", "tests/**/*.py"], ExpandOptions(formats=[".py"]))
    is_mask("src/*.py")  # True
"""

from globpaths.errors import NoMatchError
from globpaths.expander import PathExpander, expand_paths
from globpaths.fs import Filesystem, LocalFilesystem
from globpaths.masks import is_mask
from globpaths.types import ExpandOptions, GlobOptions

__all__ = [
    "ExpandOptions",
    "Filesystem",
    "GlobOptions",
    "LocalFilesystem",
    "NoMatchError",
    "PathExpander",
    "expand_paths",
    "is_mask",
]
