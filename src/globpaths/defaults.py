"""
Default settings for path expansion and the glob engine.
"""

from __future__ import annotations

from wcmatch import glob

# Upper bound on concurrent filesystem calls within one expansion pass.
DEFAULT_MAX_WORKERS: int = 8

# Flags always passed to the glob engine: `**`, `{a,b}` and extglob groups.
DEFAULT_GLOB_FLAGS: int = glob.GLOBSTAR | glob.BRACE | glob.EXTGLOB

# Name used for the ignore file (`.globpathsignore`) and config section.
TOOL_NAME: str = "globpaths"
