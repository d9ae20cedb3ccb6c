"""
Small helpers that turn values into pandoc argument tokens.
"""

import os
from typing import Callable, List, Optional

from .models import IncludesSpec


MARKDOWN_EXTENSIONS = (
    "markdown",
    "+autolink_bare_uris",
    "+ascii_identifiers",
    "+tex_math_single_backslash",
)


def pandoc_path_arg(path: str) -> str:
    """Normalize a filesystem path for use as a single pandoc argument."""
    path = os.path.expanduser(str(path))
    if os.sep == "\\":
        path = path.replace("\\", "/")
    return path


def pandoc_variable_arg(name: str, value: str) -> List[str]:
    return ["--variable", f"{name}={value}"]


def includes_to_pandoc_args(
    includes: Optional[IncludesSpec],
    path_arg: Callable[[str], str] = pandoc_path_arg,
) -> List[str]:
    """
    Expand content includes into pandoc flags.

    Order: before-body, in-header, after-body.
    """
    if includes is None:
        return []

    args: List[str] = []
    for path in includes.before_body:
        args.extend(["--include-before-body", path_arg(path)])
    for path in includes.in_header:
        args.extend(["--include-in-header", path_arg(path)])
    for path in includes.after_body:
        args.extend(["--include-after-body", path_arg(path)])
    return args


def from_rmarkdown(implicit_figures: bool = True) -> str:
    """Pandoc input format string for R Markdown flavoured markdown."""
    extensions = list(MARKDOWN_EXTENSIONS)
    if not implicit_figures:
        extensions.append("-implicit_figures")
    return "".join(extensions)
