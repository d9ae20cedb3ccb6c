"""
Assemble the full pandoc command line for a resolved Beamer format.

Only builds the argv list; running it is up to the caller.
"""

from pathlib import Path
from typing import List, Optional, Union

from config.settings import settings

from .models import ResolvedFormat
from .pandoc_args import pandoc_path_arg


def build_pandoc_command(
    resolved: ResolvedFormat,
    input_path: Union[str, Path],
    output_path: Union[str, Path],
    pandoc_path: Optional[str] = None,
) -> List[str]:
    """
    Build the pandoc argv for converting ``input_path`` to ``output_path``.

    Args:
        resolved: Result of BeamerFormatResolver.resolve()
        input_path: Markdown source
        output_path: Target file (.pdf, or .tex to stop at LaTeX)
        pandoc_path: Executable; defaults to settings.pandoc_path

    Returns:
        List of argument tokens, conversion args last.
    """
    pandoc = resolved.pandoc
    cmd = [
        pandoc_path or settings.pandoc_path,
        pandoc_path_arg(str(input_path)),
        "--to", pandoc.to,
        "--from", pandoc.from_format,
        "--output", pandoc_path_arg(str(output_path)),
    ]
    cmd.extend(pandoc.args)
    return cmd
