"""
Beamer Engine Exceptions
"""

from typing import Iterable, Tuple


class BeamerFormatError(Exception):
    """Base exception for the Beamer format engine"""
    pass


class InvalidHighlightStyle(BeamerFormatError, ValueError):
    """Highlight style is not in the supported set"""
    def __init__(self, style: str, allowed: Iterable[str]):
        self.style = style
        self.allowed: Tuple[str, ...] = tuple(sorted(allowed))
        super().__init__(
            f"Unsupported highlight style {style!r}. "
            f"Allowed: {', '.join(self.allowed)}"
        )
