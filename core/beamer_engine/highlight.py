"""
Syntax highlighting styles accepted by pandoc, and their argument mapping.

The supported set is data owned by a HighlightRegistry instance so callers
can extend it (see Settings.extra_highlight_styles) without touching the
resolver.
"""

from typing import FrozenSet, Iterable, List, Optional

from .exceptions import InvalidHighlightStyle


# ==================== CONSTANTS ====================

DEFAULT_STYLE = "default"
NO_HIGHLIGHT = "none"

DEFAULT_HIGHLIGHT_STYLES = (
    "default",
    "tango",
    "pygments",
    "kate",
    "monochrome",
    "espresso",
    "zenburn",
    "haddock",
)


class HighlightRegistry:
    """Closed set of highlight style names."""

    def __init__(self, styles: Optional[Iterable[str]] = None):
        names = set(DEFAULT_HIGHLIGHT_STYLES if styles is None else styles)
        # The two sentinels are always accepted
        names.update((DEFAULT_STYLE, NO_HIGHLIGHT))
        self._styles: FrozenSet[str] = frozenset(names)

    def supported_styles(self) -> FrozenSet[str]:
        return self._styles

    def with_styles(self, *extra: str) -> "HighlightRegistry":
        """Return a new registry that also accepts ``extra``."""
        return HighlightRegistry(self._styles.union(extra))

    def validate(self, style: str) -> str:
        if style not in self._styles:
            raise InvalidHighlightStyle(style, self._styles)
        return style

    def __contains__(self, style: object) -> bool:
        return style in self._styles

    def __repr__(self) -> str:
        return f"HighlightRegistry({sorted(self._styles)!r})"


def highlight_args(style: Optional[str]) -> List[str]:
    """
    Translate a validated style name into pandoc arguments.

    None and "default" leave pandoc's own default in place.
    """
    if style is None or style == DEFAULT_STYLE:
        return []
    if style == NO_HIGHLIGHT:
        return ["--no-highlight"]
    return [f"--highlight-style={style}"]
