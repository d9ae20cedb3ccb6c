"""
Locating files bundled with the engine (templates).

Lookups are read-only: paths are computed, never created or checked.
"""

from abc import ABC, abstractmethod
from pathlib import Path
from typing import Optional, Union

from config.settings import settings


TEMPLATES_DIR = Path(__file__).resolve().parent / "templates"

DEFAULT_TEMPLATE = "rmd/beamer/default.tex"


class ResourceLocator(ABC):
    """Maps a bundle-relative name to an absolute path."""

    @abstractmethod
    def path_of(self, relative: str) -> str:
        pass


class PackageResourceLocator(ResourceLocator):
    """Resolves against the package's templates/ directory, or an override root."""

    def __init__(self, root: Optional[Union[str, Path]] = None):
        self.root = Path(root).expanduser().resolve() if root else TEMPLATES_DIR

    def path_of(self, relative: str) -> str:
        return str(self.root.joinpath(*relative.split("/")))

    def __repr__(self) -> str:
        return f"PackageResourceLocator(root={str(self.root)!r})"


def get_resource_locator() -> ResourceLocator:
    """Locator honoring settings.resource_dir."""
    return PackageResourceLocator(settings.get_resource_root())
