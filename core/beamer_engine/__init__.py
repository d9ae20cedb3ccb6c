"""
Beamer Engine - pandoc configuration for Beamer presentations.

This module provides:
- Presentation option models (themes, figures, includes)
- Highlight style registry and validation
- Resolution of options into pandoc arguments and figure options
- Full pandoc command assembly

Usage:
    from core.beamer_engine import PresentationOptions, BeamerFormatResolver

    resolver = BeamerFormatResolver()
    resolved = resolver.resolve(PresentationOptions(toc=True, theme="Madrid"))

    resolved.conversion_args        # args for pandoc
    resolved.figure_options         # forwarded to the figure stage
    resolved.clean_supporting_files # False when keep_tex=True

Key components:
- BeamerFormatResolver: Main resolver class
- HighlightRegistry: Supported highlight styles
- PackageResourceLocator: Bundled template lookup
- build_pandoc_command: argv assembly
"""

from .exceptions import BeamerFormatError, InvalidHighlightStyle
from .models import (
    ThemeChoice,
    IncludesSpec,
    FigureOptions,
    PresentationOptions,
    PandocOptions,
    ResolvedFormat,
)
from .highlight import DEFAULT_HIGHLIGHT_STYLES, HighlightRegistry, highlight_args
from .pandoc_args import (
    pandoc_path_arg,
    pandoc_variable_arg,
    includes_to_pandoc_args,
    from_rmarkdown,
)
from .resources import (
    DEFAULT_TEMPLATE,
    ResourceLocator,
    PackageResourceLocator,
    get_resource_locator,
)
from .resolver import BeamerFormatResolver, resolve, beamer_presentation
from .command import build_pandoc_command


__all__ = [
    # Errors
    'BeamerFormatError',
    'InvalidHighlightStyle',

    # Models
    'ThemeChoice',
    'IncludesSpec',
    'FigureOptions',
    'PresentationOptions',
    'PandocOptions',
    'ResolvedFormat',

    # Highlighting
    'DEFAULT_HIGHLIGHT_STYLES',
    'HighlightRegistry',
    'highlight_args',

    # Argument helpers
    'pandoc_path_arg',
    'pandoc_variable_arg',
    'includes_to_pandoc_args',
    'from_rmarkdown',

    # Resources
    'DEFAULT_TEMPLATE',
    'ResourceLocator',
    'PackageResourceLocator',
    'get_resource_locator',

    # Resolver
    'BeamerFormatResolver',
    'resolve',
    'beamer_presentation',
    'build_pandoc_command',
]


__version__ = '1.0.0'
