"""
Beamer Format Resolver

Turns PresentationOptions into the pandoc argument list, the figure
options for the graphics stage, and the clean-up flag. Pure: no I/O, no
shared mutable state.

Usage:
    from core.beamer_engine import resolve

    resolved = resolve(toc=True, theme="AnnArbor", highlight="zenburn")
    resolved.conversion_args   # ('--template', '.../default.tex', '--table-of-contents', ...)
    resolved.figure_options    # FigureOptions(fig_width=10.0, ...)
"""

from typing import Any, Callable, List, Mapping, Optional, Union

from config.logging_config import get_logger
from config.settings import settings

from .highlight import HighlightRegistry, highlight_args
from .models import (
    IncludesSpec,
    PandocOptions,
    PresentationOptions,
    ResolvedFormat,
    ThemeChoice,
)
from .pandoc_args import (
    from_rmarkdown,
    includes_to_pandoc_args,
    pandoc_path_arg,
    pandoc_variable_arg,
)
from .resources import DEFAULT_TEMPLATE, ResourceLocator, get_resource_locator

logger = get_logger(__name__)

# Option field -> Beamer variable name, in emission order
THEME_VARIABLES = (
    ("theme", "theme"),
    ("colortheme", "colortheme"),
    ("fonttheme", "fonttheme"),
)


def _as_options(options) -> PresentationOptions:
    if options is None:
        return PresentationOptions()
    if isinstance(options, PresentationOptions):
        return options
    return PresentationOptions.model_validate(options)


def default_highlight_registry() -> HighlightRegistry:
    registry = HighlightRegistry()
    if settings.extra_highlight_styles:
        registry = registry.with_styles(*settings.extra_highlight_styles)
    return registry


class BeamerFormatResolver:
    """
    Resolve presentation options into pandoc/figure configuration.

    Every collaborator is injectable; defaults come from settings.
    """

    def __init__(
        self,
        registry: Optional[HighlightRegistry] = None,
        locator: Optional[ResourceLocator] = None,
        includes_translator: Optional[Callable[[Optional[IncludesSpec]], List[str]]] = None,
        path_arg: Optional[Callable[[str], str]] = None,
    ):
        self.registry = registry or default_highlight_registry()
        self.locator = locator or get_resource_locator()
        self.path_arg = path_arg or pandoc_path_arg
        self.includes_translator = includes_translator or (
            lambda includes: includes_to_pandoc_args(includes, path_arg=self.path_arg)
        )

    def resolve(
        self, options: Optional[Union[PresentationOptions, Mapping[str, Any]]] = None
    ) -> ResolvedFormat:
        """Build the ResolvedFormat for ``options`` (a model, a mapping, or None for defaults)."""
        options = _as_options(options)
        args: List[str] = []

        args.extend(self._template_args(options.template))

        if options.toc:
            args.append("--table-of-contents")

        if options.slide_level is not None:
            args.extend(["--slide-level", str(options.slide_level)])

        if options.incremental:
            args.append("--incremental")

        for field_name, variable in THEME_VARIABLES:
            choice: ThemeChoice = getattr(options, field_name)
            if not choice.is_default:
                args.extend(pandoc_variable_arg(variable, choice.value))

        # Raises InvalidHighlightStyle before anything is returned
        if options.highlight is not None:
            self.registry.validate(options.highlight)
        args.extend(highlight_args(options.highlight))

        args.extend(self.includes_translator(options.includes))

        args.extend(options.pandoc_args)

        logger.debug(f"Resolved beamer args: {args}")

        return ResolvedFormat(
            conversion_args=tuple(args),
            figure_options=options.figure_options(),
            clean_supporting_files=not options.keep_tex,
            pandoc=PandocOptions(
                to="beamer",
                from_format=from_rmarkdown(implicit_figures=options.fig_caption),
                args=tuple(args),
                keep_tex=options.keep_tex,
            ),
        )

    def _template_args(self, template: Optional[str]) -> List[str]:
        if template is None:
            return []
        if template == "default":
            return ["--template", self.path_arg(self.locator.path_of(DEFAULT_TEMPLATE))]
        return ["--template", self.path_arg(template)]


def resolve(
    options: Optional[Union[PresentationOptions, Mapping[str, Any]]] = None,
    **overrides,
) -> ResolvedFormat:
    """
    Resolve with default collaborators.

    Keyword overrides are applied on top of ``options`` (or the defaults).
    """
    if overrides:
        if isinstance(options, PresentationOptions):
            base = options.model_dump(exclude_unset=True)
        else:
            base = dict(options or {})
        base.update(overrides)
        options = PresentationOptions(**base)
    return BeamerFormatResolver().resolve(options)


def beamer_presentation(**kwargs) -> ResolvedFormat:
    """Build a Beamer output format from keyword options."""
    return resolve(PresentationOptions(**kwargs))
