"""
Beamer Engine Pydantic Models

Option records consumed by the resolver and the records it produces.
All models are frozen.
"""

from typing import Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator


DEFAULT_SENTINEL = "default"


# ==================== THEMES ====================

class ThemeChoice(BaseModel):
    """
    Either "use the backend default" or a named theme.

    ThemeChoice.custom("default") is a theme literally called "default"
    and is emitted like any other name.
    """
    model_config = ConfigDict(frozen=True)

    use_default: bool = True
    value: Optional[str] = None

    @model_validator(mode="after")
    def check_value(self):
        if not self.use_default and self.value is None:
            raise ValueError("custom theme requires a value")
        return self

    @classmethod
    def default(cls) -> "ThemeChoice":
        return cls(use_default=True)

    @classmethod
    def custom(cls, value: str) -> "ThemeChoice":
        return cls(use_default=False, value=value)

    @property
    def is_default(self) -> bool:
        return self.use_default


def _coerce_theme(v):
    if v is None or v == DEFAULT_SENTINEL:
        return ThemeChoice.default()
    if isinstance(v, str):
        return ThemeChoice.custom(v)
    return v


# ==================== INCLUDES / FIGURES ====================

class IncludesSpec(BaseModel):
    """Files whose contents pandoc injects at fixed insertion points."""
    model_config = ConfigDict(frozen=True, extra="forbid")

    in_header: Tuple[str, ...] = ()
    before_body: Tuple[str, ...] = ()
    after_body: Tuple[str, ...] = ()

    @field_validator("in_header", "before_body", "after_body", mode="before")
    @classmethod
    def coerce_paths(cls, v):
        if v is None:
            return ()
        if isinstance(v, str):
            return (v,)
        return v


class FigureOptions(BaseModel):
    """Parameters forwarded unchanged to the figure rendering stage."""
    model_config = ConfigDict(frozen=True)

    fig_width: float = 10.0
    fig_height: float = 7.0
    fig_crop: bool = True
    dev: str = "pdf"

    def as_tuple(self) -> Tuple[float, float, bool, str]:
        return (self.fig_width, self.fig_height, self.fig_crop, self.dev)


# ==================== PRESENTATION OPTIONS ====================

class PresentationOptions(BaseModel):
    """User-facing options for a Beamer presentation."""
    model_config = ConfigDict(frozen=True, extra="forbid")

    toc: bool = Field(default=False, description="Table of contents (level 1 headers only)")
    slide_level: Optional[int] = Field(default=None, description="Heading level that defines slides; None lets pandoc infer it")
    incremental: bool = Field(default=False, description="Reveal bullets incrementally")

    fig_width: float = Field(default=10.0, description="Figure width in inches")
    fig_height: float = Field(default=7.0, description="Figure height in inches")
    fig_crop: bool = Field(default=True, description="Crop figures to content")
    fig_caption: bool = Field(default=False, description="Render figures with captions")
    dev: str = Field(default="pdf", description="Graphics device for figures")

    theme: ThemeChoice = Field(default_factory=ThemeChoice.default)
    colortheme: ThemeChoice = Field(default_factory=ThemeChoice.default)
    fonttheme: ThemeChoice = Field(default_factory=ThemeChoice.default)

    highlight: Optional[str] = Field(default="default", description="Highlight style, 'none' to disable")
    template: Optional[str] = Field(default="default", description="'default' for the bundled template, a path, or None")
    keep_tex: bool = Field(default=False, description="Keep intermediate LaTeX source")

    includes: Optional[IncludesSpec] = None
    pandoc_args: Tuple[str, ...] = ()

    @field_validator("theme", "colortheme", "fonttheme", mode="before")
    @classmethod
    def coerce_theme(cls, v):
        return _coerce_theme(v)

    @field_validator("pandoc_args", mode="before")
    @classmethod
    def coerce_pandoc_args(cls, v):
        if v is None:
            return ()
        if isinstance(v, str):
            return (v,)
        return v

    def figure_options(self) -> FigureOptions:
        return FigureOptions(
            fig_width=self.fig_width,
            fig_height=self.fig_height,
            fig_crop=self.fig_crop,
            dev=self.dev,
        )


# ==================== RESOLVED OUTPUT ====================

class PandocOptions(BaseModel):
    """What the conversion backend receives."""
    model_config = ConfigDict(frozen=True)

    to: str = "beamer"
    from_format: str
    args: Tuple[str, ...] = ()
    keep_tex: bool = False


class ResolvedFormat(BaseModel):
    """Output of BeamerFormatResolver.resolve()."""
    model_config = ConfigDict(frozen=True)

    conversion_args: Tuple[str, ...]
    figure_options: FigureOptions
    clean_supporting_files: bool
    pandoc: PandocOptions
