"""Tests for core/beamer_engine/pandoc_args.py."""

import os

from core.beamer_engine.models import IncludesSpec
from core.beamer_engine.pandoc_args import (
    from_rmarkdown,
    includes_to_pandoc_args,
    pandoc_path_arg,
    pandoc_variable_arg,
)


class TestPandocPathArg:
    def test_plain_path_unchanged(self):
        assert pandoc_path_arg("/tmp/slides/template.tex") == "/tmp/slides/template.tex"

    def test_expands_home(self):
        expected = os.path.expanduser("~/t.tex")
        if os.sep == "\\":
            expected = expected.replace("\\", "/")
        assert pandoc_path_arg("~/t.tex") == expected

    def test_spaces_kept_in_one_token(self):
        assert pandoc_path_arg("/a dir/t.tex") == "/a dir/t.tex"


class TestVariableArg:
    def test_pair(self):
        assert pandoc_variable_arg("theme", "Madrid") == ["--variable", "theme=Madrid"]


class TestIncludes:
    def test_none(self):
        assert includes_to_pandoc_args(None) == []

    def test_order(self):
        spec = IncludesSpec(
            in_header=["h1.tex", "h2.tex"],
            before_body=["b.tex"],
            after_body=["a.tex"],
        )
        assert includes_to_pandoc_args(spec) == [
            "--include-before-body", "b.tex",
            "--include-in-header", "h1.tex",
            "--include-in-header", "h2.tex",
            "--include-after-body", "a.tex",
        ]

    def test_custom_path_arg(self):
        spec = IncludesSpec(after_body=["x.tex"])
        assert includes_to_pandoc_args(spec, path_arg=str.upper) == ["--include-after-body", "X.TEX"]


class TestFromRmarkdown:
    def test_implicit_figures(self):
        assert from_rmarkdown() == "markdown+autolink_bare_uris+ascii_identifiers+tex_math_single_backslash"

    def test_without_implicit_figures(self):
        assert from_rmarkdown(False).endswith("+tex_math_single_backslash-implicit_figures")
