"""Tests for core/beamer_engine/resources.py — bundled resource lookup."""

from pathlib import Path
from unittest.mock import patch

from core.beamer_engine.resources import (
    DEFAULT_TEMPLATE,
    TEMPLATES_DIR,
    PackageResourceLocator,
    get_resource_locator,
)


class TestPackageResourceLocator:
    def test_bundled_template_exists(self):
        path = Path(PackageResourceLocator().path_of(DEFAULT_TEMPLATE))
        assert path.is_absolute()
        assert path.is_file()
        assert "\\usetheme{$theme$}" in path.read_text(encoding="utf-8")

    def test_templates_dir_separate_from_module(self):
        import core.beamer_engine.resources as resources_module

        assert TEMPLATES_DIR.name == "templates"
        assert TEMPLATES_DIR.parent == Path(resources_module.__file__).resolve().parent
        assert not (TEMPLATES_DIR.parent / "resources").exists()

    def test_override_root(self, tmp_path):
        locator = PackageResourceLocator(tmp_path)
        assert locator.path_of("rmd/beamer/default.tex") == str(tmp_path.resolve() / "rmd" / "beamer" / "default.tex")

    def test_lookup_creates_nothing(self, tmp_path):
        PackageResourceLocator(tmp_path).path_of("rmd/beamer/default.tex")
        assert list(tmp_path.iterdir()) == []

    def test_idempotent(self):
        locator = PackageResourceLocator()
        assert locator.path_of(DEFAULT_TEMPLATE) == locator.path_of(DEFAULT_TEMPLATE)


class TestGetResourceLocator:
    def test_uses_bundle_by_default(self):
        with patch("core.beamer_engine.resources.settings") as mock_settings:
            mock_settings.get_resource_root.return_value = None
            assert get_resource_locator().root == TEMPLATES_DIR

    def test_honors_settings_override(self, tmp_path):
        with patch("core.beamer_engine.resources.settings") as mock_settings:
            mock_settings.get_resource_root.return_value = tmp_path
            assert get_resource_locator().root == tmp_path.resolve()
