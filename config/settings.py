#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Settings - Centralized configuration management
"""

from pathlib import Path
from typing import List, Optional
from pydantic_settings import BaseSettings


# Base directory
BASE_DIR = Path(__file__).resolve().parent.parent


class Settings(BaseSettings):
    """Application settings"""

    # ========== Pandoc ==========
    pandoc_path: str = "pandoc"  # Executable placed at argv[0] of built commands

    # ========== Resources ==========
    # Override for the bundled templates directory (must contain rmd/beamer/default.tex)
    resource_dir: Optional[Path] = None

    # ========== Highlighting ==========
    # Extra style names accepted on top of the built-in set (JSON list in env, e.g. ["solarized"])
    extra_highlight_styles: List[str] = []

    # ========== Logging ==========
    log_level: str = "INFO"  # DEBUG | INFO | WARNING | ERROR
    log_file: Optional[Path] = None

    class Config:
        env_file = str(BASE_DIR / ".env")
        env_file_encoding = "utf-8"
        case_sensitive = False
        extra = "ignore"  # Allow extra fields from .env that aren't defined in model

    def get_resource_root(self) -> Optional[Path]:
        """Resolved resource override, or None to use the bundled directory."""
        if self.resource_dir is None:
            return None
        return Path(self.resource_dir).expanduser().resolve()

    def print_config(self):
        """Print configuration summary"""
        print("\n" + "="*70)
        print("CONFIGURATION")
        print("="*70)
        print(f"Pandoc:          {self.pandoc_path}")
        print(f"Resources:       {self.resource_dir or 'bundled'}")
        print(f"Extra Styles:    {', '.join(self.extra_highlight_styles) or 'none'}")
        print(f"Log Level:       {self.log_level}")
        print("="*70 + "\n")


# Global settings instance
settings = Settings()
