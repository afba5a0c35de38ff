"""Configuration loading and validation for issuewarden runs."""

from __future__ import annotations

from issuewarden.config.loader import build_config, load_config
from issuewarden.config.model import WardenConfig
from issuewarden.config.validator import validate_config_file

__all__ = [
    "WardenConfig",
    "build_config",
    "load_config",
    "validate_config_file",
]
