"""Configuration defaults for HOOKMAN."""

from pathlib import Path

DEFAULT_CONFIG_FILE = Path(".hookman.yaml")

__all__ = ["DEFAULT_CONFIG_FILE"]
