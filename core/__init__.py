"""Core modules for HOOKMAN."""

from .config_loader import ConfigLoadError, load_config, validate_config_file
from .formatters import FormatterFactory
from .log import configure_logging
from .models import (
    GIT_HOOK_NAMES,
    GIT_HOOKS,
    HookExecution,
    HooksConfig,
    HookStatus,
    WriteAction,
)

__all__ = [
    # Formatters
    "FormatterFactory",
    # Logging
    "configure_logging",
    # Models
    "GIT_HOOK_NAMES",
    "GIT_HOOKS",
    "HookExecution",
    "HooksConfig",
    "HookStatus",
    "WriteAction",
    # Loaders
    "ConfigLoadError",
    "load_config",
    "validate_config_file",
]
