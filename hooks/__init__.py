"""Git hooks management."""

from .manager import (
    DirectoryCreationError,
    HookManager,
    HookManagerError,
    InvalidHookNameError,
    UnsupportedPlatformError,
    check_hooks_status,
    install_hooks,
    print_hooks,
    run_hooks,
)

__all__ = [
    "DirectoryCreationError",
    "HookManager",
    "HookManagerError",
    "InvalidHookNameError",
    "UnsupportedPlatformError",
    "check_hooks_status",
    "install_hooks",
    "print_hooks",
    "run_hooks",
]
