"""
HOOKMAN - Core Data Models
Constantes e estruturas de dados dos git hooks gerenciados.
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Dict, Any
from enum import Enum


# =============================================================================
# Constants
# =============================================================================

SHEBANG = "#!/bin/sh"

# Hooks reconhecidos pelo git (lado cliente e servidor)
GIT_HOOKS = frozenset({
    "applypatch-msg",
    "commit-msg",
    "fsmonitor-watchman",
    "post-update",
    "pre-applypatch",
    "pre-commit",
    "pre-merge-commit",
    "pre-push",
    "pre-rebase",
    "pre-receive",
    "prepare-commit-msg",
    "push-to-checkout",
    "update",
})

GIT_HOOK_NAMES = tuple(sorted(GIT_HOOKS))

# owner read + write + execute
HOOK_FILE_PERMISSIONS = 0o700


# =============================================================================
# Enums
# =============================================================================

class WriteAction(str, Enum):
    """Resultado da escrita de um hook."""
    WRITTEN = "written"
    UNCHANGED = "unchanged"


# =============================================================================
# Configuration
# =============================================================================

@dataclass
class HooksConfig:
    """Hooks declarados pelo usuário (nome do hook -> comandos)."""
    hooks: Dict[str, str] = field(default_factory=dict)
    skip: bool = False
    source_file: str = "unknown"

    @property
    def total_hooks(self) -> int:
        """Total de hooks declarados."""
        return len(self.hooks)


# =============================================================================
# Execution Result
# =============================================================================

@dataclass
class HookExecution:
    """Resultado da execução de teste de um hook."""
    hook_name: str
    exit_code: int
    output: List[str] = field(default_factory=list)

    @property
    def succeeded(self) -> bool:
        return self.exit_code == 0

    @property
    def result_label(self) -> str:
        """SUCCESS ou ERROR, como exibido no banner de conclusão."""
        return "SUCCESS" if self.succeeded else "ERROR"

    def to_dict(self) -> Dict[str, Any]:
        return {
            "hook": self.hook_name,
            "exit_code": self.exit_code,
            "result": self.result_label,
            "output": self.output,
        }


# =============================================================================
# Hook Status
# =============================================================================

@dataclass
class HookStatus:
    """Estado de um hook instalado em .git/hooks."""
    name: str
    path: Path
    executable: bool

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "path": str(self.path),
            "executable": self.executable,
        }


# =============================================================================
# Exports
# =============================================================================

__all__ = [
    # Constants
    "SHEBANG",
    "GIT_HOOKS",
    "GIT_HOOK_NAMES",
    "HOOK_FILE_PERMISSIONS",

    # Enums
    "WriteAction",

    # Models
    "HooksConfig",
    "HookExecution",
    "HookStatus",
]
