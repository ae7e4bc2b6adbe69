"""
HOOKMAN - Git Hooks Manager
Escreve, lista, imprime e executa os git hooks em .git/hooks.
"""

from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional, Protocol
import os
import platform
import re
import shlex
import stat
import subprocess
import threading

from ..core.models import (
    GIT_HOOKS,
    GIT_HOOK_NAMES,
    HOOK_FILE_PERMISSIONS,
    SHEBANG,
    HookExecution,
    HooksConfig,
    HookStatus,
    WriteAction,
)


# =============================================================================
# Exceptions
# =============================================================================

class HookManagerError(Exception):
    """Base para erros do HookManager."""
    pass


class InvalidHookNameError(HookManagerError):
    """Nome informado não é um git hook."""

    def __init__(self, hook_name: str):
        self.hook_name = hook_name
        super().__init__(
            f"`{hook_name}` não é um git hook. "
            f"Hooks disponíveis: {', '.join(GIT_HOOK_NAMES)}"
        )


class DirectoryCreationError(HookManagerError):
    """Não foi possível criar o diretório de hooks."""

    def __init__(self, path: Path):
        self.path = path
        super().__init__(f"Não foi possível criar o diretório {path}")


class UnsupportedPlatformError(HookManagerError):
    """Execução de hooks indisponível nesta plataforma."""
    pass


# =============================================================================
# Helpers
# =============================================================================

class HookLogger(Protocol):
    """Qualquer objeto com info(), por exemplo logging.Logger."""

    def info(self, msg: str) -> Any:
        ...


_REPEATED_SPACES = re.compile(r" {2,}")


def is_posix_platform() -> bool:
    """True se a plataforma suporta permissões POSIX e não é Windows."""
    return os.name == "posix" and "windows" not in platform.system().lower()


def _supports_posix_permissions() -> bool:
    return os.name == "posix"


# =============================================================================
# Hook Manager Class
# =============================================================================

class HookManager:
    """
    Gerencia os git hooks de um repositório.

    Todos os caminhos são relativos a ``repo_path`` (por padrão, o diretório
    de trabalho atual): ``.git`` e ``.git/hooks/<hook>``.
    """

    def __init__(self, log: HookLogger, repo_path: Optional[Path] = None):
        """
        Args:
            log: Destino das mensagens (precisa apenas de info())
            repo_path: Raiz do repositório (default: diretório atual)
        """
        self.log = log
        self.repo_path = Path(repo_path) if repo_path is not None else Path()
        self.git_path = self.repo_path / ".git"
        self.hooks_path = self.git_path / "hooks"

    # -------------------------------------------------------------------------
    # Validation
    # -------------------------------------------------------------------------

    @staticmethod
    def validate_hook_names(hooks: Mapping[str, str]) -> None:
        """
        Verifica que todos os nomes informados são git hooks válidos.

        Raises:
            InvalidHookNameError: no primeiro nome desconhecido
        """
        for hook_name in hooks:
            if hook_name not in GIT_HOOKS:
                raise InvalidHookNameError(hook_name)

    def is_git_repository(self) -> bool:
        """Verifica se o diretório é a raiz de um repositório git."""
        return self.git_path.exists()

    # -------------------------------------------------------------------------
    # Filesystem
    # -------------------------------------------------------------------------

    def ensure_hooks_directory(self) -> None:
        """
        Cria .git/hooks se ainda não existir.

        Raises:
            DirectoryCreationError: se o diretório não puder ser criado
        """
        if self.hooks_path.is_dir():
            return

        try:
            self.hooks_path.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise DirectoryCreationError(self.hooks_path) from e

        self.log.info(f"Diretório {self.hooks_path} criado")

    def hook_path(self, hook_name: str) -> Path:
        """Caminho do arquivo do hook (o nome precisa ser um git hook)."""
        if hook_name not in GIT_HOOKS:
            raise InvalidHookNameError(hook_name)
        return self.hooks_path / hook_name

    def list_installed_hooks(self) -> List[Path]:
        """Lista os arquivos de hooks existentes em .git/hooks."""
        return [
            self.hooks_path / name
            for name in GIT_HOOK_NAMES
            if (self.hooks_path / name).exists()
        ]

    def write_hook(self, hook_name: str, hook_value: str) -> WriteAction:
        """
        Escreve o arquivo do hook.

        O conteúdo é o shebang seguido dos comandos, com toda sequência de
        dois ou mais espaços removida (formato legado, compatível com hooks
        já instalados). Se o arquivo já tiver exatamente esse conteúdo, nada
        é escrito.

        Args:
            hook_name: Nome do hook
            hook_value: Comandos do hook

        Returns:
            WriteAction.WRITTEN ou WriteAction.UNCHANGED

        Raises:
            OSError: se o arquivo não puder ser escrito
        """
        hook_path = self.hook_path(hook_name)
        full_hook_value = SHEBANG + "\n" + _REPEATED_SPACES.sub("", hook_value)

        if hook_path.exists() and hook_path.read_bytes() == full_hook_value.encode("utf-8"):
            self.log.info(f"O hook `{hook_name}` não mudou, pulando")
            return WriteAction.UNCHANGED

        self.log.info(f"Escrevendo o hook `{hook_name}`")
        with open(hook_path, "w", encoding="utf-8", newline="") as f:
            f.write(full_hook_value)

        if _supports_posix_permissions():
            current = stat.S_IMODE(hook_path.stat().st_mode)
            if current & HOOK_FILE_PERMISSIONS != HOOK_FILE_PERMISSIONS:
                hook_path.chmod(HOOK_FILE_PERMISSIONS)

        return WriteAction.WRITTEN

    def read_hook(self, hook_name: str) -> Optional[str]:
        """
        Lê o conteúdo do hook.

        Bytes que não formam UTF-8 válido são substituídos por U+FFFD.

        Returns:
            Conteúdo do arquivo ou None se o hook não existir
        """
        hook_path = self.hook_path(hook_name)
        if not hook_path.exists():
            return None

        with open(hook_path, "r", encoding="utf-8", errors="replace", newline="") as f:
            return f.read()

    def print_hook(self, hook_name: str) -> bool:
        """
        Imprime o conteúdo do hook no log.

        Returns:
            True se o hook existia
        """
        hook_value = self.read_hook(hook_name)
        if hook_value is None:
            return False

        self.log.info(
            f"`{hook_name}` -> Os seguintes comandos serão executados:\n{hook_value}"
        )
        return True

    # -------------------------------------------------------------------------
    # Execution
    # -------------------------------------------------------------------------

    def execute_hook(self, hook_name: str) -> bool:
        """
        Executa o hook, enviando o stdout para o log.

        Returns:
            True se o hook existia

        Raises:
            UnsupportedPlatformError: fora de plataformas POSIX (ex: Windows)
        """
        return self.run_hook(hook_name) is not None

    def run_hook(self, hook_name: str) -> Optional[HookExecution]:
        """
        Executa o hook com ``sh -c`` e espera o processo terminar.

        Uma thread auxiliar lê o stdout do processo linha a linha enquanto
        esta espera o término. A thread é finalizada (join) antes do exit code
        ser registrado, então toda a saída aparece antes do banner final.
        Não há timeout; se a espera for interrompida (KeyboardInterrupt) o
        processo filho não é encerrado.

        Returns:
            HookExecution, ou None se o hook não existir

        Raises:
            UnsupportedPlatformError: fora de plataformas POSIX (ex: Windows)
            OSError: se o processo não puder ser iniciado
        """
        if not is_posix_platform():
            raise UnsupportedPlatformError(
                "Parece que você usa Windows: a execução de teste dos hooks "
                "não está disponível nesta plataforma."
            )

        hook_path = self.hook_path(hook_name)
        if not hook_path.exists():
            return None

        self.log.info(f">>>>> Executando o hook `{hook_name}` <<<<<")

        process = subprocess.Popen(
            ["sh", "-c", shlex.quote(str(hook_path))],
            stdout=subprocess.PIPE,
            encoding="utf-8",
            errors="replace",
        )

        output: List[str] = []
        drainer = threading.Thread(
            target=self._drain_output,
            args=(process.stdout, output),
            name=f"hookman-{hook_name}-stdout",
            daemon=True,
        )
        drainer.start()

        exit_code = process.wait()
        drainer.join()
        process.stdout.close()

        execution = HookExecution(hook_name=hook_name, exit_code=exit_code, output=output)
        self.log.info(f"Exit code is {exit_code}")
        self.log.info(
            f">>>>> O hook `{hook_name}` foi executado com o resultado "
            f"{execution.result_label} <<<<<"
        )
        return execution

    def _drain_output(self, stream, output: List[str]) -> None:
        for line in stream:
            line = line.rstrip("\n")
            output.append(line)
            self.log.info(line)

    # -------------------------------------------------------------------------
    # Status
    # -------------------------------------------------------------------------

    def status(self) -> List[HookStatus]:
        """Retorna o estado de cada hook instalado."""
        return [
            HookStatus(
                name=path.name,
                path=path,
                executable=os.access(path, os.X_OK),
            )
            for path in self.list_installed_hooks()
        ]


# =============================================================================
# Helper Functions
# =============================================================================

def install_hooks(manager: HookManager, config: HooksConfig) -> Dict[str, WriteAction]:
    """
    Instala os hooks declarados na configuração.

    Args:
        manager: HookManager do repositório
        config: Hooks declarados

    Returns:
        Dict {hook: WriteAction}; vazio se nada foi instalado

    Raises:
        InvalidHookNameError: se algum nome não for um git hook
        DirectoryCreationError: se .git/hooks não puder ser criado
    """
    if config.skip:
        manager.log.info("Instalação de hooks desabilitada (skip), pulando")
        return {}

    if not manager.is_git_repository():
        manager.log.info(
            f"{manager.repo_path.resolve()} não é um repositório git, hooks não instalados"
        )
        return {}

    manager.validate_hook_names(config.hooks)
    manager.ensure_hooks_directory()

    results = {}
    for hook_name, hook_value in config.hooks.items():
        results[hook_name] = manager.write_hook(hook_name, hook_value)
    return results


def check_hooks_status(manager: HookManager) -> List[HookStatus]:
    """Verifica status dos hooks instalados."""
    return manager.status()


def print_hooks(manager: HookManager, hook_name: Optional[str] = None) -> List[str]:
    """
    Imprime um hook específico ou todos os hooks instalados.

    Returns:
        Nomes dos hooks impressos
    """
    if hook_name:
        names = [hook_name]
    else:
        names = [path.name for path in manager.list_installed_hooks()]

    printed = [name for name in names if manager.print_hook(name)]

    if not printed:
        if hook_name:
            manager.log.info(f"O hook `{hook_name}` não está instalado")
        else:
            manager.log.info("Nenhum hook instalado")

    return printed


def run_hooks(manager: HookManager, hook_name: Optional[str] = None) -> List[HookExecution]:
    """
    Executa um hook específico ou todos os hooks instalados.

    Returns:
        Execuções realizadas, na ordem
    """
    if hook_name:
        names = [hook_name]
    else:
        names = [path.name for path in manager.list_installed_hooks()]

    executions = []
    for name in names:
        execution = manager.run_hook(name)
        if execution is not None:
            executions.append(execution)

    if not executions:
        if hook_name:
            manager.log.info(f"O hook `{hook_name}` não está instalado")
        else:
            manager.log.info("Nenhum hook instalado")

    return executions


def print_install_summary(results: Dict[str, WriteAction]):
    """Printa resumo da instalação (helper para CLI)."""
    from rich.console import Console
    from rich.table import Table

    console = Console()
    table = Table(title="Instalação de Hooks")

    table.add_column("Hook", style="cyan")
    table.add_column("Status", style="green")
    table.add_column("Mensagem")

    messages = {
        WriteAction.WRITTEN: "Hook instalado",
        WriteAction.UNCHANGED: "Sem mudanças",
    }

    for hook_name, action in results.items():
        table.add_row(hook_name, "✅", messages[action])

    console.print(table)


# =============================================================================
# Exports
# =============================================================================

__all__ = [
    "HookManager",
    "HookLogger",
    "HookManagerError",
    "InvalidHookNameError",
    "DirectoryCreationError",
    "UnsupportedPlatformError",
    "is_posix_platform",
    "install_hooks",
    "check_hooks_status",
    "print_hooks",
    "run_hooks",
    "print_install_summary",
]
