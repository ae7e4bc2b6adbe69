"""
HOOKMAN - Output Formatters
Formatação de hooks instalados e execuções para o terminal ou JSON.
"""

import json
from typing import List

from rich.console import RenderableType
from rich.table import Table

from .models import HookExecution, HookStatus


# =============================================================================
# Base Formatter
# =============================================================================

class BaseFormatter:
    """
    Classe base para formatters.
    """

    def format_statuses(self, statuses: List[HookStatus]) -> RenderableType:
        """Formata a lista de hooks instalados (implementado por subclasses)."""
        raise NotImplementedError

    def format_executions(self, executions: List[HookExecution]) -> RenderableType:
        """Formata o resumo de execuções (implementado por subclasses)."""
        raise NotImplementedError


# =============================================================================
# Console Formatter
# =============================================================================

class ConsoleFormatter(BaseFormatter):
    """
    Formatter para terminal, baseado em tabelas do rich.
    """

    def format_statuses(self, statuses: List[HookStatus]) -> RenderableType:
        if not statuses:
            return "Nenhum hook instalado em .git/hooks"

        table = Table(title="Hooks Instalados")
        table.add_column("Hook", style="cyan", no_wrap=True)
        table.add_column("Arquivo")
        table.add_column("Executável", style="magenta")

        for status in statuses:
            table.add_row(
                status.name,
                str(status.path),
                "✅" if status.executable else "❌",
            )

        return table

    def format_executions(self, executions: List[HookExecution]) -> RenderableType:
        if not executions:
            return "Nenhum hook executado"

        table = Table(title="Execução de Hooks")
        table.add_column("Hook", style="cyan", no_wrap=True)
        table.add_column("Exit code", style="yellow")
        table.add_column("Resultado")

        for execution in executions:
            style = "green" if execution.succeeded else "red"
            table.add_row(
                execution.hook_name,
                str(execution.exit_code),
                f"[{style}]{execution.result_label}[/{style}]",
            )

        return table


# =============================================================================
# JSON Formatter
# =============================================================================

class JSONFormatter(BaseFormatter):
    """
    Formatter JSON (machine-readable).
    Útil para integração com outras ferramentas.
    """

    def __init__(self, pretty: bool = True):
        """
        Args:
            pretty: Se True, formata JSON com indentação
        """
        self.pretty = pretty

    def format_statuses(self, statuses: List[HookStatus]) -> str:
        return self._dumps({"hooks": [s.to_dict() for s in statuses]})

    def format_executions(self, executions: List[HookExecution]) -> str:
        return self._dumps({"executions": [e.to_dict() for e in executions]})

    def _dumps(self, data) -> str:
        if self.pretty:
            return json.dumps(data, indent=2, ensure_ascii=False)
        return json.dumps(data, ensure_ascii=False)


# =============================================================================
# Formatter Factory
# =============================================================================

class FormatterFactory:
    """Factory para criar formatters."""

    @staticmethod
    def create(format_type: str, pretty: bool = True) -> BaseFormatter:
        """
        Cria formatter apropriado.

        Args:
            format_type: Tipo do formatter (console, json)
            pretty: Pretty print JSON (apenas json)

        Returns:
            BaseFormatter configurado
        """
        format_type = format_type.lower()

        if format_type == "console":
            return ConsoleFormatter()

        elif format_type == "json":
            return JSONFormatter(pretty=pretty)

        else:
            raise ValueError(
                f"Formato desconhecido: {format_type}. "
                f"Formatos válidos: console, json"
            )


# =============================================================================
# Exports
# =============================================================================

__all__ = [
    'BaseFormatter',
    'ConsoleFormatter',
    'JSONFormatter',
    'FormatterFactory',
]
