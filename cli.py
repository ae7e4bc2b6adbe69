"""
HOOKMAN - Command Line Interface
Entry point principal para todos os comandos do HOOKMAN.
"""

from pathlib import Path
from typing import Optional

import typer
from rich.console import Console

from hookman.__version__ import __version__
from hookman.config import DEFAULT_CONFIG_FILE
from hookman.core.config_loader import (
    load_config,
    validate_config_file,
    ConfigLoadError,
)
from hookman.core.formatters import FormatterFactory
from hookman.core.log import configure_logging
from hookman.hooks.manager import (
    HookManager,
    HookManagerError,
    check_hooks_status,
    install_hooks,
    print_hooks,
    run_hooks,
    print_install_summary,
)


# =============================================================================
# Typer App Setup
# =============================================================================

app = typer.Typer(
    name="hookman",
    help="🪝 HOOKMAN - Git hooks manager",
    add_completion=False,
    rich_markup_mode="rich",
)

console = Console()

_state = {"verbose": False}


def _create_manager() -> HookManager:
    """HookManager do diretório atual, com o logger configurado."""
    return HookManager(configure_logging(verbose=_state["verbose"]))


# =============================================================================
# Global Options
# =============================================================================

def version_callback(value: bool):
    """Callback para --version."""
    if value:
        console.print(f"🪝 HOOKMAN version {__version__}", style="bold cyan")
        raise typer.Exit()


@app.callback()
def main_callback(
    version: Optional[bool] = typer.Option(
        None,
        "--version",
        "-V",
        callback=version_callback,
        is_eager=True,
        help="Mostra versão do HOOKMAN"
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Habilita logs de debug"
    ),
):
    """
    🪝 HOOKMAN - Git hooks manager

    Instala, lista, imprime e testa git hooks declarados em .hookman.yaml.
    """
    _state["verbose"] = verbose


# =============================================================================
# Command: install
# =============================================================================

@app.command()
def install(
    config_file: Path = typer.Option(
        DEFAULT_CONFIG_FILE,
        "--config",
        "-c",
        help="Arquivo de configuração dos hooks"
    ),
):
    """
    🪝 Instala os hooks declarados na configuração

    Exemplos:

    \b
    # Usa .hookman.yaml do diretório atual
    hookman install

    \b
    # Arquivo de configuração alternativo
    hookman install --config ci/hooks.yaml
    """

    try:
        config = load_config(config_file)
        results = install_hooks(_create_manager(), config)
    except ConfigLoadError as e:
        console.print(f"❌ Erro ao carregar configuração: {e}", style="red")
        raise typer.Exit(1)
    except (HookManagerError, OSError) as e:
        console.print(f"❌ {e}", style="red")
        raise typer.Exit(1)

    if results:
        print_install_summary(results)


# =============================================================================
# Command: list
# =============================================================================

@app.command("list")
def list_hooks(
    format: str = typer.Option(
        "console",
        "--format",
        "-f",
        help="Formato de output: console, json"
    ),
):
    """
    📊 Lista os hooks instalados em .git/hooks

    Exemplos:

    \b
    hookman list
    hookman list --format json
    """

    try:
        formatter = FormatterFactory.create(format)
    except ValueError as e:
        console.print(f"❌ {e}", style="red")
        raise typer.Exit(1)

    statuses = check_hooks_status(_create_manager())
    rendered = formatter.format_statuses(statuses)

    if format.lower() == "json":
        typer.echo(rendered)
    else:
        console.print(rendered)


# =============================================================================
# Command: print
# =============================================================================

@app.command("print")
def print_command(
    hook: Optional[str] = typer.Argument(
        None,
        help="Hook a imprimir (default: todos os instalados)"
    ),
):
    """
    📖 Imprime o conteúdo dos hooks instalados

    Exemplos:

    \b
    hookman print
    hookman print pre-commit
    """

    try:
        printed = print_hooks(_create_manager(), hook)
    except (HookManagerError, OSError) as e:
        console.print(f"❌ {e}", style="red")
        raise typer.Exit(1)

    if hook and not printed:
        raise typer.Exit(1)


# =============================================================================
# Command: test
# =============================================================================

@app.command("test")
def test_command(
    hook: Optional[str] = typer.Argument(
        None,
        help="Hook a executar (default: todos os instalados)"
    ),
    format: str = typer.Option(
        "console",
        "--format",
        "-f",
        help="Formato do resumo: console, json"
    ),
):
    """
    🧪 Executa os hooks instalados para teste

    Exemplos:

    \b
    hookman test
    hookman test pre-commit
    hookman test --format json
    """

    try:
        formatter = FormatterFactory.create(format)
    except ValueError as e:
        console.print(f"❌ {e}", style="red")
        raise typer.Exit(1)

    try:
        executions = run_hooks(_create_manager(), hook)
    except (HookManagerError, OSError) as e:
        console.print(f"❌ {e}", style="red")
        raise typer.Exit(1)

    if hook and not executions:
        raise typer.Exit(1)

    rendered = formatter.format_executions(executions)
    if format.lower() == "json":
        typer.echo(rendered)
    elif executions:
        console.print(rendered)

    if not all(e.succeeded for e in executions):
        raise typer.Exit(1)


# =============================================================================
# Command Group: config
# =============================================================================

config_app = typer.Typer(help="📋 Gerencia a configuração")
app.add_typer(config_app, name="config")


@config_app.command("validate")
def config_validate(
    config_file: Path = typer.Argument(
        DEFAULT_CONFIG_FILE,
        help="Arquivo de configuração a validar"
    ),
):
    """
    ✅ Valida arquivo de configuração

    Exemplo:

    \b
    hookman config validate .hookman.yaml
    """

    report = validate_config_file(config_file)

    for warning in report['warnings']:
        console.print(f"⚠️  {warning}", style="yellow")

    if report['valid']:
        console.print(
            f"✅ {config_file}: Válido! ({report['total_hooks']} hooks)",
            style="green"
        )
        return

    console.print(f"❌ {config_file}: {len(report['errors'])} erros encontrados\n", style="red")
    for error in report['errors']:
        console.print(f"  • {error}", style="red", markup=False)
    raise typer.Exit(1)


# =============================================================================
# Main Entry Point
# =============================================================================

def main():
    """Entry point principal."""
    app()


if __name__ == "__main__":
    main()
