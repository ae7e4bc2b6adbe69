"""
HOOKMAN - Config Loader
Carrega e valida o arquivo YAML com os hooks do projeto.
"""

from pathlib import Path
from typing import Dict, Any, Union
import yaml

from .models import HooksConfig


# =============================================================================
# Exceções Customizadas
# =============================================================================

class ConfigLoadError(Exception):
    """Erro ao carregar arquivo de configuração."""
    pass


# =============================================================================
# Loader Principal
# =============================================================================

class HooksConfigLoader:
    """
    Carrega a configuração de hooks do YAML.

    Formato esperado:

        skip: false
        hooks:
          pre-commit: |
            pytest -q
          pre-push: make check

    Os nomes dos hooks não são validados aqui; isso é responsabilidade
    do HookManager (InvalidHookNameError).
    """

    def load_from_file(self, filepath: Union[str, Path]) -> HooksConfig:
        """
        Carrega configuração de um arquivo YAML.

        Args:
            filepath: Caminho para o arquivo de configuração

        Returns:
            HooksConfig com os hooks declarados

        Raises:
            ConfigLoadError: Se o arquivo não existir ou for inválido
        """
        filepath = Path(filepath)

        if not filepath.exists():
            raise ConfigLoadError(f"Arquivo não encontrado: {filepath}")

        if not filepath.is_file():
            raise ConfigLoadError(f"Path não é um arquivo: {filepath}")

        try:
            with open(filepath, 'r', encoding='utf-8') as f:
                data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ConfigLoadError(f"Erro ao parsear YAML: {e}") from e
        except OSError as e:
            raise ConfigLoadError(f"Erro ao ler arquivo: {e}") from e

        return self.load_from_dict(data, source_file=str(filepath))

    def load_from_dict(self, data: Dict[str, Any], source_file: str = "unknown") -> HooksConfig:
        """
        Carrega configuração de um dicionário (já parseado do YAML).

        Args:
            data: Dicionário com estrutura do YAML
            source_file: Nome do arquivo de origem (para mensagens de erro)
        """
        if not isinstance(data, dict):
            raise ConfigLoadError(f"{source_file}: YAML deve conter um objeto no nível raiz")

        if 'hooks' not in data:
            raise ConfigLoadError(f"{source_file}: campo 'hooks' não encontrado")

        raw_hooks = data['hooks']
        if not isinstance(raw_hooks, dict):
            raise ConfigLoadError(f"{source_file}: campo 'hooks' deve ser um mapeamento nome -> comandos")

        hooks: Dict[str, str] = {}
        for name, body in raw_hooks.items():
            if not isinstance(name, str):
                raise ConfigLoadError(f"{source_file}: nome de hook inválido: {name!r}")
            if not isinstance(body, str) or not body.strip():
                raise ConfigLoadError(
                    f"{source_file}: hook '{name}' deve conter os comandos como texto"
                )
            hooks[name] = body

        skip = data.get('skip', False)
        if not isinstance(skip, bool):
            raise ConfigLoadError(f"{source_file}: campo 'skip' deve ser true ou false")

        return HooksConfig(hooks=hooks, skip=skip, source_file=source_file)


# =============================================================================
# Funções de Conveniência
# =============================================================================

def load_config(filepath: Union[str, Path]) -> HooksConfig:
    """
    Carrega configuração de hooks de um arquivo.

    Raises:
        ConfigLoadError: Se o arquivo for inválido
    """
    return HooksConfigLoader().load_from_file(filepath)


def validate_config_file(filepath: Union[str, Path]) -> Dict[str, Any]:
    """
    Valida um arquivo de configuração e retorna relatório de validação.

    Args:
        filepath: Caminho para o arquivo YAML

    Returns:
        Dict com resultados da validação:
        {
            'valid': bool,
            'total_hooks': int,
            'errors': List[str],
            'warnings': List[str],
        }
    """
    from ..hooks.manager import HookManager, InvalidHookNameError

    result = {
        'valid': True,
        'total_hooks': 0,
        'errors': [],
        'warnings': [],
    }

    try:
        config = load_config(filepath)
    except ConfigLoadError as e:
        result['valid'] = False
        result['errors'].append(str(e))
        return result

    result['total_hooks'] = config.total_hooks

    for name in config.hooks:
        try:
            HookManager.validate_hook_names({name: config.hooks[name]})
        except InvalidHookNameError as e:
            result['valid'] = False
            result['errors'].append(str(e))

    if config.skip:
        result['warnings'].append("'skip' está habilitado: nenhum hook será instalado")

    return result


# =============================================================================
# Exports
# =============================================================================

__all__ = [
    'HooksConfigLoader',
    'ConfigLoadError',
    'load_config',
    'validate_config_file',
]
