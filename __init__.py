"""
🪝 HOOKMAN - Git hooks manager

Instala, inspeciona e executa (em modo de teste) os git hooks
declarados em um arquivo de configuração YAML.
"""

from .__version__ import __version__

__all__ = ["__version__"]
