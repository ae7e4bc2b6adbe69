"""Versão do HOOKMAN."""

__version__ = "1.0.0"
