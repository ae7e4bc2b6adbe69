"""Pytest configuration and fixtures."""

import logging

import pytest
from pathlib import Path

from hookman.hooks.manager import HookManager


@pytest.fixture
def temp_git_repo(tmp_path, monkeypatch):
    """Cria repositório git temporário (apenas .git) e entra nele."""
    repo_dir = tmp_path / "test_repo"
    (repo_dir / ".git").mkdir(parents=True)
    monkeypatch.chdir(repo_dir)
    return repo_dir


@pytest.fixture
def log(caplog):
    """Logger de teste, capturado pelo caplog."""
    caplog.set_level(logging.INFO, logger="tests.hookman")
    return logging.getLogger("tests.hookman")


@pytest.fixture
def manager(temp_git_repo, log):
    """HookManager com .git/hooks já criado."""
    hook_manager = HookManager(log)
    hook_manager.ensure_hooks_directory()
    return hook_manager


@pytest.fixture
def config_file(tmp_path):
    """Escreve um .hookman.yaml e retorna o caminho."""
    def _write(content: str, name: str = ".hookman.yaml") -> Path:
        path = tmp_path / name
        path.write_text(content, encoding="utf-8")
        return path
    return _write
