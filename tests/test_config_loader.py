"""Tests for the hooks configuration loader."""

import pytest

from hookman.core.config_loader import (
    ConfigLoadError,
    HooksConfigLoader,
    load_config,
    validate_config_file,
)


def test_load_config(config_file):
    """Test loading a valid config file."""
    path = config_file(
        "hooks:\n"
        "  pre-commit: |\n"
        "    mvn -B test\n"
        "  pre-push: ./gradlew check\n"
    )

    config = load_config(path)

    assert config.hooks == {"pre-commit": "mvn -B test\n", "pre-push": "./gradlew check"}
    assert config.skip is False
    assert config.total_hooks == 2
    assert config.source_file == str(path)


def test_load_config_skip(config_file):
    """Test the skip flag is read."""
    config = load_config(config_file("skip: true\nhooks:\n  pre-commit: echo ok\n"))

    assert config.skip is True


def test_load_missing_file(tmp_path):
    """Test a missing file fails."""
    with pytest.raises(ConfigLoadError, match="não encontrado"):
        load_config(tmp_path / "missing.yaml")


def test_load_directory(tmp_path):
    """Test a directory is not accepted as config file."""
    with pytest.raises(ConfigLoadError, match="não é um arquivo"):
        load_config(tmp_path)


def test_load_invalid_yaml(config_file):
    """Test malformed YAML fails."""
    with pytest.raises(ConfigLoadError, match="YAML"):
        load_config(config_file("hooks: [unclosed\n"))


@pytest.mark.parametrize("data, message", [
    (None, "nível raiz"),
    (["pre-commit"], "nível raiz"),
    ({"skip": False}, "'hooks' não encontrado"),
    ({"hooks": ["echo ok"]}, "mapeamento"),
    ({"hooks": {"pre-commit": None}}, "pre-commit"),
    ({"hooks": {"pre-commit": 42}}, "pre-commit"),
    ({"hooks": {"pre-commit": "   "}}, "pre-commit"),
    ({"hooks": {1: "echo ok"}}, "nome de hook inválido"),
    ({"hooks": {"pre-commit": "echo ok"}, "skip": "yes please"}, "'skip'"),
])
def test_load_invalid_structure(data, message):
    """Test structural errors are reported with ConfigLoadError."""
    with pytest.raises(ConfigLoadError, match=message):
        HooksConfigLoader().load_from_dict(data, source_file="test.yaml")


def test_loader_does_not_check_hook_names():
    """Test unknown hook names are left for the manager to reject."""
    config = HooksConfigLoader().load_from_dict({"hooks": {"post-commit": "echo ok"}})

    assert "post-commit" in config.hooks


def test_validate_config_file_valid(config_file):
    """Test the report of a valid file."""
    report = validate_config_file(config_file("hooks:\n  pre-commit: echo ok\n"))

    assert report["valid"] is True
    assert report["total_hooks"] == 1
    assert report["errors"] == []
    assert report["warnings"] == []


def test_validate_config_file_invalid_hook_names(config_file):
    """Test each invalid hook name becomes an error."""
    report = validate_config_file(config_file(
        "hooks:\n"
        "  pre-commit: echo ok\n"
        "  post-commit: echo bad\n"
        "  pre_push: echo bad\n"
    ))

    assert report["valid"] is False
    assert report["total_hooks"] == 3
    assert len(report["errors"]) == 2
    assert any("post-commit" in error for error in report["errors"])


def test_validate_config_file_skip_warning(config_file):
    """Test skip produces a warning."""
    report = validate_config_file(config_file("skip: true\nhooks:\n  pre-commit: echo ok\n"))

    assert report["valid"] is True
    assert len(report["warnings"]) == 1


def test_validate_config_file_load_error(tmp_path):
    """Test loader errors are reported, not raised."""
    report = validate_config_file(tmp_path / "missing.yaml")

    assert report["valid"] is False
    assert len(report["errors"]) == 1
