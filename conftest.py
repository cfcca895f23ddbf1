"""Pytest configuration and fixtures for azpub tests.

CRITICAL: Protects the real configuration from test modifications.
"""

import shutil
from pathlib import Path

import pytest


@pytest.fixture(scope="session", autouse=True)
def protect_production_config():
    """Protect ~/.azpub/config.toml from being modified by tests.

    Backs up the real config.toml before any tests run and restores it after
    all tests complete.
    """
    config_path = Path.home() / ".azpub" / "config.toml"
    backup_path = Path.home() / ".azpub" / ".config.toml.pytest-backup"

    config_existed = config_path.exists()
    if config_existed:
        shutil.copy2(config_path, backup_path)

    yield

    if config_existed and backup_path.exists():
        shutil.copy2(backup_path, config_path)
        backup_path.unlink()
    elif backup_path.exists():
        backup_path.unlink()


@pytest.fixture
def isolated_config(tmp_path, monkeypatch):
    """Point ConfigManager at a config file under tmp_path.

    Example:
        def test_something(isolated_config):
            ConfigManager.save_tenant_id("contoso")  # Safe!
            assert "contoso" in isolated_config.read_text()
    """
    from azpub.config_manager import ConfigManager

    config_dir = tmp_path / ".azpub"
    config_file = config_dir / "config.toml"

    monkeypatch.setattr(ConfigManager, "DEFAULT_CONFIG_DIR", config_dir)
    monkeypatch.setattr(ConfigManager, "DEFAULT_CONFIG_FILE", config_file)

    return config_file
