"""Tests for ConfigManager persistence around MigrationService."""

from __future__ import annotations

import json

import pytest

from confmigrate.config.manager import ConfigManager
from confmigrate.config.schema import ApplicationConfig, ParameterTableColumn, UserPreferences
from confmigrate.core.errors import ConfigPersistenceError
from confmigrate.core.types import LoadFailure


@pytest.fixture
def manager(tmp_path):
    return ConfigManager(tmp_path / "configs")


def test_creates_config_directory(tmp_path):
    target = tmp_path / "nested" / "configs"
    ConfigManager(target)
    assert target.is_dir()


def test_default_directory_comes_from_loader(tmp_path, monkeypatch):
    monkeypatch.setenv("CONFMIGRATE_HOME", str(tmp_path / "home"))
    mgr = ConfigManager()
    assert mgr.config_dir == tmp_path / "home" / "configs"
    assert mgr.config_dir.is_dir()


def test_missing_file_is_created_and_saved(manager):
    result = manager.load_application_config()

    assert result.was_created is True
    assert result.failure is LoadFailure.FILE_MISSING
    data = json.loads(manager.application_config_path.read_text(encoding="utf-8"))
    assert data["Version"] == ApplicationConfig.CURRENT_VERSION
    assert data["EditorCommand"] == 'notepad.exe "%f"'
    assert not manager.application_config_path.with_name("ApplicationConfig.json.bak").exists()


def test_legacy_file_is_migrated_with_backup(manager):
    original = '{"EditorCommand": "code -w %f", "Shortcuts": {"Reload": "Ctrl+R"}}'
    manager.application_config_path.write_text(original, encoding="utf-8")

    result = manager.load_application_config()

    assert result.was_migrated is True
    assert result.config.shortcuts == {"Reload": "Ctrl+R"}
    saved = json.loads(manager.application_config_path.read_text(encoding="utf-8"))
    assert saved["Version"] == 1
    assert saved["EditorCommand"] == "code -w %f"
    backup = manager.config_dir / "ApplicationConfig.json.bak"
    assert backup.read_text(encoding="utf-8") == original


def test_corrupt_file_replaced_and_backed_up(manager):
    manager.user_preferences_path.write_text("{oops", encoding="utf-8")

    result = manager.load_user_preferences()

    assert result.was_created is True
    assert (manager.config_dir / "UserPreferences.json.bak").read_text(encoding="utf-8") == "{oops"
    saved = json.loads(manager.user_preferences_path.read_text(encoding="utf-8"))
    assert saved["PreferredConsoleWidth"] == 150


def test_current_file_is_not_rewritten(manager):
    content = '{"Version": 1, "EditorCommand": "nano"}'
    manager.application_config_path.write_text(content, encoding="utf-8")

    result = manager.load_application_config()

    assert result.needs_save is False
    assert result.config.editor_command == "nano"
    assert manager.application_config_path.read_text(encoding="utf-8") == content


def test_dry_run_does_not_write(manager):
    manager.application_config_path.write_text('{"EditorCommand": "nano"}', encoding="utf-8")

    result = manager.load_application_config(persist=False)

    assert result.was_migrated is True
    assert manager.application_config_path.read_text(encoding="utf-8") == '{"EditorCommand": "nano"}'
    assert not (manager.config_dir / "ApplicationConfig.json.bak").exists()


def test_save_and_reload_preferences(manager):
    prefs = UserPreferences(
        preferred_console_width=180,
        pc_parameter_table_columns=[ParameterTableColumn.PARAMETER_NAME, ParameterTableColumn.VALUE],
    )
    manager.save_user_preferences(prefs)

    saved = json.loads(manager.user_preferences_path.read_text(encoding="utf-8"))
    assert saved["PCParameterTableColumns"] == ["ParameterName", "Value"]

    reloaded = manager.load_user_preferences()
    assert reloaded.was_created is False
    assert reloaded.config == prefs


def test_reset_user_preferences(manager):
    manager.save_user_preferences(UserPreferences(preferred_console_height=99))

    reset = manager.reset_user_preferences()

    assert reset == UserPreferences()
    saved = json.loads(manager.user_preferences_path.read_text(encoding="utf-8"))
    assert saved["PreferredConsoleHeight"] == 60


def test_save_failure_is_wrapped(manager, monkeypatch):
    from pathlib import Path

    def _deny(self, *args, **kwargs):
        raise PermissionError(13, "Permission denied", str(self))

    monkeypatch.setattr(Path, "write_text", _deny)

    with pytest.raises(ConfigPersistenceError):
        manager.save_application_config(ApplicationConfig())
