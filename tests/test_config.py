from pathlib import Path

import pytest

from habit_vault.config import load_habit_configuration, resolve_config_path
from habit_vault.constants import CONFIG_PATH


def _write_config(tmp_path: Path, text: str) -> Path:
    config_path = tmp_path / "habits.yaml"
    config_path.write_text(text, encoding="utf-8")
    return config_path


def test_loads_full_configuration(tmp_path):
    vault_dir = tmp_path / "Daily Notes"
    vault_dir.mkdir()
    config_path = _write_config(
        tmp_path,
        f"""
vault:
  name: daily
  path: {vault_dir}
  description: "  my habits  "
habits:
  order: [vitamins, pimsleur]
  emojis:
    vitamins: "💊"
window:
  start_offset: -6
  end_offset: 1
""",
    )

    configuration = load_habit_configuration(config_path)

    assert configuration.vault.name == "daily"
    assert configuration.vault.path == vault_dir.resolve()
    assert configuration.vault.description == "my habits"
    assert configuration.vault.exists is True
    assert configuration.habit_order == ["vitamins", "pimsleur"]
    assert configuration.emojis == {"vitamins": "💊"}
    assert (configuration.start_offset, configuration.end_offset) == (-6, 1)


def test_defaults_for_optional_sections(tmp_path):
    config_path = _write_config(tmp_path, f"vault:\n  path: {tmp_path}\n")

    configuration = load_habit_configuration(config_path)

    assert configuration.vault.name == tmp_path.resolve().name
    assert configuration.habit_order == []
    assert configuration.emojis == {}
    assert (configuration.start_offset, configuration.end_offset) == (-5, 0)


def test_payload_is_serializable(tmp_path):
    config_path = _write_config(tmp_path, f"vault:\n  path: {tmp_path}\n")
    payload = load_habit_configuration(config_path).as_payload()
    assert payload["vault"]["path"] == str(tmp_path.resolve())
    assert payload["window"] == {"start_offset": -5, "end_offset": 0}


def test_missing_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_habit_configuration(tmp_path / "missing.yaml")


@pytest.mark.parametrize(
    "text",
    [
        "- just\n- a list\n",
        "habits:\n  order: [a]\n",
        "vault:\n  path: ''\n",
        "vault:\n  path: /tmp\nhabits:\n  order: vitamins\n",
        "vault:\n  path: /tmp\nwindow:\n  start_offset: 1\n  end_offset: 0\n",
        "vault:\n  path: /tmp\nwindow:\n  start_offset: soon\n",
    ],
)
def test_invalid_structure_raises(tmp_path, text):
    config_path = _write_config(tmp_path, text)
    with pytest.raises(ValueError):
        load_habit_configuration(config_path)


def test_environment_variable_overrides_default(tmp_path, monkeypatch):
    config_path = tmp_path / "custom.yaml"
    monkeypatch.setenv("HABIT_VAULT_CONFIG", str(config_path))
    assert resolve_config_path() == config_path


def test_explicit_path_wins(tmp_path, monkeypatch):
    monkeypatch.setenv("HABIT_VAULT_CONFIG", str(tmp_path / "env.yaml"))
    assert resolve_config_path(tmp_path / "explicit.yaml") == tmp_path / "explicit.yaml"


def test_default_path(monkeypatch):
    monkeypatch.delenv("HABIT_VAULT_CONFIG", raising=False)
    assert resolve_config_path() == CONFIG_PATH
