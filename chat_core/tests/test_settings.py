import pydantic
import pytest

from chat_core.config.settings import ChatSettings


def test_settings_defaults(monkeypatch):
    monkeypatch.delenv("CHAT_CORE_CONFIG_FILE", raising=False)
    s = ChatSettings()
    assert s.queue_capacity == 100
    assert s.timestamp_format == "%Y-%m-%d %H:%M:%S"
    assert s.welcome_message == "Welcome to the chat. Simulated users: Alice, Bob, Eve."
    assert s.simulation_enabled is True
    assert s.demo_delay_scale == 1.0


def test_env_overrides(monkeypatch):
    monkeypatch.setenv("CHAT_CORE_QUEUE_CAPACITY", "5")
    monkeypatch.setenv("CHAT_CORE_SIMULATION_ENABLED", "false")
    monkeypatch.setenv("chat_core_log_level", "debug")
    s = ChatSettings()
    assert s.queue_capacity == 5
    assert s.simulation_enabled is False
    assert s.log_level == "DEBUG"


def test_yaml_config_file(monkeypatch, tmp_path):
    cfg = tmp_path / "chat.yaml"
    cfg.write_text("queue_capacity: 7\nwelcome_message: hi all\n", encoding="utf-8")
    monkeypatch.setenv("CHAT_CORE_CONFIG_FILE", str(cfg))
    s = ChatSettings()
    assert s.queue_capacity == 7
    assert s.welcome_message == "hi all"


def test_env_beats_yaml(monkeypatch, tmp_path):
    cfg = tmp_path / "chat.yaml"
    cfg.write_text("queue_capacity: 7\n", encoding="utf-8")
    monkeypatch.setenv("CHAT_CORE_CONFIG_FILE", str(cfg))
    monkeypatch.setenv("CHAT_CORE_QUEUE_CAPACITY", "9")
    assert ChatSettings().queue_capacity == 9


def test_invalid_values_rejected():
    with pytest.raises(pydantic.ValidationError):
        ChatSettings(queue_capacity=0)
    with pytest.raises(pydantic.ValidationError):
        ChatSettings(log_level="chatty")


def test_config_yaml_in_working_directory(monkeypatch, tmp_path):
    monkeypatch.delenv("CHAT_CORE_CONFIG_FILE", raising=False)
    monkeypatch.delenv("CHAT_CORE_QUEUE_CAPACITY", raising=False)
    (tmp_path / "config.yaml").write_text("queue_capacity: 11\n", encoding="utf-8")
    monkeypatch.chdir(tmp_path)
    assert ChatSettings().queue_capacity == 11


def test_missing_explicit_config_file_uses_defaults(monkeypatch, tmp_path):
    monkeypatch.setenv("CHAT_CORE_CONFIG_FILE", str(tmp_path / "absent.yaml"))
    monkeypatch.delenv("CHAT_CORE_QUEUE_CAPACITY", raising=False)
    assert ChatSettings().queue_capacity == 100
