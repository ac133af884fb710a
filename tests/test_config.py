"""
Tests for static configuration
"""
import json
import logging

from redisdocs.config import Config


def test_defaults_without_file():
    config = Config.initialize()
    assert config["store"] == "redis"
    assert Config.get_store_params() == ("redis", "redis://localhost:6379/0")
    assert Config.scan_count() == 100


def test_missing_file_falls_back_to_defaults(tmp_path, caplog):
    with caplog.at_level(logging.WARNING):
        Config.initialize(str(tmp_path / "absent.json"))
    assert Config.get("store") == "redis"
    assert "not found" in caplog.text


def test_file_values_override_defaults(tmp_path):
    path = tmp_path / "settings.json"
    path.write_text(json.dumps({"store": "memory", "scan_count": 500, "custom": "x"}))
    Config.initialize(str(path))
    assert Config.get_store_params()[0] == "memory"
    assert Config.scan_count() == 500
    assert Config.get("custom") == "x"
    assert Config.get("absent", "fallback") == "fallback"


def test_environment_overrides_file(tmp_path, monkeypatch):
    path = tmp_path / "settings.json"
    path.write_text(json.dumps({"redis_url": "redis://file:6379/0"}))
    monkeypatch.setenv("REDISDOCS_REDIS_URL", "redis://env:6379/2")
    Config.initialize(str(path))
    assert Config.get_store_params()[1] == "redis://env:6379/2"


def test_invalid_scan_count_uses_default(tmp_path):
    path = tmp_path / "settings.json"
    path.write_text(json.dumps({"scan_count": "many"}))
    Config.initialize(str(path))
    assert Config.scan_count() == 100


def test_malformed_file_falls_back_to_defaults(tmp_path):
    path = tmp_path / "settings.json"
    path.write_text("{broken")
    Config.initialize(str(path))
    assert Config.get("store") == "redis"


def test_configure_logging_applies_level(tmp_path):
    path = tmp_path / "settings.json"
    path.write_text(json.dumps({"log_level": "debug"}))
    Config.initialize(str(path))
    root = logging.getLogger()
    previous = root.level
    try:
        Config.configure_logging()
        assert root.level == logging.DEBUG
    finally:
        root.setLevel(previous)
