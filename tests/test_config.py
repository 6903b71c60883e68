import logging

from offline_translator.config import Settings
from offline_translator.logging_config import setup_logging


def test_defaults(monkeypatch):
    monkeypatch.delenv("OFFLINE_TRANSLATOR_DEFAULT_TARGET_LANGUAGE", raising=False)
    settings = Settings(_env_file=None)
    assert settings.default_source_language == "English"
    assert settings.default_target_language == "Indonesian"
    assert settings.detection_min_confidence == 0.4
    assert settings.history_database_url.startswith("sqlite:///")
    assert settings.translate_shortcut == "Ctrl+Return"


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("OFFLINE_TRANSLATOR_DEFAULT_TARGET_LANGUAGE", "Japanese")
    monkeypatch.setenv("OFFLINE_TRANSLATOR_HISTORY_ENABLED", "false")
    monkeypatch.setenv("OFFLINE_TRANSLATOR_DETECTION_MIN_CONFIDENCE", "0.6")
    settings = Settings(_env_file=None)
    assert settings.default_target_language == "Japanese"
    assert settings.history_enabled is False
    assert settings.detection_min_confidence == 0.6


def test_setup_logging_with_file(tmp_path):
    log_file = tmp_path / "logs" / "translator.log"
    root = logging.getLogger()
    previous_handlers, previous_level = list(root.handlers), root.level
    try:
        setup_logging("debug", log_file)
        assert root.level == logging.DEBUG
        logging.getLogger("offline_translator.test").debug("hello log")
        for handler in root.handlers:
            handler.flush()
        assert "hello log" in log_file.read_text(encoding="utf-8")
    finally:
        for handler in list(root.handlers):
            root.removeHandler(handler)
            handler.close()
        for handler in previous_handlers:
            root.addHandler(handler)
        root.setLevel(previous_level)
