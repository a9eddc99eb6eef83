import logging

from loguru import logger
from todos.server.config.logging import InterceptHandler, setup_logging
from todos.server.config.settings import Settings, get_settings


def test_settings_defaults(monkeypatch):
    for name in ("API_PORT", "API_DEBUG", "REQUEST_TIMEOUT", "LOG_LEVEL", "LOG_FILE"):
        monkeypatch.delenv(name, raising=False)

    settings = Settings()

    assert settings.API_PORT == 8080
    assert settings.API_DEBUG is False
    assert settings.REQUEST_TIMEOUT == 5.0
    assert settings.LOG_LEVEL == "INFO"
    assert settings.LOG_FILE is None


def test_settings_from_environment(monkeypatch, tmp_path):
    monkeypatch.setenv("API_PORT", "9090")
    monkeypatch.setenv("API_DEBUG", "true")
    monkeypatch.setenv("REQUEST_TIMEOUT", "0.5")
    monkeypatch.setenv("LOG_LEVEL", "debug")
    monkeypatch.setenv("LOG_FILE", str(tmp_path / "todos.log"))

    settings = Settings()

    assert settings.API_PORT == 9090
    assert settings.API_DEBUG is True
    assert settings.REQUEST_TIMEOUT == 0.5
    assert settings.LOG_LEVEL == "DEBUG"
    assert settings.LOG_FILE == tmp_path / "todos.log"


def test_get_settings_is_cached():
    assert get_settings() is get_settings()


def test_setup_logging_routes_stdlib_to_loguru(tmp_path):
    settings = Settings()
    settings.LOG_LEVEL = "DEBUG"
    settings.LOG_FILE = tmp_path / "logs" / "todos.log"

    setup_logging(settings)
    try:
        assert isinstance(logging.getLogger("uvicorn").handlers[0], InterceptHandler)

        messages = []
        sink_id = logger.add(lambda message: messages.append(str(message)))
        logging.getLogger("uvicorn.error").info("hello from uvicorn")
        logger.remove(sink_id)

        assert any("hello from uvicorn" in m for m in messages)
        assert settings.LOG_FILE.parent.is_dir()
    finally:
        logger.remove()
        logging.basicConfig(handlers=[logging.NullHandler()], force=True)
