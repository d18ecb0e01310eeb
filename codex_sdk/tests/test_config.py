"""
Config tests
"""

import logging

import pytest

from .. import LOG_FORMAT, configure_logging
from ..config import CodexConfig
from ..constants import DEFAULT_API_URL, DEFAULT_WS_URL


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in ("CODEX_API_KEY", "CODEX_API_URL", "CODEX_WS_URL", "CODEX_TIMEOUT", "CODEX_MAX_RETRIES"):
        monkeypatch.delenv(name, raising=False)
    # Keep a developer's .env out of the tests
    monkeypatch.setattr("codex_sdk.config.load_dotenv", lambda *args, **kwargs: False)


class TestCodexConfig:
    """Environment loading"""

    def test_defaults(self):
        config = CodexConfig.from_env()
        assert config.api_key is None
        assert config.api_url == DEFAULT_API_URL
        assert config.ws_url == DEFAULT_WS_URL
        assert config.auth_headers == {}

    def test_environment(self, monkeypatch):
        monkeypatch.setenv("CODEX_API_KEY", "env-key")
        monkeypatch.setenv("CODEX_TIMEOUT", "5")
        monkeypatch.setenv("CODEX_MAX_RETRIES", "1")

        config = CodexConfig.from_env()
        assert config.api_key == "env-key"
        assert config.timeout == 5.0
        assert config.max_retries == 1
        assert config.auth_headers == {"Authorization": "env-key"}

    def test_overrides_win(self, monkeypatch):
        monkeypatch.setenv("CODEX_API_KEY", "env-key")
        config = CodexConfig.from_env(api_key="explicit", api_url=None)

        assert config.api_key == "explicit"
        assert config.api_url == DEFAULT_API_URL


class TestConfigureLogging:
    """Package log handler"""

    def test_installs_one_handler(self):
        logger = configure_logging(logging.DEBUG)
        configure_logging(logging.INFO)

        handlers = [h for h in logger.handlers if getattr(h, "_codex_sdk", False)]
        assert len(handlers) == 1
        assert handlers[0].formatter._fmt == LOG_FORMAT
        assert logger.level == logging.INFO

    def test_defaults_to_package_logger(self):
        logger = configure_logging()

        assert logger is logging.getLogger("codex_sdk")


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
