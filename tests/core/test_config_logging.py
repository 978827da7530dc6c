from __future__ import annotations

import logging

import pytest
from pydantic import ValidationError
from rich.logging import RichHandler

from core.config import NetworkSettings, get_user_env_file
from core.logging_setup import setup_logging


def test_defaults():
    settings = NetworkSettings(_env_file=None)

    assert settings.http_timeout_seconds == 20.0
    assert settings.follow_redirects is True
    assert settings.accept == "application/json"
    assert settings.log_format == "rich"


def test_env_prefix(monkeypatch):
    monkeypatch.setenv("NETLAYER_HTTP_TIMEOUT_SECONDS", "3.5")
    monkeypatch.setenv("NETLAYER_USER_AGENT", "probe/2")

    settings = NetworkSettings(_env_file=None)

    assert settings.http_timeout_seconds == 3.5
    assert settings.user_agent == "probe/2"


def test_timeout_must_be_positive():
    with pytest.raises(ValidationError):
        NetworkSettings(_env_file=None, http_timeout_seconds=0)


def test_user_env_file_lives_under_config_dir(monkeypatch, tmp_path):
    monkeypatch.setattr("sys.platform", "linux")
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path))

    assert get_user_env_file() == tmp_path / "netlayer" / ".env"


@pytest.fixture
def restore_root_logger():
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield root
    root.handlers[:] = handlers
    root.setLevel(level)


def test_setup_logging_rich(restore_root_logger):
    handler = setup_logging(NetworkSettings(_env_file=None, log_level="debug"))

    assert isinstance(handler, RichHandler)
    assert handler in restore_root_logger.handlers
    assert restore_root_logger.level == logging.DEBUG


def test_setup_logging_replaces_previous_handler(restore_root_logger):
    first = setup_logging(NetworkSettings(_env_file=None, log_format="plain"))
    second = setup_logging(NetworkSettings(_env_file=None, log_format="plain"))

    assert first not in restore_root_logger.handlers
    assert second in restore_root_logger.handlers
    assert not isinstance(second, RichHandler)
