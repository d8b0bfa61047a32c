import logging

import pytest

from numeric_demos import logging_config


@pytest.mark.parametrize(
    "value, expected",
    [
        ("DEBUG", logging.DEBUG),
        ("warning", logging.WARNING),
        (" error ", logging.ERROR),
        ("nonsense", logging.INFO),
        ("", logging.INFO),
    ],
)
def test_level_from_env(monkeypatch, value, expected):
    monkeypatch.setenv(logging_config.LOG_LEVEL_ENV_VAR, value)
    assert logging_config.level_from_env() == expected


def test_level_from_env_unset(monkeypatch):
    monkeypatch.delenv(logging_config.LOG_LEVEL_ENV_VAR, raising=False)
    assert logging_config.level_from_env(default=logging.WARNING) == logging.WARNING


def test_get_logger_is_cached():
    a = logging_config.get_logger("numeric_demos.some_module")
    b = logging_config.get_logger("numeric_demos.some_module")
    assert a is b
    assert a.name == "numeric_demos.some_module"


def test_set_log_level_updates_root():
    root = logging.getLogger()
    previous = root.level
    try:
        logging_config.set_log_level(logging.ERROR)
        assert root.level == logging.ERROR
    finally:
        logging_config.set_log_level(previous)


def test_file_logging_writes_records(tmp_path):
    root = logging.getLogger()
    previous = root.level
    path = tmp_path / "run.log"
    written = logging_config.enable_file_logging(str(path))
    try:
        logging_config.get_logger("numeric_demos.file_test").warning("hello file")
    finally:
        logging_config.disable_file_logging()
        root.setLevel(previous)
    assert root.level == previous
    assert written == str(path)
    assert "hello file" in path.read_text(encoding="utf-8")


def test_disable_file_logging_is_idempotent():
    logging_config.disable_file_logging()
    logging_config.disable_file_logging()


def test_enable_debug_mode():
    root = logging.getLogger()
    previous = root.level
    try:
        logging_config.enable_debug_mode()
        assert root.level == logging.DEBUG
    finally:
        logging_config.set_log_level(previous)
