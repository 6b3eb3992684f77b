import logging

import pytest

from seabattle.game.infra.logging import (
    JsonFormatter,
    LoggingConfig,
    build_logging_config,
    configure_logging,
    shutdown_logging,
)


@pytest.fixture(autouse=True)
def _restore_root_logging():
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield
    shutdown_logging()
    root.handlers[:] = handlers
    root.setLevel(level)


def test_json_formatter_includes_fields_and_message() -> None:
    logger = logging.getLogger("test.json.formatter")
    record = logger.makeRecord(
        name=logger.name,
        level=logging.INFO,
        fn=__file__,
        lno=1,
        msg="hello %s",
        args=("world",),
        exc_info=None,
        extra={"custom": 1},
    )
    payload = JsonFormatter().format(record)
    assert '"msg": "hello world"' in payload
    assert '"custom": 1' in payload


def test_build_logging_config_reads_env(monkeypatch, tmp_path) -> None:
    monkeypatch.setenv("SEABATTLE_LOG_DIR", str(tmp_path / "logs"))
    monkeypatch.setenv("SEABATTLE_LOG_LEVEL", "debug")
    monkeypatch.setenv("LOG_FORMAT", "JSON")
    monkeypatch.delenv("SEABATTLE_CONSOLE_LOG_LEVEL", raising=False)
    config = build_logging_config()
    assert config.level_name == "DEBUG"
    assert config.console_level_name == "WARNING"
    assert config.console_format == "json"
    assert config.file_path is not None
    assert config.file_path.startswith(str(tmp_path / "logs"))
    assert config.file_path.endswith(".jsonl")


def test_configure_logging_console_only() -> None:
    configure_logging(LoggingConfig(level_name="DEBUG", console_format="text"))
    root = logging.getLogger()
    assert root.level == logging.DEBUG
    assert len(root.handlers) == 1
    assert root.handlers[0].level == logging.WARNING


def test_configure_logging_writes_json_file(tmp_path) -> None:
    log_file = tmp_path / "logs" / "run.jsonl"
    configure_logging(LoggingConfig(level_name="INFO", file_path=str(log_file)))

    logging.getLogger("test.logging.file").info("hello", extra={"shot": "A5"})
    shutdown_logging()

    content = log_file.read_text(encoding="utf-8")
    assert '"msg": "hello"' in content
    assert '"shot": "A5"' in content
