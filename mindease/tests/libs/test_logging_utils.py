import json
import logging

from mindease.libs import logging_utils


def test_json_formatter_carries_extra_fields():
    record = logging.LogRecord("mindease.test", logging.INFO, __file__, 1, "hello %s", ("world",), None)
    record.event = "insight_service_config"
    payload = json.loads(logging_utils.JsonFormatter().format(record))
    assert payload["message"] == "hello world"
    assert payload["level"] == "INFO"
    assert payload["logger"] == "mindease.test"
    assert payload["event"] == "insight_service_config"


def test_configure_logging_respects_level(monkeypatch):
    monkeypatch.setenv("MINDEASE_LOG_LEVEL", "warning")
    monkeypatch.setenv("MINDEASE_LOG_FORMAT", "text")
    logging_utils.configure_logging()
    assert logging.getLogger().level == logging.WARNING


def test_text_formatter_colors_only_warnings_and_errors():
    formatter = logging_utils.ColorTextFormatter("%(message)s", use_color=True)

    def make(level):
        return logging.LogRecord("mindease.test", level, __file__, 1, "msg", None, None)

    assert formatter.format(make(logging.INFO)) == "msg"
    assert formatter.format(make(logging.WARNING)) == "\033[33mmsg\033[0m"
    assert formatter.format(make(logging.ERROR)) == "\033[31mmsg\033[0m"


def test_text_formatter_color_follows_env(monkeypatch):
    monkeypatch.setenv("MINDEASE_LOG_COLOR", "0")
    assert logging_utils.ColorTextFormatter("%(message)s").use_color is False
    monkeypatch.setenv("MINDEASE_LOG_COLOR", "1")
    assert logging_utils.ColorTextFormatter("%(message)s").use_color is True


def test_configure_logging_arguments_override_env(monkeypatch):
    monkeypatch.setenv("MINDEASE_LOG_LEVEL", "debug")
    logging_utils.configure_logging(level="error", log_format="json")
    root = logging.getLogger()
    assert root.level == logging.ERROR
    assert any(isinstance(h.formatter, logging_utils.JsonFormatter) for h in root.handlers)
