import io
import json
import logging
import sys

import pytest

from simulation.logging_config import ConsoleFormatter, JSONFormatter, setup_logging


def make_record(message="Order 101: ready at Pizza Palace", exc_info=None, **extra):
    record = logging.LogRecord(
        name="orders.processing",
        level=logging.INFO,
        pathname=__file__,
        lineno=10,
        msg=message,
        args=(),
        exc_info=exc_info,
    )
    record.__dict__.update(extra)
    return record


def raised_exc_info():
    try:
        raise RuntimeError("oven on fire")
    except RuntimeError:
        return sys.exc_info()


@pytest.fixture
def restore_root_logger():
    root = logging.getLogger()
    saved_handlers, saved_level = list(root.handlers), root.level
    yield root
    root.handlers[:] = saved_handlers
    root.setLevel(saved_level)


def test_json_formatter():
    payload = json.loads(JSONFormatter().format(make_record()))

    assert payload["level"] == "INFO"
    assert payload["logger"] == "orders.processing"
    assert payload["message"] == "Order 101: ready at Pizza Palace"
    assert "order_id" not in payload


def test_json_formatter_copies_order_context():
    record = make_record(order_id=101, restaurant="Pizza Palace")

    payload = json.loads(JSONFormatter().format(record))

    assert payload["order_id"] == 101
    assert payload["restaurant"] == "Pizza Palace"


def test_json_formatter_includes_traceback():
    payload = json.loads(JSONFormatter().format(make_record(exc_info=raised_exc_info())))

    assert "RuntimeError: oven on fire" in payload["exception"]


def test_console_formatter():
    line = ConsoleFormatter().format(make_record())

    assert line.endswith("[INFO] [orders.processing] Order 101: ready at Pizza Palace")


def test_console_formatter_keeps_traceback():
    output = ConsoleFormatter().format(make_record("Order 101 crashed", exc_info=raised_exc_info()))

    first_line, _, rest = output.partition("\n")
    assert first_line.endswith("[INFO] [orders.processing] Order 101 crashed")
    assert rest.startswith("Traceback (most recent call last):")
    assert rest.rstrip().endswith("RuntimeError: oven on fire")


def test_setup_logging_replaces_handlers(monkeypatch, restore_root_logger):
    monkeypatch.setenv("LOG_FORMAT", "json")
    monkeypatch.delenv("LOG_LEVEL", raising=False)

    setup_logging(logging.DEBUG)
    setup_logging(logging.DEBUG)

    assert len(restore_root_logger.handlers) == 1
    assert isinstance(restore_root_logger.handlers[0].formatter, JSONFormatter)
    assert restore_root_logger.level == logging.DEBUG


def test_setup_logging_writes_exceptions_to_stream(monkeypatch, restore_root_logger):
    monkeypatch.delenv("LOG_FORMAT", raising=False)
    monkeypatch.delenv("LOG_LEVEL", raising=False)
    stream = io.StringIO()

    setup_logging(logging.INFO, stream=stream)
    try:
        raise KeyError(101)
    except KeyError:
        logging.getLogger("dispatch.workflow").exception("Order 101 failed")

    output = stream.getvalue()
    assert "[ERROR] [dispatch.workflow] Order 101 failed" in output
    assert "Traceback (most recent call last):" in output
    assert "KeyError: 101" in output


def test_log_level_env_overrides_argument(monkeypatch, restore_root_logger):
    monkeypatch.setenv("LOG_LEVEL", "warning")

    setup_logging(logging.DEBUG)

    assert restore_root_logger.level == logging.WARNING


def test_unknown_log_level_is_rejected(monkeypatch, restore_root_logger):
    monkeypatch.setenv("LOG_LEVEL", "chatty")

    with pytest.raises(ValueError, match="Unknown LOG_LEVEL"):
        setup_logging()
