import json
import logging

from fars.utils.logging import JsonFormatter, configure_logging


def test_json_formatter_merges_extra():
    record = logging.LogRecord(
        "fars.data.reader", logging.WARNING, __file__, 1, "invalid year: %s", (9999,), None
    )
    record.year = "9999"

    payload = json.loads(JsonFormatter().format(record))

    assert payload["msg"] == "invalid year: 9999"
    assert payload["level"] == "WARNING"
    assert payload["year"] == "9999"


def test_configure_logging_does_not_stack_handlers():
    logger = logging.getLogger("fars")
    before = list(logger.handlers)
    try:
        configure_logging("DEBUG")
        configure_logging("INFO", json_format=False)
        added = [h for h in logger.handlers if h not in before]
        assert len(added) == 1
        assert logger.level == logging.INFO
    finally:
        for handler in logger.handlers[:]:
            if handler not in before:
                logger.removeHandler(handler)
        logger.setLevel(logging.NOTSET)
