import logging

import pytest

from knowledge_index.observability.log_utils import (
    log_exception_with_context,
    log_with_context,
    safe_log_value,
)


@pytest.mark.parametrize(
    "value,expected",
    [
        (None, "None"),
        ("text", "text"),
        ([1, 2, 3], "list(3 items)"),
        ({"a": 1}, "dict(1 keys)"),
        (42, "42"),
    ],
)
def test_safe_log_value(value, expected):
    assert safe_log_value(value) == expected


def test_safe_log_value_truncates():
    result = safe_log_value("x" * 20, max_length=5)
    assert result == "xxxxx... (truncated, 20 total)"


def test_log_with_context(caplog):
    logger = logging.getLogger("tests.log_utils")
    with caplog.at_level(logging.INFO, logger="tests.log_utils"):
        log_with_context(logger, logging.INFO, "indexed", files=["a", "b"], tenant="t1:")

    record = caplog.records[-1]
    assert record.getMessage() == "indexed"
    assert record.files == "list(2 items)"
    assert record.tenant == "t1:"


def test_log_exception_with_context(caplog):
    logger = logging.getLogger("tests.log_utils")
    try:
        raise RuntimeError("store offline")
    except RuntimeError as e:
        with caplog.at_level(logging.ERROR, logger="tests.log_utils"):
            log_exception_with_context(logger, "query failed", e, operation="query")

    record = caplog.records[-1]
    assert record.levelno == logging.ERROR
    assert record.error_type == "RuntimeError"
    assert record.error_msg == "store offline"
    assert record.operation == "query"
    assert record.exc_info is not None
