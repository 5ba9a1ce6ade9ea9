import json
import logging

import pytest

from cornerstones.core.errors import ClassNotFoundError, DomainError, InvalidAssessmentData, NotFoundError
from cornerstones.core.logging import JsonFormatter, correlation_context, get_correlation_id, get_logger
from cornerstones.core.numeric import clamp, round_half_up, safe_div


def test_round_half_up_differs_from_bankers_rounding():
    assert round(12.5) == 12
    assert round_half_up(12.5) == 13
    assert round_half_up(33.333) == 33
    assert round_half_up(66.667) == 67


def test_safe_div_and_clamp():
    assert safe_div(1, 0) == 0.0
    assert safe_div(1, 0, default=-1.0) == -1.0
    assert safe_div(3, 4) == 0.75
    assert clamp(150, 0, 100) == 100
    assert clamp(-3, 0, 100) == 0
    with pytest.raises(ValueError):
        clamp(1, 5, 0)


def test_domain_error_defaults_and_hierarchy():
    err = ClassNotFoundError()
    assert isinstance(err, NotFoundError)
    assert err.status_code == 404
    assert err.message == "Class not found"
    custom = DomainError("teapot", status_code=418, detail={"x": 1})
    assert custom.status_code == 418
    assert custom.detail == {"x": 1}
    assert isinstance(InvalidAssessmentData(), ValueError)


def test_correlation_context_binds_and_resets():
    assert get_correlation_id() is None
    with correlation_context("cid-1") as cid:
        assert cid == "cid-1"
        assert get_correlation_id() == "cid-1"
    assert get_correlation_id() is None
    with correlation_context() as generated:
        assert len(generated) == 36


def test_json_formatter_merges_structured_data():
    logger = get_logger("cornerstones.tests", component="test")
    records = []

    class _Capture(logging.Handler):
        def emit(self, record):
            records.append(JsonFormatter().format(record))

    handler = _Capture()
    logger.logger.addHandler(handler)
    logger.logger.setLevel(logging.INFO)
    try:
        with correlation_context("cid-log"):
            logger.info("something_happened", extra={"structured_data": {"count": 3}})
    finally:
        logger.logger.removeHandler(handler)

    payload = json.loads(records[0])
    assert payload["event"] == "something_happened"
    assert payload["component"] == "test"
    assert payload["count"] == 3
    assert payload["correlation_id"] == "cid-log"
