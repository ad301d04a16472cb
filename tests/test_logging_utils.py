import logging

import numpy as np
import pytest

from boxlink.logging_utils import _safe_repr, apply_debug_logging, debug_log_call
from boxlink.vector import vector

logger = logging.getLogger("boxlink.tests.tracing")


def _scale(point, factor=1):
    return point.times(factor)


def _explode():
    raise RuntimeError("boom")


class _Mover:
    def step(self, delta):
        return delta

    @staticmethod
    def origin():
        return vector(0, 0)


def test_debug_log_call_logs_entry_and_exit(caplog):
    traced = debug_log_call(logger)(_scale)

    with caplog.at_level(logging.DEBUG, logger=logger.name):
        result = traced(vector(1, 2), factor=3)

    assert result == vector(3, 6)
    assert "Entering _scale (args=[(1, 2)], kwargs={factor=3})" in caplog.text
    assert "Exiting _scale -> (3, 6)" in caplog.text


def test_debug_log_call_is_silent_above_debug(caplog):
    traced = debug_log_call(logger)(_scale)

    with caplog.at_level(logging.INFO, logger=logger.name):
        traced(vector(1, 2))

    assert caplog.records == []


def test_debug_log_call_logs_and_reraises_exceptions(caplog):
    traced = debug_log_call(logger)(_explode)

    with caplog.at_level(logging.DEBUG, logger=logger.name):
        with pytest.raises(RuntimeError, match="boom"):
            traced()

    assert "Exception in _explode" in caplog.text


def test_debug_log_call_does_not_wrap_twice():
    traced = debug_log_call(logger)(_scale)

    assert debug_log_call(logger)(traced) is traced


def test_apply_debug_logging_wraps_module_functions_and_methods(caplog):
    namespace = {
        "__name__": __name__,
        "_scale": _scale,
        "_explode": _explode,
        "_Mover": _Mover,
        "vector": vector,
    }

    apply_debug_logging(namespace, logger=logger, skip=["_explode"])

    assert namespace["_scale"] is not _scale
    assert namespace["_explode"] is _explode
    assert namespace["vector"] is vector

    with caplog.at_level(logging.DEBUG, logger=logger.name):
        _Mover().step(vector(1, 1))
        _Mover.origin()

    assert "Entering _Mover.step" in caplog.text
    assert "Exiting _Mover.origin -> (0, 0)" in caplog.text


def test_safe_repr_summarizes_arrays_and_sequences():
    assert _safe_repr(np.zeros((3, 4))) == "ndarray(shape=(3, 4), dtype=float64)"
    assert _safe_repr(np.array([1.0, 2.0])) == "ndarray(shape=(2,), dtype=float64) values=[1.0, 2.0]"
    assert _safe_repr([1, 2, 3, 4, 5, 6]) == "[1, 2, 3, 4, ... +2]"
    assert _safe_repr((vector(1, 2),)) == "((1, 2))"
