import logging

import numpy as np
import pytest

from intergeo_ir.logging_utils import _safe_repr, apply_debug_logging, debug_log_call

logger = logging.getLogger("tests.logging_utils")


def test_debug_log_call_logs_arguments_and_result(caplog):
    @debug_log_call(logger, name="scale")
    def scale(values, factor=2.0):
        return values * factor

    with caplog.at_level(logging.DEBUG, logger=logger.name):
        scale(np.array([1.0, 2.0]), factor=3.0)

    assert "Entering scale (args=[ndarray([1., 2.])], kwargs={factor=3.0})" in caplog.text
    assert "Exiting scale -> ndarray([3., 6.])" in caplog.text


def test_debug_log_call_reraises(caplog):
    @debug_log_call(logger)
    def fail():
        raise ValueError("boom")

    with caplog.at_level(logging.DEBUG, logger=logger.name), pytest.raises(ValueError):
        fail()
    assert "Exception in" in caplog.text


def test_apply_debug_logging_wraps_functions_and_methods():
    def helper():
        return 1

    class Handlers:
        def run(self):
            return 2

    helper.__module__ = "fake_module"
    Handlers.__module__ = "fake_module"
    Handlers.run.__module__ = "fake_module"
    namespace = {"__name__": "fake_module", "helper": helper, "Handlers": Handlers}

    apply_debug_logging(namespace, logger=logger, skip={"Handlers.skipped"})

    assert getattr(namespace["helper"], "_debug_logging_wrapped", False)
    assert getattr(Handlers.run, "_debug_logging_wrapped", False)
    assert namespace["helper"]() == 1
    assert Handlers().run() == 2


def test_safe_repr_summarizes_large_arrays():
    assert _safe_repr(np.zeros((3, 3))) == "ndarray(shape=(3, 3), dtype=float64)"
