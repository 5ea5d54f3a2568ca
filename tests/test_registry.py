"""Tests for the operation registry."""

import pytest

from lti.engine.config import AnalysisConfig
from lti.engine.registry import available_operations, get_operation, register
from lti.errors import ConfigError
from lti.signals import AperiodicSignal


@pytest.fixture
def cfg(tmp_path):
    return AnalysisConfig.from_dict(
        {"samples": [4, 2, 5], "domain": "integer", "kernel": [0, 1]},
        base_dir=tmp_path,
    )


def test_builtin_operations_registered():
    for name in ("impulse", "step", "even_odd", "fold", "dft"):
        assert name in available_operations()


def test_impulse_component_names(cfg):
    out = get_operation("impulse")(cfg.load_signal(), cfg)
    assert list(out) == ["impulse_0", "impulse_1", "impulse_2"]
    assert out["impulse_1"] == AperiodicSignal.integer([0, 2, 0])


def test_step_components(cfg):
    out = get_operation("step")(cfg.load_signal(), cfg)
    assert out["step_1"] == AperiodicSignal.integer([0, -2, -2])
    assert out["step_2"] == AperiodicSignal.integer([0, 0, 3])


def test_even_odd_components(cfg):
    out = get_operation("even_odd")(cfg.load_signal(), cfg)
    assert list(out) == ["even", "odd"]


def test_fold_uses_config_kernel(cfg):
    out = get_operation("fold")(cfg.load_signal(), cfg)
    assert out["fold"] == AperiodicSignal.integer([0, 4, 2, 5])


def test_dft_components(cfg):
    out = get_operation("dft")(cfg.load_signal(), cfg)
    assert list(out) == ["cos_amplitude", "sin_amplitude"]
    assert len(out["cos_amplitude"]) == 2


def test_unknown_operation():
    with pytest.raises(ConfigError, match="Unknown operation"):
        get_operation("wavelet")


def test_register_custom_operation(cfg):
    register("negate", lambda signal, _cfg: {"negated": signal.new(-signal.values)})
    try:
        out = get_operation("negate")(cfg.load_signal(), cfg)
        assert out["negated"] == AperiodicSignal.integer([-4, -2, -5])
    finally:
        from lti.engine import registry
        registry._REGISTRY.pop("negate", None)
