"""Tests for lti.signals — construction, zero-padded reads, addition, equality."""

from __future__ import annotations

import numpy as np
import pandas as pd
import pytest

from lti.errors import DomainMismatchError, SignalDomainError
from lti.signals import INTEGER, REAL, AperiodicSignal, Signal


# ── construction / read-back ─────────────────────────────────────────────

def test_read_back_matches_samples():
    samples = [4, 2, 5, -1]
    sig = AperiodicSignal.integer(samples)
    assert len(sig) == 4
    assert [sig[i] for i in range(len(sig))] == samples
    assert list(sig) == samples


def test_out_of_range_reads_are_zero():
    sig = AperiodicSignal.integer([4, 2, 5])
    assert sig[-1] == 0
    assert sig[-100] == 0
    assert sig[3] == 0
    assert sig[1000] == 0


def test_real_zero_is_float():
    sig = AperiodicSignal.real([1.5, 2.5])
    assert sig[5] == 0.0
    assert isinstance(sig[5], float)
    assert isinstance(sig[0], float)


def test_integer_reads_are_ints():
    sig = AperiodicSignal.integer([3, 4])
    assert isinstance(sig[0], int)
    assert isinstance(sig[7], int)


def test_numpy_integer_index():
    sig = AperiodicSignal.integer([7, 8, 9])
    assert sig[np.int64(2)] == 9
    assert sig[np.int32(-1)] == 0


def test_non_integer_index_rejected():
    sig = AperiodicSignal.integer([7, 8, 9])
    with pytest.raises(TypeError):
        sig[1.0]
    with pytest.raises(TypeError):
        sig[0:2]


def test_default_domain_is_real():
    sig = AperiodicSignal([1, 2, 3])
    assert sig.domain == REAL
    assert sig.values.dtype == np.float64


def test_domain_given_by_name():
    sig = AperiodicSignal([1, 2], domain="integer")
    assert sig.domain is INTEGER
    assert sig[1] == 2 and isinstance(sig[1], int)


def test_unknown_domain_name_rejected():
    with pytest.raises(SignalDomainError, match="Unknown numeric domain"):
        AperiodicSignal([1, 2], domain="complex")


def test_empty_signal_constructs():
    sig = AperiodicSignal.integer([])
    assert len(sig) == 0
    assert sig[0] == 0
    assert list(sig) == []


# ── immutability ─────────────────────────────────────────────────────────

def test_values_are_read_only():
    sig = AperiodicSignal.integer([1, 2, 3])
    with pytest.raises(ValueError):
        sig.values[0] = 10


def test_construction_copies_input():
    raw = np.array([1.0, 2.0, 3.0])
    sig = AperiodicSignal.real(raw)
    raw[0] = 99.0
    assert sig[0] == 1.0


def test_new_keeps_type_and_domain():
    sig = AperiodicSignal.integer([1, 2, 3], name="x")
    other = sig.new([5, 6])
    assert isinstance(other, AperiodicSignal)
    assert other.domain == INTEGER
    assert list(other) == [5, 6]


# ── domain validation ────────────────────────────────────────────────────

def test_integer_domain_rejects_fractional_samples():
    with pytest.raises(SignalDomainError, match="integral samples"):
        AperiodicSignal.integer([1.0, 2.5])


def test_integer_domain_accepts_integral_floats():
    sig = AperiodicSignal.integer([1.0, -2.0])
    assert sig.values.dtype == np.int64
    assert list(sig) == [1, -2]


def test_integer_domain_rejects_values_beyond_int64():
    with pytest.raises(SignalDomainError, match="int64 range"):
        AperiodicSignal.integer([2**63])
    edge = AperiodicSignal.integer([2**63 - 1])
    assert edge[0] == 2**63 - 1


def test_complex_samples_rejected():
    with pytest.raises(SignalDomainError, match="complex"):
        AperiodicSignal.real([1 + 2j, 3])


def test_two_dimensional_samples_rejected():
    with pytest.raises(SignalDomainError, match="one-dimensional"):
        AperiodicSignal.real([[1, 2], [3, 4]])


def test_string_samples_rejected():
    with pytest.raises(SignalDomainError, match="numeric"):
        AperiodicSignal.real(["1", "2"])


# ── addition ─────────────────────────────────────────────────────────────

def test_add_same_length():
    a = AperiodicSignal.real([1.0, 4.0, 8.0, 3.0])
    b = AperiodicSignal.real([2.0, 3.0, 8.0, -1.0])
    assert a + b == AperiodicSignal.real([3.0, 7.0, 16.0, 2.0])


def test_add_rhs_shorter_zero_extends():
    a = AperiodicSignal.real([1.0, 4.0, 8.0, 3.0])
    b = AperiodicSignal.real([2.0, 3.0])
    assert a + b == AperiodicSignal.real([3.0, 7.0, 8.0, 3.0])


def test_add_lhs_shorter_zero_extends():
    a = AperiodicSignal.integer([2, 3])
    b = AperiodicSignal.integer([1, 4, 8, 3])
    result = a + b
    assert result == AperiodicSignal.integer([3, 7, 8, 3])
    assert result.domain == INTEGER


def test_add_mixed_domains_raises():
    a = AperiodicSignal.integer([1, 2])
    b = AperiodicSignal.real([1.0, 2.0])
    with pytest.raises(DomainMismatchError, match="Cannot add"):
        a + b


def test_add_non_signal_unsupported():
    with pytest.raises(TypeError):
        AperiodicSignal.real([1.0]) + 1


def test_integer_add_overflow_raises():
    big = AperiodicSignal.integer([2**62, 1])
    with pytest.raises(SignalDomainError, match="int64 range"):
        big + big


# ── equality / hashing ───────────────────────────────────────────────────

def test_equality_by_samples():
    assert AperiodicSignal.integer([1, 2, 3]) == AperiodicSignal.integer([1, 2, 3])
    assert AperiodicSignal.integer([1, 2, 3]) != AperiodicSignal.integer([1, 2])
    assert AperiodicSignal.integer([1, 2, 3]) != AperiodicSignal.integer([1, 2, 4])


def test_equality_ignores_name():
    assert AperiodicSignal.real([1.0], name="a") == AperiodicSignal.real([1.0], name="b")


def test_no_tolerance_in_equality():
    assert AperiodicSignal.real([0.1 + 0.2]) != AperiodicSignal.real([0.3])


def test_hash_consistent_with_equality():
    a = AperiodicSignal.integer([1, 2, 3])
    b = AperiodicSignal.integer([1, 2, 3])
    assert hash(a) == hash(b)
    assert len({a, b}) == 1


# ── protocol / interop ───────────────────────────────────────────────────

def test_satisfies_signal_protocol():
    assert isinstance(AperiodicSignal.real([1.0]), Signal)


def test_repr():
    assert repr(AperiodicSignal.integer([1, 2])) == "AperiodicSignal([1, 2], domain=integer)"


def test_to_series():
    sig = AperiodicSignal.integer([4, 2, 5], name="x")
    series = sig.to_series()
    expected = pd.Series(
        [4, 2, 5], index=pd.RangeIndex(3, name="n"), name="x", dtype=np.int64,
    )
    pd.testing.assert_series_equal(series, expected)
