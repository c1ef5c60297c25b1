"""Tests for the equal-tempered tone stream."""

import copy
from itertools import islice

import numpy as np
import pytest

from tetcore.config import Settings
from tetpitch import A0, InvalidToneCount, ToneStream


def nth(iterable, n):
    return next(islice(iterable, n, None))


class TestToneStream:
    """Tests for ToneStream stepping."""

    def test_precision_single(self):
        """A0 stepped 4 octaves lands on A4 in float32."""
        value = nth(ToneStream(A0, 12, np.float32), 12 * 4 - 1)
        assert isinstance(value, np.float32)
        assert round(float(value)) == 440

    def test_precision_double(self):
        """A0 stepped 4 octaves lands on A4 in float64."""
        value = nth(ToneStream(A0, 12, "double"), 12 * 4 - 1)
        assert isinstance(value, np.float64)
        assert round(float(value)) == 440

    def test_first_value_is_one_step_above_seed(self):
        stream = ToneStream(440.0)
        assert stream.frequency == 440.0
        first = next(stream)
        assert abs(first - 440.0 * 2 ** (1 / 12)) < 1e-9
        assert stream.frequency == first

    def test_alternate_tone_count(self):
        """24-TET doubles every 24 steps and halves the semitone."""
        stream = ToneStream(A0, 24)
        values = stream.take(48)
        assert abs(values[23] - 55.0) < 1e-9
        assert abs(values[47] - 110.0) < 1e-9
        assert abs(values[1] - A0 * 2 ** (1 / 12)) < 1e-9

    def test_ratio(self):
        assert abs(ToneStream(A0, 12).ratio - 2 ** (1 / 12)) < 1e-12
        assert ToneStream(A0, 12, "single").ratio.dtype == np.float32

    def test_advance(self):
        """Advancing shifts the starting pitch."""
        stream = ToneStream(A0).advance(12)
        assert stream.frequency == pytest.approx(55.0)
        assert next(stream) == pytest.approx(55.0 * 2 ** (1 / 12))

        with pytest.raises(ValueError):
            ToneStream(A0).advance(-1)

    def test_take(self):
        values = ToneStream(A0, 12, "single").take(12)
        assert values.shape == (12,)
        assert values.dtype == np.float32
        assert np.all(np.diff(values) > 0)
        assert ToneStream(A0).take(0).shape == (0,)

    def test_deterministic(self):
        """Identical streams yield identical sequences."""
        a = ToneStream(A0, 12, "single")
        b = ToneStream(A0, 12, "single")
        assert np.array_equal(a.take(100), b.take(100))

    def test_clone_is_independent(self):
        stream = ToneStream(A0).advance(3)
        twin = stream.clone()
        copied = copy.copy(stream)

        ahead = stream.take(5)
        assert np.array_equal(twin.take(5), ahead)
        assert np.array_equal(copied.take(5), ahead)
        assert stream.frequency == twin.frequency


class TestToneStreamValidation:
    """Tests for construction preconditions."""

    @pytest.mark.parametrize("tone_count", [0, -12, 12.5, float("nan"), float("inf"), 10**400, -(10**400), True, "12", None])
    def test_rejects_invalid_tone_count(self, tone_count):
        with pytest.raises(InvalidToneCount):
            ToneStream(A0, tone_count)

    def test_invalid_tone_count_is_value_error(self):
        with pytest.raises(ValueError):
            ToneStream(A0, 0)

    def test_accepts_integral_float(self):
        assert ToneStream(A0, 12.0).tone_count == 12
        assert ToneStream(A0, np.int64(19)).tone_count == 19

    @pytest.mark.parametrize("frequency", [0.0, -27.5, float("inf"), float("nan")])
    def test_rejects_invalid_frequency(self, frequency):
        with pytest.raises(ValueError):
            ToneStream(frequency)

    def test_rejects_unknown_precision(self):
        with pytest.raises(ValueError):
            ToneStream(A0, 12, "quadruple")
        with pytest.raises(ValueError):
            ToneStream(A0, 12, np.int32)
        with pytest.raises(ValueError):
            ToneStream(A0, 12, None)


class TestFromSettings:
    """Tests for settings-driven construction."""

    def test_defaults(self):
        stream = ToneStream.from_settings(Settings())
        assert stream.frequency == A0
        assert stream.tone_count == 12
        assert stream.dtype is np.float64

    def test_from_environment(self, monkeypatch):
        monkeypatch.setenv("TET_REFERENCE_PITCH", "440")
        monkeypatch.setenv("TET_TONE_COUNT", "19")
        monkeypatch.setenv("TET_PRECISION", "single")

        stream = ToneStream.from_settings()
        assert stream.frequency == 440.0
        assert stream.tone_count == 19
        assert stream.dtype is np.float32
