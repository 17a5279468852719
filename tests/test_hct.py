# Tint - Unit tests for HCT conversion and gamut mapping
"""
Tests for tint_hct.

Tests cover:
- Hct construction (hue wrapping, type checks)
- hct_from_argb measurement
- hct_to_argb / solve_argb gamut search (endpoints, ranges, bounded probing)
- Conversion strategy injection and invalid strategy results
"""

from __future__ import annotations

import dataclasses
import logging
import math

import pytest

from conftest import ConstantStrategy, CountingStrategy, FailingStrategy, ProbeFailure
from tint_colorengine import OPAQUE_BLACK, OPAQUE_WHITE, rgba_from_argb
from tint_errors import ColorArgumentError, ColorConversionError, ColorRangeError
from tint_hct import (
    BISECTION_STEPS,
    DEFAULT_STRATEGY,
    Hct,
    LabConversion,
    hct_from_argb,
    hct_to_argb,
    normalize_hue,
    solve_argb,
)


def _hue_distance(a: float, b: float) -> float:
    d = abs(a - b) % 360.0
    return min(d, 360.0 - d)


# ─────────────────────────────────────────────────────────────────────────────
# Hct value type
# ─────────────────────────────────────────────────────────────────────────────


class TestHctValue:
    """Tests for the Hct dataclass."""

    @pytest.mark.parametrize(
        "hue,expected",
        [(370.0, 10.0), (-10.0, 350.0), (360.0, 0.0), (0.0, 0.0), (725, 5.0)],
    )
    def test_hue_is_wrapped(self, hue, expected):
        assert Hct(hue, 10.0, 50.0).hue == pytest.approx(expected, abs=1e-12)

    @pytest.mark.parametrize("hue", [math.nan, math.inf, -math.inf])
    def test_non_finite_hue(self, hue):
        with pytest.raises(ColorRangeError):
            Hct(hue, 10.0, 50.0)

    @pytest.mark.parametrize(
        "args", [("0", 10.0, 50.0), (0.0, None, 50.0), (0.0, 10.0, "50"), (True, 1.0, 1.0)]
    )
    def test_wrong_types(self, args):
        with pytest.raises(ColorArgumentError):
            Hct(*args)

    def test_out_of_range_values_are_stored(self):
        """Construction accepts any chroma/tone; conversion rejects them."""
        hct = Hct(0.0, -1.0, 150.0)
        assert (hct.chroma, hct.tone) == (-1.0, 150.0)

    def test_is_frozen(self):
        hct = Hct(10.0, 20.0, 30.0)
        with pytest.raises(dataclasses.FrozenInstanceError):
            hct.hue = 5.0

    def test_with_tone(self):
        hct = Hct(10.0, 20.0, 30.0).with_tone(70.0)
        assert hct == Hct(10.0, 20.0, 70.0)

    def test_normalize_hue_function(self):
        assert normalize_hue(-90) == pytest.approx(270.0)


# ─────────────────────────────────────────────────────────────────────────────
# Measurement
# ─────────────────────────────────────────────────────────────────────────────


class TestHctFromArgb:
    """Tests for hct_from_argb."""

    def test_black(self):
        hct = hct_from_argb(OPAQUE_BLACK)
        assert hct.tone == pytest.approx(0.0, abs=1e-9)
        assert hct.chroma == pytest.approx(0.0, abs=1e-9)

    def test_white(self):
        hct = hct_from_argb(OPAQUE_WHITE)
        assert hct.tone == pytest.approx(100.0, abs=1e-4)
        assert hct.chroma < 1e-3

    def test_red(self):
        hct = hct_from_argb(0xFFFF0000)
        assert hct.tone == pytest.approx(53.24, abs=0.1)
        assert hct.chroma == pytest.approx(104.55, abs=0.2)
        assert hct.hue == pytest.approx(40.0, abs=0.5)

    def test_classmethod_alias(self):
        assert Hct.from_argb(0xFF3366FF) == hct_from_argb(0xFF3366FF)

    def test_alpha_is_ignored(self):
        assert hct_from_argb(0x403366FF) == hct_from_argb(0xFF3366FF)

    @pytest.mark.parametrize("bad,error", [(None, ColorArgumentError), (-1, ColorRangeError)])
    def test_invalid_argb(self, bad, error):
        with pytest.raises(error):
            hct_from_argb(bad)


# ─────────────────────────────────────────────────────────────────────────────
# Gamut-constrained inversion
# ─────────────────────────────────────────────────────────────────────────────


class TestHctToArgb:
    """Tests for hct_to_argb / solve_argb with the default strategy."""

    def test_hue_wrap_equivalence(self):
        assert hct_to_argb(Hct(370.0, 10.0, 50.0)) == hct_to_argb(Hct(10.0, 10.0, 50.0))

    @pytest.mark.parametrize("hue,chroma", [(0.0, 0.0), (120.0, 50.0), (300.0, 500.0)])
    def test_tone_endpoints(self, hue, chroma):
        assert hct_to_argb(Hct(hue, chroma, 0.0)) == OPAQUE_BLACK
        assert hct_to_argb(Hct(hue, chroma, 100.0)) == OPAQUE_WHITE

    @pytest.mark.parametrize(
        "hct", [Hct(0.0, -1.0, 50.0), Hct(0.0, 10.0, -1.0), Hct(0.0, 10.0, 101.0)]
    )
    def test_range_errors(self, hct):
        with pytest.raises(ColorRangeError):
            hct_to_argb(hct)

    def test_nan_chroma(self):
        with pytest.raises(ColorRangeError):
            solve_argb(0.0, math.nan, 50.0)

    @pytest.mark.parametrize("bad", [None, (10.0, 10.0, 50.0), 0xFF000000])
    def test_requires_hct(self, bad):
        with pytest.raises(ColorArgumentError):
            hct_to_argb(bad)

    def test_red_round_trip(self):
        """A displayable color comes back within 2 units per channel."""
        red = 0xFFFF0000
        back = hct_to_argb(hct_from_argb(red))
        for got, want in zip(rgba_from_argb(back), rgba_from_argb(red)):
            assert abs(got - want) <= 2

    @pytest.mark.parametrize("argb", [0xFF3366FF, 0xFF808080, 0xFF123456, 0xFF00FF00])
    def test_round_trip_samples(self, argb):
        back = hct_to_argb(hct_from_argb(argb))
        for got, want in zip(rgba_from_argb(back), rgba_from_argb(argb)):
            assert abs(got - want) <= 2

    def test_out_of_gamut_chroma_is_reduced(self):
        mapped = hct_to_argb(Hct(30.0, 200.0, 50.0))
        measured = hct_from_argb(mapped)
        assert measured.chroma <= 200.0 + 1e-6
        assert measured.chroma > 40.0
        assert measured.tone == pytest.approx(50.0, abs=2.0)
        assert _hue_distance(measured.hue, 30.0) < 3.0

    @pytest.mark.parametrize(
        "hct", [Hct(30.0, 200.0, 50.0), Hct(200.0, 20.0, 70.0), Hct(0.0, 0.0, 1.0)]
    )
    def test_result_is_opaque(self, hct):
        assert rgba_from_argb(hct_to_argb(hct))[3] == 0xFF

    def test_deterministic(self):
        hct = Hct(271.3, 87.0, 42.0)
        assert hct_to_argb(hct) == hct_to_argb(hct)

    def test_method_matches_function(self):
        hct = Hct(140.0, 60.0, 60.0)
        assert hct.to_argb() == hct_to_argb(hct) == solve_argb(140.0, 60.0, 60.0)

    def test_logs_gamut_search(self, caplog):
        caplog.set_level(logging.DEBUG, logger="tint_hct")
        hct_to_argb(Hct(30.0, 200.0, 50.0))
        assert "bisecting" in caplog.text


# ─────────────────────────────────────────────────────────────────────────────
# Strategy injection
# ─────────────────────────────────────────────────────────────────────────────


class TestConversionStrategy:
    """Tests for probe counting and failure propagation."""

    def test_default_strategy(self):
        assert isinstance(DEFAULT_STRATEGY, LabConversion)
        assert repr(DEFAULT_STRATEGY) == "LabConversion()"

    def test_in_gamut_request_probes_once(self, counting_strategy):
        hct_to_argb(Hct(0.0, 0.0, 50.0), counting_strategy)
        assert counting_strategy.calls == 1

    def test_out_of_gamut_request_probe_count_is_fixed(self, counting_strategy):
        hct_to_argb(Hct(30.0, 200.0, 50.0), counting_strategy)
        assert counting_strategy.calls == 2 + BISECTION_STEPS

    def test_endpoints_do_not_probe(self, counting_strategy):
        hct_to_argb(Hct(30.0, 200.0, 0.0), counting_strategy)
        hct_to_argb(Hct(30.0, 200.0, 100.0), counting_strategy)
        assert counting_strategy.calls == 0

    def test_counting_strategy_matches_default(self):
        hct = Hct(30.0, 200.0, 50.0)
        assert hct_to_argb(hct, CountingStrategy()) == hct_to_argb(hct)

    @pytest.mark.parametrize("fail_on", [1, 2, 10, 26])
    def test_failure_propagates_unchanged(self, fail_on):
        with pytest.raises(ProbeFailure):
            hct_to_argb(Hct(30.0, 200.0, 50.0), FailingStrategy(fail_on))

    @pytest.mark.parametrize(
        "result", [None, (0xFF000000,), "oops", (-1, True), (0x1_0000_0000, True), (1.5, True)]
    )
    def test_invalid_result(self, result):
        with pytest.raises(ColorConversionError):
            hct_to_argb(Hct(30.0, 20.0, 50.0), ConstantStrategy(result))

    def test_always_out_of_gamut_falls_back_to_first_gray_probe(self):
        gray = 0xFF777777
        assert solve_argb(30.0, 50.0, 50.0, ConstantStrategy((gray, False))) == gray
