# -*- coding: utf-8 -*-
"""
Tint: Perceptual HCT color engine for UI theming
Copyright (c) 2026 opticsWolf

SPDX-License-Identifier: LGPL-3.0-or-later

Module: tint_hct.py — HCT value type and gamut-constrained inversion.

HCT (Hue, Chroma, Tone) is the cylindrical form of CIE L*a*b* used by the
Material color system: tone is L*, chroma is sqrt(a*² + b*²) and hue is
atan2(b*, a*) in degrees.  Converting HCT back to sRGB is lossy whenever the
requested chroma is not displayable at that hue and tone; ``solve_argb``
then searches for the largest displayable chroma instead, keeping hue and
tone fixed.

Gamut search:
    1. tone <= 0 / tone >= 100 short-circuit to black / white.
    2. The requested color is probed once; if it is in gamut it is returned.
    3. Otherwise the achromatic color (chroma 0) is probed once and kept as
       the fallback result, so a request whose every bisection probe misses
       the gamut still returns a gray of the requested tone.
    4. Chroma is then bisected over [0, chroma] for exactly
       ``BISECTION_STEPS`` iterations (no convergence test).  Every
       out-of-gamut request therefore costs ``BISECTION_STEPS + 2`` probes
       and yields bit-identical results on every platform.

Probes go through a ``ConversionStrategy``.  The default strategy wraps the
Numba Lab kernels; tests substitute their own to exercise failure paths
without any module-level switches.
"""

from __future__ import annotations

import logging
import math
import numbers
from dataclasses import dataclass
from typing import Any, Final, Protocol, Tuple

from tint_colorengine import (
    OPAQUE_BLACK,
    OPAQUE_WHITE,
    argb_to_xyz,
    lch_to_argb,
    wrap_hue,
    xyz_to_lab,
)
from tint_errors import ColorArgumentError, ColorConversionError, ColorRangeError

__all__ = [
    "BISECTION_STEPS",
    "ConversionStrategy",
    "LabConversion",
    "DEFAULT_STRATEGY",
    "Hct",
    "normalize_hue",
    "validate_chroma",
    "validate_tone",
    "hct_from_argb",
    "hct_to_argb",
    "solve_argb",
]

logger = logging.getLogger(__name__)

BISECTION_STEPS: Final[int] = 24


# ---------------------------------------------------------------------------
# 1.  Conversion strategies
# ---------------------------------------------------------------------------
class ConversionStrategy(Protocol):
    """Anything able to turn (hue, chroma, tone) into ``(argb, in_gamut)``."""

    def lch_to_argb(self, hue: float, chroma: float, tone: float) -> Tuple[int, bool]:
        ...


class LabConversion:
    """Default strategy backed by the compiled CIE Lab kernels."""

    __slots__ = ()

    def lch_to_argb(self, hue: float, chroma: float, tone: float) -> Tuple[int, bool]:
        return lch_to_argb(hue, chroma, tone)

    def __repr__(self) -> str:
        return "LabConversion()"


DEFAULT_STRATEGY: Final[ConversionStrategy] = LabConversion()


def _probe(strategy: ConversionStrategy, hue: float, chroma: float,
           tone: float) -> Tuple[int, bool]:
    result = strategy.lch_to_argb(hue, chroma, tone)
    try:
        argb, in_gamut = result
    except (TypeError, ValueError) as exc:
        raise ColorConversionError(
            f"{strategy!r} returned {result!r}, expected (argb, in_gamut)"
        ) from exc
    if (isinstance(argb, bool) or not isinstance(argb, numbers.Integral)
            or not 0 <= argb <= OPAQUE_WHITE):
        raise ColorConversionError(f"{strategy!r} returned invalid color {argb!r}")
    return int(argb), bool(in_gamut)


# ---------------------------------------------------------------------------
# 2.  Validation helpers
# ---------------------------------------------------------------------------
def _require_real(value: Any, name: str) -> float:
    if isinstance(value, bool) or not isinstance(value, numbers.Real):
        raise ColorArgumentError(
            f"{name} must be a real number, got {type(value).__name__}"
        )
    return float(value)


def normalize_hue(hue: Any) -> float:
    """
    Wraps *hue* into [0, 360).

    Any finite angle is accepted; 370 becomes 10 and -10 becomes 350.

    Raises:
        ColorArgumentError: If *hue* is not a real number.
        ColorRangeError: If *hue* is NaN or infinite.
    """
    h = _require_real(hue, "hue")
    if not math.isfinite(h):
        raise ColorRangeError(f"hue must be finite, got {h}")
    return float(wrap_hue(h))


def validate_chroma(chroma: Any) -> float:
    """Returns *chroma* as float; rejects negative, NaN and infinite values."""
    c = _require_real(chroma, "chroma")
    # "not >=" also rejects NaN
    if not c >= 0.0 or math.isinf(c):
        raise ColorRangeError(f"chroma must be a finite value >= 0, got {c}")
    return c


def validate_tone(tone: Any) -> float:
    """Returns *tone* as float; rejects values outside [0, 100]."""
    t = _require_real(tone, "tone")
    if not 0.0 <= t <= 100.0:
        raise ColorRangeError(f"tone must lie in [0, 100], got {t}")
    return t


# ---------------------------------------------------------------------------
# 3.  Hct value type
# ---------------------------------------------------------------------------
@dataclass(slots=True, frozen=True)
class Hct:
    """
    Hue-Chroma-Tone color.

    The constructor wraps ``hue`` into [0, 360).  ``chroma`` and ``tone``
    are stored as given: an HCT request may describe an undisplayable color,
    and out-of-range values are rejected by ``to_argb`` rather than here.
    """
    hue:    float
    chroma: float
    tone:   float

    def __post_init__(self) -> None:
        object.__setattr__(self, "hue", normalize_hue(self.hue))
        object.__setattr__(self, "chroma", _require_real(self.chroma, "chroma"))
        object.__setattr__(self, "tone", _require_real(self.tone, "tone"))

    @classmethod
    def from_argb(cls, argb: int) -> Hct:
        return hct_from_argb(argb)

    def to_argb(self, strategy: ConversionStrategy = DEFAULT_STRATEGY) -> int:
        return solve_argb(self.hue, self.chroma, self.tone, strategy)

    def with_tone(self, tone: float) -> Hct:
        return Hct(self.hue, self.chroma, tone)


# ---------------------------------------------------------------------------
# 4.  Conversions
# ---------------------------------------------------------------------------
def hct_from_argb(argb: int) -> Hct:
    """
    Measures the HCT coordinates of a packed sRGB color.

    Alpha is ignored.  Achromatic colors report chroma ~0 and an arbitrary
    (but deterministic) hue.
    """
    x, y, z = argb_to_xyz(argb)
    l, a, b = xyz_to_lab(x, y, z)
    hue = math.degrees(math.atan2(b, a))
    return Hct(hue, math.hypot(a, b), l)


def solve_argb(hue: float, chroma: float, tone: float,
               strategy: ConversionStrategy = DEFAULT_STRATEGY) -> int:
    """
    Converts HCT components to the closest displayable opaque ARGB color.

    Hue and tone are preserved; only chroma is reduced when the request lies
    outside the sRGB gamut.

    Args:
        hue: Hue in degrees, any finite value.
        chroma: Requested chroma (>= 0).
        tone: Tone / L* in [0, 100].
        strategy: Probe used by the gamut search.

    Returns:
        Opaque ARGB color.

    Raises:
        ColorRangeError: If chroma < 0 or tone lies outside [0, 100].
        ColorConversionError: If the strategy returns an invalid color.
    """
    chroma = validate_chroma(chroma)
    tone = validate_tone(tone)

    if tone <= 0.0:
        return OPAQUE_BLACK
    if tone >= 100.0:
        return OPAQUE_WHITE

    hue = normalize_hue(hue)

    argb, in_gamut = _probe(strategy, hue, chroma, tone)
    if in_gamut:
        return argb

    logger.debug("HCT(%.3f, %.3f, %.3f) outside sRGB gamut, bisecting chroma",
                 hue, chroma, tone)

    best, _ = _probe(strategy, hue, 0.0, tone)
    low = 0.0
    high = chroma
    for _ in range(BISECTION_STEPS):
        mid = (low + high) * 0.5
        candidate, in_gamut = _probe(strategy, hue, mid, tone)
        if in_gamut:
            best = candidate
            low = mid
        else:
            high = mid

    logger.debug("Gamut search settled at chroma %.4f -> %#010x", low, best)
    return best


def hct_to_argb(hct: Hct, strategy: ConversionStrategy = DEFAULT_STRATEGY) -> int:
    """Gamut-mapped conversion of an ``Hct`` value; see ``solve_argb``."""
    if hct is None:
        raise ColorArgumentError("hct is required")
    if not isinstance(hct, Hct):
        raise ColorArgumentError(f"Expected Hct, got {type(hct).__name__}")
    return solve_argb(hct.hue, hct.chroma, hct.tone, strategy)


# =============================================================================
# Validation Block
# =============================================================================
if __name__ == "__main__":
    print("--- Tint HCT Validation ---")

    print("1. Pure red round trip...")
    red = hct_from_argb(0xFFFF0000)
    back = red.to_argb()
    print(f"   {red} -> {back:#010x}")

    print("2. Out-of-gamut request (h=30, C=200, T=50)...")
    mapped = Hct(30.0, 200.0, 50.0).to_argb()
    measured = hct_from_argb(mapped)
    print(f"   -> {mapped:#010x}, measured {measured} "
          f"{'[PASS]' if measured.chroma <= 200.0 and abs(measured.tone - 50.0) <= 2.0 else '[FAIL]'}")

    print("3. Range rejection...")
    for bad in (Hct(0.0, -1.0, 50.0), Hct(0.0, 10.0, -1.0), Hct(0.0, 10.0, 101.0)):
        try:
            bad.to_argb()
            print(f"   [FAIL] {bad} accepted")
        except ColorRangeError as e:
            print(f"   [PASS] {e}")
