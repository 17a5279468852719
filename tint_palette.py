# -*- coding: utf-8 -*-
"""
Tint: Perceptual HCT color engine for UI theming
Copyright (c) 2026 opticsWolf

SPDX-License-Identifier: LGPL-3.0-or-later

Module: tint_palette.py — Tonal palettes.

A tonal palette fixes hue and chroma and is sampled at arbitrary tone.
Samples are gamut-mapped through ``tint_hct.solve_argb``, so a high-chroma
palette yields progressively less saturated colors near tone 0 and 100.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Dict, Final, Iterable, Tuple

from tint_errors import ColorArgumentError
from tint_hct import (
    DEFAULT_STRATEGY,
    ConversionStrategy,
    Hct,
    hct_from_argb,
    normalize_hue,
    solve_argb,
    validate_chroma,
    validate_tone,
)

__all__ = [
    "TONAL_STOPS",
    "TonalPalette",
    "tonal_palette_init",
    "tonal_palette_tone_argb",
]

logger = logging.getLogger(__name__)

# Material tone stops used for palette previews and exports
TONAL_STOPS: Final[Tuple[int, ...]] = (0, 10, 20, 30, 40, 50, 60, 70, 80, 90, 95, 99, 100)


@dataclass(slots=True, frozen=True)
class TonalPalette:
    """
    Fixed (hue, chroma) pair sampled at a tone supplied per query.

    Attributes:
        hue: Palette hue in degrees, wrapped into [0, 360).
        chroma: Palette chroma (>= 0).  Values above what sRGB can show at a
            given tone are reduced per sample, never stored reduced.

    Raises:
        ColorRangeError: If chroma is negative (or NaN/infinite).
    """
    hue:    float
    chroma: float

    def __post_init__(self) -> None:
        chroma = validate_chroma(self.chroma)
        object.__setattr__(self, "hue", normalize_hue(self.hue))
        object.__setattr__(self, "chroma", chroma)

    @classmethod
    def from_argb(cls, argb: int) -> TonalPalette:
        """Palette sharing the hue and chroma of an existing color."""
        return cls.from_hct(hct_from_argb(argb))

    @classmethod
    def from_hct(cls, hct: Hct) -> TonalPalette:
        return cls(hct.hue, hct.chroma)

    def tone(self, tone: float, strategy: ConversionStrategy = DEFAULT_STRATEGY) -> int:
        """
        Samples the palette.

        Args:
            tone: Tone in [0, 100].
            strategy: Probe used by the gamut search.

        Returns:
            Opaque ARGB color.
        """
        return solve_argb(self.hue, self.chroma, validate_tone(tone), strategy)

    def tones(self, tones: Iterable[float] = TONAL_STOPS,
              strategy: ConversionStrategy = DEFAULT_STRATEGY) -> Dict[float, int]:
        """Samples several tones at once, keyed by tone in iteration order."""
        ramp = {t: self.tone(t, strategy) for t in tones}
        logger.debug("Sampled %d tones of palette (%.2f, %.2f)",
                     len(ramp), self.hue, self.chroma)
        return ramp


# --- Functional API ---

def tonal_palette_init(hue: float, chroma: float) -> TonalPalette:
    """Creates a palette; equivalent to ``TonalPalette(hue, chroma)``."""
    return TonalPalette(hue, chroma)


def tonal_palette_tone_argb(palette: TonalPalette, tone: float,
                            strategy: ConversionStrategy = DEFAULT_STRATEGY) -> int:
    """Samples *palette* at *tone*; equivalent to ``palette.tone(tone)``."""
    if palette is None:
        raise ColorArgumentError("palette is required")
    if not isinstance(palette, TonalPalette):
        raise ColorArgumentError(f"Expected TonalPalette, got {type(palette).__name__}")
    return palette.tone(tone, strategy)
