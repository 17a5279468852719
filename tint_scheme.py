# -*- coding: utf-8 -*-
"""
Tint: Perceptual HCT color engine for UI theming
Copyright (c) 2026 opticsWolf

SPDX-License-Identifier: LGPL-3.0-or-later

Module: tint_scheme.py — Dynamic color scheme generation.

A single source color is expanded into six tonal palettes, which are then
sampled at fixed tones to fill the 23 UI roles of a ``Scheme``:

    source ARGB ──> HCT (hue, chroma)
                     │
                     ├─ primary          (hue,      max(C,        48))
                     ├─ secondary        (hue,      max(C * 0.33, 16))
                     ├─ tertiary         (hue + 60, max(C * 0.5,  24))
                     ├─ neutral          (hue,      4)
                     ├─ neutral_variant  (hue,      8)
                     └─ error            (25,       84)
                                │
                     role tone table (light or dark) ──> Scheme

Palette rules and tone tables live in a ``SchemeRecipe``; ``MATERIAL_RECIPE``
is the default.  Generation is all-or-nothing: the first failing sample
propagates unchanged and no ``Scheme`` is built.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, fields
from types import MappingProxyType
from typing import Dict, Final, Mapping, Optional, Tuple, TypeAlias

from tint_colorengine import argb_to_hex
from tint_errors import ColorArgumentError, ColorRangeError
from tint_hct import DEFAULT_STRATEGY, ConversionStrategy, hct_from_argb, validate_chroma
from tint_palette import TonalPalette

__all__ = [
    "PALETTE_NAMES",
    "ROLES",
    "PaletteRule",
    "SchemeRecipe",
    "MATERIAL_RECIPE",
    "Scheme",
    "generate_scheme",
    "scheme_generate",
]

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Type aliases
# ---------------------------------------------------------------------------
RoleTone: TypeAlias = Tuple[str, float]

PALETTE_NAMES: Final[Tuple[str, ...]] = (
    "primary", "secondary", "tertiary", "neutral", "neutral_variant", "error",
)


# ---------------------------------------------------------------------------
# 1.  Scheme value type
# ---------------------------------------------------------------------------
@dataclass(slots=True, frozen=True)
class Scheme:
    """
    The 23 ARGB colors of a light or dark UI theme.

    Field order is part of the public contract: ``as_dict`` and ``ROLES``
    follow it.
    """
    primary:                int
    on_primary:             int
    primary_container:      int
    on_primary_container:   int
    secondary:              int
    on_secondary:           int
    secondary_container:    int
    on_secondary_container: int
    tertiary:               int
    on_tertiary:            int
    tertiary_container:     int
    on_tertiary_container:  int
    background:             int
    on_background:          int
    surface:                int
    on_surface:             int
    surface_variant:        int
    on_surface_variant:     int
    outline:                int
    error:                  int
    on_error:               int
    error_container:        int
    on_error_container:     int

    @classmethod
    def light(cls, source_argb: int) -> Scheme:
        return generate_scheme(source_argb, False)

    @classmethod
    def dark(cls, source_argb: int) -> Scheme:
        return generate_scheme(source_argb, True)

    def as_dict(self) -> Dict[str, int]:
        """Role name -> ARGB, in field order."""
        return {f.name: getattr(self, f.name) for f in fields(self)}

    def as_hex(self) -> Dict[str, str]:
        """Role name -> ``#RRGGBB``, in field order."""
        return {role: argb_to_hex(argb) for role, argb in self.as_dict().items()}


ROLES: Final[Tuple[str, ...]] = tuple(f.name for f in fields(Scheme))


# ---------------------------------------------------------------------------
# 2.  Recipe (palette rules + tone tables)
# ---------------------------------------------------------------------------
@dataclass(slots=True, frozen=True)
class PaletteRule:
    """
    Derives one palette from the source hue and chroma.

    ``hue = fixed_hue if set, else source_hue + hue_offset``
    ``chroma = max(source_chroma * chroma_scale, chroma_floor)``

    A ``chroma_scale`` of 0 gives a constant chroma equal to the floor.
    """
    chroma_floor: float
    chroma_scale: float = 1.0
    hue_offset:   float = 0.0
    fixed_hue:    Optional[float] = None

    def __post_init__(self) -> None:
        validate_chroma(self.chroma_floor)
        validate_chroma(self.chroma_scale)

    def build(self, hue: float, chroma: float) -> TonalPalette:
        h = self.fixed_hue if self.fixed_hue is not None else hue + self.hue_offset
        return TonalPalette(h, max(chroma * self.chroma_scale, self.chroma_floor))


@dataclass(slots=True, frozen=True)
class SchemeRecipe:
    """
    Everything ``generate_scheme`` needs besides the source color.

    Attributes:
        palettes: Palette name -> rule.  Palettes are built in this order.
        light: Role -> ``(palette name, tone)`` for light schemes.
        dark: Role -> ``(palette name, tone)`` for dark schemes.

    Raises:
        ColorArgumentError: If a tone table does not cover exactly the
            ``Scheme`` roles, or names an unknown palette.
        ColorRangeError: If a table tone lies outside [0, 100].
    """
    palettes: Mapping[str, PaletteRule]
    light:    Mapping[str, RoleTone]
    dark:     Mapping[str, RoleTone]

    def __post_init__(self) -> None:
        object.__setattr__(self, "palettes", MappingProxyType(dict(self.palettes)))
        for label in ("light", "dark"):
            table = dict(getattr(self, label))
            _validate_table(table, self.palettes, label)
            ordered = {role: (table[role][0], float(table[role][1])) for role in ROLES}
            object.__setattr__(self, label, MappingProxyType(ordered))

    def table(self, dark: bool) -> Mapping[str, RoleTone]:
        return self.dark if dark else self.light


def _validate_table(table: Mapping[str, RoleTone], palettes: Mapping[str, PaletteRule],
                    label: str) -> None:
    missing = [r for r in ROLES if r not in table]
    extra = [r for r in table if r not in ROLES]
    if missing or extra:
        raise ColorArgumentError(
            f"{label} table mismatch: missing {missing}, unknown {extra}"
        )
    for role, (palette, tone) in table.items():
        if palette not in palettes:
            raise ColorArgumentError(f"{label}.{role} uses unknown palette {palette!r}")
        if not 0.0 <= tone <= 100.0:
            raise ColorRangeError(f"{label}.{role} tone must lie in [0, 100], got {tone}")


# role, palette, light tone, dark tone
_MATERIAL_ROLE_TONES: Final[Tuple[Tuple[str, str, float, float], ...]] = (
    ("primary",                "primary",         40.0,  80.0),
    ("on_primary",             "primary",        100.0,  20.0),
    ("primary_container",      "primary",         90.0,  30.0),
    ("on_primary_container",   "primary",         10.0,  90.0),
    ("secondary",              "secondary",       40.0,  80.0),
    ("on_secondary",           "secondary",      100.0,  20.0),
    ("secondary_container",    "secondary",       90.0,  30.0),
    ("on_secondary_container", "secondary",       10.0,  90.0),
    ("tertiary",               "tertiary",        40.0,  80.0),
    ("on_tertiary",            "tertiary",       100.0,  20.0),
    ("tertiary_container",     "tertiary",        90.0,  30.0),
    ("on_tertiary_container",  "tertiary",        10.0,  90.0),
    ("background",             "neutral",         99.0,  10.0),
    ("on_background",          "neutral",         10.0,  90.0),
    ("surface",                "neutral",         99.0,  10.0),
    ("on_surface",             "neutral",         10.0,  90.0),
    ("surface_variant",        "neutral_variant", 90.0,  30.0),
    ("on_surface_variant",     "neutral_variant", 30.0,  80.0),
    ("outline",                "neutral_variant", 50.0,  60.0),
    ("error",                  "error",           40.0,  80.0),
    ("on_error",               "error",          100.0,  20.0),
    ("error_container",        "error",           90.0,  30.0),
    ("on_error_container",     "error",           10.0,  80.0),
)

MATERIAL_RECIPE: Final[SchemeRecipe] = SchemeRecipe(
    palettes={
        "primary":         PaletteRule(chroma_floor=48.0),
        "secondary":       PaletteRule(chroma_floor=16.0, chroma_scale=0.33),
        "tertiary":        PaletteRule(chroma_floor=24.0, chroma_scale=0.5, hue_offset=60.0),
        "neutral":         PaletteRule(chroma_floor=4.0, chroma_scale=0.0),
        "neutral_variant": PaletteRule(chroma_floor=8.0, chroma_scale=0.0),
        "error":           PaletteRule(chroma_floor=84.0, chroma_scale=0.0, fixed_hue=25.0),
    },
    light={role: (palette, light) for role, palette, light, _ in _MATERIAL_ROLE_TONES},
    dark={role: (palette, dark) for role, palette, _, dark in _MATERIAL_ROLE_TONES},
)


# ---------------------------------------------------------------------------
# 3.  Generation
# ---------------------------------------------------------------------------
def generate_scheme(source_argb: int, dark: bool,
                    recipe: SchemeRecipe = MATERIAL_RECIPE,
                    strategy: ConversionStrategy = DEFAULT_STRATEGY) -> Scheme:
    """
    Builds a light or dark scheme from one source color.

    Args:
        source_argb: Seed color; alpha is ignored.
        dark: Selects the dark tone table.
        recipe: Palette rules and tone tables.
        strategy: Probe used by every palette sample.

    Returns:
        A fully populated ``Scheme``.

    Raises:
        ColorArgumentError / ColorRangeError: If *source_argb* is not a
            32-bit color.
        ColorConversionError: If *strategy* yields an invalid color.
    """
    if recipe is None:
        raise ColorArgumentError("recipe is required")
    source = hct_from_argb(source_argb)
    mode = "dark" if dark else "light"
    logger.debug("Generating %s scheme from %#010x (hue %.2f, chroma %.2f)",
                 mode, source_argb, source.hue, source.chroma)

    palettes = {
        name: rule.build(source.hue, source.chroma)
        for name, rule in recipe.palettes.items()
    }

    colors = {
        role: palettes[palette].tone(tone, strategy)
        for role, (palette, tone) in recipe.table(bool(dark)).items()
    }
    return Scheme(**colors)


scheme_generate = generate_scheme


# =============================================================================
# Validation Block
# =============================================================================
if __name__ == "__main__":
    print("--- Tint Scheme Validation ---")

    seed = 0xFF3366FF
    light = Scheme.light(seed)
    dark = Scheme.dark(seed)

    print(f"1. Roles: {len(ROLES)} {'[PASS]' if len(ROLES) == 23 else '[FAIL]'}")

    print("2. Light vs dark differ...")
    for role in ("primary", "background", "error"):
        a, b = getattr(light, role), getattr(dark, role)
        print(f"   {role:12s} {a:#010x} / {b:#010x} {'[PASS]' if a != b else '[FAIL]'}")

    print("3. Determinism...")
    again = generate_scheme(seed, False)
    print(f"   {'[PASS]' if again == light else '[FAIL]'}")

    print("4. Light scheme:")
    for role, hex_color in light.as_hex().items():
        print(f"   {role:24s} {hex_color}")
