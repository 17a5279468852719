# -*- coding: utf-8 -*-
"""
Tint: Perceptual HCT color engine for UI theming
Copyright (c) 2026 opticsWolf

SPDX-License-Identifier: LGPL-3.0-or-later

Module: tint_errors.py — Exception taxonomy shared by all Tint modules.

Every error derives from ``ColorError`` and from the builtin exception a
caller would naturally expect (``TypeError`` for malformed arguments,
``ValueError`` for out-of-range values), so ``except ValueError`` keeps
working for code that does not know about Tint.
"""

__all__ = [
    "ColorError",
    "ColorArgumentError",
    "ColorRangeError",
    "ColorConversionError",
]


class ColorError(Exception):
    """Base class for all color engine failures."""


class ColorArgumentError(ColorError, TypeError):
    """A required input is missing, has the wrong type or the wrong shape."""


class ColorRangeError(ColorError, ValueError):
    """A numeric input lies outside its admissible range.

    Raised for negative chroma, tone outside [0, 100], channel bytes outside
    [0, 255] and non-finite hue angles.
    """


class ColorConversionError(ColorError, RuntimeError):
    """A conversion step produced a result that is not a valid color.

    The built-in Lab kernels never raise this; it surfaces only when an
    injected conversion strategy misbehaves.
    """
