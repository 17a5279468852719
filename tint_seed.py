# -*- coding: utf-8 -*-
"""
Tint: Perceptual HCT color engine for UI theming
Copyright (c) 2026 opticsWolf

SPDX-License-Identifier: LGPL-3.0-or-later

Module: tint_seed.py — Source color selection from image pixels.

Picks a scheme seed from a flat buffer of ARGB pixels.  Chroma is measured
for the whole buffer in one ``ColorSpaceEngine.argb_to_hct`` call; the scan
itself is a NumPy index search, so the cost is dominated by the batch
conversion.
"""

from __future__ import annotations

import logging
from typing import Any, Final

import numpy as np

from tint_colorengine import OPAQUE_BLACK, ColorSpaceEngine, as_argb_array
from tint_errors import ColorArgumentError
from tint_hct import validate_chroma

__all__ = ["DEFAULT_MIN_CHROMA", "extract_seed_from_image"]

logger = logging.getLogger(__name__)

# Same floor the primary palette enforces
DEFAULT_MIN_CHROMA: Final[float] = 48.0


def extract_seed_from_image(pixels: Any, min_chroma: float = DEFAULT_MIN_CHROMA) -> int:
    """
    Chooses a seed color from image pixels.

    Transparent pixels (alpha 0) are skipped.  The first remaining pixel
    whose chroma reaches *min_chroma* wins; if none does, the most chromatic
    pixel is returned (the earliest one on ties).

    Args:
        pixels: Sequence or 1-D array of ARGB ints, in scan order.
        min_chroma: Chroma a pixel needs to be accepted immediately.

    Returns:
        The selected color with alpha forced to 0xFF.

    Raises:
        ColorArgumentError: If *pixels* is None, empty or fully transparent.
        ColorRangeError: If *min_chroma* is negative or a pixel is not a
            32-bit color.
    """
    if pixels is None:
        raise ColorArgumentError("pixels are required")
    threshold = validate_chroma(min_chroma)

    argb = as_argb_array(pixels)
    if argb.size == 0:
        raise ColorArgumentError("pixels must not be empty")

    visible = argb[(argb >> 24) != 0]
    if visible.size == 0:
        raise ColorArgumentError("pixels contain no visible (alpha > 0) color")

    chroma = ColorSpaceEngine.argb_to_hct(visible)[:, 1]

    hits = np.flatnonzero(chroma >= threshold)
    if hits.size:
        index = int(hits[0])
    else:
        # argmax returns the first maximum
        index = int(np.argmax(chroma))
        logger.debug("No pixel reaches chroma %.1f, using max chroma %.2f",
                     threshold, chroma[index])

    return int(visible[index]) | OPAQUE_BLACK
