# Tint - Unit tests for seed extraction
"""
Tests for tint_seed.extract_seed_from_image.

Tests cover:
- First-hit selection above the chroma threshold
- Fallback to the most chromatic pixel
- Transparent pixel handling and alpha forcing
- Argument and range validation
"""

from __future__ import annotations

import numpy as np
import pytest

from tint_errors import ColorArgumentError, ColorRangeError
from tint_seed import DEFAULT_MIN_CHROMA, extract_seed_from_image

BLACK = 0xFF000000
WHITE = 0xFFFFFFFF
RED = 0xFFFF0000
GREEN = 0xFF00FF00
BLUE = 0xFF0000FF
GRAY = 0xFF808080


class TestExtractSeed:
    """Tests for seed selection."""

    def test_first_chromatic_pixel_wins(self):
        assert extract_seed_from_image([BLACK, WHITE, RED, GREEN]) == RED

    def test_scan_order_matters(self):
        assert extract_seed_from_image([BLACK, GREEN, RED]) == GREEN

    def test_numpy_input(self):
        pixels = np.array([BLACK, WHITE, RED, GREEN], dtype=np.uint32)
        assert extract_seed_from_image(pixels) == RED

    def test_fallback_to_highest_chroma(self):
        """Blue has the largest chroma of the sRGB primaries."""
        assert extract_seed_from_image([GRAY, RED, BLUE, GREEN], min_chroma=500.0) == BLUE

    def test_muted_image_uses_most_colorful_pixel(self):
        muted = 0xFF8A7F7F
        assert extract_seed_from_image([GRAY, muted, BLACK, WHITE]) == muted

    def test_zero_threshold_takes_first_visible(self):
        assert extract_seed_from_image([0x00FF0000, GRAY, RED], min_chroma=0.0) == GRAY

    def test_transparent_pixels_are_skipped(self):
        assert extract_seed_from_image([0x00FF0000, BLACK, GREEN]) == GREEN

    def test_result_is_opaque(self):
        assert extract_seed_from_image([0x80FF0000]) == RED

    def test_default_threshold(self):
        assert DEFAULT_MIN_CHROMA == 48.0


class TestExtractSeedErrors:
    """Tests for invalid input."""

    @pytest.mark.parametrize("pixels", [None, [], np.array([], dtype=np.uint32)])
    def test_missing_pixels(self, pixels):
        with pytest.raises(ColorArgumentError):
            extract_seed_from_image(pixels)

    def test_fully_transparent(self):
        with pytest.raises(ColorArgumentError):
            extract_seed_from_image([0x00FF0000, 0x00000000])

    def test_negative_threshold(self):
        with pytest.raises(ColorRangeError):
            extract_seed_from_image([RED], min_chroma=-1.0)

    def test_float_pixels(self):
        with pytest.raises(ColorArgumentError):
            extract_seed_from_image([0.5, 1.0])

    def test_pixel_out_of_range(self):
        with pytest.raises(ColorRangeError):
            extract_seed_from_image([RED, -1])
