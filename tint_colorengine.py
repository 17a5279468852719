# -*- coding: utf-8 -*-
"""
Tint: Perceptual HCT color engine for UI theming
Copyright (c) 2026 opticsWolf

SPDX-License-Identifier: LGPL-3.0-or-later

Color Space Engine
==================
Scalar and batched transforms between packed 8-bit ARGB colors and the
perceptual CIE spaces the HCT model is built on:

    ARGB  <->  linear sRGB  <->  CIE XYZ (D65)  <->  CIE L*a*b*  <->  LCh

Layering:
1. Scalar kernels (``srgb_to_linear``, ``xyz_to_lab``, ``lch_to_argb`` ...)
   are Numba-compiled and operate on plain floats/ints.  They are the
   primitives used by the gamut search in ``tint_hct``.
2. ``ColorSpaceEngine`` exposes the same transforms over NumPy arrays, with
   the ``handle_shapes`` decorator normalising ``(3,)`` and ``(N, 3)`` inputs.

All kernels compile with ``fastmath`` disabled: the gamut bisection compares
linear RGB against the exact [0, 1] cube, so reassociation would change
which probes count as in-gamut.

References:
    - IEC 61966-2-1:1999 (sRGB Standard)
    - CIE 15:2004 "Colorimetry"
"""

import functools
import numbers
import re
from typing import Any, Callable, Final, Tuple, TypeAlias

import numpy as np
import numpy.typing as npt
from numba import njit

from tint_errors import ColorArgumentError, ColorRangeError

__all__ = [
    # --- Type Aliases ---
    "ArrayFloat",
    "ArrayInt",

    # --- Constants ---
    "REF_WHITE_D65",
    "M_SRGB_TO_XYZ_T",
    "M_XYZ_TO_SRGB_T",
    "LAB_EPSILON",
    "LAB_KAPPA",
    "OPAQUE_BLACK",
    "OPAQUE_WHITE",

    # --- Packing ---
    "argb_from_rgba",
    "rgba_from_argb",
    "argb_to_hex",
    "argb_from_hex",
    "validate_argb",

    # --- Scalar kernels ---
    "wrap_hue",
    "srgb_to_linear",
    "linear_to_srgb",
    "argb_to_xyz",
    "xyz_to_argb",
    "xyz_to_lab",
    "lab_to_xyz",
    "lch_to_argb",

    # --- Decorators ---
    "handle_shapes",
    "as_argb_array",

    # --- Classes ---
    "ColorSpaceEngine",
]

# --- Type Aliases ---
ArrayFloat: TypeAlias = npt.NDArray[np.floating]
ArrayInt: TypeAlias = npt.NDArray[np.integer]

# --- Constants ---

# D65 reference white (Y = 1.0)
_WHITE_X: Final[float] = 0.95047
_WHITE_Y: Final[float] = 1.00000
_WHITE_Z: Final[float] = 1.08883
REF_WHITE_D65: Final[ArrayFloat] = np.array([_WHITE_X, _WHITE_Y, _WHITE_Z], dtype=np.float64)

# sRGB primaries (Rec.709), D65.  These are the coefficients the HCT tone
# tables were tuned against; they differ from the IEC reference matrix in the
# 5th-6th decimal.
_M_SRGB_TO_XYZ_BASE = np.array([
    [0.41233895, 0.35762064, 0.18051042],
    [0.2126,     0.7152,     0.0722    ],
    [0.01932141, 0.11916382, 0.95034478]
], dtype=np.float64)
M_SRGB_TO_XYZ_T: Final[ArrayFloat] = _M_SRGB_TO_XYZ_BASE.T.copy()

_M_XYZ_TO_SRGB_BASE = np.array([
    [ 3.2413775,  -1.5376652,  -0.4988537],
    [-0.9691453,   1.8758854,   0.0415659],
    [ 0.05562094, -0.20395524,  1.0571799]
], dtype=np.float64)
M_XYZ_TO_SRGB_T: Final[ArrayFloat] = _M_XYZ_TO_SRGB_BASE.T.copy()

# CIE 1976 Lab: delta = 6/29 separates the cube-root and linear segments.
_LAB_DELTA: Final[float] = 6.0 / 29.0
LAB_EPSILON: Final[float] = _LAB_DELTA * _LAB_DELTA * _LAB_DELTA  # ~0.008856
LAB_KAPPA: Final[float] = (116.0 * 29.0 * 29.0) / (3.0 * 6.0 * 6.0)  # ~903.296
_LAB_LINEAR_SLOPE: Final[float] = 3.0 * _LAB_DELTA * _LAB_DELTA
_LAB_LINEAR_OFFSET: Final[float] = 4.0 / 29.0

DEG2RAD: Final[float] = np.pi / 180.0
RAD2DEG: Final[float] = 180.0 / np.pi

OPAQUE_BLACK: Final[int] = 0xFF000000
OPAQUE_WHITE: Final[int] = 0xFFFFFFFF
_ARGB_MAX: Final[int] = 0xFFFFFFFF

_HEX_DIGITS: Final[re.Pattern[str]] = re.compile(
    r"[0-9A-Fa-f]{3}|[0-9A-Fa-f]{6}|[0-9A-Fa-f]{8}"
)


# =============================================================================
# 1. ARGB PACKING
# =============================================================================

def _require_int(value: Any, name: str) -> int:
    # bool is an int subclass but never a meaningful channel value
    if isinstance(value, bool) or not isinstance(value, numbers.Integral):
        raise ColorArgumentError(
            f"{name} must be an integer, got {type(value).__name__}"
        )
    return int(value)


def validate_argb(argb: Any) -> int:
    """
    Checks that *argb* is a 32-bit packed color and returns it as ``int``.

    Raises:
        ColorArgumentError: If *argb* is missing or not an integer.
        ColorRangeError: If *argb* does not fit in 32 unsigned bits.
    """
    value = _require_int(argb, "argb")
    if value < 0 or value > _ARGB_MAX:
        raise ColorRangeError(f"argb must lie in [0, 0xFFFFFFFF], got {value:#x}")
    return value


def argb_from_rgba(r: int, g: int, b: int, a: int = 0xFF) -> int:
    """
    Packs four 8-bit channels into ``0xAARRGGBB``.

    Exact bit-packing; ``rgba_from_argb`` is its inverse.

    Raises:
        ColorArgumentError: If a channel is not an integer.
        ColorRangeError: If a channel lies outside [0, 255].
    """
    channels = []
    for name, value in (("r", r), ("g", g), ("b", b), ("a", a)):
        v = _require_int(value, name)
        if v < 0 or v > 0xFF:
            raise ColorRangeError(f"Channel {name} must lie in [0, 255], got {v}")
        channels.append(v)
    r8, g8, b8, a8 = channels
    return (a8 << 24) | (r8 << 16) | (g8 << 8) | b8


def rgba_from_argb(argb: int) -> Tuple[int, int, int, int]:
    """Unpacks ``0xAARRGGBB`` into an ``(r, g, b, a)`` tuple of bytes."""
    value = validate_argb(argb)
    return (
        (value >> 16) & 0xFF,
        (value >> 8) & 0xFF,
        value & 0xFF,
        (value >> 24) & 0xFF,
    )


def argb_to_hex(argb: int, alpha: bool = False) -> str:
    """Formats a color as ``#RRGGBB`` (or ``#AARRGGBB`` with *alpha*)."""
    value = validate_argb(argb)
    if alpha:
        return f"#{value:08X}"
    return f"#{value & 0xFFFFFF:06X}"


def argb_from_hex(hex_color: str) -> int:
    """
    Parses ``#RRGGBB``, ``RRGGBB``, ``#AARRGGBB`` or the short ``#RGB`` form.

    Colors without an alpha component are returned fully opaque.
    """
    if not isinstance(hex_color, str):
        raise ColorArgumentError(
            f"hex_color must be a string, got {type(hex_color).__name__}"
        )
    digits = hex_color.strip().removeprefix("#")
    # int(..., 16) alone would also accept signs and underscores
    if _HEX_DIGITS.fullmatch(digits) is None:
        raise ColorRangeError(f"Malformed hex color: {hex_color!r}")
    if len(digits) == 3:
        digits = "".join(ch * 2 for ch in digits)
    value = int(digits, 16)
    if len(digits) == 6:
        value |= OPAQUE_BLACK
    return validate_argb(value)


# =============================================================================
# 2. SCALAR KERNELS (Numba)
# =============================================================================

@njit(cache=True)
def wrap_hue(hue: float) -> float:
    """Normalises an angle in degrees into [0, 360)."""
    h = hue % 360.0
    # -1e-20 % 360.0 rounds up to exactly 360.0
    if h >= 360.0:
        h = 0.0
    return h


@njit(cache=True)
def srgb_to_linear(c: float) -> float:
    """sRGB EOTF (IEC 61966-2-1).  No clamping."""
    if c <= 0.04045:
        return c / 12.92
    return ((c + 0.055) / 1.055) ** 2.4


@njit(cache=True)
def linear_to_srgb(c: float) -> float:
    """sRGB OETF (IEC 61966-2-1).  No clamping."""
    if c <= 0.0031308:
        return 12.92 * c
    return 1.055 * (c ** (1.0 / 2.4)) - 0.055


@njit(cache=True)
def _clamp01(v: float) -> float:
    if v < 0.0:
        return 0.0
    if v > 1.0:
        return 1.0
    return v


@njit(cache=True)
def _quantize(v: float) -> int:
    # round-half-up then truncate, v already in [0, 1]
    return int(v * 255.0 + 0.5)


@njit(cache=True)
def _argb_to_xyz_kernel(argb: int) -> Tuple[float, float, float]:
    r = srgb_to_linear(((argb >> 16) & 0xFF) / 255.0)
    g = srgb_to_linear(((argb >> 8) & 0xFF) / 255.0)
    b = srgb_to_linear((argb & 0xFF) / 255.0)

    m = _M_SRGB_TO_XYZ_BASE
    x = m[0, 0] * r + m[0, 1] * g + m[0, 2] * b
    y = m[1, 0] * r + m[1, 1] * g + m[1, 2] * b
    z = m[2, 0] * r + m[2, 1] * g + m[2, 2] * b
    return x, y, z


def argb_to_xyz(argb: int) -> Tuple[float, float, float]:
    """
    Converts a packed color to CIE XYZ (D65, Y in [0, 1]).

    Alpha is ignored.

    Raises:
        ColorArgumentError / ColorRangeError: If *argb* is not a 32-bit color.
    """
    return _argb_to_xyz_kernel(validate_argb(argb))


@njit(cache=True)
def xyz_to_argb(x: float, y: float, z: float) -> Tuple[int, bool]:
    """
    Converts CIE XYZ to an opaque packed color.

    Returns:
        ``(argb, in_gamut)``.  ``in_gamut`` is True iff all linear RGB
        components lie in [0, 1] *before* clamping; ``argb`` is always a
        valid clamped color.
    """
    m = _M_XYZ_TO_SRGB_BASE
    r_lin = m[0, 0] * x + m[0, 1] * y + m[0, 2] * z
    g_lin = m[1, 0] * x + m[1, 1] * y + m[1, 2] * z
    b_lin = m[2, 0] * x + m[2, 1] * y + m[2, 2] * z

    in_gamut = (r_lin >= 0.0 and r_lin <= 1.0
                and g_lin >= 0.0 and g_lin <= 1.0
                and b_lin >= 0.0 and b_lin <= 1.0)

    r = _clamp01(linear_to_srgb(_clamp01(r_lin)))
    g = _clamp01(linear_to_srgb(_clamp01(g_lin)))
    b = _clamp01(linear_to_srgb(_clamp01(b_lin)))

    argb = OPAQUE_BLACK | (_quantize(r) << 16) | (_quantize(g) << 8) | _quantize(b)
    return argb, in_gamut


@njit(cache=True)
def _lab_f(t: float) -> float:
    """Lab companding f(t): cube root with a linear toe near zero."""
    if t > LAB_EPSILON:
        return t ** (1.0 / 3.0)
    return t / _LAB_LINEAR_SLOPE + _LAB_LINEAR_OFFSET


@njit(cache=True)
def _lab_f_inv(t: float) -> float:
    if t > _LAB_DELTA:
        return t * t * t
    return _LAB_LINEAR_SLOPE * (t - _LAB_LINEAR_OFFSET)


@njit(cache=True)
def xyz_to_lab(x: float, y: float, z: float) -> Tuple[float, float, float]:
    """Converts CIE XYZ to CIE L*a*b* against the D65 white point."""
    fx = _lab_f(x / _WHITE_X)
    fy = _lab_f(y / _WHITE_Y)
    fz = _lab_f(z / _WHITE_Z)
    return 116.0 * fy - 16.0, 500.0 * (fx - fy), 200.0 * (fy - fz)


@njit(cache=True)
def lab_to_xyz(l: float, a: float, b: float) -> Tuple[float, float, float]:
    """Converts CIE L*a*b* (D65) back to CIE XYZ."""
    fy = (l + 16.0) / 116.0
    fx = fy + a / 500.0
    fz = fy - b / 200.0
    return (_WHITE_X * _lab_f_inv(fx),
            _WHITE_Y * _lab_f_inv(fy),
            _WHITE_Z * _lab_f_inv(fz))


@njit(cache=True)
def lch_to_argb(hue: float, chroma: float, tone: float) -> Tuple[int, bool]:
    """
    Converts a cylindrical Lab color (h in degrees, C, L) to ARGB.

    This is the probe the gamut search evaluates repeatedly; it performs no
    validation and reports gamut membership instead of failing.

    Returns:
        ``(argb, in_gamut)`` as in ``xyz_to_argb``.
    """
    rad = hue * DEG2RAD
    a = chroma * np.cos(rad)
    b = chroma * np.sin(rad)
    x, y, z = lab_to_xyz(tone, a, b)
    return xyz_to_argb(x, y, z)


@njit(cache=True)
def _lab_to_hct(l: float, a: float, b: float) -> Tuple[float, float, float]:
    hue = wrap_hue(np.arctan2(b, a) * RAD2DEG)
    chroma = np.sqrt(a * a + b * b)
    return hue, chroma, l


# =============================================================================
# 3. BATCH KERNELS (Numba)
# =============================================================================
# Explicit loops over the scalar kernels keep batch and scalar results
# identical and avoid allocating boolean mask arrays.

@njit(cache=True)
def _batch_argb_to_linear(argb: ArrayInt) -> ArrayFloat:
    n = argb.shape[0]
    out = np.empty((n, 3), dtype=np.float64)
    for i in range(n):
        v = argb[i]
        out[i, 0] = srgb_to_linear(((v >> 16) & 0xFF) / 255.0)
        out[i, 1] = srgb_to_linear(((v >> 8) & 0xFF) / 255.0)
        out[i, 2] = srgb_to_linear((v & 0xFF) / 255.0)
    return out


@njit(cache=True)
def _batch_linear_to_argb(linear: ArrayFloat) -> Tuple[ArrayInt, np.ndarray]:
    n = linear.shape[0]
    argb = np.empty(n, dtype=np.int64)
    in_gamut = np.empty(n, dtype=np.bool_)
    for i in range(n):
        r_lin = linear[i, 0]
        g_lin = linear[i, 1]
        b_lin = linear[i, 2]
        in_gamut[i] = (r_lin >= 0.0 and r_lin <= 1.0
                       and g_lin >= 0.0 and g_lin <= 1.0
                       and b_lin >= 0.0 and b_lin <= 1.0)
        r = _clamp01(linear_to_srgb(_clamp01(r_lin)))
        g = _clamp01(linear_to_srgb(_clamp01(g_lin)))
        b = _clamp01(linear_to_srgb(_clamp01(b_lin)))
        argb[i] = OPAQUE_BLACK | (_quantize(r) << 16) | (_quantize(g) << 8) | _quantize(b)
    return argb, in_gamut


@njit(cache=True)
def _batch_lab_f(t: ArrayFloat) -> ArrayFloat:
    n = t.shape[0]
    out = np.empty_like(t)
    for i in range(n):
        for j in range(3):
            out[i, j] = _lab_f(t[i, j])
    return out


@njit(cache=True)
def _batch_lab_f_inv(t: ArrayFloat) -> ArrayFloat:
    n = t.shape[0]
    out = np.empty_like(t)
    for i in range(n):
        for j in range(3):
            out[i, j] = _lab_f_inv(t[i, j])
    return out


@njit(cache=True)
def _batch_lab_to_lch(lab: ArrayFloat) -> ArrayFloat:
    n = lab.shape[0]
    lch = np.empty_like(lab)
    for i in range(n):
        hue, chroma, l = _lab_to_hct(lab[i, 0], lab[i, 1], lab[i, 2])
        lch[i, 0] = l
        lch[i, 1] = chroma
        lch[i, 2] = hue
    return lch


@njit(cache=True)
def _batch_lch_to_lab(lch: ArrayFloat) -> ArrayFloat:
    n = lch.shape[0]
    lab = np.empty_like(lch)
    for i in range(n):
        rad = lch[i, 2] * DEG2RAD
        lab[i, 0] = lch[i, 0]
        lab[i, 1] = lch[i, 1] * np.cos(rad)
        lab[i, 2] = lch[i, 1] * np.sin(rad)
    return lab


# =============================================================================
# 4. SHAPE HANDLING
# =============================================================================

def handle_shapes(func: Callable[..., ArrayFloat]) -> Callable[..., ArrayFloat]:
    """
    Decorator to normalize inputs to (N, 3) float64 and safeguard shape.

    - If input is (3,), returns (3,)
    - If input is (N, 3), returns (N, 3)

    Raises:
        ColorArgumentError: If the last dimension is not 3.
    """
    @functools.wraps(func)
    def wrapper(arr: ArrayFloat, *args: Any, **kwargs: Any) -> ArrayFloat:
        arr = np.asarray(arr, dtype=np.float64)
        arr_in = np.ascontiguousarray(np.atleast_2d(arr))

        if arr_in.ndim != 2 or arr_in.shape[-1] != 3:
            raise ColorArgumentError(f"Expected shape (3,) or (N, 3), got {arr.shape}")

        res = func(arr_in, *args, **kwargs)

        if arr.ndim == 1:
            return res[0]
        return res
    return wrapper


def as_argb_array(argb: Any) -> ArrayInt:
    """Coerces an int or a 1-D integer sequence into a contiguous int64 array."""
    if argb is None:
        raise ColorArgumentError("argb array is required")
    arr = np.asarray(argb)
    if arr.ndim > 1:
        raise ColorArgumentError(f"Expected a scalar or 1-D array of colors, got shape {arr.shape}")
    if arr.size and not np.issubdtype(arr.dtype, np.integer):
        raise ColorArgumentError(f"argb values must be integers, got dtype {arr.dtype}")
    arr = np.ascontiguousarray(np.atleast_1d(arr), dtype=np.int64)
    if arr.size and (arr.min() < 0 or arr.max() > _ARGB_MAX):
        raise ColorRangeError("argb values must lie in [0, 0xFFFFFFFF]")
    return arr


# =============================================================================
# 5. COLOR SPACE ENGINE
# =============================================================================

class ColorSpaceEngine:
    """Static utility class for batched color space transformations.

    Core transforms provide a public, shape-safe API and an internal ``_raw``
    fast path that assumes pre-validated (N, 3) float64 input.  Convenience
    pipelines (``argb_to_lch``, ``argb_to_hct``) chain the ``_raw`` variants.
    """

    # =====================================================================
    #  Internal _raw fast-path methods  (assume validated input)
    # =====================================================================

    @staticmethod
    def _argb_to_xyz_raw(argb_array: ArrayInt) -> ArrayFloat:
        """Raw ARGB → XYZ.  *argb_array* must be (N,) int64."""
        linear = _batch_argb_to_linear(argb_array)
        return np.dot(linear, M_SRGB_TO_XYZ_T)

    @staticmethod
    def _xyz_to_argb_raw(xyz_array: ArrayFloat) -> Tuple[ArrayInt, np.ndarray]:
        """Raw XYZ → (ARGB, in_gamut).  *xyz_array* must be (N, 3) float64."""
        linear = np.ascontiguousarray(np.dot(xyz_array, M_XYZ_TO_SRGB_T))
        return _batch_linear_to_argb(linear)

    @staticmethod
    def _xyz_to_lab_raw(xyz_array: ArrayFloat, illuminant: ArrayFloat = REF_WHITE_D65) -> ArrayFloat:
        """Raw XYZ → Lab.  *xyz_array* must be (N, 3) float64."""
        f_xyz = _batch_lab_f(np.ascontiguousarray(xyz_array / illuminant))

        out = np.empty_like(xyz_array)
        out[..., 0] = 116.0 * f_xyz[..., 1] - 16.0
        out[..., 1] = 500.0 * (f_xyz[..., 0] - f_xyz[..., 1])
        out[..., 2] = 200.0 * (f_xyz[..., 1] - f_xyz[..., 2])
        return out

    @staticmethod
    def _lab_to_xyz_raw(lab_array: ArrayFloat, illuminant: ArrayFloat = REF_WHITE_D65) -> ArrayFloat:
        """Raw Lab → XYZ.  *lab_array* must be (N, 3) float64."""
        L, a, b = lab_array[..., 0], lab_array[..., 1], lab_array[..., 2]

        f = np.empty_like(lab_array)
        f[..., 1] = (L + 16.0) / 116.0
        f[..., 0] = f[..., 1] + a / 500.0
        f[..., 2] = f[..., 1] - b / 200.0

        return _batch_lab_f_inv(f) * illuminant

    # =====================================================================
    #  Public API  (shape-safe wrappers)
    # =====================================================================

    @staticmethod
    def argb_to_xyz(argb_array: Any) -> ArrayFloat:
        """
        Converts packed colors to XYZ (D65).

        Args:
            argb_array: A single ARGB int or a 1-D integer array of N colors.

        Returns:
            XYZ coordinates, shape (3,) for a scalar input, (N, 3) otherwise.
        """
        arr = as_argb_array(argb_array)
        res = ColorSpaceEngine._argb_to_xyz_raw(arr)
        return res[0] if np.ndim(argb_array) == 0 else res

    @staticmethod
    @handle_shapes
    def xyz_to_argb(xyz_array: ArrayFloat) -> ArrayFloat:
        """
        Converts XYZ (D65) to opaque packed colors, clamping out-of-gamut input.

        Use ``lch_to_argb`` when gamut membership is needed.
        """
        argb, _ = ColorSpaceEngine._xyz_to_argb_raw(xyz_array)
        return argb

    @staticmethod
    @handle_shapes
    def xyz_to_lab(xyz_array: ArrayFloat, illuminant: ArrayFloat = REF_WHITE_D65) -> ArrayFloat:
        """
        Converts XYZ to CIELAB (L*a*b*).

        Args:
            xyz_array: Input XYZ data, shape (N, 3) or (3,).
            illuminant: Reference white point (default D65).

        Returns:
            Lab coordinates.
        """
        return ColorSpaceEngine._xyz_to_lab_raw(xyz_array, illuminant)

    @staticmethod
    @handle_shapes
    def lab_to_xyz(lab_array: ArrayFloat, illuminant: ArrayFloat = REF_WHITE_D65) -> ArrayFloat:
        """
        Converts CIELAB to XYZ.

        Args:
            lab_array: Input Lab data, shape (N, 3) or (3,).
            illuminant: Reference white point (default D65).

        Returns:
            XYZ coordinates.
        """
        return ColorSpaceEngine._lab_to_xyz_raw(lab_array, illuminant)

    @staticmethod
    @handle_shapes
    def lab_to_lch(lab_array: ArrayFloat) -> ArrayFloat:
        """Converts CIELAB to CIELCh ``(L, C, h)``, h in [0, 360)."""
        return _batch_lab_to_lch(lab_array)

    @staticmethod
    @handle_shapes
    def lch_to_lab(lch_array: ArrayFloat) -> ArrayFloat:
        """Converts CIELCh ``(L, C, h)`` to CIELAB."""
        return _batch_lch_to_lab(lch_array)

    @staticmethod
    def lch_to_argb(lch_array: Any) -> Tuple[ArrayInt, np.ndarray]:
        """
        Converts CIELCh ``(L, C, h)`` rows to packed colors.

        Returns:
            ``(argb, in_gamut)`` arrays of shape (N,), or scalars for a (3,) input.
        """
        arr = np.asarray(lch_array, dtype=np.float64)
        batch = np.ascontiguousarray(np.atleast_2d(arr))
        if batch.ndim != 2 or batch.shape[-1] != 3:
            raise ColorArgumentError(f"Expected shape (3,) or (N, 3), got {arr.shape}")
        lab = _batch_lch_to_lab(batch)
        xyz = ColorSpaceEngine._lab_to_xyz_raw(lab)
        argb, in_gamut = ColorSpaceEngine._xyz_to_argb_raw(xyz)
        if arr.ndim == 1:
            return int(argb[0]), bool(in_gamut[0])
        return argb, in_gamut

    # --- Convenience: ARGB -> Lab/LCh/HCT ---

    @staticmethod
    def argb_to_lab(argb_array: Any) -> ArrayFloat:
        """Direct conversion ARGB -> CIELAB."""
        arr = as_argb_array(argb_array)
        xyz = ColorSpaceEngine._argb_to_xyz_raw(arr)
        res = ColorSpaceEngine._xyz_to_lab_raw(xyz)
        return res[0] if np.ndim(argb_array) == 0 else res

    @staticmethod
    def argb_to_lch(argb_array: Any) -> ArrayFloat:
        """Direct conversion ARGB -> CIELCh ``(L, C, h)``."""
        arr = as_argb_array(argb_array)
        xyz = ColorSpaceEngine._argb_to_xyz_raw(arr)
        res = _batch_lab_to_lch(ColorSpaceEngine._xyz_to_lab_raw(xyz))
        return res[0] if np.ndim(argb_array) == 0 else res

    @staticmethod
    def argb_to_hct(argb_array: Any) -> ArrayFloat:
        """
        Direct conversion ARGB -> HCT components ``(hue, chroma, tone)``.

        Column order matches the ``Hct`` value type, i.e. the reverse of LCh.
        """
        lch = ColorSpaceEngine.argb_to_lch(argb_array)
        return np.ascontiguousarray(lch[..., ::-1])


# =============================================================================
# Validation Block
# =============================================================================
if __name__ == "__main__":
    print("--- Tint Color Engine Validation ---")

    # 1. Packing is exact
    print("1. Testing ARGB packing...")
    packed = argb_from_rgba(0x12, 0x34, 0x56, 0x78)
    ok = packed == 0x78123456 and rgba_from_argb(packed) == (0x12, 0x34, 0x56, 0x78)
    print(f"   {packed:#010x} {'[PASS]' if ok else '[FAIL]'}")

    # 2. XYZ -> Lab -> XYZ round trip
    print("2. Testing Round-Trip Stability (XYZ->Lab)...")
    xyz_in = np.random.rand(1000, 3)
    lab = ColorSpaceEngine.xyz_to_lab(xyz_in)
    xyz_out = ColorSpaceEngine.lab_to_xyz(lab)
    max_err = np.max(np.abs(xyz_in - xyz_out))
    print(f"   Max Error (XYZ->Lab->XYZ): {max_err:.2e} "
          f"{'[PASS]' if max_err < 1e-12 else '[FAIL]'}")

    # 3. Every 8-bit gray survives ARGB -> XYZ -> ARGB
    print("3. Testing gray axis round trip...")
    grays = np.array([OPAQUE_BLACK | (v << 16) | (v << 8) | v for v in range(256)])
    back, gamut = ColorSpaceEngine._xyz_to_argb_raw(ColorSpaceEngine.argb_to_xyz(grays))
    mism = int(np.count_nonzero(back != grays))
    print(f"   Mismatches: {mism} {'[PASS]' if mism == 0 else '[FAIL]'}")

    # 4. Scalar and batch kernels agree
    print("4. Testing scalar/batch agreement...")
    colors = np.random.randint(0, 1 << 24, size=500) | OPAQUE_BLACK
    batch = ColorSpaceEngine.argb_to_lab(colors)
    scalar = np.array([xyz_to_lab(*argb_to_xyz(int(c))) for c in colors])
    err = np.max(np.abs(batch - scalar))
    print(f"   Max Error (Lab): {err:.2e} {'[PASS]' if err < 1e-9 else '[FAIL]'}")
