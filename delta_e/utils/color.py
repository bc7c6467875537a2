"""Lab color type and sRGB → CIE L*a*b* conversion.

Provides:
    - Lab: immutable L*a*b* value type
    - sRGB ↔ linear RGB conversions (exact sRGB transfer function)
    - Linear RGB → XYZ (sRGB primaries, D65)
    - XYZ → Lab (D65 or D50 reference white)
    - rgb_to_lab: 8-bit sRGB triple → Lab (D65)

Used by:
    - de2000.delta_e2000_from_rgb: RGB entry point
    - Lab.from_rgb

All conversions operate on single colors held in numpy arrays of shape (3,).

Invariants:
    - 8-bit input is validated, [0, 1] input is clamped
    - Lab coordinates: L[0,100], a,b roughly [-128, 127] for in-gamut sRGB
    - Lab values are never clamped
"""

from dataclasses import dataclass
from numbers import Integral
from typing import Iterator, Sequence

import numpy as np

# sRGB to XYZ matrix (D65)
_RGB_TO_XYZ = np.array([
    [0.4124564, 0.3575761, 0.1804375],
    [0.2126729, 0.7151522, 0.0721750],
    [0.0193339, 0.1191920, 0.9503041]
], dtype=np.float64)

# Reference white points (2° observer)
_WHITE_POINTS = {
    "D65": np.array([0.95047, 1.0, 1.08883], dtype=np.float64),
    "D50": np.array([0.96422, 1.0, 0.82521], dtype=np.float64),
}


@dataclass(frozen=True)
class Lab:
    """CIE L*a*b* color.

    ``l`` is lightness (nominally 0-100), ``a`` the green-red axis and ``b``
    the blue-yellow axis. No range is enforced.
    """

    l: float
    a: float
    b: float

    def __iter__(self) -> Iterator[float]:
        return iter((self.l, self.a, self.b))

    @classmethod
    def from_rgb(cls, rgb: Sequence[int]) -> "Lab":
        """Build from an 8-bit sRGB triple (D65)."""
        return rgb_to_lab(rgb)


def srgb_to_linear(rgb: np.ndarray) -> np.ndarray:
    """Convert sRGB [0,1] to linear RGB [0,1].

    Parameters
    ----------
    rgb : np.ndarray
        sRGB values, range [0, 1]

    Returns
    -------
    np.ndarray
        Linear RGB, same shape, range [0, 1]

    Notes
    -----
    Uses exact sRGB transfer function (not gamma 2.2 approximation):
        - Linear region for small values: x / 12.92
        - Power region: ((x + 0.055) / 1.055)^2.4
    """
    rgb = np.clip(np.asarray(rgb, dtype=np.float64), 0.0, 1.0)
    return np.where(
        rgb <= 0.04045,
        rgb / 12.92,
        np.power((rgb + 0.055) / 1.055, 2.4),
    )


def linear_to_srgb(rgb: np.ndarray) -> np.ndarray:
    """Convert linear RGB [0,1] to sRGB [0,1].

    Inverse of srgb_to_linear.
    """
    rgb = np.clip(np.asarray(rgb, dtype=np.float64), 0.0, 1.0)
    return np.where(
        rgb <= 0.0031308,
        rgb * 12.92,
        1.055 * np.power(rgb, 1.0 / 2.4) - 0.055,
    )


def rgb_to_xyz(linear_rgb: np.ndarray) -> np.ndarray:
    """Convert linear RGB (3,) to CIE XYZ (3,), D65, Y of white = 1."""
    return _RGB_TO_XYZ @ np.asarray(linear_rgb, dtype=np.float64)


def xyz_to_lab(xyz: np.ndarray, white_point: str = "D65") -> np.ndarray:
    """Convert XYZ to CIE L*a*b*.

    Parameters
    ----------
    xyz : np.ndarray
        XYZ coordinates, shape (3,)
    white_point : str
        Reference white point, "D65" (default) or "D50"

    Returns
    -------
    np.ndarray
        Lab coordinates (L, a, b), shape (3,)

    Raises
    ------
    ValueError
        If white_point is not "D65" or "D50"

    Notes
    -----
    Uses CIE standard transform with 6/29 threshold.
    """
    if white_point not in _WHITE_POINTS:
        raise ValueError(f"Unknown white_point: {white_point}. Use 'D65' or 'D50'.")

    xyz_norm = np.asarray(xyz, dtype=np.float64) / _WHITE_POINTS[white_point]

    delta = 6.0 / 29.0
    delta_sq = delta * delta
    delta_cube = delta_sq * delta

    f = np.where(
        xyz_norm <= delta_cube,
        xyz_norm / (3.0 * delta_sq) + (4.0 / 29.0),
        np.cbrt(xyz_norm),
    )

    fx, fy, fz = f
    L = 116.0 * fy - 16.0
    a = 500.0 * (fx - fy)
    b = 200.0 * (fy - fz)
    return np.array([L, a, b], dtype=np.float64)


def rgb_to_lab(rgb: Sequence[int]) -> Lab:
    """Convert an 8-bit sRGB triple to Lab (D65).

    Parameters
    ----------
    rgb : Sequence[int]
        (R, G, B), each an integer in [0, 255]

    Returns
    -------
    Lab
        L: [0, 100], a,b: approximately [-128, 127]

    Raises
    ------
    ValueError
        If rgb is not three integers in [0, 255]
    """
    channels = tuple(rgb)
    if len(channels) != 3:
        raise ValueError(f"Expected (R, G, B) triple, got {len(channels)} values: {channels}")
    for name, value in zip("RGB", channels):
        if isinstance(value, bool) or not isinstance(value, Integral):
            raise ValueError(f"{name} channel must be an integer in [0, 255], got {value!r}")
        if not 0 <= value <= 255:
            raise ValueError(f"{name} channel {value} out of range [0, 255]")

    srgb = np.array(channels, dtype=np.float64) / 255.0
    xyz = rgb_to_xyz(srgb_to_linear(srgb))
    L, a, b = xyz_to_lab(xyz, white_point="D65")
    return Lab(float(L), float(a), float(b))
