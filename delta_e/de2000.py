"""CIEDE2000 color difference (ΔE00) between two CIE L*a*b* colors.

Provides:
    - delta_e2000: ΔE00 between two Lab colors with optional k_L/k_C/k_H weights
    - delta_e2000_from_rgb: convenience entry point for 8-bit sRGB triples

Follows the published formula (Sharma, Wu & Dalal 2005) step by step on
plain Python floats. Degenerate hues (zero chroma, zero hue vector) are
handled by explicit branches so the computation never divides by zero for
finite input.

Invariants:
    - delta_e2000(x, x) == 0.0 exactly
    - Result is always >= 0
    - Symmetric in its two colors under default weights

Usage:
    from delta_e import Lab, KWeights, delta_e2000

    de = delta_e2000(Lab(50.0, 2.6772, -79.7751), Lab(50.0, 0.0, -82.7485))
    de_textile = delta_e2000(c1, c2, KWeights(l=2.0))
"""

import logging
import math
from typing import Optional, Sequence

from .utils.color import Lab, rgb_to_lab
from .utils.validators import KWeights

logger = logging.getLogger(__name__)

_POW25_7 = 25.0 ** 7
_DEFAULT_WEIGHTS = KWeights()


def delta_e2000(
    color1: Lab,
    color2: Lab,
    weights: Optional[KWeights] = None
) -> float:
    """Compute the CIEDE2000 color difference ΔE00.

    Parameters
    ----------
    color1 : Lab
        Reference color
    color2 : Lab
        Sample color
    weights : KWeights, optional
        Parametric factors k_L, k_C, k_H; None means (1, 1, 1)

    Returns
    -------
    float
        ΔE00 >= 0. Typical just-noticeable difference is about 1.0.

    Notes
    -----
    Inputs are not range-checked; out-of-gamut Lab values are processed as-is.
    The chroma correction G is derived once from the mean chroma and applied
    to both colors.
    """
    if weights is None:
        weights = _DEFAULT_WEIGHTS

    l1, a1, b1 = color1.l, color1.a, color1.b
    l2, a2, b2 = color2.l, color2.a, color2.b

    delta_l_prime = l2 - l1
    l_bar = (l1 + l2) / 2.0

    c1 = math.hypot(a1, b1)
    c2 = math.hypot(a2, b2)
    c_bar = (c1 + c2) / 2.0

    # Chroma correction on the a* axis
    c_bar_7 = _pow7(c_bar)
    g = 1.0 - math.sqrt(c_bar_7 / (c_bar_7 + _POW25_7))
    a1_prime = a1 + (a1 / 2.0) * g
    a2_prime = a2 + (a2 / 2.0) * g

    c1_prime = math.hypot(a1_prime, b1)
    c2_prime = math.hypot(a2_prime, b2)
    c_bar_prime = (c1_prime + c2_prime) / 2.0
    delta_c_prime = c2_prime - c1_prime

    h1_prime = _hue_angle(b1, a1_prime)
    h2_prime = _hue_angle(b2, a2_prime)

    delta_h_prime = _hue_difference(c1, c2, h1_prime, h2_prime)
    delta_big_h_prime = (
        2.0 * math.sqrt(c1_prime * c2_prime)
        * math.sin(_radians(delta_h_prime) / 2.0)
    )

    h_bar_prime = _mean_hue(h1_prime, h2_prime)
    t = _hue_weighting(h_bar_prime)

    # Weighting functions
    l_bar_minus_50_sq = (l_bar - 50.0) * (l_bar - 50.0)
    s_l = 1.0 + (0.015 * l_bar_minus_50_sq) / math.sqrt(20.0 + l_bar_minus_50_sq)
    s_c = 1.0 + 0.045 * c_bar_prime
    s_h = 1.0 + 0.015 * c_bar_prime * t

    r_t = _rotation_term(c_bar_prime, h_bar_prime)

    lightness = delta_l_prime / (weights.l * s_l)
    chroma = delta_c_prime / (weights.c * s_c)
    hue = delta_big_h_prime / (weights.h * s_h)

    return math.sqrt(lightness * lightness + chroma * chroma + hue * hue + r_t * chroma * hue)


def delta_e2000_from_rgb(rgb1: Sequence[int], rgb2: Sequence[int]) -> float:
    """Compute ΔE00 between two 8-bit sRGB colors.

    Parameters
    ----------
    rgb1, rgb2 : Sequence[int]
        (R, G, B) triples, each channel an integer in [0, 255]

    Returns
    -------
    float
        ΔE00 of the D65 Lab conversions, default weights

    Raises
    ------
    ValueError
        If a triple does not hold exactly three integers in [0, 255]
    """
    lab1 = rgb_to_lab(rgb1)
    lab2 = rgb_to_lab(rgb2)
    logger.debug("Converted RGB pair to %s and %s", lab1, lab2)
    return delta_e2000(lab1, lab2)


def _hue_angle(b: float, a_prime: float) -> float:
    """Hue angle h' in degrees, [0, 360); 0 for the undefined (0, 0) hue."""
    if b == 0.0 and a_prime == 0.0:
        return 0.0

    hue = _degrees(math.atan2(b, a_prime))
    if hue < 0.0:
        hue += 360.0
    return hue


def _hue_difference(c1: float, c2: float, h1_prime: float, h2_prime: float) -> float:
    """Signed hue difference Δh' in degrees, wrapped into [-180, 180]."""
    if c1 == 0.0 or c2 == 0.0:
        return 0.0

    if abs(h1_prime - h2_prime) <= 180.0:
        return h2_prime - h1_prime

    if h2_prime <= h1_prime:
        return h2_prime - h1_prime + 360.0
    return h2_prime - h1_prime - 360.0


def _mean_hue(h1_prime: float, h2_prime: float) -> float:
    """Mean hue H̄' in degrees; +360 wrap when hues are more than 180° apart."""
    if abs(h1_prime - h2_prime) > 180.0:
        return (h1_prime + h2_prime + 360.0) / 2.0
    return (h1_prime + h2_prime) / 2.0


def _hue_weighting(h_bar_prime: float) -> float:
    """Hue-dependent term T used by S_H."""
    return (1.0
            - 0.17 * math.cos(_radians(h_bar_prime - 30.0))
            + 0.24 * math.cos(_radians(2.0 * h_bar_prime))
            + 0.32 * math.cos(_radians(3.0 * h_bar_prime + 6.0))
            - 0.20 * math.cos(_radians(4.0 * h_bar_prime - 63.0)))


def _rotation_term(c_bar_prime: float, h_bar_prime: float) -> float:
    """Rotation term R_T coupling chroma and hue in the blue region."""
    c_bar_prime_7 = _pow7(c_bar_prime)
    r_c = 2.0 * math.sqrt(c_bar_prime_7 / (c_bar_prime_7 + _POW25_7))
    delta_theta = 60.0 * math.exp(-(((h_bar_prime - 275.0) / 25.0) ** 2))
    return -r_c * math.sin(_radians(delta_theta))


def _degrees(radians: float) -> float:
    return radians * (180.0 / math.pi)


def _radians(degrees: float) -> float:
    return degrees * (math.pi / 180.0)


def _pow7(x: float) -> float:
    """x**7 by multiplication; overflows to inf instead of raising."""
    x2 = x * x
    return x2 * x2 * x2 * x
