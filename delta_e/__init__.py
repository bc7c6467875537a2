"""delta_e: CIEDE2000 perceptual color difference.

Computes ΔE00 between two CIE L*a*b* colors, or between two 8-bit sRGB
colors converted to Lab (D65) first.

Architecture layers (strict one-way dependency):
    delta_e/de2000.py → delta_e/utils/

Key invariants:
    - Pure functions: no state, no I/O, safe to call from any thread
    - Identical colors give exactly 0.0
    - Weighting factors k_L, k_C, k_H are validated positive at construction

Example:
    >>> from delta_e import Lab, delta_e2000
    >>> round(delta_e2000(Lab(50.0, 2.6772, -79.7751), Lab(50.0, 0.0, -82.7485)), 4)
    2.0425
"""

from .de2000 import delta_e2000, delta_e2000_from_rgb
from .utils.color import Lab, rgb_to_lab
from .utils.validators import KWeights, load_weights_config

__version__ = "0.1.0"

__all__ = [
    'Lab',
    'KWeights',
    'delta_e2000',
    'delta_e2000_from_rgb',
    'rgb_to_lab',
    'load_weights_config',
]
