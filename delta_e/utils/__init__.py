"""Cross-cutting utilities (lowest dependency layer).

This package provides shared primitives for:
    - Lab color type and sRGB → Lab conversion (color)
    - Weighting config validation (validators)
    - YAML reading (fs)
    - Unified logging (logging_config)

No module in utils/ may import from upper layers (de2000).

Convenience imports:
    from delta_e.utils import color, validators
    from delta_e.utils.logging_config import setup_logging, get_logger
"""

from . import color
from . import fs
from . import logging_config
from . import validators

from .logging_config import get_logger, push_context, setup_logging

__all__ = [
    # Modules
    'color',
    'fs',
    'logging_config',
    'validators',
    # Direct exports
    'setup_logging',
    'get_logger',
    'push_context',
]
