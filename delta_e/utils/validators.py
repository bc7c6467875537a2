"""Weighting-parameter schema and config loading.

Provides centralized validation for ΔE00 weighting configs using pydantic:
    - KWeights: parametric factors k_L, k_C, k_H (default 1.0 each)
    - Weights preset schema (weights.v1.yaml): named KWeights with description

All loaders fail fast with actionable messages (file path, offending key,
expected range).

Conventions:
    - Graphic arts / reference conditions: k_L = k_C = k_H = 1
    - Textiles: k_L = 2

Usage:
    from delta_e.utils import validators

    weights = validators.load_weights_config("configs/weights/textiles.v1.yaml")
    preset = validators.load_weights_preset("configs/weights/textiles.v1.yaml")
"""

import logging
from pathlib import Path
from typing import Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator

logger = logging.getLogger(__name__)


# ============================================================================
# WEIGHTS
# ============================================================================

class KWeights(BaseModel):
    """Parametric weighting factors for CIEDE2000.

    Larger values reduce the contribution of the matching term. Factors must
    be strictly positive; zero would divide by zero and negative values would
    flip the sign of the term.
    """
    model_config = ConfigDict(frozen=True)

    l: float = Field(1.0, gt=0.0, description="Lightness factor k_L")
    c: float = Field(1.0, gt=0.0, description="Chroma factor k_C")
    h: float = Field(1.0, gt=0.0, description="Hue factor k_H")


# ============================================================================
# WEIGHTS PRESET SCHEMA V1
# ============================================================================

class WeightsPresetV1(BaseModel):
    """Named weighting preset (weights.v1.yaml schema)."""
    model_config = ConfigDict(populate_by_name=True)

    schema_version: str = Field("weights.v1", alias="schema", description="Schema version")
    name: str = Field(..., min_length=1, description="Preset identifier")
    description: Optional[str] = Field(None, description="Where the preset applies")
    weights: KWeights = Field(default_factory=KWeights)

    @field_validator('schema_version')
    @classmethod
    def validate_schema(cls, v: str) -> str:
        if v != "weights.v1":
            raise ValueError(f"Expected schema 'weights.v1', got '{v}'")
        return v


# ============================================================================
# PUBLIC API
# ============================================================================

def load_weights_preset(path: Union[str, Path]) -> WeightsPresetV1:
    """Load and validate a weights preset from YAML.

    Parameters
    ----------
    path : Union[str, Path]
        Path to weights.v1.yaml file

    Returns
    -------
    WeightsPresetV1
        Validated preset

    Raises
    ------
    FileNotFoundError
        If path doesn't exist
    ValueError
        If validation fails (with actionable error message)
    """
    from . import fs

    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Weights config not found: {path}")

    data = fs.load_yaml(path)
    if not isinstance(data, dict):
        raise ValueError(
            f"Weights config validation failed at {path}: "
            f"expected a mapping, got {type(data).__name__}"
        )
    try:
        preset = WeightsPresetV1(**data)
    except Exception as e:
        raise ValueError(f"Weights config validation failed at {path}: {e}") from e

    w = preset.weights
    logger.info(f"Loaded weights preset '{preset.name}' from {path} (kL={w.l}, kC={w.c}, kH={w.h})")
    return preset


def load_weights_config(path: Union[str, Path]) -> KWeights:
    """Load the KWeights of a weights preset YAML.

    See load_weights_preset for parameters and errors.
    """
    return load_weights_preset(path).weights
