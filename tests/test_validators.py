"""Test weighting schema validation and config loading.

Tests for delta_e.utils.validators:
    - KWeights defaults and positivity checks
    - Load shipped presets (graphic_arts, textiles)
    - Reject invalid YAMLs with clear error messages
    - Loaded weights feed straight into delta_e2000

Run:
    pytest tests/test_validators.py -v
"""

from pathlib import Path

import pytest
from pydantic import ValidationError

from delta_e import Lab, delta_e2000, load_weights_config
from delta_e.utils import fs, validators
from delta_e.utils.validators import KWeights


@pytest.fixture(scope="module")
def project_root():
    """Project root directory."""
    return Path(__file__).parent.parent


def _write(tmp_path, text, name="weights.yaml"):
    path = tmp_path / name
    path.write_text(text, encoding="utf-8")
    return path


# ============================================================================
# KWEIGHTS
# ============================================================================

def test_kweights_defaults():
    w = KWeights()
    assert (w.l, w.c, w.h) == (1.0, 1.0, 1.0)


def test_kweights_partial():
    w = KWeights(l=2.0)
    assert (w.l, w.c, w.h) == (2.0, 1.0, 1.0)


@pytest.mark.parametrize("field", ["l", "c", "h"])
@pytest.mark.parametrize("value", [0.0, -1.0])
def test_kweights_rejects_non_positive(field, value):
    with pytest.raises(ValidationError, match=field):
        KWeights(**{field: value})


def test_kweights_validation_error_is_value_error():
    with pytest.raises(ValueError):
        KWeights(c=0.0)


def test_kweights_is_frozen():
    w = KWeights()
    with pytest.raises(ValidationError):
        w.l = 2.0


# ============================================================================
# PRESET LOADING
# ============================================================================

def test_load_graphic_arts_preset(project_root):
    preset = validators.load_weights_preset(project_root / "configs/weights/graphic_arts.v1.yaml")
    assert preset.schema_version == "weights.v1"
    assert preset.name == "graphic_arts"
    assert preset.weights == KWeights()


def test_load_textiles_preset(project_root):
    weights = load_weights_config(project_root / "configs/weights/textiles.v1.yaml")
    assert weights == KWeights(l=2.0, c=1.0, h=1.0)


def test_textiles_halves_pure_lightness_difference(project_root):
    weights = load_weights_config(project_root / "configs/weights/textiles.v1.yaml")
    lab1, lab2 = Lab(40.0, 0.0, 0.0), Lab(60.0, 0.0, 0.0)
    assert delta_e2000(lab1, lab2, weights) == pytest.approx(delta_e2000(lab1, lab2) / 2.0)


def test_missing_weights_block_defaults(tmp_path):
    path = _write(tmp_path, "schema: weights.v1\nname: plain\n")
    assert load_weights_config(path) == KWeights()


def test_partial_weights_block(tmp_path):
    path = _write(tmp_path, "schema: weights.v1\nname: hue_heavy\nweights:\n  h: 0.5\n")
    assert load_weights_config(path) == KWeights(h=0.5)


def test_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError, match='Weights config not found'):
        load_weights_config(tmp_path / "nope.yaml")


def test_wrong_schema_rejected(tmp_path):
    path = _write(tmp_path, "schema: stroke.v1\nname: x\n")
    with pytest.raises(ValueError, match="Expected schema 'weights.v1'"):
        load_weights_config(path)


def test_non_positive_weight_rejected(tmp_path):
    path = _write(tmp_path, "schema: weights.v1\nname: bad\nweights:\n  l: 0\n")
    with pytest.raises(ValueError, match='validation failed at') as exc_info:
        load_weights_config(path)
    assert isinstance(exc_info.value.__cause__, ValidationError)


def test_missing_name_rejected(tmp_path):
    path = _write(tmp_path, "schema: weights.v1\nweights:\n  l: 1.0\n")
    with pytest.raises(ValueError, match='name'):
        load_weights_config(path)


def test_non_mapping_rejected(tmp_path):
    path = _write(tmp_path, "- 1\n- 2\n")
    with pytest.raises(ValueError, match='expected a mapping'):
        load_weights_config(path)


def test_empty_file_rejected(tmp_path):
    path = _write(tmp_path, "")
    with pytest.raises(ValueError, match='name'):
        load_weights_config(path)


# ============================================================================
# FS
# ============================================================================

def test_load_yaml_empty_is_dict(tmp_path):
    assert fs.load_yaml(_write(tmp_path, "")) == {}


def test_load_yaml_missing(tmp_path):
    with pytest.raises(FileNotFoundError, match='YAML file not found'):
        fs.load_yaml(tmp_path / "missing.yaml")


def test_load_yaml_parse_error(tmp_path):
    import yaml

    path = _write(tmp_path, "a: [1, 2\n")
    with pytest.raises(yaml.YAMLError, match='Failed to parse'):
        fs.load_yaml(path)
