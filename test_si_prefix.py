import numpy as np
import pytest

from si_prefix import convert, prefix_labels, prefix_multiplier


def test_labels_include_base_unit():
    labels = prefix_labels("m")
    assert "m" in labels and "mm" in labels and "cm" in labels


def test_powers_for_section_properties():
    np.testing.assert_allclose(prefix_multiplier("cm", "m", 4), 1e-8)
    np.testing.assert_allclose(convert(1.0, "cm", "m", "m", power=3), 1e-6)


def test_modulus_conversion():
    np.testing.assert_allclose(convert(200.0, "GPa", "kPa", "Pa"), 200e6)


def test_unknown_label_raises():
    with pytest.raises(ValueError):
        prefix_multiplier("furlong", "m")
