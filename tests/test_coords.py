import math
import xml.etree.ElementTree as ET

import pytest

from intergeo_ir.coords import (
    CoordinateForm,
    local_name,
    normalize_point_coords,
    read_coordinate_block,
    to_euclidean,
)
from intergeo_ir.model import UnsupportedCoordinateForm


def _block(text: str) -> ET.Element:
    return ET.fromstring(text)


def test_homogeneous_point_is_reordered_weight_first():
    form, values = read_coordinate_block(
        _block(
            "<homogeneous_coordinates>"
            "<double>3</double><double>4</double><double>2</double>"
            "</homogeneous_coordinates>"
        )
    )
    assert form is CoordinateForm.HOMOGENEOUS
    assert normalize_point_coords(form, values) == (2.0, 3.0, 4.0)


def test_euclidean_point_is_kept():
    form, values = read_coordinate_block(
        _block("<euclidean_coordinates><double>1.5</double><double>-2</double></euclidean_coordinates>")
    )
    assert normalize_point_coords(form, values) == (1.5, -2.0)


def test_polar_point_is_converted_to_cartesian():
    x, y = normalize_point_coords(CoordinateForm.POLAR, [2.0, math.pi / 2])
    assert x == pytest.approx(0.0, abs=1e-12)
    assert y == pytest.approx(2.0)


def test_complex_block_with_zero_imaginary_parts_is_accepted():
    form, values = read_coordinate_block(
        _block(
            "<homogeneous_coordinates>"
            "<complex><double>5</double><double>0</double></complex>"
            "<complex><double>6</double><double>0</double></complex>"
            "<complex><double>1</double><double>0</double></complex>"
            "</homogeneous_coordinates>"
        )
    )
    assert values == [5.0, 0.0, 6.0, 0.0, 1.0, 0.0]
    assert normalize_point_coords(form, values) == (1.0, 5.0, 6.0)


def test_complex_block_with_imaginary_part_is_rejected():
    with pytest.raises(UnsupportedCoordinateForm):
        normalize_point_coords(CoordinateForm.HOMOGENEOUS, [5.0, 1e-5, 6.0, 0.0, 1.0, 0.0])


def test_wrong_number_of_homogeneous_values_is_rejected():
    with pytest.raises(UnsupportedCoordinateForm) as excinfo:
        normalize_point_coords(CoordinateForm.HOMOGENEOUS, [1.0, 2.0])
    assert "3 or 6" in str(excinfo.value)


def test_unknown_coordinate_block_is_rejected():
    with pytest.raises(UnsupportedCoordinateForm) as excinfo:
        read_coordinate_block(_block("<spherical_coordinates><double>1</double></spherical_coordinates>"))
    assert excinfo.value.form == "spherical_coordinates"


def test_non_numeric_value_is_rejected():
    with pytest.raises(UnsupportedCoordinateForm):
        read_coordinate_block(
            _block("<euclidean_coordinates><double>one</double><double>2</double></euclidean_coordinates>")
        )


def test_namespaced_tags_are_reduced_to_local_names():
    assert local_name("{http://www.intergeo.eu/2008/construction}point") == "point"
    assert local_name("point") == "point"


def test_to_euclidean_divides_by_weight():
    assert to_euclidean((2.0, 4.0, 6.0)) == (2.0, 3.0)
    assert to_euclidean((1.0, 2.0)) == (1.0, 2.0)
