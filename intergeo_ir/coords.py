"""Conversion of Intergeo coordinate blocks into host engine coordinates.

Points end up either as a weight-first homogeneous triple ``(w, x, y)`` or as a
Euclidean pair ``(x, y)``; the host supplies the implicit weight 1 for the
latter.  Line coefficients and circle matrices are not converted at all and are
read with :func:`read_doubles`.
"""

from __future__ import annotations

import math
from enum import Enum
from typing import List, Sequence, Tuple
from xml.etree.ElementTree import Element

from .model import UnsupportedCoordinateForm

_IMAGINARY_EPS = 1e-10


class CoordinateForm(str, Enum):
    HOMOGENEOUS = "homogeneous_coordinates"
    EUCLIDEAN = "euclidean_coordinates"
    POLAR = "polar_coordinates"


def local_name(tag: str) -> str:
    """Strip an ElementTree ``{namespace}`` prefix from ``tag``."""

    if tag.startswith("{"):
        return tag.rsplit("}", 1)[1]
    return tag


def child_elements(node: Element) -> List[Element]:
    return [child for child in node if isinstance(child.tag, str)]


def _parse_double(node: Element) -> float:
    text = (node.text or "").strip()
    try:
        return float(text)
    except ValueError as exc:
        raise UnsupportedCoordinateForm(
            local_name(node.tag), f"not a number in <{local_name(node.tag)}>: {text!r}"
        ) from exc


def read_doubles(block: Element) -> List[float]:
    """Return every ``<double>`` child of ``block`` in document order."""

    return [_parse_double(child) for child in child_elements(block) if local_name(child.tag) == "double"]


def read_coordinate_block(block: Element) -> Tuple[CoordinateForm, List[float]]:
    tag = local_name(block.tag)
    try:
        form = CoordinateForm(tag)
    except ValueError as exc:
        raise UnsupportedCoordinateForm(tag) from exc

    values: List[float] = []
    for child in child_elements(block):
        name = local_name(child.tag)
        if name == "double":
            values.append(_parse_double(child))
        elif name == "complex" and form is CoordinateForm.HOMOGENEOUS:
            values.extend(read_doubles(child))
        else:
            raise UnsupportedCoordinateForm(tag, f"Not implemented: {name} in <{tag}>")
    return form, values


def normalize_point_coords(form: CoordinateForm, values: Sequence[float]) -> Tuple[float, ...]:
    """Return canonical point coordinates for a parsed coordinate block."""

    c = [float(v) for v in values]
    if form is CoordinateForm.HOMOGENEOUS:
        if len(c) == 3:
            return (c[2], c[0], c[1])
        if len(c) == 6:
            if all(abs(c[i]) < _IMAGINARY_EPS for i in (1, 3, 5)):
                return (c[4], c[0], c[2])
            raise UnsupportedCoordinateForm(form.value, "complex coordinates are not supported")
        raise UnsupportedCoordinateForm(
            form.value, f"homogeneous coordinates need 3 or 6 numbers, got {len(c)}"
        )
    if form is CoordinateForm.EUCLIDEAN:
        if len(c) != 2:
            raise UnsupportedCoordinateForm(form.value, f"euclidean coordinates need 2 numbers, got {len(c)}")
        return (c[0], c[1])
    if form is CoordinateForm.POLAR:
        if len(c) != 2:
            raise UnsupportedCoordinateForm(form.value, f"polar coordinates need 2 numbers, got {len(c)}")
        r, theta = c
        return (r * math.cos(theta), r * math.sin(theta))
    raise UnsupportedCoordinateForm(str(form))


def to_euclidean(coords: Sequence[float]) -> Tuple[float, float]:
    """Return ``(x, y)`` for a canonical 2- or 3-component coordinate tuple."""

    if len(coords) == 2:
        return float(coords[0]), float(coords[1])
    w, x, y = (float(v) for v in coords)
    if abs(w) <= 1e-12:
        return x, y
    return x / w, y / w


__all__ = [
    "CoordinateForm",
    "local_name",
    "child_elements",
    "read_doubles",
    "read_coordinate_block",
    "normalize_point_coords",
    "to_euclidean",
]
