"""Reference geometry engine used as the default import target.

Coordinates are homogeneous and weight first: a point is ``[z, x, y]`` and a
line ``[c, a, b]`` stands for ``c*z + a*x + b*y = 0``.  Every dependent element
recomputes from its parents whenever it is read, so closures installed by the
importer (``line_through_point``, ``center_of_circle``, …) follow moved points
without any explicit scheduling.
"""

from __future__ import annotations

import abc
import itertools
import logging
import math
from numbers import Real
from typing import Any, Callable, Dict, Iterator, List, Mapping, Optional, Sequence, Set, Tuple

import numpy as np

from .logging_utils import debug_log_call

logger = logging.getLogger(__name__)

CoordsFunc = Callable[[], np.ndarray]

_EPS = 1e-12


class BoardError(RuntimeError):
    """Raised when the board cannot build or modify an element."""


def _nan3() -> np.ndarray:
    return np.full(3, np.nan)


def _normalize(coords: np.ndarray) -> np.ndarray:
    if abs(coords[0]) > _EPS:
        return coords / coords[0]
    return coords


def _term(value: Any) -> Callable[[], float]:
    if callable(value):
        return lambda: float(value())
    if isinstance(value, Real):
        constant = float(value)
        return lambda: constant
    raise BoardError(f"expected a number or a function, got {value!r}")


def _is_number(value: Any) -> bool:
    return isinstance(value, Real) and not isinstance(value, bool)


_DEFAULT_ATTRIBUTES: Dict[str, Dict[str, Any]] = {
    "point": {"visible": True, "withLabel": True, "trace": False, "strokeColor": "red", "fillColor": "red"},
    "line": {
        "visible": True,
        "withLabel": False,
        "trace": False,
        "straightFirst": True,
        "straightLast": True,
        "strokeColor": "#0000ff",
    },
    "circle": {"visible": True, "withLabel": False, "trace": False, "strokeColor": "#0000ff"},
}


class GeometryElement(abc.ABC):
    element_type = "element"

    def __init__(
        self,
        board: "Board",
        kind: str,
        attributes: Optional[Mapping[str, Any]] = None,
        parents: Sequence[Any] = (),
    ) -> None:
        self.board = board
        self.kind = kind
        self.parents = tuple(parents)
        self.attributes: Dict[str, Any] = dict(_DEFAULT_ATTRIBUTES.get(self.element_type, {}))
        if attributes:
            self.attributes.update(attributes)
        self.trace_history: List[Tuple[float, ...]] = []
        self.id = board._register(self, self.attributes.get("id"))
        self.name = str(self.attributes.get("name") or "")

    def set_property(self, *configs: Mapping[str, Any], **kwargs: Any) -> "GeometryElement":
        for config in configs:
            self.attributes.update(config)
        self.attributes.update(kwargs)
        if "name" in self.attributes:
            self.name = str(self.attributes["name"] or "")
        return self

    @property
    def visible(self) -> bool:
        return bool(self.attributes.get("visible", True))

    @property
    def trace(self) -> bool:
        return bool(self.attributes.get("trace", False))

    @abc.abstractmethod
    def snapshot(self) -> Tuple[float, ...]:
        """Current numeric state of the element."""

    def __repr__(self) -> str:
        values = ", ".join(f"{v:.6g}" for v in self.snapshot())
        return f"<{type(self).__name__} {self.id} {self.kind} ({values})>"


class Point(GeometryElement):
    element_type = "point"

    def __init__(
        self,
        board: "Board",
        coords: Optional[CoordsFunc] = None,
        attributes: Optional[Mapping[str, Any]] = None,
        *,
        kind: str = "point",
        parents: Sequence[Any] = (),
        position: Optional[Sequence[float]] = None,
    ) -> None:
        self._position: Optional[np.ndarray] = None
        if position is not None:
            self._position = _normalize(np.asarray(position, dtype=float))
        if coords is None:
            if self._position is None:
                raise BoardError("a point needs coordinates or a coordinate function")
            coords = self._free_coords
        self._coords_fn: CoordsFunc = coords
        super().__init__(board, kind, attributes, parents)

    def _free_coords(self) -> np.ndarray:
        assert self._position is not None
        return self._position

    @property
    def is_free(self) -> bool:
        return self._position is not None

    @property
    def usr_coords(self) -> np.ndarray:
        return _normalize(np.asarray(self._coords_fn(), dtype=float))

    def x(self) -> float:
        return float(self.usr_coords[1])

    def y(self) -> float:
        return float(self.usr_coords[2])

    def z(self) -> float:
        return float(self.usr_coords[0])

    def dist(self, other: "Point") -> float:
        a = self.usr_coords
        b = other.usr_coords
        return math.hypot(a[1] - b[1], a[2] - b[2])

    def move_to(self, x: float, y: float) -> None:
        if self._position is None:
            raise BoardError(f"point {self.id} is not free")
        self._position = np.array([1.0, float(x), float(y)])

    def add_constraint(self, terms: Sequence[Any]) -> "Point":
        """Replace the coordinate function of this point.

        ``terms`` holds one function returning full coordinates, two terms
        ``(x, y)`` or three homogeneous terms ``(z, x, y)``.
        """

        terms = list(terms)
        if len(terms) == 1 and callable(terms[0]):
            fn = terms[0]

            def coords() -> np.ndarray:
                value = np.asarray(fn(), dtype=float)
                if value.shape == (2,):
                    return np.array([1.0, value[0], value[1]])
                return value

        elif len(terms) == 2:
            fx, fy = (_term(t) for t in terms)

            def coords() -> np.ndarray:
                return np.array([1.0, fx(), fy()])

        elif len(terms) == 3:
            fz, fx, fy = (_term(t) for t in terms)

            def coords() -> np.ndarray:
                return np.array([fz(), fx(), fy()])

        else:
            raise BoardError(f"point constraint needs 1, 2 or 3 terms, got {len(terms)}")
        self._coords_fn = coords
        self._position = None
        return self

    def snapshot(self) -> Tuple[float, ...]:
        c = self.usr_coords
        return (float(c[1]), float(c[2]))


class Glider(Point):
    """Point sliding on a line or circle."""

    def __init__(
        self,
        board: "Board",
        x: float,
        y: float,
        slide_object: "Curve",
        attributes: Optional[Mapping[str, Any]] = None,
    ) -> None:
        self.slide_object = slide_object
        super().__init__(
            board,
            self._projected,
            attributes,
            kind="glider",
            parents=(slide_object,),
            position=(1.0, x, y),
        )

    def _projected(self) -> np.ndarray:
        assert self._position is not None
        return self.slide_object.project(self._position)


class Line(GeometryElement):
    element_type = "line"

    def __init__(
        self,
        board: "Board",
        stdform: CoordsFunc,
        attributes: Optional[Mapping[str, Any]] = None,
        *,
        kind: str = "line",
        parents: Sequence[Any] = (),
        point1: Optional[Point] = None,
        point2: Optional[Point] = None,
    ) -> None:
        self._stdform_fn = stdform
        self.point1 = point1
        self.point2 = point2
        super().__init__(board, kind, attributes, parents)

    def stdform(self) -> np.ndarray:
        return np.asarray(self._stdform_fn(), dtype=float)

    @property
    def straight_first(self) -> bool:
        return bool(self.attributes.get("straightFirst", True))

    @property
    def straight_last(self) -> bool:
        return bool(self.attributes.get("straightLast", True))

    def project(self, coords: np.ndarray) -> np.ndarray:
        c, a, b = self.stdform()
        p = _normalize(np.asarray(coords, dtype=float))
        n2 = a * a + b * b
        if n2 < _EPS:
            return _nan3()
        t = (a * p[1] + b * p[2] + c) / n2
        return np.array([1.0, p[1] - a * t, p[2] - b * t])

    def snapshot(self) -> Tuple[float, ...]:
        return tuple(float(v) for v in self.stdform())


class Circle(GeometryElement):
    element_type = "circle"

    def __init__(
        self,
        board: "Board",
        midpoint: Point,
        radius: Callable[[], float],
        attributes: Optional[Mapping[str, Any]] = None,
        *,
        kind: str = "circle",
        parents: Sequence[Any] = (),
    ) -> None:
        self.midpoint = midpoint
        self._radius_fn = radius
        super().__init__(board, kind, attributes, parents)

    def radius(self) -> float:
        return float(self._radius_fn())

    def quadratic_form(self) -> np.ndarray:
        mx, my = self.midpoint.x(), self.midpoint.y()
        r = self.radius()
        return np.array(
            [
                [mx * mx + my * my - r * r, -mx, -my],
                [-mx, 1.0, 0.0],
                [-my, 0.0, 1.0],
            ]
        )

    def project(self, coords: np.ndarray) -> np.ndarray:
        p = _normalize(np.asarray(coords, dtype=float))
        mx, my = self.midpoint.x(), self.midpoint.y()
        r = self.radius()
        dx, dy = p[1] - mx, p[2] - my
        norm = math.hypot(dx, dy)
        if norm < _EPS:
            dx, dy, norm = 1.0, 0.0, 1.0
        return np.array([1.0, mx + r * dx / norm, my + r * dy / norm])

    def snapshot(self) -> Tuple[float, ...]:
        return (self.midpoint.x(), self.midpoint.y(), self.radius())


Curve = Any  # Line | Circle


# ---------------------------------------------------------------------------
# Intersection helpers


def _meet_line_line(l1: np.ndarray, l2: np.ndarray) -> np.ndarray:
    point = np.cross(l1, l2)
    if abs(point[0]) <= _EPS and abs(point[1]) <= _EPS and abs(point[2]) <= _EPS:
        return _nan3()
    return _normalize(point)


def _meet_circle_line(center: Tuple[float, float], r: float, line: np.ndarray, index: int) -> np.ndarray:
    c, a, b = line
    n2 = a * a + b * b
    if n2 < _EPS or not np.all(np.isfinite(line)):
        return _nan3()
    mx, my = center
    t = (a * mx + b * my + c) / n2
    fx, fy = mx - a * t, my - b * t
    d2 = r * r - t * t * n2
    if d2 < -_EPS:
        return _nan3()
    h = math.sqrt(max(d2, 0.0) / n2)
    sign = 1.0 if index == 0 else -1.0
    return np.array([1.0, fx - sign * b * h, fy + sign * a * h])


def _radical_line(c1: Circle, c2: Circle) -> np.ndarray:
    m1x, m1y, r1 = c1.snapshot()
    m2x, m2y, r2 = c2.snapshot()
    return np.array(
        [
            m1x * m1x + m1y * m1y - r1 * r1 - m2x * m2x - m2y * m2y + r2 * r2,
            2.0 * (m2x - m1x),
            2.0 * (m2y - m1y),
        ]
    )


def meet(el1: Curve, el2: Curve, index: int) -> np.ndarray:
    """Return branch ``index`` of the intersection of two curves."""

    if isinstance(el1, Line) and isinstance(el2, Line):
        return _meet_line_line(el1.stdform(), el2.stdform())
    if isinstance(el1, Line) and isinstance(el2, Circle):
        el1, el2 = el2, el1
    if isinstance(el1, Circle) and isinstance(el2, Line):
        center = (el1.midpoint.x(), el1.midpoint.y())
        return _meet_circle_line(center, el1.radius(), el2.stdform(), index)
    if isinstance(el1, Circle) and isinstance(el2, Circle):
        center = (el1.midpoint.x(), el1.midpoint.y())
        return _meet_circle_line(center, el1.radius(), _radical_line(el1, el2), index)
    raise BoardError(f"cannot intersect {el1!r} with {el2!r}")


def _check_curve(el: Any) -> None:
    if not isinstance(el, (Line, Circle)):
        raise BoardError(f"expected a line or circle, got {el!r}")


def _distance_sq(coords: np.ndarray, point: Point) -> float:
    p = point.usr_coords
    return float((coords[1] - p[1]) ** 2 + (coords[2] - p[2]) ** 2)


def _split_attributes(attributes: Mapping[str, Any], count: int) -> List[Dict[str, Any]]:
    """Distribute list-valued ``name``/``id`` entries over ``count`` outputs."""

    result: List[Dict[str, Any]] = []
    for idx in range(count):
        attrs: Dict[str, Any] = {}
        for key, value in attributes.items():
            if key in ("name", "id") and isinstance(value, (list, tuple)):
                if idx < len(value):
                    attrs[key] = value[idx]
            else:
                attrs[key] = value
        result.append(attrs)
    return result


class Board:
    """In-memory geometry engine implementing :class:`intergeo_ir.host.HostBoard`."""

    def __init__(self, board_id: str = "board") -> None:
        self.board_id = board_id
        self.elements: List[GeometryElement] = []
        self.objects: Dict[str, GeometryElement] = {}
        self.origin: Tuple[float, float] = (0.0, 0.0)
        self.unit_x = 1.0
        self.unit_y = 1.0
        self.update_count = 0
        self._counter = itertools.count()
        self._generated: Set[str] = set()
        self._builders: Dict[str, Callable[[List[Any], Dict[str, Any]], Any]] = {
            "point": self._create_point,
            "line": self._create_line,
            "glider": self._create_glider,
            "midpoint": self._create_midpoint,
            "intersection": self._create_intersection,
            "otherintersection": self._create_other_intersection,
            "parallel": self._create_parallel,
            "perpendicular": self._create_perpendicular,
            "circle": self._create_circle,
            "circumcircle": self._create_circumcircle,
            "bisector": self._create_bisector,
            "bisectorlines": self._create_bisector_lines,
            "tangent": self._create_tangent,
        }

    # ------------------------------------------------------------------
    # Registry

    def _generate_id(self, element_type: str) -> str:
        while True:
            ident = f"{self.board_id}{element_type}{next(self._counter)}"
            if ident not in self.objects:
                return ident

    def _register(self, element: GeometryElement, ident: Optional[Any]) -> str:
        if ident is None:
            ident = self._generate_id(element.element_type)
            self._generated.add(ident)
        ident = str(ident)
        if ident in self._generated and ident in self.objects:
            # explicit ids win over generated ones
            previous = self.objects.pop(ident)
            self._generated.discard(ident)
            previous.id = self._generate_id(previous.element_type)
            self._generated.add(previous.id)
            self.objects[previous.id] = previous
        if ident in self.objects:
            raise BoardError(f"duplicate element id {ident!r}")
        self.elements.append(element)
        self.objects[ident] = element
        return ident

    def select(self, ident: str) -> GeometryElement:
        try:
            return self.objects[ident]
        except KeyError as exc:
            raise BoardError(f"unknown element id {ident!r}") from exc

    def __iter__(self) -> Iterator[GeometryElement]:
        return iter(self.elements)

    def __len__(self) -> int:
        return len(self.elements)

    # ------------------------------------------------------------------
    # HostBoard protocol

    @debug_log_call(logger, name="Board.create")
    def create(
        self,
        kind: str,
        parents: Sequence[Any],
        attributes: Optional[Mapping[str, Any]] = None,
    ) -> Any:
        builder = self._builders.get(kind)
        if builder is None:
            raise BoardError(f"unknown element type {kind!r}")
        return builder(list(parents), dict(attributes or {}))

    def intersection(self, el1: Curve, el2: Curve, index: int) -> CoordsFunc:
        _check_curve(el1)
        _check_curve(el2)
        return lambda: meet(el1, el2, index)

    def other_intersection(self, el1: Curve, el2: Curve, known: Point) -> CoordsFunc:
        _check_curve(el1)
        _check_curve(el2)

        def coords() -> np.ndarray:
            first = meet(el1, el2, 0)
            second = meet(el1, el2, 1)
            if _distance_sq(first, known) < _distance_sq(second, known):
                return second
            return first

        return coords

    def set_view(self, origin: Tuple[float, float], unit_x: float, unit_y: float) -> None:
        self.origin = (float(origin[0]), float(origin[1]))
        self.unit_x = float(unit_x)
        self.unit_y = float(unit_y)

    def screen_coords(self, point: Point) -> Tuple[float, float]:
        return (self.origin[0] + point.x() * self.unit_x, self.origin[1] - point.y() * self.unit_y)

    def full_update(self) -> None:
        self.update_count += 1
        for element in self.elements:
            values = element.snapshot()
            if element.trace:
                element.trace_history.append(values)

    # ------------------------------------------------------------------
    # Builders

    def _create_point(self, parents: List[Any], attributes: Dict[str, Any]) -> Point:
        if len(parents) not in (2, 3):
            raise BoardError(f"point needs 2 or 3 coordinates, got {len(parents)}")
        if all(_is_number(p) for p in parents):
            position = [1.0, *parents] if len(parents) == 2 else list(parents)
            return Point(self, None, attributes, parents=parents, position=position)
        point = Point(self, _nan3, attributes, parents=parents)
        return point.add_constraint(parents)

    def _create_line(self, parents: List[Any], attributes: Dict[str, Any]) -> Line:
        if len(parents) == 2 and all(isinstance(p, Point) for p in parents):
            p1, p2 = parents
            return Line(
                self,
                lambda: np.cross(p1.usr_coords, p2.usr_coords),
                attributes,
                parents=parents,
                point1=p1,
                point2=p2,
            )
        if len(parents) == 3:
            fc, fa, fb = (_term(t) for t in parents)
            return Line(self, lambda: np.array([fc(), fa(), fb()]), attributes, parents=parents)
        raise BoardError(f"line needs two points or three coefficients, got {parents!r}")

    def _create_glider(self, parents: List[Any], attributes: Dict[str, Any]) -> Glider:
        if len(parents) != 3:
            raise BoardError("glider needs [x, y, curve]")
        x, y, curve = parents
        _check_curve(curve)
        return Glider(self, float(x), float(y), curve, attributes)

    def _create_midpoint(self, parents: List[Any], attributes: Dict[str, Any]) -> Point:
        if len(parents) == 1 and isinstance(parents[0], Line):
            line = parents[0]
            if line.point1 is None or line.point2 is None:
                raise BoardError(f"line {line.id} has no defining points")
            parents = [line.point1, line.point2]
        if len(parents) != 2 or not all(isinstance(p, Point) for p in parents):
            raise BoardError(f"midpoint needs two points or a segment, got {parents!r}")
        p1, p2 = parents

        def coords() -> np.ndarray:
            a, b = p1.usr_coords, p2.usr_coords
            return np.array([1.0, 0.5 * (a[1] + b[1]), 0.5 * (a[2] + b[2])])

        return Point(self, coords, attributes, kind="midpoint", parents=parents)

    def _create_intersection(self, parents: List[Any], attributes: Dict[str, Any]) -> Point:
        if len(parents) != 3:
            raise BoardError("intersection needs [curve, curve, index]")
        el1, el2, index = parents
        return Point(
            self,
            self.intersection(el1, el2, int(index)),
            attributes,
            kind="intersection",
            parents=parents,
        )

    def _create_other_intersection(self, parents: List[Any], attributes: Dict[str, Any]) -> Point:
        if len(parents) != 3 or not isinstance(parents[2], Point):
            raise BoardError("otherintersection needs [curve, curve, point]")
        el1, el2, known = parents
        return Point(
            self,
            self.other_intersection(el1, el2, known),
            attributes,
            kind="otherintersection",
            parents=parents,
        )

    @staticmethod
    def _line_and_point(parents: List[Any], kind: str) -> Tuple[Line, Point]:
        if len(parents) == 2:
            first, second = parents
            if isinstance(first, Point) and isinstance(second, Line):
                first, second = second, first
            if isinstance(first, Line) and isinstance(second, Point):
                return first, second
        raise BoardError(f"{kind} needs a line and a point, got {parents!r}")

    def _create_parallel(self, parents: List[Any], attributes: Dict[str, Any]) -> Line:
        line, point = self._line_and_point(parents, "parallel")

        def stdform() -> np.ndarray:
            _, a, b = line.stdform()
            return np.array([-(a * point.x() + b * point.y()), a, b])

        return Line(self, stdform, attributes, kind="parallel", parents=parents, point1=point)

    def _create_perpendicular(self, parents: List[Any], attributes: Dict[str, Any]) -> List[GeometryElement]:
        line, point = self._line_and_point(parents, "perpendicular")
        line_attrs, foot_attrs = _split_attributes(attributes, 2)

        def stdform() -> np.ndarray:
            _, a, b = line.stdform()
            return np.array([b * point.x() - a * point.y(), -b, a])

        perp = Line(self, stdform, line_attrs, kind="perpendicular", parents=parents, point1=point)
        foot = Point(
            self,
            lambda: _meet_line_line(line.stdform(), perp.stdform()),
            foot_attrs,
            kind="perpendicularpoint",
            parents=parents,
        )
        perp.point2 = foot
        return [perp, foot]

    def _create_circle(self, parents: List[Any], attributes: Dict[str, Any]) -> Circle:
        if len(parents) != 2 or not isinstance(parents[0], Point):
            raise BoardError(f"circle needs a center and a point or radius, got {parents!r}")
        center, through = parents
        if isinstance(through, Point):
            radius: Callable[[], float] = lambda: center.dist(through)
        else:
            radius = _term(through)
        return Circle(self, center, radius, attributes, parents=parents)

    def _create_circumcircle(self, parents: List[Any], attributes: Dict[str, Any]) -> List[GeometryElement]:
        if len(parents) != 3 or not all(isinstance(p, Point) for p in parents):
            raise BoardError(f"circumcircle needs three points, got {parents!r}")
        p1, p2, p3 = parents
        center_attrs, circle_attrs = _split_attributes(attributes, 2)

        def center_coords() -> np.ndarray:
            ax, ay = p1.x(), p1.y()
            bx, by = p2.x(), p2.y()
            cx, cy = p3.x(), p3.y()
            d = 2.0 * (ax * (by - cy) + bx * (cy - ay) + cx * (ay - by))
            if abs(d) < _EPS:
                return _nan3()
            a2 = ax * ax + ay * ay
            b2 = bx * bx + by * by
            c2 = cx * cx + cy * cy
            ux = (a2 * (by - cy) + b2 * (cy - ay) + c2 * (ay - by)) / d
            uy = (a2 * (cx - bx) + b2 * (ax - cx) + c2 * (bx - ax)) / d
            return np.array([1.0, ux, uy])

        center = Point(self, center_coords, center_attrs, kind="circumcirclemidpoint", parents=parents)
        circle = Circle(self, center, lambda: center.dist(p1), circle_attrs, kind="circumcircle", parents=parents)
        return [center, circle]

    def _create_bisector(self, parents: List[Any], attributes: Dict[str, Any]) -> Line:
        if len(parents) != 3 or not all(isinstance(p, Point) for p in parents):
            raise BoardError(f"bisector needs three points, got {parents!r}")
        p1, vertex, p3 = parents

        def helper_coords() -> np.ndarray:
            vx, vy = vertex.x(), vertex.y()
            d1 = math.hypot(p1.x() - vx, p1.y() - vy)
            d3 = math.hypot(p3.x() - vx, p3.y() - vy)
            if d1 < _EPS or d3 < _EPS:
                return _nan3()
            dx = (p1.x() - vx) / d1 + (p3.x() - vx) / d3
            dy = (p1.y() - vy) / d1 + (p3.y() - vy) / d3
            return np.array([1.0, vx + dx, vy + dy])

        helper = Point(self, helper_coords, {"visible": False, "withLabel": False}, kind="bisectorpoint")
        attrs = {"straightFirst": False, "straightLast": True}
        attrs.update(attributes)
        return Line(
            self,
            lambda: np.cross(vertex.usr_coords, helper.usr_coords),
            attrs,
            kind="bisector",
            parents=parents,
            point1=vertex,
            point2=helper,
        )

    def _create_bisector_lines(self, parents: List[Any], attributes: Dict[str, Any]) -> List[Line]:
        if len(parents) != 2 or not all(isinstance(p, Line) for p in parents):
            raise BoardError(f"bisectorlines needs two lines, got {parents!r}")
        l1, l2 = parents

        def bisector(sign: float) -> CoordsFunc:
            def stdform() -> np.ndarray:
                s1, s2 = l1.stdform(), l2.stdform()
                n1 = math.hypot(s1[1], s1[2])
                n2 = math.hypot(s2[1], s2[2])
                if n1 < _EPS or n2 < _EPS:
                    return _nan3()
                return s1 / n1 + sign * s2 / n2

            return stdform

        attrs = _split_attributes(attributes, 2)
        return [
            Line(self, bisector(1.0), attrs[0], kind="bisectorlines", parents=parents),
            Line(self, bisector(-1.0), attrs[1], kind="bisectorlines", parents=parents),
        ]

    def _create_tangent(self, parents: List[Any], attributes: Dict[str, Any]) -> Line:
        if len(parents) != 2 or not isinstance(parents[0], Point) or not isinstance(parents[1], Circle):
            raise BoardError(f"tangent needs a point and a circle, got {parents!r}")
        point, circle = parents
        return Line(
            self,
            lambda: circle.quadratic_form() @ point.usr_coords,
            attributes,
            kind="tangent",
            parents=parents,
            point1=point,
        )


__all__ = [
    "BoardError",
    "GeometryElement",
    "Point",
    "Glider",
    "Line",
    "Circle",
    "Board",
    "meet",
]
