"""Constraint handlers and the dispatcher driving them.

Every handler receives the positional parameters of one constraint node.  By
Intergeo convention the leading parameters name the objects the constraint
produces and the remaining ones name its inputs.  Points that are still raw
records are realized on demand; lines and circles must already have been
constructed by an earlier constraint.
"""

from __future__ import annotations

import logging
from typing import Any, Callable, Dict, List, Optional, Tuple
from xml.etree.ElementTree import Element

from .board import BoardError
from .coords import child_elements, local_name, to_euclidean
from .host import HostBoard
from .logging_utils import apply_debug_logging
from .model import (
    ConstraintKind,
    ConstraintNode,
    ConstructionError,
    Diagnostic,
    ElementKind,
    Ident,
    MalformedDocumentStructure,
    RawRecord,
    ReaderOptions,
    RealizedHandle,
    UnsupportedConstraintKind,
    first_or_none,
)
from .store import PrimitiveStore, Realizer

logger = logging.getLogger(__name__)

_LINE_KINDS = (ElementKind.LINE, ElementKind.LINE_SEGMENT)


def read_params(node: Element, *, strict: bool = True) -> List[str]:
    """Return the text of every element child of ``node`` in document order."""

    params: List[str] = []
    for child in child_elements(node):
        text = (child.text or "").strip()
        if not text and strict:
            raise MalformedDocumentStructure(
                f"<{local_name(node.tag)}> has an empty <{local_name(child.tag)}> parameter",
                kind=local_name(node.tag),
            )
        params.append(text)
    return params


class ConstraintHandlers:
    def __init__(self, store: PrimitiveStore, board: HostBoard, options: ReaderOptions) -> None:
        self.store = store
        self.board = board
        self.options = options
        self.realizer = Realizer(store, board, options.dependent_style, with_label=options.with_label)

    # ------------------------------------------------------------------
    # Helpers

    def _point(self, ident: Ident) -> Any:
        return self.realizer.realize(ident)

    def _curve(self, ident: Ident) -> Any:
        return self.store.require_realized(ident)

    def _segment(self, ident: Ident) -> Any:
        line = self._curve(ident)
        if getattr(line, "point1", None) is None or getattr(line, "point2", None) is None:
            raise MalformedDocumentStructure(f"line {ident} has no endpoints", ident=ident)
        return line

    def _circle(self, ident: Ident) -> Any:
        circle = self._curve(ident)
        if getattr(circle, "midpoint", None) is None or not hasattr(circle, "quadratic_form"):
            raise MalformedDocumentStructure(f"object {ident} is not a circle", ident=ident)
        return circle

    def _coefficients(self, ident: Ident) -> Tuple[float, float, float]:
        record = self.store.require_raw(ident, *_LINE_KINDS)
        a, b, c = record.coords
        return a, b, c

    def _claim(self, ident: Ident) -> None:
        if isinstance(self.store.get(ident), RealizedHandle):
            raise ConstructionError(f"object {ident} has already been constructed", ident=ident)

    def _attrs(self, ident: Ident, **extra: Any) -> Dict[str, Any]:
        attrs: Dict[str, Any] = {"name": ident, "id": ident, "withLabel": self.options.with_label}
        attrs.update(extra)
        return attrs

    def _create(self, kind: str, parents: List[Any], ident: Ident, *, styled: bool = False, **extra: Any) -> Any:
        self._claim(ident)
        handle = self.board.create(kind, parents, self._attrs(ident, **extra))
        if styled:
            self.realizer.apply_style(handle)
        self.store.mark_realized(ident, handle)
        return handle

    # ------------------------------------------------------------------
    # Free objects

    def free_point(self, point: Ident) -> None:
        self._point(point)

    def free_line(self, line: Ident) -> None:
        a, b, c = self._coefficients(line)
        self._create("line", [c, a, b], line)

    # ------------------------------------------------------------------
    # Lines

    def line_through_two_points(self, line: Ident, p1: Ident, p2: Ident) -> None:
        self._create("line", [self._point(p1), self._point(p2)], line)

    def line_through_point(self, line: Ident, point: Ident) -> None:
        a, b, c = self._coefficients(line)
        p = self._point(point)

        def offset() -> float:
            return c - a * p.x() - b * p.y() - c * p.z()

        self._create("line", [offset, a, b], line, strokeColor="black")

    def line_parallel_to_line_through_point(self, line: Ident, other: Ident, point: Ident) -> None:
        self._create("parallel", [self._curve(other), self._point(point)], line)

    def line_perpendicular_to_line_through_point(self, line: Ident, other: Ident, point: Ident) -> None:
        self._claim(line)
        perp, foot = self.board.create(
            "perpendicular",
            [self._curve(other), self._point(point)],
            {"name": [line, line + "foot"], "id": [line], "withLabel": self.options.with_label},
        )
        perp.set_property({"straightFirst": True, "straightLast": True})
        foot.set_property({"visible": False})
        self.store.mark_realized(line, perp)

    def line_segment_by_points(self, segment: Ident, p1: Ident, p2: Ident) -> None:
        self._create(
            "line",
            [self._point(p1), self._point(p2)],
            segment,
            straightFirst=False,
            straightLast=False,
            strokeColor="black",
        )

    def endpoints_of_line_segment(self, p1: Ident, p2: Ident, segment: Ident) -> None:
        line = self._segment(segment)
        for ident, attr in ((p1, "point1"), (p2, "point2")):
            point = self._point(ident)
            point.add_constraint(
                [
                    lambda attr=attr: getattr(line, attr).z(),
                    lambda attr=attr: getattr(line, attr).x(),
                    lambda attr=attr: getattr(line, attr).y(),
                ]
            )
            self.realizer.apply_style(point)

    # ------------------------------------------------------------------
    # Points

    def point_on_curve(self, point: Ident, curve: Ident) -> None:
        entry = self.store.get(point)
        x0, y0 = 0.0, 0.0
        if isinstance(entry, RawRecord) and entry.kind is ElementKind.POINT:
            x0, y0 = to_euclidean(entry.coords)
        self._create("glider", [x0, y0, self._curve(curve)], point)

    def midpoint_of_two_points(self, midpoint: Ident, p1: Ident, p2: Ident) -> None:
        self._create("midpoint", [self._point(p1), self._point(p2)], midpoint, styled=True)

    def midpoint_of_line_segment(self, midpoint: Ident, segment: Ident) -> None:
        self._create("midpoint", [self._segment(segment)], midpoint, styled=True)

    def point_intersection_of_two_lines(self, point: Ident, l1: Ident, l2: Ident) -> None:
        self._create("intersection", [self._curve(l1), self._curve(l2), 0], point, styled=True)

    def intersection_points(self, first: Ident, second: Ident, c1: Ident, c2: Ident) -> None:
        curve1, curve2 = self._curve(c1), self._curve(c2)
        for index, ident in enumerate((first, second)):
            self._create("intersection", [curve1, curve2, index], ident, styled=True)

    def other_intersection_point(self, point: Ident, known: Ident, c1: Ident, c2: Ident) -> None:
        curve1, curve2 = self._curve(c1), self._curve(c2)
        self._create("otherintersection", [curve1, curve2, self._point(known)], point, styled=True)

    # ------------------------------------------------------------------
    # Circles

    def circle_by_three_points(self, circle: Ident, p1: Ident, p2: Ident, p3: Ident) -> None:
        self._claim(circle)
        points = [self._point(p1), self._point(p2), self._point(p3)]
        center, handle = self.board.create(
            "circumcircle",
            points,
            {"name": [circle + "c", circle], "id": [None, circle], "withLabel": self.options.with_label},
        )
        center.set_property({"visible": False})
        handle.set_property({"withLabel": self.options.with_label})
        self.store.mark_realized(circle, handle)

    def circle_by_center_and_point(self, circle: Ident, center: Ident, point: Ident) -> None:
        self._create("circle", [self._point(center), self._point(point)], circle)

    def center_of_circle(self, center: Ident, circle: Ident) -> None:
        handle = self._circle(circle)
        point = self._point(center)
        point.add_constraint([lambda: handle.midpoint.x(), lambda: handle.midpoint.y()])
        self.realizer.apply_style(point)

    def circle_tangent_lines_by_point(self, t1: Ident, t2: Ident, circle: Ident, point: Ident) -> None:
        self._claim(t1)
        self._claim(t2)
        c = self._circle(circle)
        p = self._point(point)

        def polar_term(i: int) -> Callable[[], float]:
            return lambda: float((c.quadratic_form() @ p.usr_coords)[i])

        polar = self.board.create("line", [polar_term(0), polar_term(1), polar_term(2)], {"visible": False})
        for index, ident in enumerate((t1, t2)):
            touch = self.board.create("intersection", [c, polar, index], {"visible": False})
            tangent = self.board.create("tangent", [touch, c], self._attrs(ident))
            self.store.mark_realized(ident, tangent)

    # ------------------------------------------------------------------
    # Bisectors

    def angular_bisector_of_three_points(self, ray: Ident, p1: Ident, vertex: Ident, p3: Ident) -> None:
        handle = self._create("bisector", [self._point(p1), self._point(vertex), self._point(p3)], ray)
        handle.set_property({"straightFirst": False, "straightLast": True, "strokeColor": "#000000"})

    def angular_bisectors_of_two_lines(self, b1: Ident, b2: Ident, l1: Ident, l2: Ident) -> None:
        self._claim(b1)
        self._claim(b2)
        lines = self.board.create(
            "bisectorlines",
            [self._curve(l1), self._curve(l2)],
            {
                "name": [b1, b2],
                "id": [b1, b2],
                "straightFirst": True,
                "straightLast": True,
                "strokeColor": "#ff0000",
                "withLabel": self.options.with_label,
            },
        )
        for ident, handle in zip((b1, b2), lines):
            self.store.mark_realized(ident, handle)

    # ------------------------------------------------------------------
    # Loci

    def trace_locus(self, locus: Ident, target: Ident) -> None:
        handle = self.realizer.realize(target)
        handle.set_property({"trace": True})
        self.realizer.apply_style(handle)


_K = ConstraintKind

# kind -> (number of parameters, handler method)
_HANDLERS: Dict[ConstraintKind, Tuple[int, str]] = {
    _K.FREE_POINT: (1, "free_point"),
    _K.FREE_LINE: (1, "free_line"),
    _K.LINE_THROUGH_TWO_POINTS: (3, "line_through_two_points"),
    _K.LINE_THROUGH_POINT: (2, "line_through_point"),
    _K.LINE_PARALLEL_TO_LINE_THROUGH_POINT: (3, "line_parallel_to_line_through_point"),
    _K.LINE_PERPENDICULAR_TO_LINE_THROUGH_POINT: (3, "line_perpendicular_to_line_through_point"),
    _K.LINE_SEGMENT_BY_POINTS: (3, "line_segment_by_points"),
    _K.ENDPOINTS_OF_LINE_SEGMENT: (3, "endpoints_of_line_segment"),
    _K.POINT_ON_LINE: (2, "point_on_curve"),
    _K.POINT_ON_LINE_SEGMENT: (2, "point_on_curve"),
    _K.POINT_ON_CIRCLE: (2, "point_on_curve"),
    _K.MIDPOINT: (3, "midpoint_of_two_points"),
    _K.MIDPOINT_OF_TWO_POINTS: (3, "midpoint_of_two_points"),
    _K.MIDPOINT_OF_LINE_SEGMENT: (2, "midpoint_of_line_segment"),
    _K.POINT_INTERSECTION_OF_TWO_LINES: (3, "point_intersection_of_two_lines"),
    _K.INTERSECTION_POINTS_OF_TWO_CIRCLES: (4, "intersection_points"),
    _K.INTERSECTION_POINTS_OF_CIRCLE_AND_LINE: (4, "intersection_points"),
    _K.OTHER_INTERSECTION_POINT_OF_TWO_CIRCLES: (4, "other_intersection_point"),
    _K.OTHER_INTERSECTION_POINT_OF_CIRCLE_AND_LINE: (4, "other_intersection_point"),
    _K.CIRCLE_BY_THREE_POINTS: (4, "circle_by_three_points"),
    _K.CIRCLE_BY_CENTER_AND_POINT: (3, "circle_by_center_and_point"),
    _K.CENTER_OF_CIRCLE: (2, "center_of_circle"),
    _K.ANGULAR_BISECTOR_OF_THREE_POINTS: (4, "angular_bisector_of_three_points"),
    _K.ANGULAR_BISECTORS_OF_TWO_LINES: (4, "angular_bisectors_of_two_lines"),
    _K.CIRCLE_TANGENT_LINES_BY_POINT: (4, "circle_tangent_lines_by_point"),
    _K.LOCUS_DEFINED_BY_POINT: (2, "trace_locus"),
    _K.LOCUS_DEFINED_BY_POINT_ON_LINE: (2, "trace_locus"),
    _K.LOCUS_DEFINED_BY_POINT_ON_LINE_SEGMENT: (2, "trace_locus"),
    _K.LOCUS_DEFINED_BY_POINT_ON_CIRCLE: (2, "trace_locus"),
    _K.LOCUS_DEFINED_BY_LINE_THROUGH_POINT: (2, "trace_locus"),
}

if set(_HANDLERS) != set(ConstraintKind):
    raise RuntimeError(f"constraint kinds without a handler: {sorted(set(ConstraintKind) - set(_HANDLERS))}")


class ConstraintDispatcher:
    """Applies constraint nodes one at a time, in document order."""

    def __init__(
        self,
        store: PrimitiveStore,
        board: HostBoard,
        options: ReaderOptions,
        diagnostics: List[Diagnostic],
    ) -> None:
        self.handlers = ConstraintHandlers(store, board, options)
        self.diagnostics = diagnostics

    def _report(self, kind: str, tag: str, ident: Optional[str], message: str) -> None:
        logger.warning("%s", message)
        self.diagnostics.append(Diagnostic(kind=kind, tag=tag, ident=ident, message=message))

    def dispatch(self, node: Element) -> bool:
        """Apply one constraint; return ``False`` when its kind is unsupported."""

        tag = local_name(node.tag)
        constraint = ConstraintNode(tag=tag, params=read_params(node, strict=False))
        kind = constraint.kind
        if kind is None:
            exc = UnsupportedConstraintKind(tag, first_or_none(constraint.params))
            self._report("unsupported_constraint", tag, exc.first_param, str(exc))
            return False

        try:
            params = read_params(node)
            arity, method = _HANDLERS[kind]
            if len(params) < arity:
                raise MalformedDocumentStructure(
                    f"<{tag}> needs {arity} parameters, got {len(params)}",
                    ident=first_or_none(params),
                )
            try:
                getattr(self.handlers, method)(*params[:arity])
            except BoardError as exc:
                raise ConstructionError(str(exc), ident=first_or_none(params)) from exc
        except ConstructionError as exc:
            if exc.kind is None:
                exc.kind = tag
            raise
        return True

    def dispatch_all(self, section: Element) -> int:
        applied = 0
        for node in child_elements(section):
            if self.dispatch(node):
                applied += 1
        return applied


apply_debug_logging(globals(), logger=logger, skip={"ConstraintDispatcher._report"})
