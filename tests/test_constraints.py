import math
import xml.etree.ElementTree as ET

import pytest

from intergeo_ir import Board, IntergeoReader, read_intergeo
from intergeo_ir.constraints import ConstraintDispatcher, read_params
from intergeo_ir.model import MalformedDocumentStructure, get_default_options
from intergeo_ir.store import PrimitiveStore


def _point(ident: str, x: float, y: float) -> str:
    return (
        f'<point id="{ident}"><euclidean_coordinates>'
        f"<double>{x}</double><double>{y}</double>"
        "</euclidean_coordinates></point>"
    )


def _line(ident: str, a: float, b: float, c: float, tag: str = "line") -> str:
    return (
        f'<{tag} id="{ident}"><homogeneous_coordinates>'
        f"<double>{a}</double><double>{b}</double><double>{c}</double>"
        f"</homogeneous_coordinates></{tag}>"
    )


def _constraint(tag: str, *params: str) -> str:
    body = "".join(f"<param>{p}</param>" for p in params)
    return f"<{tag}>{body}</{tag}>"


def _read(elements: str, *constraints: str):
    root = ET.fromstring(
        f"<construction><elements>{elements}</elements>"
        f"<constraints>{''.join(constraints)}</constraints></construction>"
    )
    board = Board()
    return read_intergeo(root, board), board


def _passes_through(line, x: float, y: float) -> bool:
    c, a, b = line.stdform()
    return abs(c + a * x + b * y) < 1e-9 * max(1.0, math.hypot(a, b))


def test_read_params_keeps_document_order():
    node = ET.fromstring("<midpoint><point out='true'>M</point><point>A</point><point>B</point></midpoint>")
    assert read_params(node) == ["M", "A", "B"]


def test_read_params_rejects_empty_parameter():
    node = ET.fromstring("<midpoint><point>M</point><point> </point></midpoint>")
    with pytest.raises(MalformedDocumentStructure):
        read_params(node)
    assert read_params(node, strict=False) == ["M", ""]


def test_free_line_uses_document_coefficients():
    result, _ = _read(_line("l", 0, 1, -2), _constraint("free_line", "l"))
    line = result.objects["l"]
    assert _passes_through(line, 5.0, 2.0)
    assert not _passes_through(line, 5.0, 3.0)


def test_line_through_point_follows_moved_point():
    result, _ = _read(
        _line("l", 0, 1, -2) + _point("P", 0, 5),
        _constraint("line_through_point", "l", "P"),
    )
    line = result.objects["l"]
    point = result.objects["P"]
    assert line.attributes["strokeColor"] == "black"
    assert _passes_through(line, 3.0, 5.0)

    point.move_to(0.0, 7.0)
    assert _passes_through(line, -1.0, 7.0)


def test_parallel_and_perpendicular_lines():
    result, board = _read(
        _point("A", 0, 0) + _point("B", 1, 0) + _point("C", 0.5, 2),
        _constraint("line_through_two_points", "L", "A", "B"),
        _constraint("line_parallel_to_line_through_point", "N", "L", "C"),
        _constraint("line_perpendicular_to_line_through_point", "M", "L", "C"),
    )
    parallel = result.objects["N"]
    perpendicular = result.objects["M"]

    assert _passes_through(parallel, 10.0, 2.0)
    assert _passes_through(perpendicular, 0.5, -3.0)
    assert perpendicular.straight_first and perpendicular.straight_last

    foot = perpendicular.point2
    assert not foot.visible
    assert foot.name == "Mfoot"
    assert foot.id != "M"
    assert (foot.x(), foot.y()) == pytest.approx((0.5, 0.0))
    assert board.select("M") is perpendicular


def test_segment_midpoint_and_endpoints():
    result, _ = _read(
        _point("A", 0, 0) + _point("B", 4, 2) + _point("P", 9, 9) + _point("Q", 9, 9),
        _constraint("line_segment_by_points", "S", "A", "B"),
        _constraint("midpoint_of_line_segment", "M", "S"),
        _constraint("endpoints_of_line_segment", "P", "Q", "S"),
    )
    segment = result.objects["S"]
    assert not segment.straight_first
    assert not segment.straight_last
    assert result.objects["M"].snapshot() == pytest.approx((2.0, 1.0))
    assert result.objects["P"].snapshot() == pytest.approx((0.0, 0.0))
    assert result.objects["Q"].snapshot() == pytest.approx((4.0, 2.0))

    result.objects["A"].move_to(2.0, 2.0)
    assert result.objects["P"].snapshot() == pytest.approx((2.0, 2.0))
    assert result.objects["M"].snapshot() == pytest.approx((3.0, 2.0))


def test_endpoints_require_segment_with_endpoints():
    with pytest.raises(MalformedDocumentStructure):
        _read(
            _line("l", 0, 1, 0) + _point("P", 0, 0) + _point("Q", 1, 0),
            _constraint("free_line", "l"),
            _constraint("endpoints_of_line_segment", "P", "Q", "l"),
        )


def test_gliders_start_at_document_position():
    result, _ = _read(
        _point("A", 0, 0) + _point("B", 1, 0) + _point("P", 3, 4) + _point("G", 0.5, 2),
        _constraint("circle_by_center_and_point", "c", "A", "B"),
        _constraint("line_through_two_points", "L", "A", "B"),
        _constraint("point_on_circle", "P", "c"),
        _constraint("point_on_line", "G", "L"),
    )
    assert result.objects["P"].snapshot() == pytest.approx((0.6, 0.8))
    assert result.objects["G"].snapshot() == pytest.approx((0.5, 0.0))


def test_two_circle_intersections_follow_output_order():
    for order in (("c1", "c2"), ("c2", "c1")):
        result, _ = _read(
            _point("A", 0, 0) + _point("B", 2, 0),
            _constraint("circle_by_center_and_point", "c1", "A", "B"),
            _constraint("circle_by_center_and_point", "c2", "B", "A"),
            _constraint("intersection_points_of_two_circles", "P", "Q", *order),
        )
        first = result.objects["P"]
        second = result.objects["Q"]
        assert first.parents[2] == 0
        assert second.parents[2] == 1
        assert first.x() == pytest.approx(1.0)
        assert second.x() == pytest.approx(1.0)
        assert sorted([first.y(), second.y()]) == pytest.approx([-math.sqrt(3), math.sqrt(3)])


def test_other_intersection_point_of_two_circles():
    result, _ = _read(
        _point("A", 0, 0) + _point("B", 2, 0) + _point("R", 0, 0),
        _constraint("circle_by_center_and_point", "c1", "A", "B"),
        _constraint("circle_by_center_and_point", "c2", "B", "A"),
        _constraint("intersection_points_of_two_circles", "P", "Q", "c1", "c2"),
        _constraint("other_intersection_point_of_two_circles", "R", "P", "c1", "c2"),
    )
    assert result.objects["R"].snapshot() == pytest.approx(result.objects["Q"].snapshot())


def test_circle_and_line_intersections():
    result, _ = _read(
        _point("A", 0, 0) + _point("B", 2, 0) + _line("v", 1, 0, -1),
        _constraint("circle_by_center_and_point", "c", "A", "B"),
        _constraint("line_through_two_points", "L", "A", "B"),
        _constraint("free_line", "v"),
        _constraint("intersection_points_of_circle_and_line", "P", "Q", "c", "L"),
        _constraint("point_intersection_of_two_lines", "X", "L", "v"),
    )
    xs = sorted([result.objects["P"].x(), result.objects["Q"].x()])
    assert xs == pytest.approx([-2.0, 2.0])
    assert result.objects["P"].y() == pytest.approx(0.0, abs=1e-12)
    assert result.objects["X"].parents[2] == 0
    assert result.objects["X"].snapshot() == pytest.approx((1.0, 0.0))


def test_circle_by_three_points_and_its_center():
    result, board = _read(
        _point("A", 1, 0) + _point("B", -1, 0) + _point("D", 0, 1) + _point("O", 5, 5),
        _constraint("circle_by_three_points", "c", "A", "B", "D"),
        _constraint("center_of_circle", "O", "c"),
    )
    circle = result.objects["c"]
    assert circle.radius() == pytest.approx(1.0)
    assert not circle.midpoint.visible
    assert circle.midpoint.id != "c"
    assert result.objects["O"].snapshot() == pytest.approx((0.0, 0.0))

    result.objects["D"].move_to(0.0, -1.0)
    assert result.objects["O"].snapshot() == pytest.approx((0.0, 0.0))
    assert board.select("c") is circle


def test_tangent_lines_touch_circle_and_pass_through_point():
    result, _ = _read(
        _point("O", 0, 0) + _point("R", 1, 0) + _point("P", 2, 0),
        _constraint("circle_by_center_and_point", "c", "O", "R"),
        _constraint("circle_tangent_lines_by_point", "t1", "t2", "c", "P"),
    )
    for ident in ("t1", "t2"):
        tangent = result.objects[ident]
        c, a, b = tangent.stdform()
        assert _passes_through(tangent, 2.0, 0.0)
        assert abs(c) / math.hypot(a, b) == pytest.approx(1.0)
    assert result.objects["t1"].point1.y() == pytest.approx(-result.objects["t2"].point1.y())


def test_angular_bisector_of_three_points_is_a_ray():
    result, _ = _read(
        _point("A", 1, 0) + _point("V", 0, 0) + _point("B", 0, 1),
        _constraint("angular_bisector_of_three_points", "r", "A", "V", "B"),
    )
    ray = result.objects["r"]
    assert _passes_through(ray, 3.0, 3.0)
    assert not ray.straight_first
    assert ray.straight_last
    assert ray.point1 is result.objects["V"]


def test_angular_bisectors_of_two_lines_are_full_lines():
    result, _ = _read(
        _line("l1", 0, 1, 0) + _line("l2", 1, 0, 0),
        _constraint("free_line", "l1"),
        _constraint("free_line", "l2"),
        _constraint("angular_bisectors_of_two_lines", "b1", "b2", "l1", "l2"),
    )
    first, second = result.objects["b1"], result.objects["b2"]
    assert _passes_through(first, 1.0, -1.0)
    assert _passes_through(second, 1.0, 1.0)
    for line in (first, second):
        assert line.straight_first and line.straight_last
        assert line.attributes["strokeColor"] == "#ff0000"


def test_locus_marks_target_for_tracing():
    result, board = _read(
        _point("A", 0, 0) + _point("B", 1, 0) + _point("P", 0, 2),
        _constraint("circle_by_center_and_point", "c", "A", "B"),
        _constraint("point_on_circle", "P", "c"),
        _constraint("locus_defined_by_point_on_circle", "loc", "P"),
    )
    point = result.objects["P"]
    assert point.trace
    assert "loc" not in result.objects
    assert point.trace_history == [pytest.approx((0.0, 1.0))]

    board.full_update()
    assert len(point.trace_history) == 2


def test_dispatcher_reports_unsupported_constraint_without_raising():
    diagnostics = []
    dispatcher = ConstraintDispatcher(PrimitiveStore(), Board(), get_default_options(), diagnostics)

    applied = dispatcher.dispatch_all(ET.fromstring("<constraints><polygon_by_vertices><p>X</p></polygon_by_vertices></constraints>"))

    assert applied == 0
    assert [d.kind for d in diagnostics] == ["unsupported_constraint"]
    assert diagnostics[0].tag == "polygon_by_vertices"


def test_center_of_circle_rejects_a_line():
    root = ET.fromstring(
        "<construction><elements>"
        + _point("A", 0, 0) + _point("B", 1, 0) + _point("O", 5, 5)
        + "</elements><constraints>"
        + _constraint("line_through_two_points", "L", "A", "B")
        + _constraint("center_of_circle", "O", "L")
        + "</constraints></construction>"
    )
    reader = IntergeoReader(Board())

    with pytest.raises(MalformedDocumentStructure) as excinfo:
        reader.read(root)

    assert excinfo.value.ident == "L"
    assert [(d.kind, d.tag) for d in reader.diagnostics] == [("construction_error", "center_of_circle")]


def test_auxiliary_objects_avoid_document_ids():
    result, board = _read(
        _point("boardpoint0", 1, 0) + _point("B", -1, 0) + _point("D", 0, 1),
        _constraint("circle_by_three_points", "c", "boardpoint0", "B", "D"),
    )
    circle = result.objects["c"]
    assert board.select("boardpoint0") is result.objects["boardpoint0"]
    assert circle.midpoint.id not in ("boardpoint0", "B", "D", "c")
    assert circle.radius() == pytest.approx(1.0)
