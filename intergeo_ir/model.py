"""Core data structures for the Intergeo import pipeline."""

from __future__ import annotations

import copy
from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING, Any, Dict, List, Optional, Sequence, Tuple, Union

if TYPE_CHECKING:  # pragma: no cover - imported for type checking only
    from .store import PrimitiveStore

Ident = str


class ElementKind(str, Enum):
    POINT = "point"
    LINE = "line"
    LINE_SEGMENT = "line_segment"
    CIRCLE = "circle"


class ConstraintKind(str, Enum):
    FREE_POINT = "free_point"
    FREE_LINE = "free_line"
    LINE_THROUGH_TWO_POINTS = "line_through_two_points"
    LINE_THROUGH_POINT = "line_through_point"
    LINE_PARALLEL_TO_LINE_THROUGH_POINT = "line_parallel_to_line_through_point"
    LINE_PERPENDICULAR_TO_LINE_THROUGH_POINT = "line_perpendicular_to_line_through_point"
    LINE_SEGMENT_BY_POINTS = "line_segment_by_points"
    ENDPOINTS_OF_LINE_SEGMENT = "endpoints_of_line_segment"
    POINT_ON_LINE = "point_on_line"
    POINT_ON_LINE_SEGMENT = "point_on_line_segment"
    POINT_ON_CIRCLE = "point_on_circle"
    MIDPOINT = "midpoint"
    MIDPOINT_OF_TWO_POINTS = "midpoint_of_two_points"
    MIDPOINT_OF_LINE_SEGMENT = "midpoint_of_line_segment"
    POINT_INTERSECTION_OF_TWO_LINES = "point_intersection_of_two_lines"
    INTERSECTION_POINTS_OF_TWO_CIRCLES = "intersection_points_of_two_circles"
    INTERSECTION_POINTS_OF_CIRCLE_AND_LINE = "intersection_points_of_circle_and_line"
    OTHER_INTERSECTION_POINT_OF_TWO_CIRCLES = "other_intersection_point_of_two_circles"
    OTHER_INTERSECTION_POINT_OF_CIRCLE_AND_LINE = "other_intersection_point_of_circle_and_line"
    CIRCLE_BY_THREE_POINTS = "circle_by_three_points"
    CIRCLE_BY_CENTER_AND_POINT = "circle_by_center_and_point"
    CENTER_OF_CIRCLE = "center_of_circle"
    ANGULAR_BISECTOR_OF_THREE_POINTS = "angular_bisector_of_three_points"
    ANGULAR_BISECTORS_OF_TWO_LINES = "angular_bisectors_of_two_lines"
    CIRCLE_TANGENT_LINES_BY_POINT = "circle_tangent_lines_by_point"
    LOCUS_DEFINED_BY_POINT = "locus_defined_by_point"
    LOCUS_DEFINED_BY_POINT_ON_LINE = "locus_defined_by_point_on_line"
    LOCUS_DEFINED_BY_POINT_ON_LINE_SEGMENT = "locus_defined_by_point_on_line_segment"
    LOCUS_DEFINED_BY_POINT_ON_CIRCLE = "locus_defined_by_point_on_circle"
    LOCUS_DEFINED_BY_LINE_THROUGH_POINT = "locus_defined_by_line_through_point"


# ---------------------------------------------------------------------------
# Errors


class IntergeoError(Exception):
    """Base class for every error raised while importing a document."""


class UnsupportedElementKind(IntergeoError):
    def __init__(self, tag: str, ident: Optional[Ident] = None):
        super().__init__(f"Not implemented: {tag} {ident or ''}".rstrip())
        self.tag = tag
        self.ident = ident


class UnsupportedCoordinateForm(IntergeoError):
    def __init__(self, form: str, message: Optional[str] = None):
        super().__init__(message or f"This coordinate type is not yet implemented: {form}")
        self.form = form


class UnsupportedConstraintKind(IntergeoError):
    def __init__(self, tag: str, first_param: Optional[str] = None):
        super().__init__(f"readConstraints: not implemented: {tag}: {first_param}")
        self.tag = tag
        self.first_param = first_param


class ConstructionError(IntergeoError):
    """Fatal import error: the document cannot be constructed as written."""

    def __init__(self, message: str, *, ident: Optional[Ident] = None, kind: Optional[str] = None):
        super().__init__(message)
        self.ident = ident
        self.kind = kind


class UnresolvedReference(ConstructionError):
    """A constraint names an identifier that is absent or in the wrong state."""


class MalformedDocumentStructure(ConstructionError):
    """A recognized element or constraint lacks required nodes or attributes."""


# ---------------------------------------------------------------------------
# Primitive store entries


@dataclass
class RawRecord:
    """Parsed primitive that has not been created in the host engine yet."""

    id: Ident
    kind: ElementKind
    coords: Tuple[float, ...]

    @property
    def exists(self) -> bool:
        return False


@dataclass
class RealizedHandle:
    """Host object registered under a document identifier."""

    id: Ident
    handle: Any

    @property
    def exists(self) -> bool:
        return True


StoreEntry = Union[RawRecord, RealizedHandle]


@dataclass
class ConstraintNode:
    tag: str
    params: List[str]

    @property
    def kind(self) -> Optional[ConstraintKind]:
        try:
            return ConstraintKind(self.tag)
        except ValueError:
            return None


# ---------------------------------------------------------------------------
# Configuration


@dataclass
class Style:
    """Stroke/fill colors given to elements created by constraints."""

    stroke_color: str = "blue"
    fill_color: str = "blue"

    def attributes(self) -> Dict[str, Any]:
        return {"strokeColor": self.stroke_color, "fillColor": self.fill_color}


@dataclass
class BoardSetup:
    origin: Tuple[float, float] = (400.0, 300.0)
    unit_x: float = 30.0
    unit_y: float = 30.0


@dataclass
class ReaderOptions:
    dependent_style: Style = field(default_factory=Style)
    with_label: bool = True
    board_setup: Optional[BoardSetup] = field(default_factory=BoardSetup)


_DEFAULT_OPTIONS = ReaderOptions()


def get_default_options() -> ReaderOptions:
    return copy.deepcopy(_DEFAULT_OPTIONS)


def set_default_options(options: ReaderOptions) -> None:
    global _DEFAULT_OPTIONS
    _DEFAULT_OPTIONS = copy.deepcopy(options)


# ---------------------------------------------------------------------------
# Results


@dataclass
class Diagnostic:
    kind: str  # unsupported_element | unsupported_coordinates | unsupported_constraint | duplicate_element | construction_error
    tag: str
    ident: Optional[Ident]
    message: str

    def __str__(self) -> str:  # pragma: no cover - trivial string formatting
        return self.message


@dataclass
class ImportResult:
    store: "PrimitiveStore"
    diagnostics: List[Diagnostic] = field(default_factory=list)

    @property
    def objects(self) -> Dict[Ident, Any]:
        """Realized host objects keyed by document identifier."""

        return {
            ident: entry.handle
            for ident, entry in self.store.items()
            if isinstance(entry, RealizedHandle)
        }

    def diagnostics_of(self, kind: str) -> List[Diagnostic]:
        return [diag for diag in self.diagnostics if diag.kind == kind]


def first_or_none(values: Sequence[str]) -> Optional[str]:
    return values[0] if values else None


__all__ = [
    "Ident",
    "ElementKind",
    "ConstraintKind",
    "IntergeoError",
    "UnsupportedElementKind",
    "UnsupportedCoordinateForm",
    "UnsupportedConstraintKind",
    "ConstructionError",
    "UnresolvedReference",
    "MalformedDocumentStructure",
    "RawRecord",
    "RealizedHandle",
    "StoreEntry",
    "ConstraintNode",
    "Style",
    "BoardSetup",
    "ReaderOptions",
    "get_default_options",
    "set_default_options",
    "Diagnostic",
    "ImportResult",
    "first_or_none",
]
