"""Ingestion of the ``elements`` section into raw store records."""

from __future__ import annotations

import logging
from typing import Callable, Dict, List, Optional
from xml.etree.ElementTree import Element

from .coords import (
    CoordinateForm,
    child_elements,
    local_name,
    normalize_point_coords,
    read_coordinate_block,
    read_doubles,
)
from .model import (
    Diagnostic,
    ElementKind,
    MalformedDocumentStructure,
    RawRecord,
    UnsupportedCoordinateForm,
    UnsupportedElementKind,
)
from .store import PrimitiveStore

logger = logging.getLogger(__name__)

_LINE_SIZE = 3
_MATRIX_SIZE = 9


def _first_block(node: Element) -> Optional[Element]:
    children = child_elements(node)
    return children[0] if children else None


def _point_record(ident: str, node: Element) -> RawRecord:
    block = _first_block(node)
    if block is None:
        raise UnsupportedCoordinateForm("<missing>", f"point {ident} has no coordinates")
    form, values = read_coordinate_block(block)
    return RawRecord(id=ident, kind=ElementKind.POINT, coords=normalize_point_coords(form, values))


def _coefficient_record(
    ident: str, node: Element, kind: ElementKind, block_tag: str, size: int
) -> RawRecord:
    block = _first_block(node)
    if block is None or local_name(block.tag) != block_tag:
        found = local_name(block.tag) if block is not None else "<missing>"
        raise UnsupportedCoordinateForm(found, f"{kind.value} {ident}: expected <{block_tag}>, got <{found}>")
    values = read_doubles(block)
    if len(values) != size:
        raise UnsupportedCoordinateForm(
            block_tag, f"{kind.value} {ident}: expected {size} numbers, got {len(values)}"
        )
    return RawRecord(id=ident, kind=kind, coords=tuple(values))


def _line_record(ident: str, node: Element, kind: ElementKind) -> RawRecord:
    return _coefficient_record(ident, node, kind, CoordinateForm.HOMOGENEOUS.value, _LINE_SIZE)


def _circle_record(ident: str, node: Element, kind: ElementKind) -> RawRecord:
    return _coefficient_record(ident, node, kind, "matrix", _MATRIX_SIZE)


_READERS: Dict[ElementKind, Callable[[str, Element, ElementKind], RawRecord]] = {
    ElementKind.POINT: lambda ident, node, kind: _point_record(ident, node),
    ElementKind.LINE: _line_record,
    ElementKind.LINE_SEGMENT: _line_record,
    ElementKind.CIRCLE: _circle_record,
}

if set(_READERS) != set(ElementKind):
    raise RuntimeError(f"element kinds without a reader: {sorted(set(ElementKind) - set(_READERS))}")


def _report(diagnostics: List[Diagnostic], kind: str, tag: str, ident: Optional[str], message: str) -> None:
    logger.warning("%s", message)
    diagnostics.append(Diagnostic(kind=kind, tag=tag, ident=ident, message=message))


def ingest_elements(section: Element, store: PrimitiveStore, diagnostics: List[Diagnostic]) -> int:
    """Store a raw record for every supported child of ``section``.

    Returns the number of records stored.  Unsupported element kinds and
    coordinate blocks are reported to ``diagnostics`` and skipped.
    """

    stored = 0
    for node in child_elements(section):
        tag = local_name(node.tag)
        ident = node.get("id")
        try:
            try:
                kind = ElementKind(tag)
            except ValueError as exc:
                raise UnsupportedElementKind(tag, ident) from exc
            if not ident:
                raise MalformedDocumentStructure(f"<{tag}> element without id", kind=tag)
            if ident in store:
                _report(diagnostics, "duplicate_element", tag, ident, f"Duplicate element id: {tag} {ident}")
                continue
            record = _READERS[kind](ident, node, kind)
        except UnsupportedElementKind as exc:
            _report(diagnostics, "unsupported_element", tag, ident, str(exc))
            continue
        except UnsupportedCoordinateForm as exc:
            _report(diagnostics, "unsupported_coordinates", tag, ident, f"{tag} {ident}: {exc}")
            continue
        store.put(ident, record)
        stored += 1
        logger.debug("Stored %s %s: %s", kind.value, ident, record.coords)
    return stored
