"""Import of Intergeo constructions into a geometry board."""

from __future__ import annotations

import logging
from typing import List, Optional, Union
from xml.etree.ElementTree import Element, ElementTree

from .constraints import ConstraintDispatcher
from .coords import local_name
from .elements import ingest_elements
from .host import HostBoard
from .model import (
    ConstructionError,
    Diagnostic,
    ImportResult,
    MalformedDocumentStructure,
    ReaderOptions,
    get_default_options,
)
from .store import PrimitiveStore

logger = logging.getLogger(__name__)

Document = Union[Element, ElementTree]


def _root(tree: Document) -> Element:
    if isinstance(tree, ElementTree):
        root = tree.getroot()
        if root is None:
            raise MalformedDocumentStructure("empty document")
        return root
    return tree


def find_section(root: Element, name: str) -> Element:
    """Return the first element named ``name`` (namespace-insensitive)."""

    for node in root.iter():
        if isinstance(node.tag, str) and local_name(node.tag) == name:
            return node
    raise MalformedDocumentStructure(f"document has no <{name}> section", kind=name)


class IntergeoReader:
    """Reads one Intergeo document into ``board``.

    The reader walks the ``elements`` section first, storing raw records, and
    then applies the ``constraints`` section in document order.  Every call to
    :meth:`read` starts from an empty store.  After a failed :meth:`read` the
    partially built store and the diagnostics stay available on the reader.
    """

    def __init__(self, board: HostBoard, options: Optional[ReaderOptions] = None) -> None:
        self.board = board
        self.options = options or get_default_options()
        self.store = PrimitiveStore()
        self.diagnostics: List[Diagnostic] = []

    def _setup_board(self) -> None:
        setup = self.options.board_setup
        set_view = getattr(self.board, "set_view", None)
        if setup is not None and set_view is not None:
            set_view(setup.origin, setup.unit_x, setup.unit_y)

    def _report_failure(self, exc: ConstructionError) -> None:
        tag = exc.kind or "construction"
        message = f"{tag}: {exc}"
        logger.error("%s", message)
        self.diagnostics.append(
            Diagnostic(kind="construction_error", tag=tag, ident=exc.ident, message=message)
        )

    def read(self, tree: Document) -> ImportResult:
        self.store = PrimitiveStore()
        self.diagnostics = []
        try:
            self._read(tree)
        except ConstructionError as exc:
            self._report_failure(exc)
            raise

        return ImportResult(store=self.store, diagnostics=list(self.diagnostics))

    def _read(self, tree: Document) -> None:
        root = _root(tree)
        elements = find_section(root, "elements")
        constraints = find_section(root, "constraints")
        self._setup_board()

        stored = ingest_elements(elements, self.store, self.diagnostics)
        logger.info("Stored %d element(s)", stored)
        self.board.full_update()

        logger.info("Start reading constraints")
        dispatcher = ConstraintDispatcher(self.store, self.board, self.options, self.diagnostics)
        applied = dispatcher.dispatch_all(constraints)
        logger.info("Applied %d constraint(s), %d diagnostic(s)", applied, len(self.diagnostics))
        self.board.full_update()


def read_intergeo(
    tree: Document,
    board: HostBoard,
    options: Optional[ReaderOptions] = None,
) -> ImportResult:
    return IntergeoReader(board, options).read(tree)
