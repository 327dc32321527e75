"""Symbol table of document identifiers and the lazy realization step."""

from __future__ import annotations

import logging
from typing import Any, Dict, Iterator, Optional, Tuple

from .host import HostBoard
from .model import (
    ConstructionError,
    ElementKind,
    Ident,
    RawRecord,
    RealizedHandle,
    StoreEntry,
    Style,
    UnresolvedReference,
)

logger = logging.getLogger(__name__)


class PrimitiveStore:
    """Mapping from document identifier to a raw record or a realized handle.

    Entries are never deleted; the only mutation after :meth:`put` is the
    one-way transition of a slot from :class:`RawRecord` to
    :class:`RealizedHandle`.
    """

    def __init__(self) -> None:
        self._entries: Dict[Ident, StoreEntry] = {}

    def put(self, ident: Ident, record: RawRecord) -> None:
        existing = self._entries.get(ident)
        if isinstance(existing, RealizedHandle):
            raise ConstructionError(f"object {ident} has already been constructed", ident=ident)
        self._entries[ident] = record

    def get(self, ident: Ident) -> Optional[StoreEntry]:
        return self._entries.get(ident)

    def mark_realized(self, ident: Ident, handle: Any) -> RealizedHandle:
        existing = self._entries.get(ident)
        if isinstance(existing, RealizedHandle):
            raise ConstructionError(
                f"object {ident} has already been constructed and cannot be created again",
                ident=ident,
            )
        entry = RealizedHandle(id=ident, handle=handle)
        self._entries[ident] = entry
        return entry

    # ------------------------------------------------------------------
    # Checked lookups

    def require(self, ident: Ident) -> StoreEntry:
        entry = self._entries.get(ident)
        if entry is None:
            raise UnresolvedReference(f"unknown object {ident}", ident=ident)
        return entry

    def require_raw(self, ident: Ident, *kinds: ElementKind) -> RawRecord:
        entry = self.require(ident)
        if not isinstance(entry, RawRecord):
            raise UnresolvedReference(f"object {ident} has already been constructed", ident=ident)
        if kinds and entry.kind not in kinds:
            expected = "/".join(kind.value for kind in kinds)
            raise UnresolvedReference(
                f"object {ident} is a {entry.kind.value}, expected {expected}", ident=ident
            )
        return entry

    def require_realized(self, ident: Ident) -> Any:
        entry = self.require(ident)
        if not isinstance(entry, RealizedHandle):
            raise UnresolvedReference(
                f"{entry.kind.value} {ident} is referenced before it has been constructed",
                ident=ident,
            )
        return entry.handle

    # ------------------------------------------------------------------
    # Mapping helpers

    def __contains__(self, ident: object) -> bool:
        return ident in self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[Ident]:
        return iter(self._entries)

    def items(self) -> Iterator[Tuple[Ident, StoreEntry]]:
        return iter(list(self._entries.items()))


class Realizer:
    """Creates host points for raw records on first use."""

    def __init__(
        self, store: PrimitiveStore, board: HostBoard, style: Style, *, with_label: bool = True
    ) -> None:
        self.store = store
        self.board = board
        self.style = style
        self.with_label = with_label

    def apply_style(self, handle: Any) -> Any:
        handle.set_property(self.style.attributes())
        return handle

    def realize(self, ident: Ident) -> Any:
        """Return the host object for ``ident``, creating a raw point once."""

        entry = self.store.require(ident)
        if isinstance(entry, RealizedHandle):
            return entry.handle
        if entry.kind is not ElementKind.POINT:
            raise UnresolvedReference(
                f"{entry.kind.value} {ident} is referenced before it has been constructed",
                ident=ident,
            )
        handle = self.board.create(
            "point", list(entry.coords), {"name": ident, "id": ident, "withLabel": self.with_label}
        )
        self.apply_style(handle)
        self.store.mark_realized(ident, handle)
        logger.debug("Realized point %s at %s", ident, entry.coords)
        return handle
