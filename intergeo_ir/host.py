"""Interface of the geometry engine the importer builds into."""

from __future__ import annotations

from typing import Any, Callable, Mapping, Optional, Protocol, Sequence

import numpy as np

CoordsFunc = Callable[[], np.ndarray]


class HostElement(Protocol):
    """Object returned by :meth:`HostBoard.create`.

    Points additionally expose ``x()``, ``y()``, ``z()``, ``usr_coords``,
    ``dist(other)`` and ``add_constraint(terms)``; lines expose ``point1``/``point2`` and
    ``stdform()``; circles expose ``midpoint``, ``radius()`` and
    ``quadratic_form()``.
    """

    id: str
    name: str

    def set_property(self, *configs: Mapping[str, Any], **kwargs: Any) -> "HostElement":
        """Forward attribute values to the element unchanged."""


class HostBoard(Protocol):
    """Protocol implemented by geometry engines the reader can populate."""

    def create(
        self,
        kind: str,
        parents: Sequence[Any],
        attributes: Optional[Mapping[str, Any]] = None,
    ) -> Any:
        """Create one element (or a list of elements for multi-output kinds)."""

    def intersection(self, el1: Any, el2: Any, index: int) -> CoordsFunc:
        """Return a function evaluating branch ``index`` of ``el1 ∩ el2``."""

    def other_intersection(self, el1: Any, el2: Any, known: Any) -> CoordsFunc:
        """Return a function evaluating the intersection that is not ``known``."""

    def full_update(self) -> None:
        """Recompute every element."""
