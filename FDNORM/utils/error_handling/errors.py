"""Error taxonomy for functional-dependency reasoning.

Two kinds of failure exist:
- ShapeViolation: a literal or collection is not one of the accepted representations.
- DomainRangeViolation: an attribute is referenced that the universe does not declare.
"""

from __future__ import annotations

from typing import FrozenSet, Iterable, Optional


class FDError(Exception):
    """Base class for all errors raised by FDNORM."""


class ShapeViolation(FDError, TypeError):
    """An FD literal, attribute collection or FD collection has the wrong shape."""

    def __init__(self, message: str, line: Optional[int] = None, column: Optional[int] = None):
        self.message = message
        self.line = line
        self.column = column
        super().__init__(self._format())

    def _format(self) -> str:
        if self.line is not None and self.column is not None:
            return f"{self.message} (line {self.line}, column {self.column})"
        return self.message


class DomainRangeViolation(FDError, LookupError):
    """One or more attributes are not members of the declared universe."""

    def __init__(self, missing: Iterable[str], universe: Iterable[str], what: str = "attributes"):
        self.missing: FrozenSet[str] = frozenset(missing)
        self.universe: FrozenSet[str] = frozenset(universe)
        self.what = what
        super().__init__(
            f"{what} {sorted(self.missing)} not in universe {sorted(self.universe)}"
        )
