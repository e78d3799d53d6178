"""Attribute-universe helpers shared by the FD engine."""

from __future__ import annotations

from typing import Iterable

from FDNORM.ir.models.functional_dependency import (
    AttributeSet,
    FunctionalDependency,
    as_attribute_set,
)
from FDNORM.utils.error_handling.errors import DomainRangeViolation


def attributes_of(fds: Iterable[FunctionalDependency]) -> AttributeSet:
    """All attributes mentioned on either side of any FD."""
    out = set()
    for fd in fds:
        out |= fd.lhs
        out |= fd.rhs
    return frozenset(out)


def ensure_within_universe(
    attributes: Iterable[str],
    universe: Iterable[str],
    what: str = "attributes",
) -> AttributeSet:
    """
    Return `attributes` as an AttributeSet after checking it is a subset of `universe`.

    Raises:
        ShapeViolation: If `attributes` is not a collection of attribute names
        DomainRangeViolation: If any attribute is outside `universe`
    """
    attrs = as_attribute_set(attributes, what=what)
    universe_set = frozenset(universe)
    missing = attrs - universe_set
    if missing:
        raise DomainRangeViolation(missing, universe_set, what=what)
    return attrs


def ensure_fds_within(fds: Iterable[FunctionalDependency], universe: Iterable[str]) -> None:
    """Raise DomainRangeViolation if any FD mentions an attribute outside `universe`."""
    universe_set = frozenset(universe)
    missing = attributes_of(fds) - universe_set
    if missing:
        raise DomainRangeViolation(missing, universe_set, what="FD attributes")
