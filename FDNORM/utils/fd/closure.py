"""Attribute closure under a set of functional dependencies."""

from __future__ import annotations

from typing import Iterable

from FDNORM.ir.models.functional_dependency import AttributeSet, FunctionalDependency, as_attribute_set


def find_closure(attributes: Iterable[str], fds: Iterable[FunctionalDependency]) -> AttributeSet:
    """
    Compute X+ with respect to `fds`.

    Every FD whose determinant is already inside the closure contributes its
    dependent; passes repeat until one adds nothing. The closure only grows and is
    bounded by the attributes mentioned, so the loop terminates.

    Args:
        attributes: The attribute set X
        fds: Functional dependencies

    Returns:
        The closure of X (always a superset of X)
    """
    fds = tuple(fds)
    closure = set(as_attribute_set(attributes))
    changed = True
    while changed:
        changed = False
        for fd in fds:
            if fd.lhs <= closure and not fd.rhs <= closure:
                closure |= fd.rhs
                changed = True
    return frozenset(closure)


def is_superkey(
    attributes: Iterable[str],
    fds: Iterable[FunctionalDependency],
    universe: Iterable[str],
) -> bool:
    """True iff the closure of `attributes` covers `universe`."""
    return find_closure(attributes, fds) >= frozenset(universe)
