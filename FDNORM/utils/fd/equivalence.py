"""Logical equivalence of FD sets via mutual closure."""

from __future__ import annotations

from typing import Iterable, Optional

from FDNORM.ir.models.functional_dependency import FunctionalDependency

from .closure import find_closure
from .domain import ensure_fds_within


def implies(fds: Iterable[FunctionalDependency], fd: FunctionalDependency) -> bool:
    """True iff `fd` follows from `fds` (its dependent is inside the closure of its determinant)."""
    return find_closure(fd.lhs, fds) >= fd.rhs


def covers(fds: Iterable[FunctionalDependency], other_fds: Iterable[FunctionalDependency]) -> bool:
    """True iff every FD of `other_fds` follows from `fds`."""
    fds = tuple(fds)
    return all(implies(fds, fd) for fd in other_fds)


def are_equivalent(
    fds: Iterable[FunctionalDependency],
    other_fds: Iterable[FunctionalDependency],
    universe: Optional[Iterable[str]] = None,
) -> bool:
    """
    Check whether two FD sets have the same closure.

    Args:
        fds: First FD set
        other_fds: Second FD set
        universe: If given, every attribute of both sets must belong to it

    Raises:
        DomainRangeViolation: If universe is given and an FD leaves it
    """
    fds = tuple(fds)
    other_fds = tuple(other_fds)
    if universe is not None:
        universe = frozenset(universe)
        ensure_fds_within(fds, universe)
        ensure_fds_within(other_fds, universe)
    return covers(other_fds, fds) and covers(fds, other_fds)
