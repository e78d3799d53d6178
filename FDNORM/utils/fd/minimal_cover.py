"""Minimal (canonical) cover of a set of functional dependencies.

A minimal cover is singleton-dependent, has no extraneous determinant attributes, has
no redundant FDs, and is equivalent to its source. It is not unique: the passes below
iterate in sorted order, so the witness returned is deterministic for a given input.
"""

from __future__ import annotations

from typing import Iterable, Set

from FDNORM.ir.models.functional_dependency import (
    FDSet,
    FunctionalDependency,
    sort_attributes,
    sort_fds,
)
from FDNORM.utils.logging import get_logger

from .equivalence import are_equivalent

logger = get_logger(__name__)


def split_singletons(fds: Iterable[FunctionalDependency]) -> FDSet:
    """Replace every X -> {A, B, ...} with X -> A, X -> B, ..."""
    return frozenset(
        FunctionalDependency(lhs=fd.lhs, rhs=[attr])
        for fd in fds
        for attr in fd.rhs
    )


def prune_trivial(fds: Iterable[FunctionalDependency]) -> FDSet:
    """Drop every FD whose dependent is contained in its determinant."""
    return frozenset(fd for fd in fds if not fd.is_trivial)


def reduce_left_sides(fds: Iterable[FunctionalDependency]) -> FDSet:
    """Remove extraneous determinant attributes, one FD at a time."""
    result: Set[FunctionalDependency] = set(fds)
    for fd in sort_fds(result):
        if fd not in result:
            continue
        current = fd
        for attr in sort_attributes(fd.lhs):
            # An empty determinant is not an FD
            if len(current.lhs) == 1:
                break
            reduced = FunctionalDependency(lhs=current.lhs - {attr}, rhs=current.rhs)
            candidate = (result - {current}) | {reduced}
            if are_equivalent(candidate, result):
                logger.debug(f"Extraneous attribute {attr} removed: {current} => {reduced}")
                result = candidate
                current = reduced
    return frozenset(result)


def remove_redundant(fds: Iterable[FunctionalDependency]) -> FDSet:
    """Drop every FD implied by the remaining ones."""
    result: Set[FunctionalDependency] = set(fds)
    for fd in sort_fds(result):
        candidate = result - {fd}
        if are_equivalent(candidate, result):
            logger.debug(f"Redundant FD removed: {fd}")
            result = candidate
    return frozenset(result)


def find_minimal_cover(fds: Iterable[FunctionalDependency]) -> FDSet:
    """
    Compute a minimal cover of `fds`.

    Passes, in order:
    1. singleton split
    2. trivial pruning
    3. left-reduction
    4. redundancy elimination

    Args:
        fds: Functional dependencies (not mutated)

    Returns:
        An equivalent minimal FD set
    """
    fds = frozenset(fds)
    result = split_singletons(fds)
    result = prune_trivial(result)
    result = reduce_left_sides(result)
    result = remove_redundant(result)
    logger.debug(f"Minimal cover: {len(fds)} FDs in, {len(result)} FDs out")
    return result


def is_minimal(fds: Iterable[FunctionalDependency]) -> bool:
    """
    Check whether `fds` is already a minimal cover.

    True iff every dependent is a single attribute, no determinant attribute is
    extraneous, and no FD is redundant.
    """
    fds = frozenset(fds)
    if not all(fd.is_singleton for fd in fds):
        return False

    for fd in sort_fds(fds):
        others = fds - {fd}
        # Removing the only determinant attribute leaves an empty determinant, which
        # no set of FDs with non-empty determinants can imply
        if len(fd.lhs) == 1:
            continue
        for attr in sort_attributes(fd.lhs):
            reduced = FunctionalDependency(lhs=fd.lhs - {attr}, rhs=fd.rhs)
            if are_equivalent(others | {reduced}, fds):
                return False

    for fd in sort_fds(fds):
        if are_equivalent(fds - {fd}, fds):
            return False

    return True
