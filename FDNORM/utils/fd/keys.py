"""Candidate key discovery."""

from __future__ import annotations

from itertools import combinations
from typing import FrozenSet, Iterable, List, Optional

from FDNORM.ir.models.functional_dependency import (
    AttributeSet,
    FunctionalDependency,
    sort_attributes,
    sort_fds,
)
from FDNORM.utils.logging import get_logger

from .closure import is_superkey
from .domain import ensure_within_universe

logger = get_logger(__name__)


def sort_keys(keys: Iterable[AttributeSet]) -> List[AttributeSet]:
    """Keys ordered by size, then lexicographically."""
    return sorted(keys, key=lambda k: (len(k), sort_attributes(k)))


def find_one_key(
    fds: Iterable[FunctionalDependency],
    universe: Iterable[str],
    candidate: Optional[Iterable[str]] = None,
) -> AttributeSet:
    """
    Shrink `candidate` (default: the universe) to a minimal key.

    Attributes are tried in sorted order; an attribute is dropped whenever the rest
    is still a superkey. Which key comes back depends on that order.

    Args:
        fds: Functional dependencies
        universe: All attributes of the relation
        candidate: A superkey to shrink

    Raises:
        DomainRangeViolation: If candidate is not a subset of universe
    """
    fds = tuple(fds)
    universe = frozenset(universe)
    if candidate is None:
        key = universe
    else:
        key = ensure_within_universe(candidate, universe, what="key candidate")

    for attr in sort_attributes(key):
        reduced = key - {attr}
        if is_superkey(reduced, fds, universe):
            key = reduced
    return key


def _find_all_keys_exhaustive(fds, universe: AttributeSet) -> FrozenSet[AttributeSet]:
    keys: List[AttributeSet] = []
    ordered = sort_attributes(universe)
    for size in range(len(ordered) + 1):
        for combo in combinations(ordered, size):
            subset = frozenset(combo)
            if any(k <= subset for k in keys):
                continue
            if is_superkey(subset, fds, universe):
                keys.append(subset)
    return frozenset(keys)


def find_all_keys(
    fds: Iterable[FunctionalDependency],
    universe: Iterable[str],
    exhaustive: bool = False,
) -> FrozenSet[AttributeSet]:
    """
    Find the candidate keys of a relation.

    Default strategy: seed with one key, then for every known key K and FD X -> Y
    try S = X | (K - Y). If S contains no known key, shrink it to a key and add it.
    Repeat until a full pass adds nothing.

    With `exhaustive=True` every subset of the universe is scanned by increasing
    size instead. Exponential in the number of attributes.

    Returns:
        Set of keys (each a frozenset of attributes)
    """
    fds = tuple(sort_fds(fds))
    universe = frozenset(universe)
    if exhaustive:
        keys = _find_all_keys_exhaustive(fds, universe)
        logger.debug(f"Exhaustive key search found {len(keys)} key(s)")
        return keys

    keys: List[AttributeSet] = [find_one_key(fds, universe)]
    changed = True
    while changed:
        changed = False
        for key in list(keys):
            for fd in fds:
                superkey = fd.lhs | (key - fd.rhs)
                if any(k <= superkey for k in keys):
                    continue
                new_key = find_one_key(fds, universe, superkey)
                if new_key not in keys:
                    keys.append(new_key)
                    changed = True
    logger.debug(f"Key search found {len(keys)} key(s)")
    return frozenset(keys)


def prime_attributes(keys: Iterable[AttributeSet]) -> AttributeSet:
    """Attributes belonging to at least one key."""
    out = set()
    for key in keys:
        out |= key
    return frozenset(out)
