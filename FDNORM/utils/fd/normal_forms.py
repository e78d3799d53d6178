"""Normal-form predicates for a single relation scheme.

4NF and PJNF are only approximated: with FDs alone we can state sufficient
conditions (BCNF plus simple keys), not the real multivalued/join-dependency tests.
"""

from __future__ import annotations

from enum import Enum
from typing import FrozenSet, Iterable, List, Optional

from FDNORM.ir.models.functional_dependency import (
    AttributeSet,
    FunctionalDependency,
    sort_attributes,
    sort_fds,
)

from .closure import find_closure, is_superkey
from .keys import find_all_keys, prime_attributes
from .minimal_cover import find_minimal_cover


class NormalForm(str, Enum):
    FIRST = "1NF"
    SECOND = "2NF"
    THIRD = "3NF"
    BOYCE_CODD = "BCNF"
    FOURTH = "4NF"
    PROJECT_JOIN = "PJNF"


def _keys(fds, universe, keys: Optional[Iterable[AttributeSet]]) -> FrozenSet[AttributeSet]:
    if keys is not None:
        return frozenset(keys)
    return find_all_keys(fds, universe)


def is_in_2nf(
    fds: Iterable[FunctionalDependency],
    universe: Iterable[str],
    keys: Optional[Iterable[AttributeSet]] = None,
) -> bool:
    """No non-prime attribute depends on a proper subset of any key."""
    fds = tuple(fds)
    universe = frozenset(universe)
    keys = _keys(fds, universe, keys)
    non_prime = universe - prime_attributes(keys)
    if not non_prime:
        return True
    for key in keys:
        for attr in sort_attributes(key):
            if find_closure(key - {attr}, fds) & non_prime:
                return False
    return True


def find_3nf_violations(
    fds: Iterable[FunctionalDependency],
    universe: Iterable[str],
    keys: Optional[Iterable[AttributeSet]] = None,
) -> List[FunctionalDependency]:
    """Minimal-cover FDs X -> A where X is not a superkey and A is not prime."""
    fds = tuple(fds)
    universe = frozenset(universe)
    prime = prime_attributes(_keys(fds, universe, keys))
    return [
        fd
        for fd in sort_fds(find_minimal_cover(fds))
        if not is_superkey(fd.lhs, fds, universe) and not fd.rhs <= prime
    ]


def find_bcnf_violations(
    fds: Iterable[FunctionalDependency],
    universe: Iterable[str],
) -> List[FunctionalDependency]:
    """Minimal-cover FDs X -> A where X is not a superkey."""
    fds = tuple(fds)
    universe = frozenset(universe)
    return [
        fd
        for fd in sort_fds(find_minimal_cover(fds))
        if not is_superkey(fd.lhs, fds, universe)
    ]


def is_in_3nf(
    fds: Iterable[FunctionalDependency],
    universe: Iterable[str],
    keys: Optional[Iterable[AttributeSet]] = None,
) -> bool:
    return not find_3nf_violations(fds, universe, keys)


def is_in_bcnf(fds: Iterable[FunctionalDependency], universe: Iterable[str]) -> bool:
    return not find_bcnf_violations(fds, universe)


def is_guaranteed_in_4nf(
    fds: Iterable[FunctionalDependency],
    universe: Iterable[str],
    keys: Optional[Iterable[AttributeSet]] = None,
) -> bool:
    """BCNF and at least one single-attribute key (sufficient, not necessary)."""
    fds = tuple(fds)
    universe = frozenset(universe)
    if not is_in_bcnf(fds, universe):
        return False
    return any(len(key) == 1 for key in _keys(fds, universe, keys))


def is_guaranteed_in_pjnf(
    fds: Iterable[FunctionalDependency],
    universe: Iterable[str],
    keys: Optional[Iterable[AttributeSet]] = None,
) -> bool:
    """BCNF and every key is a single attribute (sufficient, not necessary)."""
    fds = tuple(fds)
    universe = frozenset(universe)
    if not is_in_bcnf(fds, universe):
        return False
    return all(len(key) == 1 for key in _keys(fds, universe, keys))


def highest_normal_form(
    fds: Iterable[FunctionalDependency],
    universe: Iterable[str],
    keys: Optional[Iterable[AttributeSet]] = None,
) -> NormalForm:
    """Strongest normal form the scheme is known to satisfy."""
    fds = tuple(fds)
    universe = frozenset(universe)
    keys = _keys(fds, universe, keys)
    if not is_in_2nf(fds, universe, keys):
        return NormalForm.FIRST
    if not is_in_3nf(fds, universe, keys):
        return NormalForm.SECOND
    if not is_in_bcnf(fds, universe):
        return NormalForm.THIRD
    if is_guaranteed_in_pjnf(fds, universe, keys):
        return NormalForm.PROJECT_JOIN
    if is_guaranteed_in_4nf(fds, universe, keys):
        return NormalForm.FOURTH
    return NormalForm.BOYCE_CODD
