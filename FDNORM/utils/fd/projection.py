"""Projection of an FD set onto a subset of attributes."""

from __future__ import annotations

from itertools import combinations
from typing import Iterable, Optional, Set

from FDNORM.ir.models.functional_dependency import (
    FDSet,
    FunctionalDependency,
    as_attribute_set,
    sort_attributes,
)
from FDNORM.utils.logging import get_logger
from FDNORM.utils.pipeline_config import get_fd_engine_config

from .closure import find_closure
from .domain import ensure_within_universe
from .minimal_cover import find_minimal_cover

logger = get_logger(__name__)


def project_fds(
    fds: Iterable[FunctionalDependency],
    subset: Iterable[str],
    universe: Optional[Iterable[str]] = None,
    should_minimize: bool = True,
) -> FDSet:
    """
    Compute the FDs implied by `fds` on `subset`.

    For every non-empty X inside the subset, emits X -> (X+ & subset). The
    enumeration is exponential in |subset|; it is meant for design-time schemas.

    Args:
        fds: Functional dependencies over the full universe
        subset: Attributes to project onto
        universe: If given, subset must be inside it
        should_minimize: Reduce the result to a minimal cover

    Raises:
        DomainRangeViolation: If universe is given and subset leaves it
    """
    if universe is not None:
        subset = ensure_within_universe(subset, universe, what="projection subset")
    else:
        subset = as_attribute_set(subset, what="projection subset")
    fds = tuple(fds)

    warn_at = get_fd_engine_config().projection_warn_attributes
    if len(subset) > warn_at:
        logger.warning(
            f"Projecting onto {len(subset)} attributes enumerates {2 ** len(subset) - 1} subsets "
            f"(warning threshold: {warn_at})"
        )

    ordered = sort_attributes(subset)
    emitted: Set[FunctionalDependency] = set()
    for size in range(1, len(ordered) + 1):
        for combo in combinations(ordered, size):
            determinant = frozenset(combo)
            dependent = find_closure(determinant, fds) & subset
            emitted.add(FunctionalDependency(lhs=determinant, rhs=dependent))

    logger.debug(f"Projection onto {list(ordered)} emitted {len(emitted)} FDs")
    if should_minimize:
        return find_minimal_cover(emitted)
    return frozenset(emitted)
