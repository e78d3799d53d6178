"""3NF synthesis: decompose a relation scheme into 3NF relation schemes.

The decomposition preserves dependencies (each cluster comes from the minimal cover)
and is lossless as long as one emitted scheme contains a key of the source.
"""

from __future__ import annotations

from typing import Dict, FrozenSet, Iterable, List

from FDNORM.ir.models.functional_dependency import (
    AttributeSet,
    FunctionalDependency,
    sort_fds,
)
from FDNORM.utils.logging import get_logger

from .equivalence import are_equivalent
from .keys import find_all_keys, sort_keys
from .minimal_cover import find_minimal_cover
from .projection import project_fds
from .relation_scheme import RelationScheme

logger = get_logger(__name__)


def _cluster_by_determinant(cover: Iterable[FunctionalDependency]) -> List[AttributeSet]:
    clusters: Dict[AttributeSet, set] = {}
    for fd in sort_fds(cover):
        clusters.setdefault(fd.lhs, set(fd.lhs)).update(fd.rhs)
    return [frozenset(attrs) for attrs in clusters.values()]


def _drop_subsumed(clusters: List[AttributeSet]) -> List[AttributeSet]:
    # Of two equal clusters the first is dropped and the second survives
    alive = list(range(len(clusters)))
    for i, cluster in enumerate(clusters):
        if any(j != i and cluster <= clusters[j] for j in alive):
            alive.remove(i)
    return [clusters[i] for i in alive]


def contains_key(schemes: Iterable[RelationScheme], keys: Iterable[AttributeSet]) -> bool:
    """True iff some scheme's attributes include some key."""
    keys = list(keys)
    return any(key <= scheme.attributes for scheme in schemes for key in keys)


def is_dependency_preserving(
    schemes: Iterable[RelationScheme],
    fds: Iterable[FunctionalDependency],
) -> bool:
    """True iff the union of the schemes' FDs is equivalent to `fds`."""
    union = set()
    for scheme in schemes:
        union |= scheme.fds
    return are_equivalent(union, fds)


def synthesize_into_3nf(scheme: RelationScheme) -> FrozenSet[RelationScheme]:
    """
    Decompose `scheme` into 3NF relation schemes.

    Steps:
    1. Minimal cover of the scheme's FDs
    2. One cluster per distinct determinant: determinant | dependents
    3. If no cluster contains a key, add a cluster made of one key
    4. Drop clusters contained in another cluster
    5. One scheme per cluster, named "<name>_<i>", with the projected FDs

    Returns:
        The synthesized relation schemes
    """
    logger.debug(f"Synthesizing {scheme}")
    cover = find_minimal_cover(scheme.fds)
    clusters = _cluster_by_determinant(cover)

    keys = sort_keys(find_all_keys(scheme.fds, scheme.attributes))
    if not any(key <= cluster for key in keys for cluster in clusters):
        logger.debug(f"No cluster contains a key; adding key cluster {sorted(keys[0])}")
        clusters.append(keys[0])

    clusters = _drop_subsumed(clusters)

    result = []
    for i, cluster in enumerate(clusters, start=1):
        result.append(
            RelationScheme(
                name=f"{scheme.name}_{i}",
                attributes=cluster,
                fds=project_fds(scheme.fds, cluster, universe=scheme.attributes),
            )
        )

    if not contains_key(result, keys):
        logger.warning(
            f"Synthesis of {scheme.name} produced no scheme containing a key; "
            f"the decomposition may not be lossless"
        )
    logger.debug(f"Synthesized {len(result)} scheme(s) from {scheme.name}")
    return frozenset(result)
