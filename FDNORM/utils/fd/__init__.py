"""Functional dependency reasoning: closure, covers, keys, normal forms, synthesis."""

from .domain import attributes_of, ensure_within_universe, ensure_fds_within
from .literals import (
    LiteralKind,
    classify_fd_literal,
    normalize_fd,
    normalize_fds,
    parse_fd_text,
    fds_to_dicts,
)
from .closure import find_closure, is_superkey
from .equivalence import are_equivalent, covers, implies
from .minimal_cover import find_minimal_cover, is_minimal
from .keys import find_one_key, find_all_keys, prime_attributes, sort_keys
from .normal_forms import (
    NormalForm,
    is_in_2nf,
    is_in_3nf,
    is_in_bcnf,
    is_guaranteed_in_4nf,
    is_guaranteed_in_pjnf,
    highest_normal_form,
    find_3nf_violations,
    find_bcnf_violations,
)
from .projection import project_fds
from .relation_scheme import RelationScheme
from .synthesis import synthesize_into_3nf, is_dependency_preserving, contains_key

__all__ = [
    "attributes_of",
    "ensure_within_universe",
    "ensure_fds_within",
    "LiteralKind",
    "classify_fd_literal",
    "normalize_fd",
    "normalize_fds",
    "parse_fd_text",
    "fds_to_dicts",
    "find_closure",
    "is_superkey",
    "are_equivalent",
    "covers",
    "implies",
    "find_minimal_cover",
    "is_minimal",
    "find_one_key",
    "find_all_keys",
    "prime_attributes",
    "sort_keys",
    "NormalForm",
    "is_in_2nf",
    "is_in_3nf",
    "is_in_bcnf",
    "is_guaranteed_in_4nf",
    "is_guaranteed_in_pjnf",
    "highest_normal_form",
    "find_3nf_violations",
    "find_bcnf_violations",
    "project_fds",
    "RelationScheme",
    "synthesize_into_3nf",
    "is_dependency_preserving",
    "contains_key",
]
