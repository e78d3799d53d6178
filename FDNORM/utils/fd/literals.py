"""Input normalization for FD literals.

Every FD literal the outside world hands us is classified into exactly one
LiteralKind and converted into a canonical FunctionalDependency. Nothing past this
module accepts anything but FunctionalDependency values.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from enum import Enum
from typing import Any, Dict, List, Optional, Tuple

from lark import Lark, Transformer, UnexpectedInput

from FDNORM.ir.models.functional_dependency import FDSet, FunctionalDependency
from FDNORM.utils.error_handling.errors import ShapeViolation
from FDNORM.utils.logging import get_logger

from .grammar import FD_GRAMMAR

logger = get_logger(__name__)

_LABEL_PAIRS: Tuple[Tuple[str, str], ...] = (
    ("lhs", "rhs"),
    ("determinant", "dependent"),
)


class LiteralKind(str, Enum):
    CANONICAL = "canonical"
    PAIR = "pair"
    LABELED = "labeled"
    TEXT = "text"


class _FDTransformer(Transformer):
    def side(self, items):
        return [str(tok) for tok in items]

    def fd(self, items):
        lhs, _arrow, rhs = items
        return lhs, rhs


_PARSER: Optional[Lark] = None


def _get_parser() -> Lark:
    global _PARSER
    if _PARSER is None:
        _PARSER = Lark(FD_GRAMMAR, parser="lalr", start="start")
    return _PARSER


def parse_fd_text(text: str) -> FunctionalDependency:
    """
    Parse a textual FD such as "A, B -> C".

    Raises:
        ShapeViolation: If the text does not match the FD grammar
    """
    try:
        tree = _get_parser().parse(text)
    except UnexpectedInput as e:
        raise ShapeViolation(
            f"Cannot parse FD literal {text!r}",
            line=getattr(e, "line", None),
            column=getattr(e, "column", None),
        ) from e
    lhs, rhs = _FDTransformer().transform(tree)
    return FunctionalDependency(lhs=lhs, rhs=rhs)


def _labels_of(obj: Mapping) -> Optional[Tuple[str, str]]:
    for left, right in _LABEL_PAIRS:
        if left in obj and right in obj:
            return left, right
    return None


def classify_fd_literal(obj: Any) -> LiteralKind:
    """
    Decide which accepted representation `obj` is.

    Raises:
        ShapeViolation: If obj is none of the accepted representations
    """
    if isinstance(obj, FunctionalDependency):
        return LiteralKind.CANONICAL
    if isinstance(obj, str):
        return LiteralKind.TEXT
    if isinstance(obj, Mapping):
        if _labels_of(obj) is None:
            raise ShapeViolation(
                f"Labeled FD literal needs 'lhs'/'rhs' or 'determinant'/'dependent' keys, got {sorted(map(str, obj))}"
            )
        return LiteralKind.LABELED
    if isinstance(obj, (list, tuple)):
        if len(obj) != 2:
            raise ShapeViolation(f"FD pair literal must have exactly 2 elements, got {len(obj)}: {obj!r}")
        return LiteralKind.PAIR
    raise ShapeViolation(f"Invalid FD literal: {obj!r}")


def normalize_fd(obj: Any) -> FunctionalDependency:
    """
    Convert any accepted FD literal into a canonical FunctionalDependency.

    Args:
        obj: A FunctionalDependency, a (lhs, rhs) pair of attribute collections,
             a mapping with lhs/rhs (or determinant/dependent) keys, or "A, B -> C" text

    Raises:
        ShapeViolation: If obj is not an accepted literal or has an empty side
    """
    kind = classify_fd_literal(obj)
    if kind is LiteralKind.CANONICAL:
        return obj
    if kind is LiteralKind.TEXT:
        return parse_fd_text(obj)
    if kind is LiteralKind.LABELED:
        left, right = _labels_of(obj)
        return FunctionalDependency(lhs=obj[left], rhs=obj[right])
    lhs, rhs = obj
    return FunctionalDependency(lhs=lhs, rhs=rhs)


def normalize_fds(objs: Any) -> FDSet:
    """
    Normalize a collection of FD literals into an FDSet.

    Raises:
        ShapeViolation: If objs is not a collection, or any element is malformed
    """
    if isinstance(objs, (str, bytes, Mapping, FunctionalDependency)) or not isinstance(objs, Iterable):
        raise ShapeViolation(f"FDs must be a collection of FD literals, got {objs!r}")
    return frozenset(normalize_fd(obj) for obj in objs)


def fds_to_dicts(fds: Iterable[FunctionalDependency]) -> List[Dict[str, List[str]]]:
    """Labeled-literal form of an FD collection, in deterministic order."""
    return [fd.to_dict() for fd in sorted(fds, key=lambda fd: fd.sort_key())]
