"""Canonical functional dependency value type.

A FunctionalDependency is an immutable pair of non-empty attribute sets. Equality and
hashing come from the set contents of both sides, so `AB -> C` and `BA -> C` are the
same value and duplicates collapse inside a frozenset.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any, FrozenSet, Tuple

from pydantic import BaseModel, ConfigDict, field_validator

from FDNORM.utils.error_handling.errors import ShapeViolation

Attribute = str
AttributeSet = FrozenSet[Attribute]


def as_attribute_set(value: Any, what: str = "attributes", allow_empty: bool = True) -> AttributeSet:
    """
    Coerce a collection of attribute names into an AttributeSet.

    Args:
        value: Any non-string iterable of non-empty strings
        what: Name used in error messages
        allow_empty: Whether an empty collection is accepted

    Raises:
        ShapeViolation: If value is a string, a mapping, not iterable, holds non-string
            items, or is empty while allow_empty is False
    """
    if isinstance(value, (str, bytes, Mapping)) or not isinstance(value, Iterable):
        raise ShapeViolation(f"{what} must be a collection of attribute names, got {value!r}")
    items = list(value)
    for item in items:
        if not isinstance(item, str) or not item:
            raise ShapeViolation(f"{what} must contain non-empty strings, got {item!r}")
    if not items and not allow_empty:
        raise ShapeViolation(f"{what} must not be empty")
    return frozenset(items)


def sort_attributes(attributes: Iterable[Attribute]) -> Tuple[Attribute, ...]:
    return tuple(sorted(attributes))


class FunctionalDependency(BaseModel):
    """Functional dependency lhs -> rhs (determinant -> dependent)."""

    lhs: FrozenSet[str]
    rhs: FrozenSet[str]

    model_config = ConfigDict(frozen=True, extra="forbid")

    @field_validator("lhs", "rhs", mode="before")
    @classmethod
    def _coerce_side(cls, value: Any, info) -> AttributeSet:
        return as_attribute_set(value, what=f"FD {info.field_name}", allow_empty=False)

    @classmethod
    def of(cls, lhs: Iterable[str], rhs: Iterable[str]) -> "FunctionalDependency":
        return cls(lhs=lhs, rhs=rhs)

    @property
    def determinant(self) -> AttributeSet:
        return self.lhs

    @property
    def dependent(self) -> AttributeSet:
        return self.rhs

    @property
    def attributes(self) -> AttributeSet:
        return self.lhs | self.rhs

    @property
    def is_trivial(self) -> bool:
        return self.rhs <= self.lhs

    @property
    def is_singleton(self) -> bool:
        return len(self.rhs) == 1

    def sort_key(self) -> Tuple[Tuple[str, ...], Tuple[str, ...]]:
        return sort_attributes(self.lhs), sort_attributes(self.rhs)

    def to_dict(self) -> dict:
        return {"lhs": list(sort_attributes(self.lhs)), "rhs": list(sort_attributes(self.rhs))}

    def __str__(self) -> str:
        return f"{', '.join(sort_attributes(self.lhs))} -> {', '.join(sort_attributes(self.rhs))}"

    def __repr__(self) -> str:
        return f"FunctionalDependency({self})"


FDSet = FrozenSet[FunctionalDependency]


def sort_fds(fds: Iterable[FunctionalDependency]) -> list:
    """Deterministic iteration order over an FD collection."""
    return sorted(fds, key=lambda fd: fd.sort_key())
