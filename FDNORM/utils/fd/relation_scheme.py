"""Immutable relation scheme: a name, an attribute universe and an FD set.

Every operation is a pure function of the scheme and its explicit arguments. The
`fds` parameter of each method defaults to the scheme's own FDs; any FDs passed in
explicitly are normalized and checked against the scheme's attributes first.
"""

from __future__ import annotations

from typing import Any, FrozenSet, Iterable, Optional

from pydantic import BaseModel, ConfigDict, field_validator, model_validator

from FDNORM.ir.models.functional_dependency import (
    AttributeSet,
    FDSet,
    FunctionalDependency,
    as_attribute_set,
    sort_attributes,
    sort_fds,
)

from . import normal_forms
from .closure import find_closure
from .domain import ensure_fds_within
from .equivalence import are_equivalent
from .keys import find_all_keys, find_one_key, prime_attributes
from .literals import normalize_fds
from .minimal_cover import find_minimal_cover, is_minimal
from .projection import project_fds


class RelationScheme(BaseModel):
    """Relation scheme R(attributes) with functional dependencies."""

    name: str
    attributes: FrozenSet[str]
    fds: FrozenSet[FunctionalDependency]

    model_config = ConfigDict(frozen=True, extra="forbid")

    @field_validator("attributes", mode="before")
    @classmethod
    def _coerce_attributes(cls, value: Any) -> AttributeSet:
        return as_attribute_set(value, what="attributes")

    @field_validator("fds", mode="before")
    @classmethod
    def _coerce_fds(cls, value: Any) -> FDSet:
        return normalize_fds(value)

    @model_validator(mode="after")
    def _check_fds_within_attributes(self) -> "RelationScheme":
        ensure_fds_within(self.fds, self.attributes)
        return self

    def __str__(self) -> str:
        fds = "; ".join(str(fd) for fd in sort_fds(self.fds))
        return f"{self.name}({', '.join(sort_attributes(self.attributes))}) {{{fds}}}"

    def _resolve_fds(self, fds: Optional[Iterable[Any]]) -> FDSet:
        if fds is None:
            return self.fds
        resolved = normalize_fds(fds)
        ensure_fds_within(resolved, self.attributes)
        return resolved

    def with_fds(self, fds: Iterable[Any]) -> "RelationScheme":
        """A new scheme with the same name and attributes and different FDs."""
        return RelationScheme(name=self.name, attributes=self.attributes, fds=fds)

    # Closure and equivalence

    def find_closure(self, attributes: Iterable[str], fds: Optional[Iterable[Any]] = None) -> AttributeSet:
        return find_closure(attributes, self._resolve_fds(fds))

    def are_equivalent(self, other_fds: Iterable[Any], fds: Optional[Iterable[Any]] = None) -> bool:
        """Check that `other_fds` is equivalent to `fds` (default: this scheme's FDs)."""
        other = normalize_fds(other_fds)
        return are_equivalent(other, self._resolve_fds(fds), universe=self.attributes)

    def is_equivalent_to(self, other: "RelationScheme") -> bool:
        """Same name, same attributes and equivalent FDs."""
        if self.name != other.name or self.attributes != other.attributes:
            return False
        return are_equivalent(self.fds, other.fds, universe=self.attributes)

    # Minimal cover

    def is_minimal(self, fds: Optional[Iterable[Any]] = None) -> bool:
        return is_minimal(self._resolve_fds(fds))

    def find_minimal_cover(self, fds: Optional[Iterable[Any]] = None) -> FDSet:
        return find_minimal_cover(self._resolve_fds(fds))

    # Keys

    def find_one_key(
        self,
        fds: Optional[Iterable[Any]] = None,
        candidate: Optional[Iterable[str]] = None,
    ) -> AttributeSet:
        return find_one_key(self._resolve_fds(fds), self.attributes, candidate)

    def find_all_keys(
        self,
        fds: Optional[Iterable[Any]] = None,
        exhaustive: bool = False,
    ) -> FrozenSet[AttributeSet]:
        return find_all_keys(self._resolve_fds(fds), self.attributes, exhaustive=exhaustive)

    def prime_attributes(self, fds: Optional[Iterable[Any]] = None) -> AttributeSet:
        return prime_attributes(self.find_all_keys(fds))

    # Normal forms

    def is_in_2nf(self, fds: Optional[Iterable[Any]] = None) -> bool:
        return normal_forms.is_in_2nf(self._resolve_fds(fds), self.attributes)

    def is_in_3nf(self, fds: Optional[Iterable[Any]] = None) -> bool:
        return normal_forms.is_in_3nf(self._resolve_fds(fds), self.attributes)

    def is_in_bcnf(self, fds: Optional[Iterable[Any]] = None) -> bool:
        return normal_forms.is_in_bcnf(self._resolve_fds(fds), self.attributes)

    def is_guaranteed_in_4nf(self, fds: Optional[Iterable[Any]] = None) -> bool:
        return normal_forms.is_guaranteed_in_4nf(self._resolve_fds(fds), self.attributes)

    def is_guaranteed_in_pjnf(self, fds: Optional[Iterable[Any]] = None) -> bool:
        return normal_forms.is_guaranteed_in_pjnf(self._resolve_fds(fds), self.attributes)

    def highest_normal_form(self, fds: Optional[Iterable[Any]] = None) -> normal_forms.NormalForm:
        return normal_forms.highest_normal_form(self._resolve_fds(fds), self.attributes)

    # Projection

    def get_projection(
        self,
        subset: Iterable[str],
        should_minimize: bool = True,
        fds: Optional[Iterable[Any]] = None,
    ) -> FDSet:
        return project_fds(
            self._resolve_fds(fds),
            subset,
            universe=self.attributes,
            should_minimize=should_minimize,
        )
