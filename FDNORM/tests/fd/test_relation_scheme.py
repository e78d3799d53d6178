"""Unit tests for RelationScheme construction and its bound API."""

import sys
from pathlib import Path

import pytest
from pydantic import ValidationError

sys.path.insert(0, str(Path(__file__).parent.parent.parent.parent))

from FDNORM.ir.models import FunctionalDependency
from FDNORM.utils.error_handling import DomainRangeViolation, FDError, ShapeViolation
from FDNORM.utils.fd import RelationScheme


class TestConstruction:
    """Construction validates shape and range."""

    def test_fds_are_canonicalized(self):
        scheme = RelationScheme(name="test", attributes=["A", "B", "C"], fds=[[["B", "A"], ["C"]]])

        assert scheme.fds == frozenset({FunctionalDependency(lhs=["A", "B"], rhs=["C"])})
        assert scheme.attributes == frozenset({"A", "B", "C"})

    def test_mixed_literals(self):
        scheme = RelationScheme(name="test", attributes={"A", "B", "C"}, fds=(
            "A -> B",
            {"lhs": ["B"], "rhs": ["C"]},
            FunctionalDependency(lhs=["C"], rhs=["A"]),
        ))

        assert len(scheme.fds) == 3

    def test_attribute_outside_universe_raises_range_violation(self):
        with pytest.raises(DomainRangeViolation) as exc_info:
            RelationScheme(name="test2", attributes=["A", "B", "C"], fds=[
                [["A", "B"], ["C"]],
                [["C"], ["D"]],
            ])

        assert exc_info.value.missing == frozenset({"D"})
        assert isinstance(exc_info.value, FDError)
        assert "D" in str(exc_info.value)

    @pytest.mark.parametrize("attributes", ["ABC", 5, {"A": 1}])
    def test_bad_attributes_raise_shape_violation(self, attributes):
        with pytest.raises(ShapeViolation):
            RelationScheme(name="test", attributes=attributes, fds=[])

    @pytest.mark.parametrize("fds", ["A -> B", {"lhs": ["A"], "rhs": ["B"]}, 7])
    def test_bad_fd_collection_raises_shape_violation(self, fds):
        with pytest.raises(ShapeViolation):
            RelationScheme(name="test", attributes=["A", "B"], fds=fds)

    def test_is_immutable(self, closure_scheme):
        with pytest.raises(ValidationError):
            closure_scheme.name = "other"

    def test_is_hashable_value(self):
        r1 = RelationScheme(name="R", attributes=["A", "B"], fds=["A -> B"])
        r2 = RelationScheme(name="R", attributes=("B", "A"), fds=[[["A"], ["B"]]])

        assert r1 == r2
        assert len({r1, r2}) == 1

    def test_str(self):
        scheme = RelationScheme(name="R", attributes=["B", "A"], fds=["A -> B"])

        assert str(scheme) == "R(A, B) {A -> B}"


class TestBoundOperations:
    """Methods default to the scheme's FDs and validate explicit ones."""

    def test_are_equivalent_with_default_fds(self):
        scheme = RelationScheme(name="test", attributes=["A", "B", "C"], fds=[
            [["A", "B"], ["C"]],
            [["C"], ["B"]],
            [["A"], ["B"]],
        ])

        assert scheme.are_equivalent([[["A"], ["C"]], [["C"], ["B"]]]) is True
        assert scheme.are_equivalent([[["C"], ["B"]]]) is False

    def test_are_equivalent_range_check(self, closure_scheme):
        with pytest.raises(DomainRangeViolation):
            closure_scheme.are_equivalent([[["A"], ["Z"]]])

    def test_explicit_fds_are_range_checked(self, closure_scheme):
        with pytest.raises(DomainRangeViolation):
            closure_scheme.find_closure(["A"], fds=["A -> Z"])

    def test_explicit_fds_override_defaults(self, closure_scheme):
        assert closure_scheme.find_closure(["A"], fds=["A -> B"]) == frozenset({"A", "B"})
        assert closure_scheme.find_closure(["A"]) == frozenset({"A"})

    def test_is_equivalent_to(self):
        r1 = RelationScheme(name="R", attributes=["A", "B", "C"], fds=["A -> B", "B -> C", "A -> C"])
        r2 = RelationScheme(name="R", attributes=["A", "B", "C"], fds=["A -> B", "B -> C"])
        r3 = RelationScheme(name="S", attributes=["A", "B", "C"], fds=["A -> B", "B -> C"])
        r4 = RelationScheme(name="R", attributes=["A", "B", "C", "D"], fds=["A -> B", "B -> C"])

        assert r1.is_equivalent_to(r2)
        assert not r1.is_equivalent_to(r3)
        assert not r1.is_equivalent_to(r4)

    def test_with_fds_returns_new_scheme(self, non_minimal_scheme):
        reduced = non_minimal_scheme.with_fds(non_minimal_scheme.find_minimal_cover())

        assert reduced.name == non_minimal_scheme.name
        assert reduced.attributes == non_minimal_scheme.attributes
        assert reduced.is_minimal()
        assert not non_minimal_scheme.is_minimal()

    def test_operations_do_not_mutate_receiver(self, two_key_scheme):
        before = two_key_scheme.model_copy()

        two_key_scheme.find_minimal_cover()
        two_key_scheme.find_all_keys()
        two_key_scheme.get_projection(["A", "B"])
        two_key_scheme.is_in_3nf()

        assert two_key_scheme == before
