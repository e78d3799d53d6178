"""Unit tests for the minimal cover reducer."""

import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent.parent.parent))

from FDNORM.utils.fd import (
    RelationScheme,
    are_equivalent,
    find_minimal_cover,
    is_minimal,
    normalize_fds,
)
from FDNORM.utils.fd.minimal_cover import prune_trivial, reduce_left_sides, split_singletons


class TestIsMinimal:
    """is_minimal checks singleton dependents, extraneous attributes and redundancy."""

    def test_minimal_set(self):
        scheme = RelationScheme(name="test", attributes=["A", "B", "C", "D"], fds=[
            [["A", "B"], ["C"]],
            [["C"], ["D"]],
        ])

        assert scheme.is_minimal() is True

    def test_non_singleton_dependent(self, non_minimal_scheme):
        assert non_minimal_scheme.is_minimal() is False

    def test_extraneous_attribute(self):
        assert is_minimal(normalize_fds(["A, B -> C", "A -> B"])) is False

    def test_redundant_fd(self):
        assert is_minimal(normalize_fds(["A -> B", "B -> C", "A -> C"])) is False

    def test_trivial_fd_is_redundant(self):
        assert is_minimal(normalize_fds(["A, B -> A"])) is False

    def test_empty_set_is_minimal(self):
        assert is_minimal(frozenset()) is True


class TestFindMinimalCover:
    """The four reduction passes."""

    def test_scenario(self, non_minimal_scheme):
        cover = non_minimal_scheme.find_minimal_cover()

        assert cover == normalize_fds(["A, B -> C", "C -> D"])
        assert non_minimal_scheme.is_minimal(cover) is True
        assert non_minimal_scheme.is_minimal() is False

    def test_cycle(self):
        fds = normalize_fds([[["A"], ["B", "C"]], [["B"], ["C"]], [["C"], ["B"]]])

        cover = find_minimal_cover(fds)

        assert cover == normalize_fds(["A -> C", "B -> C", "C -> B"])
        assert is_minimal(cover)
        assert not is_minimal(fds)

    def test_projection_shaped_input(self):
        scheme = RelationScheme(name="test4minimal", attributes=["B", "C", "D"], fds=[
            [["B"], ["B", "C", "D"]],
            [["C"], ["C"]],
            [["B", "C"], ["B", "C", "D"]],
            [["D"], ["D"]],
            [["B", "D"], ["B", "C", "D"]],
            [["C", "D"], ["C", "D"]],
            [["B", "C", "D"], ["B", "C", "D"]],
        ])

        cover = scheme.find_minimal_cover()

        assert scheme.is_minimal() is False
        assert scheme.is_minimal(cover) is True
        assert scheme.are_equivalent(cover) is True
        assert cover == normalize_fds(["B -> C", "B -> D"])

    def test_idempotent(self, two_key_scheme, non_minimal_scheme, third_nf_not_bcnf_scheme):
        for scheme in (two_key_scheme, non_minimal_scheme, third_nf_not_bcnf_scheme):
            once = find_minimal_cover(scheme.fds)
            twice = find_minimal_cover(once)

            assert are_equivalent(once, twice)
            assert are_equivalent(once, scheme.fds)
            assert is_minimal(once)

    def test_only_trivial_fds(self):
        assert find_minimal_cover(normalize_fds(["A, B -> A", "C -> C"])) == frozenset()

    def test_passes(self):
        fds = normalize_fds([[["A", "B"], ["A", "C"]], "A -> C, B"])

        split = split_singletons(fds)
        assert split == normalize_fds(["A, B -> A", "A, B -> C", "A -> C", "A -> B"])

        pruned = prune_trivial(split)
        assert pruned == normalize_fds(["A, B -> C", "A -> C", "A -> B"])

        reduced = reduce_left_sides(pruned)
        assert reduced == normalize_fds(["A -> C", "A -> B"])
