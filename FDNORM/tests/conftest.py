"""Pytest fixtures and configuration."""

import logging
import sys
from pathlib import Path

import pytest

sys.path.insert(0, str(Path(__file__).parent.parent.parent))

from FDNORM.utils.fd import RelationScheme


@pytest.fixture
def closure_scheme():
    """Universe {A,B,C}, FDs {AB->C, C->A}."""
    return RelationScheme(name="test_closure", attributes=["A", "B", "C"], fds=[
        [["A", "B"], ["C"]],
        [["C"], ["A"]],
    ])


@pytest.fixture
def non_minimal_scheme():
    """Universe {A,B,C,D}, FDs {AB->CD, C->D}."""
    return RelationScheme(name="test", attributes=["A", "B", "C", "D"], fds=[
        [["A", "B"], ["C", "D"]],
        [["C"], ["D"]],
    ])


@pytest.fixture
def two_key_scheme():
    """Universe {A,B,C,D,E}, FDs {A->C, B->CD, C->E, E->C, D->B}; keys {AB, AD}."""
    return RelationScheme(name="synthesis_check", attributes=["A", "B", "C", "D", "E"], fds=[
        [["A"], ["C"]],
        [["B"], ["C", "D"]],
        [["C"], ["E"]],
        [["E"], ["C"]],
        [["D"], ["B"]],
    ])


@pytest.fixture
def third_nf_not_bcnf_scheme():
    """Universe {A,B,C}, FDs {AB->C, C->B}."""
    return RelationScheme(name="test_bcnf", attributes=["A", "B", "C"], fds=[
        [["A", "B"], ["C"]],
        [["C"], ["B"]],
    ])


@pytest.fixture
def simple_key_scheme():
    """Universe {A,B,C,D}, FDs {A->B, A->C, A->D}."""
    return RelationScheme(name="test_bcnf2", attributes=["A", "B", "C", "D"], fds=[
        [["A"], ["B"]],
        [["A"], ["C"]],
        [["A"], ["D"]],
    ])


@pytest.fixture
def restore_root_logger():
    """Put the root logger back the way it was after a test reconfigures logging."""
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield root
    root.handlers[:] = handlers
    root.setLevel(level)


@pytest.fixture
def fd_config_file(tmp_path, monkeypatch):
    """Point the config loader at a temporary config.yaml; the FD section cache is reset around the test."""
    from FDNORM.config import loader
    from FDNORM.utils.pipeline_config import _load_fd_section

    path = tmp_path / "config.yaml"
    monkeypatch.setattr(loader, "find_config_file", lambda: path)
    for name in (
        "FDNORM_PROJECTION_WARN_ATTRIBUTES",
        "FDNORM_EXHAUSTIVE_KEY_SEARCH",
        "FDNORM_LOG_DECOMPOSITION",
    ):
        monkeypatch.delenv(name, raising=False)
    _load_fd_section.cache_clear()
    yield path
    _load_fd_section.cache_clear()
