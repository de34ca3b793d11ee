"""
Pytest configuration and shared fixtures.

This file is automatically discovered by pytest and provides fixtures
available to all test files.
"""

import os
import tempfile

# Keep logs / config / saves written during tests out of the project tree.
# Must happen before anything imports settings.
os.environ.setdefault("ARTIFACTS_HOME", tempfile.mkdtemp(prefix="artifact-tests-"))

import pytest
import pygame
from typing import Generator, List


@pytest.fixture(scope="session", autouse=True)
def pygame_init() -> Generator[None, None, None]:
    """
    Initialize pygame for the test session.
    This runs once before all tests and cleans up after.
    """
    pygame.init()
    yield
    pygame.quit()


@pytest.fixture(autouse=True)
def clean_registry() -> Generator[None, None, None]:
    """
    Every test starts (and ends) with an empty artifact registry.
    """
    from artifacts.registry import clear_registry
    clear_registry()
    yield
    clear_registry()


@pytest.fixture
def rng():
    """
    A seeded random source, so generation is reproducible.
    """
    from artifacts.rng import ArtifactRng
    return ArtifactRng(1234)


@pytest.fixture
def scripted_rng():
    """
    Factory for a random source that returns a fixed list of values.

    Each call to rng(lo, hi) consumes the next value; the value must lie
    within the (possibly swapped) bounds.
    """
    from artifacts.rng import ArtifactRng

    class ScriptedRng(ArtifactRng):
        def __init__(self, values: List[int]):
            super().__init__(0)
            self.values = list(values)
            self.calls = []

        def rng(self, lo: int, hi: int) -> int:
            if lo > hi:
                lo, hi = hi, lo
            assert self.values, f"unexpected rng({lo}, {hi}) call"
            value = self.values.pop(0)
            assert lo <= value <= hi, f"scripted {value} outside [{lo}, {hi}]"
            self.calls.append((lo, hi))
            return value

    return ScriptedRng


@pytest.fixture
def save_path(tmp_path):
    """
    Path for an artifact save file inside a temporary directory.
    """
    return tmp_path / "artifacts.json"
