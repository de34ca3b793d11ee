"""
Unit tests for the artifact random source.
"""

from artifacts.rng import ArtifactRng, resolve_rng, seed_shared_rng, shared_rng


class TestArtifactRng:
    """Tests for ArtifactRng primitives."""

    def test_rng_inclusive_bounds(self, rng):
        values = {rng.rng(1, 3) for _ in range(300)}
        assert values == {1, 2, 3}

    def test_rng_reversed_bounds(self, rng):
        """Reversed bounds are swapped instead of failing."""
        for _ in range(100):
            assert 225 <= rng.rng(1000, 225) <= 1000

    def test_one_in_degenerate(self, rng):
        """one_in(1) and below always succeed."""
        assert all(rng.one_in(1) for _ in range(20))
        assert all(rng.one_in(0) for _ in range(20))
        assert all(rng.one_in(-3) for _ in range(20))

    def test_one_in_sometimes_fails(self, rng):
        results = [rng.one_in(2) for _ in range(200)]
        assert True in results and False in results

    def test_random_entry_removed(self, rng):
        """The drawn element is removed and nothing else is lost."""
        pool = list(range(10))
        drawn = rng.random_entry_removed(pool)
        assert drawn not in pool
        assert len(pool) == 9
        assert sorted(pool + [drawn]) == list(range(10))

    def test_random_entry_removed_drains_pool(self, rng):
        pool = ["a", "b", "c"]
        drawn = [rng.random_entry_removed(pool) for _ in range(3)]
        assert sorted(drawn) == ["a", "b", "c"]
        assert pool == []

    def test_same_seed_same_sequence(self):
        first = ArtifactRng(99)
        second = ArtifactRng(99)
        assert [first.rng(0, 1000) for _ in range(20)] == [second.rng(0, 1000) for _ in range(20)]

    def test_reseed(self):
        source = ArtifactRng(5)
        before = [source.rng(0, 1000) for _ in range(10)]
        source.seed(5)
        assert [source.rng(0, 1000) for _ in range(10)] == before


class TestSharedRng:
    """Tests for the process-wide instance."""

    def test_resolve_defaults_to_shared(self, rng):
        assert resolve_rng(None) is shared_rng
        assert resolve_rng(rng) is rng

    def test_seed_shared_rng(self):
        seed_shared_rng(42)
        before = [shared_rng.rng(0, 1000) for _ in range(10)]
        seed_shared_rng(42)
        assert [shared_rng.rng(0, 1000) for _ in range(10)] == before
