"""Tests for random field element sampling."""

import pytest

from ecvss.crypto.entropy import (
    MAX_DRAW_ATTEMPTS,
    nonzero_int,
    random_below,
    unique_coords,
)
from ecvss.crypto.errors import RandomSourceError


class TestRandomBelow:
    """Tests for uniform draws in [0, m)."""

    def test_in_range(self, seeded_entropy):
        """All draws fall below the bound."""
        for m in (2, 7, 255, 256, 257, 2**127 - 1):
            for _ in range(50):
                assert 0 <= random_below(seeded_entropy, m) < m

    def test_bound_of_one(self, seeded_entropy):
        """Only 0 is below 1."""
        assert random_below(seeded_entropy, 1) == 0

    def test_invalid_bound(self, seeded_entropy):
        """Non-positive bound is rejected."""
        with pytest.raises(ValueError, match="must be positive"):
            random_below(seeded_entropy, 0)

    def test_masks_excess_bits(self):
        """High bits beyond the bound's bit length are cleared."""
        # m = 5 needs 3 bits; 0xFF masked to 0b111 = 7 is rejected forever
        # but 0xFC masks to 0b100 = 4 which is accepted.
        assert random_below(lambda n: b"\xfc" * n, 5) == 4

    def test_source_failure(self, failing_entropy):
        """Errors from the source become RandomSourceError."""
        with pytest.raises(RandomSourceError, match="entropy device unavailable"):
            random_below(failing_entropy, 100)

    def test_short_read(self):
        """A source returning too few bytes is an error."""
        with pytest.raises(RandomSourceError, match="Short read"):
            random_below(lambda n: b"", 2**64)

    def test_non_bytes_result(self):
        """A source returning something other than bytes is an error."""
        with pytest.raises(RandomSourceError, match="returned NoneType"):
            random_below(lambda n: None, 100)
        with pytest.raises(RandomSourceError, match="returned list"):
            random_below(lambda n: [0] * n, 100)

    def test_always_out_of_range(self):
        """Retry loop is bounded."""
        calls = []

        def read(n: int) -> bytes:
            calls.append(n)
            return b"\xff" * n

        with pytest.raises(RandomSourceError, match="No value below bound"):
            random_below(read, 5)
        assert len(calls) == MAX_DRAW_ATTEMPTS


class TestNonzeroInt:
    """Tests for nonzero draws."""

    def test_never_zero(self, seeded_entropy):
        """Zero is rejected, even for a tiny field."""
        for _ in range(200):
            assert 1 <= nonzero_int(seeded_entropy, 2) < 2

    def test_skips_zero_draws(self):
        """A zero draw is discarded and the next one is used."""
        draws = iter([b"\x00", b"\x00", b"\x03"])
        assert nonzero_int(lambda n: next(draws), 7) == 3

    def test_zero_source(self, zero_entropy):
        """A source that only yields zeros fails instead of looping forever."""
        with pytest.raises(RandomSourceError, match="No nonzero value"):
            nonzero_int(zero_entropy, 2**128)


class TestUniqueCoords:
    """Tests for share x-coordinate sampling."""

    def test_distinct_and_nonzero(self, seeded_entropy):
        """Coordinates are pairwise distinct and nonzero."""
        xs = unique_coords(seeded_entropy, 2**256, 255)
        assert len(xs) == 255
        assert len(set(xs)) == 255
        assert all(x != 0 for x in xs)

    def test_small_field_collisions(self, seeded_entropy):
        """Rejection sampling still fills a small field completely."""
        xs = unique_coords(seeded_entropy, 11, 10)
        assert sorted(xs) == list(range(1, 11))

    def test_exhausted_field(self, seeded_entropy):
        """Asking for more coordinates than the field has fails."""
        with pytest.raises(RandomSourceError, match="consecutive collisions"):
            unique_coords(seeded_entropy, 3, 3)

    def test_source_failure(self, failing_entropy):
        """Entropy failure propagates."""
        with pytest.raises(RandomSourceError):
            unique_coords(failing_entropy, 2**256, 3)

    def test_zero_count(self, failing_entropy):
        """No draws are made when no coordinates are requested."""
        assert unique_coords(failing_entropy, 2**256, 0) == []
