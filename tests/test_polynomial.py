"""Tests for polynomial construction, evaluation and commitments."""

import pytest

from ecvss.crypto.curve import P256
from ecvss.crypto.errors import RandomSourceError
from ecvss.crypto.polynomial import commit, evaluate_polynomial, random_polynomial


class TestRandomPolynomial:
    """Tests for random polynomial generation."""

    def test_constant_term(self, seeded_entropy):
        """Constant term is the requested value, degree + 1 coefficients."""
        coeffs = random_polynomial(seeded_entropy, P256.order, 12345, degree=2)

        assert coeffs[0] == 12345
        assert len(coeffs) == 3

    def test_higher_coefficients_nonzero(self, seeded_entropy):
        """Coefficients above a_0 are drawn from [1, m)."""
        coeffs = random_polynomial(seeded_entropy, 2, 0, degree=20)
        assert coeffs == [0] + [1] * 20

    def test_degree_zero(self, failing_entropy):
        """A constant polynomial consumes no entropy."""
        assert random_polynomial(failing_entropy, P256.order, 7, degree=0) == [7]

    def test_source_failure(self, failing_entropy):
        """Entropy failure propagates."""
        with pytest.raises(RandomSourceError):
            random_polynomial(failing_entropy, P256.order, 7, degree=1)


class TestEvaluatePolynomial:
    """Tests for Horner evaluation."""

    def test_simple_polynomial(self):
        """f(x) = 5 + 3x + 2x^2 over a small prime."""
        coeffs = [5, 3, 2]
        prime = 997

        assert evaluate_polynomial(prime, coeffs, 0) == 5
        assert evaluate_polynomial(prime, coeffs, 1) == 10
        assert evaluate_polynomial(prime, coeffs, 2) == 19

    def test_reduces_modulo(self):
        """f(x) = 5 + 3x mod 17, the classic toy example."""
        coeffs = [5, 3]
        assert [evaluate_polynomial(17, coeffs, x) for x in (1, 2, 3, 4)] == [
            8,
            11,
            14,
            0,
        ]

    def test_matches_naive_sum(self, seeded_entropy):
        """Horner agrees with the power sum on a large field."""
        m = P256.order
        coeffs = random_polynomial(seeded_entropy, m, 42, degree=5)
        x = 0xDEADBEEF

        naive = sum(c * pow(x, i, m) for i, c in enumerate(coeffs)) % m
        assert evaluate_polynomial(m, coeffs, x) == naive


class TestCommit:
    """Tests for coefficient commitments."""

    def test_commitment_per_coefficient(self):
        """Entry i is a_i * G."""
        coeffs = [1, 2, 3]
        commitments = commit(P256, coeffs)

        assert len(commitments) == 3
        assert commitments[0] == P256.generator
        assert commitments[1] == P256.add(P256.generator, P256.generator)
        assert commitments[2] == P256.base_mult(3)

    def test_zero_coefficient_is_identity(self):
        """A zero coefficient commits to the point at infinity."""
        commitments = commit(P256, [0, 5])
        assert commitments[0].is_identity
        assert not commitments[1].is_identity
