"""
Polynomials over the curve's scalar field.

A polynomial of degree t-1 is stored as its coefficient list:

    f(x) = a_0 + a_1*x + a_2*x^2 + ... + a_{t-1}*x^{t-1}
    poly = [a_0, a_1, ..., a_{t-1}]

For the secret polynomial a_0 is the secret. For the blinding polynomial
a_0 is zero, so adding it to every share leaves f(0) unchanged.

Commitments publish a_i * G for every coefficient. Because scalar
multiplication is a homomorphism, a share (x, y) can be checked with

    y * G == sum_i (a_i * G) * x^i

without revealing any a_i.
"""

from .curve import Curve, CurvePoint
from .entropy import EntropySource, nonzero_int


def random_polynomial(
    entropy: EntropySource, m: int, constant: int, degree: int
) -> list[int]:
    """
    Build a polynomial with a fixed constant term and random coefficients.

    The higher coefficients are drawn from [1, m): a zero leading
    coefficient would silently lower the degree.

    Args:
        entropy: Source of random bytes
        m: Field order
        constant: Coefficient a_0
        degree: Polynomial degree (threshold - 1)

    Returns:
        Coefficients [a_0, a_1, ..., a_degree]

    Raises:
        RandomSourceError: If the entropy source fails
    """
    coefficients = [constant]
    for _ in range(degree):
        coefficients.append(nonzero_int(entropy, m))
    return coefficients


def commit(curve: Curve, poly: list[int]) -> list[CurvePoint]:
    """Commit to each coefficient as a_i * G."""
    return [curve.base_mult(a) for a in poly]


def evaluate_polynomial(m: int, poly: list[int], x: int) -> int:
    """
    Evaluate polynomial at x using Horner's method.

    f(x) = a_0 + x*(a_1 + x*(a_2 + ...)), reduced mod m after every step.

    Args:
        m: Field order
        poly: Coefficients [a_0, ..., a_d]
        x: Evaluation point

    Returns:
        f(x) mod m
    """
    result = 0

    # Highest degree first
    for coeff in reversed(poly):
        result = (result * x) % m
        result = (result + coeff) % m

    return result
