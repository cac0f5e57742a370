"""
Secret reconstruction by Lagrange interpolation.

The shares are points on f, so f(0) is recovered as

    f(0) = sum_i y_i * L_i(0)
    L_i(0) = product_{j != i} x_j / (x_j - x_i)

with division done through the modular inverse of the denominator.

Reconstruction needs the collaboration of a threshold of participants and
is not part of normal operation: it is the recovery path.
"""

import logging

from .errors import NoModularInverseError
from .share import Share


logger = logging.getLogger(__name__)


def _mod_inverse(a: int, m: int) -> int:
    """
    Compute a^(-1) mod m.

    Raises:
        NoModularInverseError: If gcd(a, m) != 1
    """
    try:
        return pow(a, -1, m)
    except ValueError as e:
        raise NoModularInverseError("No modular inverse found") from e


def combine(field_order: int, shares: list[Share]) -> int:
    """
    Reconstruct the secret from shares.

    The caller supplies a threshold-sized set of shares with distinct
    x-coordinates. The count is not checked: fewer shares than the
    threshold produce a wrong value, not an error.

    Args:
        field_order: Modulus used at split time (the curve order)
        shares: Shares to interpolate

    Returns:
        The reconstructed secret in [0, field_order)

    Raises:
        NoModularInverseError: If two shares have the same x-coordinate or
            the field order is not prime
    """
    q = field_order
    secret = 0

    for i, share_i in enumerate(shares):
        basis = 1

        for j, share_j in enumerate(shares):
            if i == j:
                continue

            # x_j / (x_j - x_i) mod q
            denominator = (share_j.x - share_i.x) % q
            term = (share_j.x * _mod_inverse(denominator, q)) % q
            basis = (basis * term) % q

        secret = (secret + share_i.y * basis) % q

    logger.debug("Combined %d shares", len(shares))
    return secret
