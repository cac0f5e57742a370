"""
Dealer side of verifiable secret sharing.

split() turns a secret into shares plus public commitments:

    1. f(x) = secret + a_1*x + ... + a_{t-1}*x^{t-1}   (random a_i != 0)
    2. C_i = a_i * G                                   (Feldman commitments)
    3. PEDERSEN only: b(x) = 0 + b_1*x + ...          (independent blinding)
       and its commitments B_i = b_i * G appended after C
    4. n distinct nonzero x-coordinates
    5. share_j = (x_j, f(x_j) [+ b(x_j)]) mod N

All share arithmetic, including the blinding polynomial, is done modulo
the curve order N. Commitments are exponents of G, so any other modulus
would make verification and reconstruction disagree.
"""

import logging
import os
from typing import Optional

from .curve import Curve, CurvePoint
from .entropy import EntropySource, unique_coords
from .errors import ConfigurationError, InputError
from .polynomial import commit, evaluate_polynomial, random_polynomial
from .share import Scheme, Share


logger = logging.getLogger(__name__)

# Policy limits on a single split.
MAX_PARTS = 255
MAX_THRESHOLD = 255


def split(
    curve: Curve,
    secret: Optional[int],
    parts: int,
    threshold: int,
    scheme: Scheme = Scheme.FELDMAN,
    entropy: Optional[EntropySource] = None,
) -> tuple[list[Share], list[CurvePoint]]:
    """
    Split a secret into verifiable shares.

    Typically executed by the dealer. Any `threshold` of the returned
    shares reconstruct the secret with combine(). Fewer shares combine
    without error to an unrelated value.

    Args:
        curve: Curve for commitments; its order is the share field
        secret: Secret in [0, curve.order)
        parts: Total number of shares
        threshold: Shares required for reconstruction
        scheme: FELDMAN or PEDERSEN (blinded) commitments
        entropy: Random byte source (default: os.urandom)

    Returns:
        (shares, commitments). Commitments has length threshold, or
        2 * threshold for PEDERSEN.

    Raises:
        ConfigurationError: If parts/threshold are out of bounds
        InputError: If the secret is missing or out of range
        RandomSourceError: If the entropy source fails

    Example:
        >>> shares, commitments = split(P256, 42, parts=5, threshold=3)
        >>> combine(P256.order, shares[:3])
        42
    """
    if threshold < 1:
        raise ConfigurationError("Threshold must be at least 1")
    if parts < threshold:
        raise ConfigurationError("Parts cannot be less than threshold")
    if parts > MAX_PARTS:
        raise ConfigurationError(f"Parts cannot exceed {MAX_PARTS}")
    if threshold > MAX_THRESHOLD:
        raise ConfigurationError(f"Threshold cannot exceed {MAX_THRESHOLD}")
    if secret is None:
        raise InputError("Secret cannot be None")
    if isinstance(secret, bool) or not isinstance(secret, int):
        raise InputError(f"Secret must be an integer, got {type(secret).__name__}")

    n = curve.order
    if not 0 <= secret < n:
        raise InputError(f"Secret must be in range [0, {curve.name} order)")

    if entropy is None:
        entropy = os.urandom

    poly = random_polynomial(entropy, n, secret, threshold - 1)
    commitments = commit(curve, poly)

    blinding = None
    if scheme is Scheme.PEDERSEN:
        blinding = random_polynomial(entropy, n, 0, threshold - 1)
        commitments.extend(commit(curve, blinding))

    xs = unique_coords(entropy, n, parts)

    shares = []
    for x in xs:
        y = evaluate_polynomial(n, poly, x)
        if blinding is not None:
            y = (y + evaluate_polynomial(n, blinding, x)) % n
        shares.append(Share(x=x, y=y))

    logger.debug(
        "Split secret on %s into %d shares (threshold %d, %s)",
        curve.name,
        parts,
        threshold,
        scheme.value,
    )
    return shares, commitments
