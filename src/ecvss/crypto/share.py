"""
Shares and their verification against dealer commitments.

A share (x, y) is valid for Feldman commitments C_k = a_k * G when

    y * G == C_0 + C_1 * x + C_2 * x^2 + ... + C_{t-1} * x^{t-1}

which holds because y = f(x) and scalar multiplication distributes over
the polynomial. With Pedersen blinding the share is y = f(x) + b(x), so
the same sum over the blinding commitments B_k is added to the right-hand
side before comparing.

Verification only reads the commitments. Points are immutable values and
the sum is accumulated from a fresh identity point.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from .curve import Curve, CurvePoint
from .errors import CommitmentLengthMismatchError, NotOnCurveError


logger = logging.getLogger(__name__)

# Minimum serialized size of one coordinate (256-bit curves).
COORD_SIZE = 32


class Scheme(Enum):
    """Commitment scheme, passed identically to split and verify."""

    FELDMAN = "feldman"
    PEDERSEN = "pedersen"

    def commitment_count(self, threshold: int) -> int:
        """Number of commitments produced for a threshold."""
        if self is Scheme.PEDERSEN:
            return 2 * threshold
        return threshold


@dataclass(frozen=True)
class Share:
    """
    A single share of a split secret.

    Attributes:
        x: The x-coordinate (evaluation point). Non-zero.
        y: The y-coordinate (polynomial evaluation at x).
    """

    x: int
    y: int

    def to_bytes(self, size: Optional[int] = None) -> bytes:
        """
        Encode as two equal-width big-endian coordinates, x then y.

        Pass curve.scalar_size for a fixed width per curve. Without it the
        width is COORD_SIZE, widened to fit the larger coordinate, so
        P-384 and P-521 shares encode as well.
        """
        if size is None:
            needed = (max(self.x, self.y).bit_length() + 7) // 8
            size = max(COORD_SIZE, needed)
        x_bytes = self.x.to_bytes(size, byteorder="big")
        y_bytes = self.y.to_bytes(size, byteorder="big")
        return x_bytes + y_bytes

    @classmethod
    def from_bytes(cls, data: bytes) -> "Share":
        """
        Decode the to_bytes() form; each coordinate takes half the data.

        Raises:
            ValueError: If data is empty or of odd length
        """
        if not data or len(data) % 2:
            raise ValueError(f"Share data must be a non-empty even length, got {len(data)}")
        half = len(data) // 2
        x = int.from_bytes(data[:half], byteorder="big")
        y = int.from_bytes(data[half:], byteorder="big")
        return cls(x=x, y=y)

    def verify(
        self,
        curve: Curve,
        threshold: int,
        commitments: list[CurvePoint],
        scheme: Scheme = Scheme.FELDMAN,
    ) -> bool:
        """
        Check this share against the dealer's commitments.

        Typically executed by each participant on receipt of a share.

        Args:
            curve: Curve used by the dealer
            threshold: Threshold used by the dealer
            commitments: Commitments returned by split()
            scheme: Scheme used by the dealer

        Returns:
            True if the share lies on the committed polynomial

        Raises:
            CommitmentLengthMismatchError: If the commitment count does not
                match threshold (2 * threshold for PEDERSEN)
            NotOnCurveError: If the share is not a pair of canonical field
                elements, or a commitment is not a curve point
        """
        if commitments is None:
            raise CommitmentLengthMismatchError("Commitments cannot be None")

        expected = scheme.commitment_count(threshold)
        if len(commitments) != expected:
            raise CommitmentLengthMismatchError(
                f"Expected {expected} commitments for threshold {threshold} "
                f"({scheme.value}), got {len(commitments)}"
            )

        n = curve.order
        if not (0 < self.x < n and 0 <= self.y < n):
            raise NotOnCurveError(f"Share is not a valid {curve.name} scalar pair")
        for point in commitments:
            if not curve.is_on_curve(point.x, point.y):
                raise NotOnCurveError(f"Commitment is not on {curve.name}")

        acc = _accumulate(curve, commitments[:threshold], self.x)
        if scheme is Scheme.PEDERSEN:
            acc = curve.add(acc, _accumulate(curve, commitments[threshold:], self.x))

        valid = curve.base_mult(self.y) == acc
        logger.debug("Share verification on %s (%s): %s", curve.name, scheme.value, valid)
        return valid


def _accumulate(curve: Curve, commitments: list[CurvePoint], x: int) -> CurvePoint:
    """Compute sum_k C_k * x^k, starting from the identity."""
    acc = curve.identity()
    xk = 1

    for point in commitments:
        acc = curve.add(acc, curve.scalar_mult(point, xk))  # C_k * x^k
        xk = (xk * x) % curve.order

    return acc


def verify_share(
    share: Share,
    curve: Curve,
    threshold: int,
    commitments: list[CurvePoint],
    scheme: Scheme = Scheme.FELDMAN,
) -> bool:
    """Functional form of Share.verify()."""
    return share.verify(curve, threshold, commitments, scheme)
