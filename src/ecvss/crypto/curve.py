"""
Elliptic curve arithmetic for share commitments.

Wraps the curves of the python-ecdsa package behind a small interface:

    - order:        group order N, the field for all share arithmetic
    - base_mult:    k * G
    - scalar_mult:  k * P
    - add:          P + Q
    - is_on_curve:  curve equation check for affine coordinates

Points are exchanged as immutable CurvePoint values. Every operation returns
a new point, so commitments handed to a caller can never be modified by a
later computation.

Point encoding uses SEC1 (compressed form) through the cryptography package.
The point at infinity has no SEC1 public key form and is encoded as a single
zero byte, as SEC1 section 2.3.3 specifies.
"""

from dataclasses import dataclass
from typing import Optional

import ecdsa
from ecdsa.ellipticcurve import INFINITY, Point, PointJacobi
from cryptography.hazmat.primitives.asymmetric import ec
from cryptography.hazmat.primitives.serialization import Encoding, PublicFormat

from .errors import ConfigurationError, NotOnCurveError


# Encoding of the point at infinity.
IDENTITY_ENCODING = b"\x00"

# Curve used when the caller does not choose one.
DEFAULT_CURVE = "P-256"


@dataclass(frozen=True)
class CurvePoint:
    """
    An affine point on an elliptic curve.

    Attributes:
        x: Affine x-coordinate, None for the point at infinity
        y: Affine y-coordinate, None for the point at infinity
    """

    x: Optional[int]
    y: Optional[int]

    @classmethod
    def identity(cls) -> "CurvePoint":
        """The point at infinity (group identity)."""
        return cls(x=None, y=None)

    @property
    def is_identity(self) -> bool:
        return self.x is None and self.y is None


class Curve:
    """
    A named prime-order curve.

    Attributes:
        name: Canonical curve name (e.g. "P-256")
        order: Order N of the base point
    """

    def __init__(
        self, name: str, ecdsa_curve: ecdsa.curves.Curve, crypto_curve: ec.EllipticCurve
    ):
        self.name = name
        self._ecdsa_curve = ecdsa_curve
        self._crypto_curve = crypto_curve
        self._fp = ecdsa_curve.curve
        self._generator = ecdsa_curve.generator
        self.order: int = ecdsa_curve.order

    def __repr__(self) -> str:
        return f"Curve({self.name!r})"

    @property
    def scalar_size(self) -> int:
        """Byte length of a field element for this curve."""
        return (self.order.bit_length() + 7) // 8

    @property
    def generator(self) -> CurvePoint:
        """Base point G."""
        return self._from_ecdsa(self._generator)

    def identity(self) -> CurvePoint:
        return CurvePoint.identity()

    # --- Arithmetic ---

    def is_on_curve(self, x: Optional[int], y: Optional[int]) -> bool:
        """
        Check that (x, y) satisfies the curve equation.

        The point at infinity (None, None) is a member of the group.
        """
        if x is None and y is None:
            return True
        if x is None or y is None:
            return False

        p = self._fp.p()
        if not (0 <= x < p and 0 <= y < p):
            return False
        return self._fp.contains_point(x, y)

    def base_mult(self, k: int) -> CurvePoint:
        """Compute k * G."""
        k %= self.order
        if k == 0:
            return CurvePoint.identity()
        return self._from_ecdsa(self._generator * k)

    def scalar_mult(self, point: CurvePoint, k: int) -> CurvePoint:
        """Compute k * point."""
        k %= self.order
        if k == 0 or point.is_identity:
            return CurvePoint.identity()
        return self._from_ecdsa(self._to_ecdsa(point) * k)

    def add(self, p: CurvePoint, q: CurvePoint) -> CurvePoint:
        """Compute p + q."""
        if p.is_identity:
            return q
        if q.is_identity:
            return p
        return self._from_ecdsa(self._to_ecdsa(p) + self._to_ecdsa(q))

    # --- Encoding ---

    def encode_point(self, point: CurvePoint) -> bytes:
        """
        Serialize a point in SEC1 compressed form.

        Format: 1 byte prefix (0x02/0x03) + x-coordinate, or a single 0x00
        byte for the point at infinity.
        """
        if point.is_identity:
            return IDENTITY_ENCODING

        try:
            public_key = ec.EllipticCurvePublicNumbers(
                point.x, point.y, self._crypto_curve
            ).public_key()
        except ValueError as e:
            raise NotOnCurveError(f"Point is not on {self.name}") from e

        return public_key.public_bytes(Encoding.X962, PublicFormat.CompressedPoint)

    def decode_point(self, data: bytes) -> CurvePoint:
        """
        Deserialize a SEC1 encoded point (compressed or uncompressed).

        Raises:
            NotOnCurveError: If the encoding is malformed or off the curve
        """
        if data == IDENTITY_ENCODING:
            return CurvePoint.identity()

        try:
            public_key = ec.EllipticCurvePublicKey.from_encoded_point(
                self._crypto_curve, data
            )
        except ValueError as e:
            raise NotOnCurveError(f"Invalid {self.name} point encoding") from e

        numbers = public_key.public_numbers()
        return CurvePoint(x=numbers.x, y=numbers.y)

    # --- python-ecdsa conversion ---

    def _to_ecdsa(self, point: CurvePoint) -> PointJacobi:
        if not self.is_on_curve(point.x, point.y):
            raise NotOnCurveError(f"Point is not on {self.name}")
        affine = Point(self._fp, point.x, point.y, self.order)
        return PointJacobi.from_affine(affine)

    @staticmethod
    def _from_ecdsa(point) -> CurvePoint:
        if point == INFINITY:
            return CurvePoint.identity()
        return CurvePoint(x=point.x(), y=point.y())


P256 = Curve("P-256", ecdsa.NIST256p, ec.SECP256R1())
P384 = Curve("P-384", ecdsa.NIST384p, ec.SECP384R1())
P521 = Curve("P-521", ecdsa.NIST521p, ec.SECP521R1())
SECP256K1 = Curve("secp256k1", ecdsa.SECP256k1, ec.SECP256K1())

CURVES = {curve.name: curve for curve in (P256, P384, P521, SECP256K1)}


def get_curve(name: str = DEFAULT_CURVE) -> Curve:
    """
    Look up a named curve.

    Raises:
        ConfigurationError: If the curve is not supported
    """
    curve = CURVES.get(name)
    if curve is None:
        raise ConfigurationError(
            f"Unknown curve {name!r}, expected one of: {', '.join(CURVES)}"
        )
    return curve
