"""
Random field elements from an injected entropy source.

An entropy source is any callable with the signature of os.urandom:
it takes a byte count and returns that many random bytes. Tests pass a
seeded generator such as random.Random(seed).randbytes to get
reproducible draws.

Uniform sampling reads just enough bytes to cover the bit length of the
bound, masks the excess high bits and rejects values outside the range,
so no modulo bias is introduced.
"""

import logging
from typing import Callable

from .errors import RandomSourceError


logger = logging.getLogger(__name__)

EntropySource = Callable[[int], bytes]

# Upper bound on consecutive rejected draws before giving up. Each draw is
# rejected with probability below 1/2, so a healthy source never gets close.
MAX_DRAW_ATTEMPTS = 1024


def _read(entropy: EntropySource, n: int) -> bytes:
    try:
        data = entropy(n)
    except Exception as e:
        raise RandomSourceError(f"Error reading entropy source: {e}") from e

    if not isinstance(data, (bytes, bytearray)):
        raise RandomSourceError(
            f"Entropy source returned {type(data).__name__}, expected bytes"
        )
    if len(data) != n:
        raise RandomSourceError(f"Short read from entropy source: {len(data)} of {n} bytes")
    return data


def random_below(entropy: EntropySource, m: int) -> int:
    """
    Draw a uniform integer in [0, m).

    Args:
        entropy: Source of random bytes
        m: Exclusive upper bound (must be positive)

    Returns:
        Random integer r with 0 <= r < m

    Raises:
        ValueError: If m is not positive
        RandomSourceError: If the source fails or keeps producing
            out-of-range values
    """
    if m <= 0:
        raise ValueError("Upper bound must be positive")

    bits = (m - 1).bit_length()
    if bits == 0:
        return 0

    n_bytes = (bits + 7) // 8
    excess = n_bytes * 8 - bits

    for _ in range(MAX_DRAW_ATTEMPTS):
        data = bytearray(_read(entropy, n_bytes))
        # Clear bits above the bound's bit length
        data[0] &= 0xFF >> excess
        r = int.from_bytes(data, byteorder="big")
        if r < m:
            return r

    raise RandomSourceError(
        f"No value below bound after {MAX_DRAW_ATTEMPTS} draws"
    )


def nonzero_int(entropy: EntropySource, m: int) -> int:
    """
    Draw a uniform integer in [1, m).

    Zero is discarded and redrawn.

    Raises:
        RandomSourceError: If the source fails or only produces zeros
    """
    for _ in range(MAX_DRAW_ATTEMPTS):
        r = random_below(entropy, m)
        if r != 0:
            return r

    raise RandomSourceError(
        f"No nonzero value after {MAX_DRAW_ATTEMPTS} draws"
    )


def unique_coords(entropy: EntropySource, m: int, n: int) -> list[int]:
    """
    Draw n pairwise-distinct nonzero elements of [1, m).

    These become the share x-coordinates. x = 0 is never used because
    f(0) is the secret itself.

    Args:
        entropy: Source of random bytes
        m: Field order
        n: Number of coordinates

    Returns:
        List of n distinct integers in [1, m)

    Raises:
        RandomSourceError: If the source fails, or a candidate collides
            MAX_DRAW_ATTEMPTS times in a row (only plausible for tiny fields)
    """
    taken: set[int] = set()
    result: list[int] = []

    while len(result) < n:
        for _ in range(MAX_DRAW_ATTEMPTS):
            x = nonzero_int(entropy, m)
            if x not in taken:
                break
        else:
            raise RandomSourceError(
                f"Could not draw coordinate {len(result) + 1} of {n}: "
                f"{MAX_DRAW_ATTEMPTS} consecutive collisions"
            )

        taken.add(x)
        result.append(x)

    logger.debug("Sampled %d distinct share coordinates", n)
    return result
