"""Optimal bloom filter sizing.

Formulas from the standard false-positive analysis:

    m = -n * ln(p) / ln(2)^2
    k = (m / n) * ln(2)
"""

import math
from numbers import Integral, Real

from redis_bloomfilter.errors import InvalidArgument


def _check_capacity(n) -> None:
    if isinstance(n, bool) or not isinstance(n, Integral):
        raise InvalidArgument(f"capacity must be an integer, got {n!r}")
    if n <= 0:
        raise InvalidArgument(f"capacity must be positive, got {n}")


def optimal_bit_count(n: int, p: float) -> int:
    """Bits needed for n items at false-positive rate p, rounded up."""
    _check_capacity(n)
    if isinstance(p, bool) or not isinstance(p, Real) or not 0 < p < 1:
        raise InvalidArgument(f"error_rate must be in (0, 1), got {p!r}")
    return max(1, math.ceil(-n * math.log(p) / math.log(2) ** 2))


def optimal_hash_count(n: int, m: int) -> int:
    _check_capacity(n)
    if m <= 0:
        raise InvalidArgument(f"bit count must be positive, got {m}")
    return max(1, round(math.log(2) * m / n))
