"""Three ways of computing the greatest common divisor."""

from __future__ import annotations


def _c_remainder(a: int, b: int) -> int:
    """Remainder of truncating division; its sign follows the dividend."""
    remainder = abs(a) % abs(b)
    return -remainder if a < 0 else remainder


def gcd_euclid(a: int, b: int) -> int:
    """Greatest common divisor by Euclid's algorithm.

    The remainder takes the sign of the dividend, so negative operands may
    give a negative result whose magnitude is the divisor.
    """
    while b != 0:
        a, b = b, _c_remainder(a, b)
    return a


def gcd_consecutive(a: int, b: int) -> int:
    """Greatest common divisor by checking candidates downwards from the smaller number.

    Returns 1 when no positive candidate exists (for example when an operand is 0).
    """
    for candidate in range(min(a, b), 0, -1):
        if a % candidate == 0 and b % candidate == 0:
            return candidate
    return 1


def gcd_prime_factors(a: int, b: int) -> int:
    """Greatest common divisor by dividing out common factors.

    Stops as soon as either number drops to 1 or below, so an operand of 0
    or 1 gives 1.
    """
    result = 1
    factor = 2
    while a > 1 and b > 1:
        a_divisible = a % factor == 0
        b_divisible = b % factor == 0
        if a_divisible and b_divisible:
            result *= factor
            a //= factor
            b //= factor
        elif a_divisible:
            a //= factor
        elif b_divisible:
            b //= factor
        else:
            factor += 1
    return result