"""
Modular Arithmetic

Number-theory helpers used by the substitution ciphers and the RSA engine:
- True modulo (never negative)
- Euclidean GCD and the Extended Euclidean Algorithm
- Modular inverse, both by linear scan (small moduli) and by extended Euclid
- Trial-division primality test
- Modular exponentiation (square-and-multiply)

Note: mod_inverse_brute is only meant for tiny moduli such as 26.
      Use mod_inverse for anything else (e.g. an RSA totient).
"""

import math
from typing import List, Optional, Tuple

from .errors import InvalidNumberError, NoInverseError


def norm_mod(n: int, m: int) -> int:
    """
    Mathematical modulo: the representative of n in [0, m).

    Args:
        n: Any integer (may be negative)
        m: The modulus (must be positive)

    Returns:
        n mod m in the range [0, m)

    Raises:
        InvalidNumberError: If m <= 0
    """
    if m <= 0:
        raise InvalidNumberError("Modulus must be positive")
    return n % m


def gcd(a: int, b: int) -> int:
    """
    Greatest common divisor of a and b, always >= 0.

    >>> gcd(48, 18)
    6
    """
    a, b = abs(a), abs(b)
    while b:
        a, b = b, a % b
    return a


def units(m: int) -> List[int]:
    """Integers in [1, m) coprime with m (the units of Z/mZ)."""
    return [a for a in range(1, m) if gcd(a, m) == 1]


def mod_inverse_brute(a: int, m: int) -> Optional[int]:
    """
    Modular inverse by linear scan.

    Tries every x in [1, m) until a*x = 1 (mod m). Fine for m = 26,
    far too slow for RSA-sized moduli.

    Args:
        a: The number to invert
        m: The modulus

    Returns:
        The inverse, or None if a has no inverse mod m
    """
    for x in range(1, m):
        if (a * x) % m == 1:
            return x
    return None


def extended_gcd(a: int, b: int) -> Tuple[int, int, int]:
    """
    Bezout coefficients for a and b.

    Returns (g, x, y) with g = gcd(a, b) and a*x + b*y = g. Iterative, so
    large inputs do not hit the recursion limit.
    """
    old_r, r = a, b
    old_x, x = 1, 0
    old_y, y = 0, 1
    while r:
        q = old_r // r
        old_r, r = r, old_r - q * r
        old_x, x = x, old_x - q * x
        old_y, y = y, old_y - q * y
    return old_r, old_x, old_y


def mod_inverse(a: int, m: int) -> int:
    """
    Inverse of a modulo m, via extended_gcd.

    Args:
        a: Value to invert (any integer; reduced mod m first)
        m: Positive modulus

    Returns:
        x in [0, m) with a*x = 1 (mod m)

    Raises:
        InvalidNumberError: If m <= 0
        NoInverseError: If a and m share a factor
    """
    if m <= 0:
        raise InvalidNumberError("Modulus must be positive")

    g, x, _ = extended_gcd(a % m, m)
    if g != 1:
        raise NoInverseError(f"{a} has no inverse mod {m} (gcd = {g})")
    return norm_mod(x, m)


def is_prime(n: int) -> bool:
    """
    Trial-division primality test.

    Checks every divisor up to floor(sqrt(n)). Only suitable for the small
    primes used in demonstrations.
    """
    if n < 2:
        return False
    for i in range(2, math.isqrt(n) + 1):
        if n % i == 0:
            return False
    return True


def mod_exp(base: int, exponent: int, modulus: int) -> int:
    """
    base^exponent mod modulus by square-and-multiply.

    Walks the exponent's bits from the top: square the running result for
    every bit, and multiply in the base where the bit is set. Only residues
    below modulus are ever multiplied, so RSA-sized numbers stay cheap.

    Raises:
        InvalidNumberError: If exponent < 0 or modulus <= 0
    """
    if exponent < 0:
        raise InvalidNumberError("Exponent must be non-negative")
    if modulus <= 0:
        raise InvalidNumberError("Modulus must be positive")

    base %= modulus
    result = 1 % modulus
    for bit in bin(exponent)[2:]:
        result = result * result % modulus
        if bit == "1":
            result = result * base % modulus
    return result
