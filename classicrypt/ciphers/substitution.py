"""
Substitution Ciphers

Caesar (fixed shift of 3), general Shift and Affine ciphers over the
26-letter alphabet, plus exhaustive key search for Shift and Affine.

These are classroom ciphers. The whole Shift key space is 26 keys and the
whole Affine key space is 312, so brute force recovers any message by eye.
Brute force here only lists candidates; picking the right one is left to
the reader.
"""

from dataclasses import dataclass
from enum import Enum
from typing import List, Tuple

from ..core_crypto.alphabet import ALPHABET_SIZE, encode, decode
from ..core_crypto.errors import InvalidKeyError
from ..core_crypto.modular import norm_mod, units, mod_inverse_brute


CAESAR_SHIFT = 3
AFFINE_VALID_A = tuple(units(ALPHABET_SIZE))  # (1, 3, 5, 7, 9, 11, 15, 17, 19, 21, 23, 25)


class Mode(Enum):
    ENCODE = "enc"
    DECODE = "dec"


@dataclass(frozen=True)
class BruteForceCandidate:
    """One decryption attempt: the key tried and the resulting text."""
    key: Tuple[int, ...]
    text: str

    @property
    def label(self) -> str:
        if len(self.key) == 1:
            return f"k = {self.key[0]:02d}"
        a, b = self.key
        return f"a={a}, b={b}"


# ============================================================================
# Shift / Caesar
# ============================================================================

def _shift(numbers: List[int], k: int) -> List[int]:
    return [norm_mod(n + k, ALPHABET_SIZE) for n in numbers]


def shift_encode(text: str, k: int) -> str:
    """
    Encrypt text with a shift cipher.

    Non-letters are dropped and the output is upper case.

    Args:
        text: Plaintext
        k: Shift key, any integer (taken mod 26)

    Returns:
        Ciphertext
    """
    return decode(_shift(encode(text), k))


def shift_decode(text: str, k: int) -> str:
    """Decrypt a shift-cipher text with key k."""
    return decode(_shift(encode(text), -k))


def caesar_encode(text: str) -> str:
    """Caesar's cipher: shift by 3."""
    return shift_encode(text, CAESAR_SHIFT)


def caesar_decode(text: str) -> str:
    return shift_decode(text, CAESAR_SHIFT)


def shift_brute_force(text: str) -> List[BruteForceCandidate]:
    """
    Decrypt with every shift key.

    Returns:
        26 candidates, one per k in 0..25, in key order
    """
    numbers = encode(text)
    return [
        BruteForceCandidate(key=(k,), text=decode(_shift(numbers, -k)))
        for k in range(ALPHABET_SIZE)
    ]


# ============================================================================
# Affine
# ============================================================================

def validate_affine_a(a: int) -> None:
    """
    Check that a is invertible mod 26.

    Raises:
        InvalidKeyError: If a is not one of AFFINE_VALID_A
    """
    if a not in AFFINE_VALID_A:
        valid = ", ".join(str(v) for v in AFFINE_VALID_A)
        raise InvalidKeyError(f"a must be coprime with 26. Valid: {valid}")


def _affine_decode_numbers(numbers: List[int], a_inv: int, b: int) -> List[int]:
    return [norm_mod(a_inv * (n - b), ALPHABET_SIZE) for n in numbers]


def affine_encode(text: str, a: int, b: int) -> str:
    """
    Encrypt text with the affine map n -> a*n + b (mod 26).

    Raises:
        InvalidKeyError: If a is not a unit mod 26
    """
    validate_affine_a(a)
    return decode(norm_mod(a * n + b, ALPHABET_SIZE) for n in encode(text))


def affine_decode(text: str, a: int, b: int) -> str:
    """
    Decrypt with n -> a^-1 * (n - b) (mod 26).

    Raises:
        InvalidKeyError: If a is not a unit mod 26
    """
    validate_affine_a(a)
    a_inv = mod_inverse_brute(a, ALPHABET_SIZE)
    return decode(_affine_decode_numbers(encode(text), a_inv, b))


def affine_brute_force(text: str) -> List[BruteForceCandidate]:
    """
    Decrypt with every valid affine key.

    Returns:
        312 candidates (12 values of a x 26 values of b),
        ordered by a, then b
    """
    numbers = encode(text)
    candidates = []
    for a in AFFINE_VALID_A:
        a_inv = mod_inverse_brute(a, ALPHABET_SIZE)
        for b in range(ALPHABET_SIZE):
            plain = decode(_affine_decode_numbers(numbers, a_inv, b))
            candidates.append(BruteForceCandidate(key=(a, b), text=plain))
    return candidates


# ============================================================================
# Cipher objects
# ============================================================================

class ShiftCipher:
    """
    Shift cipher with a fixed key.

    Example:
        >>> cipher = ShiftCipher(k=7)
        >>> cipher.encrypt("attack at dawn")
        'HAAHJRHAKHDU'
        >>> cipher.decrypt('HAAHJRHAKHDU')
        'ATTACKATDAWN'
    """

    def __init__(self, k: int):
        self._k = norm_mod(k, ALPHABET_SIZE)

    @property
    def key(self) -> int:
        return self._k

    def encrypt(self, text: str) -> str:
        return shift_encode(text, self._k)

    def decrypt(self, text: str) -> str:
        return shift_decode(text, self._k)

    def apply(self, text: str, mode: Mode) -> str:
        """Encrypt or decrypt depending on mode."""
        if mode is Mode.ENCODE:
            return self.encrypt(text)
        return self.decrypt(text)

    @staticmethod
    def brute_force(text: str) -> List[BruteForceCandidate]:
        return shift_brute_force(text)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(k={self._k})"


class CaesarCipher(ShiftCipher):
    """The shift cipher with k fixed at 3."""

    def __init__(self):
        super().__init__(CAESAR_SHIFT)

    def __repr__(self) -> str:
        return "CaesarCipher()"


class AffineCipher:
    """
    Affine cipher E(n) = a*n + b (mod 26).

    The key is validated at construction, so encrypt/decrypt never fail.
    """

    def __init__(self, a: int, b: int):
        validate_affine_a(a)
        self._a = a
        self._b = norm_mod(b, ALPHABET_SIZE)
        self._a_inv = mod_inverse_brute(a, ALPHABET_SIZE)

    @property
    def key(self) -> Tuple[int, int]:
        return self._a, self._b

    @property
    def a_inverse(self) -> int:
        """Multiplicative inverse of a mod 26."""
        return self._a_inv

    def encrypt(self, text: str) -> str:
        return affine_encode(text, self._a, self._b)

    def decrypt(self, text: str) -> str:
        return decode(_affine_decode_numbers(encode(text), self._a_inv, self._b))

    def apply(self, text: str, mode: Mode) -> str:
        if mode is Mode.ENCODE:
            return self.encrypt(text)
        return self.decrypt(text)

    @staticmethod
    def brute_force(text: str) -> List[BruteForceCandidate]:
        return affine_brute_force(text)

    def __repr__(self) -> str:
        return f"AffineCipher(a={self._a}, b={self._b})"
