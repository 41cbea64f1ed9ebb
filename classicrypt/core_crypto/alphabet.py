"""
Alphabet Codec

Maps letters to integers 0-25 and back. Every cipher in the package works on
these integer sequences rather than on raw text.

Only the 26-letter Latin alphabet is supported. The mapping lives behind the
Alphabet class so a different alphabet could be plugged in without touching
the ciphers.
"""

from typing import Iterable, List, Tuple


ALPHABET = "ABCDEFGHIJKLMNOPQRSTUVWXYZ"
ALPHABET_SIZE = len(ALPHABET)


class Alphabet:
    """
    Bijection between the letters of an alphabet and 0..size-1.

    Example:
        >>> LATIN.encode("Hi, Bob!")
        [7, 8, 1, 14, 1]
        >>> LATIN.decode([7, 8, -25])
        'HIB'
    """

    def __init__(self, letters: str):
        if len(set(letters)) != len(letters):
            raise ValueError("Alphabet letters must be unique")
        self._letters = letters
        self._index = {ch: i for i, ch in enumerate(letters)}

    @property
    def letters(self) -> str:
        return self._letters

    @property
    def size(self) -> int:
        return len(self._letters)

    def encode(self, text: str) -> List[int]:
        """
        Convert text to a sequence of letter indices.

        Text is upper-cased and every character outside the alphabet is
        dropped. Input with no letters gives an empty list.

        Args:
            text: Arbitrary input text

        Returns:
            List of integers in [0, size)
        """
        return [self._index[ch] for ch in text.upper() if ch in self._index]

    def decode(self, numbers: Iterable[int]) -> str:
        """
        Convert letter indices back to text.

        Values are normalized mod size first, so negative or out-of-range
        integers are accepted.
        """
        # Python's % already floors toward the modulus sign
        return "".join(self._letters[n % self.size] for n in numbers)

    def clean(self, text: str) -> str:
        """Upper-cased, letters-only form of text."""
        return self.decode(self.encode(text))

    def table(self) -> List[Tuple[str, str]]:
        """(letter, two-digit index) pairs for display."""
        return [(ch, f"{i:02d}") for i, ch in enumerate(self._letters)]


LATIN = Alphabet(ALPHABET)


def encode(text: str) -> List[int]:
    """Encode text with the Latin alphabet."""
    return LATIN.encode(text)


def decode(numbers: Iterable[int]) -> str:
    """Decode letter indices with the Latin alphabet."""
    return LATIN.decode(numbers)


def clean(text: str) -> str:
    return LATIN.clean(text)


def alphabet_table() -> List[Tuple[str, str]]:
    return LATIN.table()
