"""
Columnar Transposition Cipher

The plaintext is written row by row under a keyword and read off column by
column, taking the columns in alphabetical order of their key letters.
Repeated key letters are ranked left to right.

Example with key "ZEBRA" and plaintext "WEAREDISCOVERED":

    Z  E  B  R  A        rank:  5 3 2 4 1
    W  E  A  R  E
    D  I  S  C  O
    V  E  R  E  D

    ciphertext = EOD + ASR + EIE + RCE + WDV = "EODASREIERCEWDV"

Encoding pads the last row with FILLER. Decoding also accepts unpadded
ciphertext: if the length is not a multiple of the key length, the last
columns of the grid (in key order) are one letter short, exactly as a
row-by-row fill would leave them.
"""

from dataclasses import dataclass
from typing import List, Tuple

from ..core_crypto.alphabet import clean
from ..core_crypto.errors import InvalidKeyError


FILLER = "X"
MIN_KEY_LENGTH = 2
EMPTY_CELL = "·"


def normalize_key(key: str) -> str:
    """
    Upper-case the keyword and drop non-letters.

    Raises:
        InvalidKeyError: If fewer than MIN_KEY_LENGTH letters remain
    """
    normalized = clean(key)
    if len(normalized) < MIN_KEY_LENGTH:
        raise InvalidKeyError(
            f"Transposition key needs at least {MIN_KEY_LENGTH} letters"
        )
    return normalized


def column_order(key: str) -> List[int]:
    """
    Column indices in the order they are read.

    Sorted by key letter; ties keep their left-to-right position.

    >>> column_order("ZEBRA")
    [4, 2, 1, 3, 0]
    """
    key = normalize_key(key)
    return sorted(range(len(key)), key=lambda i: (key[i], i))


def column_ranks(key: str) -> List[int]:
    """1-based read rank of each column, in key order."""
    ranks = [0] * len(normalize_key(key))
    for rank, col in enumerate(column_order(key), start=1):
        ranks[col] = rank
    return ranks


def column_lengths(text_length: int, num_cols: int) -> List[int]:
    """
    Number of letters in each column (key order) of a row-major grid.

    The first text_length % num_cols columns hold one letter more than
    the rest.
    """
    num_rows = -(-text_length // num_cols)
    short = num_rows * num_cols - text_length
    return [num_rows if col < num_cols - short else num_rows - 1
            for col in range(num_cols)]


@dataclass(frozen=True)
class TranspositionGrid:
    """
    The intermediate grid of an encode or decode step.

    Attributes:
        key: Normalized keyword
        order: Column indices in read order
        ranks: Read rank of each column (1-based, key order)
        rows: Grid rows; cells left empty are ''
    """
    key: str
    order: List[int]
    ranks: List[int]
    rows: List[List[str]]

    @property
    def num_rows(self) -> int:
        return len(self.rows)

    @property
    def num_cols(self) -> int:
        return len(self.key)

    def column(self, col: int) -> str:
        """Letters of one column, top to bottom."""
        return "".join(row[col] for row in self.rows)

    def read_columns(self) -> str:
        """Columns concatenated in rank order (the ciphertext)."""
        return "".join(self.column(col) for col in self.order)

    def read_rows(self) -> str:
        """Rows concatenated top to bottom (the plaintext)."""
        return "".join("".join(row) for row in self.rows)

    def render(self) -> str:
        """
        Text drawing of the grid.

        First line is the key, second the column ranks, then one line per
        row with empty cells shown as a middle dot.
        """
        width = max(2, len(str(self.num_cols)))
        lines = [
            " ".join(ch.rjust(width) for ch in self.key),
            " ".join(str(r).rjust(width) for r in self.ranks),
        ]
        for row in self.rows:
            lines.append(" ".join((ch or EMPTY_CELL).rjust(width) for ch in row))
        return "\n".join(lines)


def encode_grid(text: str, key: str) -> TranspositionGrid:
    """
    Build the padded plaintext grid.

    Args:
        text: Plaintext (non-letters are dropped)
        key: Keyword of at least two letters

    Returns:
        Grid with every row full
    """
    key = normalize_key(key)
    num_cols = len(key)
    plain = clean(text)
    padded = plain + FILLER * (-len(plain) % num_cols)
    rows = [list(padded[r:r + num_cols]) for r in range(0, len(padded), num_cols)]
    return TranspositionGrid(key=key, order=column_order(key),
                             ranks=column_ranks(key), rows=rows)


def decode_grid(text: str, key: str) -> TranspositionGrid:
    """
    Rebuild the plaintext grid from ciphertext.

    Columns are taken from the ciphertext in rank order, each taking as
    many letters as column_lengths assigns it.
    """
    key = normalize_key(key)
    num_cols = len(key)
    cipher = clean(text)
    order = column_order(key)
    lengths = column_lengths(len(cipher), num_cols)
    num_rows = max(lengths) if cipher else 0

    columns = {}
    pos = 0
    for col in order:
        columns[col] = cipher[pos:pos + lengths[col]]
        pos += lengths[col]

    rows = []
    for r in range(num_rows):
        rows.append([columns[c][r] if r < len(columns[c]) else ""
                     for c in range(num_cols)])
    return TranspositionGrid(key=key, order=order,
                             ranks=column_ranks(key), rows=rows)


def encode_with_grid(text: str, key: str) -> Tuple[TranspositionGrid, str]:
    """Encrypt, returning the padded grid along with the ciphertext."""
    grid = encode_grid(text, key)
    return grid, grid.read_columns()


def decode_with_grid(text: str, key: str) -> Tuple[TranspositionGrid, str]:
    """
    Decrypt, returning the rebuilt grid along with the plaintext.

    Trailing filler letters are stripped from the plaintext. A genuine
    trailing X in the message is stripped as well.
    """
    grid = decode_grid(text, key)
    return grid, grid.read_rows().rstrip(FILLER)


def transposition_encode(text: str, key: str) -> str:
    """
    Encrypt with columnar transposition.

    >>> transposition_encode("we are discovered", "zebra")
    'EODASREIERCEWDV'
    """
    return encode_with_grid(text, key)[1]


def transposition_decode(text: str, key: str) -> str:
    """Decrypt columnar transposition and strip trailing filler letters."""
    return decode_with_grid(text, key)[1]


class TranspositionCipher:
    """Columnar transposition with a fixed keyword."""

    def __init__(self, key: str):
        self._key = normalize_key(key)

    @property
    def key(self) -> str:
        return self._key

    @property
    def order(self) -> List[int]:
        return column_order(self._key)

    def encrypt(self, text: str) -> str:
        return transposition_encode(text, self._key)

    def decrypt(self, text: str) -> str:
        return transposition_decode(text, self._key)

    def __repr__(self) -> str:
        return f"TranspositionCipher(key={self._key!r})"
