"""
Cipher Service

Front door for user-facing callers (CLI, web page, notebook). Takes raw
form values, validates them, runs the cipher and returns a result dict:

    {'success': True,  'message': ..., 'result': ...}
    {'success': False, 'message': ..., 'error': 'invalid_key'}

No exception escapes a service method. Every call is recorded to the
EventLogger if one is attached.
"""

import re
from typing import Any, Dict, Optional, Union

from ..ciphers.substitution import (
    Mode, CaesarCipher, ShiftCipher, AffineCipher,
    shift_brute_force, affine_brute_force,
)
from ..ciphers.transposition import (
    TranspositionCipher, encode_with_grid, decode_with_grid,
)
from ..core_crypto.alphabet import encode
from ..core_crypto.errors import CipherError, EmptyInputError, InvalidNumberError
from ..core_crypto.rsa_math import generate_rsa_keypair, rsa_encrypt, rsa_decrypt
from .event_logger import EventLogger


NumberInput = Union[int, str]

_INT_PATTERN = re.compile(r'\s*([+-]?[0-9]+)')

_MODE_ALIASES = {
    'enc': Mode.ENCODE,
    'encode': Mode.ENCODE,
    'encrypt': Mode.ENCODE,
    'dec': Mode.DECODE,
    'decode': Mode.DECODE,
    'decrypt': Mode.DECODE,
}


def parse_int(value: NumberInput, field_name: str = "value") -> int:
    """
    Parse an integer form field.

    Strings are read like a lenient form parser: surrounding whitespace
    and trailing junk are ignored ("12 " and "12abc" both give 12).

    Raises:
        InvalidNumberError: If no integer can be read
    """
    if isinstance(value, bool):
        raise InvalidNumberError(f"Please enter a valid {field_name}.")
    if isinstance(value, int):
        return value
    if isinstance(value, str):
        match = _INT_PATTERN.match(value)
        if match:
            return int(match.group(1))
    raise InvalidNumberError(f"Please enter a valid {field_name}.")


def parse_mode(mode: Union[Mode, str]) -> Mode:
    """Accept a Mode or one of 'enc'/'encode'/'encrypt'/'dec'/..."""
    if isinstance(mode, Mode):
        return mode
    try:
        return _MODE_ALIASES[str(mode).strip().lower()]
    except KeyError:
        raise ValueError(f"Unknown mode: {mode!r}") from None


def require_text(text: str) -> str:
    """
    Trim text and make sure it holds at least one letter.

    Raises:
        EmptyInputError: If the text is blank or has no letters
    """
    text = (text or "").strip()
    if not text:
        raise EmptyInputError("Please enter some text.")
    if not encode(text):
        raise EmptyInputError("Input contains no letters.")
    return text


def _ok(message: str, **fields: Any) -> Dict[str, Any]:
    return {'success': True, 'message': message, **fields}


class CipherService:
    """
    Validated entry points for every cipher operation.

    Example:
        >>> service = CipherService()
        >>> service.caesar("hello", "enc")['result']
        'KHOOR'
        >>> service.affine("hello", "enc", a=2, b=1)['error']
        'invalid_key'
    """

    def __init__(self, logger: Optional[EventLogger] = None):
        self._logger = logger

    @property
    def logger(self) -> Optional[EventLogger]:
        return self._logger

    def _fail(self, cipher: str, operation: str, exc: CipherError) -> Dict[str, Any]:
        if self._logger:
            self._logger.log_failure(cipher, operation, exc.kind.value)
        return {'success': False, 'message': exc.message, 'error': exc.kind.value}

    def _log_cipher(self, cipher: str, mode: Mode, text: str,
                    key: Optional[Dict[str, Any]] = None) -> None:
        if self._logger:
            self._logger.log_cipher(cipher, mode is Mode.ENCODE, text, key)

    # ========================================================================
    # Substitution ciphers
    # ========================================================================

    def caesar(self, text: str, mode: Union[Mode, str]) -> Dict[str, Any]:
        """Caesar cipher (k = 3)."""
        mode = parse_mode(mode)
        try:
            text = require_text(text)
        except CipherError as exc:
            return self._fail("caesar", mode.value, exc)

        result = CaesarCipher().apply(text, mode)
        self._log_cipher("caesar", mode, text)
        return _ok("Caesar cipher applied", result=result)

    def shift(self, text: str, mode: Union[Mode, str], k: NumberInput) -> Dict[str, Any]:
        """General shift cipher with key k."""
        mode = parse_mode(mode)
        try:
            text = require_text(text)
            key = parse_int(k, "key")
        except CipherError as exc:
            return self._fail("shift", mode.value, exc)

        result = ShiftCipher(key).apply(text, mode)
        self._log_cipher("shift", mode, text, {'k': key})
        return _ok("Shift cipher applied", result=result)

    def affine(self, text: str, mode: Union[Mode, str],
               a: NumberInput, b: NumberInput) -> Dict[str, Any]:
        """Affine cipher with key (a, b)."""
        mode = parse_mode(mode)
        try:
            text = require_text(text)
            key_a = parse_int(a, "key a")
            key_b = parse_int(b, "key b")
            cipher = AffineCipher(key_a, key_b)
        except CipherError as exc:
            return self._fail("affine", mode.value, exc)

        result = cipher.apply(text, mode)
        self._log_cipher("affine", mode, text, {'a': key_a, 'b': key_b})
        return _ok("Affine cipher applied", result=result)

    def shift_brute_force(self, text: str) -> Dict[str, Any]:
        """All 26 shift decryptions of text."""
        try:
            text = require_text(text)
        except CipherError as exc:
            return self._fail("shift", "brute_force", exc)

        candidates = [
            {'label': c.label, 'key': {'k': c.key[0]}, 'text': c.text}
            for c in shift_brute_force(text)
        ]
        if self._logger:
            self._logger.log_brute_force("shift", text, len(candidates))
        return _ok(f"{len(candidates)} candidates", candidates=candidates)

    def affine_brute_force(self, text: str) -> Dict[str, Any]:
        """All 312 affine decryptions of text."""
        try:
            text = require_text(text)
        except CipherError as exc:
            return self._fail("affine", "brute_force", exc)

        candidates = [
            {'label': c.label, 'key': {'a': c.key[0], 'b': c.key[1]}, 'text': c.text}
            for c in affine_brute_force(text)
        ]
        if self._logger:
            self._logger.log_brute_force("affine", text, len(candidates))
        return _ok(f"{len(candidates)} candidates", candidates=candidates)

    # ========================================================================
    # Transposition
    # ========================================================================

    def transposition(self, text: str, mode: Union[Mode, str], key: str) -> Dict[str, Any]:
        """
        Columnar transposition.

        The result also carries 'grid', the rendered intermediate grid.
        """
        mode = parse_mode(mode)
        try:
            text = require_text(text)
            cipher = TranspositionCipher(key or "")
        except CipherError as exc:
            return self._fail("transposition", mode.value, exc)

        if mode is Mode.ENCODE:
            grid, result = encode_with_grid(text, cipher.key)
        else:
            grid, result = decode_with_grid(text, cipher.key)

        self._log_cipher("transposition", mode, text, {'key': cipher.key})
        return _ok("Transposition applied", result=result, grid=grid.render())

    # ========================================================================
    # RSA
    # ========================================================================

    def rsa_generate(self, p: NumberInput, q: NumberInput) -> Dict[str, Any]:
        """
        Generate an RSA key from primes p and q.

        The caller keeps the returned key and passes its numbers to
        rsa_encrypt / rsa_decrypt.
        """
        try:
            key = generate_rsa_keypair(parse_int(p, "p"), parse_int(q, "q"))
        except CipherError as exc:
            return self._fail("rsa", "keygen", exc)

        if self._logger:
            self._logger.log_rsa_keygen(key.n, key.e)
        return _ok("Key generated", key=key.as_dict())

    def rsa_encrypt(self, m: NumberInput, e: NumberInput, n: NumberInput) -> Dict[str, Any]:
        """Encrypt message m with public key (e, n)."""
        try:
            modulus = parse_int(n, "n")
            c = rsa_encrypt(parse_int(m, "message"), parse_int(e, "e"), modulus)
        except CipherError as exc:
            return self._fail("rsa", "encrypt", exc)

        if self._logger:
            self._logger.log_rsa(True, modulus)
        return _ok("Message encrypted", result=c)

    def rsa_decrypt(self, c: NumberInput, d: NumberInput, n: NumberInput) -> Dict[str, Any]:
        """Decrypt ciphertext c with private key (d, n)."""
        try:
            modulus = parse_int(n, "n")
            m = rsa_decrypt(parse_int(c, "ciphertext"), parse_int(d, "d"), modulus)
        except CipherError as exc:
            return self._fail("rsa", "decrypt", exc)

        if self._logger:
            self._logger.log_rsa(False, modulus)
        return _ok("Ciphertext decrypted", result=m)
