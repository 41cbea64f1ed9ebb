"""
Error kinds shared by the cipher and number-theory modules.

Every failure raised by the core is a CipherError (a ValueError) tagged with
an ErrorKind, so callers can either catch ValueError or switch on the kind.
"""

from enum import Enum


class ErrorKind(Enum):
    """Tags for recoverable cipher failures."""
    EMPTY_INPUT = "empty_input"
    INVALID_KEY = "invalid_key"
    INVALID_NUMBER = "invalid_number"
    MESSAGE_TOO_LARGE = "message_too_large"
    NO_INVERSE = "no_inverse"


class CipherError(ValueError):
    """Base class for all cipher failures."""
    kind: ErrorKind = ErrorKind.INVALID_NUMBER

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class EmptyInputError(CipherError):
    """Raised when an input holds no usable letters."""
    kind = ErrorKind.EMPTY_INPUT


class InvalidKeyError(CipherError):
    """Raised when a key fails validation."""
    kind = ErrorKind.INVALID_KEY


class InvalidNumberError(CipherError):
    """Raised when a numeric field can't be parsed or is out of range."""
    kind = ErrorKind.INVALID_NUMBER


class MessageTooLargeError(CipherError):
    """Raised when an RSA message is not a residue mod n."""
    kind = ErrorKind.MESSAGE_TOO_LARGE


class NoInverseError(CipherError):
    """Raised when a modular inverse doesn't exist."""
    kind = ErrorKind.NO_INVERSE
