# Ciphers Module
"""
Classical cipher implementations including:
- Caesar cipher (shift 3)
- General shift cipher with brute force
- Affine cipher with brute force
- Columnar transposition
"""

# Lazy imports to avoid RuntimeWarning when running module directly
def __getattr__(name):
    """Lazy import to avoid circular import issues."""
    from . import substitution, transposition
    for module in (substitution, transposition):
        if hasattr(module, name):
            return getattr(module, name)
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")

__all__ = [
    'Mode',
    'BruteForceCandidate',
    'CaesarCipher',
    'ShiftCipher',
    'AffineCipher',
    'TranspositionCipher',
    'TranspositionGrid',
    'caesar_encode',
    'caesar_decode',
    'shift_encode',
    'shift_decode',
    'shift_brute_force',
    'affine_encode',
    'affine_decode',
    'affine_brute_force',
    'transposition_encode',
    'transposition_decode',
    'encode_with_grid',
    'decode_with_grid',
]
