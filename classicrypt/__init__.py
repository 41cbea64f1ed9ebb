# ClassiCrypt
"""
Classical ciphers and a small RSA demonstrator, for teaching.

Subpackages:
- core_crypto: alphabet codec, modular arithmetic, RSA, error kinds
- ciphers: Caesar, shift, affine and columnar transposition
- integration: validated service layer and audit logging
"""

__version__ = "1.0.0"
