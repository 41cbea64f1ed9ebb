# Core Cryptography Module
"""
Core building blocks including:
- Alphabet codec (letters <-> 0..25)
- Modular arithmetic (GCD, inverses, primality, modular exponentiation)
- RSA key generation, encryption and decryption
- Error kinds shared by every cipher
"""
