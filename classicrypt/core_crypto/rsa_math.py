"""
RSA Demonstrator

Textbook RSA built from two small user-chosen primes:
- Key generation: n = p*q, phi = (p-1)(q-1), smallest valid e, d = e^-1 mod phi
- Encryption:     c = m^e mod n
- Decryption:     m = c^d mod n

There is no padding and the primes are tiny, so this is for learning the
arithmetic only. Keys are plain values: generate one, then pass it (or its
numbers) to encrypt/decrypt.
"""

from dataclasses import dataclass
from typing import Dict, Tuple

from .errors import InvalidKeyError, InvalidNumberError, MessageTooLargeError
from .modular import gcd, is_prime, mod_exp, mod_inverse


def find_public_exponent(phi: int) -> int:
    """
    Smallest e >= 2 with gcd(e, phi) = 1.

    The search always stops by phi + 1, which is coprime with phi. For
    phi = 2 (p, q = 2, 3) that gives e = 3.

    Raises:
        InvalidNumberError: If phi < 1
    """
    if phi < 1:
        raise InvalidNumberError("phi must be positive")
    e = 2
    while gcd(e, phi) != 1:
        e += 1
    return e


@dataclass(frozen=True)
class RSAKeyPair:
    """
    A generated RSA key.

    Example:
        >>> key = generate_rsa_keypair(3, 11)
        >>> (key.n, key.phi, key.e, key.d)
        (33, 20, 3, 7)
        >>> key.decrypt(key.encrypt(5))
        5
    """
    p: int
    q: int
    n: int
    phi: int
    e: int
    d: int

    @property
    def public_key(self) -> Tuple[int, int]:
        """Public key (e, n)."""
        return self.e, self.n

    @property
    def private_key(self) -> Tuple[int, int]:
        """Private key (d, n)."""
        return self.d, self.n

    def encrypt(self, message: int) -> int:
        return rsa_encrypt(message, self.e, self.n)

    def decrypt(self, ciphertext: int) -> int:
        return rsa_decrypt(ciphertext, self.d, self.n)

    def as_dict(self) -> Dict[str, int]:
        return {
            'p': self.p,
            'q': self.q,
            'n': self.n,
            'phi': self.phi,
            'e': self.e,
            'd': self.d,
        }

    def __str__(self) -> str:
        return (f"n = {self.n}\nφ(n) = {self.phi}\n"
                f"e (public) = {self.e}\nd (private) = {self.d}")


def generate_rsa_keypair(p: int, q: int) -> RSAKeyPair:
    """
    Generate an RSA key pair from two primes.

    Args:
        p: First prime
        q: Second prime, different from p

    Returns:
        RSAKeyPair with n, phi, e and d filled in

    Raises:
        InvalidKeyError: If p or q is not prime, or p == q
    """
    if not is_prime(p) or not is_prime(q):
        raise InvalidKeyError("p and q must both be prime numbers.")
    if p == q:
        raise InvalidKeyError("p and q must be distinct.")

    n = p * q

    # Euler's totient: φ(n) = (p-1)(q-1)
    phi = (p - 1) * (q - 1)

    e = find_public_exponent(phi)

    # d = e^(-1) mod φ(n)
    d = mod_inverse(e, phi)

    return RSAKeyPair(p=p, q=q, n=n, phi=phi, e=e, d=d)


def rsa_encrypt(message: int, e: int, n: int) -> int:
    """
    RSA encryption of a message.

    Computes ciphertext = message^e mod n

    Args:
        message: Integer message, 0 <= message < n
        e: Public exponent
        n: Modulus

    Returns:
        Encrypted ciphertext as integer

    Raises:
        MessageTooLargeError: If message >= n
        InvalidNumberError: If message is negative or n <= 0
    """
    if n <= 0:
        raise InvalidNumberError("Modulus n must be positive")
    if message < 0:
        raise InvalidNumberError("Message must be non-negative")
    if message >= n:
        raise MessageTooLargeError("M must be < n")
    return mod_exp(message, e, n)


def rsa_decrypt(ciphertext: int, d: int, n: int) -> int:
    """
    RSA decryption of a ciphertext.

    Computes message = ciphertext^d mod n. Any integer is accepted as
    ciphertext; it is reduced mod n.
    """
    return mod_exp(ciphertext, d, n)
