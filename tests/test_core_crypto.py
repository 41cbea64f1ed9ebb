"""
Unit tests for Core Crypto modules.

Tests:
- Alphabet codec
- Modular arithmetic
- RSA key generation, encryption, decryption
"""

import pytest
from classicrypt.core_crypto.alphabet import (
    LATIN, Alphabet, encode, decode, clean, alphabet_table
)
from classicrypt.core_crypto.modular import (
    norm_mod, gcd, units, mod_inverse_brute, extended_gcd, mod_inverse,
    is_prime, mod_exp
)
from classicrypt.core_crypto.rsa_math import (
    RSAKeyPair, generate_rsa_keypair, find_public_exponent,
    rsa_encrypt, rsa_decrypt
)


class TestAlphabet:
    """Unit tests for the alphabet codec."""

    def test_encode_filters_and_upper_cases(self):
        """Non-letters are dropped, case is folded."""
        assert encode("Hi, Bob!") == [7, 8, 1, 14, 1]

    def test_encode_no_letters(self):
        """Input without letters gives an empty sequence."""
        assert encode("123 !?") == []
        assert encode("") == []

    def test_encode_ignores_non_ascii_letters(self):
        assert encode("café") == [2, 0, 5]

    def test_decode(self):
        assert decode([7, 4, 11, 11, 14]) == "HELLO"

    def test_decode_normalizes_out_of_range(self):
        """Negative and large values wrap around."""
        assert decode([-1, 26, 27, -27]) == "ZABZ"

    def test_clean(self):
        assert clean("attack at dawn!") == "ATTACKATDAWN"

    def test_table(self):
        table = alphabet_table()
        assert len(table) == 26
        assert table[0] == ("A", "00")
        assert table[25] == ("Z", "25")

    def test_custom_alphabet(self):
        """Another alphabet can be plugged in."""
        binary = Alphabet("AB")
        assert binary.encode("abcab") == [0, 1, 0, 1]
        assert binary.decode([0, 1, 2, 3]) == "ABAB"

    def test_duplicate_letters_rejected(self):
        with pytest.raises(ValueError):
            Alphabet("AAB")

    def test_latin_size(self):
        assert LATIN.size == 26


class TestModularArithmetic:
    """Unit tests for modular arithmetic."""

    def test_norm_mod_negative(self):
        assert norm_mod(-1, 26) == 25
        assert norm_mod(-27, 26) == 25

    def test_norm_mod_range(self):
        """Result is in [0, m) and congruent to n."""
        for n in range(-100, 100, 7):
            for m in (1, 2, 7, 26):
                r = norm_mod(n, m)
                assert 0 <= r < m
                assert (n - r) % m == 0

    def test_gcd(self):
        """Test GCD calculation."""
        assert gcd(48, 18) == 6
        assert gcd(17, 13) == 1
        assert gcd(-12, 8) == 4
        assert gcd(0, 5) == 5

    def test_units_of_26(self):
        assert units(26) == [1, 3, 5, 7, 9, 11, 15, 17, 19, 21, 23, 25]

    def test_mod_inverse_brute(self):
        assert mod_inverse_brute(3, 26) == 9
        assert mod_inverse_brute(25, 26) == 25

    def test_mod_inverse_brute_none(self):
        """No inverse gives the None sentinel."""
        assert mod_inverse_brute(2, 26) is None
        assert mod_inverse_brute(13, 26) is None

    def test_extended_gcd(self):
        g, x, y = extended_gcd(240, 46)
        assert g == 2
        assert 240 * x + 46 * y == g

    def test_extended_gcd_large_inputs(self):
        """Consecutive Fibonacci numbers take the most steps; no recursion limit."""
        fib = [0, 1]
        while len(fib) < 3000:
            fib.append(fib[-1] + fib[-2])
        a, b = fib[-1], fib[-2]
        g, x, y = extended_gcd(a, b)
        assert g == 1
        assert a * x + b * y == 1

    def test_mod_inverse(self):
        """Test modular inverse."""
        # 3 * 7 ≡ 1 (mod 10) -> inverse of 3 mod 10 is 7
        assert mod_inverse(3, 10) == 7
        assert mod_inverse(17, 3120) == 2753

    def test_mod_inverse_agrees_with_brute(self):
        for a in units(26):
            assert mod_inverse(a, 26) == mod_inverse_brute(a, 26)

    def test_is_prime_small(self):
        for p in (2, 3, 5, 7, 11, 13, 97, 101, 7919):
            assert is_prime(p), f"{p} should be prime"

    def test_is_prime_composites(self):
        for n in (4, 6, 8, 9, 15, 25, 49, 100, 7917):
            assert not is_prime(n), f"{n} should not be prime"

    def test_is_prime_below_two(self):
        for n in (-7, -1, 0, 1):
            assert not is_prime(n)

    def test_mod_exp_basic(self):
        """Test modular exponentiation."""
        # 2^10 mod 1000 = 1024 mod 1000 = 24
        assert mod_exp(2, 10, 1000) == 24
        assert mod_exp(3, 7, 13) == 3

    def test_mod_exp_edge_cases(self):
        assert mod_exp(7, 0, 13) == 1
        assert mod_exp(0, 5, 13) == 0
        assert mod_exp(5, 3, 1) == 0

    def test_mod_exp_large(self):
        """Big exponents and moduli stay exact."""
        modulus = 2 ** 127 - 1
        assert mod_exp(3, 10 ** 30, modulus) == pow(3, 10 ** 30, modulus)
        # Fermat's little theorem: a^(p-1) ≡ 1 (mod p) for prime p
        assert mod_exp(2, 100, 101) == 1

    def test_mod_exp_negative_base(self):
        assert mod_exp(-2, 3, 7) == norm_mod(-8, 7)


class TestRSAMath:
    """Unit tests for RSA Math."""

    def test_textbook_key(self):
        """p=3, q=11 gives n=33, phi=20, e=3, d=7."""
        key = generate_rsa_keypair(3, 11)
        assert (key.n, key.phi, key.e, key.d) == (33, 20, 3, 7)

    def test_textbook_roundtrip(self):
        key = generate_rsa_keypair(3, 11)
        c = rsa_encrypt(5, key.e, key.n)
        assert c == 26
        assert rsa_decrypt(c, key.d, key.n) == 5

    def test_every_message_roundtrips(self):
        key = generate_rsa_keypair(61, 53)
        for m in range(key.n):
            assert key.decrypt(key.encrypt(m)) == m

    def test_ed_congruence(self):
        for p, q in [(5, 7), (11, 13), (61, 53), (101, 113)]:
            key = generate_rsa_keypair(p, q)
            assert (key.e * key.d) % key.phi == 1
            assert gcd(key.e, key.phi) == 1

    def test_smallest_public_exponent(self):
        assert find_public_exponent(20) == 3
        assert find_public_exponent(3120) == 7
        assert find_public_exponent(4) == 3
        assert find_public_exponent(2) == 3
        assert find_public_exponent(1) == 2

    def test_order_of_primes_irrelevant(self):
        assert generate_rsa_keypair(3, 11).as_dict()['n'] == generate_rsa_keypair(11, 3).n

    def test_key_properties(self):
        key = generate_rsa_keypair(3, 11)
        assert key.public_key == (3, 33)
        assert key.private_key == (7, 33)
        assert key.as_dict() == {'p': 3, 'q': 11, 'n': 33, 'phi': 20, 'e': 3, 'd': 7}

    def test_key_is_immutable(self):
        key = generate_rsa_keypair(3, 11)
        with pytest.raises(AttributeError):
            key.e = 5

    def test_decrypt_reduces_ciphertext(self):
        """Ciphertext is not bounds-checked."""
        key = generate_rsa_keypair(3, 11)
        assert rsa_decrypt(26 + 33, key.d, key.n) == 5

    def test_new_key_independent(self):
        """Generating a key leaves previously generated keys usable."""
        first = generate_rsa_keypair(3, 11)
        second = generate_rsa_keypair(61, 53)
        assert first.decrypt(first.encrypt(7)) == 7
        assert second.decrypt(second.encrypt(7)) == 7
        assert isinstance(first, RSAKeyPair)
