"""FE1/FD1 Feistel 網絡測試"""

import pytest
from fe1fpe.errors import (
    InvalidRoundPrecondition,
    ModulusTooLarge,
    OutOfRangeInput,
    UnfactorableModulus,
)
from fe1fpe.feistel import fd1_decrypt, fe1_encrypt, rounds


KEY = b"feistel-test-key"
TWEAK = b"tweak"


class TestRounds:
    def test_three_rounds(self):
        assert rounds(250, 4) == 3
        assert rounds(3, 3) == 3

    def test_a_less_than_b(self):
        with pytest.raises(InvalidRoundPrecondition):
            rounds(2, 3)


class TestFeistelRoundtrip:
    def test_exhaustive_1000(self):
        for x in range(1000):
            c = fe1_encrypt(1000, x, KEY, TWEAK)
            assert 0 <= c < 1000
            assert fd1_decrypt(1000, c, KEY, TWEAK) == x

    def test_permutation(self):
        """[0, n) 內一對一映射"""
        for n in (10, 97, 360, 1024):
            outputs = {fe1_encrypt(n, x, KEY, TWEAK) for x in range(n)}
            assert outputs == set(range(n))

    def test_unbalanced_moduli_are_permutations(self):
        """b 很小（甚至 b = 1）時每個輸出仍落在 [0, n) 且一對一"""
        for n in (1013, 2 * 1009, 3 * 1009):
            outputs = [fe1_encrypt(n, x, KEY, TWEAK) for x in range(n)]
            assert sorted(outputs) == list(range(n))
            for x, c in zip(range(0, n, 97), outputs[::97]):
                assert fd1_decrypt(n, c, KEY, TWEAK) == x

    def test_prime_modulus(self):
        for x in range(7):
            c = fe1_encrypt(7, x, KEY, TWEAK)
            assert fd1_decrypt(7, c, KEY, TWEAK) == x

    def test_large_modulus(self):
        n = 10**30
        for x in (0, 1, 10**29 + 7, n - 1):
            c = fe1_encrypt(n, x, KEY, TWEAK)
            assert 0 <= c < n
            assert fd1_decrypt(n, c, KEY, TWEAK) == x

    def test_not_identity(self):
        changed = sum(fe1_encrypt(10**6, x, KEY, TWEAK) != x for x in range(50))
        assert changed >= 48

    def test_wrong_tweak_does_not_decrypt(self):
        wrong = 0
        for x in range(50):
            c = fe1_encrypt(10**6, x, KEY, TWEAK)
            if fd1_decrypt(10**6, c, KEY, b"other") != x:
                wrong += 1
        assert wrong >= 48


class TestPreconditions:
    def test_out_of_range(self):
        with pytest.raises(OutOfRangeInput) as exc:
            fe1_encrypt(1000, 1000, KEY, TWEAK)
        assert exc.value.value == 1000
        assert exc.value.modulus == 1000
        with pytest.raises(OutOfRangeInput):
            fd1_decrypt(1000, -1, KEY, TWEAK)

    def test_zero_modulus(self):
        with pytest.raises(UnfactorableModulus):
            fe1_encrypt(0, 0, KEY, TWEAK)

    def test_modulus_limit_checked_before_rounds(self):
        with pytest.raises(ModulusTooLarge):
            fe1_encrypt(2**64, 0, KEY, TWEAK, max_modulus_bytes=1)
        with pytest.raises(ModulusTooLarge):
            fd1_decrypt(2**64, 0, KEY, TWEAK, max_modulus_bytes=1)
