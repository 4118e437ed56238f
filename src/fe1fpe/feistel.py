"""
FE1FPE Feistel 網絡

FE1（加密）/ FD1（解密）非平衡 Feistel 結構，在 Z_n 內一對一映射。
n 分解為 a * b，每輪都保持 0 <= X < n。
"""

import logging

from fe1fpe.config import DEFAULT_MAX_MODULUS_BYTES
from fe1fpe.errors import InvalidRoundPrecondition, OutOfRangeInput, UnfactorableModulus
from fe1fpe.number_theory import factor
from fe1fpe.round_function import RoundFunction

logger = logging.getLogger(__name__)


def rounds(a: int, b: int) -> int:
    """
    安全輪數

    最少安全輪數為 2 + log_a(b)；a >= b 時 log_a(b) <= 1，3 輪即可。
    """
    if a < b:
        raise InvalidRoundPrecondition(a, b)
    return 3


def _check_range(n: int, x: int) -> None:
    if n < 1:
        raise UnfactorableModulus(n)
    if not 0 <= x < n:
        raise OutOfRangeInput(x, n)


def _setup(n, x, key, tweak, max_modulus_bytes):
    _check_range(n, x)
    F = RoundFunction(key, n, tweak, max_modulus_bytes)
    a, b = factor(n)
    r = rounds(a, b)
    logger.debug("Feistel setup: n=%d, a=%d, b=%d, rounds=%d", n, a, b, r)
    return F, a, b, r


def fe1_encrypt(
    n: int,
    plaintext: int,
    key: bytes,
    tweak: bytes,
    max_modulus_bytes: int = DEFAULT_MAX_MODULUS_BYTES,
) -> int:
    """Z_n 上的 FE1 加密"""
    F, a, b, r = _setup(n, plaintext, key, tweak, max_modulus_bytes)

    X = plaintext
    for i in range(r):
        L, R = divmod(X, b)
        W = (L + F(i, R)) % a
        X = a * R + W

    return X


def fd1_decrypt(
    n: int,
    ciphertext: int,
    key: bytes,
    tweak: bytes,
    max_modulus_bytes: int = DEFAULT_MAX_MODULUS_BYTES,
) -> int:
    """Z_n 上的 FD1 解密：輪序 r-1 .. 0 反向執行 FE1"""
    F, a, b, r = _setup(n, ciphertext, key, tweak, max_modulus_bytes)

    X = ciphertext
    for i in range(r):
        R, W = divmod(X, a)
        L = (W - F(r - i - 1, R)) % a
        X = b * L + R

    return X
