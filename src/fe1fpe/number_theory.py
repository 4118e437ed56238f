"""
FE1FPE 模數分解模組

將模數 n 分解為 a * b，兩者盡量接近且 a >= b。
假設 n 主要由小質因數組成（FPE 常見的 n = 10^d 即是如此）。
"""

import logging
from functools import lru_cache

from fe1fpe.errors import UnfactorableModulus

logger = logging.getLogger(__name__)

MAX_PRIME = 65535


@lru_cache(maxsize=1)
def small_primes() -> tuple[int, ...]:
    """
    試除用的質數表

    包含所有 <= MAX_PRIME 的質數，以及大於 MAX_PRIME 的第一個質數 65537
    （逐一取「下一個質數」直到超過上限時，該質數也會被試除一次）。
    """
    limit = MAX_PRIME + 2  # 65537
    sieve = bytearray([1]) * (limit + 1)
    sieve[0] = sieve[1] = 0
    for i in range(2, int(limit ** 0.5) + 1):
        if sieve[i]:
            sieve[i * i :: i] = bytearray(len(range(i * i, limit + 1, i)))
    return tuple(i for i in range(limit + 1) if sieve[i])


def low_zero_bits(n: int) -> int:
    """n 末尾 0 bit 的個數；n <= 0 時回傳 0"""
    if n <= 0:
        return 0
    return (n & -n).bit_length() - 1


def factor(n: int) -> tuple[int, int]:
    """
    將 n 分解為 (a, b)，a * b == n 且 a >= b >= 1

    輪數安全條件為 2 + log_a(b)，a >= b 時固定為 3 輪。
    若 n 含有大於試除上限的質因數，餘數會整個併入其中一邊，
    得到非常不平衡的結果（例如 a = n, b = 1），正確性不受影響。
    """
    if n < 1:
        raise UnfactorableModulus(n)

    modulus = n
    n_low_zero = low_zero_bits(n)
    a = 1 << (n_low_zero // 2)
    b = 1 << (n_low_zero - n_low_zero // 2)
    n >>= n_low_zero

    for prime in small_primes():
        while n % prime == 0:
            a *= prime
            if a > b:
                a, b = b, a
            n //= prime
        if a > 1 and b > 1:
            break

    if a > b:
        a, b = b, a
    a *= n
    if a < b:
        a, b = b, a

    if a < 1 or b < 1:
        raise UnfactorableModulus(modulus)

    if b == 1 and modulus > 1:
        logger.warning("模數 %d 無法平衡分解，b = 1", modulus)
    logger.debug("factor(%d) -> a=%d, b=%d", modulus, a, b)
    return a, b
