"""
FE1FPE Feistel 輪函數

以 HMAC-SHA256 作為偽隨機函數，綁定 (key, n, tweak)。
每次加解密建立一個新實例，不可跨呼叫或跨執行緒共用。
"""

from Crypto.Hash import HMAC, SHA256

from fe1fpe.config import DEFAULT_MAX_MODULUS_BYTES
from fe1fpe.errors import ModulusTooLarge


def encode_int(value: int) -> bytes:
    """
    非負整數的 big-endian 二補數編碼（含符號位元組）

    0 -> b"\\x00"，128 -> b"\\x00\\x80"，1000 -> b"\\x03\\xe8"
    """
    return value.to_bytes(value.bit_length() // 8 + 1, "big")


def _length_prefixed(data: bytes) -> bytes:
    return bytes([len(data) & 0xFF]) + data


class RoundFunction:
    """綁定 (key, n, tweak) 的 HMAC-SHA256 輪函數，每次加解密各自建立"""

    def __init__(
        self,
        key: bytes,
        n: int,
        tweak: bytes,
        max_modulus_bytes: int = DEFAULT_MAX_MODULUS_BYTES,
    ):
        n_bin = encode_int(n)
        if len(n_bin) > max_modulus_bytes:
            raise ModulusTooLarge(len(n_bin), max_modulus_bytes)

        self._mac = HMAC.new(key, digestmod=SHA256)
        self._mac_n_t = self._digest(_length_prefixed(n_bin) + _length_prefixed(tweak))

    def _digest(self, data: bytes) -> bytes:
        # 每次從剛以金鑰初始化的狀態複製，等同 reset
        mac = self._mac.copy()
        mac.update(data)
        return mac.digest()

    def F(self, round_no: int, R: int) -> int:
        """第 round_no 輪對右半部 R 的偽隨機輸出（非負整數）"""
        data = self._mac_n_t + bytes([round_no & 0xFF]) + _length_prefixed(encode_int(R))
        return int.from_bytes(self._digest(data), "big")

    __call__ = F
