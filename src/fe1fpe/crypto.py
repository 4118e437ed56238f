"""
FE1FPE 加密/解密核心模組

使用 Format-Preserving Encryption (FPE) 的 FE1/FD1 方案，
在 [0, n) 空間內進行一對一映射，密文與明文落在同一範圍。
未指定模數時以輸入的十進位位數推得 n = 10^d。

注意：回傳值為整數，轉回文字時由呼叫端自行補足前導 0。
"""

from __future__ import annotations

from typing import Optional

from fe1fpe.config import Settings, load_settings
from fe1fpe.errors import OutOfRangeInput
from fe1fpe.feistel import fd1_decrypt, fe1_encrypt


def _check_int(name: str, value) -> None:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{name} 必須為整數，收到 {type(value).__name__}")


def _check_bytes(name: str, value) -> None:
    if not isinstance(value, (bytes, bytearray)):
        raise TypeError(f"{name} 必須為 bytes，收到 {type(value).__name__}")


def infer_modulus(value: int) -> int:
    """
    以十進位位數推得模數 10^d

    例如 12345 -> 10^5。輸入必須為非負整數。
    """
    _check_int("value", value)
    if value < 0:
        raise OutOfRangeInput(value, 10 ** len(str(-value)))
    return 10 ** len(str(value))


def _resolve(value: int, key, tweak, modulus: Optional[int], settings: Optional[Settings]):
    _check_int("value", value)
    _check_bytes("key", key)
    _check_bytes("tweak", tweak)
    if modulus is None:
        modulus = infer_modulus(value)
    else:
        _check_int("modulus", modulus)
    if settings is None:
        settings = load_settings()
    return modulus, bytes(key), bytes(tweak), settings.max_modulus_bytes


def encrypt(
    plaintext: int,
    key: bytes,
    tweak: bytes = b"",
    modulus: Optional[int] = None,
    settings: Optional[Settings] = None,
) -> int:
    """
    FE1 加密

    Args:
        plaintext: 要加密的整數，須滿足 0 <= plaintext < modulus
        key: 秘密金鑰
        tweak: 非秘密參數，類似 IV，解密時須使用相同值
        modulus: 數值範圍大小，例如 0~999 傳入 1000；省略時為 10^位數
        settings: 模數長度上限等設定；省略時使用 load_settings()

    Returns:
        [0, modulus) 內的密文整數
    """
    n, key, tweak, max_bytes = _resolve(plaintext, key, tweak, modulus, settings)
    return fe1_encrypt(n, plaintext, key, tweak, max_bytes)


def decrypt(
    ciphertext: int,
    key: bytes,
    tweak: bytes = b"",
    modulus: Optional[int] = None,
    settings: Optional[Settings] = None,
) -> int:
    """
    FD1 解密

    參數與 encrypt() 相同；省略 modulus 時以密文位數推得，
    因此呼叫端不可在解密前去掉密文的前導 0 後又以不同位數傳入。
    """
    n, key, tweak, max_bytes = _resolve(ciphertext, key, tweak, modulus, settings)
    return fd1_decrypt(n, ciphertext, key, tweak, max_bytes)
