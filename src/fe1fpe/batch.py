"""
FE1FPE 批次加密/解密模組

對多個整數逐一加解密，每項回傳一筆結果紀錄，
單項失敗不會中斷整批，也不會以其他值代替。
"""

from __future__ import annotations

import logging
from typing import Callable, Iterable, Optional

from fe1fpe.config import Settings, load_settings
from fe1fpe.crypto import decrypt, encrypt
from fe1fpe.errors import FPEError

logger = logging.getLogger(__name__)


def _run_batch(
    transform: Callable[..., int],
    values: Iterable[int],
    key: bytes,
    tweak: bytes,
    modulus: Optional[int],
    settings: Optional[Settings],
) -> list[dict]:
    if settings is None:
        settings = load_settings()

    results = []
    for value in values:
        result = {
            "input": value,
            "output": None,
            "success": False,
            "error": None,
            "error_kind": None,
        }
        try:
            result["output"] = transform(
                value, key, tweak, modulus=modulus, settings=settings
            )
            result["success"] = True
        except FPEError as e:
            result["error"] = str(e)
            result["error_kind"] = type(e).__name__

        results.append(result)

    failed = sum(1 for r in results if not r["success"])
    if failed:
        logger.info("批次處理完成：%d 筆，失敗 %d 筆", len(results), failed)
    return results


def encrypt_many(
    values: Iterable[int],
    key: bytes,
    tweak: bytes = b"",
    modulus: Optional[int] = None,
    settings: Optional[Settings] = None,
) -> list[dict]:
    """
    批次 FE1 加密

    Args:
        values: 要加密的整數
        key: 秘密金鑰
        tweak: 非秘密參數
        modulus: 共用模數；省略時每項各自以位數推得
        settings: 設定；省略時使用 load_settings()

    Returns:
        處理結果列表，每項包含:
        - input, output, success
        - error, error_kind (錯誤類別名稱，例如 "OutOfRangeInput")
    """
    return _run_batch(encrypt, values, key, tweak, modulus, settings)


def decrypt_many(
    values: Iterable[int],
    key: bytes,
    tweak: bytes = b"",
    modulus: Optional[int] = None,
    settings: Optional[Settings] = None,
) -> list[dict]:
    """批次 FD1 解密，結果格式與 encrypt_many() 相同"""
    return _run_batch(decrypt, values, key, tweak, modulus, settings)
