"""
FE1FPE 設定

唯一的設定項為模數位元組長度上限，以不可變的 Settings 值
明確傳入每次呼叫，不使用可變的全域狀態。
"""

from __future__ import annotations

import os
from functools import lru_cache

from pydantic import BaseModel, ConfigDict, Field

# 一般 FPE 用於身分證號、卡號等，128 bits 已足夠
DEFAULT_MAX_MODULUS_BYTES = 128 // 8

ENV_MAX_MODULUS_BYTES = "FE1FPE_MAX_MODULUS_BYTES"


class Settings(BaseModel):
    model_config = ConfigDict(frozen=True)

    max_modulus_bytes: int = Field(
        default=DEFAULT_MAX_MODULUS_BYTES,
        ge=1,
        description="模數 big-endian 編碼允許的最大位元組數",
    )


@lru_cache(maxsize=1)
def load_settings() -> Settings:
    """從環境變數讀取設定，未設定時使用預設值"""
    raw = os.getenv(ENV_MAX_MODULUS_BYTES)
    if raw is None or not raw.strip():
        return Settings()
    return Settings(max_modulus_bytes=raw.strip())
