"""
FE1FPE 錯誤類型

所有錯誤皆繼承 FPEError（同時為 ValueError），
每一種錯誤都會中止當次加解密，不會回傳部分結果。
"""


class FPEError(ValueError):
    """FE1/FD1 加解密錯誤的基底類別"""


class ModulusTooLarge(FPEError):
    """模數的位元組編碼超過設定上限"""

    def __init__(self, modulus_bytes: int, limit: int):
        self.modulus_bytes = modulus_bytes
        self.limit = limit
        super().__init__(f"模數過大：編碼為 {modulus_bytes} bytes，上限 {limit} bytes")


class UnfactorableModulus(FPEError):
    """無法將模數分解為 a, b >= 1"""

    def __init__(self, modulus: int):
        self.modulus = modulus
        super().__init__(f"無法分解模數: {modulus}")


class InvalidRoundPrecondition(FPEError):
    """計算輪數時發現 a < b"""

    def __init__(self, a: int, b: int):
        self.a = a
        self.b = b
        super().__init__(f"輪數前置條件不成立：a={a} < b={b}")


class OutOfRangeInput(FPEError):
    """明文/密文不在 [0, n) 範圍內"""

    def __init__(self, value: int, modulus: int):
        self.value = value
        self.modulus = modulus
        super().__init__(f"輸入超出範圍：{value} 不在 [0, {modulus}) 之內")
