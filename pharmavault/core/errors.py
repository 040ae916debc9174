class PharmaVaultError(Exception):
    """서비스 예외의 기본 클래스"""

    def __init__(self, code: str, message: str) -> None:
        super().__init__(message)
        self.code = code
        self.message = message


class InsufficientInputError(PharmaVaultError):
    """비교 가능한 의약품이 2개 미만일 때 발생"""

    def __init__(self, resolved: int) -> None:
        super().__init__(
            "CMP_INPUT_001", "At least 2 medicines are required for comparison"
        )
        self.resolved = resolved


class CatalogError(PharmaVaultError):
    """의약품 카탈로그 로드 실패 시 발생"""

    def __init__(self, path: str, message: str) -> None:
        super().__init__("CAT_LOAD_001", f"{path}: {message}")


class MedicineNotFoundError(PharmaVaultError):
    """카탈로그에 없는 의약품 조회 시 발생"""

    def __init__(self, medicine_id: str) -> None:
        super().__init__("CAT_LOOKUP_001", f"Medicine not found: {medicine_id}")
        self.medicine_id = medicine_id
