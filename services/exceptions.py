"""
services/exceptions.py

- 성적 평균 산출 파이프라인에서 사용하는 예외 분류
- middlewares/error_handler.py 에서 HTTP 상태코드 + 표준 에러 응답으로 변환됨
"""

from typing import Optional


class GradingError(Exception):
    """파이프라인 예외의 공통 베이스 (상태코드/에러코드/메시지 보유)"""

    status_code = 500
    error_code = "INTERNAL_ERROR"

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(GradingError):
    """필수 ID 누락/형식 오류 → 호출자가 요청을 수정해야 함"""

    status_code = 400
    error_code = "VALIDATION_ERROR"


class NotFoundError(GradingError):
    """참조 대상(그룹/구간/연도 등)이 없거나 조회 결과가 0건"""

    status_code = 404
    error_code = "NOT_FOUND"


class StoreError(GradingError):
    """DB 처리 실패. 상세 내용은 서버 로그에만 남기고 응답에는 일반 메시지만 노출"""

    status_code = 500
    error_code = "STORE_ERROR"
    public_message = "서버 내부 오류가 발생했습니다. 잠시 후 다시 시도해주세요."

    def __init__(self, operation: str, details: Optional[str] = None):
        super().__init__(self.public_message)
        self.operation = operation
        self.details = details


def require_ids(**ids) -> None:
    """전달된 ID 중 비어있는(None/0/빈 문자열) 값이 있으면 ValidationError"""
    missing = [name for name, value in ids.items() if not value]
    if missing:
        raise ValidationError(f"필수 파라미터가 누락되었습니다: {', '.join(missing)}")
