"""
schemas/common.py

- 프로젝트 전반에서 재사용할 공용 스키마/응답 헬퍼 모음
- Pydantic v2 기준
- 포함 내용:
  1) 에러 응답 표준: ErrorDetail, ErrorResponse, error_body()
  2) 성공 응답 래퍼: success()
  3) 빈 조회 결과(soft empty) 응답: not_found()
"""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Any, Optional

from fastapi.responses import JSONResponse
from pydantic import BaseModel, Field, ConfigDict


def now_iso() -> str:
    return datetime.now(timezone.utc).isoformat().replace("+00:00", "Z")


# =========================================================
# 1) 에러 응답 표준
# =========================================================

class ErrorDetail(BaseModel):
    """에러 코드/메시지를 담는 최소 단위"""
    code: str = Field(..., description="에러 식별 코드 (예: VALIDATION_ERROR, NOT_FOUND)")
    message: str = Field(..., description="사람이 읽을 수 있는 에러 메시지")


class ErrorResponse(BaseModel):
    """
    전역 에러 핸들러에서 내려주는 표준 에러 응답
    - middlewares/error_handler.py 에서 이 스키마 형태로 리턴
    """
    success: bool = False
    error: ErrorDetail
    generated_at: str = Field(default_factory=now_iso, description="응답 생성 시각 (UTC)")

    model_config = ConfigDict(extra="ignore")


def error_body(code: str, message: str) -> dict:
    return ErrorResponse(error=ErrorDetail(code=code, message=message)).model_dump()


# =========================================================
# 2) 성공 응답 래퍼
# =========================================================

def success(data: Any, message: Optional[str] = None) -> dict:
    body = {"success": True, "data": data}
    if message:
        body["message"] = message
    return body


# =========================================================
# 3) 빈 조회 결과 → 404 + 빈 데이터 (예외 아님)
# =========================================================

def not_found(message: str) -> JSONResponse:
    body = error_body("NOT_FOUND", message)
    body["data"] = []
    return JSONResponse(status_code=404, content=body)
