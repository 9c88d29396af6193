import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from schemas.common import error_body
from services.exceptions import GradingError, StoreError

logger = logging.getLogger(__name__)

GENERIC_MESSAGE = "서버 내부 오류가 발생했습니다. 잠시 후 다시 시도해주세요."


def add_error_handlers(app: FastAPI):
    # ✅ 파이프라인 예외 → 상태코드 + 표준 에러 포맷
    @app.exception_handler(GradingError)
    async def grading_exception_handler(request: Request, exc: GradingError):
        if isinstance(exc, StoreError):
            logger.error("store error during %s: %s", exc.operation, exc.details)
        return JSONResponse(status_code=exc.status_code, content=error_body(exc.error_code, exc.message))

    # ✅ 형식이 잘못된 요청(숫자가 아닌 ID 등) → 400
    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(request: Request, exc: RequestValidationError):
        fields = [".".join(str(p) for p in err.get("loc", ()) if p != "body") for err in exc.errors()]
        message = "요청 파라미터 형식이 올바르지 않습니다"
        if fields:
            message = f"{message}: {', '.join(f for f in fields if f)}"
        return JSONResponse(status_code=400, content=error_body("VALIDATION_ERROR", message))

    # ✅ 인증 실패 등 HTTPException 도 같은 포맷으로
    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        return JSONResponse(
            status_code=exc.status_code,
            content=error_body(f"HTTP_{exc.status_code}", str(exc.detail)),
            headers=getattr(exc, "headers", None),
        )

    # ✅ 그 외 예외: 내부 정보 노출 없이 일반 메시지
    @app.exception_handler(Exception)
    async def unhandled_exception_handler(request: Request, exc: Exception):
        logger.exception("unhandled error on %s %s", request.method, request.url.path)
        return JSONResponse(status_code=500, content=error_body("INTERNAL_ERROR", GENERIC_MESSAGE))
