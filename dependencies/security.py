from typing import Optional
from fastapi import HTTPException, Security
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from config.settings import settings
import hmac

# ✅ Authorization: Bearer <token> 파싱은 FastAPI 가 처리 (헤더 없으면 None)
bearer_scheme = HTTPBearer(auto_error=False)


def _unauthorized(detail: str) -> HTTPException:
    return HTTPException(status_code=401, detail=detail, headers={"WWW-Authenticate": "Bearer"})


def require_api_token(credentials: Optional[HTTPAuthorizationCredentials] = Security(bearer_scheme)):
    """평균 저장/점수 입력 등 쓰기 API 보호용 의존성"""
    # 토큰 미설정 상태로 쓰기 API 가 열리지 않도록 서버 설정 오류로 처리
    if not settings.API_TOKEN:
        raise HTTPException(status_code=500, detail="Server token not configured")

    if credentials is None:
        raise _unauthorized("Missing or invalid Authorization header")

    # 타이밍 안전 비교
    if not hmac.compare_digest(credentials.credentials.strip(), settings.API_TOKEN):
        raise _unauthorized("Invalid token")

    return {"client": "api"}
