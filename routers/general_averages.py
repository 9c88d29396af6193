from typing import Optional

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from database.db import get_db
from dependencies.security import require_api_token
from schemas.averages import GeneralAverageRequest
from schemas.common import not_found, success
from services.average_queries import find_general_averages, serialize_general_average
from services.general_average_service import save_general_average

router = APIRouter(prefix="/general-averages", tags=["종합 평균"])


# ✅ [CALCULATE] 과목 연간 평균들로 학생 연간 종합 평균 산출
@router.post("/calculate", dependencies=[Depends(require_api_token)])
def calculate(body: GeneralAverageRequest, db: Session = Depends(get_db)):
    record, created = save_general_average(db, body.student_id, body.year_id)
    return success(
        serialize_general_average(record),
        "종합 평균이 저장되었습니다" if created else "종합 평균이 갱신되었습니다",
    )


# ✅ [READ] 학생 기준 (연도 선택)
@router.get("/student/{student_id}")
def by_student(student_id: int, year_id: Optional[int] = None, db: Session = Depends(get_db)):
    records = find_general_averages(db, student_id, year_id)
    if not records:
        return not_found("해당 학생의 종합 평균이 없습니다")
    return success([serialize_general_average(r) for r in records])
