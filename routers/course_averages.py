from typing import Optional

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from database.db import get_db
from dependencies.security import require_api_token
from schemas.averages import CourseAverageFilter, CourseAverageRequest
from schemas.common import not_found, success
from services.average_queries import find_course_averages, serialize_course_average
from services.course_average_service import save_course_average
from services.exceptions import require_ids

router = APIRouter(prefix="/course-averages", tags=["과목 연간 평균"])

EMPTY_MESSAGE = "조건에 맞는 과목 연간 평균이 없습니다"


# ✅ [CALCULATE] 저장된 구간 평균으로 과목 연간 평균 산출 후 생성 또는 갱신
@router.post("/calculate", dependencies=[Depends(require_api_token)])
def calculate(body: CourseAverageRequest, db: Session = Depends(get_db)):
    record, created = save_course_average(db, body.student_id, body.assignment_id, body.year_id)
    return success(
        serialize_course_average(record),
        "과목 연간 평균이 저장되었습니다" if created else "과목 연간 평균이 갱신되었습니다",
    )


def _respond(db: Session, filters: CourseAverageFilter):
    records = find_course_averages(db, filters)
    if not records:
        return not_found(EMPTY_MESSAGE)
    return success([serialize_course_average(r) for r in records], "과목 연간 평균 조회 완료")


# ✅ [READ] 학생 기준 (연도 선택)
@router.get("/by-student")
def by_student(student_id: Optional[int] = None, year_id: Optional[int] = None, db: Session = Depends(get_db)):
    require_ids(student_id=student_id)
    return _respond(db, CourseAverageFilter(student_id=student_id, year_id=year_id))


# ✅ [READ] 연도 + 담당 그룹 기준
@router.get("/by-group")
def by_group(year_id: Optional[int] = None, assignment_id: Optional[int] = None, db: Session = Depends(get_db)):
    require_ids(year_id=year_id, assignment_id=assignment_id)
    return _respond(db, CourseAverageFilter(year_id=year_id, assignment_id=assignment_id))


# ✅ [READ] 학생 + 연도 + 담당 그룹 기준
@router.get("/by-student-group")
def by_student_group(
    student_id: Optional[int] = None,
    year_id: Optional[int] = None,
    assignment_id: Optional[int] = None,
    db: Session = Depends(get_db),
):
    require_ids(student_id=student_id, year_id=year_id, assignment_id=assignment_id)
    return _respond(db, CourseAverageFilter(student_id=student_id, year_id=year_id, assignment_id=assignment_id))
