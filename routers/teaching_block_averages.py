from typing import Optional

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from database.db import get_db
from dependencies.security import require_api_token
from schemas.averages import BlockAverageFilter, BlockAverageRequest, BlockAverageValues
from schemas.common import not_found, success
from services.average_queries import find_block_averages, serialize_block_average
from services.block_average_service import preview_block_average, save_block_average
from services.exceptions import require_ids

router = APIRouter(prefix="/teaching-block-averages", tags=["구간 평균"])


# ==========================================================
# [1단계] 계산 라우터
# ==========================================================

# ✅ [PREVIEW] 저장 없이 계산 결과만 반환
@router.post("/preview")
def preview(body: BlockAverageRequest, db: Session = Depends(get_db)):
    values = preview_block_average(db, body.student_id, body.assignment_id, body.teaching_block_id)
    return success(
        BlockAverageValues(**values).model_dump(),
        "구간 평균 미리보기 계산 완료",
    )


# ✅ [CALCULATE] 계산 후 (학생, 그룹, 구간) 키로 생성 또는 갱신
@router.post("/calculate", dependencies=[Depends(require_api_token)])
def calculate(body: BlockAverageRequest, db: Session = Depends(get_db)):
    record, created, values = save_block_average(db, body.student_id, body.assignment_id, body.teaching_block_id)
    return success(
        {
            "id": record.id,
            "student_id": record.student_id,
            "assignment_id": record.assignment_id,
            "teaching_block_id": record.teaching_block_id,
            "created": created,
            **BlockAverageValues(**values).model_dump(),
        },
        "구간 평균이 저장되었습니다" if created else "구간 평균이 갱신되었습니다",
    )


# ==========================================================
# [2단계] 조회 라우터 (빈 결과는 404 + 빈 목록)
# ==========================================================

def _respond(db: Session, filters: BlockAverageFilter, empty_message: str):
    records = find_block_averages(db, filters)
    if not records:
        return not_found(empty_message)
    return success([serialize_block_average(r) for r in records])


# ✅ [SEARCH] 선택 필터 조합 조회
@router.get("/")
def search(
    student_id: Optional[int] = None,
    assignment_id: Optional[int] = None,
    teaching_block_id: Optional[int] = None,
    year_id: Optional[int] = None,
    db: Session = Depends(get_db),
):
    filters = BlockAverageFilter(
        student_id=student_id, assignment_id=assignment_id,
        teaching_block_id=teaching_block_id, year_id=year_id,
    )
    return _respond(db, filters, "조건에 맞는 구간 평균이 없습니다")


@router.get("/student/{student_id}")
def by_student(student_id: int, year_id: Optional[int] = None, db: Session = Depends(get_db)):
    return _respond(
        db,
        BlockAverageFilter(student_id=student_id, year_id=year_id),
        "해당 학생의 구간 평균이 없습니다",
    )


@router.get("/student/{student_id}/year/{year_id}/assignment/{assignment_id}")
def by_student_year_assignment(student_id: int, year_id: int, assignment_id: int, db: Session = Depends(get_db)):
    require_ids(student_id=student_id, year_id=year_id, assignment_id=assignment_id)
    return _respond(
        db,
        BlockAverageFilter(student_id=student_id, year_id=year_id, assignment_id=assignment_id),
        "해당 연도/담당 그룹의 학생 구간 평균이 없습니다",
    )


@router.get("/assignment/{assignment_id}")
def by_assignment(assignment_id: int, db: Session = Depends(get_db)):
    return _respond(
        db,
        BlockAverageFilter(assignment_id=assignment_id),
        "해당 담당 그룹의 구간 평균이 없습니다",
    )


@router.get("/teaching-block/{teaching_block_id}")
def by_teaching_block(teaching_block_id: int, db: Session = Depends(get_db)):
    return _respond(
        db,
        BlockAverageFilter(teaching_block_id=teaching_block_id),
        "해당 평가 구간의 구간 평균이 없습니다",
    )
