from typing import Optional

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from database.db import get_db
from dependencies.security import require_api_token
from models.qualifications import Qualification as QualificationModel
from schemas.common import not_found, success
from schemas.signals import Qualification as QualificationSchema
from schemas.signals import QualificationCreate, QualificationFilter

router = APIRouter(prefix="/qualifications", tags=["일일 평가"])


# ==========================================================
# [1단계] 등록 / 비활성화 (삭제 없음)
# ==========================================================

# ✅ [CREATE] 일일 평가 점수 추가
@router.post("/", status_code=201, dependencies=[Depends(require_api_token)])
def create_qualification(payload: QualificationCreate, db: Session = Depends(get_db)):
    db_row = QualificationModel(**payload.model_dump(), status=True)
    db.add(db_row)
    db.commit()
    db.refresh(db_row)
    return success(
        QualificationSchema.model_validate(db_row).model_dump(),
        "일일 평가가 성공적으로 추가되었습니다",
    )


# ✅ [DEACTIVATE] 비활성화 (평균 산출에서 제외)
@router.patch("/{qualification_id}/deactivate", dependencies=[Depends(require_api_token)])
def deactivate_qualification(qualification_id: int, db: Session = Depends(get_db)):
    row = db.query(QualificationModel).filter(QualificationModel.id == qualification_id).first()
    if row is None:
        return not_found("일일 평가를 찾을 수 없습니다")

    row.status = False
    db.commit()
    db.refresh(row)
    return success(QualificationSchema.model_validate(row).model_dump(), "일일 평가가 비활성화되었습니다")


# ==========================================================
# [2단계] 조회 (선택 필터 AND 결합)
# ==========================================================

@router.get("/")
def list_qualifications(
    student_id: Optional[int] = None,
    schedule_id: Optional[int] = None,
    school_day_id: Optional[int] = None,
    teaching_block_id: Optional[int] = None,
    status: Optional[bool] = None,
    db: Session = Depends(get_db),
):
    filters = QualificationFilter(
        student_id=student_id, schedule_id=schedule_id, school_day_id=school_day_id,
        teaching_block_id=teaching_block_id, status=status,
    )
    query = db.query(QualificationModel)
    for field, value in filters.model_dump(exclude_none=True).items():
        query = query.filter(getattr(QualificationModel, field) == value)

    records = query.order_by(QualificationModel.id.asc()).all()
    if not records:
        return not_found("조건에 맞는 일일 평가가 없습니다")
    return success([QualificationSchema.model_validate(r).model_dump() for r in records])
