from typing import Optional

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from database.db import get_db
from dependencies.security import require_api_token
from models.evaluations import Evaluation as EvaluationModel
from models.evaluations import EvaluationType
from schemas.common import not_found, success
from schemas.signals import Evaluation as EvaluationSchema
from schemas.signals import EvaluationCreate, EvaluationFilter

router = APIRouter(prefix="/evaluations", tags=["시험/실습"])


def _out(row: EvaluationModel) -> dict:
    return EvaluationSchema.model_validate(row).model_dump(mode="json")


# ==========================================================
# [1단계] 등록 / 비활성화 (삭제 없음)
# ==========================================================

# ✅ [CREATE] 시험/실습 점수 추가
@router.post("/", status_code=201, dependencies=[Depends(require_api_token)])
def create_evaluation(payload: EvaluationCreate, db: Session = Depends(get_db)):
    db_row = EvaluationModel(**payload.model_dump(), status=True)
    db.add(db_row)
    db.commit()
    db.refresh(db_row)
    return success(_out(db_row), "시험/실습 점수가 성공적으로 추가되었습니다")


# ✅ [DEACTIVATE] 비활성화 (평균 산출에서 제외)
@router.patch("/{evaluation_id}/deactivate", dependencies=[Depends(require_api_token)])
def deactivate_evaluation(evaluation_id: int, db: Session = Depends(get_db)):
    row = db.query(EvaluationModel).filter(EvaluationModel.id == evaluation_id).first()
    if row is None:
        return not_found("시험/실습 점수를 찾을 수 없습니다")

    row.status = False
    db.commit()
    db.refresh(row)
    return success(_out(row), "시험/실습 점수가 비활성화되었습니다")


# ==========================================================
# [2단계] 조회 (선택 필터 AND 결합)
# ==========================================================

@router.get("/")
def list_evaluations(
    student_id: Optional[int] = None,
    assignment_id: Optional[int] = None,
    teaching_block_id: Optional[int] = None,
    type: Optional[EvaluationType] = None,
    status: Optional[bool] = None,
    db: Session = Depends(get_db),
):
    filters = EvaluationFilter(
        student_id=student_id, assignment_id=assignment_id,
        teaching_block_id=teaching_block_id, type=type, status=status,
    )
    query = db.query(EvaluationModel)
    for field, value in filters.model_dump(exclude_none=True).items():
        query = query.filter(getattr(EvaluationModel, field) == value)

    records = query.order_by(EvaluationModel.id.asc()).all()
    if not records:
        return not_found("조건에 맞는 시험/실습 점수가 없습니다")
    return success([_out(r) for r in records])
