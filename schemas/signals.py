from datetime import date
from pydantic import BaseModel, Field
from typing import Optional

from models.evaluations import EvaluationType


# ==========================================================
# 일일 평가 (qualifications)
# ==========================================================

# ✅ 입력용 (POST)
class QualificationCreate(BaseModel):
    student_id: int                                  # 학생 등록 ID
    schedule_id: int                                 # 수업 슬롯 ID
    school_day_id: int                               # 수업일 ID
    teaching_block_id: Optional[int] = None          # 평가 구간 ID
    rating: Optional[float] = Field(default=None, ge=0, le=100)   # 점수
    rating_detail: Optional[str] = None              # 평가 메모


# ✅ 출력용
class Qualification(QualificationCreate):
    id: int
    status: bool

    class Config:
        from_attributes = True


class QualificationFilter(BaseModel):
    student_id: Optional[int] = None
    schedule_id: Optional[int] = None
    school_day_id: Optional[int] = None
    teaching_block_id: Optional[int] = None
    status: Optional[bool] = None


# ==========================================================
# 시험/실습 점수 (evaluations)
# ==========================================================

class EvaluationCreate(BaseModel):
    student_id: int                                  # 학생 등록 ID
    assignment_id: int                               # 담당 그룹 ID
    teaching_block_id: int                           # 평가 구간 ID
    score: float = Field(..., ge=0, le=100)          # 점수
    type: EvaluationType                             # Exam / Practice
    exam_date: Optional[date] = None                 # 시행일


class Evaluation(EvaluationCreate):
    id: int
    status: bool

    class Config:
        from_attributes = True


class EvaluationFilter(BaseModel):
    student_id: Optional[int] = None
    assignment_id: Optional[int] = None
    teaching_block_id: Optional[int] = None
    type: Optional[EvaluationType] = None
    status: Optional[bool] = None
