import enum

from sqlalchemy import Column, Integer, Numeric, Date, Enum, Boolean, DateTime, ForeignKey, func
from database.db import Base


class EvaluationType(str, enum.Enum):
    EXAM = "Exam"
    PRACTICE = "Practice"


class Evaluation(Base):
    __tablename__ = "evaluations"  # 시험/실습 점수 테이블

    id = Column(Integer, primary_key=True, index=True)
    student_id = Column(Integer, ForeignKey("student_enrollments.id"), nullable=False)     # 학생 등록 ID
    assignment_id = Column(Integer, ForeignKey("teacher_groups.id"), nullable=False)       # 담당 그룹 ID
    teaching_block_id = Column(Integer, ForeignKey("teaching_blocks.id"), nullable=False)  # 평가 구간
    score = Column(Numeric(5, 2), nullable=False)           # 점수
    exam_date = Column(Date)                                # 시행일
    type = Column(
        Enum(EvaluationType, name="evaluation_type", values_callable=lambda e: [m.value for m in e]),
        nullable=False,
    )                                                       # Exam / Practice
    status = Column(Boolean, nullable=False, default=True)
    created_at = Column(DateTime, server_default=func.now())
    updated_at = Column(DateTime, server_default=func.now(), onupdate=func.now())
