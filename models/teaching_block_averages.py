from sqlalchemy import Column, Integer, Numeric, Boolean, DateTime, ForeignKey, UniqueConstraint, func
from sqlalchemy.orm import relationship
from database.db import Base
from models.student_enrollments import StudentEnrollment
from models.teacher_groups import TeacherGroup
from models.teaching_blocks import TeachingBlock

class TeachingBlockAverage(Base):
    __tablename__ = "teaching_block_averages"  # 학생 x 담당 그룹 x 평가 구간 평균
    __table_args__ = (
        UniqueConstraint("student_id", "assignment_id", "teaching_block_id", name="uq_block_average_key"),
    )

    id = Column(Integer, primary_key=True, index=True)
    student_id = Column(Integer, ForeignKey("student_enrollments.id"), nullable=False)
    assignment_id = Column(Integer, ForeignKey("teacher_groups.id"), nullable=False)
    teaching_block_id = Column(Integer, ForeignKey("teaching_blocks.id"), nullable=False)
    daily_average = Column(Numeric(5, 2), nullable=False)       # 일일 평가 평균
    practice_average = Column(Numeric(5, 2), nullable=False)    # 실습 평균
    exam_average = Column(Numeric(5, 2), nullable=False)        # 시험 평균
    block_average = Column(Numeric(5, 2), nullable=False)       # 가중 합산 평균
    status = Column(Boolean, nullable=False, default=True)
    created_at = Column(DateTime, server_default=func.now())
    updated_at = Column(DateTime, server_default=func.now(), onupdate=func.now())

    student = relationship(StudentEnrollment)
    group = relationship(TeacherGroup)
    teaching_block = relationship(TeachingBlock)
