from sqlalchemy import Column, Integer, Numeric, Boolean, DateTime, ForeignKey, UniqueConstraint, func
from sqlalchemy.orm import relationship
from database.db import Base
from models.student_enrollments import StudentEnrollment
from models.years import Year

class GeneralAverage(Base):
    __tablename__ = "general_averages"  # 학생 x 연도 전 과목 종합 평균
    __table_args__ = (
        UniqueConstraint("student_id", "year_id", name="uq_general_average_key"),
    )

    id = Column(Integer, primary_key=True, index=True)
    student_id = Column(Integer, ForeignKey("student_enrollments.id"), nullable=False)
    year_id = Column(Integer, ForeignKey("years.id"), nullable=False)
    average = Column(Numeric(5, 2), nullable=False)         # 과목 연간 평균들의 평균
    course_count = Column(Integer, nullable=False)          # 반영된 과목 수
    status = Column(Boolean, nullable=False, default=True)
    created_at = Column(DateTime, server_default=func.now())
    updated_at = Column(DateTime, server_default=func.now(), onupdate=func.now())

    student = relationship(StudentEnrollment)
    year = relationship(Year)
