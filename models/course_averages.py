from sqlalchemy import Column, Integer, Numeric, Boolean, DateTime, ForeignKey, UniqueConstraint, func
from sqlalchemy.orm import relationship
from database.db import Base
from models.student_enrollments import StudentEnrollment
from models.teacher_groups import TeacherGroup
from models.years import Year

class CourseAverage(Base):
    __tablename__ = "course_averages"  # 학생 x 담당 그룹 x 연도 과목 연간 평균
    __table_args__ = (
        UniqueConstraint("student_id", "assignment_id", "year_id", name="uq_course_average_key"),
    )

    id = Column(Integer, primary_key=True, index=True)
    student_id = Column(Integer, ForeignKey("student_enrollments.id"), nullable=False)
    assignment_id = Column(Integer, ForeignKey("teacher_groups.id"), nullable=False)
    year_id = Column(Integer, ForeignKey("years.id"), nullable=False)
    block1_average = Column(Numeric(5, 2), nullable=True)   # 1구간 평균 (없으면 NULL)
    block2_average = Column(Numeric(5, 2), nullable=True)
    block3_average = Column(Numeric(5, 2), nullable=True)
    block4_average = Column(Numeric(5, 2), nullable=True)
    course_average = Column(Numeric(5, 2), nullable=False)  # 존재하는 구간 평균의 산술 평균
    status = Column(Boolean, nullable=False, default=True)
    created_at = Column(DateTime, server_default=func.now())
    updated_at = Column(DateTime, server_default=func.now(), onupdate=func.now())

    student = relationship(StudentEnrollment)
    group = relationship(TeacherGroup)
    year = relationship(Year)

    @property
    def block_slots(self):
        return [self.block1_average, self.block2_average, self.block3_average, self.block4_average]
