from sqlalchemy import Column, Integer, Boolean, DateTime, ForeignKey, func
from sqlalchemy.orm import relationship
from database.db import Base
from models.courses import Course
from models.grade_levels import GradeLevel
from models.sections import Section
from models.teacher_assignments import TeacherAssignment
from models.years import Year

class TeacherGroup(Base):
    __tablename__ = "teacher_groups"  # 교사-과목-학년-반 담당 그룹 (평균 산출 범위)

    id = Column(Integer, primary_key=True, index=True)
    teacher_assignment_id = Column(Integer, ForeignKey("teacher_assignments.id"), nullable=False)
    year_id = Column(Integer, ForeignKey("years.id"), nullable=False)
    grade_id = Column(Integer, ForeignKey("grades.id"), nullable=False)
    section_id = Column(Integer, ForeignKey("sections.id"), nullable=False)
    course_id = Column(Integer, ForeignKey("courses.id"), nullable=False)
    status = Column(Boolean, nullable=False, default=True)
    created_at = Column(DateTime, server_default=func.now())
    updated_at = Column(DateTime, server_default=func.now(), onupdate=func.now())

    # ==========================================================
    # [관계 설정] 조회 화면용 설명 정보 (N:1)
    # ==========================================================
    teacher_assignment = relationship(TeacherAssignment)
    year = relationship(Year)
    grade = relationship(GradeLevel)
    section = relationship(Section)
    course = relationship(Course)
