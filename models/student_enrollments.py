from sqlalchemy import Column, Integer, Boolean, DateTime, ForeignKey, func
from sqlalchemy.orm import relationship
from database.db import Base
from models.grade_levels import GradeLevel
from models.persons import Person
from models.sections import Section
from models.years import Year

class StudentEnrollment(Base):
    __tablename__ = "student_enrollments"  # 학생 연도별 등록 테이블

    id = Column(Integer, primary_key=True, index=True)                    # 등록 ID (성적 테이블의 student_id가 참조)
    person_id = Column(Integer, ForeignKey("persons.id"), nullable=False) # 학생 인적 정보
    year_id = Column(Integer, ForeignKey("years.id"), nullable=False)
    grade_id = Column(Integer, ForeignKey("grades.id"), nullable=False)
    section_id = Column(Integer, ForeignKey("sections.id"), nullable=False)
    status = Column(Boolean, nullable=False, default=True)
    created_at = Column(DateTime, server_default=func.now())
    updated_at = Column(DateTime, server_default=func.now(), onupdate=func.now())

    person = relationship(Person)
    year = relationship(Year)
    grade = relationship(GradeLevel)
    section = relationship(Section)
