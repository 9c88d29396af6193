from sqlalchemy import Column, Integer, Text, Boolean, DateTime, ForeignKey, func
from sqlalchemy.orm import relationship
from database.db import Base
from models.persons import Person
from models.years import Year

class TeacherAssignment(Base):
    __tablename__ = "teacher_assignments"  # 교사 연도별 배정 테이블

    id = Column(Integer, primary_key=True, index=True)
    person_id = Column(Integer, ForeignKey("persons.id"), nullable=False)   # 교사 (persons.id)
    year_id = Column(Integer, ForeignKey("years.id"), nullable=False)       # 배정 연도
    specialty = Column(Text)                                                # 전공/담당 분야
    status = Column(Boolean, nullable=False, default=True)
    created_at = Column(DateTime, server_default=func.now())
    updated_at = Column(DateTime, server_default=func.now(), onupdate=func.now())

    person = relationship(Person)
    year = relationship(Year)
