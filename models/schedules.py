from sqlalchemy import Column, Integer, String, Time, Boolean, DateTime, ForeignKey, func
from database.db import Base

class Schedule(Base):
    __tablename__ = "schedules"  # 시간표 (수업 슬롯)

    id = Column(Integer, primary_key=True, index=True)
    year_id = Column(Integer, ForeignKey("years.id"), nullable=False)
    teacher_id = Column(Integer, ForeignKey("teacher_assignments.id"), nullable=False)
    course_id = Column(Integer, ForeignKey("courses.id"), nullable=False)
    grade_id = Column(Integer, ForeignKey("grades.id"), nullable=False)
    section_id = Column(Integer, ForeignKey("sections.id"), nullable=False)
    weekday = Column(String(10), nullable=False)            # 요일 (Monday ~ Friday)
    start_time = Column(Time, nullable=False)
    end_time = Column(Time, nullable=False)
    status = Column(Boolean, nullable=False, default=True)
    created_at = Column(DateTime, server_default=func.now())
    updated_at = Column(DateTime, server_default=func.now(), onupdate=func.now())
