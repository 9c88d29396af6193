from sqlalchemy import Column, Integer, Numeric, Text, Boolean, DateTime, ForeignKey, func
from sqlalchemy.orm import relationship
from database.db import Base
from models.schedules import Schedule

class Qualification(Base):
    __tablename__ = "qualifications"  # 수업별 일일 평가 점수 (학생 x 수업일)

    id = Column(Integer, primary_key=True, index=True)
    student_id = Column(Integer, ForeignKey("student_enrollments.id"), nullable=False)     # 학생 등록 ID
    schedule_id = Column(Integer, ForeignKey("schedules.id"), nullable=False)              # 수업 슬롯
    school_day_id = Column(Integer, ForeignKey("school_days.id"), nullable=False)          # 수업일
    teaching_block_id = Column(Integer, ForeignKey("teaching_blocks.id"), nullable=True)   # 평가 구간 (선택)
    rating = Column(Numeric(5, 2), nullable=True)           # 점수 (미입력 가능)
    rating_detail = Column(Text)                            # 평가 메모
    status = Column(Boolean, nullable=False, default=True)  # 삭제 대신 비활성화
    created_at = Column(DateTime, server_default=func.now())
    updated_at = Column(DateTime, server_default=func.now(), onupdate=func.now())

    # ✅ 담당 그룹(학년/반/과목) 범위 필터링 시 조인 대상
    schedule = relationship(Schedule)
