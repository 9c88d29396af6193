from sqlalchemy import Column, Integer, Date, Boolean, DateTime, ForeignKey, func
from database.db import Base

class SchoolDay(Base):
    __tablename__ = "school_days"  # 수업일 테이블

    id = Column(Integer, primary_key=True, index=True)
    year_id = Column(Integer, ForeignKey("years.id"), nullable=False)
    teaching_block_id = Column(Integer, ForeignKey("teaching_blocks.id"), nullable=False)
    day = Column(Date, nullable=False)                      # 수업 날짜
    status = Column(Boolean, nullable=False, default=True)
    created_at = Column(DateTime, server_default=func.now())
    updated_at = Column(DateTime, server_default=func.now(), onupdate=func.now())
