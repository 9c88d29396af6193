from sqlalchemy import Column, Integer, String, Text, Boolean, DateTime, func
from database.db import Base

class Course(Base):
    __tablename__ = "courses"  # 교과목 테이블

    id = Column(Integer, primary_key=True, index=True)      # 과목 고유 ID (PK)
    course = Column(String(100), nullable=False)            # 과목명 (예: 수학)
    description = Column(Text)                              # 과목 설명
    status = Column(Boolean, nullable=False, default=True)
    created_at = Column(DateTime, server_default=func.now())
    updated_at = Column(DateTime, server_default=func.now(), onupdate=func.now())
