from sqlalchemy import Column, Integer, String, Boolean, DateTime, func
from database.db import Base

class GradeLevel(Base):
    __tablename__ = "grades"  # 학년 테이블 (성적이 아니라 학년 단위)

    id = Column(Integer, primary_key=True, index=True)      # 학년 고유 ID (PK)
    grade = Column(String(50), nullable=False)              # 학년명 (예: 1학년)
    status = Column(Boolean, nullable=False, default=True)
    created_at = Column(DateTime, server_default=func.now())
    updated_at = Column(DateTime, server_default=func.now(), onupdate=func.now())
