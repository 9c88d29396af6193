from sqlalchemy import Column, Integer, Boolean, DateTime, func
from database.db import Base

class Year(Base):
    __tablename__ = "years"  # 학사 연도 테이블

    id = Column(Integer, primary_key=True, index=True)      # 연도 고유 ID (PK)
    year = Column(Integer, nullable=False, unique=True)     # 연도 (예: 2025)
    status = Column(Boolean, nullable=False, default=True)  # 활성 여부
    created_at = Column(DateTime, server_default=func.now())
    updated_at = Column(DateTime, server_default=func.now(), onupdate=func.now())
