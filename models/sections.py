from sqlalchemy import Column, Integer, String, Boolean, DateTime, func
from database.db import Base

class Section(Base):
    __tablename__ = "sections"  # 반(분반) 테이블

    id = Column(Integer, primary_key=True, index=True)      # 반 고유 ID (PK)
    section = Column(String(10), nullable=False)            # 반 이름 (예: A, B)
    status = Column(Boolean, nullable=False, default=True)
    created_at = Column(DateTime, server_default=func.now())
    updated_at = Column(DateTime, server_default=func.now(), onupdate=func.now())
