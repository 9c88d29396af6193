from sqlalchemy import Column, Integer, String, Boolean, DateTime, func
from database.db import Base

class Person(Base):
    __tablename__ = "persons"  # 인적 정보 테이블 (학생/교사/보호자 공통)

    id = Column(Integer, primary_key=True, index=True)          # 고유 ID (Primary Key)
    names = Column(String(150), nullable=False)                 # 이름
    last_names = Column(String(150), nullable=False)            # 성
    dni = Column(String(8), unique=True)                        # 신분증 번호
    role = Column(String(20), nullable=False, default="Student")  # 역할 (Admin, Teacher, Student, Guardian)
    status = Column(Boolean, nullable=False, default=True)      # 활성 여부
    created_at = Column(DateTime, server_default=func.now())
    updated_at = Column(DateTime, server_default=func.now(), onupdate=func.now())
