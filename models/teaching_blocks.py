from sqlalchemy import Column, Integer, String, Date, Boolean, DateTime, ForeignKey, UniqueConstraint, func
from sqlalchemy.orm import relationship
from database.db import Base
from models.years import Year

class TeachingBlock(Base):
    __tablename__ = "teaching_blocks"  # 학기 내 평가 구간 (예: 1~4분기)
    __table_args__ = (
        # ✅ 연도 내 구간 순번은 유일해야 연간 평균 슬롯(1~4)에 정확히 매핑됨
        UniqueConstraint("year_id", "sequence", name="uq_teaching_blocks_year_sequence"),
    )

    id = Column(Integer, primary_key=True, index=True)
    year_id = Column(Integer, ForeignKey("years.id"), nullable=False)
    sequence = Column(Integer, nullable=False)              # 연도 내 순번 (1부터 시작)
    teaching_block = Column(String(250), nullable=False)    # 구간명 (예: 1분기)
    start_day = Column(Date, nullable=False)                # 시작일
    end_day = Column(Date, nullable=False)                  # 종료일
    status = Column(Boolean, nullable=False, default=True)
    created_at = Column(DateTime, server_default=func.now())
    updated_at = Column(DateTime, server_default=func.now(), onupdate=func.now())

    year = relationship(Year)
