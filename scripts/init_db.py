"""
테이블 초기화 스크립트 (Base.metadata.create_all)
- 모든 모델 모듈을 import 해야 메타데이터에 테이블이 등록됨
"""
from database.db import Base, engine

# ✅ 모델 import (메타데이터 등록용)
from models import (  # noqa: F401
    persons, years, courses, grade_levels, sections,
    teacher_assignments, teacher_groups, student_enrollments,
    teaching_blocks, schedules, school_days,
    qualifications, evaluations,
    teaching_block_averages, course_averages, general_averages,
)


def init_db(bind=None):
    """Create all tables"""
    Base.metadata.create_all(bind=bind or engine)


if __name__ == "__main__":
    print("Creating database tables...")
    init_db()
    print("✅ 테이블 생성 완료")
