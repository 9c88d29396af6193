"""
services/general_average_service.py

학생 x 연도 단위의 전 과목 종합 평균 산출
- 저장된 과목 연간 평균(course_averages)만 사용
- 서로 다른 과목 수가 기준(GENERAL_AVERAGE_MIN_COURSES) 미만이면 산출하지 않음
"""

import logging
from typing import Any, Tuple

from sqlalchemy.orm import Session

from config.settings import settings
from models.course_averages import CourseAverage
from models.general_averages import GeneralAverage
from models.teacher_groups import TeacherGroup
from services.exceptions import NotFoundError, ValidationError, require_ids
from services.grade_math import mean_of_present
from services.persistence import run_in_transaction, upsert

logger = logging.getLogger(__name__)


def save_general_average(db: Session, student_id: int, year_id: int) -> Tuple[Any, bool]:
    require_ids(student_id=student_id, year_id=year_id)

    def work():
        rows = (
            db.query(CourseAverage.course_average, TeacherGroup.course_id)
            .join(TeacherGroup, CourseAverage.assignment_id == TeacherGroup.id)
            .filter(
                CourseAverage.student_id == student_id,
                CourseAverage.year_id == year_id,
                CourseAverage.status.is_(True),
            )
            .all()
        )
        if not rows:
            raise NotFoundError("해당 학생/연도의 과목 연간 평균이 없습니다")

        course_count = len({r.course_id for r in rows})
        required = settings.GENERAL_AVERAGE_MIN_COURSES
        if course_count < required:
            raise ValidationError(
                f"등록된 과목이 {course_count}개뿐입니다. "
                f"종합 평균 계산에는 최소 {required}개 과목이 필요합니다"
            )

        average = mean_of_present(r.course_average for r in rows)
        if average is None:
            raise ValidationError("유효한 과목 연간 평균이 없어 종합 평균을 계산할 수 없습니다")

        return upsert(
            db,
            GeneralAverage,
            {"student_id": student_id, "year_id": year_id},
            {"average": average, "course_count": course_count},
        )

    record, created = run_in_transaction(db, "save_general_average", work)
    db.refresh(record)
    logger.info(
        "general average %s: student=%s year=%s value=%s",
        "created" if created else "updated", student_id, year_id, record.average,
    )
    return record, created
