"""
services/course_average_service.py

학생 x 담당 그룹 x 연도 단위의 과목 연간 평균 산출
- 저장된 구간 평균만 사용 (원 점수를 다시 계산하지 않음)
- 구간의 순번(sequence)으로 슬롯 1~4 에 배치, 값이 없는 슬롯은 NULL
- 연간 평균 = 값이 있는 슬롯들의 산술 평균
"""

import logging
from typing import Any, Tuple

from sqlalchemy.orm import Session

from models.course_averages import CourseAverage
from models.teaching_block_averages import TeachingBlockAverage
from models.teaching_blocks import TeachingBlock
from services.exceptions import NotFoundError, ValidationError, require_ids
from services.grade_math import fill_slots, mean_of_present
from services.persistence import run_in_transaction, upsert

logger = logging.getLogger(__name__)

SLOT_COUNT = 4


def _stored_block_averages(db: Session, student_id: int, assignment_id: int, year_id: int):
    return (
        db.query(TeachingBlock.sequence, TeachingBlockAverage.block_average)
        .join(TeachingBlock, TeachingBlockAverage.teaching_block_id == TeachingBlock.id)
        .filter(
            TeachingBlockAverage.student_id == student_id,
            TeachingBlockAverage.assignment_id == assignment_id,
            TeachingBlockAverage.status.is_(True),
            TeachingBlock.year_id == year_id,
        )
        .order_by(TeachingBlock.sequence.asc())
        .all()
    )


def save_course_average(db: Session, student_id: int, assignment_id: int, year_id: int) -> Tuple[Any, bool]:
    """과목 연간 평균 계산 후 (학생, 그룹, 연도) 키로 upsert. (record, created) 반환"""
    require_ids(student_id=student_id, assignment_id=assignment_id, year_id=year_id)

    def work():
        rows = _stored_block_averages(db, student_id, assignment_id, year_id)
        if not rows:
            raise NotFoundError("해당 학생/연도의 구간 평균이 없습니다")

        for row in rows:
            if not 1 <= row.sequence <= SLOT_COUNT:
                logger.warning(
                    "ignoring teaching block with sequence %s (student=%s assignment=%s year=%s)",
                    row.sequence, student_id, assignment_id, year_id,
                )

        slots = fill_slots(((r.sequence, r.block_average) for r in rows), SLOT_COUNT)
        course_average = mean_of_present(slots)
        if course_average is None:
            raise ValidationError("유효한 구간이 없어 과목 연간 평균을 계산할 수 없습니다 (no valid blocks)")

        values = {
            "block1_average": slots[0],
            "block2_average": slots[1],
            "block3_average": slots[2],
            "block4_average": slots[3],
            "course_average": course_average,
        }
        return upsert(
            db,
            CourseAverage,
            {"student_id": student_id, "assignment_id": assignment_id, "year_id": year_id},
            values,
        )

    record, created = run_in_transaction(db, "save_course_average", work)
    db.refresh(record)
    logger.info(
        "course average %s: student=%s assignment=%s year=%s value=%s",
        "created" if created else "updated", student_id, assignment_id, year_id, record.course_average,
    )
    return record, created
