"""
services/block_average_service.py

학생 x 담당 그룹 x 평가 구간 단위의 구간 평균 산출
- 일일 평가(qualifications): 그룹의 학년/반/과목과 일치하는 수업 슬롯의 활성 점수만 반영
- 실습/시험(evaluations): 같은 그룹·구간의 활성 점수를 유형별로 평균
- 구간 평균 = 일일*0.3 + 실습*0.3 + 시험*0.4 (가중치는 settings 에서 조정)
"""

import logging
from decimal import Decimal
from typing import Any, Dict, Tuple

from sqlalchemy.orm import Session

from config.settings import settings
from models.evaluations import Evaluation, EvaluationType
from models.qualifications import Qualification
from models.schedules import Schedule
from models.student_enrollments import StudentEnrollment
from models.teacher_groups import TeacherGroup
from models.teaching_block_averages import TeachingBlockAverage
from models.teaching_blocks import TeachingBlock
from services.exceptions import NotFoundError, require_ids
from services.grade_math import mean_or_zero, weighted_block_average
from services.persistence import run_in_transaction, upsert

logger = logging.getLogger(__name__)


def block_weights() -> Tuple[Decimal, Decimal, Decimal]:
    return (settings.BLOCK_WEIGHT_DAILY, settings.BLOCK_WEIGHT_PRACTICE, settings.BLOCK_WEIGHT_EXAM)


def get_group(db: Session, assignment_id: int) -> TeacherGroup:
    group = db.query(TeacherGroup).filter(TeacherGroup.id == assignment_id).first()
    if group is None:
        raise NotFoundError("담당 그룹을 찾을 수 없습니다")
    return group


def _require_block_and_student(db: Session, student_id: int, teaching_block_id: int) -> None:
    # 구간/학생 참조 확인
    if db.query(TeachingBlock.id).filter(TeachingBlock.id == teaching_block_id).first() is None:
        raise NotFoundError("평가 구간을 찾을 수 없습니다")
    if db.query(StudentEnrollment.id).filter(StudentEnrollment.id == student_id).first() is None:
        raise NotFoundError("학생을 찾을 수 없습니다")


def _daily_ratings(db: Session, student_id: int, group: TeacherGroup, teaching_block_id: int):
    rows = (
        db.query(Qualification.rating)
        .join(Schedule, Qualification.schedule_id == Schedule.id)
        .filter(
            Qualification.student_id == student_id,
            Qualification.teaching_block_id == teaching_block_id,
            Qualification.status.is_(True),
            Schedule.grade_id == group.grade_id,
            Schedule.section_id == group.section_id,
            Schedule.course_id == group.course_id,
        )
        .all()
    )
    return [r.rating for r in rows]


def _evaluation_scores(db: Session, student_id: int, assignment_id: int, teaching_block_id: int,
                       evaluation_type: EvaluationType):
    rows = (
        db.query(Evaluation.score)
        .filter(
            Evaluation.student_id == student_id,
            Evaluation.assignment_id == assignment_id,
            Evaluation.teaching_block_id == teaching_block_id,
            Evaluation.type == evaluation_type,
            Evaluation.status.is_(True),
        )
        .all()
    )
    return [r.score for r in rows]


def compute_block_average(db: Session, student_id: int, assignment_id: int, teaching_block_id: int) -> Dict[str, Decimal]:
    """세 가지 신호를 모아 구간 평균 계산 (저장하지 않음)"""
    require_ids(student_id=student_id, assignment_id=assignment_id, teaching_block_id=teaching_block_id)
    group = get_group(db, assignment_id)
    _require_block_and_student(db, student_id, teaching_block_id)

    daily = mean_or_zero(_daily_ratings(db, student_id, group, teaching_block_id))
    practice = mean_or_zero(_evaluation_scores(db, student_id, assignment_id, teaching_block_id, EvaluationType.PRACTICE))
    exam = mean_or_zero(_evaluation_scores(db, student_id, assignment_id, teaching_block_id, EvaluationType.EXAM))

    return {
        "daily_average": daily,
        "practice_average": practice,
        "exam_average": exam,
        "block_average": weighted_block_average(daily, practice, exam, block_weights()),
    }


def preview_block_average(db: Session, student_id: int, assignment_id: int, teaching_block_id: int) -> Dict[str, Decimal]:
    values = compute_block_average(db, student_id, assignment_id, teaching_block_id)
    # 조회만 수행했으므로 열린 읽기 트랜잭션 정리
    db.rollback()
    return values


def save_block_average(db: Session, student_id: int, assignment_id: int, teaching_block_id: int) -> Tuple[Any, bool, Dict[str, Decimal]]:
    """구간 평균 계산 후 (학생, 그룹, 구간) 키로 upsert. (record, created, values) 반환"""
    require_ids(student_id=student_id, assignment_id=assignment_id, teaching_block_id=teaching_block_id)

    def work():
        values = compute_block_average(db, student_id, assignment_id, teaching_block_id)
        record, created = upsert(
            db,
            TeachingBlockAverage,
            {"student_id": student_id, "assignment_id": assignment_id, "teaching_block_id": teaching_block_id},
            values,
        )
        return record, created, values

    record, created, values = run_in_transaction(db, "save_block_average", work)
    db.refresh(record)
    logger.info(
        "block average %s: student=%s assignment=%s block=%s value=%s",
        "created" if created else "updated", student_id, assignment_id, teaching_block_id, values["block_average"],
    )
    return record, created, values
