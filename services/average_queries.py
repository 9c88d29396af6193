"""
services/average_queries.py

구간 평균 / 과목 연간 평균 / 종합 평균 조회용 읽기 전용 프로젝션
- 필터 객체의 값이 있는 필드만 AND 조건으로 결합
- 학생 이름, 과목, 학년, 반, 연도 등 화면 표시용 정보를 함께 조인
- 결과가 없으면 빈 목록을 반환 (404 응답 여부는 라우터가 결정)
"""

from decimal import Decimal
from typing import List, Optional

from sqlalchemy.orm import Session, joinedload

from models.course_averages import CourseAverage
from models.general_averages import GeneralAverage
from models.student_enrollments import StudentEnrollment
from models.teacher_groups import TeacherGroup
from models.teaching_block_averages import TeachingBlockAverage
from models.teaching_blocks import TeachingBlock
from schemas.averages import BlockAverageFilter, CourseAverageFilter


def _num(value: Optional[Decimal]) -> Optional[float]:
    return float(value) if value is not None else None


# ==========================================================
# [직렬화] 조인된 설명 정보 포함 dict 변환
# ==========================================================

def _student_info(enrollment: StudentEnrollment) -> dict:
    person = enrollment.person
    return {
        "id": enrollment.id,
        "names": person.names if person else None,
        "last_names": person.last_names if person else None,
    }


def _group_info(group: TeacherGroup) -> dict:
    return {
        "id": group.id,
        "teacher_assignment_id": group.teacher_assignment_id,
        "course": group.course.course if group.course else None,
        "grade": group.grade.grade if group.grade else None,
        "section": group.section.section if group.section else None,
        "year": group.year.year if group.year else None,
    }


def serialize_block_average(record: TeachingBlockAverage) -> dict:
    block = record.teaching_block
    return {
        "id": record.id,
        "student_id": record.student_id,
        "assignment_id": record.assignment_id,
        "teaching_block_id": record.teaching_block_id,
        "daily_average": _num(record.daily_average),
        "practice_average": _num(record.practice_average),
        "exam_average": _num(record.exam_average),
        "block_average": _num(record.block_average),
        "status": record.status,
        "teaching_block": {
            "id": block.id,
            "sequence": block.sequence,
            "teaching_block": block.teaching_block,
            "start_day": str(block.start_day),
            "end_day": str(block.end_day),
        },
        "student": _student_info(record.student),
        "group": _group_info(record.group),
    }


def serialize_course_average(record: CourseAverage) -> dict:
    return {
        "id": record.id,
        "student_id": record.student_id,
        "assignment_id": record.assignment_id,
        "year_id": record.year_id,
        "block1_average": _num(record.block1_average),
        "block2_average": _num(record.block2_average),
        "block3_average": _num(record.block3_average),
        "block4_average": _num(record.block4_average),
        "course_average": _num(record.course_average),
        "status": record.status,
        "year": record.year.year if record.year else None,
        "student": _student_info(record.student),
        "group": _group_info(record.group),
    }


def serialize_general_average(record: GeneralAverage) -> dict:
    return {
        "id": record.id,
        "student_id": record.student_id,
        "year_id": record.year_id,
        "average": _num(record.average),
        "course_count": record.course_count,
        "status": record.status,
        "year": record.year.year if record.year else None,
        "student": _student_info(record.student),
    }


_GROUP_LOADS = (
    joinedload(TeacherGroup.course),
    joinedload(TeacherGroup.grade),
    joinedload(TeacherGroup.section),
    joinedload(TeacherGroup.year),
)


# ==========================================================
# [조회] 구간 평균
# ==========================================================

def find_block_averages(db: Session, filters: BlockAverageFilter) -> List[TeachingBlockAverage]:
    query = (
        db.query(TeachingBlockAverage)
        .join(TeachingBlock, TeachingBlockAverage.teaching_block_id == TeachingBlock.id)
        .options(
            joinedload(TeachingBlockAverage.teaching_block),
            joinedload(TeachingBlockAverage.student).joinedload(StudentEnrollment.person),
            joinedload(TeachingBlockAverage.group).options(*_GROUP_LOADS),
        )
        .filter(TeachingBlockAverage.status.is_(True))
    )

    if filters.student_id is not None:
        query = query.filter(TeachingBlockAverage.student_id == filters.student_id)
    if filters.assignment_id is not None:
        query = query.filter(TeachingBlockAverage.assignment_id == filters.assignment_id)
    if filters.teaching_block_id is not None:
        query = query.filter(TeachingBlockAverage.teaching_block_id == filters.teaching_block_id)
    if filters.year_id is not None:
        query = query.filter(TeachingBlock.year_id == filters.year_id)

    # 특정 구간 조회는 그룹 순, 그 외는 구간 순번 → 학생 순
    if filters.teaching_block_id is not None and filters.assignment_id is None:
        order = (TeachingBlockAverage.assignment_id.asc(), TeachingBlockAverage.student_id.asc())
    else:
        order = (TeachingBlock.sequence.asc(), TeachingBlockAverage.student_id.asc())
    return query.order_by(*order, TeachingBlockAverage.id.asc()).all()


# ==========================================================
# [조회] 과목 연간 평균
# ==========================================================

def find_course_averages(db: Session, filters: CourseAverageFilter) -> List[CourseAverage]:
    query = (
        db.query(CourseAverage)
        .options(
            joinedload(CourseAverage.year),
            joinedload(CourseAverage.student).joinedload(StudentEnrollment.person),
            joinedload(CourseAverage.group).options(*_GROUP_LOADS),
        )
        .filter(CourseAverage.status.is_(True))
    )

    if filters.student_id is not None:
        query = query.filter(CourseAverage.student_id == filters.student_id)
    if filters.assignment_id is not None:
        query = query.filter(CourseAverage.assignment_id == filters.assignment_id)
    if filters.year_id is not None:
        query = query.filter(CourseAverage.year_id == filters.year_id)

    return query.order_by(CourseAverage.id.asc()).all()


# ==========================================================
# [조회] 전 과목 종합 평균
# ==========================================================

def find_general_averages(db: Session, student_id: int, year_id: Optional[int] = None) -> List[GeneralAverage]:
    query = (
        db.query(GeneralAverage)
        .options(
            joinedload(GeneralAverage.year),
            joinedload(GeneralAverage.student).joinedload(StudentEnrollment.person),
        )
        .filter(GeneralAverage.student_id == student_id, GeneralAverage.status.is_(True))
    )
    if year_id is not None:
        query = query.filter(GeneralAverage.year_id == year_id)
    return query.order_by(GeneralAverage.year_id.asc()).all()
