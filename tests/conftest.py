"""
pytest fixtures

- 인메모리 SQLite(StaticPool) 엔진을 테스트마다 새로 생성
- FastAPI get_db 의존성을 테스트 세션 팩토리로 교체
- school 픽스처: 연도/구간 1~4/담당 그룹/시간표/학생 1명 기본 데이터

Run: pytest tests/ -v
"""

import os

# ✅ settings 로드 전에 테스트용 환경변수 지정
os.environ["SQLALCHEMY_DATABASE_URL"] = "sqlite://"
os.environ["API_TOKEN"] = "test-token"
os.environ["ENV"] = "test"

from datetime import date, time
from decimal import Decimal
from types import SimpleNamespace

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from database.db import Base, get_db
from main import app
from models.courses import Course
from models.evaluations import Evaluation, EvaluationType
from models.grade_levels import GradeLevel
from models.persons import Person
from models.qualifications import Qualification
from models.schedules import Schedule
from models.school_days import SchoolDay
from models.sections import Section
from models.student_enrollments import StudentEnrollment
from models.teacher_assignments import TeacherAssignment
from models.teacher_groups import TeacherGroup
from models.teaching_block_averages import TeachingBlockAverage
from models.teaching_blocks import TeachingBlock
from models.years import Year
from scripts.init_db import init_db



# --- Database Fixtures ---

@pytest.fixture
def engine():
    test_engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    init_db(bind=test_engine)
    yield test_engine
    Base.metadata.drop_all(bind=test_engine)
    test_engine.dispose()


@pytest.fixture
def session_factory(engine):
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture
def db(session_factory):
    session = session_factory()
    yield session
    session.close()


@pytest.fixture
def client(session_factory):
    def override_get_db():
        session = session_factory()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[get_db] = override_get_db
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


# --- Seed Data ---

def _add(db, obj):
    db.add(obj)
    db.flush()
    return obj


def make_course_group(db, school, course_name):
    """같은 학년/반/교사로 새 과목 담당 그룹 + 시간표 생성"""
    course = _add(db, Course(course=course_name))
    group = _add(db, TeacherGroup(
        teacher_assignment_id=school.teacher_assignment_id, year_id=school.year_id,
        grade_id=school.grade_id, section_id=school.section_id, course_id=course.id,
    ))
    schedule = _add(db, Schedule(
        year_id=school.year_id, teacher_id=school.teacher_assignment_id, course_id=course.id,
        grade_id=school.grade_id, section_id=school.section_id,
        weekday="Tuesday", start_time=time(10, 0), end_time=time(11, 0),
    ))
    db.commit()
    return SimpleNamespace(course_id=course.id, assignment_id=group.id, schedule_id=schedule.id)


@pytest.fixture
def school(db):
    year = _add(db, Year(year=2025))
    next_year = _add(db, Year(year=2026))
    student_person = _add(db, Person(names="Ana", last_names="Torres", dni="12345678", role="Student"))
    teacher_person = _add(db, Person(names="Luis", last_names="Ramos", dni="87654321", role="Teacher"))
    grade = _add(db, GradeLevel(grade="1st"))
    section = _add(db, Section(section="A"))
    math = _add(db, Course(course="Mathematics"))
    history = _add(db, Course(course="History"))

    teacher_assignment = _add(db, TeacherAssignment(person_id=teacher_person.id, year_id=year.id, specialty="Math"))
    group = _add(db, TeacherGroup(
        teacher_assignment_id=teacher_assignment.id, year_id=year.id,
        grade_id=grade.id, section_id=section.id, course_id=math.id,
    ))
    enrollment = _add(db, StudentEnrollment(
        person_id=student_person.id, year_id=year.id, grade_id=grade.id, section_id=section.id,
    ))

    blocks = [
        _add(db, TeachingBlock(
            year_id=year.id, sequence=n, teaching_block=f"Block {n}",
            start_day=date(2025, 3 * n - 2, 1), end_day=date(2025, 3 * n, 28),
        ))
        for n in range(1, 5)
    ]
    other_year_block = _add(db, TeachingBlock(
        year_id=next_year.id, sequence=1, teaching_block="Block 1",
        start_day=date(2026, 1, 1), end_day=date(2026, 3, 28),
    ))

    math_schedule = _add(db, Schedule(
        year_id=year.id, teacher_id=teacher_assignment.id, course_id=math.id,
        grade_id=grade.id, section_id=section.id,
        weekday="Monday", start_time=time(8, 0), end_time=time(9, 0),
    ))
    history_schedule = _add(db, Schedule(
        year_id=year.id, teacher_id=teacher_assignment.id, course_id=history.id,
        grade_id=grade.id, section_id=section.id,
        weekday="Monday", start_time=time(9, 0), end_time=time(10, 0),
    ))
    school_day = _add(db, SchoolDay(year_id=year.id, teaching_block_id=blocks[0].id, day=date(2025, 1, 6)))
    db.commit()

    return SimpleNamespace(
        year_id=year.id,
        next_year_id=next_year.id,
        student_id=enrollment.id,
        assignment_id=group.id,
        teacher_assignment_id=teacher_assignment.id,
        grade_id=grade.id,
        section_id=section.id,
        course_id=math.id,
        block_ids=[b.id for b in blocks],
        other_year_block_id=other_year_block.id,
        schedule_id=math_schedule.id,
        other_schedule_id=history_schedule.id,
        school_day_id=school_day.id,
    )


# --- Signal Helpers ---

def add_qualification(db, school, rating, block_index=0, schedule_id=None, status=True, student_id=None):
    row = Qualification(
        student_id=student_id or school.student_id,
        schedule_id=schedule_id or school.schedule_id,
        school_day_id=school.school_day_id,
        teaching_block_id=school.block_ids[block_index],
        rating=Decimal(str(rating)) if rating is not None else None,
        status=status,
    )
    db.add(row)
    db.commit()
    return row


def add_evaluation(db, school, score, evaluation_type, block_index=0, status=True, assignment_id=None):
    row = Evaluation(
        student_id=school.student_id,
        assignment_id=assignment_id or school.assignment_id,
        teaching_block_id=school.block_ids[block_index],
        score=Decimal(str(score)),
        type=evaluation_type,
        status=status,
    )
    db.add(row)
    db.commit()
    return row


def add_block_average(db, school, block_index, value, assignment_id=None, teaching_block_id=None):
    value = Decimal(str(value))
    row = TeachingBlockAverage(
        student_id=school.student_id,
        assignment_id=assignment_id or school.assignment_id,
        teaching_block_id=teaching_block_id or school.block_ids[block_index],
        daily_average=value,
        practice_average=value,
        exam_average=value,
        block_average=value,
        status=True,
    )
    db.add(row)
    db.commit()
    return row


@pytest.fixture
def signals():
    """테스트에서 헬퍼 함수를 픽스처로 사용"""
    return SimpleNamespace(
        qualification=add_qualification,
        evaluation=add_evaluation,
        block_average=add_block_average,
        course_group=make_course_group,
        EXAM=EvaluationType.EXAM,
        PRACTICE=EvaluationType.PRACTICE,
    )
