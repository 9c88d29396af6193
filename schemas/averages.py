from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel
from typing import Optional


class _CamelModel(BaseModel):
    # ✅ snake_case / camelCase 요청 키 모두 허용 (studentId, student_id)
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


# ✅ 입력용: 구간 평균 산출/미리보기
#    - 누락 여부는 서비스 계층에서 검사해 400 으로 응답
class BlockAverageRequest(_CamelModel):
    student_id: Optional[int] = None                 # 학생 등록 ID
    assignment_id: Optional[int] = None              # 담당 그룹 ID
    teaching_block_id: Optional[int] = None          # 평가 구간 ID


# ✅ 입력용: 과목 연간 평균 산출
class CourseAverageRequest(_CamelModel):
    student_id: Optional[int] = None
    assignment_id: Optional[int] = None
    year_id: Optional[int] = None


# ✅ 입력용: 전 과목 종합 평균 산출
class GeneralAverageRequest(_CamelModel):
    student_id: Optional[int] = None
    year_id: Optional[int] = None


# ✅ 조회 필터: 각 필드는 독립적으로 선택, 지정된 조건은 AND 로 결합
class BlockAverageFilter(BaseModel):
    student_id: Optional[int] = None
    assignment_id: Optional[int] = None
    teaching_block_id: Optional[int] = None
    year_id: Optional[int] = None


class CourseAverageFilter(BaseModel):
    student_id: Optional[int] = None
    assignment_id: Optional[int] = None
    year_id: Optional[int] = None


# ✅ 출력용: 구간 평균 계산값
class BlockAverageValues(BaseModel):
    daily_average: float
    practice_average: float
    exam_average: float
    block_average: float
