"""
services/grade_math.py

- 평균 산출에 쓰이는 순수 계산 함수 모음 (DB 의존 없음)
- 모든 값은 Decimal 로 계산하고 소수점 둘째 자리에서 반올림(ROUND_HALF_UP)
"""

from decimal import Decimal, ROUND_HALF_UP
from typing import Iterable, List, Optional, Sequence

TWO_PLACES = Decimal("0.01")
ZERO = Decimal("0.00")


def to_decimal(value) -> Decimal:
    if isinstance(value, Decimal):
        return value
    # float → str 경유로 이진 오차 없이 변환
    return Decimal(str(value))


def round2(value) -> Decimal:
    return to_decimal(value).quantize(TWO_PLACES, rounding=ROUND_HALF_UP)


def mean_or_zero(values: Iterable) -> Decimal:
    """값 목록의 산술 평균 (빈 목록이면 0). None 값은 0으로 취급"""
    # 성분 평균은 여기서 반올림되고, 구간 평균은 반올림된 성분으로 다시 계산됨
    items = [to_decimal(v) if v is not None else Decimal(0) for v in values]
    if not items:
        return ZERO
    return round2(sum(items) / len(items))


def weighted_block_average(
    daily: Decimal,
    practice: Decimal,
    exam: Decimal,
    weights: Sequence[Decimal],
) -> Decimal:
    """구간 평균 = 일일*w1 + 실습*w2 + 시험*w3 (둘째 자리 반올림)"""
    w_daily, w_practice, w_exam = weights
    return round2(to_decimal(daily) * w_daily + to_decimal(practice) * w_practice + to_decimal(exam) * w_exam)


def mean_of_present(values: Iterable[Optional[Decimal]]) -> Optional[Decimal]:
    """None 을 제외한 값들의 평균. 남는 값이 없으면 None"""
    present = [to_decimal(v) for v in values if v is not None]
    if not present:
        return None
    return round2(sum(present) / len(present))


def fill_slots(ordered: Iterable[tuple], size: int) -> List[Optional[Decimal]]:
    """(순번, 값) 쌍을 1부터 시작하는 고정 슬롯 목록으로 배치. 범위 밖 순번은 무시"""
    slots: List[Optional[Decimal]] = [None] * size
    for sequence, value in ordered:
        if 1 <= sequence <= size:
            slots[sequence - 1] = to_decimal(value) if value is not None else None
    return slots
