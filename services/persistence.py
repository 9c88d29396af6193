"""
services/persistence.py

- 평균 테이블 공통 저장 로직 (조회 → 계산 → upsert 를 하나의 트랜잭션으로 처리)
- 키 단위 유일성은 테이블의 UniqueConstraint 로 보장하고,
  동시에 같은 키로 INSERT 가 일어나 IntegrityError 가 나면 1회 재시도(UPDATE 경로)
- 같은 키에 대한 동시 재계산은 마지막 쓰기가 우선(last-write-wins)
"""

import logging
from typing import Any, Callable, Dict, Tuple, TypeVar

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from services.exceptions import GradingError, StoreError

logger = logging.getLogger(__name__)

T = TypeVar("T")

MAX_ATTEMPTS = 2


def upsert(db: Session, model, key: Dict[str, Any], values: Dict[str, Any]) -> Tuple[Any, bool]:
    """key 로 기존 행을 잠금 조회 후 갱신, 없으면 status=True 로 생성. (record, created) 반환"""
    record = db.query(model).filter_by(**key).with_for_update().first()
    if record is None:
        record = model(**key, **values, status=True)
        db.add(record)
        db.flush()
        return record, True

    for field, value in values.items():
        setattr(record, field, value)
    db.flush()
    return record, False


def run_in_transaction(db: Session, operation: str, work: Callable[[], T]) -> T:
    """work() 전체를 하나의 단위로 커밋. 실패 시 전부 롤백하고 StoreError 하나로 보고"""
    for attempt in range(1, MAX_ATTEMPTS + 1):
        try:
            result = work()
            db.commit()
            return result
        except GradingError:
            db.rollback()
            raise
        except IntegrityError as exc:
            db.rollback()
            if attempt < MAX_ATTEMPTS:
                logger.warning("%s: concurrent insert on the same key, retrying as update", operation)
                continue
            logger.exception("%s failed after %d attempts", operation, attempt)
            raise StoreError(operation, str(exc.orig)) from exc
        except SQLAlchemyError as exc:
            db.rollback()
            logger.exception("%s failed", operation)
            raise StoreError(operation, str(exc)) from exc
    raise StoreError(operation)
