import csv
from decimal import Decimal
from sqlalchemy.orm import Session
from database.db import SessionLocal
from models.qualifications import Qualification as QualificationModel  # ✅ 모델 import

CSV_PATH = "data/qualifications.csv"  # ✅ 파일 경로

def _optional_int(value):
    return int(value) if value not in (None, "") else None

def migrate_qualifications(csv_path: str = CSV_PATH, db: Session = None) -> int:
    owns_session = db is None
    db = db or SessionLocal()
    count = 0

    try:
        with open(csv_path, newline="", encoding="utf-8-sig") as csvfile:
            reader = csv.DictReader(csvfile)
            for row in reader:
                qualification = QualificationModel(
                    student_id=int(row["student_id"]),                          # 학생 등록 ID
                    schedule_id=int(row["schedule_id"]),                        # 수업 슬롯 ID
                    school_day_id=int(row["school_day_id"]),                    # 수업일 ID
                    teaching_block_id=_optional_int(row.get("teaching_block_id")),  # 평가 구간 (선택)
                    rating=Decimal(row["rating"]) if row.get("rating") else None,   # 점수 (미입력 가능)
                    rating_detail=row.get("rating_detail") or None,             # 평가 메모
                    status=True,
                )
                db.add(qualification)
                count += 1
        db.commit()
    except Exception:
        db.rollback()
        raise
    finally:
        if owns_session:
            db.close()
    return count

if __name__ == "__main__":
    total = migrate_qualifications()
    print(f"✅ 일일 평가 CSV → DB 마이그레이션 완료 ({total}건)")
