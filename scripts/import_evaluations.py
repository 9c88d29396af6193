import csv
from datetime import date
from decimal import Decimal
from sqlalchemy.orm import Session
from database.db import SessionLocal
from models.evaluations import Evaluation as EvaluationModel, EvaluationType  # ✅ 모델 import

CSV_PATH = "data/evaluations.csv"  # ✅ 파일 경로

def migrate_evaluations(csv_path: str = CSV_PATH, db: Session = None) -> int:
    owns_session = db is None
    db = db or SessionLocal()
    count = 0

    try:
        with open(csv_path, newline="", encoding="utf-8-sig") as csvfile:
            reader = csv.DictReader(csvfile)
            for row in reader:
                evaluation = EvaluationModel(
                    student_id=int(row["student_id"]),                  # 학생 등록 ID
                    assignment_id=int(row["assignment_id"]),            # 담당 그룹 ID
                    teaching_block_id=int(row["teaching_block_id"]),    # 평가 구간 ID
                    score=Decimal(row["score"]),                        # 점수
                    type=EvaluationType(row["type"]),                   # Exam / Practice
                    exam_date=date.fromisoformat(row["exam_date"]) if row.get("exam_date") else None,
                    status=True,
                )
                db.add(evaluation)
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
    total = migrate_evaluations()
    print(f"✅ 시험/실습 점수 CSV → DB 마이그레이션 완료 ({total}건)")
