"""SQLAlchemy ORM 모델 패키지 — 모든 도메인 모델의 중앙 임포트 지점.

SQLAlchemy ORM models package — Central import point for all domain models.
Importing from this package ensures all models are registered with the
SQLAlchemy metadata, which is required for Alembic migrations and
relationship resolution.

Modules:
    period: 평가 기간 (Evaluation periods)
    user: 이해관계자 및 부서 (Stakeholders and departments)
    catalog: 프로세스, 데이터 유형, 품질 기준 (Processes, data types, quality criteria)
    evaluation: 평가, 범위, 점수 (Evaluations, scoping joins, score facts)
"""

from app.models.period import EvaluationPeriod
from app.models.user import User, Department, UserDepartment
from app.models.catalog import Process, DataType, QualityCriteria
from app.models.evaluation import Evaluation, EvaluationProcess, EvaluationProcessDataType, EvaluationScore

__all__ = [
    "EvaluationPeriod",
    "User", "Department", "UserDepartment",
    "Process", "DataType", "QualityCriteria",
    "Evaluation", "EvaluationProcess", "EvaluationProcessDataType", "EvaluationScore",
]
