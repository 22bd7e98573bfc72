"""평가 관련 SQLAlchemy ORM 모델 정의.

Evaluation SQLAlchemy ORM model definitions.
Includes evaluations (one per anonymous participant), the scoping joins
that decide which processes and data types an evaluation may rate,
and the score fact table.

Tables:
    - evaluation: 평가 본체 (Evaluation records)
    - evaluation_process: 평가-프로세스 범위 (Processes in scope for an evaluation)
    - evaluation_process_data_type: 프로세스-데이터 유형 범위 (Data types in scope via a process)
    - evaluation_data_type_criteria_score: 점수 (Score facts)
"""

from datetime import datetime, timezone
from sqlalchemy import Boolean, DateTime, ForeignKey, Integer, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.database import Base


class Evaluation(Base):
    """평가 본체 모델 — 한 참여자의 평가 세션.

    Evaluation model — One participant's scoring session within a period.
    ``completed`` only ever transitions False → True, when the score set is submitted;
    it is the sole gate for inclusion in period summaries.

    Attributes:
        id: 고유 식별자
        fk_period: 소속 평가 기간 FK
        fk_user: 익명 참여자 FK
        completed: 제출 완료 여부
        created_at: 생성 일시 UTC
        completed_at: 제출 일시 UTC

    Relationships:
        period: 소속 기간
        processes: 범위 내 프로세스 목록
        scores: 제출된 점수 목록
    """

    __tablename__ = "evaluation"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    fk_period: Mapped[int] = mapped_column(Integer, ForeignKey("evaluation_period.id", ondelete="CASCADE"), nullable=False, index=True)
    fk_user: Mapped[int] = mapped_column(Integer, ForeignKey("user.id", ondelete="CASCADE"), nullable=False)
    completed: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=lambda: datetime.now(timezone.utc))
    completed_at: Mapped[datetime | None] = mapped_column(DateTime(timezone=True), nullable=True)

    period = relationship("EvaluationPeriod", back_populates="evaluations")
    processes = relationship("EvaluationProcess", back_populates="evaluation", cascade="all, delete-orphan")
    scores = relationship("EvaluationScore", back_populates="evaluation", cascade="all, delete-orphan")


class EvaluationProcess(Base):
    """평가-프로세스 범위 모델.

    Scoping join — A process the evaluation covers.
    """

    __tablename__ = "evaluation_process"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    fk_evaluation: Mapped[int] = mapped_column(Integer, ForeignKey("evaluation.id", ondelete="CASCADE"), nullable=False, index=True)
    fk_process: Mapped[int] = mapped_column(Integer, ForeignKey("process.id", ondelete="CASCADE"), nullable=False)

    evaluation = relationship("Evaluation", back_populates="processes")
    data_types = relationship("EvaluationProcessDataType", back_populates="evaluation_process", cascade="all, delete-orphan")


class EvaluationProcessDataType(Base):
    """프로세스-데이터 유형 범위 모델.

    Scoping join — A data type is only in scope for an evaluation
    through the evaluation process it is bound to.
    """

    __tablename__ = "evaluation_process_data_type"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    fk_evaluation_process: Mapped[int] = mapped_column(
        Integer, ForeignKey("evaluation_process.id", ondelete="CASCADE"), nullable=False, index=True
    )
    fk_data_type: Mapped[int] = mapped_column(Integer, ForeignKey("data_type.id", ondelete="CASCADE"), nullable=False)

    evaluation_process = relationship("EvaluationProcess", back_populates="data_types")


class EvaluationScore(Base):
    """점수 모델 — (평가, 데이터 유형, 품질 기준) 당 하나의 점수.

    Score fact — One numeric score per (evaluation, data type, criterion) triple.

    Constraints:
        uq_score_eval_data_type_criteria: (fk_evaluation, fk_data_type, fk_criteria) — 중복 점수 방지
    """

    __tablename__ = "evaluation_data_type_criteria_score"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    fk_evaluation: Mapped[int] = mapped_column(Integer, ForeignKey("evaluation.id", ondelete="CASCADE"), nullable=False, index=True)
    fk_data_type: Mapped[int] = mapped_column(Integer, ForeignKey("data_type.id", ondelete="CASCADE"), nullable=False)
    fk_criteria: Mapped[int] = mapped_column(Integer, ForeignKey("quality_criteria.id", ondelete="CASCADE"), nullable=False)
    score: Mapped[int] = mapped_column(Integer, nullable=False)

    __table_args__ = (
        UniqueConstraint("fk_evaluation", "fk_data_type", "fk_criteria", name="uq_score_eval_data_type_criteria"),
    )

    evaluation = relationship("Evaluation", back_populates="scores")
