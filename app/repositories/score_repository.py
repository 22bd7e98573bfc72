"""점수 레포지토리 — 점수 사실 테이블 쿼리 및 기간 집계.

Score Repository — Queries over the score fact table, including the
period-wide grouped sums that feed the summary rankings.
"""

from typing import Sequence

from sqlalchemy import Row, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from app.models.catalog import DataType, QualityCriteria
from app.models.evaluation import Evaluation, EvaluationScore
from app.repositories.base import BaseRepository


class ScoreRepository(BaseRepository[EvaluationScore]):

    def __init__(self) -> None:
        super().__init__(EvaluationScore)

    async def get_by_evaluation(self, db: AsyncSession, evaluation_id: int) -> Sequence[Row]:
        """평가 하나의 점수 (data_type_id, criteria_id, value)."""
        result = await db.execute(
            select(
                EvaluationScore.fk_data_type.label("data_type_id"),
                EvaluationScore.fk_criteria.label("criteria_id"),
                EvaluationScore.score.label("value"),
            )
            .where(EvaluationScore.fk_evaluation == evaluation_id)
            .order_by(EvaluationScore.id)
        )
        return result.all()

    async def get_keys_by_evaluation(self, db: AsyncSession, evaluation_id: int) -> set[tuple[int, int]]:
        """이미 저장된 (data_type_id, criteria_id) 키 집합."""
        result = await db.execute(
            select(EvaluationScore.fk_data_type, EvaluationScore.fk_criteria)
            .where(EvaluationScore.fk_evaluation == evaluation_id)
        )
        return {(row[0], row[1]) for row in result.all()}

    async def get_period_sums(self, db: AsyncSession, period_id: int) -> Sequence[Row]:
        """기간 전체 (data_type, criteria) 별 점수 합계.

        Period-wide score sums per (data type, criterion) pair, over every
        evaluation of the period.
        """
        result = await db.execute(
            select(
                EvaluationScore.fk_data_type.label("data_type_id"),
                EvaluationScore.fk_criteria.label("criteria_id"),
                func.sum(EvaluationScore.score).label("value"),
            )
            .join(Evaluation, Evaluation.id == EvaluationScore.fk_evaluation)
            .where(Evaluation.fk_period == period_id)
            .group_by(EvaluationScore.fk_data_type, EvaluationScore.fk_criteria)
            .order_by(EvaluationScore.fk_criteria, EvaluationScore.fk_data_type)
        )
        return result.all()

    async def get_summary_by_data_type(self, db: AsyncSession, period_id: int) -> Sequence[Row]:
        """완료된 평가 기준 데이터 유형별 (id, name, priority, total_score)."""
        return await self._summarize(db, period_id, DataType, EvaluationScore.fk_data_type)

    async def get_summary_by_criteria(self, db: AsyncSession, period_id: int) -> Sequence[Row]:
        """완료된 평가 기준 품질 기준별 (id, name, priority, total_score)."""
        return await self._summarize(db, period_id, QualityCriteria, EvaluationScore.fk_criteria)

    async def _summarize(self, db: AsyncSession, period_id: int, entity, score_fk) -> Sequence[Row]:
        # priority = 점수 행 개수 (row count, not distinct participants)
        priority = func.count(EvaluationScore.id).label("priority")
        result = await db.execute(
            select(
                entity.id,
                entity.name,
                priority,
                func.sum(EvaluationScore.score).label("total_score"),
            )
            .join(EvaluationScore, score_fk == entity.id)
            .join(Evaluation, Evaluation.id == EvaluationScore.fk_evaluation)
            .where(Evaluation.fk_period == period_id, Evaluation.completed.is_(True))
            .group_by(entity.id, entity.name)
            .order_by(priority.desc(), entity.id.asc())
        )
        return result.all()


score_repository: ScoreRepository = ScoreRepository()
