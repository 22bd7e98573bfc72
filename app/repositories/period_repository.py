"""평가 기간 레포지토리 — EvaluationPeriod 쿼리.

Evaluation Period Repository — Queries for resolving the current period.
"""

from sqlalchemy import select, update
from sqlalchemy.ext.asyncio import AsyncSession

from app.models.period import EvaluationPeriod
from app.repositories.base import BaseRepository


class EvaluationPeriodRepository(BaseRepository[EvaluationPeriod]):

    def __init__(self) -> None:
        super().__init__(EvaluationPeriod)

    async def get_active(self, db: AsyncSession) -> EvaluationPeriod | None:
        """활성 표시된 기간 조회 (여러 개면 가장 최근 ID)."""
        result = await db.execute(
            select(EvaluationPeriod)
            .where(EvaluationPeriod.is_active.is_(True))
            .order_by(EvaluationPeriod.id.desc())
            .limit(1)
        )
        return result.scalar_one_or_none()

    async def get_latest(self, db: AsyncSession) -> EvaluationPeriod | None:
        """가장 최근에 생성된 기간 조회 — Highest id wins."""
        result = await db.execute(
            select(EvaluationPeriod).order_by(EvaluationPeriod.id.desc()).limit(1)
        )
        return result.scalar_one_or_none()

    async def deactivate_all(self, db: AsyncSession) -> None:
        await db.execute(
            update(EvaluationPeriod)
            .where(EvaluationPeriod.is_active.is_(True))
            .values(is_active=False)
        )
        await db.flush()


evaluation_period_repository: EvaluationPeriodRepository = EvaluationPeriodRepository()
