"""평가 기간 서비스 — 현재 기간 결정 및 기간 관리.

Evaluation Period Service — Period administration and resolution of the
current period and of an evaluation's period.
"""

from sqlalchemy.ext.asyncio import AsyncSession

from app.models.period import EvaluationPeriod
from app.repositories.evaluation_repository import evaluation_repository
from app.repositories.period_repository import evaluation_period_repository
from app.utils.exceptions import NotFoundError


class PeriodService:
    """평가 기간 서비스.

    The current period is the one carrying the ``is_active`` marker. When no period
    is marked, the most recently created period (highest id) is used.
    """

    async def create_period(
        self,
        db: AsyncSession,
        name: str | None = None,
        activate: bool = True,
    ) -> EvaluationPeriod:
        if activate:
            await evaluation_period_repository.deactivate_all(db)
        return await evaluation_period_repository.create(db, {"name": name, "is_active": activate})

    async def activate_period(self, db: AsyncSession, period_id: int) -> EvaluationPeriod:
        """기간을 현재 기간으로 지정 — 다른 기간의 표시는 해제."""
        period = await self.get_period(db, period_id)
        await evaluation_period_repository.deactivate_all(db)
        period.is_active = True
        await db.flush()
        await db.refresh(period)
        return period

    async def get_period(self, db: AsyncSession, period_id: int) -> EvaluationPeriod:
        period = await evaluation_period_repository.get_by_id(db, period_id)
        if period is None:
            raise NotFoundError("평가 기간을 찾을 수 없습니다 (Evaluation period not found)")
        return period

    async def get_current_period(self, db: AsyncSession) -> EvaluationPeriod:
        period = await evaluation_period_repository.get_active(db)
        if period is None:
            period = await evaluation_period_repository.get_latest(db)
        if period is None:
            raise NotFoundError("현재 평가 기간이 없습니다 (No evaluation period exists)")
        return period

    async def get_evaluation_period_id(self, db: AsyncSession, evaluation_id: int) -> int:
        """평가가 속한 기간 ID — NotFoundError if the evaluation does not exist."""
        period_id = await evaluation_repository.get_period_id(db, evaluation_id)
        if period_id is None:
            raise NotFoundError("평가를 찾을 수 없습니다 (Evaluation not found)")
        return period_id

    def build_period_response(self, period: EvaluationPeriod) -> dict:
        return {
            "id": period.id,
            "name": period.name,
            "is_active": period.is_active,
            "created_at": period.created_at,
        }


# 싱글턴 인스턴스
period_service: PeriodService = PeriodService()
