"""평가 레포지토리 — Evaluation 및 범위 조인 쿼리.

Evaluation Repository — Queries for evaluations and their scoping joins
(evaluation_process, evaluation_process_data_type).
"""

from datetime import datetime, timezone
from typing import Sequence

from sqlalchemy import Row, func, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from app.models.catalog import Process
from app.models.evaluation import Evaluation, EvaluationProcess, EvaluationProcessDataType
from app.repositories.base import BaseRepository


class EvaluationRepository(BaseRepository[Evaluation]):

    def __init__(self) -> None:
        super().__init__(Evaluation)

    async def get_period_id(self, db: AsyncSession, evaluation_id: int) -> int | None:
        """평가가 속한 기간 ID 조회 — None if the evaluation does not exist."""
        result = await db.execute(select(Evaluation.fk_period).where(Evaluation.id == evaluation_id))
        return result.scalar_one_or_none()

    async def mark_completed(self, db: AsyncSession, evaluation_id: int) -> None:
        """완료 처리 — 이미 완료된 평가는 completed_at을 유지합니다."""
        await db.execute(
            update(Evaluation)
            .where(Evaluation.id == evaluation_id, Evaluation.completed.is_(False))
            .values(completed=True, completed_at=datetime.now(timezone.utc))
        )
        await db.flush()

    async def count_completed(self, db: AsyncSession, period_id: int) -> int:
        result = await db.execute(
            select(func.count())
            .select_from(Evaluation)
            .where(Evaluation.fk_period == period_id, Evaluation.completed.is_(True))
        )
        return result.scalar() or 0

    async def get_user_ids_by_period(self, db: AsyncSession, period_id: int) -> list[int]:
        result = await db.execute(
            select(Evaluation.fk_user).where(Evaluation.fk_period == period_id).order_by(Evaluation.id)
        )
        return list(result.scalars().all())


class EvaluationProcessRepository(BaseRepository[EvaluationProcess]):

    def __init__(self) -> None:
        super().__init__(EvaluationProcess)

    async def get_with_process(self, db: AsyncSession, evaluation_id: int) -> Sequence[Row]:
        """범위 내 프로세스 (id, name, evaluation_process_id)."""
        result = await db.execute(
            select(Process.id, Process.name, EvaluationProcess.id.label("evaluation_process_id"))
            .join(EvaluationProcess, EvaluationProcess.fk_process == Process.id)
            .where(EvaluationProcess.fk_evaluation == evaluation_id)
            .order_by(EvaluationProcess.id)
        )
        return result.all()

    async def get_ids_by_evaluation(self, db: AsyncSession, evaluation_id: int) -> set[int]:
        result = await db.execute(
            select(EvaluationProcess.id).where(EvaluationProcess.fk_evaluation == evaluation_id)
        )
        return set(result.scalars().all())


class EvaluationProcessDataTypeRepository(BaseRepository[EvaluationProcessDataType]):

    def __init__(self) -> None:
        super().__init__(EvaluationProcessDataType)

    async def get_by_evaluation(self, db: AsyncSession, evaluation_id: int) -> Sequence[Row]:
        """범위 내 (process_id, data_type_id) 쌍."""
        result = await db.execute(
            select(
                EvaluationProcess.fk_process.label("process_id"),
                EvaluationProcessDataType.fk_data_type.label("data_type_id"),
            )
            .join(EvaluationProcess, EvaluationProcess.id == EvaluationProcessDataType.fk_evaluation_process)
            .where(EvaluationProcess.fk_evaluation == evaluation_id)
            .order_by(EvaluationProcessDataType.id)
        )
        return result.all()

    async def get_scoped_data_type_ids(self, db: AsyncSession, evaluation_id: int) -> set[int]:
        result = await db.execute(
            select(EvaluationProcessDataType.fk_data_type)
            .join(EvaluationProcess, EvaluationProcess.id == EvaluationProcessDataType.fk_evaluation_process)
            .where(EvaluationProcess.fk_evaluation == evaluation_id)
        )
        return set(result.scalars().all())


evaluation_repository: EvaluationRepository = EvaluationRepository()
evaluation_process_repository: EvaluationProcessRepository = EvaluationProcessRepository()
evaluation_process_data_type_repository: EvaluationProcessDataTypeRepository = EvaluationProcessDataTypeRepository()
