"""카탈로그 레포지토리 — Process / DataType / QualityCriteria 쿼리.

Catalog Repository — Queries for processes, data types, and quality criteria.
"""

from typing import Sequence

from sqlalchemy import Row, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from app.models.catalog import DataType, Process, QualityCriteria
from app.models.evaluation import Evaluation, EvaluationProcess, EvaluationProcessDataType
from app.repositories.base import BaseRepository


class ProcessRepository(BaseRepository[Process]):

    def __init__(self) -> None:
        super().__init__(Process)


class DataTypeRepository(BaseRepository[DataType]):

    def __init__(self) -> None:
        super().__init__(DataType)

    async def get_top_scoped(self, db: AsyncSession, period_id: int, limit: int) -> Sequence[Row]:
        """기간 내 평가 범위에 가장 자주 포함된 데이터 유형.

        Data types placed in scope most often across the period's evaluations,
        ordered by count descending then id ascending.
        """
        scope_count = func.count(DataType.id).label("scope_count")
        result = await db.execute(
            select(DataType.id, DataType.name, DataType.description, scope_count)
            .join(EvaluationProcessDataType, EvaluationProcessDataType.fk_data_type == DataType.id)
            .join(EvaluationProcess, EvaluationProcess.id == EvaluationProcessDataType.fk_evaluation_process)
            .join(Evaluation, Evaluation.id == EvaluationProcess.fk_evaluation)
            .where(Evaluation.fk_period == period_id)
            .group_by(DataType.id, DataType.name, DataType.description)
            .order_by(scope_count.desc(), DataType.id.asc())
            .limit(limit)
        )
        return result.all()


class QualityCriteriaRepository(BaseRepository[QualityCriteria]):

    def __init__(self) -> None:
        super().__init__(QualityCriteria)


process_repository: ProcessRepository = ProcessRepository()
data_type_repository: DataTypeRepository = DataTypeRepository()
quality_criteria_repository: QualityCriteriaRepository = QualityCriteriaRepository()
