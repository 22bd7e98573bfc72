"""평가 세션 및 범위 지정 테스트.

Evaluation session tests — Current period resolution, anonymous participant
creation, department binding, and scope assignment.
"""

import random

import pytest
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.models.evaluation import Evaluation
from app.models.period import EvaluationPeriod
from app.models.user import User, UserDepartment
from app.schemas.evaluation import DataTypeAssignItem
from app.services.evaluation_service import EvaluationService, evaluation_service
from app.services.period_service import period_service
from app.utils.exceptions import NotFoundError, ScopeViolationError
from app.utils.identity import ParticipantIdentity
from tests.conftest import make_evaluation


def _fixed_identity() -> ParticipantIdentity:
    return ParticipantIdentity(first_name="Quiet", last_name="Heron", email="quiet.heron@test.net")


class TestCurrentPeriod:
    """현재 기간 결정 테스트."""

    async def test_active_marker_wins(self, db: AsyncSession):
        """활성 표시된 기간이 더 최근 기간보다 우선."""
        older = EvaluationPeriod(name="older", is_active=True)
        newer = EvaluationPeriod(name="newer", is_active=False)
        db.add_all([older, newer])
        await db.commit()

        current = await period_service.get_current_period(db)
        assert current.id == older.id

    async def test_falls_back_to_highest_id(self, db: AsyncSession):
        db.add_all([EvaluationPeriod(name="first"), EvaluationPeriod(name="second")])
        await db.commit()

        current = await period_service.get_current_period(db)
        assert current.name == "second"

    async def test_no_period(self, db: AsyncSession):
        with pytest.raises(NotFoundError):
            await period_service.get_current_period(db)

    async def test_create_period_activates_exclusively(self, db: AsyncSession, period):
        """새 기간 생성 시 기존 활성 표시 해제."""
        created = await period_service.create_period(db, name="2027 Q1")
        await db.commit()

        result = await db.execute(select(EvaluationPeriod.id).where(EvaluationPeriod.is_active.is_(True)))
        assert list(result.scalars().all()) == [created.id]

    async def test_activate_period(self, db: AsyncSession, period):
        created = await period_service.create_period(db, name="2027 Q1")
        await db.commit()

        activated = await period_service.activate_period(db, period)
        await db.commit()

        assert activated.id == period
        current = await period_service.get_current_period(db)
        assert current.id == period
        assert created.id != period


class TestCreateEvaluation:
    """익명 평가 생성 테스트."""

    async def test_binds_to_current_period(self, db: AsyncSession, period, catalog):
        service = EvaluationService(identity_generator=_fixed_identity, rng=random.Random(7))

        evaluation = await service.create_evaluation(db)
        await db.commit()

        assert evaluation.fk_period == period
        assert evaluation.completed is False

        participant = await service.get_participant(db, evaluation.id)
        assert participant.email == "quiet.heron@test.net"
        assert participant.first_name == "Quiet"

    async def test_participant_gets_one_department(self, db: AsyncSession, period, catalog):
        service = EvaluationService(identity_generator=_fixed_identity, rng=random.Random(7))

        evaluation = await service.create_evaluation(db)
        await db.commit()

        result = await db.execute(
            select(UserDepartment.fk_department).where(UserDepartment.fk_user == evaluation.fk_user)
        )
        departments = list(result.scalars().all())
        assert len(departments) == 1
        assert departments[0] in catalog["departments"]

    async def test_without_departments(self, db: AsyncSession, period):
        """부서가 없으면 소속 없이 생성."""
        evaluation = await evaluation_service.create_evaluation(db)
        await db.commit()

        result = await db.execute(select(UserDepartment).where(UserDepartment.fk_user == evaluation.fk_user))
        assert result.scalars().all() == []

    async def test_each_evaluation_gets_new_participant(self, db: AsyncSession, period):
        first = await evaluation_service.create_evaluation(db)
        second = await evaluation_service.create_evaluation(db)
        await db.commit()

        assert first.fk_user != second.fk_user

    async def test_no_period(self, db: AsyncSession):
        with pytest.raises(NotFoundError):
            await evaluation_service.create_evaluation(db)

    async def test_unknown_participant(self, db: AsyncSession):
        with pytest.raises(NotFoundError):
            await evaluation_service.get_participant(db, 9999)


class TestScopeAssignment:
    """평가 범위 지정 테스트."""

    async def test_assign_processes_with_new_process(self, db: AsyncSession, period, catalog):
        """기존 프로세스 + 인라인 생성 프로세스."""
        evaluation = await evaluation_service.create_evaluation(db)
        await db.commit()

        processes = await evaluation_service.assign_processes(
            db, evaluation.id, process_ids=[catalog["processes"][0]], new_process_names=["Returns"]
        )
        await db.commit()

        assert [p["name"] for p in processes] == ["Invoicing", "Returns"]
        assert all(p["evaluation_process_id"] for p in processes)

    async def test_assign_unknown_process(self, db: AsyncSession, period, catalog):
        evaluation = await evaluation_service.create_evaluation(db)
        await db.commit()

        with pytest.raises(NotFoundError):
            await evaluation_service.assign_processes(db, evaluation.id, process_ids=[9999])

    async def test_assign_data_types(self, db: AsyncSession, period, catalog):
        evaluation = await evaluation_service.create_evaluation(db)
        await db.commit()
        processes = await evaluation_service.assign_processes(db, evaluation.id, process_ids=catalog["processes"])
        await db.commit()

        items = [
            DataTypeAssignItem(evaluation_process_id=processes[0]["evaluation_process_id"], data_type_id=catalog["data_types"][0]),
            DataTypeAssignItem(evaluation_process_id=processes[1]["evaluation_process_id"], data_type_id=catalog["data_types"][2]),
        ]
        data_types = await evaluation_service.assign_data_types(db, evaluation.id, items)
        await db.commit()

        assert data_types == [
            {"process_id": catalog["processes"][0], "data_type_id": catalog["data_types"][0]},
            {"process_id": catalog["processes"][1], "data_type_id": catalog["data_types"][2]},
        ]

    async def test_data_type_via_foreign_process(self, db: AsyncSession, period, catalog):
        """다른 평가의 evaluation_process로 배정 → ScopeViolationError."""
        other_id = await make_evaluation(db, period, catalog["processes"][0], [])
        other_processes = await evaluation_service.list_processes(db, other_id)
        evaluation = await evaluation_service.create_evaluation(db)
        await db.commit()

        items = [DataTypeAssignItem(
            evaluation_process_id=other_processes[0]["evaluation_process_id"],
            data_type_id=catalog["data_types"][0],
        )]
        with pytest.raises(ScopeViolationError):
            await evaluation_service.assign_data_types(db, evaluation.id, items)


class TestStakeholders:
    """이해관계자 배정 테스트."""

    async def test_assign_and_list(self, db: AsyncSession, period):
        users = [User(first_name="Ada", last_name="L"), User(first_name="Alan", last_name="T")]
        db.add_all(users)
        await db.commit()
        user_ids = [u.id for u in users]

        evaluations = await evaluation_service.assign_stakeholders(db, period, user_ids)
        await db.commit()

        assert len(evaluations) == 2
        assert await evaluation_service.list_stakeholders(db, period) == user_ids

        result = await db.execute(select(Evaluation.completed).where(Evaluation.fk_period == period))
        assert set(result.scalars().all()) == {False}

    async def test_unknown_user(self, db: AsyncSession, period):
        with pytest.raises(NotFoundError):
            await evaluation_service.assign_stakeholders(db, period, [9999])

    async def test_unknown_period(self, db: AsyncSession):
        with pytest.raises(NotFoundError):
            await evaluation_service.list_stakeholders(db, 9999)
