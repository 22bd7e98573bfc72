"""테스트 인프라 — 인메모리 SQLite DB, 세션, httpx 클라이언트 픽스처.

Test infrastructure — In-memory SQLite (aiosqlite) engine, session, and httpx client fixtures.
Every test gets a fresh schema; seed helpers commit so that rollbacks inside
the code under test never discard fixture data.
"""

from collections.abc import AsyncGenerator

import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.pool import StaticPool

from app.database import Base, get_db
from app.main import app
from app.models import *  # noqa: F401,F403 — register all models with metadata
from app.models.catalog import DataType, Process, QualityCriteria
from app.models.evaluation import Evaluation, EvaluationProcess, EvaluationProcessDataType
from app.models.period import EvaluationPeriod
from app.models.user import Department, User

TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"


# ---------------------------------------------------------------------------
# Function-scoped: 엔진, 세션, 클라이언트
# ---------------------------------------------------------------------------
@pytest_asyncio.fixture
async def engine() -> AsyncGenerator[AsyncEngine, None]:
    """테스트용 async 엔진 — 테스트마다 새 스키마."""
    eng = create_async_engine(TEST_DATABASE_URL, poolclass=StaticPool)
    async with eng.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield eng
    await eng.dispose()


@pytest_asyncio.fixture
async def db(engine: AsyncEngine) -> AsyncGenerator[AsyncSession, None]:
    """각 테스트에 격리된 DB 세션을 제공합니다."""
    factory = async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)
    async with factory() as session:
        yield session


@pytest_asyncio.fixture
async def client(db: AsyncSession) -> AsyncGenerator[AsyncClient, None]:
    """FastAPI 테스트 클라이언트 — DB 세션을 오버라이드합니다."""
    async def _override_get_db() -> AsyncGenerator[AsyncSession, None]:
        yield db

    app.dependency_overrides[get_db] = _override_get_db

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac

    app.dependency_overrides.clear()


# ---------------------------------------------------------------------------
# 헬퍼 픽스처: 테스트용 데이터 생성
# ---------------------------------------------------------------------------
@pytest_asyncio.fixture
async def catalog(db: AsyncSession) -> dict:
    """부서 2개, 프로세스 2개, 데이터 유형 3개, 품질 기준 2개를 생성합니다.

    Returns a dict of id lists keyed by "departments", "processes",
    "data_types", and "criteria".
    """
    departments = [Department(name="Finance"), Department(name="Logistics")]
    processes = [Process(name="Invoicing"), Process(name="Shipping")]
    data_types = [
        DataType(name="Customer", description="Customer master data"),
        DataType(name="Invoice", description="Invoice records"),
        DataType(name="Shipment", description="Shipment events"),
    ]
    criteria = [
        QualityCriteria(name="Completeness", description="No missing values", guidelines="1-5"),
        QualityCriteria(name="Accuracy", description="Values are correct", guidelines="1-5"),
    ]
    db.add_all([*departments, *processes, *data_types, *criteria])
    await db.commit()
    return {
        "departments": [d.id for d in departments],
        "processes": [p.id for p in processes],
        "data_types": [d.id for d in data_types],
        "criteria": [c.id for c in criteria],
    }


@pytest_asyncio.fixture
async def period(db: AsyncSession) -> int:
    """활성 평가 기간을 생성하고 ID를 반환합니다."""
    p = EvaluationPeriod(name="2026 Q4", is_active=True)
    db.add(p)
    await db.commit()
    return p.id


async def make_evaluation(
    db: AsyncSession,
    period_id: int,
    process_id: int,
    data_type_ids: list[int],
) -> int:
    """참여자 + 평가 + 범위(프로세스 1개, 데이터 유형 N개)를 생성하고 커밋합니다."""
    user = User(first_name="Test", last_name="Participant")
    db.add(user)
    await db.flush()

    evaluation = Evaluation(fk_period=period_id, fk_user=user.id, completed=False)
    db.add(evaluation)
    await db.flush()

    evaluation_process = EvaluationProcess(fk_evaluation=evaluation.id, fk_process=process_id)
    db.add(evaluation_process)
    await db.flush()

    db.add_all([
        EvaluationProcessDataType(fk_evaluation_process=evaluation_process.id, fk_data_type=data_type_id)
        for data_type_id in data_type_ids
    ])
    await db.commit()
    return evaluation.id
