"""평가 API 엔드투엔드 테스트.

Evaluation API end-to-end tests — A full participant session over HTTP:
create, scope, submit, then read period results and summaries.
"""

from httpx import AsyncClient
from sqlalchemy.exc import OperationalError
from sqlalchemy.ext.asyncio import AsyncSession

from app.models.user import User, UserDepartment
from app.repositories.score_repository import score_repository

API = "/api/v1"


async def _start_session(client: AsyncClient, catalog: dict) -> tuple[int, list[dict]]:
    """평가 생성 + 프로세스 1개 + 데이터 유형 2개 범위 지정."""
    response = await client.post(f"{API}/evaluations")
    assert response.status_code == 201
    evaluation_id = response.json()["id"]

    response = await client.post(
        f"{API}/evaluations/{evaluation_id}/processes",
        json={"processes": [catalog["processes"][0]]},
    )
    assert response.status_code == 201
    processes = response.json()

    evaluation_process_id = processes[0]["evaluation_process_id"]
    response = await client.post(
        f"{API}/evaluations/{evaluation_id}/data-types",
        json={"data": [
            {"evaluation_process_id": evaluation_process_id, "data_type_id": catalog["data_types"][0]},
            {"evaluation_process_id": evaluation_process_id, "data_type_id": catalog["data_types"][1]},
        ]},
    )
    assert response.status_code == 201
    return evaluation_id, response.json()


async def _create_period(client: AsyncClient) -> int:
    response = await client.post(f"{API}/evaluation-periods", json={"name": "2027 Q1"})
    assert response.status_code == 201
    return response.json()["id"]


class TestHealth:
    """헬스 체크 테스트."""

    async def test_health(self, client: AsyncClient):
        response = await client.get("/health")
        assert response.status_code == 200
        assert response.json() == {"status": "ok"}


class TestEvaluationSession:
    """평가 세션 API 테스트."""

    async def test_full_session(self, client: AsyncClient, period, catalog):
        """생성 → 범위 지정 → 제출 → 결과 조회."""
        d1, d2, _ = catalog["data_types"]
        c1, c2 = catalog["criteria"]
        evaluation_id, data_types = await _start_session(client, catalog)
        assert [d["data_type_id"] for d in data_types] == [d1, d2]

        response = await client.get(f"{API}/evaluations/{evaluation_id}/period")
        assert response.json() == {"evaluation_period_id": period}

        response = await client.post(
            f"{API}/evaluations/{evaluation_id}/scores",
            json={"scores": {str(c1): {str(d1): 4, str(d2): 2}, str(c2): {str(d1): 5}}},
        )
        assert response.status_code == 200

        response = await client.get(f"{API}/evaluations/{evaluation_id}/scores")
        assert response.json() == {str(c1): {str(d1): 4, str(d2): 2}, str(c2): {str(d1): 5}}

        response = await client.get(f"{API}/evaluations/{evaluation_id}/total-evaluations")
        assert response.json() == {"total": 1}

        response = await client.get(f"{API}/evaluations/{evaluation_id}/summary/data-types")
        summary = response.json()
        assert [(e["id"], e["priority"], e["total_score"]) for e in summary] == [(d1, 2, 9), (d2, 1, 2)]
        assert summary[0]["average_score"] == 4.5

        response = await client.get(f"{API}/evaluations/{evaluation_id}/summary/quality-criteria")
        assert [e["id"] for e in response.json()] == [c1, c2]

    async def test_participant_is_anonymous(self, client: AsyncClient, period, catalog):
        response = await client.post(f"{API}/evaluations")
        evaluation_id = response.json()["id"]

        response = await client.get(f"{API}/evaluations/{evaluation_id}/participant")
        assert response.status_code == 200
        participant = response.json()
        assert participant["email"].endswith("@participants.invalid")
        assert participant["first_name"]

    async def test_no_period_returns_404(self, client: AsyncClient):
        response = await client.post(f"{API}/evaluations")
        assert response.status_code == 404

    async def test_unknown_evaluation_returns_404(self, client: AsyncClient, period):
        for path in ("period", "participant", "processes", "scores", "results", "summary/data-types"):
            response = await client.get(f"{API}/evaluations/9999/{path}")
            assert response.status_code == 404, path

    async def test_duplicate_submission_returns_409(self, client: AsyncClient, period, catalog):
        d1 = catalog["data_types"][0]
        c1 = catalog["criteria"][0]
        evaluation_id, _ = await _start_session(client, catalog)
        payload = {"scores": {str(c1): {str(d1): 3}}}

        first = await client.post(f"{API}/evaluations/{evaluation_id}/scores", json=payload)
        second = await client.post(f"{API}/evaluations/{evaluation_id}/scores", json=payload)

        assert first.status_code == 200
        assert second.status_code == 409

    async def test_out_of_scope_submission_returns_422(self, client: AsyncClient, period, catalog):
        d3 = catalog["data_types"][2]
        c1 = catalog["criteria"][0]
        evaluation_id, _ = await _start_session(client, catalog)

        response = await client.post(
            f"{API}/evaluations/{evaluation_id}/scores",
            json={"scores": {str(c1): {str(d3): 3}}},
        )
        assert response.status_code == 422

    async def test_empty_submission_returns_400(self, client: AsyncClient, period, catalog):
        evaluation_id, _ = await _start_session(client, catalog)

        response = await client.post(f"{API}/evaluations/{evaluation_id}/scores", json={"scores": {}})
        assert response.status_code == 400


class TestPeriodsApi:
    """평가 기간 API 테스트."""

    async def test_create_and_current(self, client: AsyncClient):
        response = await client.post(f"{API}/evaluation-periods", json={"name": "2027 Q1"})
        assert response.status_code == 201
        created = response.json()
        assert created["is_active"] is True

        response = await client.get(f"{API}/evaluation-periods/current")
        assert response.json()["id"] == created["id"]

    async def test_current_without_period_returns_404(self, client: AsyncClient):
        response = await client.get(f"{API}/evaluation-periods/current")
        assert response.status_code == 404


class TestCatalogApi:
    """카탈로그 API 테스트."""

    async def test_catalog_reads(self, client: AsyncClient, catalog):
        response = await client.get(f"{API}/data-types")
        assert [d["name"] for d in response.json()] == ["Customer", "Invoice", "Shipment"]

        response = await client.get(f"{API}/quality-criteria")
        assert [c["name"] for c in response.json()] == ["Completeness", "Accuracy"]

        response = await client.get(f"{API}/processes")
        assert [p["name"] for p in response.json()] == ["Invoicing", "Shipping"]

    async def test_stakeholders_grouped_by_department(self, client: AsyncClient, db: AsyncSession, catalog):
        """부서별 이해관계자 — 소속 없는 부서는 제외."""
        finance = catalog["departments"][0]
        users = [User(first_name="Ada", last_name="L"), User(first_name="Alan", last_name="T")]
        db.add_all(users)
        await db.flush()
        db.add_all([UserDepartment(fk_user=u.id, fk_department=finance) for u in users])
        await db.commit()

        response = await client.get(f"{API}/stakeholders")

        assert response.status_code == 200
        departments = response.json()
        assert [d["id"] for d in departments] == [finance]
        assert [u["first_name"] for u in departments[0]["users"]] == ["Ada", "Alan"]

    async def test_users_include_members_without_department(self, client: AsyncClient, db: AsyncSession, catalog):
        """부서 소속이 없는 사용자도 목록에 포함."""
        member = User(first_name="Ada", last_name="L")
        loner = User(first_name="Grace", last_name="H")
        db.add_all([member, loner])
        await db.flush()
        db.add(UserDepartment(fk_user=member.id, fk_department=catalog["departments"][0]))
        await db.commit()

        response = await client.get(f"{API}/users")

        assert response.status_code == 200
        assert response.json() == [
            {"id": member.id, "first_name": "Ada", "last_name": "L"},
            {"id": loner.id, "first_name": "Grace", "last_name": "H"},
        ]

        period_id = await _create_period(client)
        response = await client.post(
            f"{API}/evaluation-periods/{period_id}/stakeholders",
            json={"users": [loner.id]},
        )
        assert response.status_code == 201

        response = await client.get(f"{API}/evaluation-periods/{period_id}/stakeholders")
        assert response.json() == [loner.id]


class TestStoreErrors:
    """저장소 오류 응답 테스트."""

    async def test_store_error_returns_generic_503(self, client: AsyncClient, period, catalog, monkeypatch):
        """저장소 오류 → 503, 드라이버 메시지 미노출."""
        evaluation_id, _ = await _start_session(client, catalog)

        async def _fail(*args, **kwargs):
            raise OperationalError("SELECT score", {}, Exception("password=secret host=db"))

        monkeypatch.setattr(score_repository, "get_by_evaluation", _fail)

        response = await client.get(f"{API}/evaluations/{evaluation_id}/scores")

        assert response.status_code == 503
        assert response.json() == {"detail": "Store unavailable"}
        assert "password" not in response.text
