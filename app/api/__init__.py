"""API 라우터 패키지 — 모든 엔드포인트 통합.

API Router package — Aggregates every endpoint into a single router
for inclusion in the FastAPI application.

Included routers:
    - catalog: 이해관계자/프로세스/데이터 유형/품질 기준 조회 (Catalog reads)
    - periods: 평가 기간 관리 및 이해관계자 배정 (Period administration)
    - evaluations: 평가 세션, 범위, 점수, 요약 (Evaluation sessions, scores, summaries)
"""

from fastapi import APIRouter

from app.api.catalog import router as catalog_router
from app.api.evaluations import router as evaluations_router
from app.api.periods import router as periods_router

api_router: APIRouter = APIRouter()

# 카탈로그: 최상위 경로 (/stakeholders, /processes, /data-types, /quality-criteria)
api_router.include_router(catalog_router, tags=["Catalog"])
api_router.include_router(periods_router, prefix="/evaluation-periods", tags=["Evaluation Periods"])
api_router.include_router(evaluations_router, prefix="/evaluations", tags=["Evaluations"])
