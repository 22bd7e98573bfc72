"""Axiom API 로깅 미들웨어.

Axiom API logging middleware.
Captures request/response data and sends structured logs to Axiom.
Logs: endpoint, method, evaluation/period ids, body/params, status code, error reason.
Participant identity fields (email, names) and secrets are masked.
"""

import json
import re
import time
from typing import Any

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response
from axiom_py import Client as AxiomClient

from app.config import settings

# 마스킹 대상 필드 패턴 — Identity and secret fields masked in logged bodies
_MASKED_KEYS = re.compile(
    r"(email|first_name|last_name|password|secret|token|authorization|api_key|credential)",
    re.IGNORECASE,
)

# 로깅 제외 경로 — Paths excluded from logging
_SKIP_PATHS = {"/health", "/docs", "/redoc", "/openapi.json"}

# 경로에서 평가/기간 ID 추출 — Pull evaluation / period ids out of the URL
_EVALUATION_PATH = re.compile(r"/evaluations/(\d+)")
_PERIOD_PATH = re.compile(r"/evaluation-periods/(\d+)")

_MAX_DEPTH = 5
_MAX_ITEMS = 20
_MAX_ERROR_LEN = 500


def _mask(data: Any, depth: int = 0) -> Any:
    """민감 필드 재귀 마스킹 — Recursively mask identity/secret fields."""
    if depth > _MAX_DEPTH:
        return "..."
    if isinstance(data, dict):
        return {
            k: "***" if _MASKED_KEYS.search(str(k)) else _mask(v, depth + 1)
            for k, v in data.items()
        }
    if isinstance(data, list):
        return [_mask(item, depth + 1) for item in data[:_MAX_ITEMS]]
    return data


def _path_ids(path: str) -> dict[str, int]:
    ids: dict[str, int] = {}
    evaluation_match = _EVALUATION_PATH.search(path)
    if evaluation_match:
        ids["evaluation_id"] = int(evaluation_match.group(1))
    period_match = _PERIOD_PATH.search(path)
    if period_match:
        ids["evaluation_period_id"] = int(period_match.group(1))
    return ids


async def _read_json_body(request: Request) -> Any:
    """요청 body를 JSON으로 읽음 — None when empty, marker string when not JSON."""
    body_bytes = await request.body()
    if not body_bytes:
        return None
    try:
        return _mask(json.loads(body_bytes))
    except (json.JSONDecodeError, UnicodeDecodeError):
        return "(non-json body)"


def _error_detail(body: bytes) -> str:
    try:
        data = json.loads(body)
        detail = data.get("detail", data) if isinstance(data, dict) else data
        detail = detail if isinstance(detail, str) else json.dumps(detail, ensure_ascii=False)
    except (json.JSONDecodeError, UnicodeDecodeError):
        detail = body.decode("utf-8", errors="replace")
    if len(detail) > _MAX_ERROR_LEN:
        detail = detail[:_MAX_ERROR_LEN] + "..."
    return detail


class AxiomLoggingMiddleware(BaseHTTPMiddleware):
    """모든 API 요청/응답을 Axiom에 로깅하는 미들웨어.

    Middleware that logs all API requests and responses to Axiom.
    Passes requests straight through when no Axiom token/dataset is configured.
    """

    def __init__(self, app: Any) -> None:
        super().__init__(app)
        self._client: AxiomClient | None = None
        self._dataset: str = settings.AXIOM_DATASET

        if settings.AXIOM_API_TOKEN and settings.AXIOM_DATASET:
            self._client = AxiomClient(token=settings.AXIOM_API_TOKEN)

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        if not self._client or request.url.path in _SKIP_PATHS:
            return await call_next(request)

        start_time = time.time()
        event: dict[str, Any] = {
            "method": request.method,
            "path": request.url.path,
            **_path_ids(request.url.path),
        }
        if request.query_params:
            event["query_params"] = _mask(dict(request.query_params))
        if request.method in ("POST", "PUT", "PATCH"):
            body = await _read_json_body(request)
            if body is not None:
                event["request_body"] = body

        event["status_code"] = 500
        try:
            response = await call_next(request)
            event["status_code"] = response.status_code

            # 에러 응답시 body에서 사유 추출 후 재포장 — Extract error detail, re-wrap consumed body
            if response.status_code >= 400:
                resp_body = b""
                async for chunk in response.body_iterator:
                    resp_body += chunk if isinstance(chunk, bytes) else chunk.encode("utf-8")
                event["error"] = _error_detail(resp_body)
                response = Response(
                    content=resp_body,
                    status_code=response.status_code,
                    headers=dict(response.headers),
                    media_type=response.media_type,
                )
        except Exception as exc:
            event["error"] = f"{type(exc).__name__}: {str(exc)[:300]}"
            raise
        finally:
            event["duration_ms"] = round((time.time() - start_time) * 1000, 2)
            try:
                self._client.ingest_events(self._dataset, [event])
            except Exception:
                pass  # 로깅 실패가 요청 처리에 영향주지 않도록 — Never break request on log failure

        return response
