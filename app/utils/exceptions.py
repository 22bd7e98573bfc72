"""커스텀 HTTP 예외 클래스 모듈.

Custom HTTP exception classes module.
Provides pre-configured HTTPException subclasses for the error taxonomy
of the scoring core. Services raise these directly; the HTTP layer maps
them to responses without further translation.

Usage:
    from app.utils.exceptions import NotFoundError, DuplicateError
    raise NotFoundError("Evaluation not found")
    raise DuplicateError("Score already recorded")
"""

from fastapi import HTTPException, status


class NotFoundError(HTTPException):
    """404 Not Found 예외 — 참조한 평가 또는 기간이 존재하지 않을 때 사용.

    404 Not Found exception.
    Raised when a referenced evaluation, period, or participant does not exist.
    Aggregation over an unknown evaluation fails with this error rather than
    returning an empty table.

    Args:
        detail: 오류 메시지 (Error message, default: "Resource not found")
    """

    def __init__(self, detail: str = "Resource not found") -> None:
        super().__init__(status_code=status.HTTP_404_NOT_FOUND, detail=detail)


class DuplicateError(HTTPException):
    """409 Conflict 예외 — 중복 점수 제출 시 사용.

    409 Conflict exception.
    Raised when a submitted score collides with an existing
    (evaluation, data type, criterion) triple, or repeats a triple
    within the same submission.

    Args:
        detail: 오류 메시지 (Error message, default: "Resource already exists")
    """

    def __init__(self, detail: str = "Resource already exists") -> None:
        super().__init__(status_code=status.HTTP_409_CONFLICT, detail=detail)


class ScopeViolationError(HTTPException):
    """422 예외 — 평가 범위 밖의 데이터 유형/품질 기준 참조 시 사용.

    422 Unprocessable Entity exception.
    Raised when a score references a data type that is not in scope for the
    evaluation, or a criterion missing from the catalog.

    Args:
        detail: 오류 메시지 (Error message, default: "Outside evaluation scope")
    """

    def __init__(self, detail: str = "Outside evaluation scope") -> None:
        super().__init__(status_code=422, detail=detail)


class BadRequestError(HTTPException):
    """400 Bad Request 예외 — 잘못된 요청 데이터 시 사용.

    400 Bad Request exception.
    Raised when the request data is invalid beyond what Pydantic validation catches
    (e.g. an empty score set).

    Args:
        detail: 오류 메시지 (Error message, default: "Bad request")
    """

    def __init__(self, detail: str = "Bad request") -> None:
        super().__init__(status_code=status.HTTP_400_BAD_REQUEST, detail=detail)


class StoreUnavailableError(HTTPException):
    """503 예외 — 저장소 연결 실패 또는 트랜잭션 실패 시 사용.

    503 Service Unavailable exception.
    Raised when the relational store is unreachable or a transaction fails.
    The detail is always generic; driver messages are never forwarded.

    Args:
        detail: 오류 메시지 (Error message, default: "Store unavailable")
    """

    def __init__(self, detail: str = "Store unavailable") -> None:
        super().__init__(status_code=status.HTTP_503_SERVICE_UNAVAILABLE, detail=detail)
