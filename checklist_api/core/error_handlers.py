# checklist_api/core/error_handlers.py

"""
전역 예외 핸들러를 등록하는 모듈입니다.

- ChecklistAPIError      -> 예외에 정의된 상태 코드와 오류 코드
- RequestValidationError -> 400, 필드 단위 상세 정보
- Exception (catch-all)  -> 500, 내부 정보는 노출하지 않음
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from checklist_api.core.exceptions import ChecklistAPIError

logger = logging.getLogger(__name__)


def register_error_handlers(app: FastAPI) -> None:
    """FastAPI 앱에 모든 전역 예외 핸들러를 등록합니다."""

    @app.exception_handler(ChecklistAPIError)
    async def checklist_api_error_handler(request: Request, exc: ChecklistAPIError):
        if exc.http_status >= 500:
            logger.error(f"{exc.code} on {request.url.path}: {exc.message}")
        else:
            logger.warning(f"{exc.code} on {request.url.path}: {exc.message}")
        return JSONResponse(status_code=exc.http_status, content=exc.to_response())

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(request: Request, exc: RequestValidationError):
        logger.warning(f"Validation error on {request.url.path}: {exc.errors()}")
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content=build_validation_error_response(exc),
        )

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        logger.error(f"Unhandled exception on {request.url.path}: {exc}", exc_info=True)
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"error": {"code": "INTERNAL_ERROR", "message": "An unexpected error occurred"}},
        )


def build_validation_error_response(exc: RequestValidationError) -> dict:
    """Pydantic 검증 오류를 필드 단위 상세 정보가 담긴 응답으로 변환합니다."""
    return {
        "error": {
            "code": "VALIDATION_ERROR",
            "message": "Invalid request data",
            "details": [
                {
                    "field": ".".join(str(loc) for loc in e["loc"]),
                    "message": e["msg"],
                    "type": e["type"],
                }
                for e in exc.errors()
            ],
        },
    }
