# checklist_api/core/exceptions.py

"""
애플리케이션 전역에서 사용하는 예외 계층을 정의하는 모듈입니다.

모든 도메인/인프라 예외는 ChecklistAPIError를 상속하며,
전역 예외 핸들러(core/error_handlers.py)가 이를 일관된 JSON 응답으로 변환합니다.

    - ValidationError   : 400 (필드 단위 상세 정보 포함)
    - NotFoundError     : 404
    - ConflictError     : 409 (유일성/참조 제약 위반)
    - PersistenceError  : 500 (분류되지 않은 데이터베이스 오류)
"""

from typing import Any, Dict, List, Optional

from fastapi import status


class ChecklistAPIError(Exception):
    """모든 애플리케이션 예외의 기본 클래스입니다."""

    code: str = "INTERNAL_ERROR"
    http_status: int = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str, details: Optional[List[Dict[str, Any]]] = None):
        super().__init__(message)
        self.message = message
        self.details = details

    def to_response(self) -> Dict[str, Any]:
        """REST 오류 응답 형식으로 변환합니다."""
        error: Dict[str, Any] = {"code": self.code, "message": self.message}
        if self.details:
            error["details"] = self.details
        return {"error": error}


class ValidationError(ChecklistAPIError):
    """입력값이 잘못되었거나 허용 범위를 벗어났습니다."""

    code = "VALIDATION_ERROR"
    http_status = status.HTTP_400_BAD_REQUEST

    def __init__(self, message: str, field: Optional[str] = None):
        details = [{"field": field, "message": message, "type": "value_error"}] if field else None
        super().__init__(message, details)
        self.field = field


class NotFoundError(ChecklistAPIError):
    """참조한 엔티티가 존재하지 않습니다."""

    code = "RESOURCE_NOT_FOUND"
    http_status = status.HTTP_404_NOT_FOUND

    def __init__(self, resource: str, resource_id: Any):
        super().__init__(f"{resource} '{resource_id}' not found")
        self.resource = resource
        self.resource_id = resource_id


class ConflictError(ChecklistAPIError):
    """저장소 수준의 제약 조건(유일성, 참조 무결성)을 위반했습니다."""

    code = "CONFLICT"
    http_status = status.HTTP_409_CONFLICT


class PersistenceError(ChecklistAPIError):
    """분류되지 않은 데이터베이스 오류입니다. 내부 정보는 메시지에 노출하지 않습니다."""

    code = "PERSISTENCE_ERROR"
    http_status = status.HTTP_500_INTERNAL_SERVER_ERROR
