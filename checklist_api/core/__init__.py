# checklist_api/core/__init__.py

"""
FastAPI 애플리케이션의 핵심 구성 요소 패키지입니다.

- `config.py`: 설정 및 환경 변수 관리 (Pydantic Settings).
- `database.py`: 비동기 엔진, 요청 단위 세션, 테이블 생성.
- `audit.py`: 감사 필드 선언과 기록 함수.
- `crud_base.py`: 감사 기록과 예외 변환을 포함한 공통 CRUD.
- `mediator.py`: 요청 타입별 핸들러로 전달하는 요청 중재자.
- `schemas.py`: camelCase 응답/요청 기본 스키마.
- `exceptions.py` / `error_handlers.py`: 예외 계층과 전역 예외 핸들러.
- `security.py` / `dependencies.py`: Bearer 토큰 작업자 결정과 FastAPI 의존성.
- `log_config.py`: 로깅 설정.
"""

__title__ = "Checklist API Core"
__description__ = "Core components for the Project Checklist FastAPI application."
__version__ = "0.1.0"
__all__ = []
