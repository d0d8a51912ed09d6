# tests/__init__.py

"""
FastAPI 애플리케이션의 테스트 스위트 패키지입니다.

주요 하위 디렉토리:
- `core/`: 감사 기록, 요청 중재자, 보안(작업자 결정), 공통 CRUD 에 대한 단위 테스트.
- `domains/`: 각 비즈니스 도메인(prj, ven)의 API 엔드포인트 통합 테스트.
- `conftest.py`: 테스트마다 새로 만드는 SQLite 데이터베이스와 테스트 클라이언트 픽스처.
"""

__title__ = "Project Checklist API Tests"
__description__ = "Test suite for the Project Checklist FastAPI application."
__version__ = "0.1.0"
__all__ = []
