# checklist_api/domains/ven/__init__.py

"""
FastAPI 애플리케이션의 'ven' 도메인 패키지입니다.

'ven' 도메인은 서비스 공급업체(ServiceProvider) 정보를 관리합니다.
공급업체는 공급업체 코드(supplier_code)로 식별되며, 체크리스트가 이를 참조합니다.

주요 서브모듈:
- `models.py`: 'service_providers' 테이블에 매핑되는 SQLModel 정의.
- `schemas.py`: 요청 및 응답 유효성 검사를 위한 Pydantic 모델.
- `crud.py`: 비동기 CRUD 로직 (체크리스트 생성 시 자동 등록 포함).
- `commands.py` / `handlers.py`: 중재자를 통해 전달되는 요청 객체와 그 처리기.
- `routers.py`: FastAPI API 엔드포인트 정의.
"""

__title__ = "Checklist Service Provider Domain"
__description__ = "Manages service providers referenced by checklists."
__version__ = "0.1.0"
__all__ = []
