# checklist_api/__init__.py

"""
프로젝트 체크리스트(Project Checklist) FastAPI 애플리케이션의 메인 패키지입니다.

이 패키지는 FastAPI 애플리케이션의 진입점 (main.py)과
공통 설정, 데이터베이스 연결, 감사(audit) 기록, 요청 중재자(mediator)를 담는 core 서브패키지,
그리고 각 비즈니스 도메인(prj: 프로젝트/체크리스트, ven: 서비스 공급업체)을
대표하는 domains 서브패키지로 구성됩니다.
"""

APP_NAME = "Project Checklist API"
APP_VERSION = "0.1.0"
API_PREFIX = "/api/v1"  # API 라우트의 공통 접두사 (main.py에서 적용)

__version__ = APP_VERSION
__title__ = APP_NAME
__description__ = "Project / ServiceProvider / Checklist CRUD API backend."
__all__ = ["APP_NAME", "APP_VERSION", "API_PREFIX"]
