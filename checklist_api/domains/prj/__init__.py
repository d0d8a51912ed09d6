# checklist_api/domains/prj/__init__.py

"""
FastAPI 애플리케이션의 'prj' 도메인 패키지입니다.

'prj' 도메인은 프로젝트(Project)와 프로젝트에 속한 체크리스트(Checklist)를 관리합니다.
- 체크리스트는 (프로젝트, 공급업체 코드, 문서명) 조합으로 유일합니다.
- 프로젝트를 삭제하면 소속 체크리스트도 함께 삭제됩니다.
"""

__title__ = "Checklist Project Domain"
__description__ = "Manages projects and their document checklists."
__version__ = "0.1.0"
__all__ = []
