# checklist_api/domains/models/__init__.py

"""
이 파일은 모든 도메인의 SQLModel 모델들을 한 곳에서 중앙 관리하여,
다른 모듈(데이터베이스 초기화, Alembic, 테스트)에서 쉽게 임포트할 수 있도록 하는 역할을 합니다.
SQLModel.metadata가 모든 테이블을 인식하도록 보장합니다.
"""

# ven (ServiceProvider)
from checklist_api.domains.ven.models import ServiceProvider

# prj (Project, Checklist)
from checklist_api.domains.prj.models import Project, Checklist


#  `from checklist_api.domains.models import *` 구문으로 임포트될 모델 목록 정의
__all__ = [
    # ven
    "ServiceProvider",
    # prj
    "Project", "Checklist",
]
