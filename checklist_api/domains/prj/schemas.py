# checklist_api/domains/prj/schemas.py

"""
'prj' 도메인 (프로젝트 및 체크리스트)의 API 데이터 전송 객체(DTO)를 정의하는 모듈입니다.

요청 스키마에는 감사 필드와 서버 생성 ID가 포함되지 않으며,
응답 스키마('...Read')는 ORM 객체에서 바로 구성됩니다.
"""

import uuid
from typing import List, Optional

from pydantic import Field

from checklist_api.core.schemas import AuditRead, CamelModel


# =============================================================================
# 1. 체크리스트 (Checklist) 스키마
# =============================================================================
class ChecklistBase(CamelModel):
    supplier_code: str = Field(..., min_length=1, max_length=50)
    document_name: str = Field(..., min_length=1, max_length=200)
    is_checked: bool = False


class ChecklistCreate(ChecklistBase):
    # 처음 참조되는 공급업체 코드일 때 등록할 공급업체명 (생략 시 코드 사용)
    supplier_name: Optional[str] = Field(None, min_length=1, max_length=200)


class ChecklistUpdate(CamelModel):
    document_name: Optional[str] = Field(None, min_length=1, max_length=200)
    is_checked: Optional[bool] = None


class ChecklistRead(AuditRead, ChecklistBase):
    id: int
    project_id: uuid.UUID


# =============================================================================
# 2. 프로젝트 (Project) 스키마
# =============================================================================
class ProjectBase(CamelModel):
    name: str = Field(..., min_length=1, max_length=200)
    region: str = Field(..., min_length=1, max_length=100)


class ProjectCreate(ProjectBase):
    pass


class ProjectUpdate(CamelModel):
    name: Optional[str] = Field(None, min_length=1, max_length=200)
    region: Optional[str] = Field(None, min_length=1, max_length=100)


class ProjectRead(AuditRead, ProjectBase):
    id: uuid.UUID


class ProjectDetailRead(ProjectRead):
    """단일 프로젝트 조회 응답 - 소속 체크리스트 목록을 포함합니다."""
    checklists: List[ChecklistRead] = []
