# checklist_api/domains/prj/models.py

"""
'prj' 도메인 (프로젝트 및 체크리스트)의 데이터베이스 ORM 모델을 정의하는 모듈입니다.

- projects   : 프로젝트 (UUID 기본 키, 생성 후 변경 불가)
- checklists : 프로젝트별 공급업체 문서 체크리스트
    * (project_id, supplier_code, document_name) 유일 제약
    * project_id -> projects.id ON DELETE CASCADE
    * supplier_code -> service_providers.supplier_code (삭제 전파 없음)
"""

import uuid
from typing import List, Optional, TYPE_CHECKING

from sqlalchemy import ForeignKey, String, UniqueConstraint, Uuid
from sqlmodel import Column, Field, Relationship

from checklist_api.core.audit import AuditFields

if TYPE_CHECKING:
    from checklist_api.domains.ven.models import ServiceProvider


CHECKLIST_UNIQUE_CONSTRAINT = "uq_checklist_project_supplier_document"


# =============================================================================
# 1. projects 테이블 모델
# =============================================================================
class ProjectBase(AuditFields):
    """
    projects 테이블의 기본 속성을 정의하는 SQLModel Base 클래스입니다.
    """
    name: str = Field(max_length=200, description="프로젝트명")
    region: str = Field(max_length=100, description="지역")


class Project(ProjectBase, table=True):
    """
    projects 테이블에 매핑되는 SQLModel ORM 클래스입니다.
    """
    __tablename__ = "projects"

    id: uuid.UUID = Field(default_factory=uuid.uuid4, primary_key=True, description="프로젝트 ID (서버 생성)")

    #  관계 정의: Checklist와의 일대다 관계
    #  passive_deletes: 자식 행 삭제는 데이터베이스의 ON DELETE CASCADE 에 맡깁니다.
    checklists: List["Checklist"] = Relationship(
        back_populates="project",
        sa_relationship_kwargs={
            "cascade": "all, delete-orphan",
            "passive_deletes": True,
            "order_by": "Checklist.id",
        },
    )


# =============================================================================
# 2. checklists 테이블 모델
# =============================================================================
class ChecklistBase(AuditFields):
    """
    checklists 테이블의 기본 속성을 정의하는 SQLModel Base 클래스입니다.
    """
    document_name: str = Field(max_length=200, description="문서명")
    is_checked: bool = Field(default=False, description="확인 여부")


class Checklist(ChecklistBase, table=True):
    """
    checklists 테이블에 매핑되는 SQLModel ORM 클래스입니다.
    """
    __tablename__ = "checklists"
    __table_args__ = (
        UniqueConstraint("project_id", "supplier_code", "document_name", name=CHECKLIST_UNIQUE_CONSTRAINT),
    )

    id: Optional[int] = Field(default=None, primary_key=True)
    project_id: uuid.UUID = Field(
        sa_column=Column(Uuid, ForeignKey("projects.id", ondelete="CASCADE"), nullable=False, index=True),
        description="소속 프로젝트 ID (FK)",
    )
    supplier_code: str = Field(
        sa_column=Column(String(50), ForeignKey("service_providers.supplier_code"), nullable=False, index=True),
        description="공급업체 코드 (FK)",
    )

    #  관계 정의
    project: Optional["Project"] = Relationship(back_populates="checklists")
    service_provider: Optional["ServiceProvider"] = Relationship(back_populates="checklists")
