# checklist_api/domains/prj/crud.py

"""
'prj' 도메인 (프로젝트 및 체크리스트)의 CRUD 로직을 담당하는 모듈입니다.
"""

import uuid
from typing import List, Optional

from sqlalchemy.orm import selectinload
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from checklist_api.core.crud_base import CRUDBase
from checklist_api.domains.prj import models as prj_models
from checklist_api.domains.prj import schemas as prj_schemas


# =============================================================================
# 1. projects 테이블 CRUD
# =============================================================================
class CRUDProject(
    CRUDBase[
        prj_models.Project,
        prj_schemas.ProjectCreate,
        prj_schemas.ProjectUpdate,
    ]
):
    def __init__(self):
        super().__init__(model=prj_models.Project)

    async def get_with_checklists(self, db: AsyncSession, *, id: uuid.UUID) -> Optional[prj_models.Project]:
        """프로젝트와 소속 체크리스트를 함께 조회합니다."""
        statement = (
            select(self.model)
            .where(self.model.id == id)
            .options(selectinload(self.model.checklists))
            .execution_options(populate_existing=True)
        )
        result = await db.execute(statement)
        return result.scalars().one_or_none()

    async def get_multi_ordered(self, db: AsyncSession, *, skip: int = 0, limit: int = 100) -> List[prj_models.Project]:
        """생성 일시 순으로 프로젝트 목록을 조회합니다."""
        statement = (
            select(self.model)
            .order_by(self.model.created_at, self.model.name)
            .offset(skip)
            .limit(limit)
        )
        result = await db.execute(statement)
        return list(result.scalars().all())


project = CRUDProject()


# =============================================================================
# 2. checklists 테이블 CRUD
# =============================================================================
class CRUDChecklist(
    CRUDBase[
        prj_models.Checklist,
        prj_schemas.ChecklistCreate,
        prj_schemas.ChecklistUpdate,
    ]
):
    conflict_message = "Checklist with this project, supplier code and document name already exists"

    def __init__(self):
        super().__init__(model=prj_models.Checklist)

    async def get_by_project(self, db: AsyncSession, *, project_id: uuid.UUID) -> List[prj_models.Checklist]:
        """특정 프로젝트에 속한 모든 체크리스트 목록을 조회합니다."""
        statement = (
            select(self.model)
            .where(self.model.project_id == project_id)
            .order_by(self.model.id)
        )
        result = await db.execute(statement)
        return list(result.scalars().all())


checklist = CRUDChecklist()
