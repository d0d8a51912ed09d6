# checklist_api/domains/prj/handlers.py

"""
'prj' 도메인 요청 핸들러 모듈입니다.

- 존재 확인(NotFoundError)은 핸들러에서, 유일성 검사는 데이터베이스 제약에서 처리합니다.
- 체크리스트 생성 시 처음 참조되는 공급업체 코드는 같은 작업 단위 안에서 자동 등록됩니다.
"""

import uuid
from typing import List

from sqlmodel.ext.asyncio.session import AsyncSession

from checklist_api.core.exceptions import NotFoundError
from checklist_api.core.mediator import RequestContext, mediator
from checklist_api.core.schemas import ensure_partial_update
from checklist_api.domains.prj import commands
from checklist_api.domains.prj import crud as prj_crud
from checklist_api.domains.prj import models as prj_models
from checklist_api.domains.prj import schemas as prj_schemas
from checklist_api.domains.ven import crud as ven_crud


async def _require_project(db: AsyncSession, project_id: uuid.UUID) -> prj_models.Project:
    db_project = await prj_crud.project.get(db, project_id)
    if db_project is None:
        raise NotFoundError("Project", project_id)
    return db_project


async def _require_checklist(db: AsyncSession, checklist_id: int) -> prj_models.Checklist:
    db_checklist = await prj_crud.checklist.get(db, checklist_id)
    if db_checklist is None:
        raise NotFoundError("Checklist", checklist_id)
    return db_checklist


# =============================================================================
# 1. 프로젝트 (Project) 핸들러
# =============================================================================
@mediator.register(commands.CreateProject)
async def create_project(request: commands.CreateProject, ctx: RequestContext) -> prj_schemas.ProjectRead:
    db_project = await prj_crud.project.create(ctx.db, obj_in=request.data, actor=ctx.actor)
    return prj_schemas.ProjectRead.model_validate(db_project)


@mediator.register(commands.GetProject)
async def get_project(request: commands.GetProject, ctx: RequestContext) -> prj_schemas.ProjectDetailRead:
    db_project = await prj_crud.project.get_with_checklists(ctx.db, id=request.project_id)
    if db_project is None:
        raise NotFoundError("Project", request.project_id)
    return prj_schemas.ProjectDetailRead.model_validate(db_project)


@mediator.register(commands.ListProjects)
async def list_projects(request: commands.ListProjects, ctx: RequestContext) -> List[prj_schemas.ProjectRead]:
    rows = await prj_crud.project.get_multi_ordered(ctx.db, skip=request.skip, limit=request.limit)
    return [prj_schemas.ProjectRead.model_validate(row) for row in rows]


@mediator.register(commands.UpdateProject)
async def update_project(request: commands.UpdateProject, ctx: RequestContext) -> None:
    ensure_partial_update(request.data)
    db_project = await _require_project(ctx.db, request.project_id)
    await prj_crud.project.update(ctx.db, db_obj=db_project, obj_in=request.data, actor=ctx.actor)


@mediator.register(commands.DeleteProject)
async def delete_project(request: commands.DeleteProject, ctx: RequestContext) -> None:
    # 소속 체크리스트는 ON DELETE CASCADE 로 함께 삭제됩니다.
    deleted = await prj_crud.project.delete(ctx.db, id=request.project_id)
    if deleted is None:
        raise NotFoundError("Project", request.project_id)


# =============================================================================
# 2. 체크리스트 (Checklist) 핸들러
# =============================================================================
@mediator.register(commands.CreateChecklist)
async def create_checklist(request: commands.CreateChecklist, ctx: RequestContext) -> prj_schemas.ChecklistRead:
    await _require_project(ctx.db, request.project_id)
    await ven_crud.service_provider.get_or_register(
        ctx.db,
        supplier_code=request.data.supplier_code,
        supplier_name=request.data.supplier_name,
        actor=ctx.actor,
    )
    db_checklist = await prj_crud.checklist.create(
        ctx.db, obj_in=request.data, actor=ctx.actor, project_id=request.project_id
    )
    return prj_schemas.ChecklistRead.model_validate(db_checklist)


@mediator.register(commands.ListProjectChecklists)
async def list_project_checklists(
    request: commands.ListProjectChecklists, ctx: RequestContext
) -> List[prj_schemas.ChecklistRead]:
    await _require_project(ctx.db, request.project_id)
    rows = await prj_crud.checklist.get_by_project(ctx.db, project_id=request.project_id)
    return [prj_schemas.ChecklistRead.model_validate(row) for row in rows]


@mediator.register(commands.GetChecklist)
async def get_checklist(request: commands.GetChecklist, ctx: RequestContext) -> prj_schemas.ChecklistRead:
    db_checklist = await _require_checklist(ctx.db, request.checklist_id)
    return prj_schemas.ChecklistRead.model_validate(db_checklist)


@mediator.register(commands.UpdateChecklist)
async def update_checklist(request: commands.UpdateChecklist, ctx: RequestContext) -> None:
    ensure_partial_update(request.data)
    db_checklist = await _require_checklist(ctx.db, request.checklist_id)
    await prj_crud.checklist.update(ctx.db, db_obj=db_checklist, obj_in=request.data, actor=ctx.actor)


@mediator.register(commands.DeleteChecklist)
async def delete_checklist(request: commands.DeleteChecklist, ctx: RequestContext) -> None:
    deleted = await prj_crud.checklist.delete(ctx.db, id=request.checklist_id)
    if deleted is None:
        raise NotFoundError("Checklist", request.checklist_id)
