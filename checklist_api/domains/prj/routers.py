# checklist_api/domains/prj/routers.py

"""
'prj' 도메인 (프로젝트 및 체크리스트)과 관련된 API 엔드포인트를 정의하는 모듈입니다.

라우터는 요청 객체를 만들어 중재자(mediator)에게 전달하기만 하며,
검증은 스키마가, 처리와 응답 변환은 handlers.py 가 담당합니다.
"""

import uuid
from typing import List

from fastapi import APIRouter, Depends, Query, Response, status
from sqlmodel.ext.asyncio.session import AsyncSession

from checklist_api.core import dependencies as deps
from checklist_api.core.mediator import Mediator

from . import commands
from . import handlers  # noqa: F401  (중재자에 핸들러 등록)
from . import schemas as prj_schemas

# APIRouter 인스턴스 생성
router = APIRouter(
    responses={404: {"description": "Not found"}},  # 이 라우터의 공통 응답 정의
)


# =============================================================================
# 1. 프로젝트 (Project) API
# =============================================================================
@router.post(
    "/projects",
    response_model=prj_schemas.ProjectRead,
    status_code=status.HTTP_201_CREATED,
    summary="새 프로젝트 생성",
)
async def create_project(
    project_in: prj_schemas.ProjectCreate,
    db: AsyncSession = Depends(deps.get_db_session),
    actor: str = Depends(deps.get_current_actor),
    mediator: Mediator = Depends(deps.get_mediator),
):
    """
    새로운 프로젝트를 생성합니다.
    - **name**: 프로젝트명 (필수, 최대 200자)
    - **region**: 지역 (필수, 최대 100자)
    """
    return await mediator.send(commands.CreateProject(data=project_in), db=db, actor=actor)


@router.get(
    "/projects",
    response_model=List[prj_schemas.ProjectRead],
    summary="프로젝트 목록 조회",
)
async def read_projects(
    skip: int = Query(0, ge=0),
    limit: int = Query(100, ge=1, le=500),
    db: AsyncSession = Depends(deps.get_db_session),
    mediator: Mediator = Depends(deps.get_mediator),
):
    return await mediator.send(commands.ListProjects(skip=skip, limit=limit), db=db)


@router.get(
    "/projects/{project_id}",
    response_model=prj_schemas.ProjectDetailRead,
    summary="특정 프로젝트 조회 (체크리스트 포함)",
)
async def read_project(
    project_id: uuid.UUID,
    db: AsyncSession = Depends(deps.get_db_session),
    mediator: Mediator = Depends(deps.get_mediator),
):
    return await mediator.send(commands.GetProject(project_id=project_id), db=db)


@router.put(
    "/projects/{project_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="프로젝트 정보 수정",
)
async def update_project(
    project_id: uuid.UUID,
    project_in: prj_schemas.ProjectUpdate,
    db: AsyncSession = Depends(deps.get_db_session),
    actor: str = Depends(deps.get_current_actor),
    mediator: Mediator = Depends(deps.get_mediator),
):
    await mediator.send(commands.UpdateProject(project_id=project_id, data=project_in), db=db, actor=actor)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.delete(
    "/projects/{project_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="프로젝트 삭제 (소속 체크리스트 포함)",
)
async def delete_project(
    project_id: uuid.UUID,
    db: AsyncSession = Depends(deps.get_db_session),
    mediator: Mediator = Depends(deps.get_mediator),
):
    await mediator.send(commands.DeleteProject(project_id=project_id), db=db)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


# =============================================================================
# 2. 체크리스트 (Checklist) API
# =============================================================================
@router.post(
    "/projects/{project_id}/checklists",
    response_model=prj_schemas.ChecklistRead,
    status_code=status.HTTP_201_CREATED,
    summary="프로젝트에 체크리스트 추가",
    responses={409: {"description": "Duplicate (project, supplier code, document name)"}},
)
async def create_checklist(
    project_id: uuid.UUID,
    checklist_in: prj_schemas.ChecklistCreate,
    db: AsyncSession = Depends(deps.get_db_session),
    actor: str = Depends(deps.get_current_actor),
    mediator: Mediator = Depends(deps.get_mediator),
):
    """
    프로젝트에 새 체크리스트를 추가합니다.
    - **supplierCode**: 공급업체 코드 (필수, 처음 사용되는 코드는 자동 등록)
    - **documentName**: 문서명 (필수)
    - **isChecked**: 확인 여부 (기본값 false)
    - **supplierName**: 자동 등록 시 사용할 공급업체명 (선택)
    """
    return await mediator.send(
        commands.CreateChecklist(project_id=project_id, data=checklist_in), db=db, actor=actor
    )


@router.get(
    "/projects/{project_id}/checklists",
    response_model=List[prj_schemas.ChecklistRead],
    summary="프로젝트의 체크리스트 목록 조회",
)
async def read_project_checklists(
    project_id: uuid.UUID,
    db: AsyncSession = Depends(deps.get_db_session),
    mediator: Mediator = Depends(deps.get_mediator),
):
    return await mediator.send(commands.ListProjectChecklists(project_id=project_id), db=db)


@router.get(
    "/checklists/{checklist_id}",
    response_model=prj_schemas.ChecklistRead,
    summary="특정 체크리스트 조회",
)
async def read_checklist(
    checklist_id: int,
    db: AsyncSession = Depends(deps.get_db_session),
    mediator: Mediator = Depends(deps.get_mediator),
):
    return await mediator.send(commands.GetChecklist(checklist_id=checklist_id), db=db)


@router.put(
    "/checklists/{checklist_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="체크리스트 수정",
)
async def update_checklist(
    checklist_id: int,
    checklist_in: prj_schemas.ChecklistUpdate,
    db: AsyncSession = Depends(deps.get_db_session),
    actor: str = Depends(deps.get_current_actor),
    mediator: Mediator = Depends(deps.get_mediator),
):
    await mediator.send(
        commands.UpdateChecklist(checklist_id=checklist_id, data=checklist_in), db=db, actor=actor
    )
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.delete(
    "/checklists/{checklist_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="체크리스트 삭제",
)
async def delete_checklist(
    checklist_id: int,
    db: AsyncSession = Depends(deps.get_db_session),
    mediator: Mediator = Depends(deps.get_mediator),
):
    await mediator.send(commands.DeleteChecklist(checklist_id=checklist_id), db=db)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
