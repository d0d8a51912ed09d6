# checklist_api/domains/prj/commands.py

"""
'prj' 도메인의 명령(쓰기)과 조회(읽기) 요청 객체입니다.
"""

import uuid
from dataclasses import dataclass

from checklist_api.domains.prj import schemas as prj_schemas


# =============================================================================
# 1. 프로젝트 (Project)
# =============================================================================
@dataclass(frozen=True)
class CreateProject:
    data: prj_schemas.ProjectCreate


@dataclass(frozen=True)
class UpdateProject:
    project_id: uuid.UUID
    data: prj_schemas.ProjectUpdate


@dataclass(frozen=True)
class DeleteProject:
    project_id: uuid.UUID


@dataclass(frozen=True)
class GetProject:
    project_id: uuid.UUID


@dataclass(frozen=True)
class ListProjects:
    skip: int = 0
    limit: int = 100


# =============================================================================
# 2. 체크리스트 (Checklist)
# =============================================================================
@dataclass(frozen=True)
class CreateChecklist:
    project_id: uuid.UUID
    data: prj_schemas.ChecklistCreate


@dataclass(frozen=True)
class UpdateChecklist:
    checklist_id: int
    data: prj_schemas.ChecklistUpdate


@dataclass(frozen=True)
class DeleteChecklist:
    checklist_id: int


@dataclass(frozen=True)
class GetChecklist:
    checklist_id: int


@dataclass(frozen=True)
class ListProjectChecklists:
    project_id: uuid.UUID
