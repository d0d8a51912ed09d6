# checklist_api/domains/ven/routers.py

"""
'ven' 도메인 (서비스 공급업체 관리)과 관련된 API 엔드포인트를 정의하는 모듈입니다.
"""

from typing import List

from fastapi import APIRouter, Depends, Query, Response, status
from sqlmodel.ext.asyncio.session import AsyncSession

from checklist_api.core import dependencies as deps
from checklist_api.core.mediator import Mediator

from . import commands
from . import handlers  # noqa: F401  (중재자에 핸들러 등록)
from . import schemas as ven_schemas

# APIRouter 인스턴스 생성
router = APIRouter(
    responses={404: {"description": "Not found"}},
)


@router.post(
    "/service-providers",
    response_model=ven_schemas.ServiceProviderRead,
    status_code=status.HTTP_201_CREATED,
    summary="새 서비스 공급업체 등록",
    responses={409: {"description": "Supplier code already registered"}},
)
async def create_service_provider(
    provider_in: ven_schemas.ServiceProviderCreate,
    db: AsyncSession = Depends(deps.get_db_session),
    actor: str = Depends(deps.get_current_actor),
    mediator: Mediator = Depends(deps.get_mediator),
):
    """
    새로운 서비스 공급업체를 등록합니다.
    - **supplierCode**: 공급업체 코드 (필수, 고유)
    - **supplierName**: 공급업체명 (필수)
    """
    return await mediator.send(commands.CreateServiceProvider(data=provider_in), db=db, actor=actor)


@router.get(
    "/service-providers",
    response_model=List[ven_schemas.ServiceProviderRead],
    summary="서비스 공급업체 목록 조회",
)
async def read_service_providers(
    skip: int = Query(0, ge=0),
    limit: int = Query(100, ge=1, le=500),
    db: AsyncSession = Depends(deps.get_db_session),
    mediator: Mediator = Depends(deps.get_mediator),
):
    return await mediator.send(commands.ListServiceProviders(skip=skip, limit=limit), db=db)


@router.get(
    "/service-providers/{supplier_code}",
    response_model=ven_schemas.ServiceProviderRead,
    summary="특정 서비스 공급업체 조회",
)
async def read_service_provider(
    supplier_code: str,
    db: AsyncSession = Depends(deps.get_db_session),
    mediator: Mediator = Depends(deps.get_mediator),
):
    return await mediator.send(commands.GetServiceProvider(supplier_code=supplier_code), db=db)


@router.put(
    "/service-providers/{supplier_code}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="서비스 공급업체 정보 수정",
)
async def update_service_provider(
    supplier_code: str,
    provider_in: ven_schemas.ServiceProviderUpdate,
    db: AsyncSession = Depends(deps.get_db_session),
    actor: str = Depends(deps.get_current_actor),
    mediator: Mediator = Depends(deps.get_mediator),
):
    await mediator.send(
        commands.UpdateServiceProvider(supplier_code=supplier_code, data=provider_in), db=db, actor=actor
    )
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.delete(
    "/service-providers/{supplier_code}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="서비스 공급업체 삭제",
    responses={409: {"description": "Still referenced by checklists"}},
)
async def delete_service_provider(
    supplier_code: str,
    db: AsyncSession = Depends(deps.get_db_session),
    mediator: Mediator = Depends(deps.get_mediator),
):
    """
    서비스 공급업체를 삭제합니다. 체크리스트가 참조 중이면 409 를 반환합니다.
    """
    await mediator.send(commands.DeleteServiceProvider(supplier_code=supplier_code), db=db)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
