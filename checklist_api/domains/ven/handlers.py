# checklist_api/domains/ven/handlers.py

"""
'ven' 도메인 요청 핸들러 모듈입니다.
핸들러는 CRUD 를 호출하고, ORM 객체를 응답 스키마('...Read')로 변환하여 반환합니다.
"""

from typing import List

from checklist_api.core.exceptions import NotFoundError
from checklist_api.core.mediator import RequestContext, mediator
from checklist_api.core.schemas import ensure_partial_update
from checklist_api.domains.ven import commands
from checklist_api.domains.ven import crud as ven_crud
from checklist_api.domains.ven import schemas as ven_schemas

RESOURCE = "ServiceProvider"


@mediator.register(commands.CreateServiceProvider)
async def create_service_provider(
    request: commands.CreateServiceProvider, ctx: RequestContext
) -> ven_schemas.ServiceProviderRead:
    db_obj = await ven_crud.service_provider.create(ctx.db, obj_in=request.data, actor=ctx.actor)
    return ven_schemas.ServiceProviderRead.model_validate(db_obj)


@mediator.register(commands.GetServiceProvider)
async def get_service_provider(
    request: commands.GetServiceProvider, ctx: RequestContext
) -> ven_schemas.ServiceProviderRead:
    db_obj = await ven_crud.service_provider.get(ctx.db, request.supplier_code)
    if db_obj is None:
        raise NotFoundError(RESOURCE, request.supplier_code)
    return ven_schemas.ServiceProviderRead.model_validate(db_obj)


@mediator.register(commands.ListServiceProviders)
async def list_service_providers(
    request: commands.ListServiceProviders, ctx: RequestContext
) -> List[ven_schemas.ServiceProviderRead]:
    rows = await ven_crud.service_provider.get_multi(ctx.db, skip=request.skip, limit=request.limit)
    return [ven_schemas.ServiceProviderRead.model_validate(row) for row in rows]


@mediator.register(commands.UpdateServiceProvider)
async def update_service_provider(request: commands.UpdateServiceProvider, ctx: RequestContext) -> None:
    ensure_partial_update(request.data)
    db_obj = await ven_crud.service_provider.get(ctx.db, request.supplier_code)
    if db_obj is None:
        raise NotFoundError(RESOURCE, request.supplier_code)
    await ven_crud.service_provider.update(ctx.db, db_obj=db_obj, obj_in=request.data, actor=ctx.actor)


@mediator.register(commands.DeleteServiceProvider)
async def delete_service_provider(request: commands.DeleteServiceProvider, ctx: RequestContext) -> None:
    deleted = await ven_crud.service_provider.delete(ctx.db, id=request.supplier_code)
    if deleted is None:
        raise NotFoundError(RESOURCE, request.supplier_code)
