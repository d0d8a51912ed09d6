# checklist_api/domains/ven/crud.py

"""
'ven' 도메인 (서비스 공급업체)의 CRUD(Create, Read, Update, Delete)
작업을 담당하는 모듈입니다.
"""

from typing import Optional

from sqlalchemy.dialects import postgresql, sqlite
from sqlmodel.ext.asyncio.session import AsyncSession

from checklist_api.core.audit import AuditStamp
from checklist_api.core.crud_base import CRUDBase
from checklist_api.core.exceptions import PersistenceError
from checklist_api.domains.ven import models as ven_models
from checklist_api.domains.ven import schemas as ven_schemas

# 방언별 INSERT ... ON CONFLICT 구성 함수
_CONFLICT_AWARE_INSERTS = {
    "postgresql": postgresql.insert,
    "sqlite": sqlite.insert,
}


# =============================================================================
# 1. service_providers 테이블 CRUD
# =============================================================================
class CRUDServiceProvider(
    CRUDBase[
        ven_models.ServiceProvider,
        ven_schemas.ServiceProviderCreate,
        ven_schemas.ServiceProviderUpdate,
    ]
):
    conflict_message = "Service provider with this supplier code already exists"
    delete_conflict_message = "Service provider is still referenced by checklists"

    def __init__(self):
        super().__init__(ven_models.ServiceProvider)

    async def get_or_register(
        self,
        db: AsyncSession,
        *,
        supplier_code: str,
        supplier_name: Optional[str],
        actor: Optional[str],
    ) -> ven_models.ServiceProvider:
        """
        공급업체 코드로 조회하고, 없으면 같은 작업 단위 안에서 새로 등록합니다 (커밋하지 않음).
        이미 등록된 공급업체의 이름은 변경하지 않습니다.

        동시에 같은 코드를 처음 참조하는 요청이 여럿이어도 충돌로 실패하지 않도록
        INSERT ... ON CONFLICT DO NOTHING 으로 등록한 뒤 다시 조회합니다.
        """
        db_obj = await self.get(db, supplier_code)
        if db_obj:
            return db_obj

        dialect = db.get_bind().dialect.name
        insert = _CONFLICT_AWARE_INSERTS.get(dialect)
        if insert is None:
            raise PersistenceError(f"Unsupported database dialect: {dialect}")

        values = {
            "supplier_code": supplier_code,
            "supplier_name": supplier_name or supplier_code,
            **AuditStamp().created(actor).as_values(),
        }
        statement = insert(self.model).values(**values).on_conflict_do_nothing(
            index_elements=["supplier_code"]
        )
        await self._execute(db, statement)

        db_obj = await self.get(db, supplier_code)
        if db_obj is None:
            # 등록과 조회 사이에 다른 작업 단위가 삭제한 경우
            raise PersistenceError("Service provider could not be registered")
        return db_obj


# CRUD 인스턴스 생성
service_provider = CRUDServiceProvider()
