# checklist_api/domains/ven/commands.py

"""
'ven' 도메인의 명령(쓰기)과 조회(읽기) 요청 객체입니다.
각 요청은 core.mediator 를 통해 handlers.py 의 핸들러로 전달됩니다.
"""

from dataclasses import dataclass

from checklist_api.domains.ven import schemas as ven_schemas


# --- 명령 (Commands) ---
@dataclass(frozen=True)
class CreateServiceProvider:
    data: ven_schemas.ServiceProviderCreate


@dataclass(frozen=True)
class UpdateServiceProvider:
    supplier_code: str
    data: ven_schemas.ServiceProviderUpdate


@dataclass(frozen=True)
class DeleteServiceProvider:
    supplier_code: str


# --- 조회 (Queries) ---
@dataclass(frozen=True)
class GetServiceProvider:
    supplier_code: str


@dataclass(frozen=True)
class ListServiceProviders:
    skip: int = 0
    limit: int = 100
