# checklist_api/domains/ven/schemas.py

"""
'ven' 도메인 (서비스 공급업체 관리)의 API 데이터 전송 객체(DTO)를 정의하는 모듈입니다.
응답 스키마는 다른 도메인과의 일관성을 위해 '...Read' 패턴을 사용합니다.
"""

from typing import Optional

from pydantic import Field

from checklist_api.core.schemas import AuditRead, CamelModel


# =============================================================================
# 1. 서비스 공급업체 (ServiceProvider) 스키마
# =============================================================================
class ServiceProviderBase(CamelModel):
    supplier_code: str = Field(..., min_length=1, max_length=50)
    supplier_name: str = Field(..., min_length=1, max_length=200)


class ServiceProviderCreate(ServiceProviderBase):
    pass


class ServiceProviderUpdate(CamelModel):
    supplier_name: Optional[str] = Field(None, min_length=1, max_length=200)


class ServiceProviderRead(AuditRead, ServiceProviderBase):
    pass
