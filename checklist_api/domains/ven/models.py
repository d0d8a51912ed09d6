# checklist_api/domains/ven/models.py

"""
'ven' 도메인 (서비스 공급업체)의 데이터베이스 ORM 모델을 정의하는 모듈입니다.

공급업체 코드(supplier_code)가 기본 키이며, 체크리스트(prj.checklists)가
이 코드를 외래 키로 참조합니다 (ON DELETE 없음: 참조 중인 공급업체는 삭제할 수 없습니다).
"""

from typing import List, TYPE_CHECKING

from sqlmodel import Field, Relationship

from checklist_api.core.audit import AuditFields

#  TYPE_CHECKING을 사용하여 순환 임포트 문제를 방지합니다.
if TYPE_CHECKING:
    from checklist_api.domains.prj.models import Checklist


# =============================================================================
# 1. service_providers 테이블 모델
# =============================================================================
class ServiceProviderBase(AuditFields):
    """
    service_providers 테이블의 기본 속성을 정의하는 SQLModel Base 클래스입니다.
    """
    supplier_code: str = Field(primary_key=True, max_length=50, description="공급업체 코드 (PK)")
    supplier_name: str = Field(max_length=200, description="공급업체명")


class ServiceProvider(ServiceProviderBase, table=True):
    """
    service_providers 테이블에 매핑되는 SQLModel ORM 클래스입니다.
    """
    __tablename__ = "service_providers"

    #  관계 정의: Checklist와의 일대다 관계 (삭제 전파 없음)
    checklists: List["Checklist"] = Relationship(
        back_populates="service_provider",
        sa_relationship_kwargs={"passive_deletes": "all"},
    )
