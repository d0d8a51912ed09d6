# checklist_api/core/audit.py

"""
감사(audit) 필드 정의 및 기록(stamping) 로직을 담당하는 모듈입니다.

- AuditFields : 모든 테이블이 공유하는 4개의 감사 컬럼 선언 (동작 없음)
- AuditStamp  : 감사 필드 4개를 하나의 값으로 묶는 불변 값 객체 (기록 함수가 이 값을 만들어 적용)
- stamp_created / stamp_updated : 저장 경로에서만 호출되는 기록 함수

작업자(actor)는 전역 상태가 아니라 모든 쓰기 작업에 명시적으로 전달되며,
생성/수정 의도 역시 호출 지점(CRUD create/update)에서 명시적으로 결정됩니다.
"""

from dataclasses import asdict, dataclass, replace
from datetime import datetime, UTC
from typing import Any, Dict, Optional

from sqlalchemy.types import TIMESTAMP
from sqlmodel import Field, SQLModel

from checklist_api.core.config import settings


class AuditFields(SQLModel):
    """
    created_at / created_by / last_updated_at / last_updated_by 컬럼 선언입니다.
    호출자는 이 값을 직접 설정하지 않으며, 저장 경로에서만 채워집니다.
    """
    created_at: Optional[datetime] = Field(
        default=None,
        sa_type=TIMESTAMP(timezone=True),
        description="레코드 생성 일시",
    )
    created_by: Optional[str] = Field(default=None, max_length=100, description="레코드 생성자")
    last_updated_at: Optional[datetime] = Field(
        default=None,
        sa_type=TIMESTAMP(timezone=True),
        description="레코드 마지막 수정 일시",
    )
    last_updated_by: Optional[str] = Field(default=None, max_length=100, description="레코드 마지막 수정자")


@dataclass(frozen=True)
class AuditStamp:
    """
    감사 필드 4개의 값 묶음입니다.
    created / updated 는 새 값을 돌려주며, apply_to 가 엔티티에 기록합니다.
    """
    created_at: Optional[datetime] = None
    created_by: Optional[str] = None
    last_updated_at: Optional[datetime] = None
    last_updated_by: Optional[str] = None

    @classmethod
    def of(cls, entity: Any) -> "AuditStamp":
        return cls(
            created_at=entity.created_at,
            created_by=entity.created_by,
            last_updated_at=entity.last_updated_at,
            last_updated_by=entity.last_updated_by,
        )

    def created(self, actor: Optional[str], now: Optional[datetime] = None) -> "AuditStamp":
        return replace(self, created_at=now or datetime.now(UTC), created_by=resolve_actor(actor))

    def updated(self, actor: Optional[str], now: Optional[datetime] = None) -> "AuditStamp":
        return replace(self, last_updated_at=now or datetime.now(UTC), last_updated_by=resolve_actor(actor))

    def as_values(self) -> Dict[str, Any]:
        """INSERT 문 등에 바로 넘길 수 있는 컬럼 값 딕셔너리"""
        return asdict(self)

    def apply_to(self, entity: Any) -> Any:
        for key, value in self.as_values().items():
            setattr(entity, key, value)
        return entity


def resolve_actor(actor: Optional[str]) -> str:
    """작업자가 없거나 공백이면 설정된 기본 작업자("system")를 반환합니다."""
    if actor is None or not actor.strip():
        return settings.DEFAULT_ACTOR
    return actor.strip()


def stamp_created(entity: Any, actor: Optional[str], now: Optional[datetime] = None) -> Any:
    """새로 생성되는 엔티티의 created_at / created_by 를 기록합니다."""
    return AuditStamp.of(entity).created(actor, now).apply_to(entity)


def stamp_updated(entity: Any, actor: Optional[str], now: Optional[datetime] = None) -> Any:
    """수정되는 엔티티의 last_updated_at / last_updated_by 를 기록합니다. created_* 는 건드리지 않습니다."""
    return AuditStamp.of(entity).updated(actor, now).apply_to(entity)
