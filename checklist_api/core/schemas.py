# checklist_api/core/schemas.py

"""
모든 API 데이터 전송 객체(DTO)가 공유하는 기본 스키마입니다.

- JSON 필드명은 camelCase (supplierCode, isChecked, createdAt ...) 로 주고받으며,
  입력 시에는 snake_case 필드명도 허용합니다.
- ORM 객체의 속성에서 바로 응답 스키마를 구성할 수 있습니다 (from_attributes).
"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from checklist_api.core.exceptions import ValidationError


class CamelModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
        str_strip_whitespace=True,
    )


class AuditRead(CamelModel):
    """응답에 포함되는 감사 필드입니다. 요청 스키마에는 포함되지 않습니다."""
    created_at: datetime
    created_by: str
    last_updated_at: Optional[datetime] = None
    last_updated_by: Optional[str] = None


def ensure_partial_update(obj_in: BaseModel) -> None:
    """
    부분 수정 요청을 검사합니다.
    변경할 필드가 하나도 없거나, 필수 컬럼에 null 을 지정하면 ValidationError 를 발생시킵니다.
    """
    changes = obj_in.model_dump(exclude_unset=True)
    if not changes:
        raise ValidationError("At least one field must be provided")
    for field, value in changes.items():
        if value is None:
            alias = type(obj_in).model_fields[field].alias or field
            raise ValidationError(f"'{alias}' must not be null", field=alias)
