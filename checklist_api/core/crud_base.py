# checklist_api/core/crud_base.py

"""
공통 CRUD(Create, Read, Update, Delete) 작업을 위한 기본 클래스 모듈입니다.
모든 메서드는 비동기(async) 환경에 맞게 작성되었습니다.

- create / update 는 작업자(actor)를 명시적으로 받아 감사 필드를 기록합니다.
- 커밋 중 발생한 IntegrityError 는 ConflictError 로, 그 외 SQLAlchemyError 는
  PersistenceError 로 변환되며, 두 경우 모두 세션을 롤백하여 상태를 변경하지 않습니다.
"""

import logging
from typing import Any, Generic, List, NoReturn, Optional, Type, TypeVar

from pydantic import BaseModel
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlmodel import SQLModel, select
from sqlmodel.ext.asyncio.session import AsyncSession

from checklist_api.core.audit import stamp_created, stamp_updated
from checklist_api.core.exceptions import ConflictError, PersistenceError

logger = logging.getLogger(__name__)

ModelType = TypeVar("ModelType", bound=SQLModel)
CreateSchemaType = TypeVar("CreateSchemaType", bound=BaseModel)
UpdateSchemaType = TypeVar("UpdateSchemaType", bound=BaseModel)


class CRUDBase(Generic[ModelType, CreateSchemaType, UpdateSchemaType]):
    """
    모든 CRUD 작업에 대한 기본 클래스를 정의합니다.
    """
    # 유일성 위반 시 ConflictError 에 담길 메시지 (하위 클래스에서 재정의)
    conflict_message: str = "Record conflicts with an existing record"
    # 삭제 시 참조 무결성 위반 메시지
    delete_conflict_message: str = "Record is still referenced by other records"

    def __init__(self, model: Type[ModelType]):
        self.model = model

    async def get(self, db: AsyncSession, id: Any) -> Optional[ModelType]:
        """
        기본 키를 기준으로 단일 레코드를 조회합니다.
        """
        return await db.get(self.model, id)

    async def get_multi(
        self, db: AsyncSession, *, skip: int = 0, limit: int = 100, **kwargs: Any
    ) -> List[ModelType]:
        """
        여러 레코드를 조회합니다. 필터링을 위한 키워드 인자를 지원합니다.
        """
        query = select(self.model)
        for field, value in kwargs.items():
            if hasattr(self.model, field):
                query = query.where(getattr(self.model, field) == value)
        query = query.offset(skip).limit(limit)

        result = await db.execute(query)
        return list(result.scalars().all())

    async def create(
        self,
        db: AsyncSession,
        *,
        obj_in: CreateSchemaType,
        actor: Optional[str],
        **extra: Any,
    ) -> ModelType:
        """
        새로운 레코드를 생성합니다.
        extra 인자는 스키마에 없는 서버 측 값(예: 부모 ID)을 지정할 때 사용합니다.
        """
        data = obj_in.model_dump(include=set(self.model.model_fields), exclude_unset=False)
        data.update(extra)
        db_obj = self.model(**data)
        stamp_created(db_obj, actor)
        db.add(db_obj)
        await self._save(db)
        await db.refresh(db_obj)
        return db_obj

    async def update(
        self,
        db: AsyncSession,
        *,
        db_obj: ModelType,
        obj_in: UpdateSchemaType,
        actor: Optional[str],
    ) -> ModelType:
        """
        기존 레코드에 전달된 필드만 반영합니다 (부분 수정).
        """
        update_data = obj_in.model_dump(exclude_unset=True)
        for key, value in update_data.items():
            setattr(db_obj, key, value)
        stamp_updated(db_obj, actor)

        db.add(db_obj)
        await self._save(db)
        await db.refresh(db_obj)
        return db_obj

    async def delete(self, db: AsyncSession, *, id: Any) -> Optional[ModelType]:
        """
        기본 키를 기준으로 레코드를 삭제합니다. 레코드가 없으면 None 을 반환합니다.
        """
        db_obj = await db.get(self.model, id)
        if db_obj:
            await db.delete(db_obj)
            await self._save(db, conflict_message=self.delete_conflict_message)
        return db_obj

    async def _execute(self, db: AsyncSession, statement: Any) -> Any:
        """
        커밋하지 않는 단일 쓰기 문(예: INSERT ... ON CONFLICT)을 실행합니다.
        실패 시 _save 와 같은 방식으로 롤백 후 애플리케이션 예외로 변환합니다.
        """
        try:
            return await db.execute(statement)
        except SQLAlchemyError as e:
            await self._raise_for(db, e)

    async def _save(self, db: AsyncSession, *, conflict_message: Optional[str] = None) -> None:
        """작업 단위를 커밋하고, 실패 시 롤백 후 애플리케이션 예외로 변환합니다."""
        try:
            await db.commit()
        except SQLAlchemyError as e:
            await self._raise_for(db, e, conflict_message)

    async def _raise_for(
        self, db: AsyncSession, error: SQLAlchemyError, conflict_message: Optional[str] = None
    ) -> NoReturn:
        await db.rollback()
        if isinstance(error, IntegrityError):
            logger.info(f"Integrity constraint violated on {self.model.__name__}: {error.orig}")
            raise ConflictError(conflict_message or self.conflict_message) from error
        logger.error(f"Database error on {self.model.__name__}: {error}")
        raise PersistenceError("Database operation failed") from error
