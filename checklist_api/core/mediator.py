# checklist_api/core/mediator.py

"""
요청 중재자(Request Mediator) 모듈입니다.

라우터는 명령(command)/조회(query) 객체를 만들어 중재자에게 전달하기만 하고,
실제 처리는 요청 타입별로 등록된 핸들러가 담당합니다.

    @mediator.register(CreateProject)
    async def handle_create_project(request: CreateProject, ctx: RequestContext) -> ProjectRead:
        ...

    result = await mediator.send(CreateProject(data=...), db=db, actor=actor)
"""

import logging
from dataclasses import dataclass
from typing import Any, Awaitable, Callable, Dict, Optional, Type

from sqlmodel.ext.asyncio.session import AsyncSession

from checklist_api.core.audit import resolve_actor

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RequestContext:
    """핸들러에 전달되는 요청 단위 컨텍스트 (작업 단위 세션 + 감사 작업자)."""
    db: AsyncSession
    actor: str


Handler = Callable[[Any, RequestContext], Awaitable[Any]]


class Mediator:
    def __init__(self) -> None:
        self._handlers: Dict[Type[Any], Handler] = {}

    def register(self, request_type: Type[Any]) -> Callable[[Handler], Handler]:
        """요청 타입에 핸들러를 하나만 등록하는 데코레이터입니다."""
        def decorator(handler: Handler) -> Handler:
            if request_type in self._handlers:
                raise ValueError(f"Handler already registered for {request_type.__name__}")
            self._handlers[request_type] = handler
            return handler
        return decorator

    def handler_for(self, request_type: Type[Any]) -> Handler:
        try:
            return self._handlers[request_type]
        except KeyError:
            raise LookupError(f"No handler registered for {request_type.__name__}") from None

    async def send(self, request: Any, *, db: AsyncSession, actor: Optional[str] = None) -> Any:
        """요청을 등록된 핸들러로 전달하고 결과를 반환합니다."""
        handler = self.handler_for(type(request))
        ctx = RequestContext(db=db, actor=resolve_actor(actor))
        logger.debug(f"Dispatching {type(request).__name__} (actor={ctx.actor})")
        return await handler(request, ctx)


# 애플리케이션 전역 중재자 인스턴스 (각 도메인의 handlers.py 가 임포트 시 등록)
mediator = Mediator()
