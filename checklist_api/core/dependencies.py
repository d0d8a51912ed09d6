# checklist_api/core/dependencies.py

"""
FastAPI 애플리케이션의 의존성 주입(Dependency Injection)을 정의하는 모듈입니다.

- 데이터베이스 세션 관리 (get_db_session).
- 현재 요청의 감사 작업자 (get_current_actor).
- 요청 중재자 (get_mediator).
"""

from typing import AsyncGenerator

from sqlmodel.ext.asyncio.session import AsyncSession

from checklist_api.core.database import get_session as get_main_app_session
from checklist_api.core.mediator import Mediator, mediator
from checklist_api.core.security import get_current_actor  # noqa: F401


async def get_db_session() -> AsyncGenerator[AsyncSession, None]:
    """
    FastAPI 의존성 주입을 위한 비동기 데이터베이스 세션 제너레이터입니다.
    checklist_api.core.database.get_session 을 래핑하여 사용합니다.
    """
    async for session in get_main_app_session():
        yield session


def get_mediator() -> Mediator:
    return mediator
