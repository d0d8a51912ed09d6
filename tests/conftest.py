# tests/conftest.py

import os
from typing import AsyncGenerator, Callable, Optional
from contextlib import asynccontextmanager

# --- 테스트 환경 변수 설정 ---
# 설정(settings)과 엔진은 임포트 시점에 생성되므로, 애플리케이션을 임포트하기 전에 지정해야 합니다.
os.environ["DATABASE_URL"] = "sqlite+aiosqlite:///:memory:"
os.environ["SECRET_KEY"] = "test-secret-key"
os.environ["DEFAULT_ACTOR"] = "system"
os.environ["AUTO_CREATE_TABLES"] = "false"

import pytest  # noqa: E402
import pytest_asyncio  # noqa: E402
from httpx import AsyncClient, ASGITransport  # noqa: E402

from sqlalchemy.ext.asyncio import AsyncEngine, async_sessionmaker, create_async_engine  # noqa: E402
from sqlalchemy.pool import NullPool  # noqa: E402
from sqlmodel import SQLModel  # noqa: E402
from sqlmodel.ext.asyncio.session import AsyncSession  # noqa: E402

# checklist_api.main을 임포트하여 FastAPI 앱 인스턴스에 접근합니다.
from checklist_api.main import app as main_app  # noqa: E402
from checklist_api.core import dependencies as deps  # noqa: E402
from checklist_api.core.database import build_session_factory, get_session  # noqa: E402
from checklist_api.core.security import create_access_token  # noqa: E402

# --- 모든 모델 임포트 ---
#  SQLModel.metadata.create_all()이 모든 테이블을 인식하려면 모든 모델 클래스가 임포트되어야 합니다.
from checklist_api.domains.models import *  # noqa: F401, F403, E402


# --- 데이터베이스 픽스처 ---
@pytest_asyncio.fixture(scope="function")
async def test_engine(tmp_path) -> AsyncGenerator[AsyncEngine, None]:
    """
    테스트 함수마다 새 SQLite 데이터베이스 파일을 만들고 모든 테이블을 생성합니다.
    """
    engine = create_async_engine(
        f"sqlite+aiosqlite:///{tmp_path / 'test_checklist.db'}",
        echo=False,
        poolclass=NullPool,     # 각 연결이 독립적으로 사용되고 바로 닫히도록 함
    )
    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.create_all)

    yield engine

    await engine.dispose()


@pytest.fixture(scope="function")
def session_factory(test_engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    return build_session_factory(test_engine)


@pytest_asyncio.fixture(scope="function")
async def db_session(session_factory: async_sessionmaker[AsyncSession]) -> AsyncGenerator[AsyncSession, None]:
    """
    테스트 셋업 및 직접 CRUD 호출용 비동기 데이터베이스 세션을 제공합니다.
    API 요청은 별도의 세션(요청 단위 작업)을 사용합니다.
    """
    async with session_factory() as session:
        yield session


# --- 클라이언트 픽스처 ---
# 역할: 테스트용 데이터베이스를 바라보는 AsyncClient 를 만듭니다.
#   - 요청마다 새 세션을 여는 get_session / get_db_session 오버라이드
#   - actor 가 주어지면 그 작업자를 'sub' 로 담은 Bearer 토큰을 헤더에 포함
@pytest.fixture(scope="function")
def client_factory(
    session_factory: async_sessionmaker[AsyncSession],
) -> Callable[..., AsyncGenerator[AsyncClient, None]]:
    """
    지정한 작업자(actor)로 요청하는 AsyncClient 컨텍스트를 생성하는 팩토리 함수를 반환합니다.
    """
    @asynccontextmanager
    async def _create_client_context(actor: Optional[str] = None) -> AsyncGenerator[AsyncClient, None]:
        async def override_get_session():
            async with session_factory() as session:
                yield session

        original_overrides = main_app.dependency_overrides.copy()
        try:
            main_app.dependency_overrides.update({
                get_session: override_get_session,
                deps.get_db_session: override_get_session,
            })

            transport = ASGITransport(app=main_app)
            async with AsyncClient(transport=transport, base_url="http://test") as client:
                if actor is not None:
                    client.headers["Authorization"] = f"Bearer {create_access_token(actor)}"
                yield client
        finally:
            # 테스트가 끝난 후 원래 의존성 상태로 되돌립니다.
            main_app.dependency_overrides.clear()
            main_app.dependency_overrides.update(original_overrides)

    return _create_client_context


@pytest_asyncio.fixture(scope="function")
async def client(client_factory: Callable[..., AsyncGenerator[AsyncClient, None]]) -> AsyncGenerator[AsyncClient, None]:
    """토큰 없이 요청하는 클라이언트 (작업자: 기본값 "system")."""
    async with client_factory() as c:
        yield c


@pytest_asyncio.fixture(scope="function")
async def alice_client(client_factory: Callable[..., AsyncGenerator[AsyncClient, None]]) -> AsyncGenerator[AsyncClient, None]:
    """작업자 'alice' 의 토큰으로 요청하는 클라이언트."""
    async with client_factory("alice") as c:
        yield c


@pytest_asyncio.fixture(scope="function")
async def bob_client(client_factory: Callable[..., AsyncGenerator[AsyncClient, None]]) -> AsyncGenerator[AsyncClient, None]:
    """작업자 'bob' 의 토큰으로 요청하는 클라이언트."""
    async with client_factory("bob") as c:
        yield c
