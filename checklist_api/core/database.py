# checklist_api/core/database.py

"""
애플리케이션의 데이터베이스 연결 및 세션 관리를 담당하는 모듈입니다.

- SQLModel의 비동기 엔진을 설정합니다.
- 요청 단위(unit of work) 비동기 세션을 제공하는 의존성 함수를 제공합니다.
- 애플리케이션 시작 시 데이터베이스 테이블을 생성하는 함수를 포함합니다 (개발용).
- SQLite 연결에서는 외래 키 제약(ON DELETE CASCADE 포함)을 활성화합니다.
"""

import logging
from typing import Any, AsyncGenerator, Dict

from sqlalchemy import event, text
from sqlalchemy.engine import Engine
from sqlalchemy.ext.asyncio import AsyncEngine, async_sessionmaker, create_async_engine

from sqlmodel import SQLModel
from sqlmodel.ext.asyncio.session import AsyncSession

from checklist_api.core.config import settings

logger = logging.getLogger(__name__)


# =============================================================================
# SQLite 외래 키 활성화 (전역 엔진 이벤트)
# =============================================================================
@event.listens_for(Engine, "connect")
def _enable_sqlite_fk(dbapi_conn, connection_record):
    """SQLite는 기본적으로 외래 키 제약을 검사하지 않으므로 연결마다 활성화합니다."""
    if "sqlite" in type(dbapi_conn).__module__:
        cursor = dbapi_conn.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()


def engine_options(database_url: str, echo: bool = False) -> Dict[str, Any]:
    """데이터베이스 종류에 맞는 엔진 옵션을 반환합니다. SQLite에는 풀 크기 옵션을 적용하지 않습니다."""
    options: Dict[str, Any] = {"echo": echo}
    if not database_url.startswith("sqlite"):
        options.update(
            pool_pre_ping=True,
            pool_recycle=3600,  # 1시간마다 연결 재활용
            pool_size=settings.DB_POOL_SIZE,
            max_overflow=settings.DB_MAX_OVERFLOW,
        )
    return options


def build_session_factory(bind: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    """비동기 세션을 생성하는 '세션 공장'을 정의합니다."""
    return async_sessionmaker(
        bind=bind,
        class_=AsyncSession,
        autoflush=False,
        expire_on_commit=False,
    )


# SQLModel 엔진을 생성합니다.
engine: AsyncEngine = create_async_engine(
    settings.DATABASE_URL.get_secret_value(),  # SecretStr 값에 접근
    **engine_options(settings.DATABASE_URL.get_secret_value(), echo=settings.DEBUG_MODE),
)

AsyncSessionLocal = build_session_factory(engine)


# =============================================================================
# 데이터베이스 초기화 및 테이블 생성 함수
# =============================================================================
async def create_db_and_tables(bind: AsyncEngine = engine) -> None:
    """
    데이터베이스 테이블을 생성합니다.
    개발 환경에서만 사용해야 하며, 기존 테이블을 삭제하지는 않습니다. (운영은 Alembic 사용)
    """
    # 모든 테이블 모델이 metadata에 등록되도록 임포트합니다.
    from checklist_api.domains import models  # noqa: F401

    async with bind.begin() as conn:
        await conn.run_sync(SQLModel.metadata.create_all)
    logger.info("Database tables created (or already present).")


async def check_connection(session: AsyncSession) -> bool:
    """간단한 쿼리로 데이터베이스 연결 상태를 확인합니다."""
    result = await session.execute(text("SELECT 1"))
    return result.scalar_one_or_none() == 1


# =============================================================================
# 비동기 데이터베이스 세션 의존성 주입
# =============================================================================
async def get_session() -> AsyncGenerator[AsyncSession, None]:
    """
    FastAPI 의존성 주입을 위한 비동기 데이터베이스 세션 제너레이터입니다.
    요청마다 새로운 세션(작업 단위)을 생성하고, 요청 처리 후 세션을 자동으로 닫습니다.
    """
    async with AsyncSessionLocal() as session:
        yield session
