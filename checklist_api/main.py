# checklist_api/main.py

import logging
from typing import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Depends, HTTPException, status
from fastapi.middleware.cors import CORSMiddleware
from sqlmodel.ext.asyncio.session import AsyncSession

# 핵심 설정 및 데이터베이스 모듈 임포트
from checklist_api.core.config import settings
from checklist_api.core.database import check_connection, create_db_and_tables, engine, get_session
from checklist_api.core.error_handlers import register_error_handlers
from checklist_api.core.log_config import setup_logging

from checklist_api import API_PREFIX

# 각 도메인의 라우터들을 임포트합니다. (라우터 임포트 시 핸들러도 중재자에 등록됩니다.)
from checklist_api.domains.prj.routers import router as prj_router
from checklist_api.domains.ven.routers import router as ven_router

logger = logging.getLogger(__name__)


# -- 애플리케이션 수명 주기 이벤트 핸들러 --
@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    FastAPI 애플리케이션의 수명 주기 이벤트(로깅, 데이터베이스)를 처리합니다.
    """
    setup_logging(settings.LOG_LEVEL)
    logger.info(f"{settings.APP_NAME} 시작 중... (env={settings.APP_ENV})")

    # --- 시작 시 실행할 로직 ---
    if settings.AUTO_CREATE_TABLES:
        await create_db_and_tables()
    else:
        logger.info("테이블 자동 생성 비활성화. 스키마는 Alembic 마이그레이션으로 관리합니다.")

    yield  # 애플리케이션 실행

    # --- 종료 시 실행할 로직 ---
    logger.info(f"{settings.APP_NAME} 종료 중...")
    await engine.dispose()
    logger.info("데이터베이스 연결 풀 종료 완료.")


# -- FastAPI 애플리케이션 인스턴스 생성 --
app = FastAPI(
    title=settings.APP_NAME,
    description=settings.APP_DESCRIPTION,
    version=settings.APP_VERSION,
    docs_url="/docs",       # Swagger UI
    redoc_url="/redoc",     # ReDoc
    lifespan=lifespan,
)

# -- CORS 미들웨어 설정 --
# 프로덕션에서는 CORS_ORIGINS 를 실제 프론트엔드 도메인으로 제한해야 합니다.
# 자격 증명(쿠키/인증 헤더) 허용은 기본적으로 꺼져 있습니다.
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=settings.CORS_ALLOW_CREDENTIALS,
    allow_methods=["*"],
    allow_headers=["*"],
)

# -- 전역 예외 핸들러 --
register_error_handlers(app)

# -- 도메인 라우터 포함 --
app.include_router(prj_router, prefix=API_PREFIX, tags=["Projects & Checklists (프로젝트 및 체크리스트 관리)"])
app.include_router(ven_router, prefix=API_PREFIX, tags=["Service Providers (공급업체 관리)"])


# -- 루트 엔드포인트 --
@app.get("/", summary="API Root", response_description="Welcome message and documentation link.")
async def read_root():
    """
    API의 루트 엔드포인트입니다.
    API의 시작점을 알리고 문서 링크를 제공합니다.
    """
    return {"message": f"Welcome to {settings.APP_NAME}. Visit /docs for interactive API documentation."}


# -- 헬스 체크 엔드포인트 --
@app.get("/health-check", summary="Health Check", response_description="Status of the application and database connection.")
async def health_check(session: AsyncSession = Depends(get_session)):
    """
    애플리케이션의 헬스 체크 엔드포인트입니다.
    데이터베이스 연결을 테스트하여 서비스의 정상 작동 여부를 확인합니다.
    """
    try:
        connected = await check_connection(session)
    except Exception as e:
        logger.error(f"Health check failed: {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Database connection error during health check",
        )
    if not connected:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Database health check failed: No result from test query",
        )
    return {"status": "ok", "database_connection": "successful"}


# -- Uvicorn 서버 직접 실행 (개발용) --
# if __name__ == "__main__":
#     import uvicorn
#     uvicorn.run("checklist_api.main:app", host="0.0.0.0", port=8000, reload=True, log_level="info")
