# flake8: noqa
# scripts/init_db.py

import asyncio

import typer

from checklist_api.core.database import create_db_and_tables, engine
from checklist_api.core.log_config import setup_logging

cli = typer.Typer()


@cli.command()
def main():
    """
    개발 환경용으로 모든 테이블을 생성합니다. (운영 환경은 'alembic upgrade head' 사용)
    """
    setup_logging("INFO")
    print("테이블 생성을 시작합니다...")

    async def run_creation():
        await create_db_and_tables()
        await engine.dispose()

    asyncio.run(run_creation())
    print("테이블 생성이 완료되었습니다.")


if __name__ == "__main__":
    cli()
