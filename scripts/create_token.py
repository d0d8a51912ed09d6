# flake8: noqa
# scripts/create_token.py

from datetime import timedelta
from typing import Optional

import typer

from checklist_api.core.security import create_access_token

cli = typer.Typer()


@cli.command()
def main(
    actor: str = typer.Option(
        ..., '--actor', '-a',
        prompt="작업자 이름을 입력하세요",
        help="감사 필드(created_by / last_updated_by)에 기록될 작업자 이름입니다."
    ),
    minutes: Optional[int] = typer.Option(
        None, '--minutes', '-m',
        help="토큰 만료 시간(분). 지정하지 않으면 ACCESS_TOKEN_EXPIRE_MINUTES 설정을 사용합니다."
    ),
):
    """
    주어진 작업자를 'sub' 클레임으로 담은 Bearer 토큰을 발급합니다.
    """
    if not actor.strip():
        print("오류: 작업자 이름은 비어 있을 수 없습니다.")
        raise typer.Abort()

    expires = timedelta(minutes=minutes) if minutes else None
    token = create_access_token(actor.strip(), expires_delta=expires)
    print(token)


if __name__ == "__main__":
    cli()
