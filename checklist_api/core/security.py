# checklist_api/core/security.py

"""
호출자 식별(감사 작업자 결정)과 관련된 보안 유틸리티 모듈입니다.

- JWT(JSON Web Token) 생성 및 검증.
- 선택적 Bearer 토큰에서 감사 작업자(actor)를 얻는 의존성.
  토큰이 없으면 기본 작업자("system")가 사용되며,
  토큰이 잘못되었거나 'sub' 클레임이 없으면 401 을 반환합니다.
"""

from datetime import datetime, timedelta, timezone
from typing import Optional

from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from jose import JWTError, jwt

from checklist_api.core.audit import resolve_actor
from checklist_api.core.config import settings

# auto_error=False: Authorization 헤더가 없어도 요청을 거부하지 않습니다.
bearer_scheme = HTTPBearer(auto_error=False)


def create_access_token(subject: str, expires_delta: Optional[timedelta] = None) -> str:
    """
    주어진 작업자 이름을 'sub' 클레임으로 담은 Access Token을 생성합니다.
    """
    if expires_delta:
        expire = datetime.now(timezone.utc) + expires_delta
    else:
        expire = datetime.now(timezone.utc) + timedelta(minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES)
    to_encode = {"sub": subject, "exp": expire}
    return jwt.encode(to_encode, settings.SECRET_KEY.get_secret_value(), algorithm=settings.ALGORITHM)


def decode_actor(token: str) -> str:
    """토큰을 검증하고 'sub' 클레임(작업자)을 반환합니다."""
    credentials_exception = HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail="Could not validate credentials",
        headers={"WWW-Authenticate": "Bearer"},
    )
    try:
        payload = jwt.decode(token, settings.SECRET_KEY.get_secret_value(), algorithms=[settings.ALGORITHM])
    except JWTError:
        raise credentials_exception
    subject = payload.get("sub")
    if not isinstance(subject, str) or not subject.strip():
        raise credentials_exception
    return subject.strip()


async def get_current_actor(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
) -> str:
    """
    현재 요청의 감사 작업자를 반환합니다.
    Bearer 토큰이 없으면 설정된 기본 작업자를 반환합니다.
    """
    if credentials is None:
        return resolve_actor(None)
    return decode_actor(credentials.credentials)
