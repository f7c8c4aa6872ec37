# ems/core/dependencies.py

"""
FastAPI 애플리케이션의 의존성 주입(Dependency Injection)을 정의하는 모듈입니다.

- 데이터베이스 세션 관리 (get_db_session).
- 서비스 계층의 `Outcome`을 HTTP 응답(또는 HTTPException)으로 변환하는 헬퍼.
"""

from typing import AsyncGenerator, TypeVar

from fastapi import HTTPException, status
from sqlmodel.ext.asyncio.session import AsyncSession

from ems.core.database import get_session as get_main_app_session
from ems.core.outcomes import FailureKind, Outcome

T = TypeVar("T")

# 실패 종류별 HTTP 상태 코드
FAILURE_STATUS_CODES = {
    FailureKind.NOT_FOUND: status.HTTP_404_NOT_FOUND,
    FailureKind.VALIDATION: status.HTTP_400_BAD_REQUEST,
    FailureKind.CONFLICT: status.HTTP_409_CONFLICT,
    FailureKind.PERSISTENCE: status.HTTP_409_CONFLICT,
}


async def get_db_session() -> AsyncGenerator[AsyncSession, None]:
    """
    FastAPI 의존성 주입을 위한 비동기 데이터베이스 세션 제너레이터입니다.
    ems.core.database.get_session을 래핑하여 사용합니다.
    """
    async for session in get_main_app_session():
        yield session


def unwrap(outcome: Outcome[T]) -> T:
    """
    성공한 결과의 값을 반환하고, 실패한 결과는 해당하는 HTTPException으로 변환합니다.
    """
    if outcome.ok:
        return outcome.value
    raise HTTPException(status_code=FAILURE_STATUS_CODES[outcome.kind], detail=outcome.detail)
