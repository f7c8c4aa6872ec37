# tests/core/test_core.py

"""
'core' 공통 모듈에 대한 단위 테스트입니다.

- `Outcome` 생성 헬퍼와 실패 종류.
- `dependencies.unwrap`의 HTTP 상태 코드 변환.
- `commit_or_rollback`의 커밋 실패 처리.
- `Settings`의 환경 변수 로딩.
"""

from unittest.mock import AsyncMock

import pytest
from fastapi import HTTPException
from sqlalchemy.exc import IntegrityError

from ems.core import dependencies as deps
from ems.core.config import Settings
from ems.core.crud_base import commit_or_rollback
from ems.core.outcomes import FailureKind, Outcome


def test_outcome_helpers():
    success = Outcome.success(42)
    assert success.ok
    assert success.value == 42
    assert success.kind is None

    conflict = Outcome.conflict("busy")
    assert not conflict.ok
    assert conflict.kind == FailureKind.CONFLICT
    assert conflict.detail == "busy"

    assert Outcome.not_found("x").kind == FailureKind.NOT_FOUND
    assert Outcome.invalid("x").kind == FailureKind.VALIDATION


@pytest.mark.parametrize(
    "kind, status_code",
    [
        (FailureKind.NOT_FOUND, 404),
        (FailureKind.VALIDATION, 400),
        (FailureKind.CONFLICT, 409),
        (FailureKind.PERSISTENCE, 409),
    ],
)
def test_unwrap_maps_failure_kinds(kind: FailureKind, status_code: int):
    with pytest.raises(HTTPException) as exc_info:
        deps.unwrap(Outcome.failure(kind, "detail"))
    assert exc_info.value.status_code == status_code
    assert exc_info.value.detail == "detail"


def test_unwrap_returns_value():
    assert deps.unwrap(Outcome.success("ok")) == "ok"


@pytest.mark.asyncio
async def test_commit_or_rollback_success():
    db = AsyncMock()

    outcome = await commit_or_rollback(db, action="Device creation")

    assert outcome.ok
    db.commit.assert_awaited_once()
    db.rollback.assert_not_awaited()


@pytest.mark.asyncio
async def test_commit_or_rollback_failure():
    """커밋이 실패하면 롤백하고 PERSISTENCE 결과를 반환합니다."""
    db = AsyncMock()
    db.commit.side_effect = IntegrityError("INSERT", {}, Exception("UNIQUE constraint failed"))

    outcome = await commit_or_rollback(db, action="Device creation")

    assert not outcome.ok
    assert outcome.kind == FailureKind.PERSISTENCE
    assert outcome.detail == "Could not persist Device creation."
    db.rollback.assert_awaited_once()


def test_settings_from_environment(monkeypatch):
    monkeypatch.setenv("LOG_LEVEL", "debug")
    monkeypatch.setenv("DATABASE_URL", "sqlite+aiosqlite:///./ems.db")
    monkeypatch.setenv("DB_CREATE_TABLES", "true")

    settings = Settings(_env_file=None)

    assert settings.LOG_LEVEL == "DEBUG"
    assert settings.is_sqlite
    assert settings.DB_CREATE_TABLES is True
    assert "sqlite" not in str(settings.DATABASE_URL)
