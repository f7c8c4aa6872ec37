# ems/core/outcomes.py

"""
서비스 계층(CRUD, Loan Engine)이 반환하는 결과 타입을 정의하는 모듈입니다.

CRUD/서비스 함수는 예상 가능한 실패(존재하지 않음, 유효성 오류, 충돌, 저장 실패)를
예외로 던지지 않고 `Outcome.failure(...)` 로 반환합니다.
HTTP 응답 코드로의 변환은 라우터 계층(`ems.core.dependencies.unwrap`)에서만 수행합니다.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Generic, Optional, TypeVar

T = TypeVar("T")


class FailureKind(str, Enum):
    """실패 결과의 분류입니다."""
    NOT_FOUND = "not_found"       # 참조한 ID(대여, 장비, 직원 등)가 존재하지 않음
    VALIDATION = "validation"     # 입력 형식 오류 (빈 시리얼 번호 등)
    CONFLICT = "conflict"         # 중복 또는 허용되지 않는 상태 전이
    PERSISTENCE = "persistence"   # 커밋 단계에서 저장소가 쓰기를 거부함


@dataclass(frozen=True)
class Outcome(Generic[T]):
    """
    성공 시 `value`를, 실패 시 `kind`와 `detail`을 담는 결과 객체입니다.
    """
    ok: bool
    value: Optional[T] = None
    kind: Optional[FailureKind] = None
    detail: str = ""

    @classmethod
    def success(cls, value: T = None) -> "Outcome[T]":
        return cls(ok=True, value=value)

    @classmethod
    def failure(cls, kind: FailureKind, detail: str) -> "Outcome[T]":
        return cls(ok=False, kind=kind, detail=detail)

    @classmethod
    def not_found(cls, detail: str) -> "Outcome[T]":
        return cls.failure(FailureKind.NOT_FOUND, detail)

    @classmethod
    def invalid(cls, detail: str) -> "Outcome[T]":
        return cls.failure(FailureKind.VALIDATION, detail)

    @classmethod
    def conflict(cls, detail: str) -> "Outcome[T]":
        return cls.failure(FailureKind.CONFLICT, detail)
