# ems/domains/org/models.py

"""
'org' 도메인의 데이터베이스 ORM 모델을 정의하는 모듈입니다.

이 모듈은 branches, employees 테이블에 대한 SQLModel 클래스를 포함합니다.
다른 테이블과의 관계는 외래 키로만 표현하고, 조회 시에는 명시적인 JOIN을 사용합니다.
"""

from typing import Optional
from datetime import datetime, UTC
from sqlmodel import Field, SQLModel, Column
from sqlalchemy.sql import func
from sqlalchemy.types import TIMESTAMP


# =============================================================================
# 1. branches 테이블 모델
# =============================================================================
class BranchBase(SQLModel):
    """
    branches 테이블의 기본 속성을 정의하는 SQLModel Base 클래스입니다.
    """
    id: Optional[int] = Field(default=None, primary_key=True, description="지점 고유 ID")
    name: str = Field(max_length=100, description="지점명")

    created_at: Optional[datetime] = Field(
        default_factory=lambda: datetime.now(UTC),
        sa_column=Column(TIMESTAMP(timezone=True), server_default=func.now()),
        description="레코드 생성 일시"
    )
    updated_at: Optional[datetime] = Field(
        default_factory=lambda: datetime.now(UTC),
        sa_column=Column(TIMESTAMP(timezone=True), server_default=func.now(), onupdate=func.now()),
        description="레코드 마지막 업데이트 일시"
    )


class Branch(BranchBase, table=True):
    """
    branches 테이블에 매핑되는 SQLModel ORM 클래스입니다.
    """
    __tablename__ = "branches"


# =============================================================================
# 2. employees 테이블 모델
# =============================================================================
class EmployeeBase(SQLModel):
    """
    employees 테이블의 기본 속성을 정의하는 SQLModel Base 클래스입니다.
    """
    id: Optional[int] = Field(default=None, primary_key=True, description="직원 고유 ID")
    name: str = Field(max_length=50, description="이름")
    last_name: str = Field(max_length=100, description="성")
    email: str = Field(max_length=300, description="이메일")
    branch_id: int = Field(foreign_key="branches.id", index=True, description="소속 지점 ID (FK)")

    created_at: Optional[datetime] = Field(
        default_factory=lambda: datetime.now(UTC),
        sa_column=Column(TIMESTAMP(timezone=True), server_default=func.now()),
        description="레코드 생성 일시"
    )
    updated_at: Optional[datetime] = Field(
        default_factory=lambda: datetime.now(UTC),
        sa_column=Column(TIMESTAMP(timezone=True), server_default=func.now(), onupdate=func.now()),
        description="레코드 마지막 업데이트 일시"
    )


class Employee(EmployeeBase, table=True):
    """
    employees 테이블에 매핑되는 SQLModel ORM 클래스입니다.
    """
    __tablename__ = "employees"
