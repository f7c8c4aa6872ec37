# ems/domains/dev/models.py

"""
'dev' 도메인의 데이터베이스 ORM 모델을 정의하는 모듈입니다.

이 모듈은 producers, device_types, devices 테이블에 대한 SQLModel 클래스를 포함합니다.
제조사명, 장비 유형명, 시리얼 번호의 대소문자 무시 중복 검사는 CRUD 계층에서 수행하고,
DB에는 단순 UNIQUE 제약만 둡니다.
"""

from typing import Optional
from datetime import datetime, UTC
from sqlmodel import Field, SQLModel, Column
from sqlalchemy.sql import func
from sqlalchemy.types import TIMESTAMP


# =============================================================================
# 1. producers 테이블 모델
# =============================================================================
class ProducerBase(SQLModel):
    """
    producers 테이블의 기본 속성을 정의하는 SQLModel Base 클래스입니다.
    """
    id: Optional[int] = Field(default=None, primary_key=True, description="제조사 고유 ID")
    name: str = Field(max_length=100, unique=True, description="제조사명")

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


class Producer(ProducerBase, table=True):
    """
    producers 테이블에 매핑되는 SQLModel ORM 클래스입니다.
    """
    __tablename__ = "producers"


# =============================================================================
# 2. device_types 테이블 모델
# =============================================================================
class DeviceTypeBase(SQLModel):
    """
    device_types 테이블의 기본 속성을 정의하는 SQLModel Base 클래스입니다.
    """
    id: Optional[int] = Field(default=None, primary_key=True, description="장비 유형 고유 ID")
    name: str = Field(max_length=100, unique=True, description="장비 유형명 (예: Laptop)")

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


class DeviceType(DeviceTypeBase, table=True):
    """
    device_types 테이블에 매핑되는 SQLModel ORM 클래스입니다.
    """
    __tablename__ = "device_types"


# =============================================================================
# 3. devices 테이블 모델
# =============================================================================
class DeviceBase(SQLModel):
    """
    devices 테이블의 기본 속성을 정의하는 SQLModel Base 클래스입니다.
    available은 활성 대여가 없을 때만 True입니다.
    """
    id: Optional[int] = Field(default=None, primary_key=True, description="장비 고유 ID")
    type_id: int = Field(foreign_key="device_types.id", index=True, description="장비 유형 ID (FK)")
    producer_id: int = Field(foreign_key="producers.id", index=True, description="제조사 ID (FK)")
    serial_number: str = Field(max_length=100, unique=True, description="시리얼 번호 (앞뒤 공백 제거 후 저장)")
    available: bool = Field(default=True, index=True, description="대여 가능 여부")

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


class Device(DeviceBase, table=True):
    """
    devices 테이블에 매핑되는 SQLModel ORM 클래스입니다.
    """
    __tablename__ = "devices"
