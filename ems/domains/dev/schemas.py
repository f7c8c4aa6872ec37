# ems/domains/dev/schemas.py

"""
'dev' 도메인의 Pydantic 스키마를 정의하는 모듈입니다.

시리얼 번호와 이름의 공백 제거, 빈 값 검사, 형식 검사는 CRUD 계층에서
`Outcome` 실패(VALIDATION)로 처리하므로 여기서는 길이 제한을 두지 않습니다.
"""

from typing import Optional
from datetime import datetime
from pydantic import Field
from sqlmodel import SQLModel


# =============================================================================
# 1. producers / device_types 테이블 스키마
# =============================================================================
class ProducerCreate(SQLModel):
    name: str = Field(..., description="제조사명")


class ProducerUpdate(SQLModel):
    name: Optional[str] = Field(None, description="제조사명")


class ProducerResponse(SQLModel):
    id: int = Field(..., description="제조사 고유 ID")
    name: str = Field(..., description="제조사명")
    created_at: Optional[datetime] = Field(None, description="레코드 생성 일시")
    updated_at: Optional[datetime] = Field(None, description="레코드 마지막 업데이트 일시")

    class Config:
        from_attributes = True


class DeviceTypeCreate(SQLModel):
    name: str = Field(..., description="장비 유형명")


class DeviceTypeUpdate(SQLModel):
    name: Optional[str] = Field(None, description="장비 유형명")


class DeviceTypeResponse(SQLModel):
    id: int = Field(..., description="장비 유형 고유 ID")
    name: str = Field(..., description="장비 유형명")
    created_at: Optional[datetime] = Field(None, description="레코드 생성 일시")
    updated_at: Optional[datetime] = Field(None, description="레코드 마지막 업데이트 일시")

    class Config:
        from_attributes = True


# =============================================================================
# 2. devices 테이블 스키마
# =============================================================================
class DeviceCreate(SQLModel):
    type_id: int = Field(..., gt=0, description="장비 유형 ID (FK)")
    producer_id: int = Field(..., gt=0, description="제조사 ID (FK)")
    serial_number: str = Field(..., description="시리얼 번호")
    available: bool = Field(True, description="대여 가능 여부")


class DeviceUpdate(SQLModel):
    type_id: Optional[int] = Field(None, gt=0, description="장비 유형 ID (FK)")
    producer_id: Optional[int] = Field(None, gt=0, description="제조사 ID (FK)")
    serial_number: Optional[str] = Field(None, description="시리얼 번호")
    available: Optional[bool] = Field(None, description="대여 가능 여부")


class DeviceRead(SQLModel):
    """장비 조회 응답. 제조사명과 장비 유형명을 JOIN으로 함께 내려줍니다."""
    id: int
    type_id: int
    producer_id: int
    available: bool
    serial_number: str
    type_name: Optional[str] = Field(None, description="장비 유형명")
    producer_name: Optional[str] = Field(None, description="제조사명")
