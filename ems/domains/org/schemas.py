# ems/domains/org/schemas.py

"""
'org' 도메인의 Pydantic 스키마를 정의하는 모듈입니다.
"""

from typing import Optional
from datetime import datetime
from pydantic import Field
from sqlmodel import SQLModel


# =============================================================================
# 1. branches 테이블 스키마
# =============================================================================
class BranchBase(SQLModel):
    name: str = Field(..., min_length=1, max_length=100, description="지점명")


class BranchCreate(BranchBase):
    pass


class BranchUpdate(SQLModel):
    name: Optional[str] = Field(None, min_length=1, max_length=100, description="지점명")


class BranchResponse(BranchBase):
    id: int = Field(..., description="지점 고유 ID")
    created_at: Optional[datetime] = Field(None, description="레코드 생성 일시")
    updated_at: Optional[datetime] = Field(None, description="레코드 마지막 업데이트 일시")

    class Config:
        from_attributes = True


# =============================================================================
# 2. employees 테이블 스키마
# =============================================================================
class EmployeeBase(SQLModel):
    name: str = Field(..., min_length=1, max_length=50, description="이름")
    last_name: str = Field(..., min_length=1, max_length=100, description="성")
    email: str = Field(..., min_length=3, max_length=300, description="이메일")
    branch_id: int = Field(..., gt=0, description="소속 지점 ID (FK)")


class EmployeeCreate(EmployeeBase):
    pass


class EmployeeUpdate(SQLModel):
    name: Optional[str] = Field(None, min_length=1, max_length=50, description="이름")
    last_name: Optional[str] = Field(None, min_length=1, max_length=100, description="성")
    email: Optional[str] = Field(None, min_length=3, max_length=300, description="이메일")
    branch_id: Optional[int] = Field(None, gt=0, description="소속 지점 ID (FK)")


class EmployeeRead(SQLModel):
    """직원 조회 응답. 소속 지점명을 JOIN으로 함께 내려줍니다."""
    id: int
    name: str
    last_name: str
    email: str
    branch_id: int
    branch_name: Optional[str] = Field(None, description="소속 지점명")
