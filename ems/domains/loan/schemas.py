# ems/domains/loan/schemas.py

"""
'loan' 도메인의 Pydantic 스키마를 정의하는 모듈입니다.
"""

from typing import Optional
from datetime import datetime
from pydantic import Field
from sqlmodel import SQLModel


class LoanCreate(SQLModel):
    """대여 발행 요청. 대여 일시와 반납 여부는 서버에서 설정합니다."""
    employee_id: int = Field(..., gt=0, description="대여 직원 ID")
    device_id: int = Field(..., gt=0, description="대여 장비 ID")


class LoanUpdate(SQLModel):
    """
    대여 기록 직접 수정 요청. 두 필드 모두 전달된 값 그대로 저장됩니다.
    """
    return_date: Optional[datetime] = Field(None, description="반납 일시")
    returned: bool = Field(False, description="반납 여부")


class LoanRead(SQLModel):
    """대여 조회 응답. 직원 이름과 장비 시리얼 번호를 JOIN으로 함께 내려줍니다."""
    id: int
    employee_name: str = Field(..., description="직원 이름")
    employee_last_name: str = Field(..., description="직원 성")
    device_serial_number: str = Field(..., description="장비 시리얼 번호")
    loan_date: datetime = Field(..., description="대여 일시")
    return_date: Optional[datetime] = Field(None, description="반납 일시")
    returned: bool = Field(..., description="반납 여부")
