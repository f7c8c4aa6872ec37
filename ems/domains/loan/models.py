# ems/domains/loan/models.py

"""
'loan' 도메인의 데이터베이스 ORM 모델을 정의하는 모듈입니다.

대여(Loan)는 직원 한 명과 장비 한 대를 연결하는 기록이며,
반납(returned=True)되기 전까지 활성(active) 상태입니다.
대여 레코드의 생성/반납/삭제는 ems.services.loan_engine을 통해서만 수행해야
장비의 available 플래그와 일관성이 유지됩니다.
"""

from typing import Optional
from datetime import datetime, UTC
from sqlmodel import Field, SQLModel, Column
from sqlalchemy.types import TIMESTAMP


class LoanBase(SQLModel):
    """
    loans 테이블의 기본 속성을 정의하는 SQLModel Base 클래스입니다.
    """
    id: Optional[int] = Field(default=None, primary_key=True, description="대여 고유 ID")
    employee_id: int = Field(foreign_key="employees.id", index=True, description="대여 직원 ID (FK)")
    device_id: int = Field(foreign_key="devices.id", index=True, description="대여 장비 ID (FK)")

    loan_date: datetime = Field(
        default_factory=lambda: datetime.now(UTC),
        sa_column=Column(TIMESTAMP(timezone=True), nullable=False),
        description="대여 일시"
    )
    return_date: Optional[datetime] = Field(
        default=None,
        sa_column=Column(TIMESTAMP(timezone=True), nullable=True),
        description="반납 일시 (반납 전에는 NULL)"
    )
    returned: bool = Field(default=False, index=True, description="반납 여부")


class Loan(LoanBase, table=True):
    """
    loans 테이블에 매핑되는 SQLModel ORM 클래스입니다.
    """
    __tablename__ = "loans"
