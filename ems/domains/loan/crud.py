# ems/domains/loan/crud.py

"""
'loan' 도메인의 조회 쿼리를 담당하는 모듈입니다.

대여 기록의 쓰기(발행, 반납, 수정, 삭제)는 장비 상태를 함께 변경하므로
`ems.services.loan_engine.LoanEngine`이 수행합니다. 이 모듈은 JOIN 기반의 읽기 뷰만 제공합니다.
"""

from typing import Any, List, Optional

from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from ems.core.crud_base import CRUDBase
from ems.domains.dev import models as dev_models
from ems.domains.org import models as org_models
from . import models as loan_models
from . import schemas as loan_schemas


class CRUDLoan(CRUDBase[loan_models.Loan, loan_schemas.LoanCreate, loan_schemas.LoanUpdate]):
    def __init__(self):
        super().__init__(model=loan_models.Loan)

    def _read_statement(self):
        return (
            select(
                loan_models.Loan,
                org_models.Employee.name,
                org_models.Employee.last_name,
                dev_models.Device.serial_number,
            )
            .join(org_models.Employee, org_models.Employee.id == loan_models.Loan.employee_id)
            .join(dev_models.Device, dev_models.Device.id == loan_models.Loan.device_id)
            .order_by(loan_models.Loan.id)
        )

    @staticmethod
    def _to_read(
        db_obj: loan_models.Loan, employee_name: str, employee_last_name: str, serial_number: str
    ) -> loan_schemas.LoanRead:
        return loan_schemas.LoanRead(
            id=db_obj.id,
            employee_name=employee_name,
            employee_last_name=employee_last_name,
            device_serial_number=serial_number,
            loan_date=db_obj.loan_date,
            return_date=db_obj.return_date,
            returned=db_obj.returned,
        )

    async def _read_where(self, db: AsyncSession, *conditions: Any) -> List[loan_schemas.LoanRead]:
        result = await db.execute(self._read_statement().where(*conditions))
        return [self._to_read(*row) for row in result.all()]

    async def read_one(self, db: AsyncSession, *, id: int) -> Optional[loan_schemas.LoanRead]:
        loans = await self._read_where(db, loan_models.Loan.id == id)
        return loans[0] if loans else None

    async def read_all(self, db: AsyncSession) -> List[loan_schemas.LoanRead]:
        return await self._read_where(db)

    async def read_active(self, db: AsyncSession) -> List[loan_schemas.LoanRead]:
        return await self._read_where(db, loan_models.Loan.returned == False)  # noqa: E712

    async def read_for_employee(
        self, db: AsyncSession, *, employee_id: int, returned: bool
    ) -> List[loan_schemas.LoanRead]:
        """
        직원 한 명의 대여 목록을 조회합니다.
        returned=False 이면 활성 대여, True 이면 반납 완료된 이력입니다.
        """
        return await self._read_where(
            db,
            loan_models.Loan.employee_id == employee_id,
            loan_models.Loan.returned == returned,
        )


loan = CRUDLoan()
