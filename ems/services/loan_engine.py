# ems/services/loan_engine.py

"""
대여 생명주기(발행, 반납, 수정, 삭제)를 처리하는 서비스 모듈입니다.

대여 기록(Loan)과 장비의 대여 가능 여부(Device.available)는 항상 함께 변경되어야 합니다.
'장비의 available이 False인 것은 그 장비를 참조하는 활성 대여가 있을 때뿐'이라는 규칙을
지키기 위해, 각 명령은 모든 사전 조건을 먼저 확인한 다음에 변경을 기록하고,
대여 쓰기와 장비 쓰기를 한 번의 커밋으로 저장합니다.

상태 전이:
    ACTIVE (returned=False) --return_loan--> RETURNED (returned=True, 종료 상태)
    두 상태 모두에서 delete 가능.
"""

import logging
from datetime import datetime, UTC
from typing import List

from fastapi import Depends
from sqlmodel.ext.asyncio.session import AsyncSession

from ems.core import dependencies as deps
from ems.core.crud_base import commit_or_rollback
from ems.core.outcomes import Outcome
from ems.domains.loan import crud as loan_crud
from ems.domains.loan import models as loan_models
from ems.domains.loan import schemas as loan_schemas
from ems.services.inventory import LoanInventory, SessionLoanInventory

logger = logging.getLogger(__name__)


class LoanEngine:
    """
    대여 명령과 대여 조회를 처리하는 서비스 클래스입니다.
    장비/직원 도메인에는 `LoanInventory`를 통해서만 접근합니다.
    """

    def __init__(self, db: AsyncSession, inventory: LoanInventory):
        """
        Args:
            db (AsyncSession): 이 엔진의 모든 명령이 사용할 데이터베이스 세션 (작업 단위).
            inventory (LoanInventory): 장비 조회/상태 변경, 직원 존재 확인 인터페이스.
        """
        self.db = db
        self.inventory = inventory

    async def _read(self, loan_id: int) -> Outcome[loan_schemas.LoanRead]:
        loan_read = await loan_crud.loan.read_one(self.db, id=loan_id)
        if loan_read is None:
            return Outcome.not_found("Loan not found")
        return Outcome.success(loan_read)

    # =========================================================================
    # 1. 생명주기 명령
    # =========================================================================
    async def issue(self, employee_id: int, device_id: int) -> Outcome[loan_schemas.LoanRead]:
        """
        장비를 직원에게 대여합니다.

        장비와 직원을 모두 확인한 뒤에만 변경을 시작하므로, 직원이 없어서 실패하는 경우에도
        장비 상태는 바뀌지 않습니다.

        Returns:
            Outcome[LoanRead]: 장비 또는 직원이 없으면 NOT_FOUND, 장비가 대여 중이면 CONFLICT.
        """
        db_device = await self.inventory.get_device(device_id)
        if db_device is None:
            logger.warning("대여 발행 거부: 장비 %d 없음", device_id)
            return Outcome.not_found("Device not found")
        if not db_device.available:
            logger.warning("대여 발행 거부: 장비 %d 대여 중", device_id)
            return Outcome.conflict("Device is not available for loan.")
        if not await self.inventory.employee_exists(employee_id):
            logger.warning("대여 발행 거부: 직원 %d 없음", employee_id)
            return Outcome.not_found("Employee not found")

        await self.inventory.set_availability(device_id, False)
        db_loan = loan_models.Loan(
            employee_id=employee_id,
            device_id=device_id,
            loan_date=datetime.now(UTC),
            return_date=None,
            returned=False,
        )
        self.db.add(db_loan)

        committed = await commit_or_rollback(self.db, action="loan issue")
        if not committed.ok:
            return committed
        logger.info("대여 발행: loan=%d, employee=%d, device=%d", db_loan.id, employee_id, device_id)
        return await self._read(db_loan.id)

    async def return_loan(self, loan_id: int) -> Outcome[loan_schemas.LoanRead]:
        """
        활성 대여를 반납 처리하고 장비를 다시 대여 가능 상태로 만듭니다.
        이미 반납된 대여를 다시 반납하면 CONFLICT를 반환하며 반납 일시는 바뀌지 않습니다.
        """
        db_loan = await loan_crud.loan.get(self.db, loan_id)
        if db_loan is None:
            return Outcome.not_found("Loan not found")
        if db_loan.returned:
            logger.warning("반납 거부: 대여 %d 는 이미 반납됨", loan_id)
            return Outcome.conflict("Loan has already been returned.")
        if await self.inventory.get_device(db_loan.device_id) is None:
            return Outcome.not_found("Device not found")

        db_loan.returned = True
        db_loan.return_date = datetime.now(UTC)
        self.db.add(db_loan)
        await self.inventory.set_availability(db_loan.device_id, True)

        committed = await commit_or_rollback(self.db, action="loan return")
        if not committed.ok:
            return committed
        logger.info("대여 반납: loan=%d, device=%d", loan_id, db_loan.device_id)
        return await self._read(loan_id)

    async def delete(self, loan_id: int) -> Outcome[None]:
        """
        대여 기록을 상태와 관계없이 삭제합니다.
        활성 대여였다면 장비를 대여 가능 상태로 되돌립니다 (반납과 같은 효과).
        """
        db_loan = await loan_crud.loan.get(self.db, loan_id)
        if db_loan is None:
            return Outcome.not_found("Loan not found")

        was_active = not db_loan.returned
        if was_active:
            await self.inventory.set_availability(db_loan.device_id, True)
        await self.db.delete(db_loan)

        committed = await commit_or_rollback(self.db, action="loan deletion")
        if not committed.ok:
            return committed
        logger.info("대여 삭제: loan=%d (활성 여부: %s)", loan_id, was_active)
        return Outcome.success()

    async def update(self, loan_id: int, loan_in: loan_schemas.LoanUpdate) -> Outcome[loan_schemas.LoanRead]:
        """
        반납 일시와 반납 여부를 전달된 값 그대로 저장합니다.

        returned=True 이면 장비를 대여 가능 상태로 만듭니다.
        returned=False 로 되돌려도 장비를 다시 대여 중으로 표시하지는 않습니다.
        """
        db_loan = await loan_crud.loan.get(self.db, loan_id)
        if db_loan is None:
            return Outcome.not_found("Loan not found")

        db_loan.return_date = loan_in.return_date
        db_loan.returned = loan_in.returned
        self.db.add(db_loan)
        if loan_in.returned:
            await self.inventory.set_availability(db_loan.device_id, True)

        committed = await commit_or_rollback(self.db, action="loan update")
        if not committed.ok:
            return committed
        logger.info("대여 수정: loan=%d, returned=%s", loan_id, loan_in.returned)
        return await self._read(loan_id)

    # =========================================================================
    # 2. 조회
    # =========================================================================
    async def read_one(self, loan_id: int) -> Outcome[loan_schemas.LoanRead]:
        return await self._read(loan_id)

    async def read_all(self) -> List[loan_schemas.LoanRead]:
        return await loan_crud.loan.read_all(self.db)

    async def all_active_loans(self) -> List[loan_schemas.LoanRead]:
        return await loan_crud.loan.read_active(self.db)

    async def active_loans_for_employee(self, employee_id: int) -> Outcome[List[loan_schemas.LoanRead]]:
        """직원이 없으면 빈 목록이 아니라 NOT_FOUND를 반환합니다."""
        if not await self.inventory.employee_exists(employee_id):
            return Outcome.not_found("Employee not found")
        return Outcome.success(
            await loan_crud.loan.read_for_employee(self.db, employee_id=employee_id, returned=False)
        )

    async def history_for_employee(self, employee_id: int) -> Outcome[List[loan_schemas.LoanRead]]:
        if not await self.inventory.employee_exists(employee_id):
            return Outcome.not_found("Employee not found")
        return Outcome.success(
            await loan_crud.loan.read_for_employee(self.db, employee_id=employee_id, returned=True)
        )


def get_loan_engine(db: AsyncSession = Depends(deps.get_db_session)) -> LoanEngine:
    """
    FastAPI 의존성 주입을 통해 요청마다 LoanEngine 인스턴스를 제공합니다.
    """
    return LoanEngine(db, SessionLoanInventory(db))
