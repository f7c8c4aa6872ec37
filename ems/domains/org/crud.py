# ems/domains/org/crud.py

"""
'org' 도메인의 CRUD 작업을 담당하는 모듈입니다.

지점 삭제는 소속 직원이 있으면 거부하고, 직원 삭제는 활성 대여가 있으면 거부합니다.
모든 쓰기 작업은 `Outcome`을 반환합니다.
"""

import logging
from typing import List, Optional

from sqlalchemy import delete as sql_delete
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from ems.core.crud_base import CRUDBase, commit_or_rollback
from ems.core.outcomes import Outcome
from ems.domains.loan import models as loan_models
from . import models as org_models
from . import schemas as org_schemas

logger = logging.getLogger(__name__)


# =============================================================================
# 1. branches 테이블 CRUD
# =============================================================================
class CRUDBranch(CRUDBase[org_models.Branch, org_schemas.BranchCreate, org_schemas.BranchUpdate]):
    def __init__(self):
        super().__init__(model=org_models.Branch)

    async def remove(self, db: AsyncSession, *, id: int) -> Outcome[org_models.Branch]:
        """
        지점을 삭제합니다. 소속된 직원이 있다면 삭제를 거부합니다.
        """
        if not await self.exists(db, id):
            return Outcome.not_found("Branch not found")

        employees = await employee.count_by_attribute(db, attribute="branch_id", value=id)
        if employees:
            return Outcome.conflict(
                "Cannot delete branch: associated employees exist. "
                "Please reassign or delete associated employees first."
            )
        return await super().delete(db, id=id)


branch = CRUDBranch()


# =============================================================================
# 2. employees 테이블 CRUD
# =============================================================================
class CRUDEmployee(CRUDBase[org_models.Employee, org_schemas.EmployeeCreate, org_schemas.EmployeeUpdate]):
    def __init__(self):
        super().__init__(model=org_models.Employee)

    def _read_statement(self):
        return (
            select(org_models.Employee, org_models.Branch.name)
            .outerjoin(org_models.Branch, org_models.Branch.id == org_models.Employee.branch_id)
            .order_by(org_models.Employee.id)
        )

    @staticmethod
    def _to_read(db_obj: org_models.Employee, branch_name: Optional[str]) -> org_schemas.EmployeeRead:
        return org_schemas.EmployeeRead(
            id=db_obj.id,
            name=db_obj.name,
            last_name=db_obj.last_name,
            email=db_obj.email,
            branch_id=db_obj.branch_id,
            branch_name=branch_name,
        )

    async def read_one(self, db: AsyncSession, *, id: int) -> Optional[org_schemas.EmployeeRead]:
        """직원 한 명을 소속 지점명과 함께 조회합니다."""
        result = await db.execute(self._read_statement().where(org_models.Employee.id == id))
        row = result.first()
        if row is None:
            return None
        return self._to_read(*row)

    async def read_all(self, db: AsyncSession, *, skip: int = 0, limit: int = 100) -> List[org_schemas.EmployeeRead]:
        result = await db.execute(self._read_statement().offset(skip).limit(limit))
        return [self._to_read(*row) for row in result.all()]

    async def create(self, db: AsyncSession, *, obj_in: org_schemas.EmployeeCreate) -> Outcome[org_schemas.EmployeeRead]:
        if not await branch.exists(db, obj_in.branch_id):
            return Outcome.not_found("Branch not found")

        created = await super().create(db, obj_in=obj_in)
        if not created.ok:
            return created
        return Outcome.success(await self.read_one(db, id=created.value.id))

    async def update(
        self, db: AsyncSession, *, id: int, obj_in: org_schemas.EmployeeUpdate
    ) -> Outcome[org_schemas.EmployeeRead]:
        db_obj = await self.get(db, id)
        if db_obj is None:
            return Outcome.not_found("Employee not found")
        if obj_in.branch_id is not None and not await branch.exists(db, obj_in.branch_id):
            return Outcome.not_found("Branch not found")

        updated = await super().update(db, db_obj=db_obj, obj_in=obj_in)
        if not updated.ok:
            return updated
        return Outcome.success(await self.read_one(db, id=id))

    async def remove(self, db: AsyncSession, *, id: int) -> Outcome[org_models.Employee]:
        """
        직원을 삭제합니다.
        활성 대여가 남아 있으면 장비가 영구히 대여 중으로 남으므로 삭제를 거부하고,
        반납 완료된 대여 이력은 직원과 함께 삭제합니다.
        """
        db_obj = await self.get(db, id)
        if db_obj is None:
            return Outcome.not_found("Employee not found")

        active_statement = select(loan_models.Loan.id).where(
            loan_models.Loan.employee_id == id,
            loan_models.Loan.returned == False,  # noqa: E712
        )
        active = await db.execute(active_statement)
        if active.first() is not None:
            return Outcome.conflict("Cannot delete employee: the employee still has active loans.")

        await db.execute(sql_delete(loan_models.Loan).where(loan_models.Loan.employee_id == id))
        await db.delete(db_obj)
        committed = await commit_or_rollback(db, action="Employee deletion")
        if not committed.ok:
            return committed
        logger.info("직원 %d 삭제 완료 (대여 이력 포함).", id)
        return Outcome.success(db_obj)


employee = CRUDEmployee()
