# ems/services/inventory.py

"""
대여 엔진이 'dev', 'org' 도메인에 접근할 때 사용하는 인터페이스입니다.

엔진은 장비 조회, 대여 가능 여부 변경, 직원 존재 확인 세 가지만 필요로 합니다.
`set_availability`는 세션에 변경만 기록하고 커밋하지 않으며, 커밋은 엔진이 한 번에 수행합니다.
"""

from typing import Optional, Protocol

from sqlmodel.ext.asyncio.session import AsyncSession

from ems.domains.dev import crud as dev_crud
from ems.domains.dev import models as dev_models
from ems.domains.org import crud as org_crud


class LoanInventory(Protocol):
    async def get_device(self, device_id: int) -> Optional[dev_models.Device]:
        ...

    async def set_availability(self, device_id: int, available: bool) -> bool:
        ...

    async def employee_exists(self, employee_id: int) -> bool:
        ...


class SessionLoanInventory:
    """
    주어진 세션 위에서 동작하는 `LoanInventory` 구현입니다.
    """

    def __init__(self, db: AsyncSession):
        self.db = db

    async def get_device(self, device_id: int) -> Optional[dev_models.Device]:
        return await dev_crud.device.get(self.db, device_id)

    async def set_availability(self, device_id: int, available: bool) -> bool:
        """장비가 존재하면 플래그를 바꾸고 True, 없으면 False를 반환합니다."""
        db_device = await self.get_device(device_id)
        if db_device is None:
            return False
        db_device.available = available
        self.db.add(db_device)
        return True

    async def employee_exists(self, employee_id: int) -> bool:
        return await org_crud.employee.exists(self.db, employee_id)
