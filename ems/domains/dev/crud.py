# ems/domains/dev/crud.py

"""
'dev' 도메인의 CRUD(Create, Read, Update, Delete) 작업을 위한 모듈입니다.

- 제조사/장비 유형: 이름은 앞뒤 공백을 제거하여 저장하고, 대소문자를 무시하여 중복을 검사합니다.
  장비가 참조하고 있으면 삭제를 거부합니다.
- 장비: 시리얼 번호는 앞뒤 공백을 제거하여 저장하고, 다른 모든 장비와 대소문자 무시 비교로
  중복을 검사합니다. 조회 결과에는 제조사명과 장비 유형명이 포함됩니다.
"""

import logging
import re
from typing import Any, Dict, List, Optional, Type

from sqlalchemy import delete as sql_delete
from sqlmodel import SQLModel, select
from sqlmodel.ext.asyncio.session import AsyncSession

from ems.core.crud_base import CRUDBase, commit_or_rollback
from ems.core.outcomes import Outcome
from ems.domains.loan import models as loan_models
from . import models as dev_models
from . import schemas as dev_schemas

logger = logging.getLogger(__name__)

NAME_MAX_LENGTH = 100
SERIAL_NUMBER_MAX_LENGTH = 100
SERIAL_NUMBER_PATTERN = re.compile(r"^[A-Za-z0-9\-_]+$")


def normalize_text(value: Optional[str]) -> Optional[str]:
    """앞뒤 공백을 제거합니다. 비어 있거나 공백뿐이면 None을 반환합니다."""
    if value is None:
        return None
    value = value.strip()
    return value or None


# =============================================================================
# 1. 이름이 고유한 참조 테이블 (producers, device_types) 공통 CRUD
# =============================================================================
class CRUDNamedReference(CRUDBase):
    """
    대소문자를 무시하는 고유 이름을 가진 참조 테이블용 CRUD입니다.
    """
    def __init__(self, model: Type[SQLModel], *, reference_attribute: str):
        super().__init__(model=model)
        # 이 레코드를 참조하는 devices 테이블의 FK 컬럼명
        self.reference_attribute = reference_attribute

    def _check_name(self, name: Optional[str]) -> Outcome[str]:
        normalized = normalize_text(name)
        if normalized is None:
            return Outcome.invalid(f"{self.label} name is required.")
        if len(normalized) > NAME_MAX_LENGTH:
            return Outcome.invalid(f"{self.label} name may be at most {NAME_MAX_LENGTH} characters.")
        return Outcome.success(normalized)

    async def get_by_name(self, db: AsyncSession, *, name: str, exclude_id: Optional[int] = None):
        return await self.get_by_attribute_ci(db, attribute="name", value=name, exclude_id=exclude_id)

    async def create(self, db: AsyncSession, *, obj_in: SQLModel) -> Outcome:
        checked = self._check_name(obj_in.name)
        if not checked.ok:
            return checked
        if await self.get_by_name(db, name=checked.value):
            return Outcome.conflict(f"{self.label} with this name already exists.")
        return await super().create(db, obj_in={"name": checked.value})

    async def update(self, db: AsyncSession, *, db_obj: SQLModel, obj_in: SQLModel) -> Outcome:
        update_data = obj_in.model_dump(exclude_unset=True)
        if "name" in update_data:
            checked = self._check_name(update_data["name"])
            if not checked.ok:
                return checked
            if await self.get_by_name(db, name=checked.value, exclude_id=db_obj.id):
                return Outcome.conflict(f"{self.label} with this name already exists.")
            update_data["name"] = checked.value
        return await super().update(db, db_obj=db_obj, obj_in=update_data)

    async def remove(self, db: AsyncSession, *, id: int) -> Outcome:
        """
        레코드를 삭제합니다. 이 레코드를 참조하는 장비가 있으면 삭제를 거부합니다.
        """
        if not await self.exists(db, id):
            return Outcome.not_found(f"{self.label} not found")

        devices = await device.count_by_attribute(db, attribute=self.reference_attribute, value=id)
        if devices:
            return Outcome.conflict(f"Cannot delete {self.label}: {devices} device(s) still reference it.")
        return await super().delete(db, id=id)


producer = CRUDNamedReference(dev_models.Producer, reference_attribute="producer_id")
device_type = CRUDNamedReference(dev_models.DeviceType, reference_attribute="type_id")


# =============================================================================
# 2. devices 테이블 CRUD
# =============================================================================
class CRUDDevice(CRUDBase[dev_models.Device, dev_schemas.DeviceCreate, dev_schemas.DeviceUpdate]):
    def __init__(self):
        super().__init__(model=dev_models.Device)

    # --- 조회 (비정규화된 읽기 뷰) ---
    def _read_statement(self):
        return (
            select(dev_models.Device, dev_models.DeviceType.name, dev_models.Producer.name)
            .outerjoin(dev_models.DeviceType, dev_models.DeviceType.id == dev_models.Device.type_id)
            .outerjoin(dev_models.Producer, dev_models.Producer.id == dev_models.Device.producer_id)
            .order_by(dev_models.Device.id)
        )

    @staticmethod
    def _to_read(db_obj: dev_models.Device, type_name: Optional[str], producer_name: Optional[str]) -> dev_schemas.DeviceRead:
        return dev_schemas.DeviceRead(
            id=db_obj.id,
            type_id=db_obj.type_id,
            producer_id=db_obj.producer_id,
            available=db_obj.available,
            serial_number=db_obj.serial_number,
            type_name=type_name,
            producer_name=producer_name,
        )

    async def _read_where(self, db: AsyncSession, *conditions: Any) -> List[dev_schemas.DeviceRead]:
        result = await db.execute(self._read_statement().where(*conditions))
        return [self._to_read(*row) for row in result.all()]

    async def read_one(self, db: AsyncSession, *, id: int) -> Optional[dev_schemas.DeviceRead]:
        devices = await self._read_where(db, dev_models.Device.id == id)
        return devices[0] if devices else None

    async def read_all(self, db: AsyncSession) -> List[dev_schemas.DeviceRead]:
        return await self._read_where(db)

    async def read_available(self, db: AsyncSession) -> List[dev_schemas.DeviceRead]:
        return await self._read_where(db, dev_models.Device.available == True)  # noqa: E712

    async def read_by_producer(self, db: AsyncSession, *, producer_id: int) -> List[dev_schemas.DeviceRead]:
        return await self._read_where(db, dev_models.Device.producer_id == producer_id)

    async def read_by_type(self, db: AsyncSession, *, type_id: int) -> List[dev_schemas.DeviceRead]:
        return await self._read_where(db, dev_models.Device.type_id == type_id)

    # --- 검증 ---
    @staticmethod
    def _check_serial_number(serial_number: Optional[str]) -> Outcome[str]:
        normalized = normalize_text(serial_number)
        if normalized is None:
            return Outcome.invalid("Serial number is required.")
        if len(normalized) > SERIAL_NUMBER_MAX_LENGTH:
            return Outcome.invalid(f"Serial number may be at most {SERIAL_NUMBER_MAX_LENGTH} characters.")
        if not SERIAL_NUMBER_PATTERN.match(normalized):
            return Outcome.invalid("Serial number may contain only letters, digits, hyphens and underscores.")
        return Outcome.success(normalized)

    async def get_by_serial_number(
        self, db: AsyncSession, *, serial_number: str, exclude_id: Optional[int] = None
    ) -> Optional[dev_models.Device]:
        """대소문자와 앞뒤 공백을 무시하고 시리얼 번호로 장비를 조회합니다."""
        return await self.get_by_attribute_ci(db, attribute="serial_number", value=serial_number, exclude_id=exclude_id)

    async def _check_references(self, db: AsyncSession, data: Dict[str, Any]) -> Optional[Outcome]:
        if "type_id" in data and not await device_type.exists(db, data["type_id"]):
            return Outcome.not_found("Device type not found")
        if "producer_id" in data and not await producer.exists(db, data["producer_id"]):
            return Outcome.not_found("Producer not found")
        return None

    async def has_active_loan(self, db: AsyncSession, *, id: int) -> bool:
        statement = select(loan_models.Loan.id).where(
            loan_models.Loan.device_id == id,
            loan_models.Loan.returned == False,  # noqa: E712
        )
        result = await db.execute(statement)
        return result.first() is not None

    # --- 쓰기 ---
    async def create(self, db: AsyncSession, *, obj_in: dev_schemas.DeviceCreate) -> Outcome[dev_schemas.DeviceRead]:
        """
        새 장비를 등록합니다. 시리얼 번호가 비어 있으면 VALIDATION,
        이미 존재하면(대소문자 무시) CONFLICT를 반환하며 아무것도 저장하지 않습니다.
        """
        checked = self._check_serial_number(obj_in.serial_number)
        if not checked.ok:
            return checked

        data = obj_in.model_dump()
        data["serial_number"] = checked.value
        missing = await self._check_references(db, data)
        if missing is not None:
            return missing

        if await self.get_by_serial_number(db, serial_number=checked.value):
            return Outcome.conflict("Device with this serial number already exists.")

        created = await super().create(db, obj_in=data)
        if not created.ok:
            return created
        logger.info("장비 등록: id=%d, serial_number=%s", created.value.id, created.value.serial_number)
        return Outcome.success(await self.read_one(db, id=created.value.id))

    async def update(
        self, db: AsyncSession, *, id: int, obj_in: dev_schemas.DeviceUpdate
    ) -> Outcome[dev_schemas.DeviceRead]:
        """
        장비 정보를 업데이트합니다. 시리얼 번호 중복 검사에서는 자기 자신을 제외합니다.
        활성 대여가 있는 장비를 대여 가능(available=True)으로 바꾸는 것은 거부합니다.

        반대 방향은 막지 않습니다. 대여 없이 available=False로 바꾸는 것은 허용되며
        (점검, 분실 처리 등), 이때 장비는 활성 대여 없이 대여 불가 상태가 됩니다.
        등록 시 available=False를 주는 경우도 마찬가지입니다.
        """
        db_obj = await self.get(db, id)
        if db_obj is None:
            return Outcome.not_found("Device not found")

        update_data = obj_in.model_dump(exclude_unset=True)
        if "serial_number" in update_data:
            checked = self._check_serial_number(update_data["serial_number"])
            if not checked.ok:
                return checked
            if await self.get_by_serial_number(db, serial_number=checked.value, exclude_id=id):
                return Outcome.conflict("Device with this serial number already exists.")
            update_data["serial_number"] = checked.value

        # type_id, producer_id, available은 NULL을 허용하지 않으므로 None은 무시합니다.
        update_data = {key: value for key, value in update_data.items() if value is not None}

        missing = await self._check_references(db, update_data)
        if missing is not None:
            return missing

        if update_data.get("available") is True and await self.has_active_loan(db, id=id):
            return Outcome.conflict("Device has an active loan; return the loan instead of marking it available.")

        updated = await super().update(db, db_obj=db_obj, obj_in=update_data)
        if not updated.ok:
            return updated
        return Outcome.success(await self.read_one(db, id=id))

    async def remove(self, db: AsyncSession, *, id: int) -> Outcome[dev_models.Device]:
        """
        장비를 무조건 삭제합니다 (활성 대여 여부를 확인하지 않습니다).
        이 장비를 참조하는 대여 기록도 같은 커밋에서 함께 삭제됩니다.
        """
        db_obj = await self.get(db, id)
        if db_obj is None:
            return Outcome.not_found("Device not found")

        await db.execute(sql_delete(loan_models.Loan).where(loan_models.Loan.device_id == id))
        await db.delete(db_obj)
        committed = await commit_or_rollback(db, action="Device deletion")
        if not committed.ok:
            return committed
        logger.info("장비 삭제: id=%d, serial_number=%s", id, db_obj.serial_number)
        return Outcome.success(db_obj)


device = CRUDDevice()
