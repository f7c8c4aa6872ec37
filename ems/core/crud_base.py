# ems/core/crud_base.py

"""
공통 CRUD(Create, Read, Update, Delete) 작업을 위한 기본 클래스 모듈입니다.
모든 메서드는 비동기(async) 환경에서 동작하며, 세션은 호출자가 명시적으로 전달합니다.

쓰기 메서드(create, update, delete)는 커밋 실패를 예외로 전파하지 않고
`Outcome` (FailureKind.PERSISTENCE)으로 변환하여 반환합니다.
"""

import logging
from typing import Generic, List, Optional, Type, TypeVar, Any, Dict, Union

from sqlalchemy import func
from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import SQLModel, select
from sqlmodel.ext.asyncio.session import AsyncSession
from pydantic import BaseModel

from ems.core.outcomes import FailureKind, Outcome

logger = logging.getLogger(__name__)

ModelType = TypeVar("ModelType", bound=SQLModel)
CreateSchemaType = TypeVar("CreateSchemaType", bound=BaseModel)
UpdateSchemaType = TypeVar("UpdateSchemaType", bound=BaseModel)


async def commit_or_rollback(db: AsyncSession, *, action: str) -> Outcome[None]:
    """
    세션에 쌓인 변경 사항을 한 번에 커밋합니다.
    실패하면 롤백하고 PERSISTENCE 결과를 반환합니다.
    """
    try:
        await db.commit()
    except SQLAlchemyError as e:
        await db.rollback()
        logger.warning("%s 커밋 실패, 롤백합니다: %s", action, e)
        return Outcome.failure(FailureKind.PERSISTENCE, f"Could not persist {action}.")
    return Outcome.success()


class CRUDBase(Generic[ModelType, CreateSchemaType, UpdateSchemaType]):
    """
    모든 CRUD 작업에 대한 기본 클래스를 정의합니다.
    """
    def __init__(self, model: Type[ModelType]):
        self.model = model

    @property
    def label(self) -> str:
        return self.model.__name__

    async def get(self, db: AsyncSession, id: Any) -> Optional[ModelType]:
        """
        ID를 기준으로 단일 레코드를 조회합니다.
        """
        return await db.get(self.model, id)

    async def exists(self, db: AsyncSession, id: Any) -> bool:
        statement = select(self.model.id).where(self.model.id == id)
        result = await db.execute(statement)
        return result.scalar_one_or_none() is not None

    async def get_multi(
        self, db: AsyncSession, *, skip: int = 0, limit: int = 100, **kwargs: Any
    ) -> List[ModelType]:
        """
        여러 레코드를 조회합니다. 필터링을 위한 키워드 인자를 지원합니다.
        """
        query = select(self.model).order_by(self.model.id).offset(skip).limit(limit)

        for field, value in kwargs.items():
            if hasattr(self.model, field):
                query = query.where(getattr(self.model, field) == value)

        result = await db.execute(query)
        return result.scalars().all()

    async def get_by_attribute_ci(
        self, db: AsyncSession, *, attribute: str, value: str, exclude_id: Optional[int] = None
    ) -> Optional[ModelType]:
        """
        대소문자와 앞뒤 공백을 무시하고 문자열 속성이 일치하는 레코드를 조회합니다.
        exclude_id가 주어지면 해당 레코드는 비교 대상에서 제외합니다 (업데이트용).
        """
        column = getattr(self.model, attribute)
        statement = select(self.model).where(func.lower(column) == value.strip().lower())
        if exclude_id is not None:
            statement = statement.where(self.model.id != exclude_id)
        response = await db.execute(statement)
        return response.scalars().first()

    async def count_by_attribute(self, db: AsyncSession, *, attribute: str, value: Any) -> int:
        statement = select(func.count()).select_from(self.model).where(getattr(self.model, attribute) == value)
        response = await db.execute(statement)
        return response.scalar_one()

    async def create(self, db: AsyncSession, *, obj_in: Union[CreateSchemaType, Dict[str, Any]]) -> Outcome[ModelType]:
        """
        새로운 레코드를 생성합니다.
        """
        db_obj = self.model.model_validate(obj_in)
        db.add(db_obj)
        committed = await commit_or_rollback(db, action=f"{self.label} creation")
        if not committed.ok:
            return committed
        await db.refresh(db_obj)
        return Outcome.success(db_obj)

    async def update(
        self, db: AsyncSession, *, db_obj: ModelType, obj_in: Union[UpdateSchemaType, Dict[str, Any]]
    ) -> Outcome[ModelType]:
        """
        기존 레코드를 업데이트합니다. 전달된(설정된) 필드만 변경합니다.
        NOT NULL 컬럼에 명시적으로 null을 보내면 VALIDATION 결과를 반환하고 아무것도 바꾸지 않습니다.
        """
        update_data = obj_in if isinstance(obj_in, dict) else obj_in.model_dump(exclude_unset=True)
        columns = self.model.__table__.columns
        for key, value in update_data.items():
            if value is None and key in columns and not columns[key].nullable:
                return Outcome.invalid(f"{self.label} {key} may not be null.")

        for key, value in update_data.items():
            setattr(db_obj, key, value)

        db.add(db_obj)
        committed = await commit_or_rollback(db, action=f"{self.label} update")
        if not committed.ok:
            return committed
        await db.refresh(db_obj)
        return Outcome.success(db_obj)

    async def delete(self, db: AsyncSession, *, id: Any) -> Outcome[ModelType]:
        """
        ID를 기준으로 레코드를 삭제합니다.
        """
        db_obj = await db.get(self.model, id)
        if db_obj is None:
            return Outcome.not_found(f"{self.label} not found")
        await db.delete(db_obj)
        committed = await commit_or_rollback(db, action=f"{self.label} deletion")
        if not committed.ok:
            return committed
        return Outcome.success(db_obj)
