# tests/conftest.py

import os
from datetime import datetime, UTC
from typing import AsyncGenerator, Awaitable, Callable

import pytest_asyncio
from httpx import AsyncClient, ASGITransport

from sqlalchemy.ext.asyncio import create_async_engine, AsyncEngine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool
from sqlmodel import SQLModel
from sqlmodel.ext.asyncio.session import AsyncSession

# 애플리케이션 설정이 운영 DB URL을 읽지 않도록 앱 임포트 전에 지정합니다.
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")

from ems.main import app as main_app  # noqa: E402
from ems.core import dependencies as deps  # noqa: E402
from ems.core.database import get_session  # noqa: E402

# --- 모든 모델 임포트 ---
#  SQLModel.metadata.create_all()이 모든 테이블을 인식하려면
#  모든 모델 클래스가 한 번 이상 임포트되어야 합니다.
from ems.domains.models import *  # noqa: F401, F403, E402
from ems.domains.org import models as org_models  # noqa: E402
from ems.domains.dev import models as dev_models  # noqa: E402
from ems.domains.loan import models as loan_models  # noqa: E402


# --- 테스트용 데이터베이스 설정 ---
# 테스트마다 새 인메모리 SQLite DB를 사용합니다.
# StaticPool은 모든 세션이 같은 연결(같은 인메모리 DB)을 공유하게 합니다.
TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"


# --- 데이터베이스 픽스처 ---
@pytest_asyncio.fixture(scope="function")
async def test_engine() -> AsyncGenerator[AsyncEngine, None]:
    """
    테스트 함수마다 새 엔진을 만들고 모든 테이블을 생성합니다.
    """
    engine = create_async_engine(
        TEST_DATABASE_URL,
        echo=False,
        future=True,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.create_all)

    yield engine

    await engine.dispose()


@pytest_asyncio.fixture(scope="function")
async def db_session(test_engine: AsyncEngine) -> AsyncGenerator[AsyncSession, None]:
    """
    테스트용 비동기 데이터베이스 세션을 제공합니다.
    API 요청과 테스트 코드가 같은 세션(같은 작업 단위)을 사용합니다.
    """
    TestingSessionLocal = sessionmaker(
        autocommit=False,
        autoflush=False,
        bind=test_engine,
        class_=AsyncSession,
        expire_on_commit=False,
    )
    async with TestingSessionLocal() as session:
        yield session


@pytest_asyncio.fixture(scope="function")
async def client(db_session: AsyncSession) -> AsyncGenerator[AsyncClient, None]:
    """
    AsyncClient 인스턴스를 생성하고, 테스트용 비동기 DB 세션을 주입합니다.
    """

    def override_get_session_and_dependency():
        yield db_session

    original_overrides = main_app.dependency_overrides.copy()
    try:
        # get_session과 deps.get_db_session 모두 오버라이드
        main_app.dependency_overrides[get_session] = override_get_session_and_dependency
        main_app.dependency_overrides[deps.get_db_session] = override_get_session_and_dependency

        async with AsyncClient(transport=ASGITransport(app=main_app), base_url="http://test") as async_client:
            yield async_client
    finally:
        main_app.dependency_overrides = original_overrides


# --- 데이터 팩토리 픽스처 ---
# API를 거치지 않고 DB에 직접 레코드를 만들어, 다른 레코드의 외래 키 값으로 사용합니다.
@pytest_asyncio.fixture(scope="function")
async def test_branch(db_session: AsyncSession) -> org_models.Branch:
    """테스트용 지점을 데이터베이스에 생성하고 반환합니다."""
    branch = org_models.Branch(name="본사")
    db_session.add(branch)
    await db_session.commit()
    await db_session.refresh(branch)
    return branch


@pytest_asyncio.fixture(scope="function")
def employee_factory(
    db_session: AsyncSession, test_branch: org_models.Branch
) -> Callable[..., Awaitable[org_models.Employee]]:
    """
    이름과 속성을 지정하여 테스트 직원을 생성하는 팩토리 함수를 반환합니다.
    """
    async def _create_employee(name: str = "길동", last_name: str = "홍", **kwargs) -> org_models.Employee:
        employee_data = {
            "name": name,
            "last_name": last_name,
            "email": f"{name}.{last_name}@example.com",
            "branch_id": test_branch.id,
            **kwargs,
        }
        employee = org_models.Employee(**employee_data)
        db_session.add(employee)
        await db_session.commit()
        await db_session.refresh(employee)
        return employee
    return _create_employee


@pytest_asyncio.fixture(scope="function")
async def test_employee(employee_factory: Callable) -> org_models.Employee:
    return await employee_factory()


@pytest_asyncio.fixture(scope="function")
async def test_producer(db_session: AsyncSession) -> dev_models.Producer:
    producer = dev_models.Producer(name="Lenovo")
    db_session.add(producer)
    await db_session.commit()
    await db_session.refresh(producer)
    return producer


@pytest_asyncio.fixture(scope="function")
async def test_device_type(db_session: AsyncSession) -> dev_models.DeviceType:
    device_type = dev_models.DeviceType(name="Laptop")
    db_session.add(device_type)
    await db_session.commit()
    await db_session.refresh(device_type)
    return device_type


@pytest_asyncio.fixture(scope="function")
def device_factory(
    db_session: AsyncSession,
    test_producer: dev_models.Producer,
    test_device_type: dev_models.DeviceType,
) -> Callable[..., Awaitable[dev_models.Device]]:
    """
    시리얼 번호와 대여 가능 여부를 지정하여 테스트 장비를 생성하는 팩토리 함수를 반환합니다.
    """
    async def _create_device(serial_number: str, available: bool = True, **kwargs) -> dev_models.Device:
        device_data = {
            "serial_number": serial_number,
            "available": available,
            "type_id": test_device_type.id,
            "producer_id": test_producer.id,
            **kwargs,
        }
        device = dev_models.Device(**device_data)
        db_session.add(device)
        await db_session.commit()
        await db_session.refresh(device)
        return device
    return _create_device


@pytest_asyncio.fixture(scope="function")
async def test_device(device_factory: Callable) -> dev_models.Device:
    return await device_factory("SN-0001")


@pytest_asyncio.fixture(scope="function")
def loan_factory(db_session: AsyncSession) -> Callable[..., Awaitable[loan_models.Loan]]:
    """
    대여 기록을 직접 생성합니다. 활성 대여이면 장비도 대여 중으로 표시합니다.
    """
    async def _create_loan(
        employee: org_models.Employee, device: dev_models.Device, returned: bool = False
    ) -> loan_models.Loan:
        loan = loan_models.Loan(
            employee_id=employee.id,
            device_id=device.id,
            returned=returned,
            return_date=datetime.now(UTC) if returned else None,
        )
        if not returned:
            device.available = False
            db_session.add(device)
        db_session.add(loan)
        await db_session.commit()
        await db_session.refresh(loan)
        return loan
    return _create_loan
