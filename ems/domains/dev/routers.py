# ems/domains/dev/routers.py

"""
'dev' 도메인 (제조사, 장비 유형, 장비 관리)과 관련된 API 엔드포인트를 정의하는 모듈입니다.
"""

from typing import List

from fastapi import APIRouter, Depends, HTTPException, Query, Response, status
from sqlmodel.ext.asyncio.session import AsyncSession

from ems.core import dependencies as deps
from . import crud as dev_crud
from . import schemas as dev_schemas


router = APIRouter(
    tags=["Device Management (장비 관리)"],
    responses={404: {"description": "Not found"}},
)


# =============================================================================
# 1. 제조사 (Producer) 관리 엔드포인트
# =============================================================================
@router.post("/producers", response_model=dev_schemas.ProducerResponse, status_code=status.HTTP_201_CREATED, summary="새 제조사 생성")
async def create_producer(
    producer_in: dev_schemas.ProducerCreate,
    db: AsyncSession = Depends(deps.get_db_session),
):
    """이름은 대소문자를 무시하고 고유해야 합니다 (중복 시 409)."""
    return deps.unwrap(await dev_crud.producer.create(db, obj_in=producer_in))


@router.get("/producers", response_model=List[dev_schemas.ProducerResponse], summary="모든 제조사 조회")
async def read_producers(
    db: AsyncSession = Depends(deps.get_db_session),
    skip: int = Query(0, ge=0),
    limit: int = Query(100, ge=1),
):
    return await dev_crud.producer.get_multi(db, skip=skip, limit=limit)


@router.get("/producers/{producer_id}", response_model=dev_schemas.ProducerResponse, summary="특정 제조사 조회")
async def read_producer(producer_id: int, db: AsyncSession = Depends(deps.get_db_session)):
    db_producer = await dev_crud.producer.get(db, id=producer_id)
    if db_producer is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Producer not found")
    return db_producer


@router.put("/producers/{producer_id}", response_model=dev_schemas.ProducerResponse, summary="제조사 업데이트")
async def update_producer(
    producer_id: int,
    producer_in: dev_schemas.ProducerUpdate,
    db: AsyncSession = Depends(deps.get_db_session),
):
    db_producer = await dev_crud.producer.get(db, id=producer_id)
    if db_producer is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Producer not found")
    return deps.unwrap(await dev_crud.producer.update(db, db_obj=db_producer, obj_in=producer_in))


@router.delete("/producers/{producer_id}", status_code=status.HTTP_204_NO_CONTENT, summary="제조사 삭제")
async def delete_producer(producer_id: int, db: AsyncSession = Depends(deps.get_db_session)):
    """장비가 참조하고 있는 제조사는 삭제할 수 없습니다 (409)."""
    deps.unwrap(await dev_crud.producer.remove(db, id=producer_id))
    return Response(status_code=status.HTTP_204_NO_CONTENT)


# =============================================================================
# 2. 장비 유형 (DeviceType) 관리 엔드포인트
# =============================================================================
@router.post("/device_types", response_model=dev_schemas.DeviceTypeResponse, status_code=status.HTTP_201_CREATED, summary="새 장비 유형 생성")
async def create_device_type(
    device_type_in: dev_schemas.DeviceTypeCreate,
    db: AsyncSession = Depends(deps.get_db_session),
):
    return deps.unwrap(await dev_crud.device_type.create(db, obj_in=device_type_in))


@router.get("/device_types", response_model=List[dev_schemas.DeviceTypeResponse], summary="모든 장비 유형 조회")
async def read_device_types(
    db: AsyncSession = Depends(deps.get_db_session),
    skip: int = Query(0, ge=0),
    limit: int = Query(100, ge=1),
):
    return await dev_crud.device_type.get_multi(db, skip=skip, limit=limit)


@router.get("/device_types/{type_id}", response_model=dev_schemas.DeviceTypeResponse, summary="특정 장비 유형 조회")
async def read_device_type(type_id: int, db: AsyncSession = Depends(deps.get_db_session)):
    db_type = await dev_crud.device_type.get(db, id=type_id)
    if db_type is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Device type not found")
    return db_type


@router.put("/device_types/{type_id}", response_model=dev_schemas.DeviceTypeResponse, summary="장비 유형 업데이트")
async def update_device_type(
    type_id: int,
    device_type_in: dev_schemas.DeviceTypeUpdate,
    db: AsyncSession = Depends(deps.get_db_session),
):
    db_type = await dev_crud.device_type.get(db, id=type_id)
    if db_type is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Device type not found")
    return deps.unwrap(await dev_crud.device_type.update(db, db_obj=db_type, obj_in=device_type_in))


@router.delete("/device_types/{type_id}", status_code=status.HTTP_204_NO_CONTENT, summary="장비 유형 삭제")
async def delete_device_type(type_id: int, db: AsyncSession = Depends(deps.get_db_session)):
    deps.unwrap(await dev_crud.device_type.remove(db, id=type_id))
    return Response(status_code=status.HTTP_204_NO_CONTENT)


# =============================================================================
# 3. 장비 (Device) 관리 엔드포인트
# =============================================================================
@router.post("/devices", response_model=dev_schemas.DeviceRead, status_code=status.HTTP_201_CREATED, summary="새 장비 등록")
async def create_device(
    device_in: dev_schemas.DeviceCreate,
    db: AsyncSession = Depends(deps.get_db_session),
):
    """
    새 장비를 등록합니다.
    - 시리얼 번호는 앞뒤 공백을 제거하여 저장하며, 영문자/숫자/하이픈/밑줄만 허용합니다 (400).
    - 이미 등록된 시리얼 번호(대소문자 무시)는 409를 반환합니다.
    """
    return deps.unwrap(await dev_crud.device.create(db, obj_in=device_in))


@router.get("/devices", response_model=List[dev_schemas.DeviceRead], summary="모든 장비 조회")
async def read_devices(db: AsyncSession = Depends(deps.get_db_session)):
    return await dev_crud.device.read_all(db)


# 고정 경로는 /devices/{device_id} 보다 먼저 등록되어야 합니다.
@router.get("/devices/available", response_model=List[dev_schemas.DeviceRead], summary="대여 가능한 장비 조회")
async def read_available_devices(db: AsyncSession = Depends(deps.get_db_session)):
    return await dev_crud.device.read_available(db)


@router.get("/devices/producer/{producer_id}", response_model=List[dev_schemas.DeviceRead], summary="제조사별 장비 조회")
async def read_devices_by_producer(producer_id: int, db: AsyncSession = Depends(deps.get_db_session)):
    return await dev_crud.device.read_by_producer(db, producer_id=producer_id)


@router.get("/devices/type/{type_id}", response_model=List[dev_schemas.DeviceRead], summary="장비 유형별 장비 조회")
async def read_devices_by_type(type_id: int, db: AsyncSession = Depends(deps.get_db_session)):
    return await dev_crud.device.read_by_type(db, type_id=type_id)


@router.get("/devices/{device_id}", response_model=dev_schemas.DeviceRead, summary="특정 장비 조회")
async def read_device(device_id: int, db: AsyncSession = Depends(deps.get_db_session)):
    db_device = await dev_crud.device.read_one(db, id=device_id)
    if db_device is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Device not found")
    return db_device


@router.put("/devices/{device_id}", response_model=dev_schemas.DeviceRead, summary="장비 정보 업데이트")
async def update_device(
    device_id: int,
    device_in: dev_schemas.DeviceUpdate,
    db: AsyncSession = Depends(deps.get_db_session),
):
    """활성 대여가 있는 장비를 대여 가능으로 바꾸려 하면 409를 반환합니다."""
    return deps.unwrap(await dev_crud.device.update(db, id=device_id, obj_in=device_in))


@router.delete("/devices/{device_id}", status_code=status.HTTP_204_NO_CONTENT, summary="장비 삭제")
async def delete_device(device_id: int, db: AsyncSession = Depends(deps.get_db_session)):
    """장비와 해당 장비의 대여 기록을 함께 삭제합니다."""
    deps.unwrap(await dev_crud.device.remove(db, id=device_id))
    return Response(status_code=status.HTTP_204_NO_CONTENT)
