# ems/domains/org/routers.py

"""
'org' 도메인 (지점 및 직원 관리)과 관련된 API 엔드포인트를 정의하는 모듈입니다.
"""

from typing import List

from fastapi import APIRouter, Depends, HTTPException, Query, Response, status
from sqlmodel.ext.asyncio.session import AsyncSession

from ems.core import dependencies as deps
from . import crud as org_crud
from . import schemas as org_schemas


router = APIRouter(
    tags=["Organization Management (지점 및 직원 관리)"],
    responses={404: {"description": "Not found"}},
)


# =============================================================================
# 1. 지점 (Branch) 관리 엔드포인트
# =============================================================================
@router.post("/branches", response_model=org_schemas.BranchResponse, status_code=status.HTTP_201_CREATED, summary="새 지점 생성")
async def create_branch(
    branch_in: org_schemas.BranchCreate,
    db: AsyncSession = Depends(deps.get_db_session),
):
    return deps.unwrap(await org_crud.branch.create(db, obj_in=branch_in))


@router.get("/branches", response_model=List[org_schemas.BranchResponse], summary="모든 지점 조회")
async def read_branches(
    db: AsyncSession = Depends(deps.get_db_session),
    skip: int = Query(0, ge=0),
    limit: int = Query(100, ge=1),
):
    return await org_crud.branch.get_multi(db, skip=skip, limit=limit)


@router.get("/branches/{branch_id}", response_model=org_schemas.BranchResponse, summary="특정 지점 조회")
async def read_branch(branch_id: int, db: AsyncSession = Depends(deps.get_db_session)):
    db_branch = await org_crud.branch.get(db, id=branch_id)
    if db_branch is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Branch not found")
    return db_branch


@router.put("/branches/{branch_id}", response_model=org_schemas.BranchResponse, summary="지점 업데이트")
async def update_branch(
    branch_id: int,
    branch_in: org_schemas.BranchUpdate,
    db: AsyncSession = Depends(deps.get_db_session),
):
    db_branch = await org_crud.branch.get(db, id=branch_id)
    if db_branch is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Branch not found")
    return deps.unwrap(await org_crud.branch.update(db, db_obj=db_branch, obj_in=branch_in))


@router.delete("/branches/{branch_id}", status_code=status.HTTP_204_NO_CONTENT, summary="지점 삭제")
async def delete_branch(branch_id: int, db: AsyncSession = Depends(deps.get_db_session)):
    """소속 직원이 있는 지점은 삭제할 수 없습니다 (409)."""
    deps.unwrap(await org_crud.branch.remove(db, id=branch_id))
    return Response(status_code=status.HTTP_204_NO_CONTENT)


# =============================================================================
# 2. 직원 (Employee) 관리 엔드포인트
# =============================================================================
@router.post("/employees", response_model=org_schemas.EmployeeRead, status_code=status.HTTP_201_CREATED, summary="새 직원 등록")
async def create_employee(
    employee_in: org_schemas.EmployeeCreate,
    db: AsyncSession = Depends(deps.get_db_session),
):
    return deps.unwrap(await org_crud.employee.create(db, obj_in=employee_in))


@router.get("/employees", response_model=List[org_schemas.EmployeeRead], summary="모든 직원 조회")
async def read_employees(
    db: AsyncSession = Depends(deps.get_db_session),
    skip: int = Query(0, ge=0),
    limit: int = Query(100, ge=1),
):
    return await org_crud.employee.read_all(db, skip=skip, limit=limit)


@router.get("/employees/{employee_id}", response_model=org_schemas.EmployeeRead, summary="특정 직원 조회")
async def read_employee(employee_id: int, db: AsyncSession = Depends(deps.get_db_session)):
    db_employee = await org_crud.employee.read_one(db, id=employee_id)
    if db_employee is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Employee not found")
    return db_employee


@router.put("/employees/{employee_id}", response_model=org_schemas.EmployeeRead, summary="직원 정보 업데이트")
async def update_employee(
    employee_id: int,
    employee_in: org_schemas.EmployeeUpdate,
    db: AsyncSession = Depends(deps.get_db_session),
):
    return deps.unwrap(await org_crud.employee.update(db, id=employee_id, obj_in=employee_in))


@router.delete("/employees/{employee_id}", status_code=status.HTTP_204_NO_CONTENT, summary="직원 삭제")
async def delete_employee(employee_id: int, db: AsyncSession = Depends(deps.get_db_session)):
    """활성 대여가 남아 있는 직원은 삭제할 수 없습니다 (409)."""
    deps.unwrap(await org_crud.employee.remove(db, id=employee_id))
    return Response(status_code=status.HTTP_204_NO_CONTENT)
