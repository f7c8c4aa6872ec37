# ems/domains/loan/routers.py

"""
'loan' 도메인 (장비 대여 관리)과 관련된 API 엔드포인트를 정의하는 모듈입니다.

모든 명령과 조회는 `LoanEngine`을 통해 수행됩니다.
"""

from typing import List

from fastapi import APIRouter, Depends, Response, status

from ems.core import dependencies as deps
from ems.services.loan_engine import LoanEngine, get_loan_engine
from . import schemas as loan_schemas


router = APIRouter(
    tags=["Loan Management (장비 대여 관리)"],
    responses={404: {"description": "Not found"}},
)


# =============================================================================
# 1. 대여 생명주기 엔드포인트
# =============================================================================
@router.post("/loans", response_model=loan_schemas.LoanRead, status_code=status.HTTP_201_CREATED, summary="장비 대여 발행")
async def issue_loan(
    loan_in: loan_schemas.LoanCreate,
    engine: LoanEngine = Depends(get_loan_engine),
):
    """
    장비를 직원에게 대여합니다.
    - 장비 또는 직원이 없으면 404, 장비가 이미 대여 중이면 409를 반환합니다.
    """
    return deps.unwrap(await engine.issue(loan_in.employee_id, loan_in.device_id))


@router.post("/loans/{loan_id}/return", response_model=loan_schemas.LoanRead, summary="대여 반납")
async def return_loan(loan_id: int, engine: LoanEngine = Depends(get_loan_engine)):
    """이미 반납된 대여는 다시 반납할 수 없습니다 (409)."""
    return deps.unwrap(await engine.return_loan(loan_id))


@router.put("/loans/{loan_id}", response_model=loan_schemas.LoanRead, summary="대여 기록 수정")
async def update_loan(
    loan_id: int,
    loan_in: loan_schemas.LoanUpdate,
    engine: LoanEngine = Depends(get_loan_engine),
):
    return deps.unwrap(await engine.update(loan_id, loan_in))


@router.delete("/loans/{loan_id}", status_code=status.HTTP_204_NO_CONTENT, summary="대여 기록 삭제")
async def delete_loan(loan_id: int, engine: LoanEngine = Depends(get_loan_engine)):
    """활성 대여를 삭제하면 장비는 대여 가능 상태로 돌아갑니다."""
    deps.unwrap(await engine.delete(loan_id))
    return Response(status_code=status.HTTP_204_NO_CONTENT)


# =============================================================================
# 2. 대여 조회 엔드포인트
# =============================================================================
@router.get("/loans", response_model=List[loan_schemas.LoanRead], summary="모든 대여 기록 조회")
async def read_loans(engine: LoanEngine = Depends(get_loan_engine)):
    return await engine.read_all()


# 고정 경로는 /loans/{loan_id} 보다 먼저 등록되어야 합니다.
@router.get("/loans/active", response_model=List[loan_schemas.LoanRead], summary="활성 대여 전체 조회")
async def read_active_loans(engine: LoanEngine = Depends(get_loan_engine)):
    return await engine.all_active_loans()


@router.get("/loans/employee/{employee_id}/active", response_model=List[loan_schemas.LoanRead], summary="직원별 활성 대여 조회")
async def read_employee_active_loans(employee_id: int, engine: LoanEngine = Depends(get_loan_engine)):
    """직원이 존재하지 않으면 빈 목록이 아니라 404를 반환합니다."""
    return deps.unwrap(await engine.active_loans_for_employee(employee_id))


@router.get("/loans/employee/{employee_id}/history", response_model=List[loan_schemas.LoanRead], summary="직원별 반납 이력 조회")
async def read_employee_loan_history(employee_id: int, engine: LoanEngine = Depends(get_loan_engine)):
    return deps.unwrap(await engine.history_for_employee(employee_id))


@router.get("/loans/{loan_id}", response_model=loan_schemas.LoanRead, summary="특정 대여 기록 조회")
async def read_loan(loan_id: int, engine: LoanEngine = Depends(get_loan_engine)):
    return deps.unwrap(await engine.read_one(loan_id))
