# tests/domains/test_org.py

"""
'org' 도메인 (지점 및 직원 관리) 관련 API 엔드포인트에 대한 통합 테스트를 정의하는 모듈입니다.

- 지점 관리 엔드포인트 테스트:
    - `POST /org/branches` (생성)
    - `GET /org/branches` (목록 조회)
    - `GET /org/branches/{id}` (단일 조회)
    - `PUT /org/branches/{id}` (업데이트)
    - `DELETE /org/branches/{id}` (삭제, 소속 직원이 있으면 409)
- 직원 관리 엔드포인트 테스트:
    - `POST /org/employees` (생성, 지점 존재 확인)
    - `GET /org/employees[/{id}]` (조회, 지점명 포함)
    - `PUT /org/employees/{id}` (업데이트)
    - `DELETE /org/employees/{id}` (삭제, 활성 대여가 있으면 409)
"""

import pytest
from httpx import AsyncClient
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from ems.domains.org import models as org_models
from ems.domains.loan import models as loan_models


# --- 지점 관리 엔드포인트 테스트 ---

@pytest.mark.asyncio
async def test_create_branch_success(client: AsyncClient):
    print("\n--- Running test_create_branch_success ---")
    response = await client.post("/api/v1/org/branches", json={"name": "서울지점"})
    print(f"Response status code: {response.status_code}")
    print(f"Response JSON: {response.json()}")

    assert response.status_code == 201
    created_branch = response.json()
    assert created_branch["name"] == "서울지점"
    assert "id" in created_branch
    print("test_create_branch_success passed.")


@pytest.mark.asyncio
async def test_create_branch_empty_name(client: AsyncClient):
    """빈 이름은 스키마 검증에서 422로 거부됩니다."""
    print("\n--- Running test_create_branch_empty_name ---")
    response = await client.post("/api/v1/org/branches", json={"name": ""})
    assert response.status_code == 422
    print("test_create_branch_empty_name passed.")


@pytest.mark.asyncio
async def test_read_branches(client: AsyncClient, test_branch: org_models.Branch):
    print("\n--- Running test_read_branches ---")
    await client.post("/api/v1/org/branches", json={"name": "부산지점"})

    response = await client.get("/api/v1/org/branches")
    assert response.status_code == 200
    names = [b["name"] for b in response.json()]
    assert names == [test_branch.name, "부산지점"]

    response = await client.get(f"/api/v1/org/branches/{test_branch.id}")
    assert response.status_code == 200
    assert response.json()["name"] == test_branch.name
    print("test_read_branches passed.")


@pytest.mark.asyncio
async def test_read_branch_not_found(client: AsyncClient):
    print("\n--- Running test_read_branch_not_found ---")
    response = await client.get("/api/v1/org/branches/999")
    assert response.status_code == 404
    assert response.json()["detail"] == "Branch not found"
    print("test_read_branch_not_found passed.")


@pytest.mark.asyncio
async def test_update_branch(client: AsyncClient, test_branch: org_models.Branch):
    print("\n--- Running test_update_branch ---")
    response = await client.put(f"/api/v1/org/branches/{test_branch.id}", json={"name": "본사(이전)"})
    assert response.status_code == 200
    assert response.json()["name"] == "본사(이전)"

    response = await client.put("/api/v1/org/branches/999", json={"name": "없음"})
    assert response.status_code == 404
    print("test_update_branch passed.")


@pytest.mark.asyncio
async def test_update_branch_null_name(client: AsyncClient, test_branch: org_models.Branch):
    """필수 필드에 null을 보내면 400을 반환하고 지점은 그대로 남습니다."""
    print("\n--- Running test_update_branch_null_name ---")
    branch_id = test_branch.id
    response = await client.put(f"/api/v1/org/branches/{branch_id}", json={"name": None})
    assert response.status_code == 400
    assert response.json()["detail"] == "Branch name may not be null."

    response = await client.get(f"/api/v1/org/branches/{branch_id}")
    assert response.status_code == 200
    assert response.json()["name"] == "본사"
    print("test_update_branch_null_name passed.")


@pytest.mark.asyncio
async def test_delete_branch_success(client: AsyncClient, test_branch: org_models.Branch):
    print("\n--- Running test_delete_branch_success ---")
    response = await client.delete(f"/api/v1/org/branches/{test_branch.id}")
    assert response.status_code == 204

    response = await client.get(f"/api/v1/org/branches/{test_branch.id}")
    assert response.status_code == 404
    print("test_delete_branch_success passed.")


@pytest.mark.asyncio
async def test_delete_branch_with_employees_conflict(
    client: AsyncClient, test_branch: org_models.Branch, test_employee: org_models.Employee
):
    """소속 직원이 있는 지점은 삭제할 수 없습니다."""
    print("\n--- Running test_delete_branch_with_employees_conflict ---")
    response = await client.delete(f"/api/v1/org/branches/{test_branch.id}")
    print(f"Response JSON: {response.json()}")

    assert response.status_code == 409
    assert "associated employees exist" in response.json()["detail"]
    print("test_delete_branch_with_employees_conflict passed.")


@pytest.mark.asyncio
async def test_delete_branch_not_found(client: AsyncClient):
    response = await client.delete("/api/v1/org/branches/999")
    assert response.status_code == 404


# --- 직원 관리 엔드포인트 테스트 ---

@pytest.mark.asyncio
async def test_create_employee_success(client: AsyncClient, test_branch: org_models.Branch):
    print("\n--- Running test_create_employee_success ---")
    employee_data = {
        "name": "영희",
        "last_name": "김",
        "email": "younghee.kim@example.com",
        "branch_id": test_branch.id,
    }
    response = await client.post("/api/v1/org/employees", json=employee_data)
    print(f"Response status code: {response.status_code}")
    print(f"Response JSON: {response.json()}")

    assert response.status_code == 201
    created = response.json()
    assert created["name"] == "영희"
    assert created["branch_id"] == test_branch.id
    assert created["branch_name"] == test_branch.name
    print("test_create_employee_success passed.")


@pytest.mark.asyncio
async def test_create_employee_branch_not_found(client: AsyncClient):
    print("\n--- Running test_create_employee_branch_not_found ---")
    employee_data = {"name": "철수", "last_name": "이", "email": "cs@example.com", "branch_id": 999}
    response = await client.post("/api/v1/org/employees", json=employee_data)

    assert response.status_code == 404
    assert response.json()["detail"] == "Branch not found"
    print("test_create_employee_branch_not_found passed.")


@pytest.mark.asyncio
async def test_create_employee_invalid_branch_id(client: AsyncClient):
    employee_data = {"name": "철수", "last_name": "이", "email": "cs@example.com", "branch_id": 0}
    response = await client.post("/api/v1/org/employees", json=employee_data)
    assert response.status_code == 422


@pytest.mark.asyncio
async def test_read_employee(client: AsyncClient, test_employee: org_models.Employee, test_branch: org_models.Branch):
    print("\n--- Running test_read_employee ---")
    response = await client.get(f"/api/v1/org/employees/{test_employee.id}")
    assert response.status_code == 200
    employee = response.json()
    assert employee["last_name"] == test_employee.last_name
    assert employee["branch_name"] == test_branch.name

    response = await client.get("/api/v1/org/employees")
    assert response.status_code == 200
    assert [e["id"] for e in response.json()] == [test_employee.id]

    response = await client.get("/api/v1/org/employees/999")
    assert response.status_code == 404
    assert response.json()["detail"] == "Employee not found"
    print("test_read_employee passed.")


@pytest.mark.asyncio
async def test_update_employee(client: AsyncClient, test_employee: org_models.Employee):
    print("\n--- Running test_update_employee ---")
    response = await client.put(f"/api/v1/org/employees/{test_employee.id}", json={"email": "new@example.com"})
    assert response.status_code == 200
    assert response.json()["email"] == "new@example.com"
    assert response.json()["name"] == test_employee.name

    response = await client.put(f"/api/v1/org/employees/{test_employee.id}", json={"branch_id": 999})
    assert response.status_code == 404
    assert response.json()["detail"] == "Branch not found"

    response = await client.put("/api/v1/org/employees/999", json={"email": "x@example.com"})
    assert response.status_code == 404
    assert response.json()["detail"] == "Employee not found"
    print("test_update_employee passed.")


@pytest.mark.asyncio
async def test_update_employee_null_fields(
    client: AsyncClient, test_employee: org_models.Employee, test_branch: org_models.Branch
):
    """branch_id나 이름에 null을 보내면 400을 반환하고 직원 정보는 바뀌지 않습니다."""
    print("\n--- Running test_update_employee_null_fields ---")
    employee_id, branch_id = test_employee.id, test_branch.id

    response = await client.put(f"/api/v1/org/employees/{employee_id}", json={"branch_id": None})
    assert response.status_code == 400
    assert response.json()["detail"] == "Employee branch_id may not be null."

    response = await client.put(f"/api/v1/org/employees/{employee_id}", json={"name": None, "email": "n@example.com"})
    assert response.status_code == 400
    assert response.json()["detail"] == "Employee name may not be null."

    response = await client.get(f"/api/v1/org/employees/{employee_id}")
    assert response.status_code == 200
    assert response.json()["branch_id"] == branch_id
    assert response.json()["email"] != "n@example.com"
    print("test_update_employee_null_fields passed.")


@pytest.mark.asyncio
async def test_delete_employee_with_active_loan_conflict(
    client: AsyncClient, test_employee: org_models.Employee, test_device, loan_factory
):
    """활성 대여가 남아 있는 직원은 삭제할 수 없습니다."""
    print("\n--- Running test_delete_employee_with_active_loan_conflict ---")
    await loan_factory(test_employee, test_device)

    response = await client.delete(f"/api/v1/org/employees/{test_employee.id}")
    print(f"Response JSON: {response.json()}")

    assert response.status_code == 409
    assert "active loans" in response.json()["detail"]
    print("test_delete_employee_with_active_loan_conflict passed.")


@pytest.mark.asyncio
async def test_delete_employee_removes_loan_history(
    client: AsyncClient,
    db_session: AsyncSession,
    test_employee: org_models.Employee,
    test_device,
    loan_factory,
):
    """반납 완료된 대여 이력은 직원과 함께 삭제됩니다."""
    print("\n--- Running test_delete_employee_removes_loan_history ---")
    await loan_factory(test_employee, test_device, returned=True)

    response = await client.delete(f"/api/v1/org/employees/{test_employee.id}")
    assert response.status_code == 204

    result = await db_session.execute(
        select(loan_models.Loan).where(loan_models.Loan.employee_id == test_employee.id)
    )
    assert result.scalars().all() == []

    response = await client.get(f"/api/v1/org/employees/{test_employee.id}")
    assert response.status_code == 404
    print("test_delete_employee_removes_loan_history passed.")
