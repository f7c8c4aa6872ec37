# ems/domains/org/__init__.py

"""
FastAPI 애플리케이션의 'org' 도메인 패키지입니다.

'org' 도메인은 조직 정보, 즉 지점(Branch)과 지점에 소속된 직원(Employee)을 관리합니다.
직원 조회 시에는 소속 지점명을 함께 내려주는 비정규화된 읽기 뷰를 사용합니다.

주요 서브모듈:
- `models.py`: branches, employees 테이블에 매핑되는 SQLModel 정의.
- `schemas.py`: 요청 및 응답 유효성 검사를 위한 스키마.
- `crud.py`: 비동기 CRUD 로직과 참조 무결성 검사.
- `routers.py`: API 엔드포인트 정의.
"""

__title__ = "EMS Organization Domain"
__description__ = "Manages branches and employees."
__version__ = "0.1.0"
__all__ = []
