# ems/__init__.py

"""
EMS(Equipment Management System) FastAPI 애플리케이션의 메인 패키지입니다.

이 패키지는 지점/직원, 장비(제조사, 장비 유형, 개별 장비), 그리고 직원에게
장비를 대여하는 대여(Loan) 트랜잭션을 관리하는 백엔드 API를 포함합니다.

- `core`: 설정, 데이터베이스 연결, 공통 CRUD 및 결과(Outcome) 타입.
- `domains`: 비즈니스 도메인별 모델/스키마/CRUD/라우터 (org, dev, loan).
- `services`: 여러 도메인에 걸친 대여 생명주기 로직 (Loan Engine).
"""

APP_NAME = "EMS FastAPI API"
APP_VERSION = "0.1.0"
API_PREFIX = "/api/v1"  # API 라우트의 공통 접두사 (main.py에서 적용)

__version__ = APP_VERSION
__title__ = APP_NAME
__description__ = "Equipment Management System (EMS) API backend."
__all__ = []
