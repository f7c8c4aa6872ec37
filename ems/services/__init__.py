# ems/services/__init__.py

"""
FastAPI 애플리케이션의 서비스 계층 패키지입니다.

각 도메인의 `crud.py`가 하나의 테이블 군을 다루는 반면, `services` 계층은
여러 도메인에 걸쳐 상태를 함께 바꿔야 하는 작업을 담당합니다.

- `inventory.py`: 대여 엔진이 장비/직원 도메인에 접근할 때 사용하는 좁은 인터페이스.
- `loan_engine.py`: 대여 발행, 반납, 수정, 삭제와 장비 대여 가능 여부를 함께 관리하는 엔진.
"""

__title__ = "EMS Services"
__description__ = "Cross-domain services (loan lifecycle) for the EMS FastAPI application."
__version__ = "0.1.0"
__all__ = []
