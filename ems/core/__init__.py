# ems/core/__init__.py

"""
EMS 애플리케이션의 핵심 구성 요소 패키지입니다.

- `config.py`: 애플리케이션 설정 및 환경 변수 관리 (Pydantic Settings).
- `database.py`: 비동기 엔진과 세션 관리 (SQLModel + SQLAlchemy asyncio).
- `crud_base.py`: 모든 도메인 CRUD 클래스가 상속하는 공통 기반 클래스.
- `outcomes.py`: 서비스 계층이 반환하는 성공/실패 결과 타입.
- `dependencies.py`: FastAPI 의존성 주입 함수와 결과 → HTTP 응답 변환.
"""

__title__ = "EMS Core"
__description__ = "Core components for EMS FastAPI application."
__version__ = "0.1.0"
__all__ = []
