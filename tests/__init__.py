# tests/__init__.py

"""
EMS FastAPI 애플리케이션의 테스트 스위트 패키지입니다.

주요 하위 디렉토리:
- `core/`: 결과(Outcome) 타입, 커밋 헬퍼, 설정 등 공통 모듈 테스트.
- `domains/`: 도메인별(org, dev, loan) API 엔드포인트 통합 테스트.
- `services/`: 대여 엔진(LoanEngine)을 직접 호출하는 테스트.
- `conftest.py`: 테스트용 인메모리 DB, 클라이언트, 데이터 팩토리 픽스처.
"""

__title__ = "EMS API Tests"
__description__ = "Test suite for EMS FastAPI application."
__version__ = "0.1.0"
__all__ = []
