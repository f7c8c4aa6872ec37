# tests/domains/__init__.py

"""
도메인별 API 엔드포인트 통합 테스트 패키지입니다.

- `test_org.py`: 'org' 도메인 (지점 및 직원 관리).
- `test_dev.py`: 'dev' 도메인 (제조사, 장비 유형, 장비 관리).
- `test_loan.py`: 'loan' 도메인 (장비 대여 관리).
"""

__title__ = "EMS Domain Tests"
__description__ = "Categorized tests for each business domain in EMS FastAPI application."
__version__ = "0.1.0"
__all__ = []
