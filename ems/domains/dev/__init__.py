# ems/domains/dev/__init__.py

"""
FastAPI 애플리케이션의 'dev' 도메인 패키지입니다.

'dev' 도메인은 장비 제조사(Producer), 장비 유형(DeviceType), 그리고 개별 장비(Device)를
관리합니다. 장비는 대소문자를 구분하지 않는 고유 시리얼 번호와 대여 가능 여부(available)
플래그를 가지며, 조회 시 제조사명과 장비 유형명을 함께 내려줍니다.

주요 서브모듈:
- `models.py`: producers, device_types, devices 테이블의 SQLModel 정의.
- `schemas.py`: 요청 및 응답 유효성 검사를 위한 스키마.
- `crud.py`: 이름/시리얼 번호 중복 검사를 포함한 비동기 CRUD 로직.
- `routers.py`: API 엔드포인트 정의.
"""

__title__ = "EMS Device Domain"
__description__ = "Manages producers, device types, and devices."
__version__ = "0.1.0"
__all__ = []
