# ems/domains/__init__.py

"""
EMS의 비즈니스 도메인 패키지입니다.

- `org`: 지점(Branch)과 직원(Employee).
- `dev`: 제조사(Producer), 장비 유형(DeviceType), 장비(Device).
- `loan`: 대여(Loan) 기록과 조회.
- `models`: 모든 도메인의 테이블 모델을 한 곳에서 임포트합니다.
"""

__all__ = []
