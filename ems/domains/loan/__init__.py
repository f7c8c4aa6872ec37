# ems/domains/loan/__init__.py

"""
FastAPI 애플리케이션의 'loan' 도메인 패키지입니다.

'loan' 도메인은 직원에게 장비를 대여한 기록을 관리합니다.
대여의 생성/반납/수정/삭제 같은 생명주기 명령은 장비의 대여 가능 여부를 함께 바꾸므로
`ems.services.loan_engine`에서 처리하고, 이 패키지는 테이블 정의와 조회 쿼리,
그리고 HTTP 엔드포인트를 담당합니다.
"""

__title__ = "EMS Loan Domain"
__description__ = "Tracks device loans issued to employees."
__version__ = "0.1.0"
__all__ = []
