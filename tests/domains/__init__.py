# tests/domains/__init__.py

"""
FastAPI 애플리케이션의 도메인별 테스트 스위트 패키지입니다.

- `test_prj_n.py`: 'prj' 도메인 (프로젝트 및 체크리스트)에 대한 테스트.
- `test_ven_n.py`: 'ven' 도메인 (서비스 공급업체 관리)에 대한 테스트.
"""

__all__ = []
