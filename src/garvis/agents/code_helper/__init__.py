"""
CodeHelper Agent

Capabilities:
    - code-review: 코드 리뷰 안내
    - debugging: 디버깅 도움말
    - documentation: 문서화 가이드
    - programming-help: 언어별 도움말
"""

from .code_helper_agent import CodeHelperAgent

__all__ = ["CodeHelperAgent"]
