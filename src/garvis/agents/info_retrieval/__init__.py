"""
InfoRetrieval Agent

Capabilities:
    - search: 정보 검색
    - question-answering: 질문 응답
    - definitions: 용어 정의
    - explanations: 개념 설명
"""

from .info_retrieval_agent import InfoRetrievalAgent

__all__ = ["InfoRetrievalAgent"]
