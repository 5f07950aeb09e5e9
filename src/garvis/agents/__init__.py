"""
Garvis 전담 에이전트

Agents:
    InfoRetrievalAgent: 질문 응답 및 정보 안내
    TaskManagerAgent: 사용자별 할 일 관리
    CodeHelperAgent: 코드 리뷰, 디버깅, 프로그래밍 도움말
"""

from .info_retrieval import InfoRetrievalAgent
from .task_manager import TaskManagerAgent, Task
from .code_helper import CodeHelperAgent

__all__ = ["InfoRetrievalAgent", "TaskManagerAgent", "Task", "CodeHelperAgent"]
