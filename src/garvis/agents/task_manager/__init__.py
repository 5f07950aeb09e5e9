"""
TaskManager Agent

Capabilities:
    - task-creation: 할 일 생성
    - task-management: 완료/삭제 처리
    - reminders: 리마인더
    - todo-lists: 할 일 목록 조회
"""

from .task_manager_agent import Task, TaskManagerAgent

__all__ = ["Task", "TaskManagerAgent"]
