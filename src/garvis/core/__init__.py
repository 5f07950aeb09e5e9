"""
Core Infrastructure for Garvis

이 모듈은 에이전트 시스템의 핵심 인프라를 제공합니다.

Classes:
    BaseAgent: 모든 에이전트의 추상 기본 클래스
    AgentManager: 에이전트 레지스트리 & 디스패처
    AgentRequest / AgentResponse: 요청/응답 타입
    AgentConfig: 에이전트별 설정 오버라이드
"""

from .exceptions import (
    GarvisError,
    AgentError,
    AgentNotInitializedError,
    AgentExecutionError,
    AgentInitializationError,
    SlackError,
    ConfigurationError,
)
from .agent_request import (
    ActionType,
    AgentAction,
    AgentRequest,
    AgentResponse,
    RequestMetadata,
    ResponseMetadata,
    ResponseStatus,
)
from .agent_config import AgentConfig
from .base_agent import BaseAgent, AgentState
from .agent_manager import AgentManager

__all__ = [
    # Exceptions
    "GarvisError",
    "AgentError",
    "AgentNotInitializedError",
    "AgentExecutionError",
    "AgentInitializationError",
    "SlackError",
    "ConfigurationError",
    # Request & Response
    "ActionType",
    "AgentAction",
    "AgentRequest",
    "AgentResponse",
    "RequestMetadata",
    "ResponseMetadata",
    "ResponseStatus",
    # Config
    "AgentConfig",
    # Base
    "BaseAgent",
    "AgentState",
    # Dispatch
    "AgentManager",
]
