"""
Pytest Configuration and Fixtures

테스트용 에이전트와 요청 팩토리를 제공합니다.
"""
import asyncio
from typing import Callable

import pytest

from garvis.config import Settings
from garvis.core.agent_manager import AgentManager
from garvis.core.agent_request import AgentRequest, AgentResponse
from garvis.core.base_agent import BaseAgent


class SampleAgent(BaseAgent):
    """'test'가 포함된 요청을 처리하는 에이전트"""

    name = "Test"
    description = "Test agent for unit tests"
    capabilities = ("testing",)

    def can_handle(self, request: AgentRequest) -> bool:
        return "test" in request.content

    async def _execute_internal(self, request: AgentRequest) -> str:
        return f"Test response for: {request.content}"


class KeywordAgent(BaseAgent):
    """이름과 키워드를 지정할 수 있는 에이전트"""

    def __init__(self, name: str, keywords=(), capabilities=("generic",)):
        self.name = name
        self.description = f"{name} agent"
        self.keywords = tuple(keywords)
        self.capabilities = tuple(capabilities)
        super().__init__()

    async def _execute_internal(self, request: AgentRequest) -> str:
        return f"{self.name} handled: {request.content}"


class FailingAgent(BaseAgent):
    """에이전트 로직이 항상 실패"""

    name = "Failing"
    description = "Always fails"
    capabilities = ("failing",)
    keywords = ("fail",)

    async def _execute_internal(self, request: AgentRequest) -> str:
        raise ValueError("something broke")


class BrokenAgent(BaseAgent):
    """execute() 경계를 넘어 예외를 던지는 계약 위반 에이전트"""

    name = "Broken"
    description = "Violates the execute contract"
    capabilities = ("broken",)
    keywords = ("broken",)

    async def execute(self, request: AgentRequest) -> AgentResponse:
        raise RuntimeError("unexpected fault")

    async def _execute_internal(self, request: AgentRequest) -> str:
        return ""


class BlockingAgent(BaseAgent):
    """release 이벤트가 설정될 때까지 대기"""

    name = "Blocking"
    description = "Waits until released"
    capabilities = ("blocking",)
    keywords = ("block",)

    def __init__(self):
        super().__init__()
        self.started = asyncio.Event()
        self.release = asyncio.Event()

    async def _execute_internal(self, request: AgentRequest) -> str:
        self.started.set()
        await self.release.wait()
        return "released"


class InitFailingAgent(BaseAgent):
    """초기화 실패"""

    name = "InitFailing"
    description = "Fails to initialize"
    keywords = ("never",)

    async def initialize(self) -> None:
        raise RuntimeError("missing resource")

    async def _execute_internal(self, request: AgentRequest) -> str:
        return ""


class CleanupFailingAgent(BaseAgent):
    """정리 실패"""

    name = "CleanupFailing"
    description = "Fails to clean up"
    keywords = ("never",)

    async def cleanup(self) -> None:
        raise RuntimeError("teardown failed")

    async def _execute_internal(self, request: AgentRequest) -> str:
        return ""


@pytest.fixture
def make_request() -> Callable[..., AgentRequest]:
    """AgentRequest 팩토리"""

    def _make(content: str, user_id: str = "user1", channel_id: str = "channel1", **kwargs):
        return AgentRequest(user_id=user_id, channel_id=channel_id, content=content, **kwargs)

    return _make


@pytest.fixture
def manager() -> AgentManager:
    """동시 실행 상한 5의 AgentManager"""
    return AgentManager(max_concurrent_agents=5)


@pytest.fixture
def settings() -> Settings:
    """환경 변수와 .env를 무시한 기본 설정"""
    return Settings(_env_file=None, app_env="test")


@pytest.fixture
def agent_classes():
    """테스트용 에이전트 클래스 모음"""
    return {
        "sample": SampleAgent,
        "keyword": KeywordAgent,
        "failing": FailingAgent,
        "broken": BrokenAgent,
        "blocking": BlockingAgent,
        "init_failing": InitFailingAgent,
        "cleanup_failing": CleanupFailingAgent,
    }
