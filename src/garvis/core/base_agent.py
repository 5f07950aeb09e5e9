"""
BaseAgent 추상 클래스

모든 Garvis 에이전트의 기본 클래스입니다.
"""

from abc import ABC, abstractmethod
from enum import Enum
from typing import Any, Dict, List, Sequence, Tuple
from uuid import uuid4
import logging
import time

from .agent_request import AgentRequest, AgentResponse
from .exceptions import AgentNotInitializedError


class AgentState(Enum):
    """에이전트 상태"""

    IDLE = "idle"
    READY = "ready"
    TERMINATED = "terminated"


class BaseAgent(ABC):
    """
    Garvis 에이전트 기본 클래스

    모든 에이전트는 이 클래스를 상속받아 구현합니다.

    핵심 책임:
    - 초기화 게이트 (초기화 전 실행 거부)
    - 실행 시간 측정 및 실행 횟수 집계
    - 에이전트 내부 오류를 error 응답으로 변환

    Example:
        class EchoAgent(BaseAgent):
            name = "Echo"
            description = "Repeats the request"
            capabilities = ["echo"]
            keywords = ("echo",)

            async def _execute_internal(self, request):
                return request.content

    Attributes:
        name: 에이전트 고유 이름 (레지스트리 키)
        description: 에이전트 설명
        capabilities: 능력 태그 목록 (도움말/상태 표시용, 라우팅에는 사용하지 않음)
        keywords: can_handle 기본 구현이 사용하는 키워드 목록
    """

    name: str = ""
    description: str = ""
    capabilities: Tuple[str, ...] = ()
    keywords: Tuple[str, ...] = ()

    def __init__(self) -> None:
        self.state = AgentState.IDLE
        self.execution_count = 0
        self.logger = logging.getLogger(f"garvis.agent.{self.name}")

    @property
    def is_initialized(self) -> bool:
        return self.state == AgentState.READY

    # ─────────────────────────────────────────────────────────────────
    # Routing
    # ─────────────────────────────────────────────────────────────────

    def can_handle(self, request: AgentRequest) -> bool:
        """
        요청 처리 가능 여부

        소문자로 변환한 요청 내용에 키워드 중 하나라도 포함되면 True.
        부작용이 없어야 하며 예외를 던지지 않아야 합니다.
        """
        return self.has_keywords(request.content, self.keywords)

    # ─────────────────────────────────────────────────────────────────
    # Lifecycle Methods
    # ─────────────────────────────────────────────────────────────────

    async def execute(self, request: AgentRequest) -> AgentResponse:
        """
        요청 실행

        초기화 여부를 확인하고, 실행 시간을 측정하며, 에이전트별 로직의
        실패를 error 상태의 응답으로 변환합니다.

        Args:
            request: 처리할 요청

        Returns:
            AgentResponse: 실행 시간과 에이전트 이름이 담긴 응답

        Raises:
            AgentNotInitializedError: initialize() 이전에 호출된 경우
        """
        if not self.is_initialized:
            raise AgentNotInitializedError(self.name)

        start_time = time.perf_counter()
        self.execution_count += 1

        try:
            content = await self._execute_internal(request)
        except Exception as e:
            self.logger.warning(
                f"Agent logic failed: {e}",
                extra={"request_id": request.id, "agent_name": self.name},
            )
            return AgentResponse.error_response(
                request_id=request.id,
                content=f"Error in {self.name}: {e}",
                agent_used=self.name,
                execution_time=self._elapsed_ms(start_time),
            )

        return AgentResponse.success_response(
            request_id=request.id,
            content=content,
            agent_used=self.name,
            execution_time=self._elapsed_ms(start_time),
        )

    async def initialize(self) -> None:
        """초기화 (멱등). 하위 클래스에서 준비 작업을 추가할 수 있습니다."""
        self.state = AgentState.READY

    async def cleanup(self) -> None:
        """정리 (멱등). 준비 상태 해제 및 실행 횟수 리셋."""
        self.state = AgentState.TERMINATED
        self.execution_count = 0

    # ─────────────────────────────────────────────────────────────────
    # Abstract Methods (구현 필수)
    # ─────────────────────────────────────────────────────────────────

    @abstractmethod
    async def _execute_internal(self, request: AgentRequest) -> str:
        """
        에이전트별 응답 텍스트 생성 (구현 필수)

        여기서 발생한 예외는 execute()가 error 응답으로 변환합니다.
        """
        pass

    # ─────────────────────────────────────────────────────────────────
    # Utility Methods
    # ─────────────────────────────────────────────────────────────────

    @staticmethod
    def _elapsed_ms(start_time: float) -> int:
        return int((time.perf_counter() - start_time) * 1000)

    @staticmethod
    def generate_id() -> str:
        return str(uuid4())

    @staticmethod
    def extract_keywords(content: str) -> List[str]:
        """소문자 단어 중 3글자 이상만 추출"""
        return [word for word in content.lower().split() if len(word) > 2]

    @staticmethod
    def has_keywords(content: str, keywords: Sequence[str]) -> bool:
        content_lower = content.lower()
        return any(keyword in content_lower for keyword in keywords)

    def to_dict(self) -> Dict[str, Any]:
        """에이전트 정보를 딕셔너리로 변환"""
        return {
            "name": self.name,
            "description": self.description,
            "capabilities": list(self.capabilities),
            "state": self.state.value,
            "execution_count": self.execution_count,
        }

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__} name={self.name} state={self.state.value}>"

    def __str__(self) -> str:
        return f"{self.__class__.__name__}({self.name})"
