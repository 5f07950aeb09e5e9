"""
에이전트 레지스트리 & 디스패처

모든 에이전트를 등록하고, 요청마다 처리할 에이전트를 선택해 실행합니다.
"""

from typing import Dict, Iterator, List, Mapping, Optional
import asyncio
import logging

from .agent_config import AgentConfig
from .agent_request import AgentRequest, AgentResponse
from .base_agent import BaseAgent
from .exceptions import AgentExecutionError, AgentInitializationError

NO_AGENT_MESSAGE = (
    "No agent found to handle this request. Please try rephrasing your request "
    "or use /garvis help to see available capabilities."
)


class AgentManager:
    """
    에이전트 레지스트리 & 디스패처

    에이전트 선택은 등록 순서상 첫 번째로 can_handle()이 True인 에이전트입니다.
    점수 기반 우선순위는 없습니다.

    사용법:
        manager = AgentManager(max_concurrent_agents=10)
        manager.register_agent(TaskManagerAgent())
        await manager.initialize_all_agents()

        response = await manager.execute_request(request)

        await manager.cleanup_all_agents()

    Attributes:
        max_concurrent_agents: 에이전트별 기본 동시 실행 상한
        execution_timeout: 실행 제한 시간 초 (None이면 적용하지 않음)
    """

    def __init__(
        self,
        max_concurrent_agents: int = 10,
        execution_timeout: Optional[float] = None,
        agent_configs: Optional[Mapping[str, AgentConfig]] = None,
        logger: Optional[logging.Logger] = None,
    ):
        self.max_concurrent_agents = max_concurrent_agents
        self.execution_timeout = execution_timeout
        self.logger = logger or logging.getLogger("garvis.agent_manager")

        self._agents: Dict[str, BaseAgent] = {}
        self._execution_counts: Dict[str, int] = {}
        self._agent_configs: Dict[str, AgentConfig] = dict(agent_configs or {})

    # ─────────────────────────────────────────────────────────────────
    # Registry
    # ─────────────────────────────────────────────────────────────────

    def register_agent(self, agent: BaseAgent) -> None:
        """
        에이전트 등록

        같은 이름이 이미 있으면 덮어쓰고 실행 카운트를 0으로 리셋합니다.
        """
        self.logger.info(
            f"Registering agent: {agent.name}",
            extra={
                "agent_name": agent.name,
                "description": agent.description,
                "capabilities": list(agent.capabilities),
            },
        )

        self._agents[agent.name] = agent
        self._execution_counts[agent.name] = 0

    def get_agent(self, name: str) -> Optional[BaseAgent]:
        return self._agents.get(name)

    def get_all_agents(self) -> List[BaseAgent]:
        """등록된 모든 에이전트 (등록 순서)"""
        return list(self._agents.values())

    def find_agent_for_request(self, request: AgentRequest) -> Optional[BaseAgent]:
        """
        요청을 처리할 에이전트 검색

        Returns:
            등록 순서상 첫 번째로 매치된 에이전트, 없으면 None
        """
        for agent in self._agents.values():
            if agent.can_handle(request):
                return agent
        return None

    # ─────────────────────────────────────────────────────────────────
    # Dispatch
    # ─────────────────────────────────────────────────────────────────

    def _capacity_for(self, name: str) -> int:
        agent_config = self._agent_configs.get(name)
        if agent_config and agent_config.max_concurrent_executions is not None:
            return agent_config.max_concurrent_executions
        return self.max_concurrent_agents

    def _timeout_for(self, name: str) -> Optional[float]:
        agent_config = self._agent_configs.get(name)
        if agent_config and agent_config.timeout is not None:
            return agent_config.timeout / 1000
        return self.execution_timeout

    async def execute_request(self, request: AgentRequest) -> AgentResponse:
        """
        요청 실행

        처리 가능한 에이전트가 없거나 동시 실행 상한에 도달한 경우
        예외 대신 error 상태의 응답을 반환합니다.

        Args:
            request: 처리할 요청

        Returns:
            AgentResponse

        Raises:
            AgentExecutionError: agent.execute()에서 예외가 전파된 경우
        """
        agent = self.find_agent_for_request(request)

        if agent is None:
            self.logger.info("No agent matched request", extra={"request_id": request.id})
            return AgentResponse.error_response(
                request_id=request.id,
                content=NO_AGENT_MESSAGE,
                agent_used="none",
            )

        current_executions = self._execution_counts.get(agent.name, 0)
        if current_executions >= self._capacity_for(agent.name):
            self.logger.warning(
                f"Agent at maximum capacity: {agent.name}",
                extra={"request_id": request.id, "agent_name": agent.name},
            )
            return AgentResponse.error_response(
                request_id=request.id,
                content=(
                    f"Agent {agent.name} is currently at maximum capacity. "
                    "Please try again later."
                ),
                agent_used=agent.name,
            )

        self._execution_counts[agent.name] = current_executions + 1

        try:
            self.logger.info(
                f"Executing request with agent: {agent.name}",
                extra={
                    "request_id": request.id,
                    "agent_name": agent.name,
                    "user_id": request.user_id,
                },
            )

            timeout = self._timeout_for(agent.name)
            if timeout is None:
                response = await agent.execute(request)
            else:
                try:
                    response = await asyncio.wait_for(agent.execute(request), timeout=timeout)
                except asyncio.TimeoutError:
                    self.logger.warning(
                        f"Agent timed out: {agent.name}",
                        extra={"request_id": request.id, "agent_name": agent.name},
                    )
                    return AgentResponse.error_response(
                        request_id=request.id,
                        content=(
                            f"Agent {agent.name} timed out after {timeout:g}s. "
                            "Please try again later."
                        ),
                        agent_used=agent.name,
                        execution_time=int(timeout * 1000),
                    )

            self.logger.info(
                "Request executed successfully",
                extra={
                    "request_id": request.id,
                    "agent_name": agent.name,
                    "execution_time": response.execution_time,
                    "status": response.status.value,
                },
            )
            return response

        except Exception as e:
            self.logger.error(
                "Agent execution failed",
                extra={"request_id": request.id, "agent_name": agent.name, "error": str(e)},
            )
            raise AgentExecutionError(
                f"Agent execution failed: {e}",
                agent.name,
                request_id=request.id,
                original_error=e,
            ) from e

        finally:
            new_count = self._execution_counts.get(agent.name, 1) - 1
            self._execution_counts[agent.name] = max(0, new_count)

    # ─────────────────────────────────────────────────────────────────
    # Lifecycle
    # ─────────────────────────────────────────────────────────────────

    async def initialize_all_agents(self) -> None:
        """
        모든 에이전트 동시 초기화

        Raises:
            AgentInitializationError: 하나라도 초기화에 실패한 경우
        """
        self.logger.info("Initializing all agents")

        async def _initialize(agent: BaseAgent) -> None:
            try:
                await agent.initialize()
                self.logger.info(f"Agent initialized: {agent.name}")
            except Exception as e:
                self.logger.error(
                    f"Failed to initialize agent: {agent.name}", extra={"error": str(e)}
                )
                raise AgentInitializationError(str(e), agent.name) from e

        await asyncio.gather(*(_initialize(agent) for agent in self._agents.values()))
        self.logger.info("All agents initialized successfully")

    async def cleanup_all_agents(self) -> None:
        """
        모든 에이전트 동시 정리

        개별 에이전트의 정리 실패는 로그만 남기고 나머지 정리를 계속합니다.
        """
        self.logger.info("Cleaning up all agents")

        async def _cleanup(agent: BaseAgent) -> None:
            try:
                await agent.cleanup()
                self.logger.info(f"Agent cleaned up: {agent.name}")
            except Exception as e:
                self.logger.error(
                    f"Failed to cleanup agent: {agent.name}", extra={"error": str(e)}
                )

        await asyncio.gather(*(_cleanup(agent) for agent in self._agents.values()))
        self._execution_counts.clear()
        self.logger.info("All agents cleaned up")

    # ─────────────────────────────────────────────────────────────────
    # Introspection
    # ─────────────────────────────────────────────────────────────────

    def get_agent_stats(self) -> Dict[str, Dict]:
        """에이전트별 현재 실행 수와 능력 목록 (스냅샷)"""
        return {
            name: {
                "executions": self._execution_counts.get(name, 0),
                "capabilities": list(agent.capabilities),
            }
            for name, agent in self._agents.items()
        }

    def __contains__(self, name: str) -> bool:
        return name in self._agents

    def __len__(self) -> int:
        return len(self._agents)

    def __iter__(self) -> Iterator[BaseAgent]:
        return iter(list(self._agents.values()))

    def __repr__(self) -> str:
        return f"AgentManager(agents={len(self._agents)}, max_concurrent={self.max_concurrent_agents})"
