"""
factory - Garvis 구성 루트

AgentManager 생성과 기본 에이전트 등록을 담당합니다.
Slack 봇과 HTTP 앱 모두 이 팩토리를 통해 매니저를 얻습니다.

Usage:
    settings = load_settings()
    manager = build_agent_manager(settings)
    await manager.initialize_all_agents()
"""

import logging
from typing import Callable, Dict, List, Optional

from .agents import CodeHelperAgent, InfoRetrievalAgent, TaskManagerAgent
from .config import Settings, load_agent_configs
from .core.agent_config import AgentConfig
from .core.agent_manager import AgentManager
from .core.base_agent import BaseAgent

logger = logging.getLogger("garvis.factory")

# 등록 순서가 곧 라우팅 우선순위
DEFAULT_AGENT_FACTORIES: List[Callable[[], BaseAgent]] = [
    InfoRetrievalAgent,
    TaskManagerAgent,
    CodeHelperAgent,
]


def build_agent_manager(
    settings: Settings,
    agent_factories: Optional[List[Callable[[], BaseAgent]]] = None,
) -> AgentManager:
    """
    AgentManager 생성 및 에이전트 등록

    Args:
        settings: 애플리케이션 설정
        agent_factories: 에이전트 생성자 목록 (기본: InfoRetrieval, TaskManager, CodeHelper)

    Returns:
        에이전트가 등록된 AgentManager (초기화 전)

    Raises:
        ConfigurationError: 에이전트 설정 파일을 읽을 수 없는 경우
    """
    agent_configs: Dict[str, AgentConfig] = {}
    if settings.agents_config_path:
        agent_configs = load_agent_configs(settings.agents_config_path)

    manager = AgentManager(
        max_concurrent_agents=settings.max_concurrent_agents,
        execution_timeout=settings.agent_timeout_seconds,
        agent_configs=agent_configs,
    )

    for factory in agent_factories or DEFAULT_AGENT_FACTORIES:
        agent = factory()
        agent_config = agent_configs.get(agent.name)
        if agent_config is not None and not agent_config.enabled:
            logger.info(f"Skipping disabled agent: {agent.name}")
            continue
        manager.register_agent(agent)

    logger.info("Agents registered successfully", extra={"agent_count": len(manager)})
    return manager
