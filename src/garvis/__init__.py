"""
Garvis - Slack AI Assistant

요청을 키워드 기반으로 전담 에이전트에 라우팅하는 챗 어시스턴트입니다.

Modules:
    core: 핵심 인프라 (BaseAgent, AgentManager, 요청/응답 타입)
    agents: 전담 에이전트 (CodeHelper, TaskManager, InfoRetrieval)
    bot: 메시지 처리 및 Slack 연동
    api: HTTP 엔드포인트
"""

__version__ = "1.0.0"
