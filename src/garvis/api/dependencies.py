"""
FastAPI dependencies
"""
from fastapi import Request

from ..config import Settings
from ..core.agent_manager import AgentManager


def get_agent_manager(request: Request) -> AgentManager:
    """AgentManager owned by the running app"""
    return request.app.state.agent_manager


def get_settings(request: Request) -> Settings:
    """Settings the app was created with"""
    return request.app.state.settings
