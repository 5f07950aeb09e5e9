"""
Health API Router
"""
from datetime import datetime

from fastapi import APIRouter, Depends

from .. import __version__
from ..config import Settings
from ..core.agent_manager import AgentManager
from .dependencies import get_agent_manager, get_settings
from .schemas import HealthResponse

router = APIRouter(prefix="/api/health", tags=["health"])


@router.get("", response_model=HealthResponse)
def check_health(
    manager: AgentManager = Depends(get_agent_manager),
    settings: Settings = Depends(get_settings),
) -> HealthResponse:
    """
    Service health check.

    Healthy when every registered agent is initialized.
    """
    agents = manager.get_all_agents()
    ready = all(agent.is_initialized for agent in agents)

    return HealthResponse(
        status="healthy" if ready else "degraded",
        timestamp=datetime.now(),
        environment=settings.app_env,
        agent_count=len(agents),
        version=__version__,
    )
