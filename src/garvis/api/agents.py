"""
Agents API Router

Endpoints for agent introspection and request execution.
"""
from datetime import datetime
import logging
from typing import Dict, List

from fastapi import APIRouter, Depends, HTTPException

from ..bot.garvis_bot import APOLOGY_MESSAGE
from ..core.agent_manager import AgentManager
from ..core.agent_request import AgentRequest, RequestMetadata
from ..core.exceptions import AgentError
from .dependencies import get_agent_manager
from .schemas import AgentInfo, AgentRequestCreate, AgentResponseOut, AgentStat

router = APIRouter(prefix="/api/agents", tags=["agents"])
logger = logging.getLogger("garvis.api")


@router.get("", response_model=List[AgentInfo])
def list_agents(manager: AgentManager = Depends(get_agent_manager)) -> List[AgentInfo]:
    """List registered agents in routing order."""
    return [
        AgentInfo(
            name=agent.name,
            description=agent.description,
            capabilities=list(agent.capabilities),
        )
        for agent in manager.get_all_agents()
    ]


@router.get("/stats", response_model=Dict[str, AgentStat])
def get_agent_stats(manager: AgentManager = Depends(get_agent_manager)) -> Dict[str, AgentStat]:
    """Snapshot of in-flight executions per agent."""
    return {name: AgentStat(**stat) for name, stat in manager.get_agent_stats().items()}


@router.post("/requests", response_model=AgentResponseOut)
async def execute_request(
    body: AgentRequestCreate,
    manager: AgentManager = Depends(get_agent_manager),
) -> dict:
    """
    Route a request to the first matching agent.

    No-match and over-capacity outcomes are returned as `status: "error"`
    with HTTP 200. A failure raised by the dispatcher is a 500.
    """
    request = AgentRequest(
        user_id=body.user_id,
        channel_id=body.channel_id,
        content=body.content,
        context=body.context,
        metadata=RequestMetadata(timestamp=datetime.utcnow(), thread_id=body.thread_id),
    )

    try:
        response = await manager.execute_request(request)
    except AgentError as e:
        logger.error(
            "Error processing request",
            extra={"request_id": request.id, "error": str(e)},
        )
        raise HTTPException(status_code=500, detail=APOLOGY_MESSAGE)

    return response.to_dict()
