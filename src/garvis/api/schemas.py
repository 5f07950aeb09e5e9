"""
API request/response schemas
"""
from datetime import datetime
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field


class HealthResponse(BaseModel):
    """Health check response"""
    status: str
    timestamp: datetime
    environment: str
    agent_count: int
    version: str


class AgentInfo(BaseModel):
    """Registered agent summary"""
    name: str
    description: str
    capabilities: List[str]


class AgentStat(BaseModel):
    """Per-agent in-flight executions"""
    executions: int
    capabilities: List[str]


class AgentRequestCreate(BaseModel):
    """Body for POST /api/agents/requests"""
    user_id: str = Field(..., min_length=1)
    channel_id: str = Field(..., min_length=1)
    content: str = Field(..., min_length=1)
    context: Optional[Dict[str, Any]] = None
    thread_id: Optional[str] = None


class ResponseMetadataOut(BaseModel):
    executionTime: int
    agentUsed: str
    attachments: Optional[List[Any]] = None


class AgentActionOut(BaseModel):
    type: str
    payload: Dict[str, Any]


class AgentResponseOut(BaseModel):
    """Serialized AgentResponse"""
    requestId: str
    status: str
    content: str
    metadata: Optional[ResponseMetadataOut] = None
    followUpActions: List[AgentActionOut] = []
