"""
에이전트 요청/응답 타입

디스패처와 에이전트 사이에서 주고받는 데이터를 정의합니다.
"""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from types import MappingProxyType
from typing import Any, Dict, List, Mapping, Optional, Tuple
from uuid import uuid4


class ResponseStatus(Enum):
    """응답 상태"""

    SUCCESS = "success"
    ERROR = "error"
    PARTIAL = "partial"


class ActionType(Enum):
    """후속 액션 타입"""

    SPAWN_AGENT = "spawn_agent"
    SCHEDULE_TASK = "schedule_task"
    SEND_DM = "send_dm"
    UPDATE_STATUS = "update_status"


@dataclass(frozen=True)
class RequestMetadata:
    """요청 메타데이터"""

    timestamp: datetime = field(default_factory=datetime.utcnow)
    thread_id: Optional[str] = None
    mentions: Tuple[str, ...] = ()

    def to_dict(self) -> Dict[str, Any]:
        return {
            "timestamp": self.timestamp.isoformat(),
            "threadId": self.thread_id,
            "mentions": list(self.mentions),
        }


@dataclass(frozen=True)
class AgentRequest:
    """
    에이전트 요청

    사용자 메시지마다 호출 계층에서 생성됩니다. 생성 후 변경할 수 없습니다.

    Attributes:
        user_id: 요청한 사용자 ID
        channel_id: 요청이 들어온 채널 ID
        content: 요청 텍스트
        id: 요청 고유 ID (기본: uuid4)
        context: 추가 컨텍스트 (선택사항)
        metadata: 타임스탬프, 스레드 ID, 멘션 목록 (선택사항)

    Example:
        request = AgentRequest(
            user_id="U123",
            channel_id="C456",
            content="add task: Review proposal",
        )
    """

    user_id: str
    channel_id: str
    content: str
    id: str = field(default_factory=lambda: str(uuid4()))
    context: Optional[Mapping[str, Any]] = None
    metadata: Optional[RequestMetadata] = None

    def __post_init__(self) -> None:
        # 호출자의 dict와 분리된 읽기 전용 사본
        if self.context is not None:
            object.__setattr__(self, "context", MappingProxyType(dict(self.context)))

    def to_dict(self) -> Dict[str, Any]:
        """딕셔너리 변환"""
        return {
            "id": self.id,
            "userId": self.user_id,
            "channelId": self.channel_id,
            "content": self.content,
            "context": dict(self.context) if self.context is not None else None,
            "metadata": self.metadata.to_dict() if self.metadata else None,
        }

    def __repr__(self) -> str:
        return f"AgentRequest(id={self.id[:8]}..., user={self.user_id}, channel={self.channel_id})"


@dataclass
class AgentAction:
    """후속 액션 (코어는 선언만 하고 실행하지 않음)"""

    type: ActionType
    payload: Dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        return {"type": self.type.value, "payload": self.payload}


@dataclass
class ResponseMetadata:
    """응답 메타데이터"""

    execution_time: int
    agent_used: str
    attachments: Optional[List[Any]] = None

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {
            "executionTime": self.execution_time,
            "agentUsed": self.agent_used,
        }
        if self.attachments is not None:
            data["attachments"] = self.attachments
        return data


@dataclass
class AgentResponse:
    """
    에이전트 응답

    요청마다 정확히 한 번 생성됩니다.

    Attributes:
        request_id: 원본 요청 ID
        status: 응답 상태 (success, error, partial)
        content: 응답 텍스트
        metadata: 실행 시간, 사용된 에이전트
        follow_up_actions: 후속 액션 목록

    Example:
        response = AgentResponse.success_response(
            request_id=request.id,
            content="Done",
            agent_used="TaskManager",
            execution_time=12,
        )
    """

    request_id: str
    status: ResponseStatus
    content: str
    metadata: Optional[ResponseMetadata] = None
    follow_up_actions: List[AgentAction] = field(default_factory=list)

    @property
    def is_success(self) -> bool:
        return self.status == ResponseStatus.SUCCESS

    @property
    def agent_used(self) -> Optional[str]:
        return self.metadata.agent_used if self.metadata else None

    @property
    def execution_time(self) -> Optional[int]:
        return self.metadata.execution_time if self.metadata else None

    def to_dict(self) -> Dict[str, Any]:
        """딕셔너리 변환"""
        return {
            "requestId": self.request_id,
            "status": self.status.value,
            "content": self.content,
            "metadata": self.metadata.to_dict() if self.metadata else None,
            "followUpActions": [action.to_dict() for action in self.follow_up_actions],
        }

    @classmethod
    def success_response(
        cls,
        request_id: str,
        content: str,
        agent_used: str,
        execution_time: int = 0,
    ) -> "AgentResponse":
        """성공 응답 생성 헬퍼"""
        return cls(
            request_id=request_id,
            status=ResponseStatus.SUCCESS,
            content=content,
            metadata=ResponseMetadata(execution_time=execution_time, agent_used=agent_used),
        )

    @classmethod
    def error_response(
        cls,
        request_id: str,
        content: str,
        agent_used: str,
        execution_time: int = 0,
    ) -> "AgentResponse":
        """실패 응답 생성 헬퍼"""
        return cls(
            request_id=request_id,
            status=ResponseStatus.ERROR,
            content=content,
            metadata=ResponseMetadata(execution_time=execution_time, agent_used=agent_used),
        )

    def __repr__(self) -> str:
        return f"AgentResponse({self.status.value.upper()}, agent={self.agent_used})"
