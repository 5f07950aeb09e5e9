"""
에이전트별 실행 설정
"""

from dataclasses import dataclass
from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from .exceptions import ConfigurationError


class AgentConfigEntry(BaseModel):
    """YAML 항목 스키마 (문자열 숫자/불리언 불허)"""

    model_config = ConfigDict(strict=True, extra="forbid")

    enabled: bool = True
    max_concurrent_executions: Optional[int] = Field(default=None, gt=0)
    timeout: Optional[int] = Field(default=None, gt=0)  # ms


@dataclass
class AgentConfig:
    """
    에이전트별 설정 오버라이드

    Attributes:
        name: 대상 에이전트 이름
        enabled: False면 팩토리가 등록하지 않음
        max_concurrent_executions: 동시 실행 상한 (None이면 매니저 기본값)
        timeout: 실행 제한 시간 ms (None이면 매니저 기본값)
    """

    name: str
    enabled: bool = True
    max_concurrent_executions: Optional[int] = None
    timeout: Optional[int] = None

    @classmethod
    def from_dict(cls, name: str, data: Optional[Dict[str, Any]]) -> "AgentConfig":
        """
        YAML 항목에서 생성

        Raises:
            ConfigurationError: 항목이 매핑이 아니거나 값의 타입/범위가 잘못된 경우
        """
        if data is None:
            data = {}
        if not isinstance(data, dict):
            raise ConfigurationError(
                f"Invalid config for agent {name}: entry must be a mapping",
                {"agent_name": name},
            )

        try:
            entry = AgentConfigEntry.model_validate(data)
        except ValidationError as e:
            keys = [str(err["loc"][0]) for err in e.errors() if err.get("loc")]
            raise ConfigurationError(
                f"Invalid config for agent {name}: {', '.join(keys)}",
                {"agent_name": name, "keys": keys},
            ) from e

        return cls(name=name, **entry.model_dump())

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "enabled": self.enabled,
            "max_concurrent_executions": self.max_concurrent_executions,
            "timeout": self.timeout,
        }
