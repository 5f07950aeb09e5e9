"""
Application Configuration

Pydantic Settings for environment variable management.
"""
from pathlib import Path
from typing import Dict, List, Optional, Union

from pydantic import ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
import yaml

from .core.agent_config import AgentConfig
from .core.exceptions import ConfigurationError

SLACK_ENV_VARS = {
    "slack_bot_token": "SLACK_BOT_TOKEN",
    "slack_app_token": "SLACK_APP_TOKEN",
    "slack_signing_secret": "SLACK_SIGNING_SECRET",
}


class Settings(BaseSettings):
    """Application settings loaded from environment variables"""

    # Slack
    slack_bot_token: str = ""
    slack_app_token: str = ""
    slack_signing_secret: str = ""

    # App
    app_env: str = "development"
    log_level: str = "info"
    port: int = 3000

    # Agents
    agent_timeout: int = 30000  # ms
    max_concurrent_agents: int = 10
    agents_config_path: Optional[str] = None

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=False,
        extra="ignore",
    )

    @field_validator("port", "agent_timeout", "max_concurrent_agents")
    @classmethod
    def _must_be_positive(cls, value: int) -> int:
        if value <= 0:
            raise ValueError("must be a positive integer")
        return value

    @property
    def is_development(self) -> bool:
        return self.app_env == "development"

    @property
    def is_production(self) -> bool:
        return self.app_env == "production"

    @property
    def agent_timeout_seconds(self) -> float:
        return self.agent_timeout / 1000

    def missing_slack_settings(self) -> List[str]:
        """설정되지 않은 Slack 환경 변수 목록"""
        return [env for field, env in SLACK_ENV_VARS.items() if not getattr(self, field)]

    def require_slack(self) -> None:
        """
        Slack 모드 필수 설정 검증

        Raises:
            ConfigurationError: 필수 환경 변수 누락
        """
        missing = self.missing_slack_settings()
        if missing:
            raise ConfigurationError(
                f"Missing required environment variables: {', '.join(missing)}",
                {"missing_vars": missing},
            )


def load_settings(**overrides) -> Settings:
    """
    설정 로드

    Raises:
        ConfigurationError: 숫자 값이 잘못되었거나 양수가 아닌 경우
    """
    try:
        return Settings(**overrides)
    except ValidationError as e:
        keys = [str(err["loc"][0]).upper() for err in e.errors() if err.get("loc")]
        raise ConfigurationError(
            f"Invalid configuration value for {', '.join(keys)}",
            {"keys": keys},
        ) from e


def load_agent_configs(path: Union[str, Path]) -> Dict[str, AgentConfig]:
    """
    에이전트별 설정 YAML 로드

    형식:
        agents:
          TaskManager:
            enabled: true
            max_concurrent_executions: 5
            timeout: 10000

    Raises:
        ConfigurationError: 파일이 없거나 YAML이 잘못된 경우,
            에이전트 항목의 값이 잘못된 경우 (에이전트 이름과 키 포함)
    """
    config_path = Path(path)
    if not config_path.exists():
        raise ConfigurationError(
            f"Agent config file not found: {config_path}", {"path": str(config_path)}
        )

    try:
        with open(config_path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
    except yaml.YAMLError as e:
        raise ConfigurationError(f"Invalid YAML: {e}", {"path": str(config_path)}) from e

    agents = data.get("agents") or {}
    if not isinstance(agents, dict):
        raise ConfigurationError(
            "'agents' must be a mapping of agent name to settings",
            {"path": str(config_path)},
        )

    return {name: AgentConfig.from_dict(name, values) for name, values in agents.items()}
