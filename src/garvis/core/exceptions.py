"""
Garvis 커스텀 예외

모든 Garvis 관련 예외는 GarvisError를 상속받습니다.
"""

from typing import Any, Dict, Optional


class GarvisError(Exception):
    """Garvis 기본 예외"""

    def __init__(
        self,
        message: str,
        code: str = "GARVIS_ERROR",
        context: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.code = code
        self.context = context or {}
        super().__init__(self.message)

    def to_dict(self) -> Dict[str, Any]:
        """딕셔너리 변환"""
        return {
            "error": type(self).__name__,
            "code": self.code,
            "message": self.message,
            "context": self.context,
        }


class AgentError(GarvisError):
    """
    에이전트 오류

    Attributes:
        agent_name: 오류가 발생한 에이전트 이름
    """

    def __init__(
        self,
        message: str,
        agent_name: str,
        context: Optional[Dict[str, Any]] = None,
    ):
        self.agent_name = agent_name
        super().__init__(message, "AGENT_ERROR", {**(context or {}), "agent_name": agent_name})

    def __str__(self) -> str:
        return f"[{self.agent_name}] {self.message}"


class AgentNotInitializedError(AgentError):
    """
    초기화되지 않은 에이전트 실행 시도

    initialize() 이전에 execute()가 호출되었을 때 발생합니다.
    호출 순서 버그를 의미합니다.
    """

    def __init__(self, agent_name: str):
        super().__init__("Agent not initialized", agent_name)


class AgentExecutionError(AgentError):
    """
    에이전트 실행 오류

    execute() 경계를 넘어 전파된 예상치 못한 오류입니다.

    Attributes:
        request_id: 실패한 요청 ID
        original_error: 원본 예외 (있는 경우)
    """

    def __init__(
        self,
        message: str,
        agent_name: str,
        request_id: Optional[str] = None,
        original_error: Optional[BaseException] = None,
    ):
        self.request_id = request_id
        self.original_error = original_error
        context = {"request_id": request_id} if request_id else None
        super().__init__(message, agent_name, context)


class AgentInitializationError(AgentError):
    """에이전트 초기화 실패"""

    def __init__(self, message: str, agent_name: str):
        super().__init__(f"Failed to initialize agent: {message}", agent_name)


class SlackError(GarvisError):
    """
    Slack 연동 오류

    Attributes:
        slack_error_code: Slack API 에러 코드 (있는 경우)
    """

    def __init__(
        self,
        message: str,
        slack_error_code: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        self.slack_error_code = slack_error_code
        super().__init__(
            message,
            "SLACK_ERROR",
            {**(context or {}), "slack_error_code": slack_error_code},
        )


class ConfigurationError(GarvisError):
    """설정 누락 또는 잘못된 설정"""

    def __init__(self, message: str, context: Optional[Dict[str, Any]] = None):
        super().__init__(message, "CONFIG_ERROR", context)
