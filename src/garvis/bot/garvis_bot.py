"""
GarvisBot - 메시지 처리

전송 계층(Slack, HTTP 등)에서 받은 텍스트를 AgentRequest로 만들어
AgentManager에 전달하고, 응답을 사용자에게 보낼 텍스트로 변환합니다.
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Optional, Protocol
import logging
import re

from ..config import Settings
from ..core.agent_manager import AgentManager
from ..core.agent_request import AgentRequest, RequestMetadata
from ..core.exceptions import SlackError

MENTION_PATTERN = re.compile(r"<@[UW][A-Z0-9]+>")

EMPTY_MESSAGE = "Please provide a message for me to help with."
GREETING_MESSAGE = "Hi! How can I help you today?"
APOLOGY_MESSAGE = "I encountered an error processing your request. Please try again later."


class Transport(Protocol):
    """메시징 플랫폼 전송 계층"""

    async def start(self) -> None: ...

    async def stop(self) -> None: ...


@dataclass
class BotReply:
    """사용자에게 보낼 응답"""

    text: str
    thread_ts: Optional[str] = None


class GarvisBot:
    """
    전송 계층과 무관한 메시지 처리기

    사용법:
        bot = GarvisBot(settings, manager)
        bot.transport = SlackTransport(settings, bot)
        await bot.start()

        reply = await bot.handle_message("<@U123> list tasks", "U456", "C789")

        await bot.stop()
    """

    def __init__(
        self,
        settings: Settings,
        agent_manager: AgentManager,
        transport: Optional[Transport] = None,
    ):
        self.settings = settings
        self.agent_manager = agent_manager
        self.transport = transport
        self.logger = logging.getLogger("garvis.bot")
        self._started = False

    @property
    def is_running(self) -> bool:
        return self._started

    @staticmethod
    def clean_text(text: str) -> str:
        """Slack 사용자 멘션 제거"""
        return MENTION_PATTERN.sub("", text or "").strip()

    # ─────────────────────────────────────────────────────────────────
    # Message Handling
    # ─────────────────────────────────────────────────────────────────

    async def handle_message(
        self,
        text: str,
        user_id: str,
        channel_id: str,
        thread_ts: Optional[str] = None,
        is_slash_command: bool = False,
    ) -> BotReply:
        """
        사용자 메시지 처리

        Returns:
            BotReply: 전송 계층이 그대로 보낼 응답. 예외를 던지지 않습니다.
        """
        if not text or not text.strip():
            return BotReply(EMPTY_MESSAGE)

        clean_text = self.clean_text(text)
        if not clean_text:
            return BotReply(GREETING_MESSAGE)

        reply_thread = thread_ts if not is_slash_command else None

        command = clean_text.lower()
        if command == "help":
            return BotReply(self.generate_help_text(), reply_thread)
        if command == "status":
            return BotReply(self.generate_status_text(), reply_thread)

        request = AgentRequest(
            user_id=user_id,
            channel_id=channel_id,
            content=clean_text,
            metadata=RequestMetadata(timestamp=datetime.utcnow(), thread_id=thread_ts),
        )

        self.logger.info(
            "Processing user request",
            extra={
                "request_id": request.id,
                "user_id": user_id,
                "channel_id": channel_id,
                "content_length": len(clean_text),
                "is_slash_command": is_slash_command,
            },
        )

        try:
            response = await self.agent_manager.execute_request(request)
        except Exception as e:
            self.logger.error(
                "Error processing request",
                extra={"request_id": request.id, "error": str(e)},
            )
            return BotReply(APOLOGY_MESSAGE, reply_thread)

        response_text = response.content
        if response.is_success and response.metadata:
            execution_time = response.metadata.execution_time
            agent_used = response.metadata.agent_used
            if agent_used:
                response_text += f"\n\n_Processed by {agent_used} in {execution_time}ms_"

        self.logger.info(
            "Response prepared",
            extra={
                "request_id": request.id,
                "status": response.status.value,
                "agent_used": response.agent_used,
            },
        )
        return BotReply(response_text, reply_thread)

    # ─────────────────────────────────────────────────────────────────
    # Help & Status
    # ─────────────────────────────────────────────────────────────────

    def generate_help_text(self) -> str:
        lines = [
            "*Garvis AI Assistant* 🤖",
            "",
            "I can help you with various tasks using specialized agents:",
            "",
        ]
        for agent in self.agent_manager.get_all_agents():
            lines.append(f"*{agent.name}*")
            lines.append(agent.description)
            lines.append(f"Capabilities: {', '.join(agent.capabilities)}")
            lines.append("")

        lines.extend(
            [
                "*How to use:*",
                "• Mention me: @garvis <your request>",
                "• Direct message: Just send me a message",
                "• Slash command: /garvis <your request>",
                "",
                "*Special commands:*",
                "• help - Show this help message",
                "• status - Show system status",
            ]
        )
        return "\n".join(lines)

    def generate_status_text(self) -> str:
        stats = self.agent_manager.get_agent_stats()
        lines = [
            "*Garvis System Status* 📊",
            "",
            f"Environment: {self.settings.app_env}",
            f"Active Agents: {len(stats)}",
            "",
            "*Agent Status:*",
        ]
        for name, stat in stats.items():
            lines.append(f"• {name}: {stat['executions']} executions")
        lines.append("")
        lines.append("All systems operational! 🟢")
        return "\n".join(lines)

    # ─────────────────────────────────────────────────────────────────
    # Lifecycle
    # ─────────────────────────────────────────────────────────────────

    async def start(self) -> None:
        """
        에이전트 초기화 후 전송 계층 시작

        Raises:
            SlackError: 초기화 또는 전송 계층 시작 실패
        """
        if self._started:
            self.logger.warning("Bot is already started")
            return

        try:
            await self.agent_manager.initialize_all_agents()
        except Exception as e:
            self.logger.error("Failed to start bot", extra={"error": str(e)})
            raise SlackError(f"Failed to start bot: {e}") from e

        try:
            if self.transport is not None:
                await self.transport.start()
        except Exception as e:
            self.logger.error("Failed to start transport", extra={"error": str(e)})
            # 이미 초기화된 에이전트 정리
            await self.agent_manager.cleanup_all_agents()
            raise SlackError(f"Failed to start bot: {e}") from e

        self._started = True
        self.logger.info(
            "Garvis bot started successfully",
            extra={"port": self.settings.port, "app_env": self.settings.app_env},
        )

    async def stop(self) -> None:
        """
        전송 계층 중지 후 에이전트 정리

        Raises:
            SlackError: 전송 계층 중지 실패
        """
        if not self._started:
            self.logger.warning("Bot is not started")
            return

        try:
            if self.transport is not None:
                await self.transport.stop()
            await self.agent_manager.cleanup_all_agents()
        except Exception as e:
            self.logger.error("Error stopping bot", extra={"error": str(e)})
            raise SlackError(f"Failed to stop bot: {e}") from e

        self._started = False
        self.logger.info("Garvis bot stopped successfully")
