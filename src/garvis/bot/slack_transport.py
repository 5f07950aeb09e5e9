"""
SlackTransport - Slack Socket Mode 연동

멘션, DM, Garvis 전용 채널 메시지, /garvis 슬래시 커맨드를
GarvisBot.handle_message로 전달하고 응답을 게시합니다.
"""

from typing import Any, Dict, Optional
import logging

from slack_bolt.adapter.socket_mode.async_handler import AsyncSocketModeHandler
from slack_bolt.async_app import AsyncApp

from ..config import Settings
from .garvis_bot import APOLOGY_MESSAGE, BotReply, GarvisBot

# 채널 이름에 포함되면 멘션 없이도 응답하는 키워드
DEDICATED_CHANNEL_KEYWORDS = ("garvis", "ai")


def _reply_kwargs(reply: BotReply) -> Dict[str, Any]:
    kwargs: Dict[str, Any] = {"text": reply.text}
    if reply.thread_ts:
        kwargs["thread_ts"] = reply.thread_ts
    return kwargs


class SlackTransport:
    """
    Slack Socket Mode 전송 계층

    사용법:
        bot = GarvisBot(settings, manager)
        bot.transport = SlackTransport(settings, bot)
        await bot.start()
    """

    def __init__(self, settings: Settings, bot: GarvisBot):
        settings.require_slack()

        self.settings = settings
        self.bot = bot
        self.logger = logging.getLogger("garvis.slack")
        self.app = AsyncApp(
            token=settings.slack_bot_token,
            signing_secret=settings.slack_signing_secret,
        )
        self._handler: Optional[AsyncSocketModeHandler] = None
        self._register_handlers()

    def _register_handlers(self) -> None:
        app = self.app

        @app.event("app_mention")
        async def handle_app_mention(event, say):
            try:
                reply = await self.bot.handle_message(
                    event.get("text", ""),
                    event.get("user", ""),
                    event.get("channel", ""),
                    thread_ts=event.get("thread_ts"),
                )
                await say(**_reply_kwargs(reply))
            except Exception as e:
                self.logger.error("Error handling app mention", extra={"error": str(e)})
                await say("Sorry, I encountered an error processing your request.")

        @app.event("message")
        async def handle_message_event(event, say, client):
            if event.get("subtype") or event.get("bot_id") or "user" not in event:
                return

            text = event.get("text", "")
            channel = event.get("channel", "")
            channel_type = event.get("channel_type")

            if channel_type == "im":
                try:
                    reply = await self.bot.handle_message(text, event["user"], channel)
                    await client.chat_postMessage(
                        channel=channel,
                        text=reply.text,
                        unfurl_links=False,
                        unfurl_media=False,
                    )
                except Exception as e:
                    self.logger.error("Error handling direct message", extra={"error": str(e)})
                    await client.chat_postMessage(channel=channel, text=APOLOGY_MESSAGE)
                return

            if channel_type != "channel":
                return

            try:
                info = await client.conversations_info(channel=channel)
            except Exception as e:
                self.logger.debug(
                    "Could not get channel info", extra={"channel_id": channel, "error": str(e)}
                )
                return

            channel_name = (info.get("channel") or {}).get("name", "").lower()
            if not any(keyword in channel_name for keyword in DEDICATED_CHANNEL_KEYWORDS):
                self.logger.debug("Ignoring message - not a Garvis channel")
                return

            # 멘션이 포함된 메시지는 app_mention 핸들러가 처리
            if GarvisBot.clean_text(text) != text.strip():
                return

            reply = await self.bot.handle_message(text, event["user"], channel)
            await say(**_reply_kwargs(reply))

        @app.command("/garvis")
        async def handle_command(ack, command, respond):
            await ack()
            try:
                reply = await self.bot.handle_message(
                    command.get("text", ""),
                    command.get("user_id", ""),
                    command.get("channel_id", ""),
                    is_slash_command=True,
                )
                await respond(reply.text)
            except Exception as e:
                self.logger.error("Error handling slash command", extra={"error": str(e)})
                await respond("Sorry, I encountered an error processing your command.")

        @app.error
        async def handle_error(error):
            self.logger.error("Slack app error", extra={"error": str(error)})

    async def start(self) -> None:
        self._handler = AsyncSocketModeHandler(self.app, self.settings.slack_app_token)
        await self._handler.connect_async()
        self.logger.info("Slack socket mode connected")

    async def stop(self) -> None:
        if self._handler is not None:
            await self._handler.close_async()
            self._handler = None
            self.logger.info("Slack socket mode closed")
