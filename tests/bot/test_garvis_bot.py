"""
GarvisBot 테스트

전송 계층은 FakeTransport로 대체합니다.
"""

import pytest

from garvis.bot import APOLOGY_MESSAGE, GarvisBot, SlackTransport
from garvis.bot.garvis_bot import EMPTY_MESSAGE, GREETING_MESSAGE
from garvis.core.base_agent import AgentState
from garvis.core.exceptions import ConfigurationError, SlackError


class FakeTransport:
    """호출 기록용 전송 계층"""

    def __init__(self, fail_on_start: bool = False):
        self.fail_on_start = fail_on_start
        self.started = False
        self.stopped = False

    async def start(self) -> None:
        if self.fail_on_start:
            raise RuntimeError("socket refused")
        self.started = True

    async def stop(self) -> None:
        self.stopped = True


@pytest.fixture
def bot(settings, manager, agent_classes):
    manager.register_agent(agent_classes["sample"]())
    manager.register_agent(agent_classes["broken"]())
    return GarvisBot(settings, manager, FakeTransport())


class TestCleanText:
    """멘션 제거 테스트"""

    def test_strips_user_mentions(self):
        assert GarvisBot.clean_text("<@U12345> list tasks <@W999>") == "list tasks"

    def test_keeps_plain_text(self):
        assert GarvisBot.clean_text("  hello  ") == "hello"


class TestHandleMessage:
    """handle_message 테스트"""

    @pytest.mark.asyncio
    async def test_empty_message(self, bot):
        reply = await bot.handle_message("   ", "U1", "C1")

        assert reply.text == EMPTY_MESSAGE

    @pytest.mark.asyncio
    async def test_mention_only_greets(self, bot):
        reply = await bot.handle_message("<@U12345>", "U1", "C1")

        assert reply.text == GREETING_MESSAGE

    @pytest.mark.asyncio
    async def test_routes_to_agent_with_footer(self, bot):
        """에이전트 응답에 처리 정보 추가"""
        await bot.start()

        reply = await bot.handle_message("<@U12345> run a test", "U1", "C1", thread_ts="111.222")

        assert reply.text.startswith("Test response for: run a test")
        assert "_Processed by Test in " in reply.text
        assert reply.thread_ts == "111.222"

    @pytest.mark.asyncio
    async def test_slash_command_does_not_thread(self, bot):
        await bot.start()

        reply = await bot.handle_message("a test", "U1", "C1", thread_ts="111.222", is_slash_command=True)

        assert reply.thread_ts is None

    @pytest.mark.asyncio
    async def test_no_agent_reply_has_no_footer(self, bot):
        """error 응답은 처리 정보 없이 그대로 전달"""
        await bot.start()

        reply = await bot.handle_message("nothing matches", "U1", "C1")

        assert "No agent found" in reply.text
        assert "_Processed by" not in reply.text

    @pytest.mark.asyncio
    async def test_dispatcher_failure_returns_apology(self, bot):
        """디스패처 예외는 사과 메시지로 변환"""
        await bot.start()

        reply = await bot.handle_message("broken thing", "U1", "C1")

        assert reply.text == APOLOGY_MESSAGE

    @pytest.mark.asyncio
    async def test_help_command(self, bot):
        reply = await bot.handle_message("<@U12345> HELP", "U1", "C1")

        assert reply.text.startswith("*Garvis AI Assistant* 🤖")
        assert "*Test*" in reply.text
        assert "Capabilities: testing" in reply.text

    @pytest.mark.asyncio
    async def test_status_command(self, bot):
        reply = await bot.handle_message("status", "U1", "C1")

        assert "Environment: test" in reply.text
        assert "Active Agents: 2" in reply.text
        assert "• Test: 0 executions" in reply.text


class TestBotLifecycle:
    """start / stop 테스트"""

    @pytest.mark.asyncio
    async def test_start_and_stop(self, bot):
        await bot.start()

        assert bot.is_running is True
        assert bot.transport.started is True
        assert bot.agent_manager.get_agent("Test").is_initialized is True

        await bot.stop()

        assert bot.is_running is False
        assert bot.transport.stopped is True
        assert bot.agent_manager.get_agent("Test").is_initialized is False

    @pytest.mark.asyncio
    async def test_start_twice_is_noop(self, bot):
        await bot.start()
        await bot.start()

        assert bot.is_running is True

    @pytest.mark.asyncio
    async def test_stop_without_start(self, bot):
        await bot.stop()

        assert bot.transport.stopped is False

    @pytest.mark.asyncio
    async def test_transport_failure_raises_slack_error(self, settings, manager):
        bot = GarvisBot(settings, manager, FakeTransport(fail_on_start=True))

        with pytest.raises(SlackError, match="Failed to start bot: socket refused"):
            await bot.start()

        assert bot.is_running is False

    @pytest.mark.asyncio
    async def test_transport_failure_cleans_up_agents(self, bot):
        """전송 계층 시작 실패 시 초기화된 에이전트 정리"""
        bot.transport.fail_on_start = True

        with pytest.raises(SlackError):
            await bot.start()

        assert bot.agent_manager.get_agent("Test").is_initialized is False
        assert bot.agent_manager.get_agent("Test").state == AgentState.TERMINATED

    @pytest.mark.asyncio
    async def test_agent_init_failure_raises_slack_error(self, settings, manager, agent_classes):
        manager.register_agent(agent_classes["init_failing"]())
        transport = FakeTransport()
        bot = GarvisBot(settings, manager, transport)

        with pytest.raises(SlackError):
            await bot.start()

        assert transport.started is False


class TestSlackTransport:
    """SlackTransport 설정 검증"""

    def test_requires_slack_settings(self, settings, manager):
        bot = GarvisBot(settings, manager)

        with pytest.raises(ConfigurationError, match="SLACK_BOT_TOKEN"):
            SlackTransport(settings, bot)
