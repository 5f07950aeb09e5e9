"""
설정 / 팩토리 / 로깅 테스트
"""

import asyncio
import json
import logging

import pytest

from garvis import logger as logger_module
from garvis.config import Settings, load_agent_configs, load_settings
from garvis.core.agent_request import AgentRequest, ResponseStatus
from garvis.core.exceptions import ConfigurationError
from garvis.factory import build_agent_manager
from garvis.logger import JSONFormatter, setup_logging


class TestSettings:
    """Settings / load_settings 테스트"""

    def test_defaults(self, settings):
        assert settings.port == 3000
        assert settings.agent_timeout == 30000
        assert settings.agent_timeout_seconds == 30.0
        assert settings.max_concurrent_agents == 10
        assert settings.is_development is False

    def test_reads_environment(self, monkeypatch):
        monkeypatch.setenv("PORT", "8080")
        monkeypatch.setenv("MAX_CONCURRENT_AGENTS", "3")

        settings = load_settings(_env_file=None)

        assert settings.port == 8080
        assert settings.max_concurrent_agents == 3

    def test_non_numeric_value_raises(self, monkeypatch):
        monkeypatch.setenv("PORT", "not-a-number")

        with pytest.raises(ConfigurationError, match="PORT"):
            load_settings(_env_file=None)

    def test_non_positive_value_raises(self):
        with pytest.raises(ConfigurationError, match="MAX_CONCURRENT_AGENTS"):
            load_settings(_env_file=None, max_concurrent_agents=0)

    def test_require_slack_lists_missing(self, settings):
        """Slack 필수 환경 변수 누락"""
        with pytest.raises(ConfigurationError) as exc_info:
            settings.require_slack()

        assert "SLACK_BOT_TOKEN" in str(exc_info.value)
        assert "SLACK_APP_TOKEN" in str(exc_info.value)
        assert "SLACK_SIGNING_SECRET" in str(exc_info.value)

    def test_require_slack_ok(self):
        settings = Settings(
            _env_file=None,
            slack_bot_token="xoxb-1",
            slack_app_token="xapp-1",
            slack_signing_secret="secret",
        )

        settings.require_slack()
        assert settings.missing_slack_settings() == []


class TestAgentConfigs:
    """load_agent_configs 테스트"""

    def test_load(self, tmp_path):
        path = tmp_path / "agents.yaml"
        path.write_text(
            "agents:\n"
            "  TaskManager:\n"
            "    max_concurrent_executions: 2\n"
            "    timeout: 5000\n"
            "  CodeHelper:\n"
            "    enabled: false\n",
            encoding="utf-8",
        )

        configs = load_agent_configs(path)

        assert configs["TaskManager"].max_concurrent_executions == 2
        assert configs["TaskManager"].timeout == 5000
        assert configs["TaskManager"].enabled is True
        assert configs["CodeHelper"].enabled is False

    def test_missing_file(self, tmp_path):
        with pytest.raises(ConfigurationError, match="not found"):
            load_agent_configs(tmp_path / "missing.yaml")

    def test_invalid_yaml(self, tmp_path):
        path = tmp_path / "agents.yaml"
        path.write_text("agents: [unclosed", encoding="utf-8")

        with pytest.raises(ConfigurationError, match="Invalid YAML"):
            load_agent_configs(path)

    def test_agents_must_be_mapping(self, tmp_path):
        path = tmp_path / "agents.yaml"
        path.write_text("agents:\n  - TaskManager\n", encoding="utf-8")

        with pytest.raises(ConfigurationError):
            load_agent_configs(path)

    @pytest.mark.parametrize(
        "entry, key",
        [
            ('    max_concurrent_executions: "5"\n', "max_concurrent_executions"),
            ("    max_concurrent_executions: 0\n", "max_concurrent_executions"),
            ("    max_concurrent_executions: -2\n", "max_concurrent_executions"),
            ("    max_concurrent_executions: true\n", "max_concurrent_executions"),
            ("    timeout: 0\n", "timeout"),
            ('    timeout: "5000"\n', "timeout"),
            ('    enabled: "false"\n', "enabled"),
            ("    enabeld: false\n", "enabeld"),
        ],
    )
    def test_invalid_entry_value(self, tmp_path, entry, key):
        """잘못된 값은 에이전트 이름과 키를 포함한 ConfigurationError"""
        path = tmp_path / "agents.yaml"
        path.write_text("agents:\n  TaskManager:\n" + entry, encoding="utf-8")

        with pytest.raises(ConfigurationError) as exc_info:
            load_agent_configs(path)

        assert "TaskManager" in str(exc_info.value)
        assert key in str(exc_info.value)

    def test_scalar_entry(self, tmp_path):
        """매핑이 아닌 항목"""
        path = tmp_path / "agents.yaml"
        path.write_text("agents:\n  TaskManager: 5\n", encoding="utf-8")

        with pytest.raises(ConfigurationError, match="TaskManager"):
            load_agent_configs(path)

    def test_empty_entry_uses_defaults(self, tmp_path):
        path = tmp_path / "agents.yaml"
        path.write_text("agents:\n  TaskManager:\n", encoding="utf-8")

        config = load_agent_configs(path)["TaskManager"]

        assert config.enabled is True
        assert config.max_concurrent_executions is None
        assert config.timeout is None


class TestFactory:
    """build_agent_manager 테스트"""

    def test_default_agents_in_order(self, settings):
        manager = build_agent_manager(settings)

        assert [agent.name for agent in manager.get_all_agents()] == [
            "InfoRetrieval",
            "TaskManager",
            "CodeHelper",
        ]
        assert manager.max_concurrent_agents == 10
        assert manager.execution_timeout == 30.0

    def test_disabled_agent_is_skipped(self, tmp_path):
        path = tmp_path / "agents.yaml"
        path.write_text("agents:\n  CodeHelper:\n    enabled: false\n", encoding="utf-8")
        settings = Settings(_env_file=None, agents_config_path=str(path))

        manager = build_agent_manager(settings)

        assert "CodeHelper" not in manager
        assert len(manager) == 2

    def test_invalid_override_fails_at_startup(self, tmp_path):
        """잘못된 오버라이드는 요청 시점이 아닌 구성 시점에 실패"""
        path = tmp_path / "agents.yaml"
        path.write_text(
            'agents:\n  TaskManager:\n    max_concurrent_executions: "5"\n', encoding="utf-8"
        )
        settings = Settings(_env_file=None, agents_config_path=str(path))

        with pytest.raises(ConfigurationError, match="max_concurrent_executions"):
            build_agent_manager(settings)

    @pytest.mark.asyncio
    async def test_loaded_override_limits_dispatch(self, tmp_path, agent_classes):
        """YAML에서 읽은 상한은 error 응답으로만 나타남"""
        path = tmp_path / "agents.yaml"
        path.write_text(
            "agents:\n  Blocking:\n    max_concurrent_executions: 1\n", encoding="utf-8"
        )
        settings = Settings(_env_file=None, agents_config_path=str(path))
        agent = agent_classes["blocking"]()
        manager = build_agent_manager(settings, agent_factories=[lambda: agent])
        await manager.initialize_all_agents()

        first = asyncio.create_task(
            manager.execute_request(AgentRequest(user_id="U1", channel_id="C1", content="block 1"))
        )
        await agent.started.wait()

        response = await manager.execute_request(
            AgentRequest(user_id="U1", channel_id="C1", content="block 2")
        )
        assert response.status == ResponseStatus.ERROR
        assert "maximum capacity" in response.content

        agent.release.set()
        assert (await first).status == ResponseStatus.SUCCESS
        assert manager.get_agent_stats()["Blocking"]["executions"] == 0

    @pytest.mark.asyncio
    async def test_first_match_across_default_agents(self, settings):
        """InfoRetrieval이 먼저 등록되어 겹치는 요청을 가져감"""
        manager = build_agent_manager(settings)
        await manager.initialize_all_agents()

        response = await manager.execute_request(
            AgentRequest(user_id="U1", channel_id="C1", content="explain my tasks")
        )
        assert response.metadata.agent_used == "InfoRetrieval"

        response = await manager.execute_request(
            AgentRequest(user_id="U1", channel_id="C1", content="add task: write docs")
        )
        assert response.metadata.agent_used == "TaskManager"

        await manager.cleanup_all_agents()


class TestLogging:
    """setup_logging 테스트"""

    @pytest.fixture(autouse=True)
    def _reset_garvis_logger(self):
        yield
        garvis_logger = logging.getLogger("garvis")
        for handler in list(garvis_logger.handlers):
            garvis_logger.removeHandler(handler)
            handler.close()
        garvis_logger.propagate = True

    def test_development_uses_console(self):
        settings = Settings(_env_file=None, app_env="development", log_level="debug")

        configured = setup_logging(settings)

        assert configured.level == logging.DEBUG
        assert len(configured.handlers) == 1

    def test_production_writes_files(self, tmp_path, monkeypatch):
        monkeypatch.setattr(logger_module, "LOG_DIR", tmp_path / "logs")
        settings = Settings(_env_file=None, app_env="production")

        configured = setup_logging(settings)
        configured.error("boom", extra={"request_id": "req-1"})
        for handler in configured.handlers:
            handler.flush()

        error_lines = (tmp_path / "logs" / "error.log").read_text(encoding="utf-8").splitlines()
        assert len(error_lines) == 1
        record = json.loads(error_lines[0])
        assert record["message"] == "boom"
        assert record["request_id"] == "req-1"
        assert record["environment"] == "production"
        assert (tmp_path / "logs" / "combined.log").exists()

    def test_setup_twice_replaces_handlers(self):
        settings = Settings(_env_file=None, app_env="development")

        setup_logging(settings)
        configured = setup_logging(settings)

        assert len(configured.handlers) == 1

    def test_json_formatter_includes_extra(self):
        record = logging.LogRecord("garvis.test", logging.INFO, __file__, 1, "hello", (), None)
        record.agent_name = "Test"

        data = json.loads(JSONFormatter("test").format(record))

        assert data["level"] == "INFO"
        assert data["agent_name"] == "Test"
        assert data["service"] == "garvis"
