"""
Tests for the LLM layer: model routing, prompt logging, and the client wrapper.
"""

from unittest.mock import AsyncMock, MagicMock, patch

import pytest

from casework.errors import ConfigurationError
from casework.llm import prompt_logger
from casework.llm.client import PERPLEXITY_BASE_URL, complete, get_client, reset_clients
from casework.llm.model_router import DEFAULT_CONFIG, TASK_CONFIGS, get_model, get_task_config

from conftest import run


class TestModelRouter:
    """Tests for per-task model selection."""

    def test_generation_tasks_use_openai(self):
        for task in ("case_plan", "skill_resource", "resource_search"):
            assert TASK_CONFIGS[task]["provider"] == "openai"
            assert TASK_CONFIGS[task]["model"] == "gpt-4o-mini"

    def test_search_grounded_tasks_use_perplexity(self):
        assert TASK_CONFIGS["client_resource"]["provider"] == "perplexity"
        assert TASK_CONFIGS["research"]["model"] == "sonar"

    def test_factual_tasks_run_cooler(self):
        assert TASK_CONFIGS["resource_search"]["temperature"] < TASK_CONFIGS["case_plan"]["temperature"]
        assert TASK_CONFIGS["research"]["temperature"] < TASK_CONFIGS["client_resource"]["temperature"]

    def test_unknown_task_gets_default(self):
        assert get_task_config("nonexistent") == DEFAULT_CONFIG

    def test_config_is_a_copy(self):
        config = get_task_config("case_plan")
        config.pop("model")
        assert get_model("case_plan") == "gpt-4o-mini"


class TestPromptLogger:

    @pytest.fixture(autouse=True)
    def log_dir(self, tmp_path, monkeypatch):
        monkeypatch.setattr(prompt_logger, "LOG_DIR", tmp_path / "prompt_logs")
        prompt_logger.reset_session()
        yield tmp_path / "prompt_logs"
        prompt_logger.enable_prompt_logging(False)
        prompt_logger.reset_session()

    def test_disabled_by_default(self):
        prompt_logger.enable_prompt_logging(False)
        assert prompt_logger.log_prompt(task="t", model="m", system_prompt="s", user_prompt="u") is None
        assert prompt_logger.get_session_log_dir() is None

    def test_writes_numbered_markdown(self, log_dir):
        prompt_logger.enable_prompt_logging(True)

        first = prompt_logger.log_prompt(
            task="case_plan",
            model="gpt-4o-mini",
            system_prompt="SYSTEM",
            user_prompt="USER",
            response="RESPONSE",
            config={"temperature": 0.7, "max_tokens": 2048},
        )
        second = prompt_logger.log_prompt(
            task="research", model="sonar", system_prompt="s", user_prompt="u", error="timeout"
        )

        assert first.name == "01_case_plan.md"
        assert second.name == "02_research.md"
        assert first.parent.parent == log_dir

        content = first.read_text()
        assert "# LLM Call: case_plan" in content
        assert "**Config:** temperature=0.7, max_tokens=2048" in content
        assert "SYSTEM" in content and "USER" in content and "RESPONSE" in content
        assert "**ERROR:** timeout" in second.read_text()

    def test_empty_response(self):
        prompt_logger.enable_prompt_logging(True)
        path = prompt_logger.log_prompt(task="t", model="m", system_prompt="s", user_prompt="u")
        assert "(Empty response)" in path.read_text()

    def test_reset_restarts_numbering(self):
        prompt_logger.enable_prompt_logging(True)
        prompt_logger.log_prompt(task="case_plan", model="m", system_prompt="s", user_prompt="u")

        prompt_logger.reset_session()
        path = prompt_logger.log_prompt(task="research", model="m", system_prompt="s", user_prompt="u")

        assert path.name == "01_research.md"


class TestClient:

    @pytest.fixture(autouse=True)
    def clean_clients(self):
        reset_clients()
        yield
        reset_clients()

    def test_missing_openai_key(self):
        with patch("casework.llm.client.settings", MagicMock(openai_api_key=None)):
            with pytest.raises(ConfigurationError, match="OPENAI_API_KEY"):
                get_client("openai")

    def test_missing_perplexity_key(self):
        with patch("casework.llm.client.settings", MagicMock(perplexity_api_key="")):
            with pytest.raises(ConfigurationError, match="PERPLEXITY_API_KEY"):
                get_client("perplexity")

    def test_perplexity_uses_its_base_url(self):
        with patch("casework.llm.client.settings", MagicMock(perplexity_api_key="pplx-test")):
            client = get_client("perplexity")
        assert str(client.base_url).rstrip("/") == PERPLEXITY_BASE_URL

    def test_clients_are_cached(self):
        with patch("casework.llm.client.settings", MagicMock(openai_api_key="sk-test")):
            assert get_client("openai") is get_client("openai")

    def test_complete_uses_task_config(self):
        mock_client = MagicMock()
        mock_client.chat.completions.create = AsyncMock(
            return_value=MagicMock(choices=[MagicMock(message=MagicMock(content="A plan"))])
        )

        with patch("casework.llm.client.get_client", return_value=mock_client) as mock_get, \
             patch("casework.llm.client.log_prompt") as mock_log:
            text = run(complete(task="research", system_prompt="sys", user_prompt="user"))

        assert text == "A plan"
        mock_get.assert_called_once_with("perplexity")
        kwargs = mock_client.chat.completions.create.call_args.kwargs
        assert kwargs["model"] == "sonar"
        assert kwargs["temperature"] == 0.3
        assert kwargs["max_tokens"] == 1000
        assert kwargs["messages"][0] == {"role": "system", "content": "sys"}
        assert mock_log.call_args.kwargs["response"] == "A plan"

    def test_model_override(self):
        mock_client = MagicMock()
        mock_client.chat.completions.create = AsyncMock(return_value=MagicMock(choices=[]))

        with patch("casework.llm.client.get_client", return_value=mock_client), \
             patch("casework.llm.client.log_prompt"):
            text = run(complete(task="case_plan", system_prompt="s", user_prompt="u", model_override="gpt-4o"))

        assert text == ""
        assert mock_client.chat.completions.create.call_args.kwargs["model"] == "gpt-4o"

    def test_provider_error_logged_and_raised(self):
        mock_client = MagicMock()
        mock_client.chat.completions.create = AsyncMock(side_effect=RuntimeError("rate limited"))

        with patch("casework.llm.client.get_client", return_value=mock_client), \
             patch("casework.llm.client.log_prompt") as mock_log:
            with pytest.raises(RuntimeError, match="rate limited"):
                run(complete(task="case_plan", system_prompt="s", user_prompt="u"))

        assert mock_log.call_args.kwargs["error"] == "rate limited"
