"""Tests for the interactive publish prompt sequence."""

from unittest.mock import patch

import pytest

from azpub.config_manager import ConfigError, ConfigManager
from azpub.modules.interaction_handler import MockInteractionHandler
from azpub.modules.prompt_session import (
    PromptSession,
    PublishOptions,
    prompt_for_publish_parameters,
    prompt_for_tenant_id,
)


@pytest.fixture
def cached_tenant(isolated_config):
    """Config file with tenant ID 'T1' already cached."""
    ConfigManager.save_tenant_id("T1")
    return isolated_config


class TestTenantPrompt:
    """Tenant ID caching rules."""

    def test_empty_input_uses_cached_tenant_without_saving(self, cached_tenant):
        session = PromptSession(MockInteractionHandler(text_responses=[""]))

        with patch.object(ConfigManager, "save_config") as mock_save:
            tenant_id = prompt_for_tenant_id(session)

        assert tenant_id == "T1"
        assert session.tenant_id == "T1"
        mock_save.assert_not_called()

    def test_new_input_overrides_and_saves(self, cached_tenant):
        session = PromptSession(MockInteractionHandler(text_responses=["T2"]))

        tenant_id = prompt_for_tenant_id(session)

        assert tenant_id == "T2"
        assert ConfigManager.load_config().tenant_id == "T2"

    def test_nothing_cached_nothing_entered(self, isolated_config):
        session = PromptSession(MockInteractionHandler(text_responses=[""]))

        with patch.object(ConfigManager, "save_config") as mock_save:
            tenant_id = prompt_for_tenant_id(session)

        assert tenant_id == ""
        mock_save.assert_not_called()
        assert not isolated_config.exists()

    def test_prompt_shows_cached_default(self, cached_tenant):
        handler = MockInteractionHandler(text_responses=[""])
        prompt_for_tenant_id(PromptSession(handler))

        assert handler.interactions[0]["message"] == "(optional) Tenant ID [default: T1]"

    def test_prompt_shows_none_when_nothing_cached(self, isolated_config):
        handler = MockInteractionHandler(text_responses=[""])
        prompt_for_tenant_id(PromptSession(handler))

        assert handler.interactions[0]["message"] == "(optional) Tenant ID [default: none]"

    def test_unreadable_config_counts_as_no_cache(self, isolated_config):
        isolated_config.parent.mkdir(parents=True)
        isolated_config.write_text("not = [valid toml\n")
        session = PromptSession(MockInteractionHandler(text_responses=[""]))

        assert prompt_for_tenant_id(session) == ""

    def test_save_failure_warns_and_continues(self, isolated_config):
        handler = MockInteractionHandler(text_responses=["T2"])
        session = PromptSession(handler)

        with patch.object(ConfigManager, "save_config", side_effect=ConfigError("read-only")):
            tenant_id = prompt_for_tenant_id(session)

        assert tenant_id == "T2"
        warnings = handler.get_interactions_by_type("warning")
        assert warnings == [{"type": "warning", "message": "Tenant ID not cached: read-only"}]

    def test_unreadable_config_is_replaced_by_new_tenant(self, isolated_config):
        isolated_config.parent.mkdir(parents=True)
        isolated_config.write_text("tenant_id = [unclosed\n")
        handler = MockInteractionHandler(text_responses=["T2"])

        tenant_id = prompt_for_tenant_id(PromptSession(handler))

        assert tenant_id == "T2"
        assert ConfigManager.load_config().tenant_id == "T2"
        assert handler.get_interactions_by_type("warning") == []


class TestPublishParameters:
    """Full publish prompt sequence."""

    def test_collects_options_in_order(self, isolated_config):
        handler = MockInteractionHandler(text_responses=["contoso", "westus", "myapp123"])

        options = prompt_for_publish_parameters(PromptSession(handler))

        assert options == PublishOptions(name="myapp123", location="westus", tenant_id="contoso")
        messages = [i["message"] for i in handler.get_interactions_by_type("text")]
        assert messages == [
            "(optional) Tenant ID [default: none]",
            "Location (found by running `azpub regions`)",
            "Web app name",
        ]

    def test_closes_session_on_success(self, isolated_config):
        handler = MockInteractionHandler(text_responses=["", "westus", "myapp"])
        session = PromptSession(handler)

        prompt_for_publish_parameters(session)

        assert session.closed
        assert handler.closed

    def test_closes_session_when_prompt_fails(self, isolated_config):
        # Only two answers: the name prompt runs out of input
        handler = MockInteractionHandler(text_responses=["", "westus"])
        session = PromptSession(handler)

        with pytest.raises(IndexError):
            prompt_for_publish_parameters(session)

        assert handler.closed


class TestPromptSession:
    """Session lifecycle."""

    def test_close_is_idempotent(self):
        handler = MockInteractionHandler()
        session = PromptSession(handler)

        session.close()
        session.close()

        assert len(handler.get_interactions_by_type("close")) == 1

    def test_ask_after_close_raises(self):
        session = PromptSession(MockInteractionHandler(text_responses=["x"]))
        session.close()

        with pytest.raises(RuntimeError, match="closed"):
            session.ask("anything")

    def test_context_manager_closes(self):
        handler = MockInteractionHandler()
        with PromptSession(handler) as session:
            assert not session.closed

        assert handler.closed
