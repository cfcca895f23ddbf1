"""
Shared test fixtures for azpub tests.

This module provides common fixtures used across the test suite:
- Authenticated contexts with fake credentials
- Mock Azure management clients
- Captured git subprocess calls
"""

from unittest.mock import MagicMock, patch

import pytest

from azpub.azure_auth import AuthContext, Subscription

from tests.mocks.azure_mock import MockAzureCredential
from tests.mocks.subprocess_mock import SubprocessCallCapture

# ============================================================================
# AZURE FIXTURES
# ============================================================================


@pytest.fixture
def auth_context():
    """Auth context with one subscription, 'sub-1'."""
    return AuthContext(
        credential=MockAzureCredential(),
        subscriptions=[Subscription(subscription_id="sub-1", display_name="Dev")],
    )


@pytest.fixture
def empty_auth_context():
    """Auth context for an identity that sees no subscriptions."""
    return AuthContext(credential=MockAzureCredential(), subscriptions=[])


@pytest.fixture
def mock_resource_client():
    """Fake ResourceManagementClient."""
    client = MagicMock()
    client.resource_groups.create_or_update.return_value = MagicMock(name="rg-result")
    return client


@pytest.fixture
def mock_web_client():
    """Fake WebSiteManagementClient.

    begin_create_or_update returns a plain object rather than an LROPoller,
    so call_remote hands it back unchanged.
    """
    client = MagicMock()
    client.web_apps.begin_create_or_update.return_value = MagicMock(name="site-result")
    client.web_apps.update_configuration.return_value = MagicMock(name="config-result")
    return client


# ============================================================================
# SUBPROCESS FIXTURES
# ============================================================================


@pytest.fixture
def git_capture():
    """Capture git invocations made through subprocess.run."""
    capture = SubprocessCallCapture()
    with patch("azpub.git_remote.subprocess.run", side_effect=capture.capture):
        yield capture
