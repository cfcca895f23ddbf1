"""Azure authentication handler module.

This module performs interactive (browser) login through the Azure Identity
SDK and enumerates the subscriptions visible to the signed-in identity.

Security:
- No credential storage - tokens live only in the credential object
- Every invocation logs in again; nothing is cached to disk
"""

import logging
from dataclasses import dataclass, field
from typing import Any

from azure.core.exceptions import AzureError, ClientAuthenticationError
from azure.identity import InteractiveBrowserCredential
from azure.mgmt.resource import SubscriptionClient

from azpub.exceptions import AuthenticationError

logger = logging.getLogger(__name__)

MANAGEMENT_SCOPE = "https://management.azure.com/.default"


@dataclass
class Subscription:
    """Subscription visible to the signed-in identity."""

    subscription_id: str
    display_name: str = ""
    tenant_id: str | None = None


@dataclass
class AuthContext:
    """Credential plus visible subscriptions for one command invocation."""

    credential: Any
    subscriptions: list[Subscription] = field(default_factory=list)


class AzureAuthenticator:
    """Interactive Azure login.

    The tenant ID is used as a login hint. It may be a tenant GUID or a
    domain name; an empty value lets the identity platform pick the
    organizations endpoint.
    """

    @staticmethod
    def _create_credential(tenant_id: str | None) -> InteractiveBrowserCredential:
        if tenant_id:
            return InteractiveBrowserCredential(tenant_id=tenant_id)
        return InteractiveBrowserCredential()

    @classmethod
    def interactive_login(cls, tenant_id: str | None = None) -> AuthContext:
        """Run an interactive browser login and list subscriptions.

        Args:
            tenant_id: Tenant ID or domain hint (optional)

        Returns:
            AuthContext with the credential and subscriptions in provider order

        Raises:
            AuthenticationError: If login fails or is cancelled, or the
                tenant ID is malformed
        """
        logger.info("Opening browser for Azure login...")
        try:
            credential = cls._create_credential(tenant_id)
            credential.authenticate(scopes=[MANAGEMENT_SCOPE])
        except ClientAuthenticationError as e:
            raise AuthenticationError(f"Azure login failed: {e.message}") from e
        except AzureError as e:
            raise AuthenticationError(f"Azure login failed: {e}") from e
        except ValueError as e:
            # azure-identity rejects malformed tenant IDs at construction
            raise AuthenticationError(f"Azure login failed: {e}") from e

        try:
            client = SubscriptionClient(credential)
            subscriptions = [
                Subscription(
                    subscription_id=sub.subscription_id,
                    display_name=sub.display_name or "",
                    tenant_id=getattr(sub, "tenant_id", None),
                )
                for sub in client.subscriptions.list()
            ]
        except AzureError as e:
            raise AuthenticationError(f"Unable to list subscriptions: {e}") from e

        logger.debug(f"Login returned {len(subscriptions)} subscription(s)")
        return AuthContext(credential=credential, subscriptions=subscriptions)


__all__ = ["AuthContext", "AuthenticationError", "AzureAuthenticator", "Subscription"]
