"""Region listing for a subscription."""

import logging
from dataclasses import dataclass
from typing import Any

from azure.mgmt.resource import SubscriptionClient

from azpub.azure_auth import AuthContext
from azpub.provisioning import first_subscription
from azpub.remote_call import call_remote

logger = logging.getLogger(__name__)


@dataclass
class Region:
    """Azure region as reported by the provider."""

    display_name: str
    name: str

    def __str__(self) -> str:
        return f"{self.display_name} ({self.name})"


class RegionLister:
    """List regions available to the first subscription."""

    def __init__(self, auth: AuthContext, subscription_client: Any | None = None):
        """Initialize region lister.

        Raises:
            ProvisioningError: If the login returned no subscriptions
        """
        self.subscription = first_subscription(auth)
        self.client = subscription_client or SubscriptionClient(auth.credential)

    def list_regions(self) -> list[Region]:
        """Return regions in provider order.

        Raises:
            RemoteError: If the listing call fails
        """
        subscription_id = self.subscription.subscription_id
        locations = call_remote(
            "list regions",
            lambda: list(self.client.subscriptions.list_locations(subscription_id)),
        )
        regions = [Region(display_name=loc.display_name, name=loc.name) for loc in locations]
        logger.debug(f"Found {len(regions)} region(s)")
        return regions


__all__ = ["Region", "RegionLister"]
