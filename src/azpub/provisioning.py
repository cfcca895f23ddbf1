"""Web app provisioning pipeline.

Creates a resource group and a web app of the same name, then enables local
git deployment on the app. Steps run strictly in order and the first failure
stops the pipeline. Nothing is rolled back: if the web app step fails, the
resource group created by the first step is left in place.
"""

import logging
from typing import Any

from azure.mgmt.resource import ResourceManagementClient
from azure.mgmt.web import WebSiteManagementClient
from azure.mgmt.web.models import Site, SiteConfigResource

from azpub.azure_auth import AuthContext, Subscription
from azpub.exceptions import ProvisioningError
from azpub.modules.prompt_session import PublishOptions
from azpub.remote_call import call_remote

logger = logging.getLogger(__name__)

LOCAL_GIT_SCM_TYPE = "LocalGit"


def first_subscription(auth: AuthContext) -> Subscription:
    """Return the subscription every command operates on.

    Raises:
        ProvisioningError: If the login returned no subscriptions
    """
    if not auth.subscriptions:
        raise ProvisioningError("Unable to retrieve subscriptions")
    return auth.subscriptions[0]


class WebAppProvisioner:
    """Provision a web app and its resource group in the first subscription."""

    def __init__(
        self,
        auth: AuthContext,
        resource_client: Any | None = None,
        web_client: Any | None = None,
    ):
        """Initialize provisioner.

        Args:
            auth: Result of the interactive login
            resource_client: ResourceManagementClient override (optional)
            web_client: WebSiteManagementClient override (optional)

        Raises:
            ProvisioningError: If the login returned no subscriptions
        """
        self.subscription = first_subscription(auth)
        subscription_id = self.subscription.subscription_id
        self.resource_client = resource_client or ResourceManagementClient(
            auth.credential, subscription_id
        )
        self.web_client = web_client or WebSiteManagementClient(auth.credential, subscription_id)

    def create_resource_group(self, options: PublishOptions) -> Any:
        # Resource group shares the web app's name
        logger.info(f"Creating resource group {options.name} in {options.location}...")
        return call_remote(
            "create resource group",
            self.resource_client.resource_groups.create_or_update,
            options.name,
            {"location": options.location},
        )

    def create_web_app(self, options: PublishOptions) -> Any:
        logger.info(f"Creating web app {options.name}...")
        return call_remote(
            "create web app",
            self.web_client.web_apps.begin_create_or_update,
            options.name,
            options.name,
            Site(location=options.location),
        )

    def enable_git_push_deploy(self, options: PublishOptions) -> Any:
        logger.info("Enabling local git deployment...")
        return call_remote(
            "update site config",
            self.web_client.web_apps.update_configuration,
            options.name,
            options.name,
            SiteConfigResource(
                scm_type=LOCAL_GIT_SCM_TYPE,
                remote_debugging_enabled=True,
            ),
        )

    def provision(self, options: PublishOptions) -> Any:
        """Run all provisioning steps in order.

        Returns:
            Result of the site config update

        Raises:
            RemoteError: From the first step that fails
        """
        self.create_resource_group(options)
        self.create_web_app(options)
        return self.enable_git_push_deploy(options)


__all__ = ["WebAppProvisioner", "first_subscription"]
