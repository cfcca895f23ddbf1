"""Publish and region listing workflows.

PublishOrchestrator coordinates the modules for the two CLI commands:

publish:
1. Prompt for tenant ID, location and web app name
2. Interactive Azure login
3. Resource group, web app, local git deployment
4. Point the git remote at the deployment endpoint
5. Show how to set deployment credentials

regions:
1. Prompt for tenant ID
2. Interactive Azure login
3. Print the regions of the first subscription
"""

import logging

import click
from rich.console import Console

from azpub.azure_auth import AzureAuthenticator
from azpub.exceptions import AzpubError
from azpub.git_remote import GitRemoteManager
from azpub.modules.interaction_handler import CLIInteractionHandler, InteractionHandler
from azpub.modules.prompt_session import (
    PromptSession,
    prompt_for_publish_parameters,
    prompt_for_tenant_id,
)
from azpub.provisioning import WebAppProvisioner
from azpub.region_lister import Region, RegionLister

logger = logging.getLogger(__name__)

GIT_CREDENTIALS_MESSAGE = [
    "First time with local git deployment to Azure App Service?",
    " 1. In your browser, navigate to https://portal.azure.com",
    " 2. Find your web app resource group and navigate to it",
    " 3. Click on the App Service in your resource group",
    " 4. Navigate to the `Deployment credentials` section",
    " 5. Add/change your git deployment credentials and save",
]


class PublishOrchestrator:
    """Run the publish and regions workflows."""

    def __init__(
        self,
        handler: InteractionHandler | None = None,
        config_path: str | None = None,
        console: Console | None = None,
    ):
        """Initialize orchestrator.

        Args:
            handler: Interaction handler (defaults to the click handler)
            config_path: Custom config file path (optional)
            console: Rich console for user-facing output (optional)
        """
        self.handler = handler or CLIInteractionHandler()
        self.config_path = config_path
        self.console = console or Console(highlight=False)

    def publish(self) -> bool:
        """Provision and wire up a web app for local git deployment.

        Failures are reported as ``Azure publishing error: <message>`` and
        not raised.

        Returns:
            True on success, False if any step failed
        """
        try:
            session = PromptSession(self.handler, self.config_path)
            options = prompt_for_publish_parameters(session)

            auth = AzureAuthenticator.interactive_login(options.tenant_id)

            WebAppProvisioner(auth).provision(options)
            GitRemoteManager.fix_git_remotes(options.name)
            self.display_git_credentials_message()
            return True

        except AzpubError as e:
            logger.debug("Publish failed", exc_info=True)
            click.echo(f"Azure publishing error: {e}")
            return False

    def list_regions(self) -> list[Region]:
        """Print the regions available to the first subscription.

        The prompt session is closed before any error reaches the caller.

        Raises:
            AuthenticationError: If login fails
            ProvisioningError: If no subscriptions were returned
            RemoteError: If the listing call fails
        """
        with PromptSession(self.handler, self.config_path) as session:
            tenant_id = prompt_for_tenant_id(session)
            auth = AzureAuthenticator.interactive_login(tenant_id)
            regions = RegionLister(auth).list_regions()

        for region in regions:
            click.echo(str(region))
        return regions

    def display_git_credentials_message(self) -> None:
        for line in GIT_CREDENTIALS_MESSAGE:
            self.console.print(line, style="cyan", markup=False, emoji=False)


__all__ = ["GIT_CREDENTIALS_MESSAGE", "PublishOrchestrator"]
