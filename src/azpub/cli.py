"""CLI entry point for azpub.

Commands:
    azpub                    # Show help
    azpub publish            # Provision a web app and set up local git deployment
    azpub regions            # List regions available to your subscription
"""

import logging
import sys

import click

from azpub import __version__
from azpub.click_group import AzpubGroup
from azpub.exceptions import AzpubError
from azpub.publisher import PublishOrchestrator

logger = logging.getLogger(__name__)


@click.group(
    cls=AzpubGroup,
    invoke_without_command=True,
    context_settings={"help_option_names": ["--help", "-h"]},
)
@click.option("--config", "config_path", type=click.Path(), help="Config file path")
@click.option("--verbose", "-v", is_flag=True, help="Show debug logging")
@click.pass_context
@click.version_option(version=__version__)
def main(ctx: click.Context, config_path: str | None, verbose: bool) -> None:
    """azpub - Publish the current repository to Azure App Service.

    \b
    COMMANDS:
        publish       Create a resource group and web app, enable local git
                      deployment and point this repository at it
        regions       List regions available to your subscription

    \b
    EXAMPLES:
        $ azpub regions
        $ azpub publish
        $ git push azure master

    \b
    CONFIGURATION:
        Config file: ~/.azpub/config.toml
        Cached value: tenant_id
    """
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(message)s",
    )

    ctx.ensure_object(dict)
    ctx.obj["config_path"] = config_path

    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())
        ctx.exit(0)


@main.command()
@click.pass_context
def publish(ctx: click.Context) -> None:
    """Provision a web app and set up local git deployment.

    Prompts for a tenant ID, a region and a web app name. The web app and its
    resource group share the name. The repository's 'origin' remote is
    replaced by an 'azure' remote pointing at the deployment endpoint.
    """
    orchestrator = PublishOrchestrator(config_path=ctx.obj["config_path"])
    orchestrator.publish()


@main.command()
@click.pass_context
def regions(ctx: click.Context) -> None:
    """List regions available to your subscription."""
    orchestrator = PublishOrchestrator(config_path=ctx.obj["config_path"])
    try:
        orchestrator.list_regions()
    except AzpubError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(e.exit_code)


if __name__ == "__main__":
    main()
