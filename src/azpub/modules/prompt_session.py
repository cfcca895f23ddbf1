"""Interactive prompt sequence for publish parameters.

A PromptSession owns the interaction handler for one command invocation and
is passed explicitly through each prompt step. Use it as a context manager so
the input channel is closed on every exit path:

    >>> with PromptSession(CLIInteractionHandler()) as session:
    ...     options = prompt_for_publish_parameters(session)
"""

import logging
from dataclasses import dataclass
from types import TracebackType

from azpub.config_manager import ConfigError, ConfigManager
from azpub.modules.interaction_handler import InteractionHandler

logger = logging.getLogger(__name__)

TENANT_PROMPT = "(optional) Tenant ID [default: {default}]"
LOCATION_PROMPT = "Location (found by running `azpub regions`)"
NAME_PROMPT = "Web app name"


@dataclass
class PublishOptions:
    """Parameters for one publish run.

    ``name`` is used both as the resource group name and the web app name.
    """

    name: str
    location: str
    tenant_id: str | None = None


class PromptSession:
    """State for one interactive session.

    Attributes:
        handler: Interaction handler that owns the input channel
        config_path: Custom config file path (optional)
        tenant_id: Effective tenant ID once prompted, else None
    """

    def __init__(self, handler: InteractionHandler, config_path: str | None = None):
        self.handler = handler
        self.config_path = config_path
        self.tenant_id: str | None = None
        self.closed = False

    def __enter__(self) -> "PromptSession":
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()

    def ask(self, message: str, default: str | None = None) -> str:
        if self.closed:
            raise RuntimeError("Prompt session is closed")
        return self.handler.prompt_text(message, default=default)

    def close(self) -> None:
        if not self.closed:
            self.closed = True
            self.handler.close()


def prompt_for_tenant_id(session: PromptSession) -> str:
    """Prompt for the tenant ID, using the cached one as default.

    A newly entered tenant ID is persisted. Pressing Enter keeps the cached
    value without rewriting the config. With nothing cached and nothing
    entered the tenant ID is empty. A failed cache write only warns.

    Returns:
        Effective tenant ID (may be empty)
    """
    cached = ConfigManager.get_cached_tenant_id(session.config_path)
    entered = session.ask(TENANT_PROMPT.format(default=cached or "none"), default="")

    if entered:
        tenant_id = entered
        try:
            ConfigManager.save_tenant_id(tenant_id, session.config_path)
            logger.debug("Cached new tenant ID")
        except ConfigError as e:
            session.handler.show_warning(f"Tenant ID not cached: {e}")
    elif cached:
        tenant_id = cached
    else:
        tenant_id = ""

    session.tenant_id = tenant_id
    return tenant_id


def prompt_for_publish_parameters(session: PromptSession) -> PublishOptions:
    """Gather tenant ID, location and web app name, then close the session."""
    with session:
        tenant_id = prompt_for_tenant_id(session)
        location = session.ask(LOCATION_PROMPT)
        name = session.ask(NAME_PROMPT)

    return PublishOptions(name=name, location=location, tenant_id=tenant_id)


__all__ = [
    "PromptSession",
    "PublishOptions",
    "prompt_for_publish_parameters",
    "prompt_for_tenant_id",
]
