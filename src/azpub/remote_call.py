"""Uniform wrapper for Azure management calls.

Every provisioning and listing call goes through ``call_remote`` so that
sequencing and error propagation look the same for all of them: the call
either returns the provider's result or raises RemoteError.
"""

import logging
from collections.abc import Callable
from typing import Any

from azure.core.exceptions import AzureError, HttpResponseError
from azure.core.polling import LROPoller

from azpub.exceptions import RemoteError

logger = logging.getLogger(__name__)


def _provider_message(error: AzureError) -> str:
    """Extract the most useful message from an Azure SDK error."""
    if isinstance(error, HttpResponseError) and error.error is not None:
        if error.error.message:
            return error.error.message
    return error.message or str(error)


def call_remote(operation: str, func: Callable[..., Any], *args: Any, **kwargs: Any) -> Any:
    """Run one Azure management call to completion.

    Long-running operations return an LROPoller; those are waited on so the
    caller always gets the final result.

    Args:
        operation: Human readable name used in logs and errors
        func: SDK method to call
        *args: Positional arguments for ``func``
        **kwargs: Keyword arguments for ``func``

    Returns:
        The provider's result

    Raises:
        RemoteError: If the call or the long-running operation fails
    """
    logger.debug(f"Calling {operation}")
    try:
        result = func(*args, **kwargs)
        if isinstance(result, LROPoller):
            result = result.result()
    except AzureError as e:
        message = _provider_message(e)
        logger.debug(f"{operation} failed: {message}")
        raise RemoteError(operation, message) from e

    return result


__all__ = ["RemoteError", "call_remote"]
