"""User interaction abstraction for CLI and testing.

This module provides a protocol-based approach to user interaction, allowing
different implementations for the CLI (using click) and for tests (mock
responses).

Example:
    >>> handler = CLIInteractionHandler()
    >>> location = handler.prompt_text("Location")

    Testing example:
    >>> test_handler = MockInteractionHandler(text_responses=["westus"])
    >>> test_handler.prompt_text("Location")
    'westus'
"""

import sys
from typing import Protocol, runtime_checkable

import click


@runtime_checkable
class InteractionHandler(Protocol):
    """Protocol for user interaction.

    Implementations own the input channel; ``close`` releases it.
    """

    def prompt_text(self, message: str, default: str | None = None) -> str:
        """Prompt user for a line of free text.

        Args:
            message: Prompt message to display (without trailing ": ")
            default: Value returned when the user just presses Enter.
                ``None`` means an answer is required.

        Returns:
            The entered text, or the default

        Raises:
            click.Abort: If user cancels (CLI implementation)
        """
        ...

    def show_warning(self, message: str) -> None:
        """Display a non-fatal warning."""
        ...

    def close(self) -> None:
        """Release the input channel."""
        ...


class CLIInteractionHandler:
    """Click-based CLI interaction handler."""

    def prompt_text(self, message: str, default: str | None = None) -> str:
        """Prompt on stdin/stdout via click.

        The default is never rendered by click; callers put it in the
        message themselves.
        """
        value = click.prompt(
            message,
            default=default,
            type=str,
            show_default=False,
        )
        return value.strip()

    def show_warning(self, message: str) -> None:
        """Display a warning message in yellow on stderr."""
        click.secho(f"Warning: {message}", fg="yellow", err=True)

    def close(self) -> None:
        """Flush stdout; click holds no input handle to release."""
        sys.stdout.flush()


class MockInteractionHandler:
    """Mock interaction handler for testing with pre-programmed responses.

    Tracks all interactions for verification in tests.

    Example:
        >>> handler = MockInteractionHandler(text_responses=["", "westus"])
        >>> handler.prompt_text("Tenant ID", default="")
        ''
        >>> handler.prompt_text("Location")
        'westus'
        >>> len(handler.interactions)
        2
    """

    def __init__(self, text_responses: list[str] | None = None):
        """Initialize test handler with pre-programmed responses.

        Args:
            text_responses: Answers returned in sequence. An empty string
                stands for the user pressing Enter.
        """
        self.text_responses = text_responses or []
        self.interactions: list[dict] = []
        self.closed = False
        self._text_index = 0

    def prompt_text(self, message: str, default: str | None = None) -> str:
        """Return next pre-programmed text response.

        Raises:
            IndexError: If no more text responses available
        """
        if self._text_index >= len(self.text_responses):
            raise IndexError(
                f"No more text responses available. "
                f"Provided {len(self.text_responses)}, "
                f"needed {self._text_index + 1}"
            )

        response = self.text_responses[self._text_index]
        self._text_index += 1

        if not response and default is not None:
            response = default

        self.interactions.append(
            {
                "type": "text",
                "message": message,
                "default": default,
                "response": response,
            }
        )
        return response

    def show_warning(self, message: str) -> None:
        self.interactions.append({"type": "warning", "message": message})

    def close(self) -> None:
        self.closed = True
        self.interactions.append({"type": "close"})

    def get_interactions_by_type(self, interaction_type: str) -> list[dict]:
        """Get all interactions of a specific type.

        Args:
            interaction_type: Type to filter by ("text", "warning", "close")
        """
        return [
            interaction
            for interaction in self.interactions
            if interaction["type"] == interaction_type
        ]

