"""Common error types for azpub."""


class AzpubError(Exception):
    """Base exception for azpub errors."""

    exit_code = 1


class ConfigError(AzpubError):
    """Raised when configuration operations fail."""

    pass


class AuthenticationError(AzpubError):
    """Raised when interactive Azure login fails or is cancelled."""

    pass


class RemoteError(AzpubError):
    """Raised when an Azure management call fails.

    Carries the provider's error message and the name of the operation that
    failed.
    """

    def __init__(self, operation: str, message: str):
        self.operation = operation
        self.provider_message = message
        super().__init__(message)


class ProvisioningError(AzpubError):
    """Raised when the provisioning pipeline cannot start."""

    pass


class GitError(AzpubError):
    """Raised when a git invocation fails."""

    def __init__(self, cmd: list[str], returncode: int | None, stderr: str = ""):
        self.cmd = cmd
        self.returncode = returncode
        self.stderr = stderr
        if returncode is None:
            message = f"Unable to run {' '.join(cmd)}: {stderr or 'git not found'}"
        else:
            message = (
                stderr.strip() or f"{' '.join(cmd)} failed with exit code {returncode}"
            )
        super().__init__(message)


__all__ = [
    "AuthenticationError",
    "AzpubError",
    "ConfigError",
    "GitError",
    "ProvisioningError",
    "RemoteError",
]
