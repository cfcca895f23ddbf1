"""Git remote fixup for local git deployment.

Replaces the repository's ``origin`` remote with an ``azure`` remote that
points at the web app's deployment endpoint.
"""

import logging
import os
import subprocess

from azpub.exceptions import GitError

logger = logging.getLogger(__name__)

DEPLOYMENT_DOMAIN = "scm.azurewebsites.net"
DEPLOY_REMOTE_NAME = "azure"
MISSING_REMOTE_MARKER = "no such remote"


def deployment_git_url(app_name: str) -> str:
    """Return the local git deployment URL for a web app.

    Example:
        >>> deployment_git_url("myapp")
        'https://myapp.scm.azurewebsites.net:443/myapp.git'
    """
    return f"https://{app_name}.{DEPLOYMENT_DOMAIN}:443/{app_name}.git"


class GitRemoteManager:
    """Rewire git remotes in the current working directory."""

    @classmethod
    def _run_git(cls, args: list[str]) -> subprocess.CompletedProcess:
        """Run a git command with untranslated messages.

        Raises:
            GitError: If git is not installed
        """
        cmd = ["git", *args]
        logger.debug(f"Running: {' '.join(cmd)}")
        try:
            return subprocess.run(
                cmd,
                capture_output=True,
                text=True,
                check=False,
                env={**os.environ, "LC_ALL": "C"},
            )
        except FileNotFoundError as e:
            raise GitError(cmd, None, "git executable not found") from e

    @classmethod
    def remove_origin(cls) -> bool:
        """Remove the ``origin`` remote.

        Returns:
            True if origin was removed, False if there was none

        Raises:
            GitError: If git is missing or the removal fails
        """
        result = cls._run_git(["remote", "remove", "origin"])
        if result.returncode == 0:
            return True

        if MISSING_REMOTE_MARKER in result.stderr.lower():
            logger.debug("No origin remote to remove")
            return False

        raise GitError(["git", "remote", "remove", "origin"], result.returncode, result.stderr)

    @classmethod
    def add_deploy_remote(cls, app_name: str) -> str:
        """Add the ``azure`` remote for the web app.

        Returns:
            The remote URL

        Raises:
            GitError: If git is missing or the remote cannot be added
        """
        url = deployment_git_url(app_name)
        args = ["remote", "add", DEPLOY_REMOTE_NAME, url]
        result = cls._run_git(args)
        if result.returncode != 0:
            raise GitError(["git", *args], result.returncode, result.stderr)
        return url

    @classmethod
    def fix_git_remotes(cls, app_name: str) -> str:
        """Remove ``origin`` and add the deployment remote.

        A repository without an ``origin`` remote is not an error.

        Returns:
            The deployment remote URL
        """
        cls.remove_origin()
        url = cls.add_deploy_remote(app_name)
        logger.info(f"Added git remote '{DEPLOY_REMOTE_NAME}': {url}")
        return url


__all__ = ["GitError", "GitRemoteManager", "deployment_git_url"]
