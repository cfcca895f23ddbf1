"""Configuration management module.

This module handles persistent configuration storage using TOML format.
Stores values that should survive between invocations, currently the
tenant ID used for interactive login.

Security:
- Config file permissions: 0600 (owner read/write only)
- Path validation
"""

import logging
import os
import tempfile
from dataclasses import asdict, dataclass, field
from pathlib import Path
from typing import Any

try:
    import tomli  # type: ignore[import]
except ImportError:
    # Fallback for newer Python versions
    try:
        import tomllib as tomli  # type: ignore[import]
    except ImportError as e:
        raise ImportError("toml library not available. Install with: pip install tomli") from e

try:
    import tomlkit
    from tomlkit.exceptions import ParseError
except ImportError as e:
    raise ImportError("tomlkit library not available. Install with: pip install tomlkit") from e

from azpub.exceptions import ConfigError

logger = logging.getLogger(__name__)


@dataclass
class PublishConfig:
    """azpub configuration data.

    Keys this tool does not know about are kept in ``extra`` so that saving
    never drops them.
    """

    tenant_id: str | None = None
    extra: dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary, excluding None values."""
        data = asdict(self)
        extra = data.pop("extra")
        # TOML has no null
        data = {k: v for k, v in data.items() if v is not None}
        return {**extra, **data}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "PublishConfig":
        """Create from dictionary."""
        extra = {k: v for k, v in data.items() if k != "tenant_id"}
        return cls(tenant_id=data.get("tenant_id"), extra=extra)


class ConfigManager:
    """Manage azpub configuration file.

    Configuration is stored at ~/.azpub/config.toml with secure permissions.
    """

    DEFAULT_CONFIG_DIR = Path.home() / ".azpub"
    DEFAULT_CONFIG_FILE = DEFAULT_CONFIG_DIR / "config.toml"

    @classmethod
    def _validate_config_path(cls, path: Path) -> Path:
        """Resolve ``path`` and require it under ~/.azpub, the cwd or the temp dir.

        Raises:
            ConfigError: If path is outside allowed directories
        """
        resolved = path.resolve()
        roots = (cls.DEFAULT_CONFIG_DIR, Path.cwd(), Path(tempfile.gettempdir()))
        if any(resolved.is_relative_to(root.resolve()) for root in roots):
            return resolved
        raise ConfigError(f"Config path outside allowed directories: {resolved}")

    @classmethod
    def get_config_path(cls, custom_path: str | None = None) -> Path:
        """Get configuration file path.

        Args:
            custom_path: Custom config file path (optional)

        Returns:
            Path to config file

        Raises:
            ConfigError: If path is outside allowed directories
        """
        if custom_path:
            path = Path(custom_path).expanduser()
            return cls._validate_config_path(path)

        return cls.DEFAULT_CONFIG_FILE

    @classmethod
    def ensure_config_dir(cls) -> Path:
        """Ensure config directory exists with secure permissions.

        Raises:
            ConfigError: If directory creation fails
        """
        try:
            cls.DEFAULT_CONFIG_DIR.mkdir(parents=True, exist_ok=True)
            os.chmod(cls.DEFAULT_CONFIG_DIR, 0o700)

            logger.debug(f"Config directory ready: {cls.DEFAULT_CONFIG_DIR}")
            return cls.DEFAULT_CONFIG_DIR

        except Exception as e:
            raise ConfigError(f"Failed to create config directory: {e}") from e

    @classmethod
    def load_config(cls, custom_path: str | None = None) -> PublishConfig:
        """Load configuration, or an empty one if the file does not exist.

        Raises:
            ConfigError: If the file cannot be read or parsed
        """
        config_path = cls.get_config_path(custom_path)
        if not config_path.exists():
            return PublishConfig()

        try:
            if config_path.stat().st_mode & 0o077:
                logger.warning(f"Tightening permissions on {config_path} to 0600")
                os.chmod(config_path, 0o600)
            data = tomli.loads(config_path.read_text())  # type: ignore[attr-defined]
        except (OSError, ValueError) as e:
            raise ConfigError(f"Failed to load config: {e}") from e

        return PublishConfig.from_dict(data)

    @classmethod
    def _load_document(cls, config_path: Path) -> tomlkit.TOMLDocument:
        """Return the existing file as a tomlkit document, or a fresh one.

        A file that does not parse is replaced rather than blocking the save.
        """
        if not config_path.exists():
            return tomlkit.document()
        try:
            return tomlkit.parse(config_path.read_text())
        except (UnicodeDecodeError, ParseError) as e:
            logger.warning(f"Replacing unreadable config file {config_path}: {e}")
            return tomlkit.document()

    @classmethod
    def save_config(cls, config: PublishConfig, custom_path: str | None = None) -> None:
        """Save configuration to file.

        Uses tomlkit so comments in an existing file are preserved, and
        writes through a temp file plus atomic rename.

        Args:
            config: Configuration to save
            custom_path: Custom config file path (optional)

        Raises:
            ConfigError: If saving fails
        """
        temp_path: Path | None = None
        try:
            if custom_path:
                config_path = cls.get_config_path(custom_path)
                config_path.parent.mkdir(parents=True, exist_ok=True)
            else:
                cls.ensure_config_dir()
                config_path = cls.DEFAULT_CONFIG_FILE

            temp_path = config_path.with_suffix(".tmp")

            doc = cls._load_document(config_path)

            for key, value in config.to_dict().items():
                doc[key] = value

            with open(temp_path, "w") as f:
                tomlkit.dump(doc, f)

            os.chmod(temp_path, 0o600)
            temp_path.replace(config_path)

            logger.debug(f"Saved config to: {config_path}")

        except ConfigError:
            raise
        except Exception as e:
            if temp_path and temp_path.exists():
                temp_path.unlink()
            raise ConfigError(f"Failed to save config: {e}") from e

    @classmethod
    def get_cached_tenant_id(cls, custom_path: str | None = None) -> str:
        """Return the cached tenant ID, or an empty string.

        A config that cannot be read counts as having no cached tenant ID.
        """
        try:
            config = cls.load_config(custom_path)
        except ConfigError as e:
            logger.debug(f"Ignoring unreadable config: {e}")
            return ""
        return config.tenant_id or ""

    @classmethod
    def save_tenant_id(cls, tenant_id: str, custom_path: str | None = None) -> PublishConfig:
        """Merge a tenant ID into the stored config and save it.

        An unreadable config is started over from an empty one.

        Raises:
            ConfigError: If the config cannot be saved
        """
        try:
            config = cls.load_config(custom_path)
        except ConfigError as e:
            logger.warning(f"Starting from an empty config: {e}")
            config = PublishConfig()
        config.tenant_id = tenant_id
        cls.save_config(config, custom_path)
        return config


__all__ = ["ConfigError", "ConfigManager", "PublishConfig"]
