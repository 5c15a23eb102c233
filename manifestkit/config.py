"""User configuration for the manifestkit command line tools.

The only setting so far is the default version ordering policy::

    [versioning]
    policy = legacy
"""

import configparser
import logging
import os
import platform
from pathlib import Path
from typing import Optional, Union

from manifestkit.versioning import VersionPolicy

logger = logging.getLogger(__name__)

APP_NAME = "manifestkit"

POLICY_ENV_VAR = "MANIFESTKIT_VERSION_POLICY"

POLICY_SECTION = "versioning"
POLICY_KEY = "policy"

_home = os.path.expanduser("~")

xdg_config_home = os.environ.get("XDG_CONFIG_HOME") or os.path.join(_home, ".config")

if platform.system() == "Darwin":
    # macOS
    config_dir = Path("~/Library/Application Support/manifestkit").expanduser()
else:
    # Linux or others
    config_dir = Path(os.path.join(xdg_config_home, APP_NAME))


def get_config_file() -> Path:
    return config_dir / f"{APP_NAME}.cfg"


class ConfigAccessor:
    """
    Reads and writes the manifestkit configuration file.

    A missing or unreadable file behaves like an empty one, so lookups fall
    back to their defaults instead of failing.
    """

    def __init__(self, config_path: Optional[Path] = None):
        """
        Args:
            config_path: Configuration file; defaults to ``get_config_file()``
                evaluated at construction time.
        """
        self.config_path = Path(config_path) if config_path else get_config_file()
        self.config = configparser.ConfigParser()

        if not self.config_path.exists():
            logger.debug(f"No configuration file at {self.config_path}")
            return
        try:
            self.config.read(self.config_path)
        except configparser.Error as e:
            logger.warning(
                f"Ignoring unparsable configuration file {self.config_path}: {e}"
            )

    def get(self, section: str, key: str, default: Optional[str] = None) -> Optional[str]:
        return self.config.get(section, key, fallback=default)

    def set(self, section: str, key: str, value: str) -> None:
        if not self.config.has_section(section):
            self.config.add_section(section)
        self.config.set(section, key, value)

    def save(self) -> bool:
        """
        Write the configuration back to ``config_path``.

        Returns:
            False if the file could not be written; the in-memory values are
            kept either way.
        """
        try:
            self.config_path.parent.mkdir(parents=True, exist_ok=True)
            with open(self.config_path, "w") as configfile:
                self.config.write(configfile)
        except OSError as e:
            logger.warning(f"Could not save configuration to {self.config_path}: {e}")
            return False
        return True


def get_version_policy(config: Optional[ConfigAccessor] = None) -> VersionPolicy:
    """
    Get the configured default version ordering policy.

    The ``MANIFESTKIT_VERSION_POLICY`` environment variable takes precedence
    over the ``[versioning] policy`` key of the configuration file.

    Returns:
        The configured policy, or ``VersionPolicy.STRICT`` if the configured
        value is missing or unknown
    """
    value = os.environ.get(POLICY_ENV_VAR)
    if not value:
        if config is None:
            config = ConfigAccessor()
        value = config.get(POLICY_SECTION, POLICY_KEY, VersionPolicy.STRICT.value)

    try:
        return VersionPolicy(value.strip().lower())
    except ValueError:
        logger.warning(
            f"Unknown version policy '{value}', falling back to "
            f"'{VersionPolicy.STRICT.value}'"
        )
        return VersionPolicy.STRICT


def set_version_policy(
    policy: Union[VersionPolicy, str], config: Optional[ConfigAccessor] = None
) -> bool:
    """
    Store ``policy`` as the default in the configuration file.

    Raises:
        ValueError: If ``policy`` is not a known policy name

    Returns:
        True if the file was written
    """
    policy = VersionPolicy(policy)
    if config is None:
        config = ConfigAccessor()
    config.set(POLICY_SECTION, POLICY_KEY, policy.value)
    return config.save()
