"""
Configuration loading and management.

Settings live in a YAML file and are read through a `Config`, which looks
values up with dot-notation keys. The driver reads its own section through
`Config.driver_settings()`:

.. code-block:: yaml

    driver:
      name: word-stats   # logger suffix, onepass.driver.<name>
      log_items: true    # one debug event per collected item
"""

from dataclasses import dataclass
from typing import Any, Dict, Optional
import yaml
import os


@dataclass(frozen=True)
class DriverSettings:
    """The `driver` section of a configuration."""

    name: Optional[str] = None
    log_items: bool = False


class Config:
    """
    A wrapper around a dictionary for managing configuration.

    It provides a `get` method that allows accessing nested values using
    dot-notation (e.g., 'driver.log_items').
    """

    def __init__(self, config_data: Optional[Dict[str, Any]] = None):
        self._config = config_data or {}

    def get(self, key: str, default: Any = None) -> Any:
        """
        Access a config value using dot notation.

        Example:
            >>> config = Config({'driver': {'name': 'stats'}})
            >>> config.get('driver.name')
            'stats'
            >>> config.get('driver.log_items', False)
            False

        :param key: The dot-separated key for the desired value.
        :param default: The value to return if the key is not found.
        :return: The configuration value or the default.
        """
        value = self._config
        for k in key.split("."):
            if not isinstance(value, dict) or k not in value:
                return default
            value = value[k]
        return value

    def driver_settings(self) -> DriverSettings:
        """
        Returns the `driver` section with its defaults filled in.

        A `driver.name` that is not a string is converted to one, so that
        ``name: 2024`` in YAML names the logger ``onepass.driver.2024``.
        """
        name = self.get("driver.name")
        return DriverSettings(
            name=None if name is None else str(name),
            log_items=bool(self.get("driver.log_items", False)),
        )

    def __repr__(self) -> str:
        return f"Config(config_data={self._config})"


def load_config(path: Optional[str]) -> Config:
    """
    Loads a YAML configuration file from the given path.

    If the path is None or does not exist, it returns an empty Config object.

    :param path: The path to the YAML configuration file.
    :return: A Config object with the loaded data.
    """
    if not path or not os.path.exists(path):
        return Config({})

    with open(path, "r") as f:
        config_data = yaml.safe_load(f)

    return Config(config_data)
