"""Configuration for the employee manager.

Values come from environment variables, optionally loaded from a dotenv
file first. Every variable has a default, so an empty environment runs
the tool against ./employees with screen clearing on.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING

from dotenv import load_dotenv

if TYPE_CHECKING:
    from collections.abc import Callable

LOGGER = logging.getLogger(__name__)

_DEFAULT_EMPLOYEE_DIR = "employees"
_DEFAULT_LOGGING_LEVEL = "WARNING"
_TRUE_VALUES = ("1", "true", "yes", "on")
_FALSE_VALUES = ("0", "false", "no", "off")


@dataclass
class AppConfig:
    """Holds application configuration loaded from environment variables."""

    employee_dir: Path
    logging_level: str | None = _DEFAULT_LOGGING_LEVEL
    log_file: str | None = None
    clear_screen: bool = True


def configure_logging(app_config: AppConfig) -> None:
    """Configure logging based on the application configuration.

    :param app_config: The application configuration instance
    """
    numeric_level = logging.WARNING
    if app_config.logging_level:
        level = getattr(logging, app_config.logging_level.upper(), None)
        if isinstance(level, int):
            numeric_level = level
        else:
            LOGGER.warning("Invalid log level: %s, using WARNING", app_config.logging_level)

    if app_config.log_file:
        logging.basicConfig(level=numeric_level, filename=app_config.log_file)
    else:
        logging.basicConfig(level=numeric_level)


def get_env_str(
    var_name: str,
    default: str | None,
    value_checker: Callable[[str], bool] | None = None,
) -> str | None:
    """Get an environment variable as a string with optional constraints.

    :param var_name: Name of the environment variable
    :param default: Default value if the variable is not set
    :param value_checker: Optional function to validate the value
    :return: The environment variable value
    :raises ValueError: If the value does not meet the constraints
    """
    value = os.getenv(var_name, default)
    if value is None:
        return None

    if value_checker and not value_checker(value):
        msg = f"Environment variable {var_name} has invalid value: {value}"
        raise ValueError(msg)

    return value


def get_env_bool(var_name: str, default: bool) -> bool:
    """Get an environment variable as a boolean.

    Accepts 1/0, true/false, yes/no and on/off in any case. An unset or
    empty variable gives the default.

    :raises ValueError: If the value is not one of the accepted spellings
    """
    value = os.getenv(var_name)
    if value is None or value.strip() == "":
        return default

    low = value.strip().lower()
    if low in _TRUE_VALUES:
        return True
    if low in _FALSE_VALUES:
        return False

    msg = f"Environment variable {var_name} must be a boolean, got: {value}"
    raise ValueError(msg)


def load_config_from_env(env_file: str | Path | None = None) -> AppConfig:
    """Load application configuration from environment variables.

    :param env_file: Optional dotenv file read before the environment is inspected
    :return: An AppConfig instance populated with environment variable values
    """
    if env_file:
        load_dotenv(dotenv_path=env_file)

    return AppConfig(
        employee_dir=Path(
            get_env_str(
                "EMPLOYEE_DIR",
                _DEFAULT_EMPLOYEE_DIR,
                lambda path: path.strip() != "",
            ),
        ),
        logging_level=get_env_str("LOGGING_LEVEL", _DEFAULT_LOGGING_LEVEL),
        log_file=get_env_str("LOG_FILE", None) or None,
        clear_screen=get_env_bool("CLEAR_SCREEN", True),
    )
