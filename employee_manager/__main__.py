"""Entry point: python -m employee_manager."""

import argparse
import logging
import sys

from employee_manager.app import Application
from employee_manager.config import configure_logging, load_config_from_env
from employee_manager.exceptions import StorageError

LOGGER = logging.getLogger(__name__)


def main() -> int:
    """Load configuration and run the login screen until the user exits."""
    parser = argparse.ArgumentParser(
        description="Terminal employee record manager.",
    )
    parser.add_argument(
        "--env-file",
        type=str,
        default=".env",
        help="Path to the environment configuration file.",
    )
    args = parser.parse_args()

    config = load_config_from_env(args.env_file)
    configure_logging(config)

    try:
        app = Application(config)
    except StorageError as exc:
        LOGGER.critical("%s", exc)
        print(f"Cannot start: {exc}", file=sys.stderr)
        return 1

    try:
        app.start()
    except (KeyboardInterrupt, EOFError):
        print()
    return 0


if __name__ == "__main__":
    sys.exit(main())
