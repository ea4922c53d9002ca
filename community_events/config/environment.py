"""Environment configuration module.

This module MUST be imported before any other project modules that depend on
environment variables. It loads the .env file and exposes the settings used
by the API application and the event store seeding.

Usage:
    from community_events.config.environment import IS_PRODUCTION_ENVIRONMENT

Note:
    This module handles loading of environment variables via python-dotenv.
    In production, environment variables should be set directly in the
    platform's environment configuration.
"""

import os
import logging
from dotenv import load_dotenv

# Load environment variables - this must happen before any other imports
load_dotenv()

# Environment configuration
env_setting = os.environ.get('ENVIRONMENT', '').lower()
IS_PRODUCTION_ENVIRONMENT = env_setting == 'production'

if env_setting not in ['development', 'production']:
    logging.warning(
        f"Environment setting '{env_setting}' is invalid or not specified. "
        "Expected 'development' or 'production'. Defaulting to development environment."
    )

# Optional JSON file with the initial events; sample events are used when unset
EVENTS_SEED_FILE = os.environ.get('EVENTS_SEED_FILE') or None

LOG_LEVEL = os.environ.get('LOG_LEVEL', 'INFO').upper()

# getLevelName returns an int only for registered level names
if not isinstance(logging.getLevelName(LOG_LEVEL), int):
    logging.warning(
        f"Log level '{LOG_LEVEL}' is invalid. Defaulting to INFO."
    )
    LOG_LEVEL = 'INFO'

__all__ = ['IS_PRODUCTION_ENVIRONMENT', 'EVENTS_SEED_FILE', 'LOG_LEVEL']
