"""
Logger-Simple Config File Lists
===============================

Contains lists of valid Logger-Simple configuration file names.

"""

CONFIG_FILE_NAMES: list[str] = ["loggersimple.toml", ".loggersimple.toml"]

APP_ID_ENV_VAR: str = "LOGGER_SIMPLE_APP_ID"
API_KEY_ENV_VAR: str = "LOGGER_SIMPLE_API_KEY"
