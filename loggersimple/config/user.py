"""
Logger-Simple Configuration File Model
======================================

Pydantic model for the Logger-Simple TOML configuration file

"""

import functools
import logging
import os
import pathlib

import pydantic
import toml

import loggersimple.utilities as ls_util
from loggersimple.config.files import (
    API_KEY_ENV_VAR,
    APP_ID_ENV_VAR,
    CONFIG_FILE_NAMES,
)
from loggersimple.models import Credentials, HeartbeatConfig

logger = logging.getLogger(__name__)


class ClientGeneralOptions(pydantic.BaseModel):
    debug: bool = False


class LoggerSimpleConfiguration(pydantic.BaseModel):
    # Hide values as they contain the API key
    model_config = pydantic.ConfigDict(hide_input_in_errors=True)
    client: ClientGeneralOptions = ClientGeneralOptions()
    credentials: Credentials = pydantic.Field(
        ..., description="Credentials for the Logger-Simple application"
    )
    heartbeat: HeartbeatConfig = HeartbeatConfig()

    @classmethod
    def _load_pyproject_configs(cls) -> dict | None:
        """Recover any non-authentication configurations from pyproject.toml"""
        _pyproject_toml = ls_util.find_first_instance_of_file(
            file_names=["pyproject.toml"], check_user_space=False
        )

        if not _pyproject_toml:
            return None

        _project_data = toml.load(_pyproject_toml)

        if not (_setup := _project_data.get("tool", {}).get("loggersimple")):
            return None

        # Do not allow reading of credentials within a project file
        if _setup.get("credentials"):
            raise RuntimeError(
                "Provision of Logger-Simple credentials in pyproject.toml is not allowed."
            )

        return _setup

    @classmethod
    @ls_util.prettify_pydantic
    def fetch(
        cls,
        app_id: str | None = None,
        api_key: str | None = None,
        heartbeat_interval_ms: int | None = None,
    ) -> "LoggerSimpleConfiguration":
        """Retrieve the Logger-Simple configuration for this project

        Parameters
        ----------
        app_id : str, optional
            override the application identifier used for this session
        api_key : str, optional
            override the API key used for this session
        heartbeat_interval_ms : int, optional
            override the heartbeat interval used for this session

        Return
        ------
        LoggerSimpleConfiguration
            object containing configurations

        """
        _config_dict: dict[str, dict] = cls._load_pyproject_configs() or {}

        try:
            _config_dict |= toml.load(cls.config_file())
        except FileNotFoundError:
            logger.debug("No config file found, checking environment variables")

        _config_dict["credentials"] = _config_dict.get("credentials", {})
        _config_dict["heartbeat"] = _config_dict.get("heartbeat", {})

        # Ranking of configurations for credentials is:
        # Logger Definition > Environment Variables > Configuration File

        _app_id = (
            app_id
            or os.environ.get(APP_ID_ENV_VAR)
            or _config_dict["credentials"].get("app_id")
        )
        _api_key = (
            api_key
            or os.environ.get(API_KEY_ENV_VAR)
            or _config_dict["credentials"].get("api_key")
        )

        if not _app_id:
            raise RuntimeError("No application identifier was specified")

        if not _api_key:
            raise RuntimeError("No API key was specified")

        _config_dict["credentials"] = {"app_id": _app_id, "api_key": _api_key}

        if heartbeat_interval_ms is not None:
            _config_dict["heartbeat"]["interval_ms"] = heartbeat_interval_ms

        return LoggerSimpleConfiguration(**_config_dict)

    @classmethod
    @functools.lru_cache
    def config_file(cls) -> pathlib.Path:
        """Returns the path of top level configuration file used for the session"""
        _config_file: pathlib.Path | None = ls_util.find_first_instance_of_file(
            CONFIG_FILE_NAMES, check_user_space=True
        )

        if not _config_file:
            raise FileNotFoundError("Failed to find Logger-Simple configuration file")

        return _config_file
