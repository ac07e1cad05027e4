"""Configuration loading for the weather station demo.

A YAML file is read with PyYAML, merged over DEFAULT_CONFIG with OmegaConf and
validated against SCHEMA. Only the keys to override need to be present:

    station:
      fail_fast: true
    demo:
      readings:
        - {temperature: 18.5, humidity: 40.0}
      remove_display: humidity
"""

import logging
import os
from typing import List, Optional

import yaml
from omegaconf import OmegaConf
from omegaconf.errors import OmegaConfBaseException
from pydantic import BaseModel, Field, ValidationError

from weather_station.measurement import STANDARD_PRESSURE_HPA
from weather_station.utils.exceptions import ConfigError

DISPLAY_NAMES = ("temperature", "humidity")

DEFAULT_CONFIG = {
    "station": {
        "fail_fast": False,
    },
    "logging": {
        "level": "INFO",
        "format": "%(asctime)s %(levelname)s [%(name)s] %(message)s",
    },
    "demo": {
        "readings": [
            {"temperature": 25.0, "humidity": 65.0, "pressure": 1013.0},
            {"temperature": 27.5, "humidity": 60.0},
        ],
        "remove_display": None,
    },
}

CONFIG_HELP = {
    "station": {
        "fail_fast": "Stop a notification cycle at the first failing observer instead of notifying the rest.",
    },
    "logging": {
        "level": "Log level name (DEBUG, INFO, WARNING, ERROR).",
        "format": "Format string passed to logging.basicConfig.",
    },
    "demo": {
        "readings": f"List of readings to push. 'pressure' is optional and defaults to {STANDARD_PRESSURE_HPA} hPa.",
        "remove_display": "Display to unregister after the first reading: 'temperature', 'humidity' or null.",
    },
}

CONFIG_EXAMPLE = {
    "station": {
        "fail_fast": False,
    },
    "logging": {
        "level": "INFO",
    },
    "demo": {
        "readings": [
            {"temperature": 10.0, "humidity": 50.0},
            {"temperature": 99.0, "humidity": 99.0, "pressure": 1000.0},
        ],
        "remove_display": "temperature",
    },
}


class _Station(BaseModel):
    fail_fast: bool = Field(False, description="Abort notification at the first failing observer.")


class _Logging(BaseModel):
    level: str = Field("INFO", description="Log level name.")
    format: str = Field(..., description="Format string for log records.")


class _Reading(BaseModel):
    temperature: float = Field(..., description="Temperature in degrees Celsius.")
    humidity: float = Field(..., description="Relative humidity in percent.")
    pressure: Optional[float] = Field(None, description="Pressure in hPa.")


class _Demo(BaseModel):
    readings: List[_Reading] = Field(..., description="Readings pushed to the station in order.")
    remove_display: Optional[str] = Field(None, description="Display removed after the first reading.")


class SCHEMA(BaseModel):
    station: _Station = Field(..., description="Weather station settings.")
    logging: _Logging = Field(..., description="Logging settings.")
    demo: _Demo = Field(..., description="Demo run settings.")


def load_config(path: str = None) -> dict:
    """
    Load, merge and validate a configuration file.

    Args:
        path (str, optional): Path to a YAML file. Defaults only when omitted.

    Returns:
        dict: The merged configuration, converted to the types declared in SCHEMA.

    Raises:
        ConfigError: If the file is missing, is not a mapping or fails validation.
    """
    user_config = {}
    if path is not None:
        if not os.path.isfile(path):
            raise ConfigError(f"Configuration file not found: {path}")
        with open(path, 'r') as file:
            try:
                user_config = yaml.safe_load(file) or {}
            except yaml.YAMLError as e:
                raise ConfigError(f"Could not parse {path}: {e}") from e
        if not isinstance(user_config, dict):
            raise ConfigError(f"Configuration in {path} must be a mapping, got {type(user_config).__name__}")

    try:
        cfg = OmegaConf.merge(OmegaConf.create(DEFAULT_CONFIG), OmegaConf.create(user_config))
    except OmegaConfBaseException as e:
        raise ConfigError(f"Invalid configuration: {e}") from e
    config = OmegaConf.to_container(cfg, resolve=True)

    return validate_config(config)


def validate_config(config: dict) -> dict:
    """
    Validate a merged configuration and return it with values converted to the
    types declared in SCHEMA (e.g. a quoted "false" becomes False).
    """
    try:
        config = SCHEMA(**config).model_dump()
    except ValidationError as e:
        raise ConfigError(f"Invalid configuration: {e}") from e

    remove_display = config["demo"].get("remove_display")
    if remove_display is not None and remove_display not in DISPLAY_NAMES:
        raise ConfigError(f"Invalid display to remove: {remove_display}. Supported: {', '.join(DISPLAY_NAMES)}")

    level = config["logging"]["level"]
    if not isinstance(logging.getLevelName(level.upper()), int):
        raise ConfigError(f"Invalid log level: {level}")

    return config
