"""
Configuration for the BasicDB storage adapter.

Properties are plain string key/value pairs handed to each adapter at
construction.  The driver usually builds them from the environment:

    BASICDB_VERBOSE          bool  default true   -> basicdb.verbose
    BASICDB_SIMULATEDELAY    int   default 0 (ms) -> basicdb.simulatedelay
    BASICDB_RANDOMIZEDELAY   bool  default true   -> basicdb.randomizedelay
    DB_BACKEND               str   default basic  -> db
"""
import logging
import os
from dataclasses import dataclass
from typing import Dict, Mapping, Optional

from dotenv import load_dotenv

logger = logging.getLogger("BenchConfig")

VERBOSE = "basicdb.verbose"
VERBOSE_DEFAULT = "true"

SIMULATE_DELAY = "basicdb.simulatedelay"
SIMULATE_DELAY_DEFAULT = "0"

RANDOMIZE_DELAY = "basicdb.randomizedelay"
RANDOMIZE_DELAY_DEFAULT = "true"

BACKEND = "db"
BACKEND_DEFAULT = "basic"

_ENV_KEYS = {
    "BASICDB_VERBOSE": VERBOSE,
    "BASICDB_SIMULATEDELAY": SIMULATE_DELAY,
    "BASICDB_RANDOMIZEDELAY": RANDOMIZE_DELAY,
    "DB_BACKEND": BACKEND,
}


class ConfigError(ValueError):
    """Raised when a property value cannot be used."""


def parse_bool(value: str) -> bool:
    # Only "true" (any case) is true; everything else is false.
    return str(value).strip().lower() == "true"


@dataclass(frozen=True)
class BasicDBConfig:
    verbose: bool = True
    delay_ms: int = 0
    randomize_delay: bool = True

    @classmethod
    def from_properties(cls, properties: Optional[Mapping[str, str]]) -> "BasicDBConfig":
        props = properties or {}
        raw_delay = props.get(SIMULATE_DELAY, SIMULATE_DELAY_DEFAULT)
        try:
            delay_ms = int(str(raw_delay).strip())
        except ValueError:
            raise ConfigError(f"{SIMULATE_DELAY} must be an integer, got {raw_delay!r}") from None
        if delay_ms < 0:
            raise ConfigError(f"{SIMULATE_DELAY} must be >= 0, got {delay_ms}")

        return cls(
            verbose=parse_bool(props.get(VERBOSE, VERBOSE_DEFAULT)),
            delay_ms=delay_ms,
            randomize_delay=parse_bool(props.get(RANDOMIZE_DELAY, RANDOMIZE_DELAY_DEFAULT)),
        )


def properties_from_env(
    environ: Optional[Mapping[str, str]] = None,
    dotenv_path: Optional[str] = None,
) -> Dict[str, str]:
    """
    Build an adapter property dict from environment variables.

    A .env file is loaded first (for local dev) unless an explicit environ
    mapping is given.  Unset variables are left out so that the adapter
    defaults apply.
    """
    if environ is None:
        load_dotenv(dotenv_path)
        environ = os.environ

    properties = {}
    for env_key, prop_key in _ENV_KEYS.items():
        value = environ.get(env_key)
        if value is not None:
            properties[prop_key] = value
    logger.debug(f"Resolved properties from environment: {properties}")
    return properties
