import logging
from typing import Dict, List, Mapping, Optional, Type

from config import BACKEND, BACKEND_DEFAULT, properties_from_env

from .base import DB
from .basic_db import BasicDB

logger = logging.getLogger("BenchDBFactory")

_BACKENDS: Dict[str, Type[DB]] = {
    "basic": BasicDB,
}


class UnknownBackendError(ValueError):
    """Raised when no backend is registered under the requested name."""


def available_backends() -> List[str]:
    return sorted(_BACKENDS)


def create_db(name: str, properties: Optional[Mapping[str, str]] = None) -> DB:
    """
    Construct the backend registered under `name`.

    init() is not called here: the driver calls it on the worker thread
    that owns the instance.
    """
    backend_type = name.strip().lower()
    try:
        cls = _BACKENDS[backend_type]
    except KeyError:
        raise UnknownBackendError(
            f"Unknown DB backend: {name} (available: {', '.join(available_backends())})"
        ) from None
    logger.info(f"Initializing DB backend: {backend_type}")
    return cls(properties)


def create_db_from_env(environ: Optional[Mapping[str, str]] = None) -> DB:
    """Pick the backend from DB_BACKEND and hand it the BASICDB_* properties."""
    properties = properties_from_env(environ)
    return create_db(properties.get(BACKEND, BACKEND_DEFAULT), properties)
