import logging
import random
from typing import Dict, Iterable, List, Mapping, Optional, Set

from config import BasicDBConfig
from simulation.latency import LatencySimulator

from .base import ALL_FIELDS, DB, DataPoint, DataPointWithMetricID, Status, TimeUnit, Value

logger = logging.getLogger("BenchBasicDB")

_ALL_FIELDS_MARKER = "<all fields>"
_BANNER = "*" * 17


def _display(value: Value) -> str:
    if isinstance(value, (bytes, bytearray)):
        return bytes(value).decode("utf-8", errors="replace")
    return str(value)


def _bracket(items: Iterable[str]) -> str:
    return "[ " + "".join(f"{item} " for item in items) + "]"


def _field_list(fields: Optional[Set[str]]) -> str:
    if fields is ALL_FIELDS:
        return _bracket([_ALL_FIELDS_MARKER])
    return _bracket(fields)


def _value_list(values: Optional[Mapping[str, Value]]) -> str:
    return _bracket(f"{k}={_display(v)}" for k, v in (values or {}).items())


class BasicDB(DB):
    """
    Backend that logs the requested operations instead of running them
    against a database.

    Useful for validating a workload driver (request shaping, timing,
    concurrency) without a live datastore.  Every call sleeps for the
    configured simulated latency, optionally logs a trace line and returns
    Status.OK.  Nothing is stored and result containers stay empty.

    Trace lines and the init() property dump go to the "BenchBasicDB"
    logger at INFO.  Without a handler attached (logging.basicConfig or
    similar) Python drops INFO records, so verbose mode prints nothing.
    """

    def __init__(self, properties: Optional[Mapping[str, str]] = None, rng: Optional[random.Random] = None):
        super().__init__(properties)
        self._rng = rng or random.Random()
        self.config = BasicDBConfig()
        self.latency = LatencySimulator(delay_ms=0, rng=self._rng)

    def init(self) -> None:
        self.config = BasicDBConfig.from_properties(self._properties)
        self.latency = LatencySimulator(
            delay_ms=self.config.delay_ms,
            randomize=self.config.randomize_delay,
            rng=self._rng,
        )

        if self.config.verbose:
            logger.info(f"{_BANNER} properties {_BANNER}")
            for key, value in self._properties.items():
                logger.info(f'"{key}"="{value}"')
            logger.info("*" * 46)

    def interrupt(self) -> None:
        """Cut the current (or next) simulated delay short."""
        self.latency.interrupt()

    def _delay(self) -> None:
        self.latency.delay()

    def _trace(self, line: str) -> None:
        if self.config.verbose:
            logger.info(line)

    def read(self, table: str, key: str, fields: Optional[Set[str]] = ALL_FIELDS,
             result: Optional[Dict[str, Value]] = None) -> Status:
        self._delay()
        self._trace(f"READ {table} {key} {_field_list(fields)}")
        return Status.OK

    def scan(self, table: str, start_key: str, record_count: int,
             fields: Optional[Set[str]] = ALL_FIELDS,
             result: Optional[List[Dict[str, Value]]] = None) -> Status:
        self._delay()
        self._trace(f"SCAN {table} {start_key} {record_count} {_field_list(fields)}")
        return Status.OK

    def update(self, table: str, key: str, values: Mapping[str, Value]) -> Status:
        self._delay()
        self._trace(f"UPDATE {table} {key} {_value_list(values)}")
        return Status.OK

    def insert(self, table: str, key: str, values: Mapping[str, Value]) -> Status:
        self._delay()
        self._trace(f"INSERT {table} {key} {_value_list(values)}")
        return Status.OK

    def delete(self, table: str, key: str) -> Status:
        self._delay()
        self._trace(f"DELETE {table} {key}")
        return Status.OK

    def insert_datapoints(self, table: str, measurement: str, time_unit: TimeUnit,
                          datapoints: Optional[List[DataPointWithMetricID]]) -> Status:
        self._delay()
        points = "[" + ", ".join(str(p) for p in datapoints or []) + "]"
        self._trace(f"INSERT datapoints {table} {measurement} {points}")
        return Status.OK

    def scan_datapoints(self, table: str, key: str, field: str,
                        start_time: int, end_time: int, time_unit: TimeUnit,
                        result: Optional[List[DataPoint]] = None) -> Status:
        self._delay()
        self._trace(f"SCAN datapoints {table} {key} {field} from {start_time} to {end_time}")
        return Status.OK
