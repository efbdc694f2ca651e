from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum, IntEnum
from typing import Dict, List, Mapping, Optional, Set, Union

Value = Union[bytes, str]

# Passed as `fields` to request every field of a record.
ALL_FIELDS = None


class Status(IntEnum):
    OK = 0
    ERROR = -1


class TimeUnit(Enum):
    NANOSECONDS = 1
    MICROSECONDS = 1_000
    MILLISECONDS = 1_000_000
    SECONDS = 1_000_000_000
    MINUTES = 60 * 1_000_000_000
    HOURS = 3600 * 1_000_000_000
    DAYS = 86400 * 1_000_000_000


@dataclass(frozen=True)
class DataPoint:
    """A single time-series sample."""
    timestamp: int
    value: float

    def __str__(self):
        return f"{self.timestamp}={self.value}"


@dataclass(frozen=True)
class DataPointWithMetricID(DataPoint):
    """A sample tagged with the metric it belongs to, as written by insert_datapoints."""
    metric_id: str = ""

    def __str__(self):
        return f"{self.metric_id}@{self.timestamp}={self.value}"


class DB(ABC):
    """
    Abstract Base Class for storage backends driven by the benchmark.

    One instance is created per worker thread.  Properties are handed in at
    construction; init() and cleanup() run once on that worker's thread.
    Every operation returns a Status and reports expected failures through
    it rather than raising.
    """

    def __init__(self, properties: Optional[Mapping[str, str]] = None):
        self._properties = dict(properties or {})

    @property
    def properties(self) -> Dict[str, str]:
        return dict(self._properties)

    def init(self) -> None:
        """Set up any per-instance state (connections, parsed settings)."""

    def cleanup(self) -> None:
        """Release per-instance state.  Called once when the worker finishes."""

    @abstractmethod
    def read(self, table: str, key: str, fields: Optional[Set[str]] = ALL_FIELDS,
             result: Optional[Dict[str, Value]] = None) -> Status:
        """
        Read one record.

        Args:
            table: Table name.
            key: Record key.
            fields: Field names to read, or ALL_FIELDS.
            result: Filled with field -> value pairs.
        """
        pass

    @abstractmethod
    def scan(self, table: str, start_key: str, record_count: int,
             fields: Optional[Set[str]] = ALL_FIELDS,
             result: Optional[List[Dict[str, Value]]] = None) -> Status:
        """
        Read up to record_count records in key order, starting at start_key.

        Args:
            result: One field -> value dict is appended per record.
        """
        pass

    @abstractmethod
    def update(self, table: str, key: str, values: Mapping[str, Value]) -> Status:
        """Write values into an existing record, overwriting fields with the same name."""
        pass

    @abstractmethod
    def insert(self, table: str, key: str, values: Mapping[str, Value]) -> Status:
        """Insert a new record."""
        pass

    @abstractmethod
    def delete(self, table: str, key: str) -> Status:
        pass

    @abstractmethod
    def insert_datapoints(self, table: str, measurement: str, time_unit: TimeUnit,
                          datapoints: List[DataPointWithMetricID]) -> Status:
        """Append time-series samples to a measurement."""
        pass

    @abstractmethod
    def scan_datapoints(self, table: str, key: str, field: str,
                        start_time: int, end_time: int, time_unit: TimeUnit,
                        result: Optional[List[DataPoint]] = None) -> Status:
        """
        Range query over [start_time, end_time] expressed in time_unit.

        Args:
            result: Matching samples are appended in timestamp order.
        """
        pass
