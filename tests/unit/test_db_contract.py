"""
Unit tests for services/storage/backends/base.py

The DB base class is the contract every backend implements.  These tests
cover the shared value types and the lifecycle defaults.
"""
import pytest
from backends.base import (
    ALL_FIELDS,
    DB,
    DataPoint,
    DataPointWithMetricID,
    Status,
)


class TestStatus:
    def test_ok_is_zero(self):
        assert Status.OK == 0

    def test_error_is_nonzero(self):
        assert Status.ERROR != 0


class TestDataPoints:
    def test_plain_point_str(self):
        assert str(DataPoint(timestamp=10, value=0.5)) == "10=0.5"

    def test_metric_point_str(self):
        p = DataPointWithMetricID(timestamp=10, value=0.5, metric_id="mem")
        assert str(p) == "mem@10=0.5"

    def test_metric_point_is_a_datapoint(self):
        assert isinstance(DataPointWithMetricID(timestamp=1, value=1.0, metric_id="x"), DataPoint)

    def test_points_are_immutable(self):
        p = DataPoint(timestamp=1, value=1.0)
        with pytest.raises(AttributeError):
            p.value = 2.0


class TestDBBase:
    def test_cannot_instantiate_abstract_base(self):
        with pytest.raises(TypeError):
            DB()

    def test_properties_are_copied(self):
        class NullDB(DB):
            def read(self, table, key, fields=ALL_FIELDS, result=None):
                return Status.OK

            def scan(self, table, start_key, record_count, fields=ALL_FIELDS, result=None):
                return Status.OK

            def update(self, table, key, values):
                return Status.OK

            def insert(self, table, key, values):
                return Status.OK

            def delete(self, table, key):
                return Status.OK

            def insert_datapoints(self, table, measurement, time_unit, datapoints):
                return Status.OK

            def scan_datapoints(self, table, key, field, start_time, end_time, time_unit, result=None):
                return Status.OK

        source = {"a": "1"}
        db = NullDB(source)
        source["a"] = "2"
        db.properties["a"] = "3"
        assert db.properties == {"a": "1"}
        # Lifecycle hooks default to no-ops
        db.init()
        db.cleanup()
