from types import SimpleNamespace

import pytest

from pysolaredge import metrics
from pysolaredge.enums import ConnectionPoint, MeterType


def connection(source, target):
    return SimpleNamespace(from_=source, to=target)


def detail(power):
    return SimpleNamespace(current_power=power)


@pytest.mark.parametrize("value,expected", [
    (0.5, 1),
    (1.5, 2),
    (2.5, 3),
    (-0.5, -1),
    (-2.5, -3),
    (33.3333, 33),
    (66.6666, 67),
    (0, 0),
])
def test_round_half_away(value, expected):
    assert metrics.round_half_away(value) == expected


@pytest.mark.parametrize("numerator,denominator,expected", [
    (25, 100, 25),
    (33, 100, 33),
    (1, 3, 33),
    (2, 3, 67),
    (1, 8, 13),
    (5, 0, None),
    (5, -1, None),
    (None, 100, None),
    (25, None, None),
])
def test_percentage(numerator, denominator, expected):
    assert metrics.percentage(numerator, denominator) == expected


def test_meter_total():
    meter = SimpleNamespace(values=[SimpleNamespace(value=1.5), SimpleNamespace(value=None),
                                    SimpleNamespace(value=2.0)])
    assert metrics.meter_total(meter) == 3.5
    assert metrics.meter_total(SimpleNamespace(values=[])) == 0.0
    assert metrics.meter_total(None) is None


def test_first_meter():
    a = SimpleNamespace(type=MeterType.PRODUCTION)
    b = SimpleNamespace(type=MeterType.PRODUCTION)
    meters = [SimpleNamespace(type=MeterType.CONSUMPTION), a, b]
    assert metrics.first_meter(meters, MeterType.PRODUCTION) is a
    assert metrics.first_meter(meters, MeterType.FEED_IN) is None


def test_connection_based_import_export():
    imported = [connection(ConnectionPoint.GRID, ConnectionPoint.LOAD)]
    exported = [connection(ConnectionPoint.LOAD, ConnectionPoint.GRID)]
    assert metrics.is_power_imported(imported)
    assert not metrics.is_power_exported(imported)
    assert metrics.is_power_exported(exported)
    assert not metrics.is_power_imported(exported)
    assert not metrics.is_power_imported([])
    assert not metrics.is_power_exported([])


def test_pv_to_load_is_neither():
    flow = [connection(ConnectionPoint.PV, ConnectionPoint.LOAD)]
    assert not metrics.is_power_imported(flow)
    assert not metrics.is_power_exported(flow)


@pytest.mark.parametrize("pv,load,imported,exported", [
    (5, 7, True, False),
    (7, 5, False, True),
    (5, 5, False, False),
])
def test_magnitude_based_import_export(pv, load, imported, exported):
    assert metrics.compare_is_power_imported(detail(pv), detail(load)) is imported
    assert metrics.compare_is_power_exported(detail(pv), detail(load)) is exported


def test_power_when():
    assert metrics.power_when(True, detail(2.5)) == 2.5
    assert metrics.power_when(False, detail(2.5)) is None


@pytest.mark.parametrize("value,expected", [
    (1234.5, "1,234.5"),
    (1000.0, "1,000"),
    (0.1234, "0.123"),
    (None, None),
])
def test_describe_value(value, expected):
    assert metrics.describe_value(value) == expected
