from datetime import date, datetime

from pysolaredge.enums import MeterType, TimeUnit
from pysolaredge.params import (EnergyRequestParameter, SiteRequestParameter, SiteStatus, SortOrder, SortProperty,
                                date_window, image_params, meter_filter, time_window)


def test_site_request_parameter_empty():
    assert SiteRequestParameter().query_items() == []


def test_site_request_parameter_all_fields_in_order():
    parameter = SiteRequestParameter(size=10, start_index=20, search_text="roof", sort_property=SortProperty.PEAK_POWER,
                                     sort_order=SortOrder.REVERSE, status=SiteStatus.ACTIVE)
    assert parameter.query_items() == [
        ("size", "10"),
        ("startIndex", "20"),
        ("searchText", "roof"),
        ("sortProperty", "peakPower"),
        ("sortOrder", "DESC"),
        ("status", "active"),
    ]


def test_site_request_parameter_partial():
    parameter = SiteRequestParameter(sort_order=SortOrder.FORWARD, start_index=0)
    assert parameter.query_items() == [("startIndex", "0"), ("sortOrder", "ASC")]


def test_energy_request_parameter():
    parameter = EnergyRequestParameter(date(2023, 1, 1), date(2023, 1, 31), TimeUnit.HOUR)
    assert parameter.query_items() == [("startDate", "2023-01-01"), ("endDate", "2023-01-31"),
                                       ("timeUnit", "HOUR")]


def test_energy_request_parameter_default_unit():
    assert EnergyRequestParameter(date(2023, 1, 1), date(2023, 1, 2)).query_items()[-1] == ("timeUnit", "DAY")


def test_time_window():
    assert time_window(datetime(2023, 8, 1), datetime(2023, 8, 1, 23, 59, 59)) == [
        ("startTime", "2023-08-01 00:00:00"),
        ("endTime", "2023-08-01 23:59:59"),
    ]


def test_date_window():
    assert date_window(date(2023, 8, 1), date(2023, 8, 2)) == [("startDate", "2023-08-01"),
                                                               ("endDate", "2023-08-02")]


def test_meter_filter_stable_order():
    expected = [("meters", "Consumption,Production")]
    assert meter_filter({MeterType.PRODUCTION, MeterType.CONSUMPTION}) == expected
    assert meter_filter([MeterType.CONSUMPTION, MeterType.PRODUCTION]) == expected
    assert meter_filter([MeterType.PRODUCTION, MeterType.CONSUMPTION]) == expected


def test_meter_filter_omitted():
    assert meter_filter(None) == []
    assert meter_filter(set()) == []


def test_image_params():
    assert image_params() == []
    assert image_params(max_width=100, hash=123) == [("maxWidth", "100"), ("hash", "123")]
    assert image_params(100, 200, 7) == [("maxWidth", "100"), ("maxHeight", "200"), ("hash", "7")]
