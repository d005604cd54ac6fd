# pySolarEdge - Request Parameters
# -*- coding: utf-8 -*-
"""
 Typed request parameters rendered to ordered query lists.

 Every helper returns a list of (name, value) string pairs which is handed
 to requests unchanged, so the order on the wire is the order below.

 Classes
    SiteRequestParameter(size, start_index, search_text, sort_property, sort_order, status)
    EnergyRequestParameter(start_date, end_date, time_unit)

 Functions
    time_window(start, end)                       - startTime / endTime
    date_window(start, end)                       - startDate / endDate
    meter_filter(meter_types)                     - meters=Production,Consumption
    image_params(max_width, max_height, hash)     - optional image query items
"""

import enum
from dataclasses import dataclass
from datetime import date, datetime
from typing import Iterable, List, Optional, Tuple

from pysolaredge.dates import DateFormat, format_date
from pysolaredge.enums import MeterType, TimeUnit

QueryItems = List[Tuple[str, str]]


class SortOrder(enum.Enum):
    FORWARD = "ASC"
    REVERSE = "DESC"


class SortProperty(enum.Enum):
    NAME = "name"
    COUNTRY = "country"
    STATE = "state"
    CITY = "city"
    ADDRESS = "address"
    ZIP = "zip"
    STATUS = "status"
    PEAK_POWER = "peakPower"
    INSTALLATION_DATE = "installationDate"
    AMOUNT = "amount"
    MAX_SEVERITY = "maxSeverity"
    CREATION_TIME = "creationTime"


class SiteStatus(enum.Enum):
    ACTIVE = "active"
    PENDING = "pending"
    DISABLED = "disabled"
    ALL = "all"


@dataclass(frozen=True)
class SiteRequestParameter:
    """Paging, search and sorting of /sites/list. Unset fields are left out of the query."""
    size: Optional[int] = None
    start_index: Optional[int] = None
    search_text: Optional[str] = None
    sort_property: Optional[SortProperty] = None
    sort_order: Optional[SortOrder] = None
    status: Optional[SiteStatus] = None

    def query_items(self) -> QueryItems:
        items = []
        if self.size is not None:
            items.append(("size", str(self.size)))
        if self.start_index is not None:
            items.append(("startIndex", str(self.start_index)))
        if self.search_text is not None:
            items.append(("searchText", self.search_text))
        if self.sort_property is not None:
            items.append(("sortProperty", self.sort_property.value))
        if self.sort_order is not None:
            items.append(("sortOrder", self.sort_order.value))
        if self.status is not None:
            items.append(("status", self.status.value))
        return items


@dataclass(frozen=True)
class EnergyRequestParameter:
    start_date: date
    end_date: date
    time_unit: TimeUnit = TimeUnit.DAY

    def query_items(self) -> QueryItems:
        return date_window(self.start_date, self.end_date) + [("timeUnit", self.time_unit.value)]


def time_window(start: datetime, end: datetime) -> QueryItems:
    return [("startTime", format_date(start, DateFormat.DATE_TIME)),
            ("endTime", format_date(end, DateFormat.DATE_TIME))]


def date_window(start: date, end: date) -> QueryItems:
    return [("startDate", format_date(start, DateFormat.DATE)),
            ("endDate", format_date(end, DateFormat.DATE))]


def meter_filter(meter_types: Optional[Iterable[MeterType]]) -> QueryItems:
    if not meter_types:
        return []
    wanted = set(meter_types)
    # Declaration order, so the same set always renders the same string
    names = [meter_type.value for meter_type in MeterType if meter_type in wanted]
    if not names:
        return []
    return [("meters", ",".join(names))]


def image_params(max_width: Optional[int] = None, max_height: Optional[int] = None,
                 hash: Optional[int] = None) -> QueryItems:
    items = []
    if max_width is not None:
        items.append(("maxWidth", str(max_width)))
    if max_height is not None:
        items.append(("maxHeight", str(max_height)))
    if hash is not None:
        items.append(("hash", str(hash)))
    return items
