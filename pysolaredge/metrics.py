# pySolarEdge - Derived Metrics
# -*- coding: utf-8 -*-
"""
 Pure functions computing derived values from decoded models.

 Functions:
    round_half_away(value)             - Round to the nearest int, halves away from zero
    first_meter(meters, meter_type)    - First meter of the given type or None
    meter_total(meter)                 - Sum of the non-null values of a meter
    percentage(numerator, denominator) - Whole percentage or None
    is_power_imported(connections)     - Any grid -> load connection
    is_power_exported(connections)     - Any load -> grid connection
    compare_is_power_imported(pv, load) - pv output below load consumption
    compare_is_power_exported(pv, load) - pv output above load consumption
    power_when(flag, grid)             - grid current power if flag else None
    describe_value(value)              - Human readable number or None
"""

import math
from typing import Iterable, Optional

from pysolaredge.enums import ConnectionPoint, MeterType


def round_half_away(value: float) -> int:
    return int(math.copysign(math.floor(abs(value) + 0.5), value))


def first_meter(meters: Iterable, meter_type: MeterType):
    for meter in meters:
        if meter.type == meter_type:
            return meter
    return None


def meter_total(meter) -> Optional[float]:
    # A missing meter has no total, which is not the same as a total of zero
    if meter is None:
        return None
    return float(sum(point.value for point in meter.values if point.value is not None))


def percentage(numerator: Optional[float], denominator: Optional[float]) -> Optional[int]:
    if numerator is None or denominator is None:
        return None
    if denominator <= 0:
        return None
    return round_half_away(numerator / denominator * 100)


# Power flow: connection based

def is_power_imported(connections: Iterable) -> bool:
    return any(c.from_ == ConnectionPoint.GRID and c.to == ConnectionPoint.LOAD for c in connections)


def is_power_exported(connections: Iterable) -> bool:
    return any(c.from_ == ConnectionPoint.LOAD and c.to == ConnectionPoint.GRID for c in connections)


# Power flow: magnitude comparison (monitoring currentPowerFlow)

def compare_is_power_imported(pv, load) -> bool:
    return pv.current_power < load.current_power


def compare_is_power_exported(pv, load) -> bool:
    return pv.current_power > load.current_power


def power_when(flag: bool, grid) -> Optional[float]:
    if not flag:
        return None
    return grid.current_power


def describe_value(value: Optional[float]) -> Optional[str]:
    if value is None:
        return None
    return f"{value:,.3f}".rstrip("0").rstrip(".")
