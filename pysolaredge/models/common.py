"""Meter series shared by the energy and power detail endpoints."""
from typing import List, Optional

from pysolaredge import metrics
from pysolaredge.enums import MeterType
from pysolaredge.models.base import (ApiModel, DateTime, PermissiveDateTime, LenientMeterType,
                                     LenientTimeUnit)


class DataPoint(ApiModel):
    """A single sample. An unparsable date becomes DISTANT_PAST instead of failing the list."""
    date: PermissiveDateTime
    value: Optional[float] = None


class StrictDataPoint(ApiModel):
    """A single sample whose date must parse."""
    date: DateTime
    value: Optional[float] = None


class Meter(ApiModel):
    type: LenientMeterType
    values: List[DataPoint]


class MeterSeries(ApiModel):
    """Per-meter time series with the derived totals and shares used by the dashboards."""
    time_unit: LenientTimeUnit
    unit: str
    meters: List[Meter]

    @property
    def purchased(self) -> Optional[Meter]:
        return metrics.first_meter(self.meters, MeterType.PURCHASED)

    @property
    def feed_in(self) -> Optional[Meter]:
        return metrics.first_meter(self.meters, MeterType.FEED_IN)

    @property
    def self_consumption(self) -> Optional[Meter]:
        return metrics.first_meter(self.meters, MeterType.SELF_CONSUMPTION)

    @property
    def production(self) -> Optional[Meter]:
        return metrics.first_meter(self.meters, MeterType.PRODUCTION)

    @property
    def consumption(self) -> Optional[Meter]:
        return metrics.first_meter(self.meters, MeterType.CONSUMPTION)

    # Totals
    @property
    def purchased_total_value(self) -> Optional[float]:
        return metrics.meter_total(self.purchased)

    @property
    def feed_in_total_value(self) -> Optional[float]:
        return metrics.meter_total(self.feed_in)

    @property
    def self_consumption_total_value(self) -> Optional[float]:
        return metrics.meter_total(self.self_consumption)

    @property
    def production_total_value(self) -> Optional[float]:
        return metrics.meter_total(self.production)

    @property
    def consumption_total_value(self) -> Optional[float]:
        return metrics.meter_total(self.consumption)

    # Percentages, whole numbers between 0 and 100
    @property
    def feed_in_percentage(self) -> Optional[int]:
        """Share of the production that was fed into the grid."""
        return metrics.percentage(self.feed_in_total_value, self.production_total_value)

    @property
    def self_usage_percentage(self) -> Optional[int]:
        """Share of the production that was used on site."""
        return metrics.percentage(self.self_consumption_total_value, self.production_total_value)

    @property
    def purchased_percentage(self) -> Optional[int]:
        """Share of the consumption that was bought from the grid."""
        return metrics.percentage(self.purchased_total_value, self.consumption_total_value)

    @property
    def self_consumption_percentage(self) -> Optional[int]:
        """Share of the consumption that was covered by own production."""
        return metrics.percentage(self.self_consumption_total_value, self.consumption_total_value)

    # Formatted totals
    @property
    def purchased_total_value_description(self) -> Optional[str]:
        return metrics.describe_value(self.purchased_total_value)

    @property
    def feed_in_total_value_description(self) -> Optional[str]:
        return metrics.describe_value(self.feed_in_total_value)

    @property
    def self_consumption_total_value_description(self) -> Optional[str]:
        return metrics.describe_value(self.self_consumption_total_value)

    @property
    def production_total_value_description(self) -> Optional[str]:
        return metrics.describe_value(self.production_total_value)

    @property
    def consumption_total_value_description(self) -> Optional[str]:
        return metrics.describe_value(self.consumption_total_value)


class PowerDetail(MeterSeries):
    pass


class EnergyDetail(MeterSeries):
    pass


# The monitoring detail endpoints reject unparsable dates

class StrictMeter(Meter):
    values: List[StrictDataPoint]


class MonitoringPowerDetail(PowerDetail):
    meters: List[StrictMeter]


class MonitoringEnergyDetail(EnergyDetail):
    meters: List[StrictMeter]
