"""Payloads of the public monitoring API (monitoringapi.solaredge.com)."""
from typing import Dict, List, Optional

from pydantic import Field

from pysolaredge import metrics
from pysolaredge.models.base import ApiModel, DateTime, LooseDate, LenientTimeUnit
from pysolaredge.models.common import StrictDataPoint


# Sites

class Location(ApiModel):
    country: Optional[str] = None
    state: Optional[str] = None
    city: Optional[str] = None
    address: Optional[str] = None
    address2: Optional[str] = None
    zip: Optional[str] = None
    time_zone: Optional[str] = None
    country_code: Optional[str] = None


class PrimaryModule(ApiModel):
    manufacturer_name: Optional[str] = None
    model_name: Optional[str] = None
    maximum_power: Optional[float] = None
    temperature_coef: Optional[float] = None


class PublicSettings(ApiModel):
    is_public: Optional[bool] = None
    name: Optional[str] = None


class Site(ApiModel):
    id: int
    name: str
    account_id: Optional[int] = None
    status: Optional[str] = None
    peak_power: Optional[float] = None
    last_update_time: LooseDate = None
    installation_date: LooseDate = None
    pto_date: LooseDate = None
    currency: Optional[str] = None
    notes: Optional[str] = None
    type: Optional[str] = None
    location: Optional[Location] = None
    primary_module: Optional[PrimaryModule] = None
    uris: Dict[str, str] = Field(default_factory=dict)
    public_settings: Optional[PublicSettings] = None


class SiteList(ApiModel):
    count: int
    site: List[Site]


class DataPeriod(ApiModel):
    """First and last day with data. Either may be missing for a new site."""
    start_date: LooseDate = None
    end_date: LooseDate = None


# Energy and power

class Energy(ApiModel):
    time_unit: LenientTimeUnit
    unit: str
    values: List[StrictDataPoint]


class Power(ApiModel):
    time_unit: LenientTimeUnit
    unit: str
    values: List[StrictDataPoint]


class TimeFrameEnergy(ApiModel):
    energy: float
    unit: str

    def __str__(self):
        return f"{metrics.describe_value(self.energy)} {self.unit}"


class RevenueDataPoint(ApiModel):
    energy: float
    revenue: Optional[float] = None


class Overview(ApiModel):
    last_update_time: DateTime
    life_time_data: RevenueDataPoint
    # The vendor names these "last" but they cover the current year/month/day
    last_year_data: RevenueDataPoint
    last_month_data: RevenueDataPoint
    last_day_data: RevenueDataPoint
    current_power: Dict[str, float]
    measured_by: str


# Power flow (magnitude based)

class PowerFlowDetail(ApiModel):
    status: str
    current_power: float


class MonitoringPowerFlow(ApiModel):
    """
    The monitoring API's currentPowerFlow. It carries no connection list, so
    import/export is derived by comparing PV output with load consumption.
    """
    update_refresh_rate: int
    unit: str
    grid: PowerFlowDetail = Field(alias="GRID")
    load: PowerFlowDetail = Field(alias="LOAD")
    pv: PowerFlowDetail = Field(alias="PV")

    @property
    def is_power_imported(self) -> bool:
        return metrics.compare_is_power_imported(self.pv, self.load)

    @property
    def is_power_exported(self) -> bool:
        return metrics.compare_is_power_exported(self.pv, self.load)

    @property
    def current_imported_power(self) -> Optional[float]:
        return metrics.power_when(self.is_power_imported, self.grid)

    @property
    def current_exported_power(self) -> Optional[float]:
        return metrics.power_when(self.is_power_exported, self.grid)

    def __str__(self):
        if self.is_power_imported:
            direction = "importing"
        elif self.is_power_exported:
            direction = "exporting"
        else:
            direction = "balanced"
        return (f"Current power flow:\n"
                f"PV: {metrics.describe_value(self.pv.current_power)}{self.unit}\n"
                f"House uses: {metrics.describe_value(self.load.current_power)}{self.unit}\n"
                f"Grid: {metrics.describe_value(self.grid.current_power)}{self.unit}\n\n"
                f"{direction} {metrics.describe_value(self.grid.current_power)}{self.unit}")


# Equipment

class Component(ApiModel):
    name: str
    manufacturer: str
    model: str
    serial_number: str


class InventoryMeter(ApiModel):
    name: str
    manufacturer: Optional[str] = None
    model: Optional[str] = None
    firmware_version: str
    connected_to: str
    connected_solaredge_device_sn: str = Field(alias="connectedSolaredgeDeviceSN")
    type: str
    form: str
    serial_number: Optional[str] = Field(default=None, alias="SN")


class InventorySensor(ApiModel):
    connected_solaredge_device_sn: str = Field(alias="connectedSolaredgeDeviceSN")
    id: str
    connected_to: str
    category: str
    type: str


class InventoryGateway(ApiModel):
    name: str
    serial_number: str = Field(alias="SN")
    firmware_version: str


class InventoryBattery(ApiModel):
    name: str
    serial_number: str = Field(alias="SN")
    manufacturer: str
    model: str
    nameplate_capacity: str
    firmware_version: str
    connected_to: str
    connected_solaredge_device_sn: str = Field(alias="connectedSolaredgeDeviceSN")


class InventoryInverter(ApiModel):
    name: str
    manufacturer: str
    model: str
    communication_method: Optional[str] = None
    cpu_version: Optional[str] = None
    firmware_version: Optional[str] = None
    serial_number: str = Field(alias="SN")
    connected_optimizers: int


class Inventory(ApiModel):
    meters: List[InventoryMeter]
    sensors: List[InventorySensor]
    gateways: List[InventoryGateway]
    batteries: List[InventoryBattery]
    inverters: List[InventoryInverter]


class MeterDetail(ApiModel):
    meter_serial_number: str
    connected_solaredge_device_sn: str = Field(alias="connectedSolaredgeDeviceSN")
    model: str
    meter_type: str
    values: List[StrictDataPoint]


class MetersData(ApiModel):
    time_unit: str
    unit: str
    meters: List[MeterDetail]


# Environmental benefits (both APIs)

class GasEmissionSaved(ApiModel):
    units: str
    co2: float
    so2: float
    nox: float


class EnvironmentalBenefits(ApiModel):
    gas_emission_saved: GasEmissionSaved
    trees_planted: float
    light_bulbs: float
