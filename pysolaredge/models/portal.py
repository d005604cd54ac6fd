"""Payloads of the private consumer portal API (api.solaredge.com)."""
from typing import Any, Dict, List, Optional, Union

from bs4 import BeautifulSoup
from pydantic import Field, StrictInt, ValidationError

from pysolaredge import metrics
from pysolaredge.decoding import decode_json, describe_validation_error
from pysolaredge.exceptions import DecodingError
from pysolaredge.models.base import (ApiModel, Date, DateTimeOffset, DateTimeT, EpochMillis, StrictConnectionPoint,
                                     StrictConnectionStatus, StrictEnergyOverviewPeriod, StrictLoadType,
                                     StrictMeasurementUnit)


# Login

class PortalUser(ApiModel):
    email: Optional[str] = None
    locale: Optional[str] = None
    system_unit: Optional[str] = None
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    guid: Optional[str] = None


class LoginData(ApiModel):
    """
    Result of a successful login. `cookie` must be passed to every further
    portal call; `xml_user_data` is the <User> document the server answered with.
    """
    cookie: str
    xml_user_data: str

    def user(self) -> PortalUser:
        soup = BeautifulSoup(self.xml_user_data, "html.parser")

        # html.parser lower-cases tag names
        def text(tag):
            node = soup.find(tag)
            return node.get_text(strip=True) if node else None

        return PortalUser(email=text("email"), locale=text("locale"), system_unit=text("si"),
                          first_name=text("firstname"), last_name=text("lastname"), guid=text("guid"))


class DataAvailability(ApiModel):
    start_date: DateTimeOffset
    end_date: DateTimeOffset


# Power flow (connection based)

class Connection(ApiModel):
    from_: StrictConnectionPoint = Field(alias="from")
    to: StrictConnectionPoint

    @property
    def is_power_imported(self) -> bool:
        return metrics.is_power_imported([self])

    @property
    def is_power_exported(self) -> bool:
        return metrics.is_power_exported([self])


class ConnectionDetail(ApiModel):
    status: StrictConnectionStatus
    current_power: float


class PowerFlow(ApiModel):
    """The latest power flow. The vendor refreshes it about every 3 seconds."""
    update_refresh_rate: int
    unit: str
    load_type: StrictLoadType
    connections: List[Connection]
    grid: ConnectionDetail
    load: ConnectionDetail
    pv: ConnectionDetail
    storage: Optional[ConnectionDetail] = None
    ev_charger: Optional[ConnectionDetail] = None

    @property
    def is_power_imported(self) -> bool:
        return metrics.is_power_imported(self.connections)

    @property
    def is_power_exported(self) -> bool:
        return metrics.is_power_exported(self.connections)

    @property
    def current_imported_power(self) -> Optional[float]:
        return metrics.power_when(self.is_power_imported, self.grid)

    @property
    def current_exported_power(self) -> Optional[float]:
        return metrics.power_when(self.is_power_exported, self.grid)


# Measurements

class ProductionSummary(ApiModel):
    production_to_home: Optional[float] = None
    production_to_home_percentage: Optional[int] = None
    production_unknown: Optional[float] = None
    production_unknown_percentage: Optional[int] = None
    production_to_battery: Optional[float] = None
    production_to_battery_percentage: Optional[int] = None
    production_to_grid: Optional[float] = None
    production_to_grid_percentage: Optional[int] = None


class ConsumptionSummary(ApiModel):
    consumption_from_battery: Optional[float] = None
    consumption_from_battery_percentage: Optional[int] = None
    consumption_from_solar: Optional[float] = None
    consumption_from_solar_percentage: Optional[int] = None
    self_consumption: Optional[float] = None
    self_consumption_percentage: Optional[int] = None
    consumption_unknown: Optional[float] = None
    consumption_unknown_percentage: Optional[int] = None
    consumption_from_grid: Optional[float] = None
    consumption_from_grid_percentage: Optional[int] = None


class MeasurementSummary(ApiModel):
    measurement_unit: StrictMeasurementUnit
    production: float
    production_summary: ProductionSummary
    consumption: float
    consumption_summary: ConsumptionSummary


class MeasurementDataPoint(ApiModel):
    measurement_time: DateTimeT
    production: Optional[float] = None
    production_summary: ProductionSummary
    consumption: Optional[float] = None
    consumption_summary: ConsumptionSummary


class MeasurementDetail(ApiModel):
    measurement_unit: StrictMeasurementUnit
    measurements_list: List[MeasurementDataPoint]


class Measurement(ApiModel):
    summary: MeasurementSummary
    detail: MeasurementDetail = Field(alias="measurements")

    @property
    def measurement_unit(self):
        return self.detail.measurement_unit

    @property
    def measurements(self) -> List[MeasurementDataPoint]:
        return self.detail.measurements_list


class EnergyOverview(ApiModel):
    """Energy (Wh) produced in one of the dashboard periods."""
    time_period: StrictEnergyOverviewPeriod
    energy: float


# Energy compare

class EnergyCompareData(ApiModel):
    """
    x_axis is "01".."12" for months, "Q1".."Q4" for quarters or the years
    themselves. values maps a year to {x_axis entry: Wh}; entries may be
    missing, e.g. for months before the installation.
    """
    x_axis: List[str]
    values: Dict[str, Dict[str, StrictInt]]


class EnergyCompare(ApiModel):
    month: EnergyCompareData
    quarter: EnergyCompareData
    year: EnergyCompareData

    @classmethod
    def from_json(cls, payload: Any) -> "EnergyCompare":
        """
        The wire shape has no fixed schema: each section holds an "xAxis"
        list next to one key per year. Split those apart before validating.
        Accepts the response with or without its "energyCompare" envelope.
        """
        data = payload.get("energyCompare", payload) if isinstance(payload, dict) else None
        if not isinstance(data, dict) or not all(isinstance(data.get(k), dict)
                                                 for k in ("month", "quarter", "year")):
            raise DecodingError("Error with data from energyCompare")
        sections = {}
        for name in ("month", "quarter", "year"):
            section = dict(data[name])
            x_axis = section.pop("xAxis", None)
            try:
                sections[name] = EnergyCompareData(x_axis=x_axis, values=section)
            except ValidationError as exc:
                cause = describe_validation_error(EnergyCompareData, exc)
                raise DecodingError(f"Error with data from energyCompare in {name}: {cause}") from exc
        return cls(**sections)


def decode_energy_compare(body: Union[bytes, str, dict]) -> EnergyCompare:
    payload = decode_json(body) if isinstance(body, (bytes, str)) else body
    return EnergyCompare.from_json(payload)


# Layout

class CellularConnectionProperties(ApiModel):
    connection_type: str
    connectable: bool


class LayoutEnergy(ApiModel):
    """Energy of a single module, or of the whole site (then the module fields are missing)."""
    energy: float
    module_energy: Optional[float] = None
    unscaled_energy: Optional[float] = None
    units: str
    color: str
    group_color: Optional[str] = None
    cellular_connection_properties: Optional[CellularConnectionProperties] = None


class Rectangle(ApiModel):
    x: float
    y: float
    height: float
    width: float
    azimuth: float


class Module(ApiModel):
    module_id: int
    row: int
    column: int
    id: int
    inverter_id: int


class ModuleGroup(ApiModel):
    id: int
    rectangle: Rectangle
    module_orientation: str
    module_tilt: float
    module_width: float
    module_height: float
    v_spacing: int = Field(alias="vSpacing")
    h_spacing: int = Field(alias="hSpacing")
    rows: int
    columns: int
    modules: List[Module]
    inverters_ids: List[int]
    num_of_optimizers: int


class Size(ApiModel):
    width: float
    height: float


class DimensionMap(ApiModel):
    inverter: Size = Field(alias="Inverter")
    module: Size = Field(alias="Module")
    smi: Size = Field(alias="SMI")


class SiteDimension(ApiModel):
    v_spacing: int = Field(alias="vSpacing")
    h_spacing: int = Field(alias="hSpacing")
    dimension_map: DimensionMap


class LayoutInverter(ApiModel):
    id: int
    type: str
    rectangle: Rectangle


class PhysicalLayout(ApiModel):
    """
    How the modules are drawn and grouped. Modules in one group should
    produce similar energy, which makes groups useful to spot failures.
    """
    field_id: int
    site_dimensions: SiteDimension
    groups: List[ModuleGroup]
    last_published: EpochMillis
    inverters: List[LayoutInverter]

    @property
    def group_ids(self) -> List[List[int]]:
        return [[module.id for module in group.modules] for group in self.groups]


class LogicalTreeChildData(ApiModel):
    id: int
    serial_number: Optional[str] = None
    name: str
    display_name: str
    relative_order: int
    type: str
    operations_key: int


class LogicalTreeChild(ApiModel):
    data: LogicalTreeChildData
    # May differ from len(child_ids)
    number_of_childs: int
    child_ids: List[int]
    children: List["LogicalTreeChild"]


class LogicalTree(ApiModel):
    data: Optional[LogicalTreeChildData] = None
    number_of_childs: int
    child_ids: List[int]
    children: List[LogicalTreeChild]


class LogicalLayout(ApiModel):
    site_id: int
    expanded: bool
    playback: bool
    has_physical: bool
    logical_tree: LogicalTree
    reporters_data: Dict[str, LayoutEnergy]


LogicalTreeChild.model_rebuild()


# Weather

class LiveWeather(ApiModel):
    latitude: float
    longitude: float
    weather_date: DateTimeOffset
    humidity: int
    current_temperature: float = Field(alias="currentTemp")
    wind_speed: float
    wind_direction: str
    feels_like_temperature: float = Field(alias="feelsLike")
    current_condition: str


class WeatherForecast(ApiModel):
    latitude: float
    longitude: float
    weather_date: Date
    temperature_high: float = Field(alias="tempHigh")
    temperature_low: float = Field(alias="tempLow")
    description: str


class SunTime(ApiModel):
    sunrise: DateTimeOffset = Field(alias="Sunrise")
    sunset: DateTimeOffset = Field(alias="Sunset")


class Weather(ApiModel):
    live_weather: LiveWeather
    weather_forecasts: List[WeatherForecast]
    sun_time: SunTime
    system_unit: str
