from pysolaredge.models.base import ApiModel
from pysolaredge.models.common import (DataPoint, StrictDataPoint, Meter, StrictMeter, MeterSeries, EnergyDetail,
                                       PowerDetail, MonitoringEnergyDetail, MonitoringPowerDetail)
from pysolaredge.models.monitoring import (Site, SiteList, Location, PrimaryModule, PublicSettings, DataPeriod,
                                           Energy, Power, TimeFrameEnergy, Overview, RevenueDataPoint,
                                           MonitoringPowerFlow, PowerFlowDetail, Component, Inventory,
                                           InventoryMeter, InventorySensor, InventoryGateway, InventoryBattery,
                                           InventoryInverter, MetersData, MeterDetail, EnvironmentalBenefits,
                                           GasEmissionSaved)
from pysolaredge.models.portal import (LoginData, PortalUser, DataAvailability, PowerFlow, Connection,
                                       ConnectionDetail, Measurement, MeasurementSummary, MeasurementDetail,
                                       MeasurementDataPoint, ProductionSummary, ConsumptionSummary, EnergyOverview,
                                       EnergyCompare, EnergyCompareData, decode_energy_compare, LayoutEnergy,
                                       CellularConnectionProperties, PhysicalLayout, ModuleGroup, Module, Rectangle,
                                       SiteDimension, DimensionMap, Size, LayoutInverter, LogicalLayout, LogicalTree,
                                       LogicalTreeChild, LogicalTreeChildData, Weather, LiveWeather, WeatherForecast,
                                       SunTime)
