import logging
from datetime import date, datetime
from typing import Iterable, List, Optional, Tuple, Union

from pysolaredge.decoding import decode_json, decode_model, unwrap
from pysolaredge.decorators import none_on_status
from pysolaredge.enums import MeterType, SystemUnit, TimeUnit
from pysolaredge.exceptions import DecodingError
from pysolaredge.models import (Component, DataPeriod, Energy, EnvironmentalBenefits, Inventory, MonitoringEnergyDetail,
                                MetersData, MonitoringPowerDetail, MonitoringPowerFlow, Overview, Power, Site, SiteList,
                                TimeFrameEnergy)
from pysolaredge.params import (EnergyRequestParameter, SiteRequestParameter, date_window, image_params,
                                meter_filter, time_window)
from pysolaredge.pysolaredge_base import PySolarEdgeBase

log = logging.getLogger(__name__)

MONITORING_URL = "https://monitoringapi.solaredge.com"
USER_AGENT = "SolarEdge Monitoring API for Python"


class PySolarEdgeMonitoring(PySolarEdgeBase):
    """
    Client of the public SolarEdge monitoring API.

    Every call takes the `api_key` of the account. The vendor allows 300
    requests per day and key; nothing here caches or throttles.
    """
    name = "monitoring"

    def __init__(self, timeout: Union[int, float, Tuple[int, int]] = 10, poolmaxsize: int = 10,
                 user_agent: str = USER_AGENT, base_url: str = MONITORING_URL):
        super().__init__(base_url, timeout=timeout, poolmaxsize=poolmaxsize, user_agent=user_agent)

    def headers(self, **kwargs):
        return {"User-Agent": self.user_agent}

    @staticmethod
    def _query(api_key: str, *items) -> list:
        query = [("api_key", api_key)]
        for item in items:
            query.extend(item)
        return query

    # Sites

    def sites(self, api_key: str, request_parameter: Optional[SiteRequestParameter] = None) -> List[Site]:
        """All sites of the account, optionally filtered, sorted and paged."""
        extra = request_parameter.query_items() if request_parameter else []
        site_list = self.fetch_model(SiteList, "/sites/list", params=self._query(api_key, extra),
                                     envelope="sites")
        return site_list.site

    def site_detail(self, site_id: int, api_key: str) -> Site:
        return self.fetch_model(Site, f"/site/{site_id}/details", params=self._query(api_key),
                                envelope="details")

    def site_data_period(self, site_id: int, api_key: str) -> DataPeriod:
        """First and last day the site produced data. Both are None for a site that never did."""
        return self.fetch_model(DataPeriod, f"/site/{site_id}/dataPeriod", params=self._query(api_key),
                                envelope="dataPeriod")

    # Energy and power

    def energy(self, site_id: int, energy_parameter: EnergyRequestParameter, api_key: str) -> Energy:
        return self.fetch_model(Energy, f"/site/{site_id}/energy",
                                params=self._query(api_key, energy_parameter.query_items()), envelope="energy")

    def total_energy(self, site_id: int, start_date: date, end_date: date, api_key: str) -> TimeFrameEnergy:
        return self.fetch_model(TimeFrameEnergy, f"/site/{site_id}/timeFrameEnergy",
                                params=self._query(api_key, date_window(start_date, end_date)),
                                envelope="timeFrameEnergy")

    def power(self, site_id: int, start_time: datetime, end_time: datetime, api_key: str) -> Power:
        """Power in 15 minute resolution. The vendor limits the window to one month."""
        return self.fetch_model(Power, f"/site/{site_id}/power",
                                params=self._query(api_key, time_window(start_time, end_time)), envelope="power")

    def overview(self, site_id: int, api_key: str) -> Overview:
        return self.fetch_model(Overview, f"/site/{site_id}/overview", params=self._query(api_key),
                                envelope="overview")

    def detailed_power(self, site_id: int, start_time: datetime, end_time: datetime, api_key: str,
                       meter_types: Optional[Iterable[MeterType]] = None) -> MonitoringPowerDetail:
        params = self._query(api_key, time_window(start_time, end_time), meter_filter(meter_types))
        return self.fetch_model(MonitoringPowerDetail, f"/site/{site_id}/powerDetails", params=params,
                                envelope="powerDetails")

    def detailed_energy(self, site_id: int, start_time: datetime, end_time: datetime, api_key: str,
                        time_unit: TimeUnit = TimeUnit.DAY,
                        meter_types: Optional[Iterable[MeterType]] = None) -> MonitoringEnergyDetail:
        params = self._query(api_key, time_window(start_time, end_time), [("timeUnit", time_unit.value)],
                             meter_filter(meter_types))
        return self.fetch_model(MonitoringEnergyDetail, f"/site/{site_id}/energyDetails", params=params,
                                envelope="energyDetails")

    def power_flow(self, site_id: int, api_key: str) -> MonitoringPowerFlow:
        return self.fetch_model(MonitoringPowerFlow, f"/site/{site_id}/currentPowerFlow",
                                params=self._query(api_key), envelope="siteCurrentPowerFlow")

    # Images

    @none_on_status(304, 404)
    def site_image(self, site_id: int, api_key: str, name: Optional[str] = None, max_width: Optional[int] = None,
                   max_height: Optional[int] = None, hash: Optional[int] = None) -> Optional[bytes]:
        """
        The site image as raw bytes. None when the site has no image (404) or
        when `hash` matches the current image (304).
        """
        return self.fetch(f"/site/{site_id}/siteImage/{name or 'image.jpg'}",
                          params=self._query(api_key, image_params(max_width, max_height, hash)))

    @none_on_status(304, 404)
    def installer_image(self, site_id: int, api_key: str, name: Optional[str] = None) -> Optional[bytes]:
        return self.fetch(f"/site/{site_id}/installerImage/{name or 'image.jpg'}", params=self._query(api_key))

    def environmental_benefits(self, site_id: int, api_key: str,
                               system_unit: SystemUnit = SystemUnit.METRIC) -> EnvironmentalBenefits:
        return self.fetch_model(EnvironmentalBenefits, f"/site/{site_id}/envBenefits",
                                params=self._query(api_key, [("systemUnit", system_unit.value)]),
                                envelope="envBenefits")

    # Equipment

    def components(self, site_id: int, api_key: str) -> List[Component]:
        data = self.fetch(f"/equipment/{site_id}/list", params=self._query(api_key))
        reporters = unwrap(decode_json(data), "reporters")
        return decode_model(List[Component], reporters, envelope="list")

    def inventory(self, site_id: int, api_key: str) -> Inventory:
        return self.fetch_model(Inventory, f"/site/{site_id}/inventory", params=self._query(api_key),
                                envelope="Inventory")

    def inverter_technical_data(self, site_id: int, serial_number: str, start_time: datetime, end_time: datetime,
                                api_key: str) -> dict:
        """Raw inverter telemetry. The payload shape depends on the inverter type, so it is not modelled."""
        data = self.fetch(f"/equipment/{site_id}/{serial_number}/data",
                          params=self._query(api_key, time_window(start_time, end_time)))
        payload = decode_json(data)
        if not isinstance(payload, dict):
            raise DecodingError(f"Expected a JSON object, got {type(payload).__name__}")
        return payload

    def meters_lifetime_data(self, site_id: int, start_time: datetime, end_time: datetime, api_key: str,
                             time_unit: TimeUnit = TimeUnit.DAY,
                             meter_types: Optional[Iterable[MeterType]] = None) -> MetersData:
        params = self._query(api_key, time_window(start_time, end_time), [("timeUnit", time_unit.value)],
                             meter_filter(meter_types))
        return self.fetch_model(MetersData, f"/site/{site_id}/meters", params=params,
                                envelope="meterEnergyDetails")
