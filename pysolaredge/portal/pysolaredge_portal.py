import json
import logging
from datetime import date
from http.cookiejar import CookieJar
from typing import Dict, List, Optional, Tuple, Union
from urllib.parse import quote

from pysolaredge.dates import DateFormat, format_date
from pysolaredge.enums import MeasurementPeriod, MeasurementUnit, TimeRange
from pysolaredge.exceptions import DescribedError
from pysolaredge.models import (DataAvailability, EnergyCompare, EnergyOverview, EnvironmentalBenefits, LayoutEnergy,
                                LoginData, LogicalLayout, Measurement, PhysicalLayout, PowerFlow, Weather,
                                decode_energy_compare)
from pysolaredge.pysolaredge_base import PySolarEdgeBase
from pysolaredge.status import check_response

log = logging.getLogger(__name__)

PORTAL_DOMAIN = "api.solaredge.com"
PORTAL_URL = f"https://{PORTAL_DOMAIN}"
USER_AGENT = "SolarEdge/5 CFNetwork/1410.0.3 Darwin/22.6.0"
CLIENT_VERSION = "3.12"


class PySolarEdgePortal(PySolarEdgeBase):
    """
    Client of the private API behind the SolarEdge consumer app.

    Log in once with `login()`. Every further call needs the returned cookie
    and a csrf token, sent as the x-csrf-token header.
    """
    name = "portal"

    def __init__(self, timeout: Union[int, float, Tuple[int, int]] = 10, poolmaxsize: int = 10,
                 user_agent: str = USER_AGENT, base_url: str = PORTAL_URL):
        super().__init__(base_url, timeout=timeout, poolmaxsize=poolmaxsize, user_agent=user_agent)

    def headers(self, cookie: Optional[str] = None, csrf_token: Optional[str] = None,
                content_type: str = "application/json") -> Dict[str, str]:
        headers = {
            "Content-Type": content_type,
            "Connection": "keep-alive",
            "CLIENT-VERSION": CLIENT_VERSION,
            "Accept": "*/*",
            "Accept-Encoding": "gzip",
            "User-Agent": self.user_agent,
        }
        if cookie is not None:
            headers["Cookie"] = cookie
        if csrf_token is not None:
            headers["x-csrf-token"] = csrf_token
        return headers

    # Login

    def login(self, username: str, password: str) -> LoginData:
        """
        Log in with the credentials of the SolarEdge app and return the
        session cookie together with the XML user record.
        """
        log.debug(f" -- {self.name}: Login {username}")
        body = f"j_username={quote(username)}&j_password={quote(password)}"
        r = self._request("POST", self.base_url + "/solaredge-apigw/api/login",
                          headers=self.headers(content_type="application/x-www-form-urlencoded"),
                          body=body.encode("utf-8"))
        check_response(r.status_code, r.content)
        try:
            user_data = r.content.decode("utf-8")
        except UnicodeDecodeError:
            raise DescribedError("Error with response")

        cookies = {}
        # Redirect hops store their cookies on the session only
        for jar in (getattr(self.session, "cookies", None), r.cookies):
            if not isinstance(jar, CookieJar):
                continue
            for cookie in jar:
                if (cookie.domain or "").lstrip(".") == PORTAL_DOMAIN:
                    cookies[cookie.name] = cookie.value
        if not cookies:
            log.debug("Login succeeded but no portal cookies were set")
            raise DescribedError("Error with cookies")
        cookie_string = "; ".join(f"{name}={value}" for name, value in cookies.items())
        return LoginData(cookie=cookie_string, xml_user_data=user_data)

    # Dashboard

    def environmental_benefits(self, site_id: int, csrf_token: str, cookie: str) -> EnvironmentalBenefits:
        return self.fetch_model(EnvironmentalBenefits, f"/solaredge-apigw/api/site/{site_id}/envBenefits.json",
                                envelope="envBenefits", cookie=cookie, csrf_token=csrf_token)

    def weather(self, site_id: int, csrf_token: str, cookie: str) -> Weather:
        return self.fetch_model(Weather, "/services/weather/getWeatherWidget", params=[("siteId", str(site_id))],
                                cookie=cookie, csrf_token=csrf_token)

    def data_availability(self, site_id: int, csrf_token: str, cookie: str) -> DataAvailability:
        return self.fetch_model(DataAvailability, f"/services/so/dashboard/site/{site_id}/dataAvailability",
                                cookie=cookie, csrf_token=csrf_token)

    def energy_compare(self, site_id: int, csrf_token: str, cookie: str) -> EnergyCompare:
        """Energy per month, quarter and year, as used by the app's production comparison chart."""
        data = self.fetch(f"/solaredge-apigw/api/site/{site_id}/energyCompare.json", cookie=cookie,
                          csrf_token=csrf_token)
        return decode_energy_compare(data)

    def energy_overview(self, site_id: int, csrf_token: str, cookie: str) -> List[EnergyOverview]:
        return self.fetch_model(List[EnergyOverview], f"/services/m/so/dashboard/site/{site_id}/energyOverview",
                                envelope="energyProducedOverviewList", cookie=cookie, csrf_token=csrf_token)

    def energy_measurements(self, site_id: int, time_period: MeasurementPeriod, end_date: date, csrf_token: str,
                            cookie: str) -> Measurement:
        """
        Production and consumption for the period ending at `end_date`. A day
        is reported as power (W), longer periods as energy (Wh).
        """
        unit = MeasurementUnit.WATT if time_period == MeasurementPeriod.DAY else MeasurementUnit.WATT_HOUR
        params = [("period", time_period.value),
                  ("end-date", format_date(end_date, DateFormat.DATE)),
                  ("measurement-unit", unit.value)]
        return self.fetch_model(Measurement, f"/services/m/so/dashboard/site/{site_id}/measurements",
                                params=params, cookie=cookie, csrf_token=csrf_token)

    def latest_power_flow(self, site_id: int, csrf_token: str, cookie: str) -> PowerFlow:
        return self.fetch_model(PowerFlow, f"/services/m/so/dashboard/site/{site_id}/powerflow/latest",
                                cookie=cookie, csrf_token=csrf_token)

    # Layout

    def layout_energy(self, site_id: int, csrf_token: str, cookie: str,
                      time_range: Optional[TimeRange] = None) -> Dict[str, LayoutEnergy]:
        """Energy per reporter id, optionally limited to `time_range`."""
        params = [("timeUnit", time_range.value)] if time_range is not None else None
        body = json.dumps({"reporterIds": [1]}).encode("utf-8")
        return self.fetch_model(Dict[str, LayoutEnergy], f"/solaredge-apigw/api/sites/{site_id}/layout/energy.json",
                                params=params, method="POST", body=body, cookie=cookie, csrf_token=csrf_token)

    def physical_layout(self, site_id: int, csrf_token: str, cookie: str) -> PhysicalLayout:
        return self.fetch_model(PhysicalLayout, f"/solaredge-apigw/api/sites/{site_id}/layout/physical.json",
                                cookie=cookie, csrf_token=csrf_token)

    def logical_layout(self, site_id: int, csrf_token: str, cookie: str) -> LogicalLayout:
        return self.fetch_model(LogicalLayout, f"/solaredge-apigw/api/sites/{site_id}/layout/logical.json",
                                cookie=cookie, csrf_token=csrf_token)
