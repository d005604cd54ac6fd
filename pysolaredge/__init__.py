# pySolarEdge Module
# -*- coding: utf-8 -*-
"""
 Python module to access the SolarEdge monitoring and consumer portal APIs

 For more information see README.md

 Features
    * Typed, immutable models for every supported endpoint (pydantic)
    * Works with the public monitoring API (api key) and the private portal API (login cookie)
    * Derived values: meter totals, feed-in / self-usage / purchased percentages, import/export flags
    * Typed errors for HTTP status codes, enriched with the message the server sent back
    * Will re-use http connections for reduced load and faster response times

 Classes
    PySolarEdgeMonitoring(timeout, poolmaxsize, user_agent, base_url)
    PySolarEdgePortal(timeout, poolmaxsize, user_agent, base_url)

 Parameters
    timeout = 10              # Timeout for HTTPS calls in seconds
    poolmaxsize = 10          # Pool max size for http connection re-use (persistent
                                connections disabled if zero)
    user_agent                # User-Agent header sent with every request
    base_url                  # Override the API host (e.g. for a test server)

 Monitoring functions (all take api_key)
    sites(request_parameter)                      # List of sites of the account
    site_detail(site_id)                          # Site details
    site_data_period(site_id)                     # First and last day with data
    energy(site_id, energy_parameter)             # Energy time series
    total_energy(site_id, start_date, end_date)   # Energy of a time frame
    power(site_id, start_time, end_time)          # Power time series (15 min)
    overview(site_id)                             # Lifetime, year, month, day totals and current power
    detailed_power(site_id, start, end, meters)   # Power per meter
    detailed_energy(site_id, start, end, time_unit, meters)  # Energy per meter
    power_flow(site_id)                           # Current power flow
    site_image(site_id, name, max_width, max_height, hash)   # Site image bytes or None
    installer_image(site_id, name)                # Installer image bytes or None
    environmental_benefits(site_id, system_unit)  # CO2 saved, trees planted ...
    components(site_id)                           # Inverters of the site
    inventory(site_id)                            # Meters, sensors, gateways, batteries, inverters
    inverter_technical_data(site_id, serial, start, end)  # Raw inverter telemetry (dict)
    meters_lifetime_data(site_id, start, end, time_unit, meters)  # Meter readings

 Portal functions (all but login take csrf_token and cookie)
    login(username, password)                     # Returns LoginData with the session cookie
    environmental_benefits(site_id)
    weather(site_id)                              # Live weather, forecast and sun times
    data_availability(site_id)
    energy_compare(site_id)                       # Energy per month, quarter and year
    energy_overview(site_id)                      # Energy per dashboard period
    energy_measurements(site_id, time_period, end_date)
    latest_power_flow(site_id)
    layout_energy(site_id, time_range)            # Energy per module
    physical_layout(site_id)
    logical_layout(site_id)

 Requirements
    This module requires the following modules: requests, pydantic, python-dateutil, bs4
    pip install requests pydantic python-dateutil bs4
"""
import logging
import sys

version_tuple = (0, 1, 0)
version = __version__ = '%d.%d.%d' % version_tuple
__author__ = 'pysolaredge'

from pysolaredge.exceptions import (PySolarEdgeException, TransportError, BadURL, HttpStatusError, Unmodified,
                                    BadRequest, Unauthorized, Forbidden, NotFound, Conflict, UnprocessableEntity,
                                    TooManyRequests, InternalServerError, UnexpectedResponse, DescribedError,
                                    DecodingError)
from pysolaredge.enums import (TimeUnit, MeterType, TimeRange, SystemUnit, LoadType, ConnectionPoint,
                               ConnectionStatus, MeasurementUnit, MeasurementPeriod, EnergyOverviewPeriod)
from pysolaredge.params import (SiteRequestParameter, EnergyRequestParameter, SortOrder, SortProperty,
                                SiteStatus)
from pysolaredge.monitoring.pysolaredge_monitoring import PySolarEdgeMonitoring
from pysolaredge.portal.pysolaredge_portal import PySolarEdgePortal

log = logging.getLogger(__name__)
log.debug('%s version %s', __name__, __version__)
log.debug('Python %s on %s', sys.version, sys.platform)


def set_debug(toggle=True, color=True):
    """Enable verbose logging"""
    if toggle:
        if color:
            logging.basicConfig(format='\x1b[31;1m%(levelname)s:%(message)s\x1b[0m', level=logging.DEBUG)
        else:
            logging.basicConfig(format='%(levelname)s:%(message)s', level=logging.DEBUG)
        log.setLevel(logging.DEBUG)
        log.debug("%s [%s]\n" % (__name__, __version__))
    else:
        log.setLevel(logging.NOTSET)
