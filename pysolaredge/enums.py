"""Enumerations used by the SolarEdge payloads, valued with their wire strings."""
import enum


class TimeUnit(enum.Enum):
    QUARTER_OF_AN_HOUR = "QUARTER_OF_AN_HOUR"
    HOUR = "HOUR"
    DAY = "DAY"
    WEEK = "WEEK"
    MONTH = "MONTH"
    YEAR = "YEAR"

    UNKNOWN = "UNKNOWN"


class MeterType(enum.Enum):
    CONSUMPTION = "Consumption"
    PURCHASED = "Purchased"
    PRODUCTION = "Production"
    SELF_CONSUMPTION = "SelfConsumption"
    FEED_IN = "FeedIn"

    UNKNOWN = "Unknown"


class TimeRange(enum.Enum):
    # Portal layout queries
    DAY = "DAY"
    WEEK = "WEEK"
    MONTH = "MONTH"
    YEAR = "YEAR"
    ALL = "ALL"

    UNKNOWN = "UNKNOWN"


class SystemUnit(enum.Enum):
    METRIC = "Metrics"
    IMPERIAL = "Imperial"


# Power flow (portal). These have no UNKNOWN member: unknown values fail decoding.

class LoadType(enum.Enum):
    RESIDENTIAL = "Residential"


class ConnectionPoint(enum.Enum):
    GRID = "Grid"
    LOAD = "Load"
    PV = "PV"


class ConnectionStatus(enum.Enum):
    ACTIVE = "Active"
    IDLE = "Idle"


# Measurements (portal)

class MeasurementUnit(enum.Enum):
    WATT_HOUR = "WATT_HOUR"
    WATT = "WATT"


class MeasurementPeriod(enum.Enum):
    DAY = "DAY"
    WEEK = "WEEK"
    MONTH = "MONTH"
    YEAR = "YEAR"


class EnergyOverviewPeriod(enum.Enum):
    LIFE_TIME = "LIFE_TIME"
    LAST_YEAR = "LAST_YEAR"
    LAST_MONTH = "LAST_MONTH"
    LAST_DAY = "LAST_DAY"
