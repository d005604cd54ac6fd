from datetime import date, datetime, timezone
from typing import Annotated, Optional, Union

from pydantic import BaseModel, BeforeValidator, ConfigDict, PlainSerializer
from pydantic.alias_generators import to_camel

from pysolaredge.dates import DISTANT_PAST, DateFormat, format_date, try_parse_date
from pysolaredge.decoding import date_validator, date_serializer, lenient_enum, strict_enum
from pysolaredge.enums import (TimeUnit, MeterType, LoadType, ConnectionPoint, ConnectionStatus,
                               MeasurementUnit, EnergyOverviewPeriod)


class ApiModel(BaseModel):
    """Immutable value decoded from a SolarEdge payload. Wire names are camelCase aliases."""
    model_config = ConfigDict(frozen=True, populate_by_name=True, alias_generator=to_camel,
                              extra="ignore")


# Timestamps, one alias per wire format

DateTime = Annotated[datetime, date_validator(DateFormat.DATE_TIME),
                     date_serializer(DateFormat.DATE_TIME)]
PermissiveDateTime = Annotated[datetime, date_validator(DateFormat.DATE_TIME, fallback=DISTANT_PAST),
                               date_serializer(DateFormat.DATE_TIME)]
DateTimeT = Annotated[datetime, date_validator(DateFormat.DATE_TIME_T),
                      date_serializer(DateFormat.DATE_TIME_T)]
DateTimeOffset = Annotated[datetime, date_validator(DateFormat.DATE_TIME_OFFSET),
                           date_serializer(DateFormat.DATE_TIME_OFFSET)]
Date = Annotated[date, date_validator(DateFormat.DATE), date_serializer(DateFormat.DATE)]


def _date_time_or_date(value):
    # dataPeriod and site metadata mix "yyyy-MM-dd HH:mm:ss" and "yyyy-MM-dd"
    if value is None or isinstance(value, (datetime, date)):
        return value
    parsed = try_parse_date(value, DateFormat.DATE_TIME)
    if parsed is None:
        parsed = try_parse_date(value, DateFormat.DATE)
    return parsed


def _serialize_loose_date(value):
    if isinstance(value, datetime):
        return format_date(value, DateFormat.DATE_TIME)
    return format_date(value, DateFormat.DATE)


LooseDate = Annotated[Optional[Union[datetime, date]], BeforeValidator(_date_time_or_date),
                      PlainSerializer(_serialize_loose_date, return_type=str, when_used="json-unless-none")]


def _from_epoch_millis(value):
    if isinstance(value, datetime):
        return value
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValueError(f"Invalid epoch timestamp {value!r}")
    return datetime.fromtimestamp(value / 1000, tz=timezone.utc)


EpochMillis = Annotated[datetime, BeforeValidator(_from_epoch_millis),
                        PlainSerializer(lambda value: value.timestamp() * 1000, return_type=float,
                                        when_used="json")]


# Lenient enums fall back to UNKNOWN

LenientTimeUnit = Annotated[TimeUnit, lenient_enum(TimeUnit, TimeUnit.UNKNOWN)]
LenientMeterType = Annotated[MeterType, lenient_enum(MeterType, MeterType.UNKNOWN)]

# Strict enums fail the decode

StrictLoadType = Annotated[LoadType, strict_enum(LoadType, "power flow load type")]
StrictConnectionPoint = Annotated[ConnectionPoint, strict_enum(ConnectionPoint, "power flow connection point")]
StrictConnectionStatus = Annotated[ConnectionStatus, strict_enum(ConnectionStatus, "power flow status")]
StrictMeasurementUnit = Annotated[MeasurementUnit, strict_enum(MeasurementUnit, "measurement unit")]
StrictEnergyOverviewPeriod = Annotated[EnergyOverviewPeriod, strict_enum(EnergyOverviewPeriod, "time period")]
