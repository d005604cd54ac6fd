# pySolarEdge - Body Decoder
# -*- coding: utf-8 -*-
"""
 Helpers turning raw response bodies into pydantic models.

 Functions:
    decode_json(body)                        - Parse bytes into a JSON tree
    unwrap(payload, key)                     - Return payload[key] or raise DecodingError
    decode_model(model, body, envelope)      - Validate (optionally enveloped) body as model
    lenient_enum(enum_type, fallback)        - Validator mapping unknown strings to fallback
    strict_enum(enum_type, label)            - Validator failing on unknown strings
    date_validator(fmt, fallback)            - Validator parsing a string with a DateFormat
"""

import json
import logging
from datetime import date, datetime
from typing import Any, Optional, Type, TypeVar, Union

from pydantic import BaseModel, BeforeValidator, PlainSerializer, TypeAdapter, ValidationError

from pysolaredge.dates import DateFormat, parse_date, format_date
from pysolaredge.exceptions import DecodingError

log = logging.getLogger(__name__)

M = TypeVar("M", bound=BaseModel)


def decode_json(body: Union[bytes, str]) -> Any:
    try:
        return json.loads(body)
    except (ValueError, TypeError) as exc:
        raise DecodingError(f"Invalid JSON: {exc}") from exc


def unwrap(payload: Any, key: str) -> Any:
    if not isinstance(payload, dict):
        raise DecodingError(f"Expected a JSON object containing '{key}', got {type(payload).__name__}")
    if key not in payload:
        raise DecodingError(f"Missing key '{key}' in response")
    return payload[key]


def describe_validation_error(model: Type[BaseModel], exc: ValidationError) -> str:
    parts = []
    for error in exc.errors():
        location = ".".join(str(part) for part in error.get("loc", ()))
        message = error.get("msg", "invalid value")
        parts.append(f"{location}: {message}" if location else message)
    return f"{getattr(model, '__name__', model)}: " + "; ".join(parts)


def validate(model: Type[M], payload: Any) -> M:
    try:
        if isinstance(model, type) and issubclass(model, BaseModel):
            return model.model_validate(payload)
        # List[...] and Dict[...] targets
        return TypeAdapter(model).validate_python(payload)
    except ValidationError as exc:
        cause = describe_validation_error(model, exc)
        log.debug(f"Decoding failed - {cause}")
        raise DecodingError(cause) from exc


def decode_model(model: Type[M], body: Union[bytes, str, dict, list], envelope: Optional[str] = None) -> M:
    """
    Decode `body` into `model`.

    `body` may be raw bytes or an already parsed JSON tree. When `envelope`
    is given the payload is expected to be an object with that single key
    wrapping the interesting part, e.g. {"overview": {...}}.
    """
    payload = decode_json(body) if isinstance(body, (bytes, str)) else body
    if envelope is not None:
        payload = unwrap(payload, envelope)
    return validate(model, payload)


# Enum decode strategies

def lenient_enum(enum_type, fallback):
    """Unknown raw values decode to `fallback` instead of failing."""
    def _validate(value):
        if isinstance(value, enum_type):
            return value
        try:
            return enum_type(value)
        except ValueError:
            log.debug(f"Unknown {enum_type.__name__} value {value!r} - using {fallback.name}")
            return fallback
    return BeforeValidator(_validate)


def strict_enum(enum_type, label: str):
    """Unknown raw values fail the decode, naming the offending value."""
    def _validate(value):
        if isinstance(value, enum_type):
            return value
        try:
            return enum_type(value)
        except ValueError:
            raise ValueError(f"Unknown {label}: {value}")
    return BeforeValidator(_validate)


# Date decode strategies

def date_validator(fmt: DateFormat, fallback: Optional[datetime] = None):
    """
    Parse strings with `fmt`. With a `fallback`, unparsable values are
    replaced by it (permissive); without, they fail the decode (strict).
    """
    def _validate(value):
        if isinstance(value, (datetime, date)):
            return value
        try:
            return parse_date(value, fmt)
        except (ValueError, OverflowError):
            if fallback is not None:
                log.debug(f"Invalid date {value!r} - using fallback")
                return fallback
            raise ValueError(f"Invalid date {value!r}, expected {fmt.value}")
    return BeforeValidator(_validate)


def date_serializer(fmt: DateFormat):
    return PlainSerializer(lambda value: format_date(value, fmt), return_type=str, when_used="json")
