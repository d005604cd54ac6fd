# pySolarEdge - HTTP Status Classifier
# -*- coding: utf-8 -*-
"""
 Maps HTTP status codes returned by the SolarEdge APIs to typed errors.

 Functions:
    check_status_code(status_code)   - Raise the matching HttpStatusError or return on success
    check_response(status_code, body) - Same as above, but enrich the error with the body text
"""

import json
import logging
from typing import Dict, Type

from pysolaredge.exceptions import (HttpStatusError, Unmodified, BadRequest, Unauthorized, Forbidden,
                                    NotFound, Conflict, UnprocessableEntity, TooManyRequests,
                                    InternalServerError, UnexpectedResponse, DescribedError)

log = logging.getLogger(__name__)

SUCCESS_CODES = (200, 201, 204)

STATUS_ERRORS: Dict[int, Type[HttpStatusError]] = {
    304: Unmodified,
    400: BadRequest,
    401: Unauthorized,
    403: Forbidden,
    404: NotFound,
    409: Conflict,
    422: UnprocessableEntity,
    429: TooManyRequests,
    500: InternalServerError,
}


def check_status_code(status_code: int) -> None:
    if status_code in SUCCESS_CODES:
        return
    error = STATUS_ERRORS.get(status_code)
    if error is None:
        raise UnexpectedResponse(status_code)
    raise error()


def check_response(status_code: int, body: bytes) -> None:
    """
    Check the status code and, on failure, try to read the server message.

    The vendor sends `ExceptionMessage` or `Message` in a JSON body for most
    failures. When neither is present the raw body is appended to the
    generic status description. A body that is not text at all leaves the
    bare status error untouched.
    """
    try:
        check_status_code(status_code)
    except HttpStatusError as status_error:
        try:
            text = body.decode("utf-8")
        except UnicodeDecodeError:
            log.debug(f"Status {status_code} with undecodable body")
            raise status_error
        try:
            payload = json.loads(text)
        except ValueError:
            payload = None
        if isinstance(payload, dict):
            for key in ("ExceptionMessage", "Message"):
                message = payload.get(key)
                if isinstance(message, str):
                    log.debug(f"Status {status_code}: {message}")
                    raise DescribedError(message, status_error) from status_error
        log.debug(f"Status {status_code}: {text}")
        raise DescribedError(f"{status_error.description}\n\n{text}", status_error) from status_error
