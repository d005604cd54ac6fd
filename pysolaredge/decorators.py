import functools
import logging

from pysolaredge.exceptions import DescribedError, HttpStatusError

log = logging.getLogger('pysolaredge.monitoring.pysolaredge_monitoring')


def _status_code(error):
    if isinstance(error, DescribedError):
        error = error.status_error
    return getattr(error, "status_code", None)


def none_on_status(*status_codes):
    """
    Return None instead of raising when the call fails with one of
    `status_codes`. The code is read from the classified status error, so
    an enriched DescribedError matches too.
    """
    def decorator(func):
        @functools.wraps(func)
        def wrapper(*args, **kwargs):
            try:
                return func(*args, **kwargs)
            except (HttpStatusError, DescribedError) as error:
                code = _status_code(error)
                if code not in status_codes:
                    raise
                log.debug(f"{func.__name__}: status {code} - returning None")
                return None

        return wrapper

    return decorator
