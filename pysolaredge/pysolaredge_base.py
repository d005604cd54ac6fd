import abc
import logging
from typing import Any, Dict, Optional, Tuple, Type, TypeVar, Union

import requests
from requests import Response

from pysolaredge.decoding import decode_model
from pysolaredge.exceptions import BadURL, TransportError
from pysolaredge.status import check_response

log = logging.getLogger(__name__)

M = TypeVar("M")

QueryParams = Union[Dict[str, str], list, None]


class PySolarEdgeBase:
    """
    Shared transport of the monitoring and portal clients.

    Holds configuration and the requests session only. Credentials are passed
    per call, so one instance can serve several sites or accounts.
    """
    name = "base"

    def __init__(self, base_url: str, timeout: Union[int, float, Tuple[int, int]] = 10, poolmaxsize: int = 10,
                 user_agent: Optional[str] = None):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.poolmaxsize = poolmaxsize  # pool max size for http connection re-use
        self.user_agent = user_agent
        self.session = None
        self._create_session()

    def _create_session(self):
        if self.poolmaxsize > 0:
            # Create session object for http connection re-use
            self.session = requests.Session()
            # noinspection PyUnresolvedReferences
            a = requests.adapters.HTTPAdapter(pool_maxsize=self.poolmaxsize)
            self.session.mount('https://', a)
        else:
            # Disable http persistent connections
            self.session = requests

    def close_session(self):
        if isinstance(self.session, requests.Session):
            self.session.close()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close_session()

    def _request(self, method: str, url: str, headers: Optional[dict] = None, body: Any = None,
                 params: QueryParams = None) -> Response:
        try:
            return self.session.request(method, url, headers=headers, data=body, params=params,
                                        timeout=self.timeout)
        except (requests.exceptions.InvalidURL, requests.exceptions.MissingSchema,
                requests.exceptions.InvalidSchema) as exc:
            log.debug(f"Bad URL {url}: {exc}")
            raise BadURL() from exc
        except requests.exceptions.RequestException as exc:
            log.debug(f"Unable to reach {url}: {exc}")
            raise TransportError(f"Unable to connect to {url}: {exc}", exc) from exc

    def send(self, method: str, url: str, headers: Optional[dict] = None, body: Any = None,
             params: QueryParams = None) -> Tuple[int, bytes]:
        """Perform one HTTP exchange and return (status code, raw body)."""
        r = self._request(method, url, headers=headers, body=body, params=params)
        return r.status_code, r.content

    @abc.abstractmethod
    def headers(self, **kwargs) -> Dict[str, str]:
        raise NotImplementedError

    def fetch(self, path: str, params: QueryParams = None, method: str = "GET", body: Any = None,
              **credentials) -> bytes:
        """Send a request to `path`, raise on error statuses and return the body."""
        # Never log params, they carry the api key
        log.debug(f" -- {self.name}: Request {path}")
        status, data = self.send(method, self.base_url + path, headers=self.headers(**credentials), body=body,
                                 params=params)
        check_response(status, data)
        return data

    def fetch_model(self, model: Type[M], path: str, params: QueryParams = None, envelope: Optional[str] = None,
                    method: str = "GET", body: Any = None, **credentials) -> M:
        data = self.fetch(path, params=params, method=method, body=body, **credentials)
        return decode_model(model, data, envelope=envelope)
