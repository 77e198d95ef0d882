from __future__ import annotations
import os
import logging
from typing import Any, Dict, Mapping, Optional
import requests
from .base_client import BaseClient
from .exceptions import ConfigurationError, InvalidFormatError, UnsupportedMethodError
from .formats import FORMAT_JSON, SUPPORTED_FORMATS, build_form_body, decode_body

logger = logging.getLogger(__name__)

URL = 'http://%s.api.shoprenter.hu'
SURL = 'https://%s.api.shoprenter.hu'

DEFAULT_USER_AGENT = 'ShoprenterRequestor/2.1 (python-requests)'

# Sent as-is; the API expects this exact (non-standard) value
CONTENT_TYPE = 'multiform/post-data'

SUPPORTED_METHODS = ('GET', 'POST', 'PUT', 'DELETE')

_TRUTHY = {'1', 'true', 'yes', 'on'}


def body_text(resp: requests.Response) -> str:
    """Raw body as text: the declared charset if any, UTF-8 otherwise."""
    if 'charset=' in resp.headers.get('Content-Type', '').lower():
        return resp.text
    return resp.content.decode('utf-8', errors='replace')


class ShoprenterClient(BaseClient):
    """Low level Shoprenter API requestor.

    Example:
        client = ShoprenterClient('your.username', 'yourapikey', 'yourshopname')
        data = client.set_response_format('json').set_process_response(True).execute('GET', '/manufacturers')

    HTTP status codes are not inspected: a 4xx/5xx answer is returned like any
    other body and ``status_code`` tells which one it was. Only transport
    failures raise.

    Instances keep the last result in ``response`` and ``status_code``, so one
    instance must not be shared between threads without external locking.
    """

    def __init__(self, username: str, api_key: str, shop_name: str, user_agent: Optional[str] = None,
                 secure: bool = False, timeout: Optional[float] = 30):
        super().__init__(username, api_key, timeout=timeout)
        self._shop_name = shop_name
        self._secure = secure
        self.BASE_URL = (SURL if secure else URL) % shop_name
        self.user_agent = user_agent or DEFAULT_USER_AGENT
        self.response_format: str = FORMAT_JSON
        self.process_response: bool = True
        self.response: Any = None
        self.status_code: Optional[int] = None

    @property
    def base_url(self) -> str:
        return self.BASE_URL

    @property
    def shop_name(self) -> str:
        return self._shop_name

    @property
    def secure(self) -> bool:
        return self._secure

    @classmethod
    def from_env(cls) -> 'ShoprenterClient':
        username = BaseClient.env('SHOPRENTER_USERNAME')
        api_key = os.getenv('SHOPRENTER_API_KEY', '')
        shop_name = BaseClient.env('SHOPRENTER_SHOP')
        user_agent = os.getenv('SHOPRENTER_USER_AGENT') or None
        secure = os.getenv('SHOPRENTER_SECURE', '').strip().lower() in _TRUTHY
        timeout_raw = os.getenv('SHOPRENTER_TIMEOUT')
        timeout: Optional[float] = 30
        if timeout_raw:
            try:
                timeout = float(timeout_raw)
            except ValueError as e:
                raise ConfigurationError(f"SHOPRENTER_TIMEOUT must be a number, got {timeout_raw!r}") from e
        logger.debug("Client configured from env for shop %s (secure=%s)", shop_name, secure)
        return cls(username, api_key, shop_name, user_agent=user_agent, secure=secure, timeout=timeout)  # type: ignore[arg-type]

    def set_response_format(self, fmt: str) -> 'ShoprenterClient':
        if fmt not in SUPPORTED_FORMATS:
            raise InvalidFormatError(f"Unknown response format: {fmt!r}")
        self.response_format = fmt
        return self

    def set_process_response(self, enabled: bool) -> 'ShoprenterClient':
        """Decode results (dict/list for JSON, Element for XML) or hand back the raw body."""
        self.process_response = bool(enabled)
        return self

    def _headers(self) -> Dict[str, str]:
        return {
            'User-Agent': self.user_agent,
            'Accept': f"application/{self.response_format}",
            'Content-Type': CONTENT_TYPE,
        }

    def execute(self, method: str, path: str, data: Optional[Mapping[str, Any]] = None) -> Any:
        """Run one API call and return the (optionally decoded) body.

        POST and PUT send ``data`` form-encoded under a top-level ``data`` key;
        GET and DELETE send no body. Relative paths are resolved against the
        shop's API host, absolute URLs are used unchanged.
        """
        verb = method.upper()
        if verb not in SUPPORTED_METHODS:
            raise UnsupportedMethodError(f"Unknown HTTP method: {method!r}")
        url = self.complete_endpoint_url(path)
        body = build_form_body({'data': data or {}}) if verb in ('POST', 'PUT') else None

        resp = self._send(verb, url, headers=self._headers(), body=body)
        self.status_code = resp.status_code
        self.response = body_text(resp)
        if self.process_response:
            self.response = decode_body(resp.content, self.response_format)
        return self.response

    def get(self, path: str) -> Any:
        return self.execute('GET', path)

    def post(self, path: str, data: Optional[Mapping[str, Any]] = None) -> Any:
        return self.execute('POST', path, data)

    def put(self, path: str, data: Optional[Mapping[str, Any]] = None) -> Any:
        return self.execute('PUT', path, data)

    def delete(self, path: str) -> Any:
        return self.execute('DELETE', path)
