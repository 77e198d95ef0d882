from __future__ import annotations
import os
import logging
from typing import Dict, Optional
import requests
from requests.auth import HTTPBasicAuth
from .exceptions import ConfigurationError, TransportError

logger = logging.getLogger(__name__)

MAX_REDIRECTS = 5


class BaseClient:
    """Base HTTP client: endpoint URL joining and one Basic-auth request per call.

    No session is kept between calls; every request opens its own
    requests.Session and closes it before returning.
    """
    BASE_URL: str = ''

    def __init__(self, username: str, api_key: str = '', timeout: Optional[float] = 30):
        self.username = username
        self.api_key = api_key
        self.timeout = timeout

    def complete_endpoint_url(self, path: str) -> str:
        """Allows relative paths and absolute URLs alike."""
        if path.lower().startswith('http'):
            return path
        return self.BASE_URL.rstrip('/') + '/' + path.lstrip('/')

    def _send(self, method: str, url: str, *, headers: Dict[str, str], body: Optional[str] = None) -> requests.Response:
        logger.debug("%s %s", method, url)
        with requests.Session() as session:
            session.max_redirects = MAX_REDIRECTS
            try:
                resp = session.request(
                    method,
                    url,
                    data=body,
                    headers=headers,
                    auth=HTTPBasicAuth(self.username or '', self.api_key or ''),
                    allow_redirects=True,
                    timeout=self.timeout,
                )
            except requests.RequestException as e:
                logger.warning("Transport failure on %s %s: %s", method, url, e)
                raise TransportError(str(e)) from e
        logger.debug("%s %s -> %s (%d bytes)", method, url, resp.status_code, len(resp.content))
        return resp

    @staticmethod
    def env(name: str, required: bool = True) -> Optional[str]:
        val = os.getenv(name)
        if required and (val is None or val.strip() == ''):
            raise ConfigurationError(f"Missing required environment variable: {name}")
        return val
