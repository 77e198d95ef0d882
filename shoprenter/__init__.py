"""Client for the Shoprenter REST API (http(s)://<shop>.api.shoprenter.hu).

Usage example:
    from shoprenter.requestor import ShoprenterClient
    client = ShoprenterClient('your.username', 'yourapikey', 'yourshopname')
    manufacturers = client.set_response_format('json').execute('GET', '/manufacturers')
"""
from .exceptions import (  # noqa: F401
    RequestorError,
    ConfigurationError,
    InvalidFormatError,
    UnsupportedMethodError,
    TransportError,
    ResponseParseError,
    JsonParseError,
    XmlParseError,
    UnknownResponseFormatError,
)
from .formats import FORMAT_JSON, FORMAT_XML  # noqa: F401
from .requestor import ShoprenterClient  # noqa: F401

__version__ = '2.1.0'
