class RequestorError(Exception):
    """Base class for every error raised by the Shoprenter client."""

class ConfigurationError(RequestorError):
    """Missing or invalid environment configuration."""

class InvalidFormatError(RequestorError):
    """Requested response format is not supported (json/xml only)."""

class UnsupportedMethodError(RequestorError):
    """HTTP verb outside GET/POST/PUT/DELETE."""

class TransportError(RequestorError):
    """The HTTP exchange could not be completed (DNS, connection, TLS, timeout, redirects)."""

class ResponseParseError(RequestorError):
    """Response body could not be decoded in the configured format."""

class JsonParseError(ResponseParseError):
    pass

class XmlParseError(ResponseParseError):
    pass

class UnknownResponseFormatError(RequestorError):
    """Client holds a response format it does not know how to decode."""
