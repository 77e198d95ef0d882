from __future__ import annotations
import json
import logging
import xml.etree.ElementTree as ET
from typing import Any, List, Mapping, Tuple, Union
from urllib.parse import urlencode
from .exceptions import JsonParseError, XmlParseError, UnknownResponseFormatError

logger = logging.getLogger(__name__)

FORMAT_JSON = 'json'  # default
FORMAT_XML = 'xml'
SUPPORTED_FORMATS = (FORMAT_JSON, FORMAT_XML)


def _flatten(prefix: str, value: Any, out: List[Tuple[str, str]]) -> None:
    if value is None:
        return
    if isinstance(value, Mapping):
        for k, v in value.items():
            _flatten(f"{prefix}[{k}]" if prefix else str(k), v, out)
    elif isinstance(value, (list, tuple)):
        for i, v in enumerate(value):
            _flatten(f"{prefix}[{i}]", v, out)
    elif isinstance(value, bool):
        out.append((prefix, '1' if value else '0'))
    else:
        out.append((prefix, str(value)))


def build_form_body(data: Mapping[str, Any]) -> str:
    """Encode a nested mapping as a bracketed form body.

    {'data': {'name': 'Acme', 'tags': ['a', 'b']}} becomes
    data[name]=Acme&data[tags][0]=a&data[tags][1]=b (percent-encoded).
    Booleans are sent as 1/0 and None values are left out.
    """
    pairs: List[Tuple[str, str]] = []
    _flatten('', data, pairs)
    return urlencode(pairs)


def parse_json(body: Union[str, bytes]) -> Any:
    # bytes are sniffed for UTF-8/16/32 by json.loads
    if not body.strip():
        return None
    try:
        return json.loads(body)
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        raise JsonParseError(f"Cannot parse JSON data: {e}") from e


def parse_xml(body: Union[str, bytes]) -> ET.Element:
    # Pass bytes so the XML declaration picks the encoding; CDATA is folded into text
    try:
        return ET.fromstring(body)
    except ET.ParseError as e:
        raise XmlParseError(f"Cannot parse XML data: {e}") from e


def decode_body(body: Union[str, bytes], fmt: str) -> Any:
    if fmt == FORMAT_JSON:
        return parse_json(body)
    if fmt == FORMAT_XML:
        return parse_xml(body)
    logger.error("Refusing to decode response with unknown format %r", fmt)
    raise UnknownResponseFormatError(f"Unknown response format {fmt!r}. Cannot process.")
