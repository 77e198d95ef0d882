#!/usr/bin/env python
"""Run a single Shoprenter API call from the command line.

Credentials come from the environment (or a local .env file):
  SHOPRENTER_USERNAME, SHOPRENTER_API_KEY, SHOPRENTER_SHOP,
  SHOPRENTER_USER_AGENT (optional), SHOPRENTER_SECURE (optional), SHOPRENTER_TIMEOUT (optional)

Examples:
  python scripts/shoprenter_call.py GET /manufacturers
  python scripts/shoprenter_call.py GET /manufacturers --format xml --out data/manufacturers.xml
  python scripts/shoprenter_call.py POST /manufacturers --data '{"name": "Acme"}' --verbose
  python scripts/shoprenter_call.py DELETE /manufacturers/bWFudWZhY3R1cmVyLW1hbnVmYWN0dXJlcl9pZD0x --raw
"""
from __future__ import annotations
import argparse
import json
import logging
import os
import sys
import xml.etree.ElementTree as ET
from pathlib import Path
from typing import Any, List, Optional

from shoprenter.exceptions import RequestorError
from shoprenter.formats import SUPPORTED_FORMATS
from shoprenter.requestor import SUPPORTED_METHODS, ShoprenterClient


# Loads a local .env without python-dotenv; variables already set win
def load_env_file(env_path: Path) -> None:
    if not env_path.exists():
        return
    for raw in env_path.read_text(encoding='utf-8').splitlines():
        line = raw.strip()
        if not line or line.startswith('#') or '=' not in line:
            continue
        key, _, value = line.partition('=')
        key = key.strip()
        value = value.strip().strip('"').strip("'")
        if not os.environ.get(key, '').strip():
            os.environ[key] = value


def parse_args(argv: Optional[List[str]] = None):
    p = argparse.ArgumentParser(description='Call the Shoprenter API')
    p.add_argument('method', type=str.upper, choices=SUPPORTED_METHODS)
    p.add_argument('path', help='Relative endpoint (e.g. /manufacturers) or absolute URL')
    p.add_argument('--data', help='JSON object sent form-encoded as data[...] (POST/PUT)')
    p.add_argument('--format', default='json', choices=SUPPORTED_FORMATS)
    p.add_argument('--raw', action='store_true', help='Print the body without decoding it')
    p.add_argument('--out', help='Write the result to this file instead of stdout')
    p.add_argument('--env-file', default='.env')
    p.add_argument('--verbose', action='store_true')
    return p.parse_args(argv)


def render(result: Any) -> str:
    if isinstance(result, ET.Element):
        return ET.tostring(result, encoding='unicode')
    if isinstance(result, str):
        return result
    return json.dumps(result, ensure_ascii=False, indent=2)


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO, format='[%(levelname)s] %(message)s')
    load_env_file(Path(args.env_file))

    data = None
    if args.data:
        try:
            data = json.loads(args.data)
        except json.JSONDecodeError as e:
            raise SystemExit(f'--data is not valid JSON: {e}')
        if not isinstance(data, dict):
            raise SystemExit('--data must be a JSON object')

    try:
        client = ShoprenterClient.from_env()
        result = (client.set_response_format(args.format)
                  .set_process_response(not args.raw)
                  .execute(args.method, args.path, data))
    except RequestorError as e:
        logging.error('%s: %s', type(e).__name__, e)
        return 1

    text = render(result)
    if args.out:
        out_path = Path(args.out)
        out_path.parent.mkdir(parents=True, exist_ok=True)
        out_path.write_text(text, encoding='utf-8')
        if args.verbose:
            print(f'[done] Wrote {out_path} (HTTP {client.status_code})')
    else:
        print(text)
    return 0


if __name__ == '__main__':
    sys.exit(main())
