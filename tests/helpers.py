"""Decoding helpers and constants shared by the tests."""

import base64
import json

FIXED_NOW = 1_700_000_000


def b64url_decode(segment: str) -> bytes:
    padding = '=' * (-len(segment) % 4)
    return base64.urlsafe_b64decode(segment + padding)


def decode_segment(segment: str) -> dict:
    return json.loads(b64url_decode(segment).decode('utf-8'))
