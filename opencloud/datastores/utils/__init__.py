"""Utility helpers."""

from .parsing import (
    checksum,
    dump_json,
    iso_to_millis,
    millis_to_iso,
    normalize_infinity,
    parse_json,
)
from .validation import check_page_size, must_be_integer, must_be_number, must_be_string

__all__ = [
    "checksum",
    "dump_json",
    "iso_to_millis",
    "millis_to_iso",
    "normalize_infinity",
    "parse_json",
    "check_page_size",
    "must_be_integer",
    "must_be_number",
    "must_be_string",
]
