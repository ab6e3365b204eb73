# Input decoding and parsing module

from .eml_source import decode_payload, extract_html_body, parse_eml_bytes, walk_body_parts
from .html_parser import (
    SUPPORTED_PARSERS,
    check_size,
    decode_html_bytes,
    parse_html,
    read_stream,
    strip_bom,
)

__all__ = [
    "SUPPORTED_PARSERS",
    "check_size",
    "decode_html_bytes",
    "parse_html",
    "read_stream",
    "strip_bom",
    "parse_eml_bytes",
    "walk_body_parts",
    "decode_payload",
    "extract_html_body",
]
