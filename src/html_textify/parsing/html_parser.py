"""
HTML input decoding and parsing.

Byte input is decoded honouring a byte-order mark first, then the declared
encoding, then the default encoding, then charset-normalizer detection. Decoded text is parsed with
BeautifulSoup; the tree builder defaults to html5lib, which follows the
WHATWG parsing algorithm (implicit html/head/body, tbody insertion).
"""

import codecs
from typing import BinaryIO, Optional, TextIO, Tuple, Union

import charset_normalizer
from bs4 import BeautifulSoup, FeatureNotFound

from ..config import settings
from ..exceptions import HtmlParseError, InputDecodingError, InputTooLargeError

SUPPORTED_PARSERS = ("html5lib", "html.parser", "lxml")

# Longest marks first so UTF-32 LE is not mistaken for UTF-16 LE
BYTE_ORDER_MARKS = [
    (codecs.BOM_UTF32_LE, "utf-32-le"),
    (codecs.BOM_UTF32_BE, "utf-32-be"),
    (codecs.BOM_UTF8, "utf-8"),
    (codecs.BOM_UTF16_LE, "utf-16-le"),
    (codecs.BOM_UTF16_BE, "utf-16-be"),
]

TEXT_BOM = "\ufeff"


def strip_bom(data: bytes) -> Tuple[bytes, Optional[str]]:
    """
    Remove a leading byte-order mark.

    Args:
        data: Raw input bytes

    Returns:
        Tuple of (bytes_without_bom, encoding_named_by_bom or None)
    """
    for mark, encoding in BYTE_ORDER_MARKS:
        if data.startswith(mark):
            return data[len(mark):], encoding
    return data, None


def check_size(data: Union[bytes, str], max_size_mb: Optional[int] = None) -> None:
    """
    Reject inputs larger than the configured limit.

    Raises:
        InputTooLargeError: If the input exceeds max_size_mb megabytes
    """
    limit_mb = settings.max_input_size_mb if max_size_mb is None else max_size_mb
    size = len(data)
    if limit_mb > 0 and size > limit_mb * 1024 * 1024:
        raise InputTooLargeError(
            f"Input is {size} bytes, limit is {limit_mb} MB"
        )


def decode_html_bytes(data: bytes, encoding: Optional[str] = None) -> Tuple[str, str]:
    """
    Decode HTML bytes to text.

    Args:
        data: Raw HTML bytes
        encoding: Declared encoding, tried before detection

    Returns:
        Tuple of (text, encoding_used)

    Raises:
        InputDecodingError: If the declared or BOM encoding cannot decode the data
    """
    data, bom_encoding = strip_bom(data)

    if bom_encoding:
        try:
            return data.decode(bom_encoding), bom_encoding
        except UnicodeDecodeError as e:
            raise InputDecodingError(
                f"Input starts with a {bom_encoding} byte-order mark but is not valid {bom_encoding}",
                original_error=e,
            ) from e

    if encoding:
        try:
            return data.decode(encoding), encoding
        except LookupError as e:
            raise InputDecodingError(f"Unknown encoding: {encoding}", original_error=e) from e
        except UnicodeDecodeError as e:
            raise InputDecodingError(
                f"Failed to decode input as {encoding}: {str(e)}", original_error=e
            ) from e

    if not data:
        return "", settings.default_encoding

    try:
        return data.decode(settings.default_encoding), settings.default_encoding
    except (UnicodeDecodeError, LookupError):
        pass

    # Try charset detection
    detected = charset_normalizer.from_bytes(data).best()
    if detected:
        return str(detected), detected.encoding

    # Final fallback
    return data.decode(settings.default_encoding, errors="replace"), settings.default_encoding


def read_stream(stream: Union[BinaryIO, TextIO], encoding: Optional[str] = None) -> Tuple[str, str]:
    """
    Read a binary or text file-like object to text.

    Returns:
        Tuple of (text, encoding_used); text streams report "unicode"
    """
    content = stream.read()
    check_size(content)
    if isinstance(content, bytes):
        return decode_html_bytes(content, encoding)
    return content.removeprefix(TEXT_BOM), "unicode"


def parse_html(markup: str, parser: Optional[str] = None) -> BeautifulSoup:
    """
    Parse HTML text into a BeautifulSoup document.

    Args:
        markup: Decoded HTML text
        parser: Tree builder name (defaults to settings.html_parser)

    Returns:
        Parsed document root

    Raises:
        HtmlParseError: If the parser is unknown, not installed or fails
    """
    features = parser or settings.html_parser
    if features not in SUPPORTED_PARSERS:
        raise HtmlParseError(
            f"Unsupported HTML parser '{features}'. Must be one of {SUPPORTED_PARSERS}"
        )

    try:
        return BeautifulSoup(markup.removeprefix(TEXT_BOM), features)
    except FeatureNotFound as e:
        raise HtmlParseError(
            f"HTML parser '{features}' is not installed", original_error=e
        ) from e
    except Exception as e:
        raise HtmlParseError(f"Failed to parse HTML: {str(e)}", original_error=e) from e
