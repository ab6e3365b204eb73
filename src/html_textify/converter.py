"""
HTML to text conversion entry points.

All functions are synchronous and keep no state between calls: each call
parses (if needed), renders into its own buffer and returns the normalized
text, or raises without producing partial output.
"""

from pathlib import Path
from typing import BinaryIO, Optional, TextIO, Union

from bs4.element import PageElement

from .models.conversion import ConversionResult
from .parsing.eml_source import extract_html_body, parse_eml_bytes
from .parsing.html_parser import check_size, decode_html_bytes, parse_html, read_stream
from .rendering import RenderOptions, render_node

EML_SUFFIXES = {".eml"}
HTML_SUFFIXES = {".html", ".htm", ".xhtml"}


def from_html_node(node: PageElement, options: Optional[RenderOptions] = None) -> str:
    """
    Render text output from a pre-parsed HTML document.

    Args:
        node: BeautifulSoup document or any node inside it
        options: Rendering options (defaults to the configured settings)

    Returns:
        Plain-text rendering
    """
    return render_node(node, options or RenderOptions.from_settings())


def from_string(
    html: str, options: Optional[RenderOptions] = None, parser: Optional[str] = None
) -> str:
    """
    Parse HTML from a string, then render the text form.

    A leading byte-order mark is ignored.

    Raises:
        InputTooLargeError: If the input exceeds the size limit
        HtmlParseError: If parsing fails
    """
    check_size(html)
    return from_html_node(parse_html(html, parser), options)


def from_bytes(
    data: bytes,
    options: Optional[RenderOptions] = None,
    parser: Optional[str] = None,
    encoding: Optional[str] = None,
) -> str:
    """
    Decode, parse and render HTML bytes.

    Raises:
        InputTooLargeError: If the input exceeds the size limit
        InputDecodingError: If the bytes cannot be decoded
        HtmlParseError: If parsing fails
    """
    check_size(data)
    html, _ = decode_html_bytes(data, encoding)
    return from_html_node(parse_html(html, parser), options)


def from_reader(
    stream: Union[BinaryIO, TextIO],
    options: Optional[RenderOptions] = None,
    parser: Optional[str] = None,
    encoding: Optional[str] = None,
) -> str:
    """Render text output after reading HTML from a binary or text file-like object."""
    html, _ = read_stream(stream, encoding)
    return from_html_node(parse_html(html, parser), options)


def from_file(
    path: Union[str, Path],
    options: Optional[RenderOptions] = None,
    parser: Optional[str] = None,
    encoding: Optional[str] = None,
) -> str:
    """Render text output for an HTML file on disk."""
    with open(path, "rb") as f:
        return from_reader(f, options=options, parser=parser, encoding=encoding)


def convert_source(
    path: Union[str, Path],
    options: Optional[RenderOptions] = None,
    parser: Optional[str] = None,
    encoding: Optional[str] = None,
) -> ConversionResult:
    """
    Convert an HTML file or an .eml message into a ConversionResult.

    For e-mails the first text/html part is rendered; messages without one
    return their plain-text body unchanged (trimmed).

    Args:
        path: Source file path
        options: Rendering options
        parser: Tree builder name
        encoding: Declared encoding for HTML files (ignored for .eml)

    Returns:
        ConversionResult for the source
    """
    path = Path(path)
    data = path.read_bytes()
    check_size(data)

    if path.suffix.lower() in EML_SUFFIXES:
        msg = parse_eml_bytes(data)
        html_body, plain_text, used_encoding = extract_html_body(msg)
        if html_body is None:
            text = plain_text.strip()
        else:
            text = from_html_node(parse_html(html_body, parser), options)
        return ConversionResult.from_text(str(path), "eml", used_encoding, text)

    html, used_encoding = decode_html_bytes(data, encoding)
    text = from_html_node(parse_html(html, parser), options)
    return ConversionResult.from_text(str(path), "html", used_encoding, text)


def convert_stream(
    stream: Union[BinaryIO, TextIO],
    options: Optional[RenderOptions] = None,
    parser: Optional[str] = None,
    encoding: Optional[str] = None,
) -> ConversionResult:
    """Convert HTML read from a stream (stdin) into a ConversionResult."""
    html, used_encoding = read_stream(stream, encoding)
    text = from_html_node(parse_html(html, parser), options)
    return ConversionResult.from_text("-", "stdin", used_encoding, text)
