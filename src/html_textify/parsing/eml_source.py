"""
HTML body extraction from .eml files (RFC5322/MIME format).

Lets the converter produce text previews straight from stored e-mails.
"""

from email import message_from_bytes
from email.message import Message
from typing import Iterator, Optional, Tuple

import charset_normalizer

from ..exceptions import InputDecodingError


def parse_eml_bytes(eml_bytes: bytes) -> Message:
    """
    Parse .eml bytes into email.Message object.

    Raises:
        InputDecodingError: If bytes are not valid RFC5322 format
    """
    try:
        return message_from_bytes(eml_bytes)
    except Exception as e:
        raise InputDecodingError(f"Failed to parse .eml file: {str(e)}", original_error=e) from e


def walk_body_parts(msg: Message) -> Iterator[Message]:
    """Yield the non-attachment leaf parts of a message."""
    for part in msg.walk():
        if part.is_multipart():
            continue
        content_disposition = str(part.get("Content-Disposition", ""))
        if "attachment" in content_disposition:
            continue
        yield part


def decode_payload(part: Message) -> Tuple[str, str]:
    """
    Decode message part payload handling various encodings.

    Returns:
        Tuple of (decoded_text, encoding_used)
    """
    payload = part.get_payload(decode=True)
    if payload is None:
        return "", "utf-8"

    # Try declared charset first
    charset = part.get_content_charset()
    if charset:
        try:
            return payload.decode(charset), charset
        except (UnicodeDecodeError, LookupError):
            pass

    # Try charset detection
    detected = charset_normalizer.from_bytes(payload).best()
    if detected:
        return str(detected), detected.encoding

    # Final fallback
    return payload.decode("utf-8", errors="replace"), "utf-8"


def extract_html_body(msg: Message) -> Tuple[Optional[str], str, str]:
    """
    Pick the renderable body of an e-mail message.

    Args:
        msg: Parsed email.Message object

    Returns:
        Tuple of (html_body or None, plain_text_body, encoding_of_chosen_part).
        The first text/html part wins; without one, the text/plain parts are
        concatenated.
    """
    plain_text = ""
    plain_encoding = "utf-8"

    for part in walk_body_parts(msg):
        content_type = part.get_content_type()
        if content_type == "text/html":
            html_body, encoding = decode_payload(part)
            return html_body, plain_text, encoding
        if content_type == "text/plain":
            text, plain_encoding = decode_payload(part)
            plain_text += text

    return None, plain_text, plain_encoding
