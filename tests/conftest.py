"""
Global pytest fixtures and configuration for test suite.

This module provides reusable fixtures for:
- Rendering options and settings with safe defaults
- Sample HTML documents and e-mails
- Temporary source files
"""

from pathlib import Path

import pytest

from html_textify.config import Settings
from html_textify.rendering import RenderOptions
from tests.fixtures.documents import NEWSLETTER_HTML, SAMPLE_EMAILS


@pytest.fixture
def mock_settings() -> Settings:
    """
    Create settings for testing with safe defaults.

    Returns:
        Settings instance with test configuration
    """
    return Settings(
        log_level="INFO",
        log_json=False,  # Easier to read in tests
        html_parser="html5lib",
        max_input_size_mb=25,
    )


@pytest.fixture
def default_options() -> RenderOptions:
    """Rendering options independent of the environment."""
    return RenderOptions()


@pytest.fixture
def newsletter_file(tmp_path: Path) -> Path:
    """
    Write the newsletter sample to a temporary .html file.

    Returns:
        Path of the written file
    """
    path = tmp_path / "newsletter.html"
    path.write_text(NEWSLETTER_HTML, encoding="utf-8")
    return path


@pytest.fixture
def multipart_html_eml() -> bytes:
    """
    Get multipart email with both HTML and plain text.

    Returns:
        bytes of multipart/alternative email
    """
    return SAMPLE_EMAILS["multipart_html"]


@pytest.fixture
def latin1_html_eml() -> bytes:
    """
    Get HTML-only email declared as iso-8859-1.

    Returns:
        bytes of text/html email
    """
    return SAMPLE_EMAILS["latin1_html"]


@pytest.fixture
def plain_only_eml() -> bytes:
    """
    Get email with only a text/plain part.

    Returns:
        bytes of plain text email
    """
    return SAMPLE_EMAILS["plain_only"]


@pytest.fixture
def attachment_only_eml() -> bytes:
    """
    Get email whose HTML is only present as an attachment.

    Returns:
        bytes of multipart/mixed email
    """
    return SAMPLE_EMAILS["attachment_only"]
