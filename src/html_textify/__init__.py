# HTML to plain-text converter

from .converter import (
    convert_source,
    convert_stream,
    from_bytes,
    from_file,
    from_html_node,
    from_reader,
    from_string,
)
from .exceptions import HtmlParseError, InputDecodingError, InputTooLargeError, TextifyError
from .models import ConversionResult
from .rendering import RenderOptions
from .version import RENDERER_VERSION, __version__

__all__ = [
    "from_html_node",
    "from_string",
    "from_bytes",
    "from_reader",
    "from_file",
    "convert_source",
    "convert_stream",
    "ConversionResult",
    "RenderOptions",
    "TextifyError",
    "InputDecodingError",
    "InputTooLargeError",
    "HtmlParseError",
    "RENDERER_VERSION",
    "__version__",
]
