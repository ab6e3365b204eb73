"""
Version constants for the HTML to text converter.

The renderer version is recorded in every conversion result so that stored
text digests can be traced back to the rendering rules that produced them.
"""

__version__ = "1.0.0"

# Update when the rendering rules change output for identical input
RENDERER_VERSION = "textify-1.0.0"
