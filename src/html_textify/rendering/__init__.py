# Tree rendering module

from .dispatcher import content_as_string, get_attr, render_node
from .grid import render_grid
from .postprocess import normalize_output
from .state import RenderOptions, RenderState, TableState
from .wrapping import DEFAULT_WRAP_WIDTH, break_long_lines

__all__ = [
    "render_node",
    "content_as_string",
    "get_attr",
    "render_grid",
    "normalize_output",
    "RenderOptions",
    "RenderState",
    "TableState",
    "DEFAULT_WRAP_WIDTH",
    "break_long_lines",
]
