"""
Mutable traversal state for one rendering call.

RenderState owns the output buffer and the text-flow bookkeeping (spacing,
line length, quote prefix). TableState accumulates the cells of the table
currently being traversed until the grid is drawn.
"""

import io
from dataclasses import dataclass, field
from typing import List

from ..config import Settings, settings
from .wrapping import DEFAULT_WRAP_WIDTH, break_long_lines


@dataclass(frozen=True)
class RenderOptions:
    """
    Knobs shared by a rendering call and every nested cell render.

    Attributes:
        wrap_width: Column limit for text inside quoted blocks
        uppercase_table_headers: Upper-case header and footer cells of grids
    """

    wrap_width: int = DEFAULT_WRAP_WIDTH
    uppercase_table_headers: bool = True

    def __post_init__(self) -> None:
        if self.wrap_width < 1:
            raise ValueError(f"wrap_width must be at least 1, got {self.wrap_width}")

    @classmethod
    def from_settings(cls, config: Settings = settings) -> "RenderOptions":
        return cls(
            wrap_width=config.quote_wrap_width,
            uppercase_table_headers=config.uppercase_table_headers,
        )


@dataclass
class TableState:
    """
    Cells collected while traversing one table element.

    Invariant: ``row_index`` points at a row already present in ``body``
    whenever a body cell is added.
    """

    header: List[str] = field(default_factory=list)
    body: List[List[str]] = field(default_factory=list)
    footer: List[str] = field(default_factory=list)
    row_index: int = 0
    in_footer: bool = False

    def reset(self) -> None:
        self.header = []
        self.body = []
        self.footer = []
        self.row_index = 0
        self.in_footer = False

    def start_row(self) -> None:
        self.body.append([])
        self.row_index = len(self.body) - 1

    def end_row(self) -> None:
        self.row_index += 1

    def add_header_cell(self, text: str) -> None:
        self.header.append(text)

    def add_cell(self, text: str) -> None:
        """Add a data cell to the footer or to the row being filled."""
        if self.in_footer:
            self.footer.append(text)
            return
        # Lenient parsers can hand us cells outside of any row
        if self.row_index >= len(self.body):
            self.start_row()
        self.body[self.row_index].append(text)


@dataclass
class RenderState:
    """
    Per-call rendering context.

    A fresh instance is created for each rendering call and for isolated
    measurement passes (headings, emphasis); its buffer is then copied into
    the parent's output.
    """

    options: RenderOptions = field(default_factory=RenderOptions)
    buffer: io.StringIO = field(default_factory=io.StringIO)
    prefix: str = ""
    blockquote_level: int = 0
    line_length: int = 0
    ends_with_space: bool = False
    just_closed_div: bool = False
    table: TableState = field(default_factory=TableState)

    def child(self, ends_with_space: bool = False) -> "RenderState":
        """Create an isolated sub-state sharing only the options."""
        return RenderState(options=self.options, ends_with_space=ends_with_space)

    def text(self) -> str:
        return self.buffer.getvalue()

    def set_quote_level(self, level: int) -> None:
        self.blockquote_level = level
        self.prefix = ">" * level
        if level > 0:
            self.prefix += " "

    def wrap(self, data: str) -> List[str]:
        # Only break lines inside blockquotes
        if self.blockquote_level == 0:
            return [data]
        return break_long_lines(data, self.line_length, self.options.wrap_width)

    def emit(self, data: str) -> None:
        """
        Append a fragment to the buffer.

        A separating space is written unless the fragment starts with
        whitespace or the buffer already ends with it. Each newline is
        followed by the current quote prefix, which does not count towards
        the line length.
        """
        if not data:
            return
        for line in self.wrap(data):
            if not line[0].isspace() and not self.ends_with_space:
                self.buffer.write(" ")
                self.line_length += 1
            self.ends_with_space = line[-1].isspace()

            segments = line.split("\n")
            for n, segment in enumerate(segments):
                if n > 0:
                    self.buffer.write("\n")
                    self.line_length = 0
                    if self.prefix:
                        self.buffer.write(self.prefix)
                self.buffer.write(segment)
                self.line_length += len(segment)
