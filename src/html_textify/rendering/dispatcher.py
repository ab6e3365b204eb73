"""
Tree walk and per-element rendering rules.

The walk is depth-first over a BeautifulSoup tree. Text nodes are collapsed
and emitted; element nodes are routed through ELEMENT_HANDLERS by tag name,
falling back to a plain recursion into their children. Table cells are
rendered through render_node() itself, so tables nested in cells are fully
resolved before the enclosing grid is drawn.
"""

import re
from typing import Callable, Dict, Optional

from bs4.element import NavigableString, PageElement, PreformattedString, Tag

from .grid import render_grid
from .postprocess import normalize_output
from .state import RenderOptions, RenderState

SPACING_RE = re.compile(r"[ \r\n\t]+")

Handler = Callable[[Tag, RenderState], None]


def render_node(node: PageElement, options: Optional[RenderOptions] = None) -> str:
    """
    Render a parsed node and everything below it as plain text.

    Args:
        node: Document, element or text node
        options: Rendering options (defaults to RenderOptions())

    Returns:
        Normalized text rendering
    """
    state = RenderState(options=options or RenderOptions())
    traverse(node, state)
    return normalize_output(state.text())


def traverse(node: PageElement, state: RenderState) -> None:
    if isinstance(node, Tag):
        handle_element(node, state)
    elif isinstance(node, NavigableString) and not isinstance(node, PreformattedString):
        state.emit(SPACING_RE.sub(" ", str(node)).strip(" "))
    # Comments, doctypes and CDATA carry no children and render nothing


def traverse_children(node: Tag, state: RenderState) -> None:
    for child in node.children:
        traverse(child, state)


def handle_element(node: Tag, state: RenderState) -> None:
    state.just_closed_div = False
    handler = ELEMENT_HANDLERS.get(node.name, traverse_children)
    handler(node, state)


def get_attr(node: Tag, name: str) -> str:
    """Return an attribute value, or an empty string when it is absent."""
    value = node.get(name)
    if value is None:
        return ""
    if isinstance(value, list):
        # Multi-valued attributes such as class
        return " ".join(value)
    return value


def normalize_href(link: str) -> str:
    link = link.strip()
    return link.removeprefix("mailto:")


def content_as_string(node: Tag, options: Optional[RenderOptions] = None) -> str:
    """
    Flatten a table cell into a single string.

    Every child is rendered on its own through render_node(), and the results
    are joined with newlines.
    """
    return "\n".join(render_node(child, options) for child in node.children)


def _line_break(node: Tag, state: RenderState) -> None:
    state.emit("\n")


def _heading(node: Tag, state: RenderState) -> None:
    sub_state = state.child()
    traverse_children(node, sub_state)
    text = sub_state.text()

    # The measured text carries the separating space in front of it
    divider_len = max([0] + [len(line) - 1 for line in text.split("\n")])
    divider = ("*" if node.name == "h1" else "-") * divider_len

    if node.name == "h3":
        state.emit("\n\n" + text + "\n" + divider + "\n\n")
    else:
        state.emit("\n\n" + divider + "\n" + text + "\n" + divider + "\n\n")


def _blockquote(node: Tag, state: RenderState) -> None:
    state.set_quote_level(state.blockquote_level + 1)
    state.emit("\n")
    if state.blockquote_level == 1:
        state.emit("\n")
    traverse_children(node, state)
    state.set_quote_level(state.blockquote_level - 1)
    state.emit("\n\n")


def _div(node: Tag, state: RenderState) -> None:
    if state.line_length > 0:
        state.emit("\n")
    traverse_children(node, state)
    if not state.just_closed_div:
        state.emit("\n")
    state.just_closed_div = True


def _list_item(node: Tag, state: RenderState) -> None:
    state.emit("* ")
    traverse_children(node, state)
    state.emit("\n")


def _emphasis(node: Tag, state: RenderState) -> None:
    sub_state = state.child(ends_with_space=True)
    traverse_children(node, sub_state)
    state.emit("*" + sub_state.text() + "*")


def _link(node: Tag, state: RenderState) -> None:
    contents = node.contents
    # If an image is the only child, its alt text becomes the link text
    if len(contents) == 1 and isinstance(contents[0], Tag) and contents[0].name == "img":
        alt_text = get_attr(contents[0], "alt")
        if alt_text:
            state.emit(alt_text)
    else:
        traverse_children(node, state)

    href = normalize_href(get_attr(node, "href"))
    if href:
        state.emit("( " + href + " )")


def _paragraph(node: Tag, state: RenderState) -> None:
    state.emit("\n\n")
    traverse_children(node, state)
    state.emit("\n\n")


def _table(node: Tag, state: RenderState) -> None:
    state.emit("\n\n")
    table = state.table
    table.reset()

    # Rows and cells fill the table state
    traverse_children(node, state)

    grid = render_grid(
        table.header,
        table.body,
        table.footer,
        uppercase_headers=state.options.uppercase_table_headers,
    )
    state.emit(grid)
    state.emit("\n\n")


def _table_footer(node: Tag, state: RenderState) -> None:
    state.table.in_footer = True
    traverse_children(node, state)
    state.table.in_footer = False


def _table_row(node: Tag, state: RenderState) -> None:
    state.table.start_row()
    traverse_children(node, state)
    state.table.end_row()


def _table_header_cell(node: Tag, state: RenderState) -> None:
    state.table.add_header_cell(content_as_string(node, state.options))


def _table_data_cell(node: Tag, state: RenderState) -> None:
    state.table.add_cell(content_as_string(node, state.options))


def _skip(node: Tag, state: RenderState) -> None:
    """Ignore the subtree."""


ELEMENT_HANDLERS: Dict[str, Handler] = {
    "br": _line_break,
    "h1": _heading,
    "h2": _heading,
    "h3": _heading,
    "blockquote": _blockquote,
    "div": _div,
    "li": _list_item,
    "b": _emphasis,
    "strong": _emphasis,
    "a": _link,
    "p": _paragraph,
    "ul": _paragraph,
    "table": _table,
    "tfoot": _table_footer,
    "tr": _table_row,
    "th": _table_header_cell,
    "td": _table_data_cell,
    "style": _skip,
    "script": _skip,
    "head": _skip,
}
