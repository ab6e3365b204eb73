"""
Unit tests for traversal state (state.py).

Tests cover:
- Separating space insertion in emit()
- Quote prefix re-emission after newlines
- Line length tracking
- Wrapping only inside quotes
- Isolated child states
- Table accumulation
"""

import pytest

from html_textify.config import Settings
from html_textify.rendering.state import RenderOptions, RenderState, TableState


class TestRenderStateEmit:
    """Tests for RenderState.emit()."""

    @pytest.mark.unit
    def test_emit_inserts_separating_space(self):
        state = RenderState()
        state.emit("Hello")
        state.emit("world")

        assert state.text() == " Hello world"
        assert state.line_length == 12
        assert state.ends_with_space is False

    @pytest.mark.unit
    def test_emit_no_double_space(self):
        """Test that fragments starting with whitespace get no extra space."""
        state = RenderState()
        state.emit("a")
        state.emit(" b")
        state.emit("c ")
        state.emit("d")

        assert state.text() == " a b c d"

    @pytest.mark.unit
    def test_emit_empty_is_noop(self):
        state = RenderState()
        state.emit("")

        assert state.text() == ""
        assert state.ends_with_space is False

    @pytest.mark.unit
    def test_emit_resets_line_length_on_newline(self):
        state = RenderState()
        state.emit("abc\nde")

        assert state.text() == " abc\nde"
        assert state.line_length == 2

    @pytest.mark.unit
    def test_emit_writes_prefix_after_newline(self):
        """Test that each new line inside a quote starts with the prefix."""
        state = RenderState()
        state.set_quote_level(2)
        state.emit("x\ny")

        assert state.text() == " x\n>> y"
        # Prefix does not count towards the line length
        assert state.line_length == 1

    @pytest.mark.unit
    def test_emit_wraps_inside_quotes(self):
        state = RenderState(options=RenderOptions(wrap_width=10))
        state.set_quote_level(1)
        state.emit("\n")
        state.emit("alpha beta gamma")

        assert state.text() == "\n> alpha beta\n> gamma"


class TestRenderStateQuotes:
    """Tests for quote level bookkeeping."""

    @pytest.mark.unit
    def test_set_quote_level_prefix(self):
        state = RenderState()
        state.set_quote_level(1)
        assert state.prefix == "> "
        state.set_quote_level(3)
        assert state.prefix == ">>> "
        state.set_quote_level(0)
        assert state.prefix == ""

    @pytest.mark.unit
    def test_wrap_is_passthrough_outside_quotes(self):
        state = RenderState()
        data = "a" * 200

        assert state.wrap(data) == [data]

    @pytest.mark.unit
    def test_wrap_breaks_inside_quotes(self):
        state = RenderState()
        state.set_quote_level(1)
        data = "a" * 70 + " " + "b" * 10

        assert state.wrap(data) == ["a" * 70 + "\n", "b" * 10]


class TestRenderStateChild:
    """Tests for isolated sub-states."""

    @pytest.mark.unit
    def test_child_is_isolated(self):
        options = RenderOptions(wrap_width=40)
        state = RenderState(options=options)
        state.set_quote_level(2)
        state.emit("parent")

        child = state.child(ends_with_space=True)
        child.emit("inner")

        assert child.text() == "inner"
        assert child.options is options
        assert child.blockquote_level == 0
        assert child.prefix == ""
        assert state.text() == " parent"
        assert child.table is not state.table


class TestRenderOptions:
    """Tests for RenderOptions."""

    @pytest.mark.unit
    def test_defaults(self):
        options = RenderOptions()
        assert options.wrap_width == 74
        assert options.uppercase_table_headers is True

    @pytest.mark.unit
    @pytest.mark.parametrize("width", [0, -1])
    def test_non_positive_wrap_width_rejected(self, width):
        """Test a wrap width below one column is refused before rendering."""
        with pytest.raises(ValueError, match="wrap_width"):
            RenderOptions(wrap_width=width)

    @pytest.mark.unit
    def test_single_column_wrap_width(self):
        state = RenderState(options=RenderOptions(wrap_width=1))
        state.set_quote_level(1)
        state.emit("\n")
        state.emit("ab cd")

        assert state.text() == "\n> ab\n> cd\n> "

    @pytest.mark.unit
    def test_from_settings(self):
        config = Settings(quote_wrap_width=60, uppercase_table_headers=False)
        options = RenderOptions.from_settings(config)

        assert options.wrap_width == 60
        assert options.uppercase_table_headers is False


class TestTableState:
    """Tests for TableState accumulation."""

    @pytest.mark.unit
    def test_rows_and_cells(self):
        table = TableState()
        table.start_row()
        table.add_header_cell("A")
        table.end_row()
        table.start_row()
        table.add_cell("1")
        table.add_cell("2")
        table.end_row()

        assert table.header == ["A"]
        assert table.body == [[], ["1", "2"]]
        assert table.row_index == 2

    @pytest.mark.unit
    def test_footer_capture(self):
        table = TableState()
        table.in_footer = True
        table.start_row()
        table.add_cell("Total")
        table.end_row()
        table.in_footer = False

        assert table.footer == ["Total"]
        assert table.body == [[]]

    @pytest.mark.unit
    def test_cell_without_row_opens_one(self):
        table = TableState()
        table.add_cell("stray")
        table.end_row()
        table.start_row()
        table.add_cell("next")

        assert table.body == [["stray"], ["next"]]

    @pytest.mark.unit
    def test_reset(self):
        table = TableState()
        table.start_row()
        table.add_cell("x")
        table.add_header_cell("h")
        table.in_footer = True
        table.reset()

        assert table.header == []
        assert table.body == []
        assert table.footer == []
        assert table.row_index == 0
        assert table.in_footer is False
