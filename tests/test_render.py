"""Tests for row rendering."""

from zestien.core.buffer import Buffer
from zestien.core.cursor import Cursor
from zestien.core.render import Emphasized, Plain, Selected, plain_text, render_row, row_length

AB_HEX = "41 42 " + "~~ " * 14
AB_ASCII = "AB" + " " * 14


def tagged(line, token) -> list:
    return [text for tok, text in line if tok == token]


class TestRenderRow:
    """Tests for render_row."""

    def test_ab_scenario(self) -> None:
        buf = Buffer.load(b"AB")
        cursor = Cursor(len(buf))

        line = render_row(buf.row_of(0), 0, cursor)

        assert plain_text(line) == "00000000: " + AB_HEX + "| " + AB_ASCII
        assert line == [
            (Plain, "00000000: "),
            (Emphasized, "4"),
            (Selected, "1"),
            (Plain, " " + AB_HEX[3:] + "| "),
            (Emphasized, "A"),
            (Plain, AB_ASCII[1:]),
        ]

    def test_lower_nybble_active(self) -> None:
        buf = Buffer.load(b"AB")
        cursor = Cursor(len(buf))
        cursor.byte_index = 1
        cursor.on_lower_nybble = True

        line = render_row(buf.row_of(0), 0, cursor)

        assert tagged(line, Selected) == ["4"]
        assert tagged(line, Emphasized) == ["2", "B"]

    def test_unwritten_cursor_cell(self) -> None:
        buf = Buffer.load(b"AB")
        cursor = Cursor(len(buf))
        cursor.move_by(15)

        line = render_row(buf.row_of(0), 0, cursor)

        assert tagged(line, Emphasized) == ["~", " "]
        assert tagged(line, Selected) == ["~"]

    def test_other_rows_are_plain(self) -> None:
        buf = Buffer.load(bytes(range(40)))
        cursor = Cursor(len(buf))

        line = render_row(buf.row_of(1), 1, cursor)

        assert len(line) == 1
        assert line[0][0] == Plain
        assert plain_text(line).startswith("00000010: 10 11 12 ")

    def test_offset_is_lowercase_hex(self) -> None:
        buf = Buffer.load(bytes(300))
        cursor = Cursor(len(buf))

        line = render_row(buf.row_of(17), 17, cursor)

        assert plain_text(line).startswith("00000110: ")

    def test_line_length(self) -> None:
        buf = Buffer.load(bytes(range(256)))
        cursor = Cursor(len(buf))
        for row_index in range(buf.row_count):
            assert len(plain_text(render_row(buf.row_of(row_index), row_index, cursor))) == row_length(16)

    def test_row_length(self) -> None:
        assert row_length(16) == 76

    def test_pure(self) -> None:
        buf = Buffer.load(b"AB")
        cursor = Cursor(len(buf))
        first = render_row(buf.row_of(0), 0, cursor)
        assert render_row(buf.row_of(0), 0, cursor) == first
        assert buf.modified is False
