"""Tests for keypad_parser module."""

import pytest

from keypad_parser import parse_code, parse_codes, parse_layout
from keypad_types import GridPosition, Key, KeypadLayout, chunk_str


class TestParseLayout:
    """Tests for the concise layout parser."""

    def test_numeric_layout(self) -> None:
        """Parse the door keypad drawing."""
        layout = parse_layout("numeric", "789|456|123|_0A")

        assert layout.name == "numeric"
        assert layout.rows == 4
        assert layout.cols == 3
        assert layout.gap == GridPosition(0, 3)
        assert layout.position(Key.SEVEN) == GridPosition(0, 0)
        assert layout.position(Key.FIVE) == GridPosition(1, 1)
        assert layout.position(Key.ACTIVATE) == GridPosition(2, 3)
        assert len(layout.keys) == 11

    def test_directional_layout(self) -> None:
        """Parse the robot keypad drawing."""
        layout = parse_layout("directional", "_^A|<v>")

        assert layout.rows == 2
        assert layout.cols == 3
        assert layout.gap == GridPosition(0, 0)
        assert layout.position(Key.UP) == GridPosition(1, 0)
        assert layout.position(Key.LEFT) == GridPosition(0, 1)
        assert set(layout.keys) == {Key.UP, Key.DOWN, Key.LEFT, Key.RIGHT, Key.ACTIVATE}

    def test_key_at(self) -> None:
        """Gap and off-grid cells hold no key."""
        layout = parse_layout("directional", "_^A|<v>")

        assert layout.key_at(GridPosition(2, 1)) is Key.RIGHT
        assert layout.key_at(GridPosition(0, 0)) is None
        assert layout.key_at(GridPosition(3, 0)) is None
        assert layout.key_at(GridPosition(1, -1)) is None

    def test_position_of_missing_key(self) -> None:
        """Looking up a key from the other keypad is an error."""
        layout = parse_layout("directional", "_^A|<v>")

        with pytest.raises(KeyError, match="not on keypad 'directional'"):
            layout.position(Key.SEVEN)

    def test_invalid_symbol_error_details(self) -> None:
        """Unknown symbols report keypad, row and column."""
        try:
            parse_layout("TestPad", "78x|_0A")
            assert False, "Should have raised ValueError"
        except ValueError as e:
            error_msg = str(e)
            assert "Invalid key symbol: 'x'" in error_msg
            assert "Keypad: 'TestPad'" in error_msg
            assert "Row 0:" in error_msg
            assert "Position: column 2" in error_msg
            assert "Valid symbols:" in error_msg

    def test_inconsistent_row_length_error_details(self) -> None:
        """Ragged drawings are rejected with details."""
        try:
            parse_layout("TestPad", "78|456|_0")
            assert False, "Should have raised ValueError"
        except ValueError as e:
            error_msg = str(e)
            assert "Inconsistent row lengths in keypad 'TestPad'" in error_msg
            assert "Expected: 2 columns" in error_msg
            assert "Row 1: 3 columns" in error_msg

    def test_missing_gap(self) -> None:
        with pytest.raises(ValueError, match="exactly one gap"):
            parse_layout("nogap", "12|3A")

    def test_two_gaps(self) -> None:
        with pytest.raises(ValueError, match="found 2"):
            parse_layout("twogaps", "_1|_A")

    def test_duplicate_key(self) -> None:
        with pytest.raises(ValueError, match="more than once: 1"):
            parse_layout("dup", "11|_A")


class TestKeypadLayoutInvariants:
    """Direct construction of layouts."""

    def test_gap_overlapping_key(self) -> None:
        """The gap can never sit under a button."""
        with pytest.raises(ValueError, match="overlaps key '1'"):
            KeypadLayout("bad", ((Key.ONE, GridPosition(0, 0)),), GridPosition(0, 0))

    def test_two_keys_one_cell(self) -> None:
        with pytest.raises(ValueError, match="same cell"):
            KeypadLayout(
                "bad",
                ((Key.ONE, GridPosition(0, 0)), (Key.TWO, GridPosition(0, 0))),
                GridPosition(1, 0),
            )


class TestParseCodes:
    """Tests for puzzle input parsing."""

    def test_single_code(self) -> None:
        code = parse_code("029A")
        assert code == (Key.ZERO, Key.TWO, Key.NINE, Key.ACTIVATE)

    def test_bare_activate(self) -> None:
        assert parse_code("A") == (Key.ACTIVATE,)

    def test_multiple_lines(self) -> None:
        """Blank lines and surrounding whitespace are ignored."""
        text = """
        029A
        980A

        179A
        """
        codes = parse_codes(text)
        assert [chunk_str(code) for code in codes] == ["029A", "980A", "179A"]

    def test_invalid_character_error_details(self) -> None:
        """The offending line and column are reported."""
        try:
            parse_codes("029A\n12B4A\n")
            assert False, "Should have raised ValueError"
        except ValueError as e:
            error_msg = str(e)
            assert "Invalid code on line 2: \"12B4A\"" in error_msg
            assert "Offending character: 'B' at column 2" in error_msg
            assert "Expected format:" in error_msg

    def test_missing_trailing_activate(self) -> None:
        with pytest.raises(ValueError, match="Missing trailing 'A'"):
            parse_code("029")

    def test_activate_in_middle(self) -> None:
        """An A anywhere but the end is malformed."""
        with pytest.raises(ValueError, match="'A' at column 1"):
            parse_code("0A9A")

    def test_directional_symbols_rejected(self) -> None:
        with pytest.raises(ValueError, match="Offending character: '<'"):
            parse_code("<A")
